"""Type aliases for the resources domain.

Provides semantic type aliases used throughout the resources package
and by user code when annotating Loader call sites.

Python 3.13+.
"""

from datetime import date, datetime
from enum import StrEnum

__all__ = [
    "LocaleCode",
    "ParsedValue",
    "PathSegment",
    "ResourcePath",
]

type PathSegment = str | StrEnum
"""One component of a resource path: plain text or a symbolic StrEnum member."""

type ResourcePath = str
"""'/'-joined path relative to a resources root (e.g. 'locales/de/numbers.yml')."""

type LocaleCode = str
"""Canonical locale tag (e.g. 'en', 'pt-BR', 'zh-Hant')."""

type ParsedValue = (
    dict[object, "ParsedValue"]
    | list["ParsedValue"]
    | str
    | int
    | float
    | bool
    | date
    | datetime
    | None
)
"""Result of parsing a structured resource. Mapping keys are canonicalized."""
