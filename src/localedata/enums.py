"""Enumerations for localedata type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, which makes them usable directly
as symbolic path segments.

Python 3.13+.
"""

from enum import StrEnum

from localedata.constants import LOCALES_DIR


class ResourceGroup(StrEnum):
    """Top-level resource directories.

    StrEnum provides automatic string conversion: str(ResourceGroup.LOCALES) == "locales"
    """

    LOCALES = LOCALES_DIR
    """Per-locale resources: locales/<locale>/<name>.yml"""

    SHARED = "shared"
    """Locale-independent resources: shared/<name>.yml"""


class ResourceKind(StrEnum):
    """Kind of resource a lookup produces.

    StrEnum provides automatic string conversion: str(ResourceKind.YAML) == "yaml"
    """

    YAML = "yaml"
    """Structured resource, parsed and key-canonicalized."""

    PLAIN = "plain"
    """Raw text resource, returned verbatim."""


__all__ = [
    "ResourceGroup",
    "ResourceKind",
]
