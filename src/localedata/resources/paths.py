"""Resource path construction.

Turns a sequence of path segments into the relative path string that both
locates a resource file and keys the loader cache.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from enum import StrEnum

from localedata.constants import YAML_EXTENSION
from localedata.resources.types import PathSegment, ResourcePath

__all__ = ["build_resource_path", "segment_text"]


def segment_text(segment: PathSegment | object) -> str:
    """Return the text form of a single path segment.

    StrEnum members give their value, strings give themselves, and any other
    object falls back to ``str()``.

    Example:
        >>> from localedata.enums import ResourceGroup
        >>> segment_text(ResourceGroup.LOCALES)
        'locales'
        >>> segment_text("numbers")
        'numbers'
    """
    if isinstance(segment, StrEnum):
        return segment.value
    if isinstance(segment, str):
        return segment
    return str(segment)


def build_resource_path(
    *segments: PathSegment, extension: str = YAML_EXTENSION
) -> ResourcePath:
    """Join path segments with '/' and append the resource extension.

    Segment order is preserved. Nothing is deduplicated or normalized, so
    ``("foo", "bar")`` and ``(Group.FOO, "bar")`` resolve to the same path
    whenever ``Group.FOO == "foo"``.

    Args:
        *segments: Path components, symbolic or textual
        extension: Suffix appended to the joined path (default: '.yml')

    Returns:
        Relative resource path

    Raises:
        ValueError: If no segments are given

    Example:
        >>> build_resource_path("locales", "de", "numbers")
        'locales/de/numbers.yml'
    """
    if not segments:
        msg = "At least one path segment is required"
        raise ValueError(msg)
    return "/".join(segment_text(segment) for segment in segments) + extension
