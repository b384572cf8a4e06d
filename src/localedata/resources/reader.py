"""Filesystem access for resource files.

Provides the protocol the Loader reads through and a disk implementation
bound to a single root directory with path-traversal prevention.

Components:
    ResourceReader - Protocol for existence checks, text reads, and listings (structural typing)
    FileResourceReader - Disk-based reader confined to one root directory

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from localedata.constants import RESOURCE_ENCODING
from localedata.resources.types import ResourcePath

__all__ = ["FileResourceReader", "ResourceReader"]


class ResourceReader(Protocol):
    """Protocol for reading resource files relative to a root.

    This is a Protocol (structural typing) rather than ABC so tests and
    embedders can supply in-memory readers without subclassing.

    Example:
        >>> class DictReader:
        ...     def __init__(self, files: dict[str, str]) -> None:
        ...         self.files = files
        ...     def exists(self, path: str) -> bool:
        ...         return path in self.files
        ...     def read(self, path: str) -> str:
        ...         return self.files[path]
        ...     def list_dir(self, path: str) -> tuple[str, ...]:
        ...         return ()
        ...     def list_dirs(self, path: str) -> tuple[str, ...]:
        ...         return ()
    """

    def exists(self, path: ResourcePath) -> bool:
        """Return True if a regular file exists at the relative path."""

    def read(self, path: ResourcePath) -> str:
        """Return the text content of the file at the relative path.

        Raises:
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
        """

    def list_dir(self, path: ResourcePath) -> tuple[str, ...]:
        """Return the sorted entry names of a directory, or () if it is absent."""

    def list_dirs(self, path: ResourcePath) -> tuple[str, ...]:
        """Return the sorted subdirectory names of a directory, or () if it is absent."""


@dataclass(frozen=True, slots=True)
class FileResourceReader:
    """File system reader confined to a root directory.

    Security:
        Relative paths containing '..' or absolute paths are rejected.
        All resolved paths are validated against the root directory.

    Example:
        >>> reader = FileResourceReader("/srv/resources")
        >>> reader.exists("locales/de/numbers.yml")
        True

    Attributes:
        root_dir: Directory every relative path is resolved against
    """

    root_dir: str | Path
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache the resolved root directory."""
        object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    @property
    def root(self) -> Path:
        """Resolved root directory."""
        return self._resolved_root

    @staticmethod
    def _validate_path(path: ResourcePath) -> None:
        """Validate a relative resource path for traversal attacks.

        Raises:
            ValueError: If path is empty, absolute, or contains '..'
        """
        if not path:
            msg = "Resource path cannot be empty"
            raise ValueError(msg)
        if Path(path).is_absolute() or path.startswith(("/", "\\")):
            msg = f"Absolute paths not allowed in resource path: '{path}'"
            raise ValueError(msg)
        if ".." in Path(path).parts:
            msg = f"Path traversal sequences not allowed in resource path: '{path}'"
            raise ValueError(msg)

    def full_path(self, path: ResourcePath) -> Path:
        """Return the absolute path for a relative resource path.

        Raises:
            ValueError: If the path is unsafe or resolves outside the root
        """
        self._validate_path(path)
        full = (self._resolved_root / path).resolve()
        try:
            full.relative_to(self._resolved_root)
        except ValueError:
            msg = f"Path traversal detected: '{path}' escapes root directory"
            raise ValueError(msg) from None
        return full

    def exists(self, path: ResourcePath) -> bool:
        """Return True if a regular file exists at the relative path."""
        return self.full_path(path).is_file()

    def read(self, path: ResourcePath) -> str:
        """Read a resource file as UTF-8 text.

        Raises:
            ValueError: If the path is unsafe
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
        """
        return self.full_path(path).read_text(encoding=RESOURCE_ENCODING)

    def list_dir(self, path: ResourcePath) -> tuple[str, ...]:
        """Return sorted entry names of a directory under the root.

        A missing directory yields an empty tuple.
        """
        directory = self.full_path(path)
        if not directory.is_dir():
            return ()
        return tuple(sorted(entry.name for entry in directory.iterdir()))

    def list_dirs(self, path: ResourcePath) -> tuple[str, ...]:
        """Return sorted subdirectory names under the root.

        Files are skipped. A missing directory yields an empty tuple.
        """
        directory = self.full_path(path)
        if not directory.is_dir():
            return ()
        return tuple(sorted(entry.name for entry in directory.iterdir() if entry.is_dir()))
