"""localedata exception hierarchy.

A single base class lets callers catch every library error with one
``except`` clause while specific subclasses carry structured context.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["LocaleDataError", "ResourceNotFoundError"]


class LocaleDataError(Exception):
    """Base exception for all localedata errors."""


class ResourceNotFoundError(LocaleDataError):
    """Primary resource file is missing from the resources root.

    Raised only for the base resource of a lookup. A missing override file
    in the custom root is never an error.

    Attributes:
        path: Resolved path of the resource, relative to the resources root
    """

    def __init__(self, path: str) -> None:
        """Initialize ResourceNotFoundError.

        Args:
            path: Resolved relative path that was not found
        """
        super().__init__(f"Resource '{path}' not found.")
        self.path = path
