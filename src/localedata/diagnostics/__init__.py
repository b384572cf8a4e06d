"""Error types for localedata.

Exports:
    LocaleDataError: Base exception class
    ResourceNotFoundError: Missing base resource file

Python 3.13+.
"""

from .errors import LocaleDataError, ResourceNotFoundError

__all__ = ["LocaleDataError", "ResourceNotFoundError"]
