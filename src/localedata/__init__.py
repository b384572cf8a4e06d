"""localedata - memoizing loader for on-disk localization data.

Resolves symbolic resource identifiers (locale + category) to YAML or
plain-text files, parses them, merges user overrides, and caches the result
so repeated lookups return the same object.

Public API:
    Loader - Resource lookups (get_yaml_resource, get_locale_resource, get_plain_resource)
    LoaderConfig - Resource roots for a Loader
    ResourceGroup - Symbolic top-level resource directories
    convert_locale - Canonical locale tag used in resource paths

Exceptions:
    LocaleDataError - Base exception class
    ResourceNotFoundError - Missing base resource file

Submodules:
    localedata.resources - Loader stack (paths, reader, parser, cache, config)
    localedata.locale_utils - Locale canonicalization helpers
"""

from .diagnostics import LocaleDataError, ResourceNotFoundError
from .enums import ResourceGroup
from .locale_utils import convert_locale
from .resources import Loader, LoaderConfig

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localedata")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Loader",
    "LoaderConfig",
    "LocaleDataError",
    "ResourceGroup",
    "ResourceNotFoundError",
    "__version__",
    "convert_locale",
]
