"""Resource loading package.

Provides the full resource stack: type aliases, path construction, file
reading, YAML parsing, memoization, configuration, and the Loader.

Submodules:
    types   - PEP 695 type aliases (PathSegment, ResourcePath, LocaleCode, ParsedValue)
    paths   - build_resource_path, segment_text
    reader  - ResourceReader protocol, FileResourceReader
    parser  - parse_yaml, deep_symbolize_keys
    cache   - ResourceCache (per-path single-flight memoization)
    config  - LoaderConfig
    loader  - Loader

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localedata.resources.cache import ResourceCache
from localedata.resources.config import LoaderConfig
from localedata.resources.loader import Loader
from localedata.resources.parser import deep_symbolize_keys, parse_yaml
from localedata.resources.paths import build_resource_path, segment_text
from localedata.resources.reader import FileResourceReader, ResourceReader
from localedata.resources.types import LocaleCode, ParsedValue, PathSegment, ResourcePath

__all__ = [
    # Main loader
    "Loader",
    "LoaderConfig",
    "ResourceCache",
    # Reader protocol and implementation
    "ResourceReader",
    "FileResourceReader",
    # Collaborators
    "build_resource_path",
    "segment_text",
    "parse_yaml",
    "deep_symbolize_keys",
    # Type aliases for user code type annotations
    "LocaleCode",
    "ParsedValue",
    "PathSegment",
    "ResourcePath",
]
