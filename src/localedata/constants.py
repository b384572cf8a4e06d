"""Shared constants for localedata.

Centralizes the on-disk layout conventions used by the resource loader so
that paths are built from a single source of truth.

Constants are grouped by domain:
- Resource layout: directory names and file extensions
- Encoding: text encoding for every resource read

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Resource layout
    "YAML_EXTENSION",
    "LOCALES_DIR",
    "CUSTOM_RESOURCES_SUBDIR",
    # Encoding
    "RESOURCE_ENCODING",
]

# ============================================================================
# RESOURCE LAYOUT
# ============================================================================

# Extension appended to every structured resource path.
# Plain resources carry their own extension in the caller-supplied path.
YAML_EXTENSION = ".yml"

# Top-level directory holding per-locale resources: locales/<locale>/<name>.yml
LOCALES_DIR = "locales"

# Conventional override directory inside a resources root. Only used by
# LoaderConfig.with_custom_subdir(); a custom root can live anywhere.
CUSTOM_RESOURCES_SUBDIR = "custom"

# ============================================================================
# ENCODING
# ============================================================================

RESOURCE_ENCODING = "utf-8"
