"""Resource Loader: resolution, parsing, override merge, and memoization.

The Loader is the single entry point for reading locale data from disk.
Each lookup resolves its path segments to a relative path, and that path is
both the file location and the cache key. The first successful lookup of a
path stores its value; every later lookup of the same path returns that
exact object without touching the filesystem.

Lookup kinds:
    get_yaml_resource   - structured resource, keys canonicalized, overrides merged
    get_locale_resource - structured resource under locales/<canonical-locale>/
    get_plain_resource  - raw text, no parsing, no overrides

Override merge:
    When a custom resources root is configured and holds a file at the same
    relative path as a structured resource, its top-level keys are merged
    over the base value (shallow merge). A missing override is not an error.

Thread Safety:
    The cache guarantees at most one load per path. Concurrent first lookups
    of the same path wait for the single in-flight load and share its result.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

from localedata.constants import YAML_EXTENSION
from localedata.diagnostics import ResourceNotFoundError
from localedata.enums import ResourceGroup, ResourceKind
from localedata.locale_utils import convert_locale, get_babel_locale
from localedata.resources.cache import ResourceCache
from localedata.resources.config import LoaderConfig
from localedata.resources.parser import parse_yaml
from localedata.resources.paths import build_resource_path
from localedata.resources.reader import FileResourceReader, ResourceReader

if TYPE_CHECKING:
    from localedata.resources.types import LocaleCode, ParsedValue, PathSegment, ResourcePath

__all__ = ["Loader"]

logger = logging.getLogger(__name__)


class Loader:
    """Memoizing loader for YAML and plain-text locale resources.

    Each Loader owns its own cache. Two Loaders never share entries, even
    when configured with the same roots.

    Example:
        >>> loader = Loader(LoaderConfig.with_custom_subdir("resources"))
        >>> numbers = loader.get_locale_resource("pt_br", "numbers")
        >>> numbers is loader.get_locale_resource("pt-BR", "numbers")
        True

    Example - Readers supplied directly (separate roots, test doubles):
        >>> from localedata.resources.reader import FileResourceReader
        >>> loader = Loader(
        ...     reader=FileResourceReader("resources"),
        ...     custom_reader=FileResourceReader("/etc/myapp/overrides"),
        ... )
        >>> loader.get_yaml_resource("shared", "units")
        {'km': 1000}

    Attributes:
        config: Configured resource roots (None when readers were injected)
        cache: This Loader's resource cache
    """

    __slots__ = ("_cache", "_config", "_custom_reader", "_reader")

    def __init__(
        self,
        config: LoaderConfig | str | Path | None = None,
        *,
        reader: ResourceReader | None = None,
        custom_reader: ResourceReader | None = None,
    ) -> None:
        """Initialize Loader.

        Args:
            config: LoaderConfig, or a resources directory (no overrides)
            reader: Reader for base resources; replaces the one built from config
            custom_reader: Reader for override resources; replaces the one
                built from config

        Raises:
            ValueError: If neither config nor reader is given
        """
        if isinstance(config, (str, Path)):
            config = LoaderConfig(config)
        if reader is None:
            if config is None:
                msg = "Loader requires a LoaderConfig or a ResourceReader"
                raise ValueError(msg)
            reader = FileResourceReader(config.resources_dir)
        if custom_reader is None and config is not None:
            custom_dir = config.custom_resources_dir
            if custom_dir is not None:
                custom_reader = FileResourceReader(custom_dir)

        self._config = config
        self._reader: ResourceReader = reader
        self._custom_reader: ResourceReader | None = custom_reader
        self._cache = ResourceCache()

    @property
    def config(self) -> LoaderConfig | None:
        """Configured resource roots, or None when readers were injected."""
        return self._config

    @property
    def cache(self) -> ResourceCache:
        """This Loader's resource cache."""
        return self._cache

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"Loader(reader={self._reader!r}, "
            f"custom_reader={self._custom_reader!r}, "
            f"cached={len(self._cache)})"
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_yaml_resource(self, *segments: PathSegment) -> ParsedValue:
        """Load a structured resource, merged with its override if present.

        Args:
            *segments: Path components; joined with '/' and suffixed '.yml'

        Returns:
            Parsed value with canonical keys. The same object is returned for
            every call that resolves to the same path.

        Raises:
            ResourceNotFoundError: If the base resource file does not exist
            yaml.YAMLError: If the base or override file fails to parse
            ValueError: If no segments are given or the path is unsafe

        Example:
            >>> loader.get_yaml_resource(ResourceGroup.SHARED, "currencies")
        """
        path = build_resource_path(*segments)
        return self._get_resource(path, ResourceKind.YAML)

    def get_locale_resource(self, locale: str, *segments: PathSegment) -> ParsedValue:
        """Load a structured resource for a locale.

        The locale is canonicalized first, so "zh-tw" and "ZH_TW" resolve to
        the same path (locales/zh-Hant/...) and share one cache entry.

        Args:
            locale: Locale spelling (any case, '-' or '_' separators)
            *segments: Resource path components below the locale directory

        Returns:
            Parsed value, as for get_yaml_resource()

        Raises:
            ResourceNotFoundError: If the base resource file does not exist
        """
        return self.get_yaml_resource(ResourceGroup.LOCALES, convert_locale(locale), *segments)

    def get_plain_resource(self, path: ResourcePath) -> str:
        """Load a text resource verbatim.

        The path is used as given: no segment joining, no extension, no
        parsing, and no override merge.

        Args:
            path: Relative path including its extension (e.g. 'shared/rules.txt')

        Returns:
            File content. The same object is returned on every call.

        Raises:
            ResourceNotFoundError: If the file does not exist
        """
        return self._get_resource(path, ResourceKind.PLAIN)

    def _get_resource(self, path: ResourcePath, kind: ResourceKind) -> ParsedValue:
        return self._cache.get_or_load(path, lambda: self._load_resource(path, kind))

    # ------------------------------------------------------------------
    # Load pipeline (cache misses only)
    # ------------------------------------------------------------------

    def _load_resource(self, path: ResourcePath, kind: ResourceKind) -> ParsedValue:
        """Load one resource from disk. Raises before anything is cached."""
        match kind:
            case ResourceKind.PLAIN:
                return self._read_base(path)
            case ResourceKind.YAML:
                return self._load_yaml_resource(path)

    def _read_base(self, path: ResourcePath) -> str:
        if not self._reader.exists(path):
            raise ResourceNotFoundError(path)
        logger.debug("Loading resource: %s", path)
        return self._reader.read(path)

    def _read_custom(self, path: ResourcePath) -> str | None:
        """Return override text for a path, or None when there is none."""
        if self._custom_reader is None or not self._custom_reader.exists(path):
            return None
        logger.debug("Loading custom resource: %s", path)
        return self._custom_reader.read(path)

    def _load_yaml_resource(self, path: ResourcePath) -> ParsedValue:
        result = parse_yaml(self._read_base(path))

        custom_text = self._read_custom(path)
        if custom_text is None:
            return result
        return self._merge_custom(path, result, parse_yaml(custom_text))

    @staticmethod
    def _merge_custom(
        path: ResourcePath, base: ParsedValue, custom: ParsedValue
    ) -> ParsedValue:
        """Shallow-merge an override over a base value.

        Top-level custom keys replace or extend base keys; nested mappings
        are replaced whole, not merged.
        """
        if not isinstance(base, Mapping) or not isinstance(custom, Mapping):
            logger.warning(
                "Ignoring custom resource %s: expected a mapping over a mapping, got %s over %s",
                path,
                type(custom).__name__,
                type(base).__name__,
            )
            return base
        logger.debug("Merged custom resource: %s (%d keys)", path, len(custom))
        return {**base, **custom}

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def resource_exists(self, *segments: PathSegment) -> bool:
        """Check whether the base file for a structured resource exists."""
        return self._reader.exists(build_resource_path(*segments))

    def locale_resource_exists(self, locale: str, *segments: PathSegment) -> bool:
        """Check whether the base file for a locale resource exists."""
        return self.resource_exists(ResourceGroup.LOCALES, convert_locale(locale), *segments)

    def resource_loaded(self, *segments: PathSegment) -> bool:
        """Check whether a structured resource is already cached."""
        return build_resource_path(*segments) in self._cache

    def locale_resource_loaded(self, locale: str, *segments: PathSegment) -> bool:
        """Check whether a locale resource is already cached."""
        return self.resource_loaded(ResourceGroup.LOCALES, convert_locale(locale), *segments)

    def supported_locales(self, *, validate: bool = False) -> tuple[LocaleCode, ...]:
        """List locales that have a directory under locales/.

        Only subdirectories count; files such as ``locales/LICENSE`` are
        ignored.

        Args:
            validate: Only return locales Babel recognizes (default: False)

        Returns:
            Sorted tuple of locale directory names, exactly as named on disk
        """
        names = self._reader.list_dirs(ResourceGroup.LOCALES.value)
        if not validate:
            return names
        return tuple(name for name in names if _is_known_locale(name))

    def resource_types_for_locale(self, locale: str) -> tuple[str, ...]:
        """List the structured resources available for a locale.

        Returns:
            Sorted resource names without extension (e.g. ('numbers', 'units'))
        """
        return self._resource_names(convert_locale(locale))

    def _resource_names(self, locale_dir: str) -> tuple[str, ...]:
        """List YAML resource names in one directory under locales/, used verbatim."""
        directory = f"{ResourceGroup.LOCALES.value}/{locale_dir}"
        return tuple(
            name.removesuffix(YAML_EXTENSION)
            for name in self._reader.list_dir(directory)
            if name.endswith(YAML_EXTENSION)
        )

    # ------------------------------------------------------------------
    # Preloading
    # ------------------------------------------------------------------

    def preload_resources_for_locale(self, locale: str, *resource_types: str) -> None:
        """Load locale resources into the cache ahead of use.

        Args:
            locale: Locale spelling
            *resource_types: Resource names to load; all available when empty

        Raises:
            ResourceNotFoundError: If a named resource does not exist
        """
        names = resource_types or self.resource_types_for_locale(locale)
        for name in names:
            self.get_locale_resource(locale, name)

    def preload_all_resources(self) -> None:
        """Load every resource of every supported locale into the cache.

        Directory names are used as found on disk. A directory whose name
        is an alias spelling (``locales/no``) is loaded from that directory
        rather than from the directory its canonical tag points at.
        """
        for locale_dir in self.supported_locales():
            for name in self._resource_names(locale_dir):
                self.get_yaml_resource(ResourceGroup.LOCALES, locale_dir, name)
        logger.info("Preloaded %d resources", len(self._cache))

    def get_cache_stats(self) -> dict[str, int]:
        """Get cache statistics (size, hits, misses, loads)."""
        return self._cache.get_stats()


def _is_known_locale(locale: LocaleCode) -> bool:
    try:
        get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        return False
    return True
