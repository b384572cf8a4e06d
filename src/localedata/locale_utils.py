"""Locale utilities for resource path canonicalization.

Centralizes locale format normalization used by the resource loader.
Every locale reaching a resource path goes through convert_locale() first,
so differently spelled requests for one locale share a single cache entry.

Python 3.13+.
"""

from __future__ import annotations

import functools

from babel.core import Locale, get_locale_identifier, parse_locale

__all__ = [
    "LOCALE_ALIASES",
    "clear_locale_cache",
    "convert_locale",
    "get_babel_locale",
    "normalize_locale",
]

# Legacy and platform-specific spellings mapped to the tag used on disk.
# Keys are lowercase with hyphens; lookups normalize input to that form.
LOCALE_ALIASES: dict[str, str] = {
    "zh-cn": "zh",
    "zh-tw": "zh-Hant",
    "en-gb": "en-GB",
    "msa": "ms",
    "iw": "he",
    "in": "id",
    "no": "nb",
    "tl": "fil",
}


def normalize_locale(locale_code: str) -> str:
    """Convert a locale code to lowercase POSIX form for comparisons.

    BCP-47 is case-insensitive, so "en-US" and "EN_us" normalize to the
    same string.

    Example:
        >>> normalize_locale("en-US")
        'en_us'
        >>> normalize_locale("zh-Hans-CN")
        'zh_hans_cn'
    """
    return locale_code.replace("-", "_").lower()


@functools.cache
def convert_locale(locale: str) -> str:
    """Convert a locale spelling to the canonical tag used in resource paths.

    Resolution order:
    1. Alias table (``zh-tw`` -> ``zh-Hant``, ``iw`` -> ``he``)
    2. Babel parsing for canonical casing (``pt_br`` -> ``pt-BR``,
       ``ZH-HANT`` -> ``zh-Hant``)
    3. Unparseable input is returned with '_' replaced by '-'

    Total for any string input. Results are memoized per process; the
    function is pure, so sharing the memo between Loaders is safe.

    Args:
        locale: Locale spelling (BCP-47 or POSIX separators, any case)

    Returns:
        Canonical hyphenated locale tag

    Example:
        >>> convert_locale("zh-tw")
        'zh-Hant'
        >>> convert_locale("de")
        'de'
    """
    hyphenated = locale.replace("_", "-")
    alias = LOCALE_ALIASES.get(hyphenated.lower())
    if alias is not None:
        return alias
    try:
        parts = parse_locale(hyphenated, sep="-")
    except ValueError:
        return hyphenated
    return get_locale_identifier(parts, sep="-")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("pt-BR")
        >>> locale.territory
        'BR'
    """
    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the memoized locale conversions and Babel Locale objects."""
    convert_locale.cache_clear()
    get_babel_locale.cache_clear()
