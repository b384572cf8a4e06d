"""YAML parsing with key canonicalization.

Resource files spell mapping keys either plainly (``numbers:``) or in the
symbol form inherited from Ruby data (``:numbers:``). Both spellings are
canonicalized to the same plain string key so lookups never depend on how a
file was written.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import yaml

from localedata.resources.types import ParsedValue

__all__ = ["deep_symbolize_keys", "parse_yaml", "symbolize_key"]

logger = logging.getLogger(__name__)


def symbolize_key(key: object) -> object:
    """Return the canonical form of a mapping key.

    String keys lose one leading ':' (``":a"`` becomes ``"a"``). Other key
    types (ints, booleans, dates) are returned unchanged.
    """
    if isinstance(key, str) and key.startswith(":"):
        return key[1:]
    return key


def deep_symbolize_keys(value: ParsedValue) -> ParsedValue:
    """Recursively canonicalize every mapping key in a parsed value.

    Mappings are rebuilt with canonical keys, sequences are rebuilt with
    their elements processed, and scalars pass through untouched.

    When two keys of one mapping canonicalize to the same key (``a`` and
    ``:a``), the later one in document order wins and a warning is logged.

    Args:
        value: Parsed YAML value

    Returns:
        New value of the same shape with canonical keys at every depth
    """
    if isinstance(value, Mapping):
        result: dict[object, ParsedValue] = {}
        for key, item in value.items():
            canonical = symbolize_key(key)
            if canonical in result:
                logger.warning(
                    "Duplicate key %r after canonicalization (from %r); keeping the later value",
                    canonical,
                    key,
                )
            result[canonical] = deep_symbolize_keys(item)
        return result
    if isinstance(value, list):
        return [deep_symbolize_keys(item) for item in value]
    return value


def parse_yaml(text: str, *, symbolize_keys: bool = True) -> ParsedValue:
    """Parse YAML text into a nested value.

    Uses ``yaml.safe_load``; no arbitrary Python objects are constructed.

    Args:
        text: Raw YAML source
        symbolize_keys: Canonicalize mapping keys recursively (default: True)

    Returns:
        Parsed value (mapping, sequence, or scalar)

    Raises:
        yaml.YAMLError: If the text is not valid YAML (propagated unchanged)

    Example:
        >>> parse_yaml(":a:\\n  :b: 3\\n")
        {'a': {'b': 3}}
    """
    value = yaml.safe_load(text)
    if symbolize_keys:
        return deep_symbolize_keys(value)
    return value
