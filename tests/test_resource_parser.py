"""Tests for YAML parsing and key canonicalization.

Python 3.13+.
"""

import logging
from datetime import date

import pytest
import yaml
from hypothesis import given
from hypothesis import strategies as st

from localedata.resources.parser import deep_symbolize_keys, parse_yaml, symbolize_key


class TestSymbolizeKey:
    """Test single-key canonicalization."""

    def test_symbol_spelling_loses_colon(self) -> None:
        assert symbolize_key(":a") == "a"

    def test_plain_string_unchanged(self) -> None:
        assert symbolize_key("a") == "a"

    def test_only_one_colon_removed(self) -> None:
        assert symbolize_key("::a") == ":a"

    def test_non_string_keys_unchanged(self) -> None:
        assert symbolize_key(1) == 1
        assert symbolize_key(True) is True


class TestParseYaml:
    """Test parse_yaml."""

    def test_sequence(self) -> None:
        assert parse_yaml("---\n- 1\n- 2\n") == [1, 2]

    def test_symbolizes_nested_keys(self) -> None:
        assert parse_yaml("---\n:a:\n  :b: 3\n") == {"a": {"b": 3}}

    def test_plain_and_symbol_spellings_agree(self) -> None:
        assert parse_yaml("a:\n  b: 3\n") == parse_yaml(":a:\n  :b: 3\n")

    def test_colliding_spellings_keep_later_value_and_warn(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="localedata.resources.parser"):
            assert parse_yaml("a: 1\n:a: 2\n") == {"a": 2}
        assert "Duplicate key 'a' after canonicalization" in caplog.text

    def test_nested_collision_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="localedata.resources.parser"):
            assert parse_yaml("outer:\n  :b: 1\n  b: 2\n") == {"outer": {"b": 2}}
        assert "Duplicate key 'b'" in caplog.text

    def test_distinct_keys_do_not_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="localedata.resources.parser"):
            parse_yaml(":a: 1\nb: 2\n")
        assert caplog.records == []

    def test_mappings_inside_sequences_symbolized(self) -> None:
        assert parse_yaml(":items:\n  - :name: one\n  - :name: two\n") == {
            "items": [{"name": "one"}, {"name": "two"}]
        }

    def test_symbolize_disabled_keeps_raw_keys(self) -> None:
        assert parse_yaml(":a: 1\n", symbolize_keys=False) == {":a": 1}

    def test_scalar_document(self) -> None:
        assert parse_yaml("random YAML content") == "random YAML content"

    def test_empty_document_is_none(self) -> None:
        assert parse_yaml("") is None

    def test_dates_and_int_keys_preserved(self) -> None:
        assert parse_yaml("1: 2024-01-31\n") == {1: date(2024, 1, 31)}

    def test_invalid_yaml_propagates(self) -> None:
        with pytest.raises(yaml.YAMLError):
            parse_yaml("a: [1, 2\n")

    def test_python_tags_rejected(self) -> None:
        """safe_load refuses to construct arbitrary objects."""
        with pytest.raises(yaml.YAMLError):
            parse_yaml("!!python/object/apply:os.system ['true']\n")


_KEYS = st.text(alphabet="abcxyz_", min_size=1, max_size=6)
_TREES = st.recursive(
    st.integers() | st.text(max_size=5) | st.none(),
    lambda children: st.lists(children, max_size=3)
    | st.dictionaries(_KEYS.map(lambda k: ":" + k), children, max_size=3),
    max_leaves=20,
)


def _all_keys(value: object) -> list[object]:
    if isinstance(value, dict):
        return [*value.keys(), *(k for v in value.values() for k in _all_keys(v))]
    if isinstance(value, list):
        return [k for item in value for k in _all_keys(item)]
    return []


class TestDeepSymbolizeKeysProperties:
    """Property-based tests for deep_symbolize_keys."""

    @given(tree=_TREES)
    def test_no_symbol_keys_remain(self, tree: object) -> None:
        """Property: no key at any depth keeps its leading colon."""
        result = deep_symbolize_keys(tree)
        assert not any(isinstance(k, str) and k.startswith(":") for k in _all_keys(result))

    @given(tree=_TREES)
    def test_idempotent_after_first_pass(self, tree: object) -> None:
        """Property: canonical keys are stable under a second pass."""
        once = deep_symbolize_keys(tree)
        assert deep_symbolize_keys(once) == once

