"""Tests for the localedata exception hierarchy and public exports."""

import pytest

import localedata
from localedata import LocaleDataError, ResourceNotFoundError


class TestResourceNotFoundError:
    """Test ResourceNotFoundError."""

    def test_message_embeds_path(self) -> None:
        assert str(ResourceNotFoundError("foo/bar.yml")) == "Resource 'foo/bar.yml' not found."

    def test_path_attribute(self) -> None:
        assert ResourceNotFoundError("a/b.txt").path == "a/b.txt"

    def test_caught_as_base_error(self) -> None:
        with pytest.raises(LocaleDataError):
            raise ResourceNotFoundError("x.yml")


class TestPublicApi:
    """Test top-level package exports."""

    def test_all_exports_resolve(self) -> None:
        for name in localedata.__all__:
            assert hasattr(localedata, name)

    def test_version_is_string(self) -> None:
        assert isinstance(localedata.__version__, str)
