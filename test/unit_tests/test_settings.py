import pytest
from pydantic import ValidationError

from activeresource.settings import AppSettings


def test_defaults():
    settings = AppSettings()
    assert settings.SORT_VAR == "sort"
    assert settings.SORT_DESC_TAG == "desc"
    assert settings.SORT_SEPARATORS == ["-", "."]
    assert settings.SORT_MULTI is False


def test_env_override(monkeypatch):
    monkeypatch.setenv("SORT_VAR", "order")
    monkeypatch.setenv("SORT_MULTI", "true")
    monkeypatch.setenv("SORT_SEPARATORS", '[",", ":"]')
    settings = AppSettings()
    assert settings.SORT_VAR == "order"
    assert settings.SORT_MULTI is True
    assert settings.SORT_SEPARATORS == [",", ":"]


def test_invalid_separators(monkeypatch):
    monkeypatch.setenv("SORT_SEPARATORS", '["-", "-"]')
    with pytest.raises(ValidationError):
        AppSettings()
