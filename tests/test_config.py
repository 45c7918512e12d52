import json

import pytest

from product_range.config import DEFAULT_CATALOG, Settings


def test_defaults_when_nothing_configured(tmp_path, monkeypatch):
    for name in ("PRODUCT_RANGE_CATALOG", "PRODUCT_RANGE_K", "PRODUCT_RANGE_TIMEOUT", "PRODUCT_RANGE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.load(tmp_path / "absent.json")
    assert settings == Settings()
    assert settings.catalog_source == DEFAULT_CATALOG


def test_load_from_file(tmp_path):
    path = tmp_path / "product_range.json"
    path.write_text(json.dumps({"catalog_source": "https://example.com/p.json", "default_k": 5, "log_level": "debug"}))
    settings = Settings.load(path)
    assert settings.catalog_source == "https://example.com/p.json"
    assert settings.default_k == 5
    assert settings.request_timeout == 20
    assert settings.log_level == "DEBUG"


def test_load_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("PRODUCT_RANGE_CATALOG", "catalog.json")
    monkeypatch.setenv("PRODUCT_RANGE_K", "3")
    settings = Settings.load(tmp_path / "absent.json")
    assert settings.catalog_source == "catalog.json"
    assert settings.default_k == 3


@pytest.mark.parametrize("value", ["ten", "-1"])
def test_invalid_k_rejected(tmp_path, monkeypatch, value):
    monkeypatch.setenv("PRODUCT_RANGE_K", value)
    with pytest.raises(ValueError, match="default_k"):
        Settings.load(tmp_path / "absent.json")
