import pytest
from pydantic import ValidationError

from add_on_line_items.config import AppConfig, get_config, set_config_for_test
from add_on_line_items.data.interface import CatalogServices
from add_on_line_items.data.util import get_catalog


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for var in ["APP_ENV", "LOG_LEVEL", "DATA_DIR", "CATALOG_BACKEND", "ADD_ON_CONCURRENCY"]:
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    """Test defaults without environment overrides."""
    config = AppConfig(_env_file=None)
    assert config.app_env == "local"
    assert config.catalog_backend == "csv"
    assert config.add_on_concurrency == 8


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ADD_ON_CONCURRENCY", "3")
    monkeypatch.setenv("LOG_LEVEL", "info")
    config = AppConfig(_env_file=None)
    assert config.add_on_concurrency == 3
    assert config.log_level == "info"


def test_concurrency_must_be_positive():
    with pytest.raises(ValidationError):
        AppConfig(_env_file=None, add_on_concurrency=0)


def test_set_config_for_test_replaces_singleton():
    set_config_for_test(data_dir="elsewhere", log_level="WARNING")
    assert get_config().data_dir == "elsewhere"
    assert get_config() is get_config()


def test_get_catalog_csv(tmp_path):
    for name, header in [
        ("variants.csv", "variant_id,product_id,title,sku"),
        ("products.csv", "product_id,title,thumbnail"),
        ("regions.csv", "region_id,name,currency_code"),
        ("add_ons.csv", "add_on_id,name,valid_for"),
        ("variant_prices.csv", "variant_id,region_id,amount"),
        ("add_on_prices.csv", "add_on_id,region_id,amount"),
    ]:
        (tmp_path / name).write_text(header + "\n")
    set_config_for_test(data_dir=str(tmp_path), log_level="WARNING")
    services = get_catalog()
    assert isinstance(services, CatalogServices)


def test_get_catalog_unknown_kind():
    set_config_for_test(log_level="WARNING")
    with pytest.raises(ValueError):
        get_catalog("parquet")
