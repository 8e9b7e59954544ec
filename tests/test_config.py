"""Tests for core/config.py."""
import dataclasses

import pytest

from core.config import DEFAULT_API_VERSION, ShopifyConfig, load_shopify_config, read_settings
from utils import get_base_url


class TestLoadShopifyConfig:
    def test_reads_environment(self):
        config = load_shopify_config(
            {},
            {
                "SHOPIFY_SHOP_DOMAIN": "acme.myshopify.com",
                "SHOPIFY_ACCESS_TOKEN": "shpat_abc",
                "SHOPIFY_API_VERSION": "2024-07",
            },
        )
        assert config == ShopifyConfig("acme.myshopify.com", "shpat_abc", "2024-07")

    def test_default_api_version(self):
        config = load_shopify_config({}, {"SHOPIFY_SHOP_DOMAIN": "a", "SHOPIFY_ACCESS_TOKEN": "b"})
        assert config.api_version == DEFAULT_API_VERSION == "2024-01"

    def test_settings_api_version_used_when_env_missing(self):
        config = load_shopify_config({"shopify": {"api_version": "2023-10"}}, {})
        assert config.api_version == "2023-10"

    def test_env_api_version_wins_over_settings(self):
        config = load_shopify_config({"shopify": {"api_version": "2023-10"}}, {"SHOPIFY_API_VERSION": "2024-04"})
        assert config.api_version == "2024-04"

    def test_missing_credentials_are_empty_not_fatal(self, caplog):
        with caplog.at_level("WARNING"):
            config = load_shopify_config(None, {})
        assert config.shop_domain == ""
        assert config.access_token == ""
        assert "SHOPIFY_SHOP_DOMAIN" in caplog.text
        assert "SHOPIFY_ACCESS_TOKEN" in caplog.text

    def test_token_not_logged(self, caplog):
        with caplog.at_level("INFO"):
            load_shopify_config({}, {"SHOPIFY_SHOP_DOMAIN": "a", "SHOPIFY_ACCESS_TOKEN": "shpat_secret"})
        assert "shpat_secret" not in caplog.text

    def test_config_is_immutable(self):
        config = ShopifyConfig("a", "b")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.access_token = "c"


class TestSettingsFile:
    def test_missing_file(self, tmp_path):
        assert read_settings(str(tmp_path / "nope.yaml")) == {}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert read_settings(str(path)) == {}

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("shopify:\n  api_version: '2024-04'\n")
        assert read_settings(str(path)) == {"shopify": {"api_version": "2024-04"}}


class TestEndpoints:
    def test_base_url(self):
        config = ShopifyConfig("acme.myshopify.com", "t", "2024-01")
        assert get_base_url(config) == "https://acme.myshopify.com/admin/api/2024-01"
