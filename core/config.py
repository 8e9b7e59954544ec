import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import yaml
from dotenv import load_dotenv

DEFAULT_API_VERSION = "2024-01"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShopifyConfig:
    shop_domain: str
    access_token: str
    api_version: str = DEFAULT_API_VERSION


class ConfigLoader:
    _instance = None
    _config = None

    def __new__(cls):
        """
        Create a singleton instance of ConfigLoader.
        Loads settings from the YAML file on first instantiation.
        """
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._load_config()
        return cls._instance

    @classmethod
    def _load_config(cls):
        """
        Load config.yaml into the class variable _config. A missing file means no settings.
        """
        config_path = os.path.join(os.path.dirname(__file__), "..", "config.yaml")
        cls._config = read_settings(os.path.abspath(config_path))

    def get_config(self):
        """
        Return the loaded settings dictionary.
        """
        return self._config


def read_settings(path: str) -> dict[str, Any]:
    if not os.path.isfile(path):
        return {}
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def get_config():
    """
    Helper function to get the singleton configuration instance's settings dictionary.
    """
    return ConfigLoader().get_config()


def load_shopify_config(
    settings: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ShopifyConfig:
    """Build the immutable Shopify connection settings.

    Environment values win; the API version falls back to `shopify.api_version`
    in config.yaml and then to 2024-01. A missing shop domain or access token is
    accepted as an empty string and only logged.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ
    shopify_settings = (settings or {}).get("shopify") or {}

    config = ShopifyConfig(
        shop_domain=environ.get("SHOPIFY_SHOP_DOMAIN", ""),
        access_token=environ.get("SHOPIFY_ACCESS_TOKEN", ""),
        api_version=environ.get("SHOPIFY_API_VERSION")
        or shopify_settings.get("api_version")
        or DEFAULT_API_VERSION,
    )
    if not config.shop_domain:
        logger.warning("SHOPIFY_SHOP_DOMAIN is not set; Shopify requests will fail")
    if not config.access_token:
        logger.warning("SHOPIFY_ACCESS_TOKEN is not set; Shopify requests will fail")
    return config
