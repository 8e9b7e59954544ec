from core.config import ShopifyConfig


def get_base_url(config: ShopifyConfig) -> str:
    """Versioned admin API root for the configured shop."""
    return f"https://{config.shop_domain}/admin/api/{config.api_version}"
