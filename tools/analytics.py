from typing import Any

from utils.request_builder import ShopifyRequest, get_request, resource_path

REPORT_TYPES = ["sales_over_time", "sessions_over_time", "top_products", "top_pages", "top_referrers"]


def get_analytics_reports(args: dict[str, Any]) -> ShopifyRequest:
    """Fetch one report when `report_type` is given, otherwise the report list."""
    report_type = args.get("report_type")
    path = resource_path("reports", report_type) if report_type else "/reports.json"
    return get_request(path, args, ["date_min", "date_max", "limit"])


def get_tools() -> dict[str, Any]:
    return {
        "get_analytics_reports": {
            "func": get_analytics_reports,
            "title": "Get analytics reports",
            "description": "Get analytics reports data",
            "input_schema": {
                "type": "object",
                "properties": {
                    "report_type": {
                        "type": "string",
                        "enum": REPORT_TYPES,
                        "description": "Type of analytics report",
                    },
                    "date_min": {"type": "string", "description": "Start date (YYYY-MM-DD)"},
                    "date_max": {"type": "string", "description": "End date (YYYY-MM-DD)"},
                    "limit": {"type": "number", "description": "Number of results"},
                },
            },
        },
    }
