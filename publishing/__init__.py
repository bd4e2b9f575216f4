"""
Publishing

Projections of the calculator registry for search engines and feed readers:
RSS feed, sitemap and JSON-LD structured data.
"""

from .site_config import SiteConfig, load_site_config
from .feeds import build_rss_feed, build_sitemap, calculator_url
from .structured_data import (
    website_json_ld,
    calculator_json_ld,
    calculator_breadcrumbs,
    breadcrumb_json_ld,
    to_script_payload,
)

__all__ = [
    "SiteConfig",
    "load_site_config",
    "build_rss_feed",
    "build_sitemap",
    "calculator_url",
    "website_json_ld",
    "calculator_json_ld",
    "calculator_breadcrumbs",
    "breadcrumb_json_ld",
    "to_script_payload",
]
