"""
Site Configuration

Public identity of the calculator site used in feeds, sitemaps and structured
data. Values come from environment variables with the defaults below.

Environment:
    FINCALC_SITE_NAME
    FINCALC_SITE_URL
    FINCALC_SITE_DESCRIPTION
    FINCALC_SITE_LANGUAGE
"""

import os
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SITE = {
    "name": "Your Finance Calculators",
    "url": "https://yourfinancecalculator.com",
    "description": "Free, accurate calculators for all your financial decisions",
    "language": "en",
}

# (path, change frequency, priority) for pages that are not calculators
STATIC_PAGES = [
    ("", "daily", 1.0),
    ("/about", "monthly", 0.8),
    ("/contact", "monthly", 0.5),
]


class SiteConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    url: str = Field(min_length=1)
    description: str = Field(min_length=1)
    language: str = "en"
    keywords: List[str] = ["finance", "calculator", "investment", "roi", "mortgage", "tax"]

    @field_validator('url')
    @classmethod
    def strip_trailing_slash(cls, v):
        if not v.startswith(('http://', 'https://')):
            raise ValueError(f'Site URL must be absolute: {v}')
        return v.rstrip('/')


def load_site_config() -> SiteConfig:
    """Build the site configuration from FINCALC_SITE_* variables."""
    return SiteConfig(
        name=os.getenv('FINCALC_SITE_NAME', DEFAULT_SITE["name"]),
        url=os.getenv('FINCALC_SITE_URL', DEFAULT_SITE["url"]),
        description=os.getenv('FINCALC_SITE_DESCRIPTION', DEFAULT_SITE["description"]),
        language=os.getenv('FINCALC_SITE_LANGUAGE', DEFAULT_SITE["language"]),
    )
