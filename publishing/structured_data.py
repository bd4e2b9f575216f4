"""
JSON-LD structured data (schema.org) for the site and calculator pages.
"""

import json
from typing import Dict, List, Optional, Sequence, Tuple

from calculators.base import FormulaDefinition
from publishing.feeds import calculator_url
from publishing.site_config import SiteConfig

SCHEMA_CONTEXT = "https://schema.org"


def website_json_ld(site: SiteConfig) -> Dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": site.name,
        "description": site.description,
        "url": site.url,
        "potentialAction": {
            "@type": "SearchAction",
            "target": f"{site.url}/search?q={{search_term_string}}",
            "query-input": "required name=search_term_string",
        },
    }


def calculator_json_ld(formula: FormulaDefinition, site: SiteConfig) -> Dict:
    """WebApplication entry for one calculator page. Free, finance category."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebApplication",
        "identifier": formula.identifier,
        "name": formula.name,
        "description": formula.description,
        "url": calculator_url(site, formula),
        "applicationCategory": "FinanceApplication",
        "operatingSystem": "Any",
        "offers": {
            "@type": "Offer",
            "price": "0",
            "priceCurrency": "USD",
        },
        "provider": {
            "@type": "Organization",
            "name": site.name,
            "url": site.url,
        },
    }


def breadcrumb_json_ld(items: Sequence[Tuple[str, Optional[str]]]) -> Dict:
    """BreadcrumbList from (name, url) pairs; the last crumb may omit its url."""
    elements: List[Dict] = []
    for position, (name, url) in enumerate(items, start=1):
        element = {"@type": "ListItem", "position": position, "name": name}
        if url:
            element["item"] = url
        elements.append(element)
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": elements,
    }


def calculator_breadcrumbs(formula: FormulaDefinition, site: SiteConfig) -> Dict:
    return breadcrumb_json_ld([
        ("Home", site.url),
        (formula.category.replace('-', ' ').title(), f"{site.url}/#{formula.category}-calculators"),
        (formula.name, None),
    ])


def to_script_payload(data: Dict) -> str:
    """Serialize for a <script type="application/ld+json"> block."""
    return json.dumps(data, indent=2, ensure_ascii=False).replace("</", "<\\/")
