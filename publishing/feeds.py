"""
RSS and Sitemap Generation

Serializes the calculator registry into an RSS 2.0 feed and a sitemaps.org
urlset. Both read only identifier, name and description from each formula.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import xml.etree.ElementTree as ET
from datetime import date, datetime, timezone
from email.utils import format_datetime
from typing import Iterable, Optional, Union

from calculators import list_all
from calculators.base import FormulaDefinition
from publishing.site_config import STATIC_PAGES, SiteConfig
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

ATOM_NS = "http://www.w3.org/2005/Atom"
SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

CALCULATOR_CHANGE_FREQUENCY = "weekly"
CALCULATOR_PRIORITY = 0.9

ET.register_namespace("atom", ATOM_NS)


def calculator_url(site: SiteConfig, formula: FormulaDefinition) -> str:
    return f"{site.url}/calculator/{formula.identifier}"


def _to_utc(moment: Optional[datetime]) -> datetime:
    if moment is None:
        return datetime.now(timezone.utc)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _add_text(parent: ET.Element, tag: str, text: str, attrib: Optional[dict] = None) -> ET.Element:
    element = ET.SubElement(parent, tag, attrib or {})
    element.text = text
    return element


def _serialize(root: ET.Element) -> str:
    return XML_DECLARATION + ET.tostring(root, encoding="unicode")


def build_rss_feed(
    site: SiteConfig,
    formulas: Optional[Iterable[FormulaDefinition]] = None,
    build_date: Optional[datetime] = None,
) -> str:
    """
    Build an RSS 2.0 feed with one item per calculator.

    Args:
        site: Site identity (title, link, description)
        formulas: Calculators to list. Defaults to the whole registry
        build_date: lastBuildDate/pubDate. Defaults to now (UTC)

    Returns:
        XML document as a string
    """
    formulas = list_all() if formulas is None else list(formulas)
    pub_date = format_datetime(_to_utc(build_date), usegmt=True)

    rss = ET.Element("rss", {"version": "2.0"})
    channel = ET.SubElement(rss, "channel")
    _add_text(channel, "title", site.name)
    _add_text(channel, "link", site.url)
    _add_text(channel, "description", site.description)
    _add_text(channel, "language", site.language)
    _add_text(channel, "lastBuildDate", pub_date)
    ET.SubElement(channel, f"{{{ATOM_NS}}}link", {
        "href": f"{site.url}/feed.xml",
        "rel": "self",
        "type": "application/rss+xml",
    })

    for formula in formulas:
        url = calculator_url(site, formula)
        item = ET.SubElement(channel, "item")
        _add_text(item, "title", formula.name)
        _add_text(item, "link", url)
        _add_text(item, "description", formula.description)
        _add_text(item, "guid", url, {"isPermaLink": "true"})
        _add_text(item, "pubDate", pub_date)

    logger.debug(f"Built RSS feed with {len(formulas)} items")
    return _serialize(rss)


def build_sitemap(
    site: SiteConfig,
    formulas: Optional[Iterable[FormulaDefinition]] = None,
    last_modified: Optional[Union[date, datetime]] = None,
) -> str:
    """
    Build a sitemap: static pages first, then one entry per calculator.

    Args:
        site: Site identity (base URL)
        formulas: Calculators to list. Defaults to the whole registry
        last_modified: lastmod for every entry. Defaults to now (UTC)

    Returns:
        XML document as a string
    """
    formulas = list_all() if formulas is None else list(formulas)
    if last_modified is None:
        last_modified = datetime.now(timezone.utc)
    elif isinstance(last_modified, datetime):
        last_modified = _to_utc(last_modified)
    lastmod = last_modified.isoformat()

    urlset = ET.Element("urlset", {"xmlns": SITEMAP_NS})

    entries = [(f"{site.url}{path}", frequency, priority) for path, frequency, priority in STATIC_PAGES]
    entries += [
        (calculator_url(site, formula), CALCULATOR_CHANGE_FREQUENCY, CALCULATOR_PRIORITY)
        for formula in formulas
    ]

    for loc, frequency, priority in entries:
        url = ET.SubElement(urlset, "url")
        _add_text(url, "loc", loc)
        _add_text(url, "lastmod", lastmod)
        _add_text(url, "changefreq", frequency)
        _add_text(url, "priority", f"{priority:.1f}")

    logger.debug(f"Built sitemap with {len(entries)} URLs")
    return _serialize(urlset)
