"""
Unit Tests for Feed, Sitemap and Structured Data Generation

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import json
import xml.etree.ElementTree as ET
from datetime import date, datetime, timezone, timedelta

import pytest
from pydantic import ValidationError

from calculators import list_all, lookup
from publishing import (
    SiteConfig,
    build_rss_feed,
    build_sitemap,
    calculator_breadcrumbs,
    calculator_json_ld,
    calculator_url,
    load_site_config,
    to_script_payload,
    website_json_ld,
)
from publishing.feeds import ATOM_NS, SITEMAP_NS


def parse(xml_text: str) -> ET.Element:
    assert xml_text.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    return ET.fromstring(xml_text.encode("utf-8"))


class TestSiteConfig:

    def test_trailing_slash_stripped(self, site):
        assert site.url == "https://calc.example.com"

    def test_relative_url_rejected(self):
        with pytest.raises(ValidationError, match="absolute"):
            SiteConfig(name="x", url="calc.example.com", description="y")

    def test_defaults(self, monkeypatch):
        for var in ("FINCALC_SITE_NAME", "FINCALC_SITE_URL", "FINCALC_SITE_DESCRIPTION", "FINCALC_SITE_LANGUAGE"):
            monkeypatch.delenv(var, raising=False)
        site = load_site_config()
        assert site.name == "Your Finance Calculators"
        assert site.url == "https://yourfinancecalculator.com"
        assert site.language == "en"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("FINCALC_SITE_NAME", "Env Calculators")
        monkeypatch.setenv("FINCALC_SITE_URL", "https://env.example.org/")
        site = load_site_config()
        assert site.name == "Env Calculators"
        assert site.url == "https://env.example.org"

    def test_calculator_url(self, site):
        assert calculator_url(site, lookup("tax/income")) == "https://calc.example.com/calculator/tax/income"


class TestRssFeed:

    BUILD_DATE = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    @pytest.fixture
    def channel(self, site):
        return parse(build_rss_feed(site, build_date=self.BUILD_DATE)).find("channel")

    def test_channel_metadata(self, channel, site):
        assert channel.findtext("title") == site.name
        assert channel.findtext("link") == site.url
        assert channel.findtext("description") == site.description
        assert channel.findtext("language") == "en"
        assert channel.findtext("lastBuildDate") == "Mon, 19 Oct 2026 12:00:00 GMT"

    def test_self_link(self, channel):
        link = channel.find(f"{{{ATOM_NS}}}link")
        assert link is not None
        assert link.get("href") == "https://calc.example.com/feed.xml"
        assert link.get("rel") == "self"

    def test_one_item_per_calculator(self, channel):
        items = channel.findall("item")
        assert [i.findtext("title") for i in items] == [f.name for f in list_all()]

    def test_item_fields(self, channel):
        item = channel.findall("item")[0]
        url = "https://calc.example.com/calculator/capital-gains-tax"
        assert item.findtext("link") == url
        assert item.findtext("guid") == url
        assert item.find("guid").get("isPermaLink") == "true"
        assert item.findtext("description") == lookup("capital-gains-tax").description
        assert item.findtext("pubDate") == "Mon, 19 Oct 2026 12:00:00 GMT"

    def test_non_utc_build_date_converted(self, site):
        local = datetime(2026, 10, 19, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        channel = parse(build_rss_feed(site, build_date=local)).find("channel")
        assert channel.findtext("lastBuildDate") == "Mon, 19 Oct 2026 12:00:00 GMT"

    def test_explicit_formula_subset(self, site):
        formulas = [lookup("roi/general")]
        channel = parse(build_rss_feed(site, formulas, build_date=self.BUILD_DATE)).find("channel")
        assert [i.findtext("title") for i in channel.findall("item")] == ["General ROI Calculator"]

    def test_special_characters_escaped(self, site):
        tricky = site.model_copy(update={"name": "Tax & <Loans>"})
        channel = parse(build_rss_feed(tricky, build_date=self.BUILD_DATE)).find("channel")
        assert channel.findtext("title") == "Tax & <Loans>"


class TestSitemap:

    @pytest.fixture
    def urls(self, site):
        root = parse(build_sitemap(site, last_modified=date(2026, 10, 19)))
        assert root.tag == f"{{{SITEMAP_NS}}}urlset"
        return root.findall(f"{{{SITEMAP_NS}}}url")

    def _field(self, url, name):
        return url.findtext(f"{{{SITEMAP_NS}}}{name}")

    def test_static_pages_first(self, urls):
        static = [(self._field(u, "loc"), self._field(u, "changefreq"), self._field(u, "priority")) for u in urls[:3]]
        assert static == [
            ("https://calc.example.com", "daily", "1.0"),
            ("https://calc.example.com/about", "monthly", "0.8"),
            ("https://calc.example.com/contact", "monthly", "0.5"),
        ]

    def test_every_calculator_once(self, urls):
        locs = [self._field(u, "loc") for u in urls[3:]]
        assert locs == [f"https://calc.example.com/calculator/{f.identifier}" for f in list_all()]
        assert all(self._field(u, "priority") == "0.9" for u in urls[3:])
        assert all(self._field(u, "changefreq") == "weekly" for u in urls[3:])

    def test_lastmod(self, urls):
        assert {self._field(u, "lastmod") for u in urls} == {"2026-10-19"}


class TestStructuredData:

    def test_calculator_json_ld(self, site):
        formula = lookup("capital-gains-tax")
        data = calculator_json_ld(formula, site)
        assert data["@context"] == "https://schema.org"
        assert data["@type"] == "WebApplication"
        assert data["identifier"] == "capital-gains-tax"
        assert data["name"] == formula.name
        assert data["description"] == formula.description
        assert data["url"] == "https://calc.example.com/calculator/capital-gains-tax"
        assert data["applicationCategory"] == "FinanceApplication"
        assert data["offers"]["price"] == "0"

    def test_every_formula_projects(self, site):
        for formula in list_all():
            data = calculator_json_ld(formula, site)
            assert data["name"] and data["description"] and data["identifier"]

    def test_website_search_action(self, site):
        data = website_json_ld(site)
        assert data["potentialAction"]["target"] == "https://calc.example.com/search?q={search_term_string}"

    def test_breadcrumbs(self, site):
        data = calculator_breadcrumbs(lookup("tax/income"), site)
        items = data["itemListElement"]
        assert [i["position"] for i in items] == [1, 2, 3]
        assert items[1]["name"] == "Tax"
        assert items[2]["name"] == "Income Tax Calculator"
        assert "item" not in items[2]

    def test_script_payload(self, site):
        data = calculator_json_ld(lookup("tax/income"), site)
        data["description"] = "</script><script>alert(1)</script>"
        payload = to_script_payload(data)
        assert "</script>" not in payload
        assert json.loads(payload)["description"] == "</script><script>alert(1)</script>"
