"""Scraper package — browser session, link filtering & text extraction."""

from esgcrawl.scraper.browser import Browser, PlaywrightBrowser
from esgcrawl.scraper.extractor import normalize_text, page_text, strip_markup
from esgcrawl.scraper.links import filter_same_site
from esgcrawl.scraper.models import SettlePolicy

__all__ = [
    "Browser",
    "PlaywrightBrowser",
    "SettlePolicy",
    "filter_same_site",
    "normalize_text",
    "page_text",
    "strip_markup",
]
