"""Phase 2 — term extraction.

For every discovered link:

    navigate → body text → normalize → per-page .txt file → count → result row

and finally write the result table.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from esgcrawl.config import Settings
from esgcrawl.inputs import load_vocabulary
from esgcrawl.scraper.browser import Browser, PlaywrightBrowser
from esgcrawl.scraper.extractor import page_text
from esgcrawl.storage.tables import read_links, write_results
from esgcrawl.storage.textfiles import write_page_text
from esgcrawl.terms.aggregator import ResultTable
from esgcrawl.terms.counter import count_terms

logger = logging.getLogger(__name__)


def extract_terms(
    browser: Browser,
    links: Iterable[str],
    vocabulary: Sequence[str],
    text_dir: Path,
    timeout_ms: int,
    escape: bool = True,
) -> ResultTable:
    """Count *vocabulary* on every page in *links* and return the result table.

    Pages are processed strictly one after another.  Any exception while
    handling a page (navigation, extraction, writing its text file or
    counting) is logged with the URL and the page is left out of the table.
    """
    table = ResultTable(vocabulary)
    for link in links:
        try:
            browser.navigate(link, timeout_ms)
            text = page_text(browser.extract_visible_text())
            write_page_text(text_dir, link, text)
            counts = count_terms(text, vocabulary, escape=escape)
        except Exception as exc:
            logger.error("Failed to crawl %s: %s", link, exc)
            continue
        table.add(link, counts)
        logger.debug("%s: %d term hits", link, sum(counts.values()))
    return table


def run_extraction(settings: Settings, browser: Browser | None = None) -> ResultTable:
    """Run phase 2 end to end and write the results file.

    The links file written by phase 1 must already exist; a missing file
    raises :class:`~esgcrawl.errors.InputError` before any browser starts.
    """
    vocabulary = load_vocabulary(settings.terms_path)
    links = read_links(settings.links_path)
    logger.info("Counting %d terms on %d pages", len(vocabulary), len(links))

    kwargs = dict(
        links=links,
        vocabulary=vocabulary,
        text_dir=settings.text_path,
        timeout_ms=settings.navigation_timeout_ms,
        escape=settings.escape_terms,
    )
    if browser is None:
        with PlaywrightBrowser(settings.settle_policy, headless=settings.headless) as session:
            table = extract_terms(session, **kwargs)
    else:
        table = extract_terms(browser, **kwargs)

    logger.info("%d of %d pages processed", len(table), len(links))
    write_results(settings.results_path, table)
    return table
