"""Phase 1 — link discovery.

Visit every seed page once and keep the anchors that stay on the seed's own
site:

    seeds → navigate → anchors → same-site filter → links file
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from esgcrawl.config import Settings
from esgcrawl.inputs import load_seeds
from esgcrawl.scraper.browser import Browser, PlaywrightBrowser
from esgcrawl.storage.tables import write_links

logger = logging.getLogger(__name__)


def discover_links(browser: Browser, seeds: Iterable[str], timeout_ms: int) -> List[str]:
    """Return the same-site links found on each seed page, seed by seed.

    A seed that fails to load or to yield its anchors is logged and
    contributes nothing; the remaining seeds are still visited.  Duplicates
    across (or within) seeds are kept.
    """
    links: List[str] = []
    for seed in seeds:
        try:
            browser.navigate(seed, timeout_ms)
            found = browser.extract_anchors(seed)
        except Exception as exc:
            logger.error("Failed to crawl %s: %s", seed, exc)
            continue
        logger.debug("%s: %d same-site links", seed, len(found))
        links.extend(found)
    return links


def run_discovery(settings: Settings, browser: Browser | None = None) -> List[str]:
    """Run phase 1 end to end and write the links file.

    Args:
        settings: Resolved configuration (seed file, links file, browser).
        browser: An already-open browser to reuse.  When omitted a
            :class:`PlaywrightBrowser` is opened for this phase and closed
            afterwards.

    Returns:
        The discovered links, in the order they were written.
    """
    seeds = load_seeds(settings.seeds_path)
    logger.info("Discovering links on %d seed pages", len(seeds))

    if browser is None:
        with PlaywrightBrowser(settings.settle_policy, headless=settings.headless) as session:
            links = discover_links(session, seeds, settings.navigation_timeout_ms)
    else:
        links = discover_links(browser, seeds, settings.navigation_timeout_ms)

    write_links(settings.links_path, links)
    return links
