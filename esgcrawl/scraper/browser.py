"""Browser collaborator: one long-lived Playwright session per crawl phase.

The pipelines only depend on the :class:`Browser` protocol, so tests drive
them with an in-memory fake and never need a browser install.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

from esgcrawl.errors import ExtractionError, NavigationError
from esgcrawl.scraper.links import filter_same_site
from esgcrawl.scraper.models import SettlePolicy

logger = logging.getLogger(__name__)

_ANCHORS_JS = "els => els.map(el => el.href)"
_BODY_TEXT_JS = "() => document.body ? document.body.innerText : ''"


class Browser(Protocol):
    def navigate(self, url: str, timeout_ms: int) -> None:
        """Load *url*; raise :class:`NavigationError` if it does not settle in time."""

    def extract_anchors(self, prefix: Optional[str] = None) -> List[str]:
        """Return the href of every anchor on the current page."""

    def extract_visible_text(self) -> str:
        """Return the rendered text of the current page's body."""


class PlaywrightBrowser:
    """A headless (or headed) Chromium page driven through Playwright.

    Use as a context manager; the browser is closed on exit even when pages
    failed along the way::

        with PlaywrightBrowser(SettlePolicy(delay=0)) as browser:
            browser.navigate("https://example.com", 60_000)
            text = browser.extract_visible_text()
    """

    def __init__(self, settle: SettlePolicy | None = None, headless: bool = True) -> None:
        self.settle = settle or SettlePolicy()
        self.headless = headless
        self._playwright = None
        self._browser = None
        self._page = None
        self._current_url = ""

    def __enter__(self) -> PlaywrightBrowser:
        # Imported lazily so the rest of the package imports without the
        # playwright driver being installed.
        from playwright.sync_api import sync_playwright  # noqa: PLC0415

        self._playwright = sync_playwright().start()
        try:
            self._browser = self._playwright.chromium.launch(headless=self.headless)
            self._page = self._browser.new_page()
        except Exception:
            self._playwright.stop()
            raise
        logger.debug("Browser session started (headless=%s)", self.headless)
        return self

    def __exit__(self, *exc_info) -> None:
        try:
            if self._browser is not None:
                self._browser.close()
        finally:
            if self._playwright is not None:
                self._playwright.stop()
            self._browser = None
            self._page = None
            self._playwright = None
        logger.debug("Browser session closed")

    @property
    def page(self):
        if self._page is None:
            raise RuntimeError("PlaywrightBrowser used outside of its 'with' block")
        return self._page

    def navigate(self, url: str, timeout_ms: int) -> None:
        from playwright.sync_api import Error as PlaywrightError  # noqa: PLC0415

        self._current_url = url
        try:
            self.page.goto(url, wait_until=self.settle.wait_until, timeout=timeout_ms)
            if self.settle.delay_ms:
                self.page.wait_for_timeout(self.settle.delay_ms)
        except PlaywrightError as exc:
            raise NavigationError(url, str(exc)) from exc

    def extract_anchors(self, prefix: Optional[str] = None) -> List[str]:
        from playwright.sync_api import Error as PlaywrightError  # noqa: PLC0415

        try:
            hrefs = self.page.eval_on_selector_all("a", _ANCHORS_JS)
        except PlaywrightError as exc:
            raise ExtractionError(self._current_url, str(exc)) from exc
        if prefix is None:
            return [href for href in hrefs if href]
        return filter_same_site(hrefs, prefix)

    def extract_visible_text(self) -> str:
        from playwright.sync_api import Error as PlaywrightError  # noqa: PLC0415

        try:
            return self.page.evaluate(_BODY_TEXT_JS) or ""
        except PlaywrightError as exc:
            raise ExtractionError(self._current_url, str(exc)) from exc
