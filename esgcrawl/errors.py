"""Exception taxonomy for the crawler.

``InputError`` is fatal and propagates to the CLI.  ``NavigationError`` and
``ExtractionError`` are per-page: the pipelines log them and move on.
"""

from __future__ import annotations


class CrawlError(Exception):
    """Base class for all crawler errors."""


class InputError(CrawlError):
    """A configuration or input file is missing or malformed."""


class PageError(CrawlError):
    """A single page could not be processed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(reason)
        self.url = url
        self.reason = reason


class NavigationError(PageError):
    """The page did not load within its timeout, or the browser failed."""


class ExtractionError(PageError):
    """The page loaded but its anchors or text could not be read."""
