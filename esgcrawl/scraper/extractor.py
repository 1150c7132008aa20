"""Text extraction: turns rendered body text into Normalized Page Text."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

_WHITESPACE = re.compile(r"\s+")
_TAG = re.compile(r"</?[a-zA-Z][^>]*>")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def normalize_text(text: str) -> str:
    """Collapse every whitespace run to one space and trim both ends.

    Idempotent; casing and punctuation are left alone.
    """
    return _WHITESPACE.sub(" ", text).strip()


def strip_markup(text: str) -> str:
    """Remove any HTML markup still embedded in *text*.

    A browser's ``innerText`` is usually tag-free already, in which case the
    input is returned unchanged.  Otherwise BeautifulSoup drops ``<script>``
    and ``<style>`` blocks and keeps the remaining text nodes.
    """
    if not _TAG.search(text):
        return text

    soup = BeautifulSoup(text, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    return soup.get_text(separator=" ")


def page_text(raw: str | None) -> str:
    """Return the normalized plain text for a page's raw body text."""
    if not raw:
        return ""
    return normalize_text(strip_markup(raw))
