"""Per-page text file store.

Each successfully crawled page gets one UTF-8 ``.txt`` file holding its
normalized text, named after a filesystem-safe slug of its URL.  Two URLs
that slugify to the same name share a file: the last write wins.
"""

from __future__ import annotations

from pathlib import Path

from slugify import slugify

TEXT_SUFFIX = ".txt"
MAX_SLUG_LENGTH = 200

_URL_REPLACEMENTS = [[":", "-"], ["/", "_"]]
_UNSAFE_CHARS = r"[^-a-zA-Z0-9_.]+"


def slug_for_url(url: str) -> str:
    """Return a filesystem-safe file stem for *url*.

    ``:`` maps to ``-`` and ``/`` to ``_`` so the scheme and path stay
    readable; every other unsafe run collapses to ``-``.  Case is kept.
    """
    slug = slugify(
        url,
        lowercase=False,
        replacements=_URL_REPLACEMENTS,
        regex_pattern=_UNSAFE_CHARS,
        max_length=MAX_SLUG_LENGTH,
    )
    return slug or "page"


def write_page_text(directory: Path, url: str, content: str) -> Path:
    """Write *content* to ``<directory>/<slug><TEXT_SUFFIX>`` and return the path."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{slug_for_url(url)}{TEXT_SUFFIX}"
    path.write_text(content, encoding="utf-8")
    return path
