"""Same-site link filtering for the discovery phase."""

from __future__ import annotations

from typing import Iterable, List, Optional


def filter_same_site(hrefs: Iterable[Optional[str]], seed: str) -> List[str]:
    """Return the hrefs that start with *seed*, in their original order.

    This is a plain string-prefix test: no URL normalisation is applied, so
    ``http://`` vs ``https://``, ``www.`` or a trailing slash all make two
    URLs distinct.  Empty hrefs are dropped; duplicates are kept.
    """
    return [href for href in hrefs if href and href.startswith(seed)]
