"""Data models for the scraper layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SettlePolicy:
    """How long the browser waits before a freshly loaded page is read.

    ``wait_until`` is the load state passed to the browser's ``goto``
    (``"load"``, ``"domcontentloaded"``, ``"networkidle"`` or ``"commit"``).
    ``delay`` is an extra pause in seconds for late client-side rendering;
    ``0`` skips it.
    """

    wait_until: str = "domcontentloaded"
    delay: float = 5.0

    @property
    def delay_ms(self) -> float:
        return max(self.delay, 0.0) * 1000
