"""Shared fixtures: an in-memory browser and an isolated workspace."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from esgcrawl.config import Settings, settings
from esgcrawl.errors import NavigationError
from esgcrawl.scraper.links import filter_same_site


class FakeBrowser:
    """Stand-in for :class:`PlaywrightBrowser` backed by dicts.

    ``pages`` maps URL → body text, ``anchors`` maps URL → hrefs.  URLs in
    ``failing`` raise :class:`NavigationError` on ``navigate``; URLs missing
    from both dicts do too.
    """

    def __init__(
        self,
        pages: Optional[Dict[str, str]] = None,
        anchors: Optional[Dict[str, List[str]]] = None,
        failing: Optional[set] = None,
    ) -> None:
        self.pages = pages or {}
        self.anchors = anchors or {}
        self.failing = failing or set()
        self.visited: List[str] = []
        self.timeouts: List[int] = []
        self.current: Optional[str] = None
        self.entered = 0
        self.exited = 0

    def __enter__(self) -> FakeBrowser:
        self.entered += 1
        return self

    def __exit__(self, *exc_info) -> None:
        self.exited += 1

    def navigate(self, url: str, timeout_ms: int) -> None:
        self.visited.append(url)
        self.timeouts.append(timeout_ms)
        if url in self.failing or (url not in self.pages and url not in self.anchors):
            self.current = None
            raise NavigationError(url, "Timeout 60000ms exceeded")
        self.current = url

    def extract_anchors(self, prefix: Optional[str] = None) -> List[str]:
        hrefs = self.anchors.get(self.current, [])
        if prefix is None:
            return list(hrefs)
        return filter_same_site(hrefs, prefix)

    def extract_visible_text(self) -> str:
        return self.pages.get(self.current, "")


@pytest.fixture
def workspace(tmp_path: Path) -> Settings:
    """Settings rooted in a fresh temporary workspace with no settle delay."""
    return dataclasses.replace(
        settings,
        workspace_dir=tmp_path,
        terms_file="esg_terms.json",
        seeds_file="banks-to-crawl.json",
        links_file="links.xlsx",
        results_file="results.xlsx",
        text_dir="parsing_test",
        settle_delay=0.0,
        escape_terms=True,
        log_file=None,
    )


@pytest.fixture
def write_json():
    def _write(path: Path, data) -> Path:
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
