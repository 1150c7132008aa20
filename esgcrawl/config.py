"""Centralised settings for the ESG term crawler.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from esgcrawl.scraper.models import SettlePolicy

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Workspace / files
    # ------------------------------------------------------------------
    workspace_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("ESGCRAWL_WORKSPACE", "."))
    )
    terms_file: str = field(
        default_factory=lambda: os.environ.get("ESGCRAWL_TERMS_FILE", "esg_terms.json")
    )
    seeds_file: str = field(
        default_factory=lambda: os.environ.get("ESGCRAWL_SEEDS_FILE", "banks-to-crawl.json")
    )
    links_file: str = field(
        default_factory=lambda: os.environ.get("ESGCRAWL_LINKS_FILE", "links.xlsx")
    )
    results_file: str = field(
        default_factory=lambda: os.environ.get("ESGCRAWL_RESULTS_FILE", "results.xlsx")
    )
    text_dir: str = field(
        default_factory=lambda: os.environ.get("ESGCRAWL_TEXT_DIR", "parsing_test")
    )

    @property
    def terms_path(self) -> Path:
        """Absolute path to the JSON vocabulary file."""
        return self._resolve(self.terms_file)

    @property
    def seeds_path(self) -> Path:
        """Absolute path to the JSON seed URL list."""
        return self._resolve(self.seeds_file)

    @property
    def links_path(self) -> Path:
        return self._resolve(self.links_file)

    @property
    def results_path(self) -> Path:
        return self._resolve(self.results_file)

    @property
    def text_path(self) -> Path:
        """Directory receiving one normalized text file per crawled page."""
        return self._resolve(self.text_dir)

    # ------------------------------------------------------------------
    # Browser
    # ------------------------------------------------------------------
    navigation_timeout: float = field(
        default_factory=lambda: float(os.environ.get("NAVIGATION_TIMEOUT", "60.0"))
    )
    settle_delay: float = field(
        default_factory=lambda: float(os.environ.get("SETTLE_DELAY", "5.0"))
    )
    wait_until: str = field(
        default_factory=lambda: os.environ.get("WAIT_UNTIL", "domcontentloaded")
    )
    headless: bool = field(default_factory=lambda: _env_bool("HEADLESS", "true"))

    @property
    def navigation_timeout_ms(self) -> int:
        return int(self.navigation_timeout * 1000)

    @property
    def settle_policy(self) -> SettlePolicy:
        return SettlePolicy(wait_until=self.wait_until, delay=self.settle_delay)

    # ------------------------------------------------------------------
    # Term matching
    # ------------------------------------------------------------------
    escape_terms: bool = field(default_factory=lambda: _env_bool("ESCAPE_TERMS", "true"))

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"))
    log_file: str | None = field(default_factory=lambda: os.environ.get("LOG_FILE") or None)

    def _resolve(self, name: str) -> Path:
        path = Path(name)
        if path.is_absolute():
            return path
        return self.workspace_dir / path


# Module-level singleton — import this everywhere:
#   from esgcrawl.config import settings
settings = Settings()
