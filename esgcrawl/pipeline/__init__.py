"""Crawl pipelines — phase 1 (links) and phase 2 (term counts)."""

from esgcrawl.pipeline.discover import discover_links, run_discovery
from esgcrawl.pipeline.extract import extract_terms, run_extraction

__all__ = ["discover_links", "extract_terms", "run_discovery", "run_extraction"]
