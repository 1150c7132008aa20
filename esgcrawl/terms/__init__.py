"""Term incidence counting and result aggregation."""

from esgcrawl.terms.aggregator import URL_COLUMN, ResultTable
from esgcrawl.terms.counter import build_pattern, count_term, count_terms

__all__ = ["ResultTable", "URL_COLUMN", "build_pattern", "count_term", "count_terms"]
