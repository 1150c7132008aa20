"""Storage package — spreadsheet tables and per-page text files."""

from esgcrawl.storage.tables import (
    read_links,
    read_table,
    write_links,
    write_results,
    write_table,
)
from esgcrawl.storage.textfiles import slug_for_url, write_page_text

__all__ = [
    "read_links",
    "read_table",
    "slug_for_url",
    "write_links",
    "write_page_text",
    "write_results",
    "write_table",
]
