"""Tabular file store for the links list and the result table.

``.xlsx`` files go through pandas with the openpyxl engine; ``.csv`` files
are written as plain CSV.  Either way the first row is the header.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Sequence, Tuple

import pandas as pd

from esgcrawl.errors import InputError
from esgcrawl.terms.aggregator import ResultTable

logger = logging.getLogger(__name__)

LINKS_COLUMN = "Links"
LINKS_SHEET = "Links"
RESULTS_SHEET = "Results"


def _is_csv(path: Path) -> bool:
    return path.suffix.lower() == ".csv"


# ---------------------------------------------------------------------------
# Generic tables
# ---------------------------------------------------------------------------

def write_table(
    path: Path,
    header: Sequence[str],
    rows: Sequence[Sequence[Any]],
    sheet_name: str = "Sheet1",
) -> None:
    """Write *header* and *rows* to *path*, replacing any existing file.

    An empty *rows* still produces a header-only file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    frame = pd.DataFrame([list(row) for row in rows], columns=list(header))

    if _is_csv(path):
        frame.to_csv(path, index=False)
    else:
        frame.to_excel(path, sheet_name=sheet_name, index=False, engine="openpyxl")


def read_table(path: Path) -> Tuple[List[str], List[List[Any]]]:
    """Return ``(header, rows)`` from the first sheet of *path*.

    Empty cells come back as ``None``.

    Raises:
        InputError: If *path* does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise InputError(f"Table file not found: {path}")

    if _is_csv(path):
        frame = pd.read_csv(path, dtype=object)
    else:
        frame = pd.read_excel(path, sheet_name=0, dtype=object, engine="openpyxl")

    header = [str(column) for column in frame.columns]
    rows = [
        [None if pd.isna(value) else value for value in row]
        for row in frame.itertuples(index=False, name=None)
    ]
    return header, rows


# ---------------------------------------------------------------------------
# Links table
# ---------------------------------------------------------------------------

def write_links(path: Path, links: Sequence[str]) -> None:
    """Persist discovered links as a single ``Links`` column."""
    write_table(path, [LINKS_COLUMN], [[link] for link in links], sheet_name=LINKS_SHEET)
    logger.info("Links written to %s (%d rows)", path, len(links))


def read_links(path: Path) -> List[str]:
    """Return the first column of every data row, skipping blank cells."""
    _, rows = read_table(path)
    links: List[str] = []
    for row in rows:
        if not row or row[0] is None:
            continue
        link = str(row[0]).strip()
        if link:
            links.append(link)
    return links


# ---------------------------------------------------------------------------
# Results table
# ---------------------------------------------------------------------------

def write_results(path: Path, table: ResultTable) -> None:
    """Persist *table* with a ``Website`` column followed by one column per term."""
    write_table(path, table.header(), table.data_rows(), sheet_name=RESULTS_SHEET)
    logger.info("Results written to %s (%d rows)", path, len(table))
