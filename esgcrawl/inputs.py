"""Loaders for the two startup inputs: the term vocabulary and the seed URLs.

Both are JSON arrays of strings, read once per run and never mutated.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from esgcrawl.errors import InputError
from esgcrawl.terms.aggregator import URL_COLUMN

logger = logging.getLogger(__name__)


def _read_json_list(path: Path, what: str) -> List[Any]:
    if not path.exists():
        raise InputError(f"{what} file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InputError(f"{what} file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise InputError(f"{what} file {path} must contain a JSON array")
    return data


def load_vocabulary(path: Path) -> List[str]:
    """Return the ordered, de-duplicated list of terms stored at *path*.

    Raises:
        InputError: If the file is missing, not a JSON array, or holds an
            empty or non-string term, or the ``Website`` column label.
    """
    terms: List[str] = []
    seen: set[str] = set()
    for index, item in enumerate(_read_json_list(path, "Vocabulary")):
        if not isinstance(item, str):
            raise InputError(f"Vocabulary entry #{index} is not a string: {item!r}")
        term = item.strip()
        if not term:
            raise InputError(f"Vocabulary entry #{index} is empty")
        if term == URL_COLUMN:
            raise InputError(
                f"Vocabulary entry #{index} {term!r} clashes with the results URL column"
            )
        if term in seen:
            logger.warning("Dropping duplicate vocabulary term %r", term)
            continue
        seen.add(term)
        terms.append(term)
    return terms


def load_seeds(path: Path) -> List[str]:
    """Return the seed URLs stored at *path*, skipping blank entries."""
    seeds: List[str] = []
    for index, item in enumerate(_read_json_list(path, "Seed")):
        if not isinstance(item, str):
            raise InputError(f"Seed entry #{index} is not a string: {item!r}")
        url = item.strip()
        if url:
            seeds.append(url)
    return seeds
