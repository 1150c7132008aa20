"""Result aggregation: one row per successfully processed page."""

from __future__ import annotations

from typing import Any, Iterator, List, Mapping, Sequence, Tuple

URL_COLUMN = "Website"


class ResultTable:
    """Accumulates ``(url, counts)`` records in arrival order.

    Rendering yields a header row (``Website`` followed by the vocabulary in
    order) and one ``[url, count_1, ..., count_n]`` row per record.  Pages
    that failed are simply never added.
    """

    def __init__(self, vocabulary: Sequence[str], url_label: str = URL_COLUMN) -> None:
        self.vocabulary: Tuple[str, ...] = tuple(vocabulary)
        self.url_label = url_label
        self._records: List[Tuple[str, Tuple[int, ...]]] = []

    def add(self, url: str, counts: Mapping[str, int]) -> None:
        """Append a record; terms missing from *counts* are stored as 0."""
        row = tuple(int(counts.get(term, 0) or 0) for term in self.vocabulary)
        self._records.append((url, row))

    def header(self) -> List[str]:
        return [self.url_label, *self.vocabulary]

    def data_rows(self) -> List[List[Any]]:
        return [[url, *counts] for url, counts in self._records]

    def rows(self) -> List[List[Any]]:
        """Return the header row followed by every data row."""
        return [self.header(), *self.data_rows()]

    def urls(self) -> List[str]:
        return [url for url, _ in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Tuple[str, dict]]:
        for url, counts in self._records:
            yield url, dict(zip(self.vocabulary, counts))
