"""Tests for the spreadsheet tables and the per-page text file store."""

from __future__ import annotations

from pathlib import Path

import pytest
from openpyxl import load_workbook

from esgcrawl.errors import InputError
from esgcrawl.storage.tables import (
    read_links,
    read_table,
    write_links,
    write_results,
    write_table,
)
from esgcrawl.storage.textfiles import MAX_SLUG_LENGTH, slug_for_url, write_page_text
from esgcrawl.terms.aggregator import ResultTable


# ---------------------------------------------------------------------------
# Generic tables
# ---------------------------------------------------------------------------

class TestTables:
    def test_xlsx_header_and_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "t.xlsx"
        write_table(path, ["Website", "esg"], [["https://a.com", 3]], sheet_name="Results")

        header, rows = read_table(path)
        assert header == ["Website", "esg"]
        assert rows == [["https://a.com", 3]]

    def test_sheet_name(self, tmp_path: Path) -> None:
        path = tmp_path / "t.xlsx"
        write_table(path, ["Links"], [], sheet_name="Links")
        assert load_workbook(path).sheetnames == ["Links"]

    def test_header_only_table(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.xlsx"
        write_table(path, ["Website", "climate", "risk"], [])

        header, rows = read_table(path)
        assert header == ["Website", "climate", "risk"]
        assert rows == []

    def test_csv_by_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "t.csv"
        write_table(path, ["Links"], [["https://a.com"], ["https://b.com"]])

        assert path.read_text(encoding="utf-8").splitlines()[0] == "Links"
        _, rows = read_table(path)
        assert rows == [["https://a.com"], ["https://b.com"]]

    def test_creates_parent_directory(self, tmp_path: Path) -> None:
        path = tmp_path / "out" / "nested" / "t.xlsx"
        write_table(path, ["Links"], [["https://a.com"]])
        assert path.exists()

    def test_missing_file_raises_input_error(self, tmp_path: Path) -> None:
        with pytest.raises(InputError):
            read_table(tmp_path / "nope.xlsx")


# ---------------------------------------------------------------------------
# Links & results
# ---------------------------------------------------------------------------

class TestLinksTable:
    def test_links_preserve_order_and_duplicates(self, tmp_path: Path) -> None:
        path = tmp_path / "links.xlsx"
        links = ["https://bank.com/b", "https://bank.com/a", "https://bank.com/b"]
        write_links(path, links)
        assert read_links(path) == links

    def test_links_header(self, tmp_path: Path) -> None:
        path = tmp_path / "links.xlsx"
        write_links(path, ["https://bank.com"])
        header, _ = read_table(path)
        assert header == ["Links"]

    def test_blank_cells_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "links.xlsx"
        write_table(path, ["Links"], [["https://a.com"], [None], ["  "], ["https://b.com"]])
        assert read_links(path) == ["https://a.com", "https://b.com"]

    def test_empty_links_file(self, tmp_path: Path) -> None:
        path = tmp_path / "links.xlsx"
        write_links(path, [])
        assert read_links(path) == []


class TestResultsTable:
    def test_results_columns(self, tmp_path: Path) -> None:
        table = ResultTable(["climate", "risk"])
        table.add("https://bank.com/esg", {"climate": 2, "risk": 2})
        path = tmp_path / "results.xlsx"
        write_results(path, table)

        workbook = load_workbook(path)
        assert workbook.sheetnames == ["Results"]
        header, rows = read_table(path)
        assert header == ["Website", "climate", "risk"]
        assert rows == [["https://bank.com/esg", 2, 2]]


# ---------------------------------------------------------------------------
# Per-page text files
# ---------------------------------------------------------------------------

class TestSlugForUrl:
    def test_no_path_separators(self) -> None:
        slug = slug_for_url("https://bank.com/about/esg?lang=en#top")
        assert "/" not in slug
        assert ":" not in slug
        assert "?" not in slug
        assert "bank.com" in slug

    def test_scheme_and_path_readable(self) -> None:
        assert slug_for_url("https://bank.com/about").startswith("https-__bank.com_about")

    def test_case_kept(self) -> None:
        assert "ESG" in slug_for_url("https://bank.com/ESG")

    def test_deterministic(self) -> None:
        url = "https://bank.com/sustainability"
        assert slug_for_url(url) == slug_for_url(url)

    def test_length_capped(self) -> None:
        assert len(slug_for_url("https://bank.com/" + "a" * 500)) <= MAX_SLUG_LENGTH


class TestWritePageText:
    def test_writes_utf8_file(self, tmp_path: Path) -> None:
        path = write_page_text(tmp_path / "parsing_test", "https://bank.com/about", "Crédit vert")
        assert path.parent == tmp_path / "parsing_test"
        assert path.suffix == ".txt"
        assert path.read_text(encoding="utf-8") == "Crédit vert"

    def test_last_write_wins_on_collision(self, tmp_path: Path) -> None:
        first = write_page_text(tmp_path, "https://bank.com/a", "one")
        second = write_page_text(tmp_path, "https://bank.com/a", "two")
        assert first == second
        assert second.read_text(encoding="utf-8") == "two"
