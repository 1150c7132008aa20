"""ESG term crawler CLI — entry-point for both crawl phases.

Usage:
    python cli/main.py --help

Commands:
    discover  → Phase 1 (seed pages → links file)
    extract   → Phase 2 (links file → per-page text + results file)
    run       → Phase 1 then Phase 2
    count     → count the vocabulary in a local text file (no browser)
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from esgcrawl.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import dataclasses
import logging
from typing import Optional

import typer

from esgcrawl.config import Settings, settings
from esgcrawl.logging_setup import setup_logging

logger = logging.getLogger("esgcrawl.cli")

app = typer.Typer(
    name="esgcrawl",
    help="Crawl seed sites and count ESG vocabulary terms per page.",
    no_args_is_help=True,
)


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else settings


@app.callback()
def main(
    ctx: typer.Context,
    workspace: Optional[Path] = typer.Option(
        None, "--workspace", "-w", help="Directory holding inputs and outputs."
    ),
    headless: Optional[bool] = typer.Option(
        None, "--headless/--headed", help="Run the browser without a window."
    ),
    settle_delay: Optional[float] = typer.Option(
        None, "--settle-delay", help="Seconds to wait after each page load."
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG | INFO | WARNING."),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also log to this file."),
) -> None:
    """Resolve settings once for the sub-command that follows."""
    overrides = {}
    if workspace is not None:
        overrides["workspace_dir"] = workspace
    if headless is not None:
        overrides["headless"] = headless
    if settle_delay is not None:
        overrides["settle_delay"] = settle_delay
    if log_level is not None:
        overrides["log_level"] = log_level
    if log_file is not None:
        overrides["log_file"] = str(log_file)

    resolved = dataclasses.replace(settings, **overrides)
    setup_logging(resolved.log_level, resolved.log_file)
    ctx.obj = resolved


# ---------------------------------------------------------------------------
# Phase 1 — link discovery
# ---------------------------------------------------------------------------
@app.command("discover")
def discover(ctx: typer.Context) -> None:
    """Visit every seed page and save its same-site links."""
    from esgcrawl.pipeline.discover import run_discovery

    cfg = _settings(ctx)
    try:
        links = run_discovery(cfg)
    except Exception as e:
        logger.exception("Error: %s", e)
        raise typer.Exit(code=1)
    typer.echo(f"[discover] {len(links)} links written to {cfg.links_path}")


# ---------------------------------------------------------------------------
# Phase 2 — term extraction
# ---------------------------------------------------------------------------
@app.command("extract")
def extract(ctx: typer.Context) -> None:
    """Visit every saved link and write the per-page term counts."""
    from esgcrawl.pipeline.extract import run_extraction

    cfg = _settings(ctx)
    try:
        table = run_extraction(cfg)
    except Exception as e:
        logger.exception("Error: %s", e)
        raise typer.Exit(code=1)
    typer.echo(f"[extract] {len(table)} pages written to {cfg.results_path}")


@app.command("run")
def run(ctx: typer.Context) -> None:
    """Run link discovery, then term extraction."""
    from esgcrawl.pipeline.discover import run_discovery
    from esgcrawl.pipeline.extract import run_extraction

    cfg = _settings(ctx)
    try:
        links = run_discovery(cfg)
        typer.echo(f"[run] {len(links)} links written to {cfg.links_path}")
        table = run_extraction(cfg)
    except Exception as e:
        logger.exception("Error: %s", e)
        raise typer.Exit(code=1)
    typer.echo(f"[run] {len(table)} pages written to {cfg.results_path}")


# ---------------------------------------------------------------------------
# Offline check of the counting core
# ---------------------------------------------------------------------------
@app.command("count")
def count(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Text (or HTML) file to scan."),
    terms: Optional[Path] = typer.Option(
        None, "--terms", help="Vocabulary JSON file (defaults to the configured one)."
    ),
    all_terms: bool = typer.Option(False, "--all", help="Also list terms with zero hits."),
) -> None:
    """Count the vocabulary in a local file and print one line per term."""
    from esgcrawl.inputs import load_vocabulary
    from esgcrawl.scraper.extractor import page_text
    from esgcrawl.terms.counter import count_terms

    cfg = _settings(ctx)
    try:
        vocabulary = load_vocabulary(terms or cfg.terms_path)
        text = page_text(path.read_text(encoding="utf-8"))
        counts = count_terms(text, vocabulary, escape=cfg.escape_terms)
    except Exception as e:
        logger.exception("Error: %s", e)
        raise typer.Exit(code=1)

    for term, hits in counts.items():
        if hits or all_terms:
            typer.echo(f"  {term}: {hits}")
    typer.echo(f"[count] {sum(counts.values())} hits across {len(vocabulary)} terms")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
