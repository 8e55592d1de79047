"""Command line front end for the fussy completion style."""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from fussy.completion import FussyCompletionStyle
from fussy.config import FussyConfig, load_config
from fussy.domain.types import CompletionContext
from fussy.logger import get_logger, setup_logger
from fussy.pipeline import render

cli = typer.Typer(
    name="fussy",
    help="Fuzzy rank candidate strings against a query",
    epilog="""
    Examples:
    $ ls | fussy rank mnpy
    $ fussy expand src/fu --category file paths.txt
    """,
    add_completion=False,
)

console = Console()


def _read_candidates(source: Optional[Path]) -> list[str]:
    if source is None:
        lines = sys.stdin.read().splitlines()
    else:
        lines = source.read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line]


def _build_style(config_path: Optional[Path], debug: bool) -> FussyCompletionStyle:
    setup_logger(log_level="DEBUG" if debug else "INFO", console_output=debug)
    return FussyCompletionStyle(load_config(config_path))


@cli.command()
def rank(
    query: str = typer.Argument(..., help="Text typed so far"),
    source: Optional[Path] = typer.Argument(None, exists=True, dir_okay=False, help="File with one candidate per line (default: stdin)"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="JSON configuration file"),
    category: Optional[str] = typer.Option(None, "--category", help="Completion category, e.g. 'file'"),
    limit: int = typer.Option(20, "--limit", "-n", help="Number of results to show (0 for all)"),
    debug: bool = typer.Option(False, "--debug", help="Log pipeline decisions to stderr"),
):
    """Print the candidates matching QUERY, best first, with matches highlighted."""
    style = _build_style(config_path, debug)
    logger = get_logger("main")

    candidates = _read_candidates(source)
    context = CompletionContext(input_text=query, category=category)
    ranked = style.complete(query, candidates, context=context)
    logger.info(f"{len(ranked)} of {len(candidates)} candidates matched {query!r}")

    shown = ranked[:limit] if limit > 0 else ranked
    config: FussyConfig = style.config
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("score", justify="right", style="dim")
    table.add_column("candidate")
    for candidate in shown:
        score = "-" if candidate.score is None else f"{candidate.score:g}"
        table.add_row(score, render(candidate, config.matched_style, config.divergence_style))
    console.print(table)

    if not ranked:
        raise typer.Exit(code=1)


@cli.command()
def expand(
    text: str = typer.Argument(..., help="Input to expand"),
    source: Optional[Path] = typer.Argument(None, exists=True, dir_okay=False, help="File with one candidate per line (default: stdin)"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="JSON configuration file"),
    category: Optional[str] = typer.Option(None, "--category", help="Completion category, e.g. 'file'"),
    debug: bool = typer.Option(False, "--debug", help="Log pipeline decisions to stderr"),
):
    """Print TEXT expanded to the longest prefix shared by its matches."""
    style = _build_style(config_path, debug)

    candidates = _read_candidates(source)
    context = CompletionContext(input_text=text, category=category)
    result = style.try_completion(text, candidates, context=context)

    if result is None:
        console.print("[red]No match[/red]")
        raise typer.Exit(code=1)
    if result is True:
        console.print(f"{text} [green](sole completion)[/green]")
        return

    expanded, _ = result
    console.print(expanded, markup=False, highlight=False)
