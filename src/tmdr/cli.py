"""
tmdr CLI
Command-line interface for looking up medical acronyms.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tmdr import __version__
from tmdr.acronyms import (
    Acronym,
    AcronymNotFoundError,
    AcronymRepository,
    DatasetLoadError,
    NoFuzzyMatchError,
)
from tmdr.acronyms.catalog import get_repository, load_repository
from tmdr.config import settings

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

EXIT_NOT_FOUND = 1
EXIT_LOAD_ERROR = 2


def configure_logging(level: str) -> None:
    """Configure root logging for a CLI run."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def open_repository(data: Optional[Path]) -> AcronymRepository:
    """Load the repository, exiting with an error message on failure."""
    try:
        return load_repository(data) if data else get_repository()
    except DatasetLoadError as e:
        err_console.print(f"❌ [red]Error loading acronym database: {escape(str(e))}[/red]")
        sys.exit(EXIT_LOAD_ERROR)


def print_acronym(a: Acronym) -> None:
    console.print(escape(str(a)), style="bold")
    if a.definition:
        console.print(escape(a.definition))


def print_json(data) -> None:
    # click.echo keeps long strings on one line, rich would wrap them
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def print_table(title: str, acronyms: list[Acronym]) -> None:
    table = Table(title=title)
    table.add_column("Acronym", style="cyan")
    table.add_column("Full Form")
    table.add_column("Definition", style="dim")

    for a in acronyms:
        table.add_row(escape(a.acronym), escape(a.full_form), escape(a.definition) or "-")

    console.print(table)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("acronym", required=False)
@click.option("--random", "show_random", is_flag=True, help="Display a random acronym")
@click.option("--list", "show_all", is_flag=True, help="List all acronyms")
@click.option("--search", "-s", "search", metavar="TEXT", help="Filter acronyms by code or full form")
@click.option("--limit", "-n", type=int, default=None, help="Number of suggestions when not found")
@click.option("--data", type=click.Path(dir_okay=False, path_type=Path), help="Path to an acronym CSV file")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.version_option(__version__, "--version", "-v", prog_name="tmdr", message="%(prog)s version %(version)s")
@click.pass_context
def cli(
    ctx,
    acronym: Optional[str],
    show_random: bool,
    show_all: bool,
    search: Optional[str],
    limit: Optional[int],
    data: Optional[Path],
    as_json: bool,
):
    """tmdr - Too Medical; Didn't Read.

    Look up a medical ACRONYM, e.g. `tmdr abg`.
    """
    if acronym is not None and not acronym.strip():
        acronym = None

    if not (acronym or show_random or show_all or search is not None):
        click.echo(ctx.get_help())
        return

    if acronym and (show_random or show_all or search is not None):
        raise click.UsageError("ACRONYM cannot be combined with --random, --list or --search.")

    repo = open_repository(data)

    if show_random:
        try:
            a = repo.random()
        except AcronymNotFoundError as e:
            err_console.print(f"❌ [red]Error getting random acronym: {escape(str(e))}[/red]")
            sys.exit(EXIT_NOT_FOUND)
        if as_json:
            print_json(a.to_dict())
        else:
            print_acronym(a)
        return

    if show_all or search is not None:
        acronyms = repo.filter(search) if search else repo.all()
        if as_json:
            print_json([a.to_dict() for a in acronyms])
        elif not acronyms:
            console.print(f"[yellow]No acronyms match '{escape(search or '')}'[/yellow]")
        else:
            title = f"Acronyms matching '{search}'" if search else f"Acronyms ({len(acronyms)})"
            print_table(escape(title), acronyms)
        return

    lookup(acronym, limit if limit is not None else settings.max_results, as_json, repo)


def lookup(query: str, limit: int, as_json: bool, repo: AcronymRepository) -> None:
    """Exact lookup with a fuzzy fallback."""
    try:
        a = repo.find(query)
    except AcronymNotFoundError:
        logger.debug(f"No exact match for {query!r}, trying fuzzy search")
    else:
        if as_json:
            print_json(a.to_dict())
        else:
            print_acronym(a)
        return

    try:
        suggestions = repo.find_fuzzy(query, limit)
    except NoFuzzyMatchError:
        if as_json:
            print_json({"query": query, "found": False, "suggestions": []})
        else:
            console.print(f"Acronym '{escape(query)}' not found.")
            console.print("Try 'tmdr --help' for usage information.")
        sys.exit(EXIT_NOT_FOUND)

    if as_json:
        print_json({
            "query": query,
            "found": False,
            "suggestions": [s.to_dict() for s in suggestions],
        })
    else:
        console.print(f"'{escape(query)}' not found. Did you mean:")
        for s in suggestions:
            console.print(f"  {escape(str(s))}")
        console.print("\nTry one of the suggestions above or 'tmdr --help' for usage.")
    sys.exit(EXIT_NOT_FOUND)


def main():
    """CLI entry point."""
    configure_logging(settings.log_level)
    cli()


if __name__ == "__main__":
    main()
