"""Typer CLI entrypoint for multi-search."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, Optional, TextIO

import typer
from pydantic import ValidationError
from rich import box
from rich.console import Console
from rich.table import Table

from .config import QueryRequest, SearchSettings, load_settings
from .errors import ConfigurationError
from .logging_conf import configure_logging
from .orchestrator import RunSummary, SearchRunner

app = typer.Typer(
    help="Query several web search engines at once and print cleaned results.",
    add_completion=False,
    rich_markup_mode=None,
)

err_console = Console(stderr=True)


def read_terms(stream: TextIO, multi: bool) -> list[str]:
    """Read extra terms: one per line when ``multi``, else one per word."""

    text = stream.read()
    if multi:
        return [" ".join(line.split()).replace(" ", "+") for line in text.splitlines() if line.strip()]
    return text.split()


def resolve_terms(
    args: list[str] | None,
    *,
    multi: bool,
    no_terms: bool,
    stdin: TextIO | None = None,
) -> list[str]:
    """Collect additional terms from arguments, falling back to stdin."""

    if no_terms:
        return []
    if args:
        return ["+".join(args)] if multi else list(args)
    stream = stdin if stdin is not None else sys.stdin
    if stream is None or stream.isatty():
        return []
    return read_terms(stream, multi)


def build_query(
    search: str | None,
    terms: list[str],
    *,
    exact: bool = False,
    search_exact: bool = False,
    multi_exact: bool = False,
    privacy: bool = True,
) -> QueryRequest:
    try:
        return QueryRequest(
            base_term=search,
            terms=terms,
            exact=exact,
            search_exact=search_exact,
            multi_exact=multi_exact,
            privacy=privacy,
        )
    except ValidationError as exc:
        raise ConfigurationError("must provide search term(s)") from exc


def _render_summary(summary: RunSummary) -> Table:
    table = Table(title="Search summary", box=box.SIMPLE_HEAD)
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="green", justify="right")
    table.add_row("URLs", str(summary.urls))
    table.add_row("Succeeded", str(summary.succeeded))
    table.add_row("Failed", str(summary.failed))
    table.add_row("Results", str(summary.results))
    return table


@app.command(help="Search the base term combined with each additional term on every engine.")
def main(
    terms: Annotated[
        Optional[list[str]],
        typer.Argument(help="Additional terms; read from stdin when omitted.", show_default=False),
    ] = None,
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-s", help="Base search term(s).", show_default=False),
    ] = None,
    multi: Annotated[
        bool, typer.Option("--multi", "-m", help="Combine all additional terms into one query.")
    ] = False,
    no_terms: Annotated[
        bool, typer.Option("--no-terms", "-n", help="Search the base term only.")
    ] = False,
    privacy: Annotated[
        Optional[bool],
        typer.Option(
            "--privacy/--no-privacy",
            "-p/-P",
            help="Use brave, duck duck go, mojeek and qwant instead of bing, brave, duck duck go and yahoo. [default: privacy]",
            show_default=False,
        ),
    ] = None,
    exact: Annotated[
        bool, typer.Option("--exact", "-e", help="Exact matching for the entire query.")
    ] = False,
    search_exact: Annotated[
        bool, typer.Option("--search-exact", "-se", help="Exact matching for the base term(s).")
    ] = False,
    multi_exact: Annotated[
        bool,
        typer.Option("--multi-exact", "-me", help="Exact matching for combined additional terms."),
    ] = False,
    # Settings options default to None so the settings file fills the gaps
    concurrency: Annotated[
        Optional[int],
        typer.Option("--concurrency", "-c", help="Max number of concurrent requests. [default: 10]", show_default=False),
    ] = None,
    os_hint: Annotated[
        Optional[str],
        typer.Option(
            "--os", "-os", help="Operating system for browser headers: l, m or w. [default: w]", show_default=False
        ),
    ] = None,
    timeout: Annotated[
        Optional[int],
        typer.Option("--timeout", "-t", help="Request timeout in ms. [default: 5000]", show_default=False),
    ] = None,
    length: Annotated[
        Optional[int],
        typer.Option("--length", "-l", help="Max length of result summary. [default: 500]", show_default=False),
    ] = None,
    urls: Annotated[
        Optional[bool],
        typer.Option(
            "--urls/--no-urls", "-u/-U", help="Include result urls in output. [default: urls]", show_default=False
        ),
    ] = None,
    debug: Annotated[
        Optional[bool],
        typer.Option(
            "--debug/--no-debug", "-d/-D", help="Print each search url to help debug queries.", show_default=False
        ),
    ] = None,
    config: Annotated[
        Optional[Path],
        typer.Option("--config", help="YAML or JSON settings file.", show_default=False),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging.")] = False,
) -> None:
    overrides = {
        "concurrency": concurrency,
        "os_hint": os_hint,
        "timeout_ms": timeout,
        "max_length": length,
        "include_urls": urls,
        "debug": debug,
        "privacy": privacy,
    }
    try:
        settings: SearchSettings = load_settings(config, overrides)
        # multi-exact quotes the combined terms, so it always combines them
        combine = multi or multi_exact
        query = build_query(
            search,
            resolve_terms(terms, multi=combine, no_terms=no_terms),
            exact=exact,
            search_exact=search_exact,
            multi_exact=multi_exact,
            privacy=settings.privacy,
        )
    except ConfigurationError as exc:
        err_console.print(str(exc), style="red")
        raise typer.Exit(code=1) from exc

    logger = configure_logging(verbose, settings.log_file)
    runner = SearchRunner(settings, logger=logger.bind(component="runner"))
    summary = runner.run(query)
    if verbose:
        err_console.print(_render_summary(summary))


__all__ = ["app", "build_query", "read_terms", "resolve_terms"]
