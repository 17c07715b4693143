from __future__ import annotations

import sys
from pathlib import Path

import typer

from quickopen import __version__
from quickopen.log import get_logger, setup_logging
from quickopen.models import SearchResult
from quickopen.rendering import format_result_row, read_candidates
from quickopen.search import DEFAULT_MAX_MISSES, DEFAULT_MAX_RESULTS, FuzzySearch

__all__ = [
    "FuzzySearch",
    "SearchResult",
    "cli",
    "run",
]

logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"quickopen {__version__}")
    raise typer.Exit()


cli = typer.Typer(
    add_completion=False,
    help="Rank candidate paths against a fuzzy quick-open query.",
)


@cli.command()
def run(
    query: str = typer.Argument(
        ...,
        help="Whitespace separated query tokens. All lowercase means case-insensitive.",
    ),
    input_path: Path | None = typer.Option(
        None,
        "--input",
        "-i",
        help="File with one candidate per line. Reads stdin when omitted.",
    ),
    max_results: int = typer.Option(
        DEFAULT_MAX_RESULTS,
        "--max-results",
        "-n",
        min=0,
        help="Maximum number of results to print.",
    ),
    max_misses: int = typer.Option(
        DEFAULT_MAX_MISSES,
        "--max-misses",
        min=0,
        help="Query characters allowed to go unmatched per candidate.",
    ),
    start_offset: int = typer.Option(
        0,
        "--start-offset",
        min=0,
        help="Ignore candidate characters before this index.",
    ),
    exact: bool = typer.Option(
        False,
        "--exact",
        help="Require every token to appear as one contiguous run.",
    ),
    scores: bool = typer.Option(
        False,
        "--scores",
        help="Prefix each result with its score.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log search statistics to stderr.",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Log level used when --verbose is not given.",
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    setup_logging("DEBUG" if verbose else log_level)

    if input_path is None:
        candidates = read_candidates(sys.stdin)
    else:
        try:
            with input_path.open(encoding="utf-8") as handle:
                candidates = read_candidates(handle)
        except (OSError, UnicodeDecodeError) as exc:
            typer.echo(f"Failed to read candidates: {exc!s}", err=True)
            raise typer.Exit(code=1) from exc

    logger.debug("Candidates loaded", count=len(candidates), source=str(input_path or "-"))

    search = FuzzySearch(
        allow_subsequences=not exact,
        max_misses=max_misses,
        start_offset=start_offset,
        max_results=max_results,
    )
    search.set_query(query)
    for result in search.search_all(candidates):
        typer.echo(format_result_row(result, show_score=scores))


if __name__ == "__main__":
    cli()
