"""deckstats CLI: report generation and configuration commands."""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from deckstats.application.config import resolve_config, require_run_settings
from deckstats.application.report_service import ReportService, summary_line
from deckstats.consts import VERSION
from deckstats.domain.exceptions import DeckStatsError
from deckstats.infrastructure.sqlite_source import SqliteRecordSource

# ---------------------------------------------------------------------------
# Root app
# ---------------------------------------------------------------------------

app = typer.Typer(
    help="deckstats: Render Anki deck progress into a static HTML page.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

config_app = typer.Typer(help="Inspect deckstats configuration.")
app.add_typer(config_app, name="config")

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def _apply_verbosity(verbose: int):
    logging.getLogger().setLevel(logging.DEBUG if verbose >= 1 else logging.INFO)


def _version_callback(value: bool):
    if value:
        typer.echo(f"deckstats {VERSION}")
        raise typer.Exit()


# ---------------------------------------------------------------------------
# Global callback
# ---------------------------------------------------------------------------


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity. Repeat for more detail."
        ),
    ] = 0,
    version: Annotated[
        bool,
        typer.Option(
            "--version", callback=_version_callback, is_eager=True, help="Show version and exit."
        ),
    ] = False,
):
    """Global settings for deckstats."""
    ctx.ensure_object(dict)
    ctx.obj["verbose_bonus"] = verbose
    if verbose:
        _apply_verbosity(verbose)


# ---------------------------------------------------------------------------
# Root commands
# ---------------------------------------------------------------------------


@app.command()
def report(
    ctx: typer.Context,
    collection_path: Annotated[
        Path | None,
        typer.Option("--collection-path", "-c", help="Path to the Anki collection database."),
    ] = None,
    deck_id: Annotated[
        str | None,
        typer.Option("--deck-id", "-d", help="Anki deck ID to generate statistics for."),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Path to the output HTML file to generate."),
    ] = None,
    template: Annotated[
        Path | None,
        typer.Option("--template", "-t", help="Path to the template HTML file to use."),
    ] = None,
):
    """[bold green]Generate[/bold green] the HTML progress report for a deck."""
    try:
        config = resolve_config(
            {
                "collection_path": collection_path,
                "deck_id": deck_id,
                "output_path": output,
                "template_path": template,
                "verbose": (ctx.obj or {}).get("verbose_bonus") or None,
            }
        )
        _apply_verbosity(config.verbose)
        collection, deck = require_run_settings(config)

        with SqliteRecordSource(collection) as source:
            result = ReportService(source).generate(
                deck, config.template_path, config.output_path
            )
    except DeckStatsError as e:
        typer.secho(f"Error: {e}", fg="red", err=True)
        raise typer.Exit(1)

    typer.echo(summary_line(result.stats))
    typer.echo(f"writing generated html to {result.output_path}")


# ---------------------------------------------------------------------------
# Config subgroup
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show():
    """Display final resolved configuration."""
    config = resolve_config()
    d = {k: str(v) if isinstance(v, Path) else v for k, v in config.model_dump().items()}
    typer.echo(json.dumps(d, indent=2))
