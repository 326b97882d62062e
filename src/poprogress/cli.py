"""Command-line interface for poprogress."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from poprogress.api import collect_statistics
from poprogress.config import (
    DEFAULT_DOMAIN,
    DEFAULT_LOCALE_DIR,
    DEFAULT_REFERENCE_LOCALE,
    LOCALEDIR_ENV,
    StatsConfig,
)
from poprogress.errors import error_boundary
from poprogress.reporters import get_reporter

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="poprogress",
    help="Find untranslated strings in .po files and print translation statistics.",
    add_completion=False,
)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    package_logger = logging.getLogger("poprogress")
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    package_logger.setLevel(logging.DEBUG)


@app.command(context_settings=CONTEXT_SETTINGS)
@error_boundary
def main(
    locales: Annotated[
        Optional[list[str]],
        typer.Argument(help="Locales to report on (default: all locales in the locale directory)"),
    ] = None,
    color: Annotated[
        bool,
        typer.Option("--color", help="Colorize percentages"),
    ] = False,
    markdown: Annotated[
        bool,
        typer.Option("--markdown", help="Produce extensive Markdown-formatted output"),
    ] = False,
    locale_dir: Annotated[
        Path,
        typer.Option("--locale-dir", envvar=LOCALEDIR_ENV, help="Directory holding the locale catalogs"),
    ] = Path(DEFAULT_LOCALE_DIR),
    reference: Annotated[
        str,
        typer.Option("--reference", help="Reference (source language) locale"),
    ] = DEFAULT_REFERENCE_LOCALE,
    domain: Annotated[
        str,
        typer.Option("--domain", help="Gettext domain of the catalogs"),
    ] = DEFAULT_DOMAIN,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write the report to a file instead of stdout"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Parse .po files and print translation statistics.

    Useful in the shell to track progress, in a git hook, or to generate a
    Markdown report of translation status and contributors.
    """
    _configure_logging(verbose)

    config = StatsConfig(
        locale_dir=locale_dir,
        domain=domain,
        reference_locale=reference,
        color=color,
        markdown=markdown,
        output_path=output,
    )
    stats = collect_statistics(config, locales)

    if config.markdown:
        reporter = get_reporter("markdown")
    else:
        reporter = get_reporter("plain", color=config.color)

    output_path = config.get_output_path()
    if output_path is not None:
        written = reporter.write(stats, output_path)
        logger.info("Report written to %s", written)
        return

    content = reporter.render(stats)
    if content:
        typer.echo(
            content,
            nl=not content.endswith("\n"),
            color=True if config.color else None,
        )


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
