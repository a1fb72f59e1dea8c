from pathlib import Path
from typing import Optional

import typer

from namesearch.config import SUPPORTED_LOCALES, load_search_config
from namesearch.errors import ConfigError
from namesearch.logger import get_logger, setup_logger
from namesearch.tui.app import SAMPLE_NAMES, NameSearchApp
from namesearch.utils import read_names

cli = typer.Typer(
    name="namesearch",
    help="Incremental name search with debounced filtering and keyboard navigation",
    epilog="""
    Examples:
    $ namesearch people.txt --debounce-ms 150 --locale en
    """,
    add_completion=False,
)


@cli.command()
def main(
    names_file: Optional[Path] = typer.Argument(
        None, exists=True, dir_okay=False, readable=True, help="Text file with one name per line"
    ),
    debounce_ms: Optional[int] = typer.Option(None, "--debounce-ms", help="Debounce delay in milliseconds"),
    locale: Optional[str] = typer.Option(None, "--locale", help=f"Announcement language ({', '.join(SUPPORTED_LOCALES)})"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write logs to this file"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Open the name search in the terminal."""
    try:
        config = load_search_config()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    if debounce_ms is not None:
        config.debounce_ms = debounce_ms
    if locale is not None:
        if locale not in SUPPORTED_LOCALES:
            raise typer.BadParameter(f"expected one of {', '.join(SUPPORTED_LOCALES)}", param_hint="--locale")
        config.locale = locale

    setup_logger(log_file=log_file, log_level="DEBUG" if debug else config.log_level)
    logger = get_logger("main")

    names = read_names(names_file) if names_file else SAMPLE_NAMES
    logger.info(f"Loaded {len(names)} names from {names_file or 'built-in sample'}")
    logger.info(f"Search config: debounce_ms={config.debounce_ms}, locale={config.locale}")

    app = NameSearchApp(names=names, config=config)
    app.run()
    if app.selected is not None:
        typer.echo(app.selected)


def run():
    """Entry point for the namesearch command."""
    cli()


if __name__ == "__main__":
    run()
