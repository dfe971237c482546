"""Main CLI entry point for the outline-import command.

This module provides the Typer application that serves as the entry point
for the outline-import command-line tool. Each invocation either lists the
collections visible to the token (--list) or imports a Markdown folder into
one collection.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from .. import __version__
from ..folder_mapper.config_loader import ConfigLoader
from ..outline_client.auth import Authenticator
from ..outline_client.errors import ConfigurationError
from .import_command import ImportCommand
from .list_command import ListCollectionsCommand
from .models import ExitCode
from .output import OutputHandler

DEFAULT_FOLDER = "output_paper_markdown"

app = typer.Typer(
    name="outline-import",
    help="Import a folder of Markdown files into an Outline collection.",
    add_completion=False,
    rich_markup_mode=None,
)

# Module logger
logger = logging.getLogger(__name__)


def _configure_logging(debug: bool, logdir: Optional[str] = None) -> None:
    """Configure logging for the outline_import namespace.

    Only the package logger is configured so third-party libraries keep
    their own levels. The root logger is left unchanged.

    Args:
        debug: Log at DEBUG level instead of WARNING
        logdir: Optional directory for log files (creates timestamped log file)
    """
    level = logging.DEBUG if debug else logging.WARNING

    app_logger = logging.getLogger("outline_import")
    app_logger.setLevel(level)
    app_logger.handlers.clear()

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"outline-import_{timestamp}.log"

        # The file always gets INFO so per-file outcomes are kept
        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG if debug else logging.INFO)
        file_handler.setFormatter(logging.Formatter(file_format, datefmt=date_format))
        app_logger.addHandler(file_handler)
        app_logger.setLevel(min(level, logging.INFO))

        logger.info(f"Logging to file: {log_file}")


@app.command()
def main_command(
    folder: Optional[str] = typer.Option(
        None,
        "--folder",
        help=f"Folder containing Markdown files (default: {DEFAULT_FOLDER})",
        metavar="PATH",
    ),
    host: Optional[str] = typer.Option(
        None,
        "--host",
        help="Outline host URL (default: $OUTLINE_HOST or https://app.getoutline.com)",
        metavar="URL",
    ),
    collection: Optional[str] = typer.Option(
        None,
        "--collection",
        help="Collection ID to import documents into",
        metavar="ID",
    ),
    token: Optional[str] = typer.Option(
        None,
        "--token",
        help="Outline API token (default: $OUTLINE_API_TOKEN)",
    ),
    list_collections: bool = typer.Option(
        False,
        "--list",
        help="List collections and exit",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging",
    ),
    config: Optional[str] = typer.Option(
        None,
        "--config",
        help="YAML file with folder/host/collection defaults "
             "(default: .outline-import/config.yaml if present)",
        metavar="FILE",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Import a folder of Markdown files into an Outline collection.

    \b
    The folder structure is recreated as nested documents: every directory
    becomes an empty document and the files inside it are imported under it.

    \b
    EXAMPLES:
      outline-import --list
      outline-import --folder ./docs --collection <collection-id>
    """
    if version:
        typer.echo(f"outline-import version {__version__}")
        raise typer.Exit()

    _configure_logging(debug, logdir)
    output = OutputHandler(verbose=debug, no_color=no_color)

    try:
        defaults = ConfigLoader.load_default(config)
    except ConfigurationError as e:
        logger.error(str(e))
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    authenticator = Authenticator(token=token, host=host or defaults.host)

    if list_collections:
        exit_code = ListCollectionsCommand(
            authenticator=authenticator,
            output_handler=output,
        ).run()
    else:
        exit_code = ImportCommand(
            authenticator=authenticator,
            output_handler=output,
        ).run(
            folder=folder or defaults.folder or DEFAULT_FOLDER,
            collection_id=collection or defaults.collection,
        )

    raise typer.Exit(exit_code)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m outline_import.cli.main
if __name__ == "__main__":
    main()
