"""Main CLI entry point for notion-wiki-sync command.

This module provides the Typer application that serves as the entry point
for the notion-wiki-sync command-line tool. It is designed to run as a
GitHub Actions step but works the same from a shell with a .env file.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.cli.sync_command import SyncCommand
from src.page_sync.config_loader import ConfigLoader

__version__ = "0.1.0"

app = typer.Typer(
    name="notion-wiki-sync",
    help="""Sync a Notion page tree into a GitHub repository wiki.

QUICK START:
  notion-wiki-sync --page-id <notion_page_id>                 # Sync a page and its children
  notion-wiki-sync --page-id <id> --prefix notion             # Namespace wiki page names
  notion-wiki-sync --event-path $GITHUB_EVENT_PATH            # Take the page from a webhook event

Credentials are read from NOTION_API_TOKEN, GITHUB_TOKEN and GITHUB_REPOSITORY
(or a .env file).""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=False,
)

# Module logger
logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:  # verbosity >= 2
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

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
        log_file = log_path / f"notion-wiki-sync_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


@app.command()
def main_command(
    page_id: Optional[str] = typer.Option(
        None,
        "--page-id",
        help="Root Notion page ID (default: NOTION_PAGE_ID or the webhook event)",
        metavar="ID",
    ),
    prefix: Optional[str] = typer.Option(
        None,
        "--prefix",
        "--wiki-path-prefix",
        help="Prefix for wiki page names (default: WIKI_PATH_PREFIX or none)",
    ),
    max_depth: Optional[str] = typer.Option(
        None,
        "--max-depth",
        help="Maximum recursion depth, a positive integer (default: MAX_DEPTH or 10)",
    ),
    event_path: Optional[str] = typer.Option(
        None,
        "--event-path",
        help="Webhook event JSON file (default: GITHUB_EVENT_PATH)",
        metavar="PATH",
    ),
    config_path: str = typer.Option(
        ConfigLoader.DEFAULT_CONFIG_PATH,
        "--config",
        help="Optional YAML configuration file",
        metavar="PATH",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
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
    """Sync a Notion page tree into a GitHub repository wiki."""
    if version:
        typer.echo(f"notion-wiki-sync version {__version__}")
        raise typer.Exit()

    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    try:
        sync_cmd = SyncCommand(config_path=config_path, output_handler=output)
        exit_code = sync_cmd.run(
            page_id=page_id,
            prefix=prefix,
            max_depth=max_depth,
            event_path=event_path,
        )
    except Exception as e:
        logger.exception("Unexpected error during sync")
        output.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    raise typer.Exit(exit_code)


def main() -> None:
    """Main entry point for the CLI application."""
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
