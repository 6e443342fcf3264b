"""Command-line interface for Notion → GitHub wiki sync.

This package provides the `notion-wiki-sync` CLI tool: it gathers
credentials and settings, locates the root page (explicitly or from a
webhook event) and reports the sync result as GitHub Actions step outputs.
"""

from .sync_command import SyncCommand
from .models import ExitCode
from .errors import (
    CLIError,
    MissingCredentialsError,
    PayloadError,
    MissingPageIdError,
)

__all__ = [
    'SyncCommand',
    'ExitCode',
    'CLIError',
    'MissingCredentialsError',
    'PayloadError',
    'MissingPageIdError',
]
