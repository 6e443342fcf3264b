"""Typed exception hierarchy for CLI-related errors.

These cover run-level failures detected before any network activity:
missing credentials, malformed event payloads and missing page IDs.
"""

from typing import Optional

from src.notion_api.errors import SyncError


class CLIError(SyncError):
    """Base exception for all CLI-related errors."""
    pass


class MissingCredentialsError(CLIError):
    """Raised when required credentials are not set."""

    def __init__(self, missing: list):
        super().__init__(
            f"Missing required credential(s): {', '.join(missing)}"
        )
        self.missing = missing


class PayloadError(CLIError):
    """Raised when the webhook event payload is unreadable or malformed."""

    def __init__(self, message: str, event_path: Optional[str] = None):
        if event_path:
            message = f"{message} ({event_path})"
        super().__init__(message)
        self.event_path = event_path


class MissingPageIdError(CLIError):
    """Raised when no root page ID can be determined."""

    def __init__(self):
        super().__init__(
            'No Notion page ID found. Provide either "--page-id" or trigger '
            'via webhook with page ID.'
        )
