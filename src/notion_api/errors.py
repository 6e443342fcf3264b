"""Typed exception hierarchy for Notion-related errors.

This module defines all custom exceptions used by the Notion API wrapper.
All exceptions inherit from NotionError so a single page visit can catch
every fetch failure at once, and carry enough context for a useful log line.
"""

from typing import Optional


class SyncError(Exception):
    """Base exception for all notion-wiki-sync errors.

    Use this to catch any application-level error from the sync tool.
    """
    pass


class NotionError(SyncError):
    """Base exception for all Notion-related errors."""
    pass


class InvalidCredentialsError(NotionError):
    """Raised when the Notion integration token is rejected."""

    def __init__(self, endpoint: str = "https://api.notion.com"):
        super().__init__(f"Notion API token is invalid (endpoint: {endpoint})")
        self.endpoint = endpoint


class PageNotFoundError(NotionError):
    """Raised when a requested page does not exist or is not shared."""

    def __init__(self, page_id: str):
        super().__init__(f"Page {page_id} not found")
        self.page_id = page_id


class NotAPageError(NotionError):
    """Raised when the retrieved object is not a standard page."""

    def __init__(self, page_id: str, object_type: Optional[str] = None):
        message = f"Object {page_id} is not a standard page"
        if object_type:
            message += f" (got '{object_type}')"
        super().__init__(message)
        self.page_id = page_id
        self.object_type = object_type


class APIUnreachableError(NotionError):
    """Raised when the Notion API is not available or unreachable."""

    def __init__(self, endpoint: str = "https://api.notion.com"):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class APIAccessError(NotionError):
    """Raised when a Notion API call fails for any other reason."""

    def __init__(self, message: str = "Notion API failure"):
        super().__init__(message)
