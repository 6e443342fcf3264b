"""Typed exception hierarchy for page sync errors.

This module defines the exceptions raised by the sync engine and its
configuration layer. All inherit from PageSyncError.
"""

from typing import Optional

from src.notion_api.errors import SyncError


class PageSyncError(SyncError):
    """Base exception for all page sync errors."""
    pass


class ConfigError(PageSyncError):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, config_field: Optional[str] = None):
        if config_field:
            full_message = f"Configuration error in field '{config_field}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.config_field = config_field
        self.original_message = message
