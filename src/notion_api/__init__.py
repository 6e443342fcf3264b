"""Notion client library for wiki sync.

This package wraps the official notion-client SDK with typed errors and
request throttling, exposing only the two read calls the sync needs.
"""

from .errors import (
    SyncError,
    NotionError,
    InvalidCredentialsError,
    PageNotFoundError,
    NotAPageError,
    APIUnreachableError,
    APIAccessError,
)

__all__ = [
    "SyncError",
    "NotionError",
    "InvalidCredentialsError",
    "PageNotFoundError",
    "NotAPageError",
    "APIUnreachableError",
    "APIAccessError",
]
