"""Typed exception hierarchy for wiki store errors.

All exceptions inherit from WikiStoreError so the traversal can treat any
failed write as a single per-page failure.
"""

from typing import Optional

from src.notion_api.errors import SyncError


class WikiStoreError(SyncError):
    """Base exception for all wiki store errors."""
    pass


class StaleRevisionError(WikiStoreError):
    """Raised when the store rejects a write because the revision marker is stale."""

    def __init__(self, path: str, sha: Optional[str] = None):
        message = f"Wiki page {path} was modified concurrently"
        if sha:
            message += f" (revision {sha} is stale)"
        super().__init__(message)
        self.path = path
        self.sha = sha


class WikiAccessError(WikiStoreError):
    """Raised when a wiki store request fails for any other reason."""

    def __init__(self, path: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        message = f"Wiki store request failed for {path}"
        if status_code is not None:
            message += f" (HTTP {status_code})"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path
        self.status_code = status_code
        self.reason = reason
