"""Versioned wiki store writer.

This package commits rendered Markdown pages into a GitHub repository wiki
through the repository contents API.
"""

from .errors import WikiStoreError, StaleRevisionError, WikiAccessError
from .wiki_writer import WikiWriter

__all__ = [
    'WikiWriter',
    'WikiStoreError',
    'StaleRevisionError',
    'WikiAccessError',
]
