"""Page tree sync engine.

This package walks a Notion page tree, derives flat wiki page names and
commits each rendered page to a GitHub wiki.
"""

from .tree_sync import TreeSync
from .models import SyncConfig, TraversalContext
from .errors import PageSyncError, ConfigError
from .config_loader import ConfigLoader
from .filesafe_converter import FilesafeConverter
from .hierarchy_builder import extract_child_page_ids

__all__ = [
    'TreeSync',
    'SyncConfig',
    'TraversalContext',
    'PageSyncError',
    'ConfigError',
    'ConfigLoader',
    'FilesafeConverter',
    'extract_child_page_ids',
]
