"""Sync outcome data model."""

from dataclasses import dataclass
from enum import Enum


class SyncStatus(str, Enum):
    """Terminal status of a sync run.

    PARTIAL is part of the reported vocabulary but the traversal itself never
    produces it; only callers layered above the engine may.
    """
    SUCCESS = "success"
    PARTIAL = "partial"
    ERROR = "error"


@dataclass(frozen=True)
class SyncResult:
    """Outcome of one sync run.

    Attributes:
        pages_synced: Number of pages written to the wiki
        status: Terminal status of the run
    """
    pages_synced: int
    status: SyncStatus

    @classmethod
    def error(cls) -> 'SyncResult':
        return cls(pages_synced=0, status=SyncStatus.ERROR)
