"""Data models for CLI operations."""

from enum import IntEnum

from src.models.sync_result import SyncStatus


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Sync completed successfully
    - GENERAL_ERROR (1): Configuration error or failed sync
    - PARTIAL (2): Sync completed with issues

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    PARTIAL = 2

    @classmethod
    def from_status(cls, status: SyncStatus) -> 'ExitCode':
        if status == SyncStatus.SUCCESS:
            return cls.SUCCESS
        if status == SyncStatus.PARTIAL:
            return cls.PARTIAL
        return cls.GENERAL_ERROR
