"""Data models for Notion pages and sync results."""

from src.models.notion_page import NotionPage
from src.models.sync_result import SyncResult, SyncStatus

__all__ = ['NotionPage', 'SyncResult', 'SyncStatus']
