"""Test fixtures for notion-wiki-sync tests.

This module provides builders for Notion API objects (pages, blocks and
rich-text runs) and an in-memory Notion stand-in for traversal tests.
"""

from .sample_pages import (
    text_run,
    page_mention,
    user_mention,
    block,
    paragraph,
    child_page,
    divider,
    page,
    blocks_response,
    FakeNotion,
    SAMPLE_TREE,
)

__all__ = [
    "text_run",
    "page_mention",
    "user_mention",
    "block",
    "paragraph",
    "child_page",
    "divider",
    "page",
    "blocks_response",
    "FakeNotion",
    "SAMPLE_TREE",
]
