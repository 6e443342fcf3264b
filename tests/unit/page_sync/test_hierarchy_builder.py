"""Unit tests for page_sync.hierarchy_builder module."""

from src.page_sync.hierarchy_builder import extract_child_page_ids
from tests.fixtures.sample_pages import (
    block,
    child_page,
    page_mention,
    paragraph,
    text_run,
    user_mention,
)


class TestExtractChildPageIds:
    """Test cases for extract_child_page_ids."""

    def test_child_page_then_mention(self):
        """child_page blocks and page mentions are returned in block order."""
        blocks = [
            child_page("child-page-1"),
            paragraph(text_run("See "), page_mention("mentioned-page-1")),
        ]
        assert extract_child_page_ids(blocks) == ["child-page-1", "mentioned-page-1"]

    def test_user_mention_ignored(self):
        """Mentions of anything other than a page contribute nothing."""
        assert extract_child_page_ids([paragraph(user_mention("user-1"))]) == []

    def test_multiple_mentions_in_run_order(self):
        """Mentions within one paragraph follow run order."""
        blocks = [paragraph(page_mention("p1"), text_run(" and "), page_mention("p2"))]
        assert extract_child_page_ids(blocks) == ["p1", "p2"]

    def test_duplicates_are_kept(self):
        """A page referenced twice is returned twice."""
        blocks = [child_page("dup"), paragraph(page_mention("dup"))]
        assert extract_child_page_ids(blocks) == ["dup", "dup"]

    def test_mentions_outside_paragraphs_ignored(self):
        """Only paragraph blocks are scanned for mentions."""
        blocks = [
            block("heading_1", page_mention("in-heading")),
            block("bulleted_list_item", page_mention("in-list")),
        ]
        assert extract_child_page_ids(blocks) == []

    def test_empty_block_list(self):
        """No blocks means no references."""
        assert extract_child_page_ids([]) == []

    def test_malformed_blocks_contribute_nothing(self):
        """Blocks missing nested fields are skipped without raising."""
        blocks = [
            {"type": "paragraph"},
            {"type": "paragraph", "paragraph": None},
            {"type": "paragraph", "paragraph": {"rich_text": [{"type": "mention"}]}},
            {"type": "paragraph", "paragraph": {"rich_text": [{"type": "mention", "mention": {"type": "page"}}]}},
            {"type": "child_page"},
            {"object": "block"},
        ]
        assert extract_child_page_ids(blocks) == []

    def test_non_dict_nested_values_contribute_nothing(self):
        """Wrongly typed mention, page, run or block values are skipped."""
        blocks = [
            paragraph({"type": "mention", "mention": "oops"}),
            paragraph({"type": "mention", "mention": {"type": "page", "page": "abc"}}),
            paragraph({"type": "mention", "mention": {"type": "page", "page": {"id": 42}}}),
            paragraph("not a run"),
            "not a block",
            {"type": "child_page", "id": 7},
            child_page("kept"),
        ]
        assert extract_child_page_ids(blocks) == ["kept"]
