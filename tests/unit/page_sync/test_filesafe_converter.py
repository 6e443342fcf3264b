"""Unit tests for page_sync.filesafe_converter module."""

import pytest

from src.page_sync.filesafe_converter import FilesafeConverter


class TestDeriveName:
    """Test cases for FilesafeConverter.derive_name method."""

    def test_special_characters_removed(self):
        """Punctuation is dropped and the result lower-cased."""
        assert FilesafeConverter.derive_name("My Test Page!@#$", "") == "my-test-page"

    def test_whitespace_runs_collapse(self):
        """Runs of spaces become a single hyphen."""
        result = FilesafeConverter.derive_name("Multiple   Spaces   Here", "notion")
        assert result == "notion-multiple-spaces-here"

    def test_dots_parentheses_and_dash_separators(self):
        """Dots and parentheses vanish and ' - ' collapses to one hyphen."""
        result = FilesafeConverter.derive_name("API v2.0 - User Guide (2024)", "notion")
        assert result == "notion-api-v20-user-guide-2024"

    def test_empty_title_and_prefix(self):
        """Empty input yields an empty name without raising."""
        assert FilesafeConverter.derive_name("", "") == ""

    def test_empty_title_with_prefix(self):
        """The prefix separator is kept even when the title is empty."""
        assert FilesafeConverter.derive_name("", "docs") == "docs-"

    def test_none_title_is_tolerated(self):
        """A None title is treated like an empty string."""
        assert FilesafeConverter.derive_name(None) == ""

    def test_non_ascii_letters_removed(self):
        """Only ASCII letters and digits survive."""
        assert FilesafeConverter.derive_name("Café Über 東京") == "caf-ber-"

    def test_tabs_and_newlines_are_whitespace(self):
        """Any whitespace run becomes a hyphen."""
        assert FilesafeConverter.derive_name("a\tb\nc") == "a-b-c"

    def test_existing_hyphens_collapse(self):
        """Repeated hyphens in the title collapse."""
        assert FilesafeConverter.derive_name("Pre--Release---Notes") == "pre-release-notes"

    def test_prefix_not_normalized(self):
        """The prefix is prepended verbatim."""
        assert FilesafeConverter.derive_name("Home", "Team_Docs") == "Team_Docs-home"

    def test_colliding_titles_share_a_name(self):
        """Titles that differ only in punctuation map to the same name."""
        assert FilesafeConverter.derive_name("Q&A") == FilesafeConverter.derive_name("QA!")

    @pytest.mark.parametrize("title", ["Roadmap", "Roadmap 2025!", "", "   "])
    def test_deterministic(self, title):
        """The same input always derives the same name."""
        assert FilesafeConverter.derive_name(title, "p") == FilesafeConverter.derive_name(title, "p")
