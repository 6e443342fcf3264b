"""Notion page data model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

UNTITLED = "Untitled"


@dataclass
class NotionPage:
    """Notion page with its first page of content blocks.

    Built fresh from API responses on every visit; never cached or mutated
    by the sync.

    Attributes:
        page_id: Opaque Notion page identifier
        title: Page title ("Untitled" when the page has none)
        blocks: Raw Notion block dicts in page order
    """
    page_id: str
    title: str = UNTITLED
    blocks: List[Dict[str, Any]] = field(default_factory=list)

    @staticmethod
    def extract_title(page_data: Dict[str, Any]) -> str:
        """Return the plain text of the page's title property.

        The first property of type ``title`` with at least one run wins;
        anything missing or empty falls back to "Untitled".
        """
        properties = page_data.get('properties') or {}
        for prop in properties.values():
            if not isinstance(prop, dict) or prop.get('type') != 'title':
                continue
            runs = prop.get('title') or []
            if runs:
                return runs[0].get('plain_text') or UNTITLED
        return UNTITLED

    @classmethod
    def from_api(cls, page_data: Dict[str, Any], blocks: List[Dict[str, Any]]) -> 'NotionPage':
        return cls(
            page_id=page_data.get('id', ''),
            title=cls.extract_title(page_data),
            blocks=list(blocks),
        )
