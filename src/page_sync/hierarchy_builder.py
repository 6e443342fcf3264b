"""Child page discovery from a page's block list.

A page's children are the pages it embeds (child_page blocks) plus the
pages mentioned inline in its paragraphs. References are returned in block
order, then run order, and are not deduplicated.
"""

import logging
from typing import Any, Dict, Iterable, List

logger = logging.getLogger(__name__)


def _paragraph_page_mentions(block: Dict[str, Any]) -> List[str]:
    paragraph = block.get('paragraph')
    if not isinstance(paragraph, dict):
        return []

    page_ids = []
    for run in paragraph.get('rich_text') or []:
        if not isinstance(run, dict) or run.get('type') != 'mention':
            continue
        mention = run.get('mention')
        if not isinstance(mention, dict) or mention.get('type') != 'page':
            continue
        page = mention.get('page')
        page_id = page.get('id') if isinstance(page, dict) else None
        if isinstance(page_id, str) and page_id:
            page_ids.append(page_id)
    return page_ids


def extract_child_page_ids(blocks: Iterable[Dict[str, Any]]) -> List[str]:
    """Collect referenced page IDs from a list of blocks.

    Args:
        blocks: Raw Notion block dicts

    Returns:
        Page IDs in discovery order, duplicates included

    Example:
        >>> extract_child_page_ids([{'type': 'child_page', 'id': 'abc'}])
        ['abc']
    """
    page_ids: List[str] = []

    for block in blocks or []:
        if not isinstance(block, dict):
            continue
        block_type = block.get('type')

        if block_type == 'child_page':
            if isinstance(block.get('id'), str) and block['id']:
                page_ids.append(block['id'])
        elif block_type == 'paragraph':
            page_ids.extend(_paragraph_page_mentions(block))

    logger.debug(f"Found {len(page_ids)} child page reference(s)")
    return page_ids
