"""Markdown rendering for Notion blocks.

This module converts Notion block objects and their rich-text runs into
GitHub-flavored Markdown. Rendering is a pure function of its input: every
path has an empty-string default for missing or malformed nested data, so
nothing here raises on odd API payloads.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

# Block kinds whose text is rendered as "<prefix><runs>"
_PREFIXED_BLOCKS = {
    'paragraph': '',
    'heading_1': '# ',
    'heading_2': '## ',
    'heading_3': '### ',
    'bulleted_list_item': '- ',
    # No running counter; Markdown renumbers consecutive "1." items itself
    'numbered_list_item': '1. ',
    'quote': '> ',
}

# Known kinds that intentionally produce no markup in the parent body
_SILENT_BLOCKS = {'child_page'}


def _rich_text(block: Dict[str, Any], block_type: str) -> List[Dict[str, Any]]:
    """Return the rich_text runs nested under block[block_type], or []."""
    content = block.get(block_type)
    if not isinstance(content, dict):
        return []
    return content.get('rich_text') or []


def render_styled_run(run: Dict[str, Any]) -> str:
    """Render a single rich-text run.

    Wrapping order is bold, italic, inline code, strikethrough, then the
    link around the fully styled text. Bold plus italic therefore yields
    ``***text***``, and all three yield ``` `***text***` ```.
    """
    text = run.get('plain_text') or ''
    annotations = run.get('annotations') or {}

    if annotations.get('bold'):
        text = f"**{text}**"
    if annotations.get('italic'):
        text = f"*{text}*"
    if annotations.get('code'):
        text = f"`{text}`"
    if annotations.get('strikethrough'):
        text = f"~~{text}~~"

    href: Optional[str] = run.get('href')
    if href:
        text = f"[{text}]({href})"

    return text


def render_styled_runs(runs: Iterable[Dict[str, Any]]) -> str:
    """Concatenate the rendered form of each run, in order.

    Example:
        >>> render_styled_runs([{'plain_text': 'Hi', 'annotations': {'bold': True}}])
        '**Hi**'
    """
    return ''.join(render_styled_run(run) for run in runs or [])


def render_block(block: Dict[str, Any]) -> str:
    """Render one block to Markdown.

    Supported kinds are paragraph, heading_1-3, bulleted and numbered list
    items, code, quote and divider. Every other kind, child_page included,
    renders to an empty string.
    """
    block_type = block.get('type')
    if block_type is None:
        logger.warning("Encountered partial block object, skipping")
        return ''

    if block_type in _PREFIXED_BLOCKS:
        text = render_styled_runs(_rich_text(block, block_type))
        return f"{_PREFIXED_BLOCKS[block_type]}{text}"

    if block_type == 'code':
        code = block.get('code') if isinstance(block.get('code'), dict) else {}
        language = code.get('language') or ''
        text = render_styled_runs(_rich_text(block, 'code'))
        return f"```{language}\n{text}\n```"

    if block_type == 'divider':
        return '---'

    if block_type not in _SILENT_BLOCKS:
        logger.warning(f"Unsupported block type: {block_type}")
    return ''


def render_page(title: str, blocks: Iterable[Dict[str, Any]]) -> str:
    """Render a full page: an H1 title followed by its non-empty blocks.

    Blocks are separated by blank lines and the result carries no trailing
    whitespace.
    """
    markdown = f"# {title}\n\n"

    for block in blocks:
        block_markdown = render_block(block)
        if block_markdown:
            markdown += f"{block_markdown}\n\n"

    return markdown.strip()
