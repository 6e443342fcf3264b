"""Content conversion module for Notion block → Markdown rendering."""

from .markdown_converter import (
    render_block,
    render_page,
    render_styled_run,
    render_styled_runs,
)

__all__ = ['render_block', 'render_page', 'render_styled_run', 'render_styled_runs']
