"""Recursive Notion page tree → wiki synchronization.

This module walks a Notion page graph depth-first, renders each page to
Markdown and commits it to the wiki. Failures are contained per page: a
page that can't be fetched or written contributes nothing, and its
siblings and ancestors carry on.

The walk keeps no visited set. A page reachable through two references is
synced twice, and reference cycles are bounded only by max_depth.
"""

import logging
from typing import Optional

from ..content_converter.markdown_converter import render_page
from ..models.notion_page import NotionPage
from ..models.sync_result import SyncResult, SyncStatus
from ..notion_api.api_wrapper import NotionAPI
from ..notion_api.errors import NotAPageError, SyncError
from ..notion_api.rate_limit import RateLimiter
from ..wiki_store.wiki_writer import WikiWriter
from .filesafe_converter import FilesafeConverter
from .hierarchy_builder import extract_child_page_ids
from .models import SyncConfig, TraversalContext

logger = logging.getLogger(__name__)


class TreeSync:
    """Syncs a Notion page and its descendants into a GitHub wiki.

    The traversal is strictly sequential: one API call is in flight at a
    time. Both API clients share a single RateLimiter.

    Example:
        >>> config = SyncConfig("secret_x", "ghp_x", "octo", "docs", wiki_path_prefix="notion")
        >>> result = TreeSync(config).sync_from_webhook("59833787-2cf9-4fdf-8782-e53db20768a5")
        >>> print(result.pages_synced, result.status.value)
    """

    def __init__(
        self,
        config: SyncConfig,
        notion_api: Optional[NotionAPI] = None,
        wiki_writer: Optional[WikiWriter] = None,
    ):
        """Initialize the sync engine.

        Args:
            config: Resolved sync configuration
            notion_api: Page fetcher (created from config if omitted)
            wiki_writer: Store writer (created from config if omitted)
        """
        self.config = config

        rate_limiter = None
        if notion_api is None or wiki_writer is None:
            rate_limiter = RateLimiter(config.requests_per_second)

        self._notion = notion_api or NotionAPI(
            token=config.notion_api_token,
            rate_limiter=rate_limiter,
        )
        self._wiki = wiki_writer or WikiWriter(
            token=config.github_token,
            owner=config.owner,
            repository=config.repository,
            rate_limiter=rate_limiter,
        )

    def sync_from_webhook(self, page_id: Optional[str] = None) -> SyncResult:
        """Sync the tree rooted at page_id.

        Never raises: a missing page ID or any error escaping the traversal
        yields an error result with zero pages.

        Args:
            page_id: Root Notion page ID

        Returns:
            SyncResult with SUCCESS and the synced page count, or ERROR
        """
        logger.info("Starting sync from webhook...")

        if not page_id:
            logger.error("Sync failed: No page ID provided for sync")
            return SyncResult.error()

        logger.info(f"Syncing page: {page_id}")

        context = TraversalContext(
            depth=0,
            max_depth=self.config.max_depth,
            prefix=self.config.wiki_path_prefix,
        )

        try:
            synced_pages = self.sync_tree(page_id, context)
        except Exception as e:
            logger.error(f"Sync failed: {e}")
            return SyncResult.error()

        return SyncResult(pages_synced=synced_pages, status=SyncStatus.SUCCESS)

    def sync_tree(self, page_id: str, context: TraversalContext) -> int:
        """Sync one page, then recurse into the pages it references.

        Args:
            page_id: Notion page to visit
            context: Depth and naming state for this call

        Returns:
            Number of pages written in this subtree
        """
        if context.depth >= context.max_depth:
            logger.warning(f"Reached maximum depth {context.max_depth}, stopping recursion")
            return 0

        try:
            page = self.fetch_page(page_id)
            child_page_ids = extract_child_page_ids(page.blocks)
            self.sync_page_to_wiki(page, context.prefix)
        except NotAPageError:
            logger.warning(f"Page {page_id} is not a standard page, skipping")
            return 0
        except SyncError as e:
            logger.error(f"Failed to sync page {page_id}: {e}")
            return 0
        except Exception as e:
            logger.exception(f"Unexpected error syncing page {page_id}: {e}")
            return 0

        synced_count = 1
        logger.info(f"Synced page: {page_id} (depth: {context.depth})")

        child_context = context.descend()
        for child_page_id in child_page_ids:
            synced_count += self.sync_tree(child_page_id, child_context)

        return synced_count

    def fetch_page(self, page_id: str) -> NotionPage:
        """Fetch a page's metadata and its first page of blocks.

        Raises:
            NotAPageError: If the object has no properties bag
            NotionError: If either API call fails
        """
        page_data = self._notion.retrieve_page(page_id)
        if not isinstance(page_data, dict) or 'properties' not in page_data:
            object_type = page_data.get('object') if isinstance(page_data, dict) else None
            raise NotAPageError(page_id=page_id, object_type=object_type)

        blocks = self._notion.list_blocks(page_id)
        page = NotionPage.from_api(page_data, blocks)
        if not page.page_id:
            page.page_id = page_id
        return page

    def sync_page_to_wiki(self, page: NotionPage, prefix: str = "") -> str:
        """Render a page and write it to the wiki.

        Returns:
            The derived wiki page name

        Raises:
            WikiStoreError: If the write fails
        """
        wiki_page_name = FilesafeConverter.derive_name(page.title, prefix)
        markdown_content = render_page(page.title, page.blocks)

        logger.debug(
            f"Writing page {page.page_id} ('{page.title}') as "
            f"{WikiWriter.page_path(wiki_page_name)}"
        )
        self._wiki.write_page(wiki_page_name, markdown_content)
        return wiki_page_name
