"""API wrapper for the Notion REST API.

This module wraps the notion-client SDK and translates its exceptions into
our typed exception hierarchy. Every call passes through a shared
RateLimiter so sequential traversals stay under Notion's request budget.
"""

import logging
import re
from typing import Any, Dict, List, Optional

import httpx
from notion_client import Client
from notion_client.errors import APIResponseError, HTTPResponseError, RequestTimeoutError

from .errors import (
    InvalidCredentialsError,
    PageNotFoundError,
    NotAPageError,
    APIUnreachableError,
    APIAccessError,
)
from .rate_limit import RateLimiter

logger = logging.getLogger(__name__)

# Notion caps a single block-children page at 100 results
MAX_PAGE_SIZE = 100


def sanitize_credentials(text: str) -> str:
    """Mask tokens in error messages before they reach a log line.

    Example:
        >>> sanitize_credentials("Bearer secret_abc123 rejected")
        'Bearer ***REDACTED*** rejected'
    """
    if not text:
        return text

    sanitized = re.sub(
        r'Bearer\s+[^\s\n\r]+',
        'Bearer ***REDACTED***',
        text,
        flags=re.IGNORECASE
    )
    sanitized = re.sub(
        r'(api_?token|token)["\']?\s*[:=]\s*["\']?([^"\'\s&]+)',
        r'\1=***REDACTED***',
        sanitized,
        flags=re.IGNORECASE
    )
    # Notion (secret_, ntn_) and GitHub (ghp_, gho_, ghs_, github_pat_) token shapes
    sanitized = re.sub(
        r'\b(secret|ntn|ghp|gho|ghs|github_pat)_[A-Za-z0-9_]{8,}\b',
        '***REDACTED***',
        sanitized
    )
    return sanitized


class NotionAPI:
    """Read-only wrapper around the Notion client with error translation.

    Only the two calls the traversal needs are exposed: retrieving a page's
    metadata and listing the first page of its child blocks.

    Example:
        >>> api = NotionAPI(token="secret_...")
        >>> page = api.retrieve_page("59833787-2cf9-4fdf-8782-e53db20768a5")
        >>> blocks = api.list_blocks(page["id"])
    """

    def __init__(
        self,
        token: str,
        rate_limiter: Optional[RateLimiter] = None,
        timeout_ms: int = 30_000,
    ):
        """Initialize the wrapper.

        Args:
            token: Notion integration token
            rate_limiter: Shared limiter (a private 3 req/s bucket if omitted)
            timeout_ms: Per-request timeout passed to notion-client
        """
        self._token = token
        self._timeout_ms = timeout_ms
        self._rate_limiter = rate_limiter or RateLimiter()
        self._client: Optional[Client] = None

    def _get_client(self) -> Client:
        """Get or lazily create the notion-client Client."""
        if self._client is None:
            self._client = Client(auth=self._token, timeout_ms=self._timeout_ms)
        return self._client

    def _translate_error(self, exception: Exception, operation: str, page_id: str) -> Exception:
        """Translate SDK/transport exceptions to typed Notion exceptions.

        Args:
            exception: The original exception from notion-client
            operation: Description of the failed operation (for logging)
            page_id: Page the operation targeted

        Returns:
            Exception: One of our typed exceptions
        """
        if isinstance(exception, (RequestTimeoutError, httpx.TimeoutException, httpx.TransportError)):
            return APIUnreachableError()

        status = getattr(exception, 'status', None)
        code = str(getattr(exception, 'code', '') or '')

        if status == 401 or code == 'unauthorized':
            return InvalidCredentialsError()

        if status == 404 or code == 'object_not_found':
            return PageNotFoundError(page_id=page_id)

        safe_error_msg = sanitize_credentials(str(exception))
        logger.error(f"API operation failed: {operation} - {safe_error_msg}")
        return APIAccessError(f"Notion API failure during {operation}")

    def retrieve_page(self, page_id: str) -> Dict[str, Any]:
        """Fetch a page object by its ID.

        Args:
            page_id: The Notion page ID

        Returns:
            Dict containing the page object (with its ``properties`` bag)

        Raises:
            InvalidCredentialsError: If the token is rejected
            PageNotFoundError: If the page doesn't exist or isn't shared
            NotAPageError: If the object is not a standard page
            APIUnreachableError: If the API times out or is unreachable
            APIAccessError: For any other API failure
        """
        if not page_id or not str(page_id).strip():
            raise ValueError("page_id cannot be empty")

        logger.debug(f"Notion API: GET /pages/{page_id}")
        try:
            page = self._rate_limiter.call(
                self._get_client().pages.retrieve,
                page_id=page_id,
            )
        except (APIResponseError, HTTPResponseError, RequestTimeoutError, httpx.HTTPError) as e:
            raise self._translate_error(e, f"retrieve_page({page_id})", page_id) from e

        if not isinstance(page, dict) or 'properties' not in page:
            object_type = page.get('object') if isinstance(page, dict) else type(page).__name__
            raise NotAPageError(page_id=page_id, object_type=object_type)

        return page

    def list_blocks(self, page_id: str, page_size: int = MAX_PAGE_SIZE) -> List[Dict[str, Any]]:
        """List the first page of child blocks of a page.

        Only the first page of results is returned; a ``has_more`` response
        is logged as truncated content rather than followed.

        Args:
            page_id: The Notion page (block) ID
            page_size: Number of blocks to request, at most 100

        Returns:
            List of raw block dicts in page order

        Raises:
            Same typed exceptions as retrieve_page (except NotAPageError)
        """
        page_size = max(1, min(page_size, MAX_PAGE_SIZE))

        logger.debug(f"Notion API: GET /blocks/{page_id}/children?page_size={page_size}")
        try:
            response = self._rate_limiter.call(
                self._get_client().blocks.children.list,
                block_id=page_id,
                page_size=page_size,
            )
        except (APIResponseError, HTTPResponseError, RequestTimeoutError, httpx.HTTPError) as e:
            raise self._translate_error(e, f"list_blocks({page_id})", page_id) from e

        if response.get('has_more'):
            logger.warning(
                f"Page {page_id} has more than {page_size} blocks; "
                f"only the first {page_size} are synced"
            )

        return list(response.get('results', []))
