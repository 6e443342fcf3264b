"""Notion webhook payload handling.

GitHub Actions exposes the triggering event as a JSON file whose path is in
GITHUB_EVENT_PATH. For repository_dispatch events relayed from Notion, the
page ID can sit in several places; extract_page_id checks them in a fixed
order.
"""

import json
import logging
from typing import Any, Optional

from .errors import PayloadError

logger = logging.getLogger(__name__)


def load_event_payload(event_path: Optional[str]) -> Optional[Any]:
    """Read and parse the event payload file.

    Returns:
        Parsed JSON, or None when no event path is configured

    Raises:
        PayloadError: If the file can't be read or isn't valid JSON
    """
    if not event_path:
        return None

    try:
        with open(event_path, 'r', encoding='utf-8') as f:
            payload = json.load(f)
    except OSError as e:
        raise PayloadError(f"Cannot read webhook payload: {e.strerror or e}", event_path)
    except json.JSONDecodeError as e:
        raise PayloadError(f"Webhook payload is not valid JSON: {e.msg}", event_path)

    logger.info("Loaded webhook payload from GitHub event")
    return payload


def validate_webhook_payload(payload: Any) -> bool:
    """Check that a payload is well-formed.

    A payload must be an object carrying a string ``object`` field.
    Payloads about things other than pages are logged but still valid.
    """
    if not isinstance(payload, dict):
        logger.error("Invalid webhook payload: not an object")
        return False

    if not isinstance(payload.get('object'), str):
        logger.error("Invalid webhook payload: missing object field")
        return False

    data = payload.get('data')
    if (isinstance(data, dict) and data.get('object') == 'page') or payload['object'] == 'page':
        return True

    logger.warning(f"Webhook payload is not page-related: {payload['object']}")
    return True


def extract_page_id(payload: Any) -> Optional[str]:
    """Locate a page ID in a payload.

    Checked in order, first string match wins: ``data.id``, ``page_id``,
    ``id``.

    Example:
        >>> extract_page_id({'object': 'event', 'data': {'id': 'abc'}})
        'abc'
    """
    if not isinstance(payload, dict):
        logger.warning("No page ID found in webhook payload")
        return None

    data = payload.get('data')
    if isinstance(data, dict) and isinstance(data.get('id'), str):
        logger.info(f"Extracted page ID from webhook: {data['id']}")
        return data['id']

    if isinstance(payload.get('page_id'), str):
        logger.info(f"Extracted page ID from payload: {payload['page_id']}")
        return payload['page_id']

    if isinstance(payload.get('id'), str):
        logger.info(f"Extracted ID from payload: {payload['id']}")
        return payload['id']

    logger.warning("No page ID found in webhook payload")
    return None
