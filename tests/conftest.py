"""Root pytest configuration for all tests."""

import logging

# notion-client and httpx log every request at DEBUG/INFO; keep test output
# limited to the sync's own log lines.
logging.getLogger("notion_client").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
