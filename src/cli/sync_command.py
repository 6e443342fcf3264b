"""Sync command orchestration for CLI.

This module provides the SyncCommand class that turns CLI options,
environment variables and the optional YAML config into a validated
SyncConfig, locates the root page ID, runs the tree sync and reports the
result. Every run-level validation happens before the first API call.
"""

import logging
from typing import Any, Dict, Optional

from src.cli.auth import Authenticator
from src.cli.errors import MissingPageIdError, PayloadError
from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.cli.webhook import extract_page_id, load_event_payload, validate_webhook_payload
from src.models.sync_result import SyncResult, SyncStatus
from src.notion_api.errors import SyncError
from src.page_sync.config_loader import ConfigLoader
from src.page_sync.models import SyncConfig
from src.page_sync.tree_sync import TreeSync

logger = logging.getLogger(__name__)


class SyncCommand:
    """Orchestrates a Notion → wiki sync run for the CLI.

    The workflow:
        1. Load credentials (environment / .env)
        2. Resolve prefix, max depth and throttle (option > env > YAML > default)
        3. Find the root page ID (option > NOTION_PAGE_ID > event payload)
        4. Run TreeSync from that page
        5. Publish outputs and return an exit code

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> exit_code = SyncCommand(output_handler=output).run(page_id="abc")
        >>> sys.exit(exit_code)
    """

    def __init__(
        self,
        config_path: str = ConfigLoader.DEFAULT_CONFIG_PATH,
        output_handler: Optional[OutputHandler] = None,
        authenticator: Optional[Authenticator] = None,
    ):
        """Initialize sync command with dependencies.

        Args:
            config_path: Path to the optional YAML configuration file
            output_handler: OutputHandler for terminal output (optional)
            authenticator: Authenticator for credentials (optional)
        """
        self.config_path = config_path
        self.output_handler = output_handler or OutputHandler()
        self.authenticator = authenticator or Authenticator()

    def run(
        self,
        page_id: Optional[str] = None,
        prefix: Optional[str] = None,
        max_depth: Optional[str] = None,
        event_path: Optional[str] = None,
    ) -> ExitCode:
        """Execute the sync.

        Args:
            page_id: Root Notion page ID
            prefix: Wiki page name prefix
            max_depth: Maximum recursion depth (validated as a positive integer)
            event_path: Path to a webhook event JSON file

        Returns:
            ExitCode for the run
        """
        output = self.output_handler

        try:
            config = self._resolve_config(prefix, max_depth)

            output.info("Starting Notion to GitHub Wiki sync...")
            output.info(
                f'Configuration: wiki-path-prefix="{config.wiki_path_prefix}", '
                f"max-depth={config.max_depth}"
            )

            root_page_id = self._resolve_page_id(page_id, event_path)
        except SyncError as e:
            logger.error(f"Action failed: {e}")
            output.error(f"Action failed: {e}")
            self._publish(SyncResult.error())
            return ExitCode.GENERAL_ERROR

        output.info(f"Target page ID: {root_page_id}")

        engine = TreeSync(config)
        with output.spinner("Executing sync operation..."):
            result = engine.sync_from_webhook(root_page_id)

        self._publish(result)
        output.print_summary(result)

        if result.status == SyncStatus.ERROR:
            output.error(f"Sync failed. Pages synced: {result.pages_synced}")
        elif result.pages_synced == 0:
            output.warning(f"No pages were synced from {root_page_id}; check the logs for skipped pages")

        return ExitCode.from_status(result.status)

    def _resolve_config(self, prefix: Optional[str], max_depth: Optional[str]) -> SyncConfig:
        """Build the SyncConfig for this run.

        Raises:
            MissingCredentialsError: If credentials are missing
            ConfigError: If any setting is invalid
        """
        credentials = self.authenticator.get_credentials()
        file_settings = ConfigLoader.load(self.config_path)

        overrides: Dict[str, Any] = {
            'wiki_path_prefix': prefix if prefix is not None
            else self.authenticator.get_setting('WIKI_PATH_PREFIX'),
            'max_depth': max_depth if max_depth is not None
            else self.authenticator.get_setting('MAX_DEPTH'),
        }

        return ConfigLoader.build(
            notion_api_token=credentials.notion_api_token,
            github_token=credentials.github_token,
            repository=credentials.repository,
            overrides=overrides,
            file_settings=file_settings,
        )

    def _resolve_page_id(self, page_id: Optional[str], event_path: Optional[str]) -> str:
        """Find the root page ID.

        Raises:
            PayloadError: If the event payload is malformed
            MissingPageIdError: If no page ID can be found
        """
        page_id = page_id or self.authenticator.get_setting('NOTION_PAGE_ID')
        if page_id:
            return page_id

        logger.info("No page ID provided in input, checking webhook payload...")
        event_path = event_path or self.authenticator.get_setting('GITHUB_EVENT_PATH')
        payload = load_event_payload(event_path)

        if payload is not None:
            if not validate_webhook_payload(payload):
                raise PayloadError("Invalid webhook payload received", event_path)
            page_id = extract_page_id(payload)

        if not page_id:
            raise MissingPageIdError()
        return page_id

    def _publish(self, result: SyncResult) -> None:
        """Append step outputs to $GITHUB_OUTPUT when running in Actions."""
        output_path = self.authenticator.get_setting('GITHUB_OUTPUT')
        if not output_path:
            return

        try:
            with open(output_path, 'a', encoding='utf-8') as f:
                f.write(f"pages-synced={result.pages_synced}\n")
                f.write(f"sync-status={result.status.value}\n")
        except OSError as e:
            logger.warning(f"Could not write step outputs to {output_path}: {e}")
