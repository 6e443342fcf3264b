"""Credential loading for the Notion and GitHub APIs.

Credentials come from environment variables, optionally populated from a
.env file by python-dotenv. They are never cached or logged.
"""

import os
from typing import NamedTuple, Optional

from dotenv import load_dotenv

from .errors import MissingCredentialsError


class Credentials(NamedTuple):
    """API credentials and target repository."""
    notion_api_token: str
    github_token: str
    repository: str


class Authenticator:
    """Loads and validates credentials from environment variables.

    Required environment variables:
        NOTION_API_TOKEN: Notion integration token
        GITHUB_TOKEN: GitHub token with contents write access to the wiki
        GITHUB_REPOSITORY: "<owner>/<name>" (set automatically in GitHub Actions)

    Example:
        >>> creds = Authenticator().get_credentials()
        >>> print(f"Writing to {creds.repository}.wiki")
    """

    REQUIRED = ('NOTION_API_TOKEN', 'GITHUB_TOKEN', 'GITHUB_REPOSITORY')

    def __init__(self, dotenv_path: Optional[str] = None):
        # Existing environment variables win over .env entries
        load_dotenv(dotenv_path=dotenv_path)

    def get_credentials(self) -> Credentials:
        """Get credentials from environment variables.

        Raises:
            MissingCredentialsError: If any required variable is missing
        """
        values = {name: os.getenv(name) for name in self.REQUIRED}
        missing = [name for name, value in values.items() if not value]
        if missing:
            raise MissingCredentialsError(missing)

        return Credentials(
            notion_api_token=values['NOTION_API_TOKEN'],  # type: ignore[arg-type]
            github_token=values['GITHUB_TOKEN'],  # type: ignore[arg-type]
            repository=values['GITHUB_REPOSITORY'],  # type: ignore[arg-type]
        )

    @staticmethod
    def get_setting(name: str) -> Optional[str]:
        """Return a non-empty environment setting, or None."""
        value = os.getenv(name)
        return value if value else None
