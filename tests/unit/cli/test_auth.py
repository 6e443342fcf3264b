"""Unit tests for cli.auth module."""

from unittest.mock import patch

import pytest

from src.cli.auth import Authenticator, Credentials
from src.cli.errors import MissingCredentialsError


@pytest.fixture
def clean_env(monkeypatch):
    for name in ('NOTION_API_TOKEN', 'GITHUB_TOKEN', 'GITHUB_REPOSITORY', 'WIKI_PATH_PREFIX'):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@patch('src.cli.auth.load_dotenv')
class TestAuthenticator:
    """Test cases for Authenticator."""

    def test_loads_dotenv_on_init(self, mock_load_dotenv, clean_env):
        """The .env file is loaded when the authenticator is created."""
        Authenticator(dotenv_path="/tmp/custom.env")

        mock_load_dotenv.assert_called_once_with(dotenv_path="/tmp/custom.env")

    def test_get_credentials(self, mock_load_dotenv, clean_env):
        """All three variables are returned as Credentials."""
        clean_env.setenv('NOTION_API_TOKEN', 'secret_abc')
        clean_env.setenv('GITHUB_TOKEN', 'ghp_abc')
        clean_env.setenv('GITHUB_REPOSITORY', 'octo/docs')

        creds = Authenticator().get_credentials()

        assert creds == Credentials('secret_abc', 'ghp_abc', 'octo/docs')

    def test_missing_credentials_are_listed(self, mock_load_dotenv, clean_env):
        """Every missing variable is named in the error."""
        clean_env.setenv('GITHUB_TOKEN', 'ghp_abc')

        with pytest.raises(MissingCredentialsError) as exc_info:
            Authenticator().get_credentials()

        assert exc_info.value.missing == ['NOTION_API_TOKEN', 'GITHUB_REPOSITORY']
        assert "NOTION_API_TOKEN" in str(exc_info.value)

    def test_empty_value_counts_as_missing(self, mock_load_dotenv, clean_env):
        clean_env.setenv('NOTION_API_TOKEN', '')
        clean_env.setenv('GITHUB_TOKEN', 'ghp_abc')
        clean_env.setenv('GITHUB_REPOSITORY', 'octo/docs')

        with pytest.raises(MissingCredentialsError):
            Authenticator().get_credentials()

    def test_get_setting(self, mock_load_dotenv, clean_env):
        """Settings return the value, or None when unset or empty."""
        assert Authenticator.get_setting('WIKI_PATH_PREFIX') is None

        clean_env.setenv('WIKI_PATH_PREFIX', '')
        assert Authenticator.get_setting('WIKI_PATH_PREFIX') is None

        clean_env.setenv('WIKI_PATH_PREFIX', 'notion')
        assert Authenticator.get_setting('WIKI_PATH_PREFIX') == 'notion'
