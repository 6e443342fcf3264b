"""YAML configuration loading and validation.

This module loads optional sync settings from a YAML file and resolves the
final SyncConfig from credentials, explicit overrides, file settings and
defaults, in that order of precedence.

Configuration file structure (every field optional):
    wiki_path_prefix: "notion"
    max_depth: 10
    requests_per_second: 3
"""

from typing import Any, Dict, Optional
import yaml

from .errors import ConfigError
from .models import DEFAULT_MAX_DEPTH, DEFAULT_REQUESTS_PER_SECOND, SyncConfig


class ConfigLoader:
    """Handles configuration file loading and validation."""

    DEFAULT_CONFIG_PATH = '.notion-wiki-sync/config.yaml'

    # Default values for optional fields
    DEFAULTS: Dict[str, Any] = {
        'wiki_path_prefix': '',
        'max_depth': DEFAULT_MAX_DEPTH,
        'requests_per_second': DEFAULT_REQUESTS_PER_SECOND,
    }

    @classmethod
    def load(cls, config_path: str) -> Dict[str, Any]:
        """Load and validate settings from a YAML file.

        A missing file yields an empty dict.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            Dict of validated settings present in the file

        Raises:
            ConfigError: If the file is unreadable or invalid
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}")

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML syntax: {str(e)}"
            )

        if config_dict is None:
            return {}

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        unknown = set(config_dict) - set(cls.DEFAULTS)
        if unknown:
            raise ConfigError(f"Unknown fields: {', '.join(sorted(unknown))}")

        settings: Dict[str, Any] = {}
        if 'wiki_path_prefix' in config_dict:
            prefix = config_dict['wiki_path_prefix']
            if prefix is not None and not isinstance(prefix, str):
                raise ConfigError(
                    f"must be a string, got {type(prefix).__name__}",
                    'wiki_path_prefix'
                )
            settings['wiki_path_prefix'] = prefix or ''
        if 'max_depth' in config_dict:
            settings['max_depth'] = cls.parse_max_depth(config_dict['max_depth'])
        if 'requests_per_second' in config_dict:
            settings['requests_per_second'] = cls.parse_rate(config_dict['requests_per_second'])

        return settings

    @staticmethod
    def parse_max_depth(value: Any) -> int:
        """Validate a max depth value, which must be an integer >= 1.

        Strings are accepted as long as they hold a base-10 integer.

        Raises:
            ConfigError: If the value is not a positive integer
        """
        if isinstance(value, bool):
            raise ConfigError(f"Invalid max-depth value: {value}. Must be a positive integer.", 'max_depth')
        try:
            depth = int(str(value).strip(), 10)
        except (TypeError, ValueError):
            raise ConfigError(f"Invalid max-depth value: {value}. Must be a positive integer.", 'max_depth')
        if depth < 1:
            raise ConfigError(f"Invalid max-depth value: {value}. Must be a positive integer.", 'max_depth')
        return depth

    @staticmethod
    def parse_rate(value: Any) -> float:
        """Validate a requests-per-second value, which must be a positive number."""
        if isinstance(value, bool):
            raise ConfigError(f"must be a positive number, got {value}", 'requests_per_second')
        try:
            rate = float(value)
        except (TypeError, ValueError):
            raise ConfigError(f"must be a positive number, got {value}", 'requests_per_second')
        if rate <= 0:
            raise ConfigError(f"must be a positive number, got {value}", 'requests_per_second')
        return rate

    @classmethod
    def build(
        cls,
        notion_api_token: str,
        github_token: str,
        repository: str,
        overrides: Optional[Dict[str, Any]] = None,
        file_settings: Optional[Dict[str, Any]] = None,
    ) -> SyncConfig:
        """Resolve a SyncConfig.

        Args:
            notion_api_token: Notion integration token
            github_token: GitHub token
            repository: "<owner>/<name>" of the repository whose wiki is written
            overrides: Explicit values (CLI options, environment); None entries are ignored
            file_settings: Values loaded from the YAML file

        Raises:
            ConfigError: If any value is invalid
        """
        owner, _, name = (repository or '').partition('/')
        if not owner or not name or '/' in name:
            raise ConfigError(
                f"Unable to determine repository owner and name from '{repository}'",
                'repository'
            )

        merged = dict(cls.DEFAULTS)
        merged.update(file_settings or {})
        merged.update({k: v for k, v in (overrides or {}).items() if v is not None})

        return SyncConfig(
            notion_api_token=notion_api_token,
            github_token=github_token,
            owner=owner,
            repository=name,
            wiki_path_prefix=merged['wiki_path_prefix'] or '',
            max_depth=cls.parse_max_depth(merged['max_depth']),
            requests_per_second=cls.parse_rate(merged['requests_per_second']),
        )
