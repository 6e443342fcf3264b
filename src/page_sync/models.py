"""Data models for the page sync engine.

All models use dataclasses for clean, type-safe data structures.
"""

from dataclasses import dataclass, replace

DEFAULT_MAX_DEPTH = 10
DEFAULT_REQUESTS_PER_SECOND = 3.0


@dataclass(frozen=True)
class TraversalContext:
    """Per-call recursion state for a tree sync.

    Created fresh for every root sync. Only ``depth`` changes between
    frames, and only through descend(), which returns a new context.

    Attributes:
        depth: Distance from the root page (root = 0)
        max_depth: Calls made at this depth or deeper return immediately
        prefix: Namespace prepended to every derived wiki page name
    """
    depth: int = 0
    max_depth: int = DEFAULT_MAX_DEPTH
    prefix: str = ""

    def descend(self) -> 'TraversalContext':
        return replace(self, depth=self.depth + 1)


@dataclass
class SyncConfig:
    """Resolved configuration for one sync run.

    Attributes:
        notion_api_token: Notion integration token
        github_token: Token with write access to the wiki repository
        owner: Owner of the repository whose wiki is written
        repository: Repository name (the wiki is ``<repository>.wiki``)
        wiki_path_prefix: Namespace prefix for wiki page names
        max_depth: Maximum recursion depth (positive integer)
        requests_per_second: Throttle applied to every outbound API call

    Example:
        >>> config = SyncConfig("secret_x", "ghp_x", "octo", "docs", max_depth=3)
    """
    notion_api_token: str
    github_token: str
    owner: str
    repository: str
    wiki_path_prefix: str = ""
    max_depth: int = DEFAULT_MAX_DEPTH
    requests_per_second: float = DEFAULT_REQUESTS_PER_SECOND
