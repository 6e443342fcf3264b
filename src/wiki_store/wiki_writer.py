"""Create-or-update writes against a GitHub repository wiki.

The wiki of ``owner/name`` lives in the companion repository
``owner/name.wiki``. Each synced page becomes ``<name>.md`` at its root. A
write first looks up the file's current blob sha (the revision marker) and
then PUTs the new content under that sha, so a concurrent modification
surfaces as a stale-revision rejection instead of a silent overwrite.
"""

import base64
import logging
from typing import Optional

import requests
from requests.exceptions import ConnectionError, Timeout

from src.notion_api.api_wrapper import sanitize_credentials
from src.notion_api.rate_limit import RateLimiter

from .errors import StaleRevisionError, WikiAccessError

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"


class WikiWriter:
    """Writes Markdown pages to ``<owner>/<repository>.wiki``.

    Repository coordinates are passed in explicitly; nothing is read from
    the process environment.

    Example:
        >>> writer = WikiWriter(token="ghp_...", owner="octo", repository="docs")
        >>> writer.write_page("notion-getting-started", "# Getting Started")
    """

    def __init__(
        self,
        token: str,
        owner: str,
        repository: str,
        rate_limiter: Optional[RateLimiter] = None,
        api_url: str = GITHUB_API_URL,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ):
        if not owner or not repository:
            raise ValueError("Unable to determine repository owner and name")

        self.owner = owner
        self.repository = repository
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self._rate_limiter = rate_limiter or RateLimiter()
        self._session = session or requests.Session()
        self._session.headers.update({
            'Authorization': f'Bearer {token}',
            'Accept': 'application/vnd.github+json',
            'X-GitHub-Api-Version': '2022-11-28',
        })

    @staticmethod
    def page_path(name: str) -> str:
        """Return the wiki file path for a derived page name.

        >>> WikiWriter.page_path("notion-home")
        'notion-home.md'
        """
        return f"{name}.md"

    @property
    def wiki_repository(self) -> str:
        return f"{self.repository}.wiki"

    def _contents_url(self, path: str) -> str:
        return f"{self.api_url}/repos/{self.owner}/{self.wiki_repository}/contents/{path}"

    def get_revision(self, path: str) -> Optional[str]:
        """Return the current blob sha of path, or None if it can't be read.

        Any failure (missing file, network error, unexpected payload) is
        treated as "no prior revision".
        """
        try:
            response = self._rate_limiter.call(
                self._session.get,
                self._contents_url(path),
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.info(f"Creating new wiki page: {path}")
            logger.debug(f"Revision lookup for {path} failed: {sanitize_credentials(str(e))}")
            return None

        if isinstance(data, dict) and isinstance(data.get('sha'), str):
            return data['sha']
        return None

    def put_file(self, path: str, content: str, message: str, sha: Optional[str] = None) -> None:
        """Create or update a file under the given revision marker.

        Raises:
            StaleRevisionError: If the store reports a conflicting revision
            WikiAccessError: For any other failure
        """
        payload = {
            'message': message,
            'content': base64.b64encode(content.encode('utf-8')).decode('ascii'),
        }
        if sha:
            payload['sha'] = sha

        try:
            response = self._rate_limiter.call(
                self._session.put,
                self._contents_url(path),
                json=payload,
                timeout=self.timeout,
            )
        except (Timeout, ConnectionError) as e:
            raise WikiAccessError(path, reason="store unreachable") from e
        except requests.RequestException as e:
            raise WikiAccessError(path, reason=sanitize_credentials(str(e))) from e

        # 409: sha does not match the branch head; 422 with a sha: sha is not the file's blob
        if response.status_code == 409 or (response.status_code == 422 and sha):
            raise StaleRevisionError(path, sha)

        if not response.ok:
            raise WikiAccessError(
                path,
                status_code=response.status_code,
                reason=sanitize_credentials(response.text[:200]),
            )

    def write_page(self, name: str, content: str) -> None:
        """Create or update ``<name>.md`` in the wiki repository.

        Args:
            name: Derived page name (without extension)
            content: Rendered Markdown

        Raises:
            StaleRevisionError: If the page was modified concurrently
            WikiAccessError: If the write fails for any other reason
        """
        path = self.page_path(name)
        try:
            sha = self.get_revision(path)
            self.put_file(
                path,
                content,
                message=f"Update {name} from Notion sync",
                sha=sha,
            )
        except (StaleRevisionError, WikiAccessError) as e:
            logger.error(f"Failed to update wiki page {name}: {e}")
            raise

        logger.info(f"Successfully updated wiki page: {name}")
