"""Pytest configuration and fixtures for integration tests.

Integration tests run the real NotionAPI, WikiWriter and TreeSync together.
Only the transports are replaced: the notion-client Client is patched to
serve an in-memory page tree and the requests session is a recording fake
wiki, so no network access is needed.
"""

import base64
from typing import Any, Dict, List
from unittest.mock import Mock, patch

import pytest
import requests

from tests.fixtures.sample_pages import SAMPLE_TREE, blocks_response, page


class FakeWikiSession:
    """Minimal stand-in for a requests.Session against the contents API.

    Files are kept in ``files`` keyed by path, with a counter-based sha that
    changes on every write.
    """

    def __init__(self):
        self.headers: Dict[str, str] = {}
        self.files: Dict[str, Dict[str, str]] = {}
        self.puts: List[Dict[str, Any]] = []
        self._revision = 0

    @staticmethod
    def _path(url: str) -> str:
        return url.split('/contents/', 1)[1]

    def get(self, url, timeout=None):
        stored = self.files.get(self._path(url))
        response = Mock()
        if stored is None:
            response.status_code = 404
            response.raise_for_status.side_effect = requests.HTTPError("404")
        else:
            response.status_code = 200
            response.json.return_value = {'sha': stored['sha']}
        return response

    def put(self, url, json=None, timeout=None):
        path = self._path(url)
        stored = self.files.get(path)
        response = Mock()
        self.puts.append({'path': path, **json})

        if stored is not None and json.get('sha') != stored['sha']:
            response.status_code, response.ok, response.text = 409, False, "conflict"
            return response

        self._revision += 1
        self.files[path] = {
            'sha': f"sha{self._revision}",
            'content': base64.b64decode(json['content']).decode('utf-8'),
        }
        response.status_code, response.ok, response.text = (200 if stored else 201), True, ""
        return response


@pytest.fixture
def notion_tree():
    """Mutable copy of the sample tree served by the patched Notion client."""
    return {page_id: dict(node) for page_id, node in SAMPLE_TREE.items()}


@pytest.fixture
def notion_client(notion_tree):
    """Patch notion-client's Client to answer from notion_tree."""
    with patch('src.notion_api.api_wrapper.Client') as mock_client_cls:
        client = mock_client_cls.return_value
        client.pages.retrieve.side_effect = (
            lambda page_id: page(page_id, notion_tree[page_id]['title'])
        )
        client.blocks.children.list.side_effect = (
            lambda block_id, page_size: blocks_response(notion_tree[block_id]['blocks'])
        )
        yield client


@pytest.fixture
def wiki_session():
    return FakeWikiSession()
