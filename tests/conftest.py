# tests/conftest.py
import json

import pytest
import requests
from unittest.mock import MagicMock

from binsta.client import create_client
from binsta.config import Settings, get_settings

TEST_API_URL = "http://localhost:3000/api/v1"
TEST_ANON_KEY = "test-anon-key"
SIGNED_URL = "http://localhost:54321/storage/v1/object/upload/sign/files/abc?token=xyz"


def make_response(status_code=200, body=None, url=TEST_API_URL):
    """Builds a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode() if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode()
        response.headers["Content-Type"] = "application/json"
    return response


def file_node(**overrides):
    node = {
        "id": "dLedqBPG7b",
        "type": "file",
        "name": None,
        "owner_id": "user-1",
        "content_type": None,
        "content_size": None,
        "parent_id": "root-id",
        "upload_complete": False,
        "created_at": "2023-03-27T15:04:05.000Z",
    }
    node.update(overrides)
    return node


def folder_node(**overrides):
    node = {
        "id": "folder-1",
        "type": "folder",
        "name": None,
        "owner_id": "user-1",
        "parent_id": "root-id",
        "created_at": "2023-03-27T15:04:05.000Z",
        "children": [],
    }
    node.update(overrides)
    return node


@pytest.fixture
def settings():
    """
    Provides settings for testing that ignore the environment and any .env file.
    """
    return Settings(
        _env_file=None,
        BINSTA_API_URL=TEST_API_URL,
        BINSTA_ANON_KEY=TEST_ANON_KEY,
        BINSTA_TOKEN="test-token",
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def session():
    """A mock requests session; tests set session.request.return_value."""
    mock_session = MagicMock(spec=requests.Session)
    mock_session.request.return_value = make_response(200, {})
    return mock_session


@pytest.fixture
def client(settings, session):
    return create_client("test-token", settings=settings, session=session)


@pytest.fixture
def unauthed_client(session):
    return create_client(
        api_url=TEST_API_URL, anon_key=TEST_ANON_KEY, session=session
    )
