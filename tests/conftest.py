"""Test fixtures for the Yuque client."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

HOST = "https://yuque.test/api/v2"

SAMPLE_TOC_YML = """\
- type: META
  count: 2
  display_level: 1
  tail_type: "doc"
  base_version_id: 1
  published: true
  max_level: 1
  last_updated_at: "2023-01-01T00:00:00+08:00"
  version_id: 5
- type: DOC
  title: Getting started
  uuid: aaaa1111
  url: getting-started
  prev_uuid: ''
  sibling_uuid: ''
  child_uuid: bbbb2222
  parent_uuid: ''
  doc_id: 101
  level: 0
  id: 9001
  open_window: 0
  visible: 1
- type: TITLE
  title: Advanced
  uuid: bbbb2222
  url: ''
  prev_uuid: aaaa1111
  sibling_uuid: ''
  child_uuid: ''
  parent_uuid: aaaa1111
  doc_id: ''
  level: 1
  id: ''
  open_window: 0
  visible: 1
"""


@pytest.fixture(autouse=True)
def reset_state(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate settings from the developer machine between tests."""
    from yuque_client.core import config

    for key in ("YUQUE_HOST", "YUQUE_TOKEN", "YUQUE_USER_AGENT", "YUQUE_TIMEOUT", "YUQUE_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("YUQUE_CONFIG", str(tmp_path / "missing.yaml"))
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


class FakeAdapter(BaseAdapter):
    """Transport adapter answering from a ``(method, path) -> (status, body)`` table."""

    def __init__(self, routes: dict[tuple[str, str], tuple[int, Any]] | None = None) -> None:
        super().__init__()
        self.routes = routes or {}
        self.calls: list[requests.PreparedRequest] = []
        self.error: Exception | None = None

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        path = urlsplit(request.url).path
        status, body = self.routes.get((request.method, path), (404, {"message": "Not Found"}))
        response = requests.Response()
        response.status_code = status
        if body is None:
            response._content = b""
        elif isinstance(body, bytes):
            response._content = body
        else:
            response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
        response.url = request.url
        response.request = request
        return response

    def close(self) -> None:
        pass


@pytest.fixture
def adapter() -> FakeAdapter:
    return FakeAdapter()


@pytest.fixture
def client(adapter: FakeAdapter):
    from yuque_client.client import Yuque

    session = requests.Session()
    session.mount("https://", adapter)
    with Yuque(token="secret-token", host=HOST, session=session) as yuque:
        yield yuque


@pytest.fixture(scope="session")
def sample_toc_yml() -> str:
    return SAMPLE_TOC_YML


def user_payload(login: str = "lzzzt", user_type: str = "User") -> dict[str, Any]:
    return {
        "id": 7,
        "type": user_type,
        "login": login,
        "name": login.title(),
        "avatar_url": "https://cdn.test/avatar.png",
        "created_at": "2022-05-01T10:00:00.000Z",
        "updated_at": "2023-01-02T10:00:00.000Z",
    }


def repo_detail_payload(toc_yml: str | None = SAMPLE_TOC_YML) -> dict[str, Any]:
    return {
        "id": 42,
        "type": "Book",
        "slug": "ssg",
        "name": "Static site",
        "namespace": "lzzzt/ssg",
        "user_id": 7,
        "user": user_payload(),
        "description": None,
        "toc_yml": toc_yml,
        "creator_id": 7,
        "public": 1,
        "items_count": 2,
        "likes_count": 0,
        "watches_count": 1,
        "created_at": "2022-05-01T10:00:00.000Z",
        "updated_at": "2023-01-02T10:00:00.000Z",
    }


def doc_detail_payload(format: str = "markdown", body: str = "# Hello") -> dict[str, Any]:
    return {
        "id": 101,
        "slug": "getting-started",
        "title": "Getting started",
        "book_id": 42,
        "user_id": 7,
        "format": format,
        "body": body,
        "body_draft": "",
        "body_html": "<h1>Hello</h1>",
        "creator_id": 7,
        "public": 1,
        "status": 1,
        "likes_count": 3,
        "comments_count": 0,
        "content_updated_at": "2023-01-02T10:00:00.000Z",
        "deleted_at": None,
        "created_at": "2022-05-01T10:00:00.000Z",
        "updated_at": "2023-01-02T10:00:00.000Z",
    }
