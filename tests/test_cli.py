"""CLI tests."""

from __future__ import annotations

import json
import logging
from typing import Iterator

import pytest
import requests
from typer.testing import CliRunner

from conftest import HOST, FakeAdapter, repo_detail_payload, user_payload
from yuque_client.cli import main as cli
from yuque_client.client import Yuque
from yuque_client.toc import decode_toc

runner = CliRunner()


@pytest.fixture
def cli_adapter(monkeypatch: pytest.MonkeyPatch) -> FakeAdapter:
    adapter = FakeAdapter()

    def build_client(host, token) -> Yuque:
        session = requests.Session()
        session.mount("https://", adapter)
        return Yuque(token=token or "cli-token", host=host or HOST, session=session)

    monkeypatch.setattr(cli, "_build_client", build_client)
    return adapter


def test_toc_as_json(cli_adapter: FakeAdapter) -> None:
    cli_adapter.routes[("GET", "/api/v2/repos/lzzzt/ssg")] = (200, {"data": repo_detail_payload()})
    result = runner.invoke(cli.app, ["toc", "lzzzt/ssg"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["meta"]["count"] == 2
    assert [entry["type"] for entry in payload["toc"]] == ["DOC", "TITLE"]


def test_toc_raw(cli_adapter: FakeAdapter, sample_toc_yml: str) -> None:
    cli_adapter.routes[("GET", "/api/v2/repos/lzzzt/ssg")] = (200, {"data": repo_detail_payload()})
    result = runner.invoke(cli.app, ["toc", "lzzzt/ssg", "--raw", "--token", "t"])
    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("- type: META")
    assert decode_toc(result.stdout) == decode_toc(sample_toc_yml)
    assert cli_adapter.calls[0].headers["X-Auth-Token"] == "t"


def test_user(cli_adapter: FakeAdapter) -> None:
    cli_adapter.routes[("GET", "/api/v2/user")] = (200, {"data": user_payload()})
    result = runner.invoke(cli.app, ["user"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["login"] == "lzzzt"


def test_request_failure_exits_nonzero(cli_adapter: FakeAdapter) -> None:
    result = runner.invoke(cli.app, ["repo", "lzzzt/missing"])
    assert result.exit_code == 1


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("yuque_client")
    level, handlers, propagate = logger.level, list(logger.handlers), logger.propagate
    yield logger
    logger.setLevel(level)
    logger.handlers = handlers
    logger.propagate = propagate


def test_log_level_from_env(
    cli_adapter: FakeAdapter, package_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("YUQUE_LOG_LEVEL", "DEBUG")
    cli_adapter.routes[("GET", "/api/v2/user")] = (200, {"data": user_payload()})
    result = runner.invoke(cli.app, ["user"])
    assert result.exit_code == 0, result.output
    assert package_logger.level == logging.DEBUG


def test_log_level_option_beats_env(
    cli_adapter: FakeAdapter, package_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("YUQUE_LOG_LEVEL", "DEBUG")
    cli_adapter.routes[("GET", "/api/v2/user")] = (200, {"data": user_payload()})
    result = runner.invoke(cli.app, ["--log-level", "error", "user"])
    assert result.exit_code == 0, result.output
    assert package_logger.level == logging.ERROR
