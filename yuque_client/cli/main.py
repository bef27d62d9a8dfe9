"""CLI entrypoint for the Yuque client."""

from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import typer

from yuque_client.client import Yuque
from yuque_client.core.config import get_settings
from yuque_client.core.errors import YuqueError
from yuque_client.core.logging import configure_logging
from yuque_client.toc import encode_toc

app = typer.Typer(name="yuque", help="Yuque API command-line interface")


def _build_client(host: Optional[str], token: Optional[str]) -> Yuque:
    settings = get_settings().model_copy()
    if host:
        settings.host = host
    if token:
        settings.token = token
    return Yuque.from_settings(settings)


@contextmanager
def _client(host: Optional[str], token: Optional[str]) -> Iterator[Yuque]:
    client = _build_client(host, token)
    try:
        yield client
    except YuqueError as exc:
        typer.echo(f"Request failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    finally:
        client.close()


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


HostOption = typer.Option(None, "--host", help="Override API host")
TokenOption = typer.Option(None, "--token", help="Override API token")


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (default: $YUQUE_LOG_LEVEL or WARNING)"
    ),
) -> None:
    configure_logging(log_level)


@app.command()
def toc(
    namespace: str = typer.Argument(..., help="Repository namespace, e.g. login/book"),
    raw: bool = typer.Option(False, "--raw", help="Print the toc_yml wire text"),
    host: Optional[str] = HostOption,
    token: Optional[str] = TokenOption,
) -> None:
    """Show the table of contents of a repository."""
    with _client(host, token) as client:
        outline = client.repos().get_toc(namespace)
    if outline is None:
        typer.echo("Repository has no table of contents", err=True)
        return
    if raw:
        typer.echo(encode_toc(outline), nl=False)
        return
    _echo_json(outline.model_dump(mode="json"))


@app.command()
def repo(
    namespace: str = typer.Argument(..., help="Repository namespace or id"),
    host: Optional[str] = HostOption,
    token: Optional[str] = TokenOption,
) -> None:
    """Show repository detail."""
    with _client(host, token) as client:
        response = client.repos().get(namespace)
    _echo_json(response.data.model_dump(mode="json", by_alias=True))


@app.command()
def docs(
    namespace: str = typer.Argument(..., help="Repository namespace or id"),
    host: Optional[str] = HostOption,
    token: Optional[str] = TokenOption,
) -> None:
    """List documents of a repository."""
    with _client(host, token) as client:
        response = client.docs().list_with_repo(namespace)
    _echo_json([{"id": item.id, "slug": item.slug, "title": item.title} for item in response.data])


@app.command()
def doc(
    namespace: str = typer.Argument(..., help="Repository namespace or id"),
    slug: str = typer.Argument(..., help="Document slug"),
    host: Optional[str] = HostOption,
    token: Optional[str] = TokenOption,
) -> None:
    """Print the markdown source of a document."""
    with _client(host, token) as client:
        response = client.docs().get_with_repo_ns(namespace, slug, params={"raw": 1})
    typer.echo(response.data.body)


@app.command()
def user(
    login: Optional[str] = typer.Argument(None, help="User login; defaults to the token owner"),
    host: Optional[str] = HostOption,
    token: Optional[str] = TokenOption,
) -> None:
    """Show a user profile."""
    with _client(host, token) as client:
        users = client.users()
        response = users.get(login) if login else users.get_current()
    _echo_json(response.data.model_dump(mode="json", by_alias=True))


if __name__ == "__main__":
    app()
