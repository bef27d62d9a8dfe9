"""HTTP transport for the Yuque API."""

from __future__ import annotations

import time
from typing import Any, Mapping

import orjson
import requests

from yuque_client.api.docs import DocsClient
from yuque_client.api.groups import GroupsClient
from yuque_client.api.repos import ReposClient
from yuque_client.api.users import UsersClient
from yuque_client.core.config import DEFAULT_HOST, DEFAULT_USER_AGENT, Settings, get_settings
from yuque_client.core.errors import InternalError, RequestFailed, judge_status_code
from yuque_client.core.logging import get_logger
from yuque_client.core.metrics import REQUEST_COUNT, REQUEST_LATENCY, resource_of

logger = get_logger(__name__)

_BODY_METHODS = ("POST", "PUT")


class Yuque:
    """Authenticated client for one Yuque host.

    Every call is a single synchronous request; nothing is retried.
    """

    def __init__(
        self,
        token: str,
        host: str = DEFAULT_HOST,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self.token = token
        self.host = host.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, session: requests.Session | None = None
    ) -> "Yuque":
        settings = settings or get_settings()
        return cls(
            token=settings.token,
            host=settings.host,
            user_agent=settings.user_agent,
            timeout=settings.timeout,
            session=session,
        )

    def generate_headers(self) -> dict[str, str]:
        return {"X-Auth-Token": self.token, "User-Agent": self.user_agent}

    def request(
        self,
        method: str,
        api: str,
        data: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body, or None if empty."""
        method = method.upper()
        url = f"{self.host}{api}"
        headers = self.generate_headers()
        body: bytes | None = None
        if method in _BODY_METHODS:
            headers["Content-Type"] = "application/json"
            if data is not None:
                body = orjson.dumps(data)
        resource = resource_of(api)
        logger.debug("yuque request", extra={"ctx_method": method, "ctx_url": url})
        started = time.perf_counter()
        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                params=params,
                data=body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            REQUEST_COUNT.labels(resource, method, "error").inc()
            raise RequestFailed(f"{method} {url}: {exc}") from exc
        finally:
            REQUEST_LATENCY.labels(resource, method).observe(time.perf_counter() - started)
        REQUEST_COUNT.labels(resource, method, str(response.status_code)).inc()
        logger.debug(
            "yuque response",
            extra={"ctx_method": method, "ctx_url": url, "ctx_status": response.status_code},
        )
        judge_status_code(response.status_code, url)
        if not response.content:
            return None
        try:
            return orjson.loads(response.content)
        except orjson.JSONDecodeError as exc:
            raise InternalError(f"{method} {url}: invalid JSON body: {exc}") from exc

    def get(self, api: str, params: Mapping[str, Any] | None = None) -> Any:
        return self.request("GET", api, params=params)

    def post(self, api: str, data: Any = None) -> Any:
        return self.request("POST", api, data=data)

    def put(self, api: str, data: Any = None) -> Any:
        return self.request("PUT", api, data=data)

    def delete(self, api: str) -> Any:
        return self.request("DELETE", api)

    def docs(self) -> DocsClient:
        return DocsClient(self)

    def repos(self) -> ReposClient:
        return ReposClient(self)

    def users(self) -> UsersClient:
        return UsersClient(self)

    def groups(self) -> GroupsClient:
        return GroupsClient(self)

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "Yuque":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["Yuque"]
