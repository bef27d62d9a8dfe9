"""Shared plumbing for resource clients."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from yuque_client.core.errors import InternalError
from yuque_client.models.common import YuqueResponse

if TYPE_CHECKING:
    from yuque_client.client import Yuque


class ResourceClient:
    def __init__(self, client: "Yuque") -> None:
        self.client = client

    @staticmethod
    def _envelope(data_type: Any, payload: Any, url: str) -> YuqueResponse[Any]:
        """Validate a response body against ``YuqueResponse[data_type]``."""
        try:
            return YuqueResponse[data_type].model_validate(payload)
        except ValidationError as exc:
            raise InternalError(f"{url}: unexpected response shape: {exc}") from exc


def path_segment(value: object) -> str:
    """Login, namespace or id as a path segment; the ``/`` inside a namespace is kept."""
    return str(value).strip("/")


__all__ = ["ResourceClient", "path_segment"]
