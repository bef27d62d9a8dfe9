"""User endpoints."""

from __future__ import annotations

from yuque_client.api.base import ResourceClient, path_segment
from yuque_client.models.common import YuqueResponse
from yuque_client.models.user import UserDetail


class UsersClient(ResourceClient):
    def get_current(self) -> YuqueResponse[UserDetail]:
        """The user owning the token."""
        url = "/user"
        return self._envelope(UserDetail, self.client.get(url), url)

    def get(self, login: object) -> YuqueResponse[UserDetail]:
        url = f"/users/{path_segment(login)}"
        return self._envelope(UserDetail, self.client.get(url), url)


__all__ = ["UsersClient"]
