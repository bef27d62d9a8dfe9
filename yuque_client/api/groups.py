"""Group endpoints."""

from __future__ import annotations

from yuque_client.api.base import ResourceClient, path_segment
from yuque_client.models.common import YuqueResponse
from yuque_client.models.user import GroupUser, User, UserDetail


class GroupsClient(ResourceClient):
    def list_of_user(self, login: object) -> YuqueResponse[list[User]]:
        url = f"/users/{path_segment(login)}/groups"
        return self._envelope(list[User], self.client.get(url), url)

    def get(self, login: object) -> YuqueResponse[UserDetail]:
        url = f"/groups/{path_segment(login)}"
        return self._envelope(UserDetail, self.client.get(url), url)

    def list_members(self, login: object) -> YuqueResponse[list[GroupUser]]:
        url = f"/groups/{path_segment(login)}/users"
        return self._envelope(list[GroupUser], self.client.get(url), url)


__all__ = ["GroupsClient"]
