"""Repository endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from yuque_client.api.base import ResourceClient, path_segment
from yuque_client.models.common import YuqueResponse
from yuque_client.models.repo import Repo, RepoDetail, RepoListItem
from yuque_client.models.toc import Toc


class ReposClient(ResourceClient):
    def list_repo_of_user(
        self, user: object, params: Mapping[str, Any] | None = None
    ) -> YuqueResponse[list[RepoListItem]]:
        """List repositories owned by a user login or id."""
        url = f"/users/{path_segment(user)}/repos"
        return self._envelope(list[RepoListItem], self.client.get(url, params=params), url)

    def list_repo_of_group(
        self, group: object, params: Mapping[str, Any] | None = None
    ) -> YuqueResponse[list[RepoListItem]]:
        url = f"/groups/{path_segment(group)}/repos"
        return self._envelope(list[RepoListItem], self.client.get(url, params=params), url)

    def create_repo_of_user(self, user: object, repo: Repo) -> YuqueResponse[RepoDetail]:
        url = f"/users/{path_segment(user)}/repos"
        return self._envelope(RepoDetail, self.client.post(url, repo.to_payload()), url)

    def create_repo_of_group(self, group: object, repo: Repo) -> YuqueResponse[RepoDetail]:
        url = f"/groups/{path_segment(group)}/repos"
        return self._envelope(RepoDetail, self.client.post(url, repo.to_payload()), url)

    def get(
        self, repo: object, params: Mapping[str, Any] | None = None
    ) -> YuqueResponse[RepoDetail]:
        """Fetch repository detail by namespace (``login/slug``) or id.

        The outline in ``data.toc`` is decoded here; a malformed ``toc_yml``
        raises the matching ``TocError`` subclass.
        """
        url = f"/repos/{path_segment(repo)}"
        return self._envelope(RepoDetail, self.client.get(url, params=params), url)

    def get_toc(self, repo: object) -> Toc | None:
        return self.get(repo).data.toc

    def update(self, repo: object, data: Repo) -> YuqueResponse[RepoDetail]:
        url = f"/repos/{path_segment(repo)}"
        return self._envelope(RepoDetail, self.client.put(url, data.to_payload()), url)

    def delete(self, repo: object) -> None:
        self.client.delete(f"/repos/{path_segment(repo)}")


__all__ = ["ReposClient"]
