"""Document endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from yuque_client.api.base import ResourceClient, path_segment
from yuque_client.core.errors import NotSupportFormat
from yuque_client.models.common import YuqueFormat, YuqueResponse
from yuque_client.models.doc import Doc, DocDetail, DocListItem


class DocsClient(ResourceClient):
    def list_with_repo(self, namespace: object) -> YuqueResponse[list[DocListItem]]:
        url = f"/repos/{path_segment(namespace)}/docs"
        return self._envelope(list[DocListItem], self.client.get(url), url)

    def get_with_repo_ns(
        self,
        namespace: object,
        slug: str,
        params: Mapping[str, Any] | None = None,
    ) -> YuqueResponse[DocDetail]:
        """Fetch one document; pass ``{"raw": 1}`` to receive the markdown source."""
        url = f"/repos/{path_segment(namespace)}/docs/{path_segment(slug)}"
        return self._envelope(DocDetail, self.client.get(url, params=params), url)

    def create_with_repo(self, namespace: object, doc: Doc) -> YuqueResponse[DocDetail]:
        url = f"/repos/{path_segment(namespace)}/docs"
        return self._envelope(DocDetail, self.client.post(url, doc.to_payload()), url)

    def delete_with_repo(self, namespace: object, doc_id: int) -> YuqueResponse[DocDetail]:
        url = f"/repos/{path_segment(namespace)}/docs/{doc_id}"
        return self._envelope(DocDetail, self.client.delete(url), url)

    def update_with_repo(
        self, namespace: object, doc_id: int, doc: Doc
    ) -> YuqueResponse[DocDetail]:
        if doc.format is not YuqueFormat.MARKDOWN:
            raise NotSupportFormat(doc.format.value)
        url = f"/repos/{path_segment(namespace)}/docs/{doc_id}"
        return self._envelope(DocDetail, self.client.put(url, doc.to_payload()), url)


__all__ = ["DocsClient"]
