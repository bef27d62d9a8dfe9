"""Document records."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from yuque_client.core.errors import NotSupportFormat
from yuque_client.models.common import NumberBool, YuqueFormat
from yuque_client.models.repo import RepoListItem
from yuque_client.models.user import User
from yuque_client.utils.ids import gen_random_slug


class DocListItem(BaseModel):
    """Document summary; ``status`` is True for published, False for draft."""

    id: int
    slug: str
    title: str
    description: str | None = None
    user_id: int
    format: YuqueFormat = YuqueFormat.MARKDOWN
    public: NumberBool
    status: NumberBool
    likes_count: int = 0
    comments_count: int = 0
    content_updated_at: datetime | None = None
    book: RepoListItem | None = None
    user: User | None = None
    last_editor: User | None = None
    created_at: datetime
    updated_at: datetime


class DocDetail(BaseModel):
    id: int
    slug: str
    title: str
    book_id: int
    book: RepoListItem | None = None
    user_id: int
    user: User | None = None
    format: YuqueFormat = YuqueFormat.MARKDOWN
    body: str = ""
    body_draft: str = ""
    body_html: str | None = None
    body_lake: str | None = None
    creator_id: int | None = None
    public: NumberBool
    status: NumberBool
    likes_count: int | None = None
    comments_count: int | None = None
    content_updated_at: datetime | None = None
    deleted_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class Doc(BaseModel):
    """Payload for creating or updating a document; ``body`` is at most 5MB."""

    title: str
    slug: str = Field(default_factory=lambda: gen_random_slug(16))
    format: YuqueFormat = YuqueFormat.MARKDOWN
    body: str = ""

    @classmethod
    def from_detail(cls, detail: DocDetail) -> "Doc":
        """Rebuild an editable payload from a fetched markdown document."""
        if detail.format is not YuqueFormat.MARKDOWN:
            raise NotSupportFormat(detail.format.value)
        return cls(title=detail.title, slug=detail.slug, format=detail.format, body=detail.body)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


__all__ = ["DocListItem", "DocDetail", "Doc"]
