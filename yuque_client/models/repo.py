"""Repository (book) records."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from yuque_client.models.toc import Toc
from yuque_client.models.user import User
from yuque_client.toc import decode_toc, encode_toc
from yuque_client.utils.ids import gen_random_slug


class RepoType(str, Enum):
    BOOK = "Book"
    DESIGN = "Design"
    ALL = "all"


class RepoListItem(BaseModel):
    """Repository summary; ``public`` is 1 public, 0 private, 2 members only."""

    id: int
    book_type: RepoType = Field(alias="type")
    slug: str
    name: str
    namespace: str
    user_id: int
    user: User | None = None
    description: str | None = None
    creator_id: int
    public: int
    likes_count: int = 0
    watches_count: int = 0
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(populate_by_name=True)


class RepoDetail(RepoListItem):
    """Repository detail; the outline arrives as YAML text in ``toc_yml``."""

    toc: Toc | None = Field(default=None, alias="toc_yml")
    items_count: int = 0

    @field_validator("toc", mode="before")
    @classmethod
    def _decode_toc(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return decode_toc(value)
        return value

    @field_serializer("toc")
    def _encode_toc(self, toc: Toc | None) -> str | None:
        return encode_toc(toc)


class Repo(BaseModel):
    """Payload for creating or updating a repository."""

    name: str
    slug: str = Field(default_factory=lambda: gen_random_slug(6))
    description: str = ""
    public: int = 1
    book_type: RepoType = Field(default=RepoType.BOOK, alias="type")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_detail(cls, detail: RepoListItem) -> "Repo":
        return cls(
            name=detail.name,
            slug=detail.slug,
            description=detail.description or "",
            public=detail.public,
            book_type=detail.book_type,
        )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


__all__ = ["RepoType", "RepoListItem", "RepoDetail", "Repo"]
