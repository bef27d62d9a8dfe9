"""User and group records."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """User or group summary; ``type`` is ``User`` or ``Group``."""

    id: int
    user_type: str = Field(alias="type")
    login: str
    name: str
    avatar_url: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(populate_by_name=True)


class UserDetail(User):
    space_id: int | None = None
    account_id: int | None = None
    owner_id: int | None = None
    books_count: int = 0
    public_books_count: int = 0
    members_count: int = 0
    description: str | None = None


class GroupUser(BaseModel):
    """Membership of a user in a group; ``role`` is 0 for owner, 1 for member."""

    id: int
    group_id: int
    group: User | None = None
    user_id: int
    user: User | None = None
    role: int
    created_at: datetime
    updated_at: datetime


__all__ = ["User", "UserDetail", "GroupUser"]
