"""Table-of-contents records.

A repository outline is one ``TocMeta`` header followed by ``TocDoc`` and
``TocTitle`` entries. Entries form a forest through their uuid links; the
links are not checked, so a link may name an entry that is not present.
Entry order is render order.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any, Iterator, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictBool

from yuque_client.models.common import U32, NumberBool

NO_LINK = ""


def _scalar_to_str(value: Any) -> Any:
    # Unquoted YAML scalars such as 2023, 1.5 or 2023-01-01 arrive typed.
    if isinstance(value, (int, float, date)) and not isinstance(value, bool):
        return str(value)
    return value


Text = Annotated[str, BeforeValidator(_scalar_to_str)]
# "" means no relation; null is not a link.
Link = Text


class _TocRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class TocMeta(_TocRecord):
    """Outline header, always the first serialized block."""

    type: Literal["META"] = "META"
    count: U32
    display_level: U32 | None = None
    tail_type: Text
    base_version_id: U32
    published: StrictBool
    max_level: U32
    last_updated_at: datetime
    version_id: U32


class _TocNode(_TocRecord):
    title: Text
    uuid: Text
    url: Text
    prev_uuid: Link
    sibling_uuid: Link
    child_uuid: Link
    parent_uuid: Link


class TocDoc(_TocNode):
    """Entry backed by a real document."""

    type: Literal["DOC"] = "DOC"
    doc_id: U32
    level: U32
    id: U32
    open_window: NumberBool
    visible: NumberBool


class TocTitle(_TocNode):
    """Section heading; ``doc_id`` and ``id`` are free-form strings."""

    type: Literal["TITLE"] = "TITLE"
    doc_id: Text
    level: U32
    id: Text
    open_window: NumberBool
    visible: NumberBool


TocEntry = Annotated[Union[TocDoc, TocTitle], Field(discriminator="type")]


class Toc(_TocRecord):
    meta: TocMeta
    toc: tuple[TocEntry, ...] = ()

    def find(self, uuid: str) -> TocDoc | TocTitle | None:
        if not uuid:
            return None
        for entry in self.toc:
            if entry.uuid == uuid:
                return entry
        return None

    def children(self, parent_uuid: str) -> list[TocDoc | TocTitle]:
        """Direct children of ``parent_uuid`` in render order."""
        return [entry for entry in self.toc if entry.parent_uuid == parent_uuid]

    def roots(self) -> list[TocDoc | TocTitle]:
        return self.children(NO_LINK)

    def docs(self) -> Iterator[TocDoc]:
        return (entry for entry in self.toc if isinstance(entry, TocDoc))


__all__ = ["NO_LINK", "TocMeta", "TocDoc", "TocTitle", "TocEntry", "Toc"]
