"""YAML codec for the ``toc_yml`` outline text.

The wire text is two YAML lists written back to back: a one-record list
holding the ``META`` header, then the list of ``DOC``/``TITLE`` entries.
Nothing in the text marks where the first list ends. The header always
serializes to ``META_BLOCK_LINES`` lines, so the split is positional and
must move in lockstep with any change to the header fields.

Encoding is only semantically inverse to decoding: ``decode_toc(encode_toc(x))``
equals ``x`` but ``encode_toc(decode_toc(s))`` may quote, order or wrap
fields differently from ``s``.
"""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from yuque_client.core.errors import (
    FieldTypeMismatch,
    MalformedStructuredText,
    MetadataMissing,
    UnknownTocEntryType,
)
from yuque_client.models.common import WIRE_FLAGS
from yuque_client.models.toc import Toc, TocDoc, TocMeta, TocTitle

META_BLOCK_LINES = 9

METADATA = "metadata"
ENTRIES = "entries"

_WIRE_CONTEXT = {WIRE_FLAGS: True}

_ENTRY_TYPES: dict[str, type[TocDoc] | type[TocTitle]] = {
    "DOC": TocDoc,
    "TITLE": TocTitle,
}


def decode_toc(text: str | None) -> Toc | None:
    """Parse ``toc_yml`` text; ``None`` or blank text means the repo has no outline."""
    if text is None or not text.strip():
        return None
    lines = text.splitlines(keepends=True)
    meta = _decode_meta("".join(lines[:META_BLOCK_LINES]))
    entries = _decode_entries("".join(lines[META_BLOCK_LINES:]))
    return Toc(meta=meta, toc=tuple(entries))


def encode_toc(toc: Toc | None) -> str | None:
    """Serialize an outline to ``toc_yml`` text; ``None`` stays ``None``."""
    if toc is None:
        return None
    meta_text = _dump([toc.meta.model_dump(mode="json")])
    meta_lines = len(meta_text.splitlines())
    if meta_lines != META_BLOCK_LINES:
        raise MalformedStructuredText(
            METADATA,
            f"header serialized to {meta_lines} lines, expected {META_BLOCK_LINES}",
        )
    entries_text = _dump([_entry_record(entry) for entry in toc.toc])
    return meta_text.rstrip("\n") + "\n" + entries_text


def _decode_meta(text: str) -> TocMeta:
    records = _load_list(text, METADATA)
    if not records:
        raise MetadataMissing()
    if len(records) > 1:
        raise MalformedStructuredText(METADATA, f"expected one header record, got {len(records)}")
    return _validate(TocMeta, records[0], METADATA, 0)


def _decode_entries(text: str) -> list[TocDoc | TocTitle]:
    entries: list[TocDoc | TocTitle] = []
    for index, record in enumerate(_load_list(text, ENTRIES)):
        entry_type = record.get("type")
        model = _ENTRY_TYPES.get(entry_type) if isinstance(entry_type, str) else None
        if model is None:
            raise UnknownTocEntryType(entry_type, index)
        entries.append(_validate(model, record, ENTRIES, index))
    return entries


def _load_list(text: str, section: str) -> list[dict[str, Any]]:
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MalformedStructuredText(section, str(exc)) from exc
    if loaded is None:
        return []
    if not isinstance(loaded, list):
        raise MalformedStructuredText(section, f"expected a list, got {type(loaded).__name__}")
    for index, record in enumerate(loaded):
        if not isinstance(record, dict):
            raise MalformedStructuredText(
                section, f"record {index} is {type(record).__name__}, expected a mapping"
            )
    return loaded


def _validate(model: type[BaseModel], record: dict[str, Any], section: str, index: int) -> Any:
    try:
        return model.model_validate(record, context=_WIRE_CONTEXT)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        detail = f"record {index}: " + "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in errors
        )
        if any(err["type"] == "missing" for err in errors):
            raise MalformedStructuredText(section, detail) from exc
        raise FieldTypeMismatch(section, detail) from exc


def _entry_record(entry: TocDoc | TocTitle) -> dict[str, Any]:
    record: dict[str, Any] = {"type": entry.type}
    record.update(entry.model_dump(mode="json"))
    return record


def _dump(records: list[dict[str, Any]]) -> str:
    return yaml.safe_dump(
        records,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=float("inf"),
    )


__all__ = ["META_BLOCK_LINES", "decode_toc", "encode_toc"]
