"""Shared field types and the response envelope."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Generic, Iterator, TypeVar

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer, ValidationInfo

U32_MAX = 0xFFFFFFFF

U32 = Annotated[int, Field(strict=True, ge=0, le=U32_MAX)]

# Validation context key: when set, flags must arrive as integers, never booleans.
WIRE_FLAGS = "wire_flags"


def _number_to_bool(value: Any, info: ValidationInfo) -> bool:
    if isinstance(value, bool):
        if info.context and info.context.get(WIRE_FLAGS):
            raise ValueError(f"expected an integer flag, got boolean {value!r}")
        return value
    if isinstance(value, int) and value >= 0:
        return value != 0
    raise ValueError(f"expected a non-negative integer flag, got {value!r}")


# Boolean flag transmitted as a small integer: nonzero reads as True, written as 1/0.
NumberBool = Annotated[
    bool,
    BeforeValidator(_number_to_bool),
    PlainSerializer(lambda value: 1 if value else 0, return_type=int),
]


class YuqueFormat(str, Enum):
    LAKE = "lake"
    MARKDOWN = "markdown"
    HTML = "html"


class Abilities(BaseModel):
    update: bool
    destroy: bool


D = TypeVar("D")


class YuqueResponse(BaseModel, Generic[D]):
    """Envelope wrapping every API payload."""

    data: D
    abilities: Abilities | None = None

    def iter_data(self) -> Iterator[Any]:
        """Iterate list payloads; yields the single record otherwise."""
        if isinstance(self.data, list):
            yield from self.data
        else:
            yield self.data


__all__ = [
    "U32",
    "U32_MAX",
    "NumberBool",
    "WIRE_FLAGS",
    "YuqueFormat",
    "Abilities",
    "YuqueResponse",
]
