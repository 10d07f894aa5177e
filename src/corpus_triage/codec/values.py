"""Tagged JSON value tree produced by the strict decoder.

Numbers are IEEE-754 doubles, matching the number model of the parser the
signing encoding was historically produced with. Object members keep their
insertion order.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class JsonNull:
    pass


@dataclass(frozen=True, slots=True)
class JsonBool:
    value: bool


@dataclass(frozen=True, slots=True)
class JsonNumber:
    value: float


@dataclass(frozen=True, slots=True)
class JsonString:
    value: str


@dataclass(frozen=True, slots=True)
class JsonArray:
    items: tuple[JsonValue, ...] = ()

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class JsonObject:
    members: tuple[tuple[str, JsonValue], ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, JsonValue]]) -> JsonObject:
        """Build an object; a repeated key keeps its first position and its last value."""

        merged: dict[str, JsonValue] = {}
        for key, value in pairs:
            merged[key] = value
        return cls(members=tuple(merged.items()))

    def keys(self) -> tuple[str, ...]:
        return tuple(key for key, _ in self.members)

    def __len__(self) -> int:
        return len(self.members)


JsonValue = JsonNull | JsonBool | JsonNumber | JsonString | JsonArray | JsonObject

JSON_NULL = JsonNull()

__all__ = [
    "JSON_NULL",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
]
