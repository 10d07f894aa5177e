"""UTF-16 code-unit views over Python strings.

Python strings are sequences of code points, but surrogate pairing, signing
length and the latin1 hash are all defined over UTF-16 code units. Lone
surrogate code points (legal in a ``str`` decoded from ``\\udXXX`` escapes)
map to a single unit of the same value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator

HIGH_SURROGATE_MIN: Final[int] = 0xD800
HIGH_SURROGATE_MAX: Final[int] = 0xDBFF
LOW_SURROGATE_MIN: Final[int] = 0xDC00
LOW_SURROGATE_MAX: Final[int] = 0xDFFF

_BMP_MAX: Final[int] = 0xFFFF
_ASTRAL_OFFSET: Final[int] = 0x10000


def iter_code_units(text: str) -> Iterator[int]:
    """Yield the UTF-16 code units of ``text`` in order."""

    for char in text:
        point = ord(char)
        if point > _BMP_MAX:
            point -= _ASTRAL_OFFSET
            yield HIGH_SURROGATE_MIN + (point >> 10)
            yield LOW_SURROGATE_MIN + (point & 0x3FF)
        else:
            yield point


def code_unit_length(text: str) -> int:
    """Number of UTF-16 code units needed for ``text``."""

    return len(text) + sum(1 for char in text if ord(char) > _BMP_MAX)


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_MIN <= unit <= HIGH_SURROGATE_MAX


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_MIN <= unit <= LOW_SURROGATE_MAX


def first_unpaired_surrogate(text: str) -> int | None:
    """Return the code-unit index of the first badly paired surrogate, if any.

    A high surrogate must be followed by a low surrogate; a low surrogate must
    directly follow a high surrogate that has not already been paired. A high
    surrogate at the end of the string is unpaired.
    """

    pending_high: int | None = None
    for index, unit in enumerate(iter_code_units(text)):
        if is_high_surrogate(unit):
            if pending_high is not None:
                return pending_high
            pending_high = index
        elif is_low_surrogate(unit):
            if pending_high is None:
                return index
            pending_high = None
        elif pending_high is not None:
            return pending_high
    return pending_high


__all__ = [
    "HIGH_SURROGATE_MAX",
    "HIGH_SURROGATE_MIN",
    "LOW_SURROGATE_MAX",
    "LOW_SURROGATE_MIN",
    "code_unit_length",
    "first_unpaired_surrogate",
    "is_high_surrogate",
    "is_low_surrogate",
    "iter_code_units",
]
