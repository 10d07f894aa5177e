"""ECMAScript ``Number::toString`` rendering for IEEE-754 doubles.

The signing encoding must match byte-for-byte what existing consumers
produced, so numbers are rendered the ECMAScript way (``1`` not ``1.0``,
``1e+21``, ``1e-7``) instead of with ``repr``. The shortest round-trip digit
string comes from ``repr``; only the layout rules differ.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Final

_MAX_PLAIN_EXPONENT: Final[int] = 21
_MIN_PLAIN_EXPONENT: Final[int] = -6


def format_number(value: float) -> str:
    """Render a finite double as ECMAScript would."""

    if not math.isfinite(value):
        raise ValueError(f"cannot render non-finite number {value!r}")
    if value == 0:
        return "0"
    if value < 0:
        return "-" + format_number(-value)

    digits, point = shortest_digits(value)
    k = len(digits)
    n = point

    if k <= n <= _MAX_PLAIN_EXPONENT:
        return digits + "0" * (n - k)
    if 0 < n <= _MAX_PLAIN_EXPONENT:
        return f"{digits[:n]}.{digits[n:]}"
    if _MIN_PLAIN_EXPONENT < n <= 0:
        return "0." + "0" * (-n) + digits

    exponent = n - 1
    sign = "+" if exponent >= 0 else "-"
    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{mantissa}e{sign}{abs(exponent)}"


def shortest_digits(value: float) -> tuple[str, int]:
    """Return ``(digits, n)`` with ``value == 0.<digits> * 10**n``.

    ``digits`` is the shortest string that round-trips to ``value`` and has no
    trailing zeros. ``value`` must be positive and finite.
    """

    _, raw_digits, exponent = Decimal(repr(value)).as_tuple()
    digits = list(raw_digits)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    # ``as_tuple`` can return leading zeros only for zero itself, excluded above.
    text = "".join(str(digit) for digit in digits)
    return text, exponent + len(text)


__all__ = ["format_number", "shortest_digits"]
