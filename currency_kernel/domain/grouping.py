"""
Grouping -- digit separators and fixed-decimal normalization.

Renders a number as its shortest round-trip base-10 string, inserts
group separators into the integer part (Western 3-digit or South Asian
2-digit-after-the-last-3 convention) and optionally truncates or
zero-pads the fractional part to a fixed length. The fractional part is
never re-rounded here; rounding is the job of ``domain.rounding``.
"""

from __future__ import annotations

import math
from decimal import Decimal

from currency_kernel.domain.currency import DigitGrouping

GROUP_SEPARATOR = ","
DECIMAL_POINT = "."


def number_to_string(amount: float) -> str:
    """
    Plain string form of a number.

    Integer-valued amounts have no fractional part (``1234.0 -> "1234"``),
    other floats use the shortest round-trip digits in positional
    notation (``1e-07 -> "0.0000001"``). NaN and infinities use ``repr``.
    """
    if isinstance(amount, int):
        return str(amount)
    if not math.isfinite(amount):
        return repr(amount)
    if amount == 0:
        return "0"

    text = repr(float(amount))
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _group_from_right(digits: str, size: int) -> str:
    first = len(digits) % size or size
    groups = [digits[:first]]
    groups.extend(digits[i:i + size] for i in range(first, len(digits), size))
    return GROUP_SEPARATOR.join(groups)


def group_digits(digits: str, digit_grouping: DigitGrouping) -> str:
    """Insert separators into an unsigned string of integer digits."""
    if digit_grouping is DigitGrouping.THREE:
        return _group_from_right(digits, 3)

    # TWO: the last 3 digits are a fixed group, the rest go in pairs
    head, tail = digits[:-3], digits[-3:]
    if not head:
        return tail
    return _group_from_right(head, 2) + GROUP_SEPARATOR + tail


def format_amount(
    amount: float,
    digit_grouping: DigitGrouping | int,
    fixed_decimal_places: int | None = None,
) -> str:
    """
    Format ``amount`` with digit grouping.

    Args:
        amount: The amount to format. It is not rounded.
        digit_grouping: ``DigitGrouping.TWO`` / ``THREE`` (or 2 / 3).
        fixed_decimal_places: When positive, the fractional part is
            truncated or right-padded with zeros to exactly this length.
            None or 0 leaves the fractional part as rendered.

    Returns:
        The grouped string, e.g. ``format_amount(123456, 2, 0) == "1,23,456"``.
    """
    text = number_to_string(amount)
    if not isinstance(amount, int) and not math.isfinite(amount):
        return text

    integer_part, _, fraction = text.partition(DECIMAL_POINT)
    sign = ""
    if integer_part.startswith("-"):
        sign, integer_part = "-", integer_part[1:]

    integer_part = sign + group_digits(integer_part, DigitGrouping(digit_grouping))

    if fixed_decimal_places and fixed_decimal_places > 0:
        fraction = fraction[:fixed_decimal_places].ljust(fixed_decimal_places, "0")

    if fraction:
        return integer_part + DECIMAL_POINT + fraction
    return integer_part
