"""
Rounding -- scale, round, descale.

Responsibility:
    Rounds a float amount to a number of decimal places under one of two
    policies, and resolves the precision to use from currency metadata.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O, no logging.

Invariants enforced:
    - Default policy is ceiling on the scaled value: a non-negative amount
      is never rounded down.
    - Nearest policy rounds half-up on ties (toward positive infinity),
      not half-to-even like the ``round`` builtin.
    - The arithmetic is literally ``op(amount * 10**d) / 10**d`` for both
      policies and both signs. Negative amounts are not special-cased.

Failure modes:
    - None. NaN and infinities pass through unchanged.
"""

from __future__ import annotations

import math

from currency_kernel.domain.currency import CurrencyMetadata
from currency_kernel.domain.options import RoundOptions


def _round_half_up(value: float) -> int:
    floor = math.floor(value)
    if value - floor >= 0.5:
        return floor + 1
    return floor


def round_amount(
    amount: float,
    decimal_places: int,
    use_nearest_rounding: bool = False,
) -> float:
    """
    Round ``amount`` to ``decimal_places`` places.

    Args:
        amount: The amount to round.
        decimal_places: Number of fractional digits to keep (0 or more).
        use_nearest_rounding: Round half-up instead of ceiling.

    Returns:
        The rounded amount as a float.
    """
    factor = 10**decimal_places
    scaled = amount * factor

    if not math.isfinite(scaled):
        return scaled / factor

    if use_nearest_rounding:
        return _round_half_up(scaled) / factor
    return math.ceil(scaled) / factor


def round_amount_on_currency(
    amount: float,
    metadata: CurrencyMetadata | None,
    options: RoundOptions | None = None,
) -> float:
    """
    Round ``amount`` to the precision of a currency.

    Without metadata the amount is returned unchanged (no rounding).
    Otherwise compact decimals are used unless
    ``options.use_standard_decimals`` is set.
    """
    if metadata is None:
        return amount

    options = options or RoundOptions()
    return round_amount(
        amount,
        options.decimal_places_for(metadata),
        options.use_nearest_rounding,
    )
