"""
Display Service - display strings from a currency code.

Two-step composition: an asynchronous metadata lookup against the
reference-data layer, then the pure ``display_amount_on_currency``. The
lookup is the only suspension point; the formatting step never awaits.

A lookup that finds no record takes the absent-metadata path of the core
(the plain amount string, no symbol).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from currency_data import get_currency_data
from currency_kernel.domain.currency import CurrencyMetadata
from currency_kernel.domain.display import display_amount_on_currency
from currency_kernel.domain.options import DisplayOptions
from currency_kernel.logging_config import LogContext, get_logger

logger = get_logger("display_service")

CurrencyLookup = Callable[[str], Awaitable[CurrencyMetadata | None]]


async def display_amount_on_currency_code(
    amount: float,
    currency_code: str,
    options: DisplayOptions | None = None,
    *,
    lookup: CurrencyLookup | None = None,
) -> str:
    """
    Resolve ``currency_code`` and build the display string.

    Args:
        amount: The amount to display.
        currency_code: ISO 4217 code, case-insensitive.
        options: Display options; defaults to ``DisplayOptions()``.
        lookup: Async metadata lookup. Defaults to the packaged tables
            (``currency_data.get_currency_data``).

    Returns:
        The display string, e.g. ``"$ 1,234.10"`` for ``(1234.1, "USD")``.
    """
    lookup = lookup or get_currency_data
    metadata = await lookup(currency_code)

    if metadata is None:
        with LogContext.bind(currency_code=str(currency_code)):
            logger.debug("currency_lookup_miss")

    return display_amount_on_currency(amount, metadata, options)
