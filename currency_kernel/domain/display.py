"""
Display -- currency-aware formatting and display strings.

Responsibility:
    Thin, table-driven policy layers over ``domain.rounding`` and
    ``domain.grouping``: resolve precision, grouping style, symbol variant
    and separator from CurrencyMetadata plus an options record, then
    compose the result.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O, no logging. The
    code-based variant that performs a metadata lookup lives in
    ``currency_kernel.services.display_service``.

Invariants enforced:
    - Without metadata the plain string of the amount is returned; no
      rounding, grouping or symbol is ever applied.
    - Symbol precedence is standard > native > preferred.
    - A separator of None means a single space; "" means no separator.

Failure modes:
    - None for valid numeric inputs.
"""

from __future__ import annotations

from currency_kernel.domain.currency import CurrencyMetadata
from currency_kernel.domain.grouping import format_amount, number_to_string
from currency_kernel.domain.options import DisplayOptions, FormatOptions
from currency_kernel.domain.rounding import round_amount


def _prepare_amount(
    amount: float,
    metadata: CurrencyMetadata,
    options: FormatOptions,
) -> tuple[float, int | None]:
    """Apply rounding and return the amount with its fixed-decimal length."""
    decimal_places = options.decimal_places_for(metadata)
    if not options.skip_rounding:
        amount = round_amount(amount, decimal_places, options.use_nearest_rounding)
    fixed_decimal_places = None if options.skip_fixed_decimals else decimal_places
    return amount, fixed_decimal_places


def format_amount_on_currency(
    amount: float,
    metadata: CurrencyMetadata | None,
    options: FormatOptions | None = None,
) -> str:
    """
    Round and group ``amount`` according to a currency.

    Example::

        format_amount_on_currency(1234567, usd)                  # "1,234,567.00"
        format_amount_on_currency(1234567, bdt)                  # "12,34,567"
        format_amount_on_currency(
            123456.7, bdt, FormatOptions(skip_rounding=True)
        )                                                        # "1,23,456.7"
    """
    if metadata is None:
        return number_to_string(amount)

    amount, fixed_decimal_places = _prepare_amount(amount, metadata, options or FormatOptions())
    return format_amount(amount, metadata.digit_grouping, fixed_decimal_places)


def display_amount_on_currency(
    amount: float,
    metadata: CurrencyMetadata | None,
    options: DisplayOptions | None = None,
) -> str:
    """
    Build the display string ``symbol + separator + amount``.

    Example::

        display_amount_on_currency(1.123, usd)                   # "$ 1.13"
        display_amount_on_currency(
            1123, bdt, DisplayOptions(use_standard_symbol=True)
        )                                                        # "৳ 1,123"
        display_amount_on_currency(1123, bdt, DisplayOptions(separator=""))
                                                                 # "Tk1,123"
    """
    if metadata is None:
        return number_to_string(amount)

    options = options or DisplayOptions()
    amount, fixed_decimal_places = _prepare_amount(amount, metadata, options)

    if options.skip_formatting:
        amount_text = number_to_string(amount)
    else:
        amount_text = format_amount(amount, metadata.digit_grouping, fixed_decimal_places)

    symbol = metadata.symbol_for(options.symbol_variant)
    return symbol + options.resolved_separator + amount_text
