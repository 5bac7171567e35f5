"""
Currency Kernel

Locale-aware rounding, digit grouping and display of monetary amounts,
driven by per-currency metadata:
- Ceiling or half-up rounding to standard or compact precision
- Western (1,234,567) and South Asian (12,34,567) digit grouping
- Standard, native or preferred currency symbols
"""

from currency_kernel.domain.currency import (
    CountryMetadata,
    CurrencyMetadata,
    DigitGrouping,
    SymbolVariant,
)
from currency_kernel.domain.display import (
    display_amount_on_currency,
    format_amount_on_currency,
)
from currency_kernel.domain.grouping import format_amount, number_to_string
from currency_kernel.domain.options import DisplayOptions, FormatOptions, RoundOptions
from currency_kernel.domain.rounding import round_amount, round_amount_on_currency

__version__ = "0.1.0"

__all__ = [
    "CountryMetadata",
    "CurrencyMetadata",
    "DigitGrouping",
    "SymbolVariant",
    "RoundOptions",
    "FormatOptions",
    "DisplayOptions",
    "round_amount",
    "round_amount_on_currency",
    "format_amount",
    "number_to_string",
    "format_amount_on_currency",
    "display_amount_on_currency",
]
