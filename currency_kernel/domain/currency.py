"""
Currency -- per-currency and per-country metadata records.

Responsibility:
    Defines the immutable records the formatting pipeline is driven by:
    decimal precision (standard and compact), digit grouping style, and
    the three symbol variants of a currency, plus the country record that
    links a country to its currency.

Architecture position:
    Kernel > Domain -- pure data, zero I/O. Instances are produced by the
    reference-data layer (``currency_data``) or built directly by callers.

Invariants enforced:
    - decimals and decimals_compact are non-negative integers
    - digit_grouping is a DigitGrouping member
    - symbol variants are non-empty strings

Failure modes:
    - ValueError on construction with negative precision or empty symbols
    - TypeError when precision is not an integer
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DigitGrouping(int, Enum):
    """Separator convention for the integer part of an amount."""

    TWO = 2  # South Asian: 12,34,567
    THREE = 3  # Western: 1,234,567


class SymbolVariant(str, Enum):
    """Which of a currency's three symbol renderings to use."""

    STANDARD = "standard"
    NATIVE = "native"
    PREFERRED = "preferred"


@dataclass(frozen=True, slots=True)
class CurrencyMetadata:
    """
    Display metadata for a single currency.

    Contract:
        ``decimals`` is the standard (accounting) precision;
        ``decimals_compact`` is the default precision used for general
        display. They may differ, e.g. BDT uses 0 compact and 2 standard.

    Guarantees:
        - Immutable and hashable (frozen dataclass with slots)
        - digit_grouping is always a DigitGrouping (ints 2/3 are coerced)
    """

    code: str
    name: str
    decimals: int
    decimals_compact: int
    digit_grouping: DigitGrouping
    symbol: str
    symbol_native: str
    symbol_preferred: str

    def __post_init__(self) -> None:
        for field_name in ("decimals", "decimals_compact"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{field_name} must be int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{field_name} must be non-negative, got {value}")

        if not isinstance(self.digit_grouping, DigitGrouping):
            object.__setattr__(self, "digit_grouping", DigitGrouping(self.digit_grouping))

        for field_name in ("symbol", "symbol_native", "symbol_preferred"):
            if not getattr(self, field_name):
                raise ValueError(f"{field_name} must be a non-empty string")

    def symbol_for(self, variant: SymbolVariant) -> str:
        """Return the symbol rendering for ``variant``."""
        if variant is SymbolVariant.STANDARD:
            return self.symbol
        if variant is SymbolVariant.NATIVE:
            return self.symbol_native
        return self.symbol_preferred


@dataclass(frozen=True, slots=True)
class CountryMetadata:
    """A country and the code of the currency it uses."""

    code: str
    name: str
    currency_code: str
