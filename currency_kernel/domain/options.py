"""
Options -- immutable per-layer configuration for the amount pipeline.

Each layer of the pipeline (round -> format -> display) takes one record.
The records extend each other so a DisplayOptions can be handed to the
formatting or rounding layer unchanged. Every field defaults to False
(or None for the separator), so ``DisplayOptions()`` is the default
behavior: ceiling rounding, compact decimals, fixed decimals, grouping,
preferred symbol, single-space separator.
"""

from __future__ import annotations

from dataclasses import dataclass

from currency_kernel.domain.currency import CurrencyMetadata, SymbolVariant

DEFAULT_SEPARATOR = " "


@dataclass(frozen=True)
class RoundOptions:
    """Options for currency-aware rounding."""

    use_nearest_rounding: bool = False  # half-up instead of ceiling
    use_standard_decimals: bool = False  # decimals instead of decimals_compact

    def decimal_places_for(self, metadata: CurrencyMetadata) -> int:
        if self.use_standard_decimals:
            return metadata.decimals
        return metadata.decimals_compact


@dataclass(frozen=True)
class FormatOptions(RoundOptions):
    """Options for currency-aware formatting."""

    skip_rounding: bool = False
    skip_fixed_decimals: bool = False


@dataclass(frozen=True)
class DisplayOptions(FormatOptions):
    """Options for currency-aware display."""

    skip_formatting: bool = False
    use_native_symbol: bool = False
    use_standard_symbol: bool = False
    separator: str | None = None  # None means DEFAULT_SEPARATOR; "" is honored

    @property
    def symbol_variant(self) -> SymbolVariant:
        """Resolve the symbol flags. Precedence: standard > native > preferred."""
        if self.use_standard_symbol:
            return SymbolVariant.STANDARD
        if self.use_native_symbol:
            return SymbolVariant.NATIVE
        return SymbolVariant.PREFERRED

    @property
    def resolved_separator(self) -> str:
        if self.separator is None:
            return DEFAULT_SEPARATOR
        return self.separator
