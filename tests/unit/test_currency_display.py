"""Unit tests for currency display strings (symbol + separator + amount)."""

from dataclasses import replace

import pytest

from currency_kernel.domain.display import display_amount_on_currency
from currency_kernel.domain.options import DisplayOptions


class TestDisplayOnUSD:
    def test_default(self, usd):
        assert display_amount_on_currency(1.123, usd) == "$ 1.13"
        assert display_amount_on_currency(1234.12, usd) == "$ 1,234.12"
        assert display_amount_on_currency(1234.1, usd) == "$ 1,234.10"

    def test_skip_formatting(self, usd):
        assert display_amount_on_currency(1234.12, usd, DisplayOptions(skip_formatting=True)) == "$ 1234.12"

    def test_skip_formatting_and_rounding(self, usd):
        options = DisplayOptions(skip_formatting=True, skip_rounding=True)
        assert display_amount_on_currency(1234.1234, usd, options) == "$ 1234.1234"

    def test_skip_fixed_decimals(self, usd):
        assert display_amount_on_currency(1234.1, usd, DisplayOptions(skip_fixed_decimals=True)) == "$ 1,234.1"

    def test_skip_formatting_ignores_fixed_decimals(self, usd):
        options = DisplayOptions(skip_formatting=True, skip_fixed_decimals=True)
        assert display_amount_on_currency(1234.1, usd, options) == "$ 1234.1"


class TestDisplayOnBDT:
    def test_default_uses_preferred_symbol_and_compact_decimals(self, bdt):
        assert display_amount_on_currency(1.123, bdt) == "Tk 2"

    def test_standard_decimals(self, bdt):
        assert display_amount_on_currency(1.123, bdt, DisplayOptions(use_standard_decimals=True)) == "Tk 1.13"

    def test_native_symbol(self, bdt):
        assert display_amount_on_currency(1.123, bdt, DisplayOptions(use_native_symbol=True)) == "Tk 2"

    def test_standard_symbol(self, bdt):
        assert display_amount_on_currency(1.123, bdt, DisplayOptions(use_standard_symbol=True)) == "৳ 2"
        assert display_amount_on_currency(1123, bdt, DisplayOptions(use_standard_symbol=True)) == "৳ 1,123"

    def test_standard_symbol_empty_separator(self, bdt):
        options = DisplayOptions(use_standard_symbol=True, separator="")
        assert display_amount_on_currency(1123, bdt, options) == "৳1,123"

    def test_explicit_empty_separator(self, bdt):
        assert display_amount_on_currency(1123, bdt, DisplayOptions(separator="")) == "Tk1,123"

    def test_custom_separator_without_formatting(self, bdt):
        options = DisplayOptions(separator="-", skip_formatting=True)
        assert display_amount_on_currency(1123, bdt, options) == "Tk-1123"


class TestSymbolPrecedence:
    """standard > native > preferred, whatever else is set."""

    @pytest.fixture
    def three_symbols(self, usd):
        return replace(usd, symbol="US$", symbol_native="$", symbol_preferred="USD")

    @pytest.mark.parametrize(
        "native, standard, expected",
        [
            (False, False, "USD 5.00"),
            (True, False, "$ 5.00"),
            (False, True, "US$ 5.00"),
            (True, True, "US$ 5.00"),
        ],
    )
    def test_precedence(self, three_symbols, native, standard, expected):
        options = DisplayOptions(use_native_symbol=native, use_standard_symbol=standard)
        assert display_amount_on_currency(5, three_symbols, options) == expected


class TestDisplayWithoutMetadata:
    def test_no_symbol_attached(self):
        assert display_amount_on_currency(42, None) == "42"

    def test_options_ignored(self):
        options = DisplayOptions(use_standard_symbol=True, separator="-")
        assert display_amount_on_currency(42.5, None, options) == "42.5"
