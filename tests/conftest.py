"""
Pytest fixtures for the currency kernel test suite.

Provides:
- USD and BDT metadata records (mirroring the packaged tables)
- A writer for throwaway reference tables under tmp_path
- Reset of the reference-data cache between tests
"""

from pathlib import Path
from typing import Any, Callable

import pytest
import yaml

from currency_data import clear_reference_cache
from currency_kernel.domain.currency import CurrencyMetadata, DigitGrouping


@pytest.fixture
def usd() -> CurrencyMetadata:
    return CurrencyMetadata(
        code="USD",
        name="US Dollar",
        decimals=2,
        decimals_compact=2,
        digit_grouping=DigitGrouping.THREE,
        symbol="$",
        symbol_native="$",
        symbol_preferred="$",
    )


@pytest.fixture
def bdt() -> CurrencyMetadata:
    """Taka: 0 compact decimals, 2 standard, South Asian grouping."""
    return CurrencyMetadata(
        code="BDT",
        name="Bangladeshi Taka",
        decimals=2,
        decimals_compact=0,
        digit_grouping=DigitGrouping.TWO,
        symbol="৳",
        symbol_native="Tk",
        symbol_preferred="Tk",
    )


def _currency_entry(**overrides: Any) -> dict[str, Any]:
    entry = {
        "name": "Test Currency",
        "decimals": 2,
        "decimals_compact": 2,
        "digit_grouping": 3,
        "symbol": "T$",
        "symbol_native": "T$",
        "symbol_preferred": "T$",
    }
    entry.update(overrides)
    return entry


@pytest.fixture
def currency_entry() -> Callable[..., dict[str, Any]]:
    """Factory for a valid raw currency table entry."""
    return _currency_entry


@pytest.fixture
def write_tables(tmp_path: Path) -> Callable[..., Path]:
    """Write currencies.yaml / countries.yaml into a fresh directory."""
    counter = {"n": 0}

    def _write(
        currencies: dict[str, Any] | None = None,
        countries: dict[str, Any] | None = None,
    ) -> Path:
        counter["n"] += 1
        data_dir = tmp_path / f"tables_{counter['n']}"
        data_dir.mkdir()
        if currencies is None:
            currencies = {"TST": _currency_entry()}
        if countries is None:
            countries = {"TS": {"name": "Testland", "currency_code": "TST"}}
        (data_dir / "currencies.yaml").write_text(
            yaml.safe_dump({"currencies": currencies}, allow_unicode=True), encoding="utf-8"
        )
        (data_dir / "countries.yaml").write_text(
            yaml.safe_dump({"countries": countries}, allow_unicode=True), encoding="utf-8"
        )
        return data_dir

    return _write


@pytest.fixture(autouse=True)
def _clean_reference_cache():
    clear_reference_cache()
    yield
    clear_reference_cache()
