"""
Reference Data Loader (``currency_data.loader``).

Responsibility
--------------
Loads the currency and country YAML tables and parses each entry into
the immutable ``CurrencyMetadata`` / ``CountryMetadata`` records of the
kernel domain.  The public runtime entry points live in
``currency_data`` (``lookup_currency`` and friends); this module is the
parsing layer underneath them.

Invariants enforced
-------------------
* Every parsed object is a frozen dataclass from
  ``currency_kernel.domain.currency``.
* Every country references an existing currency (checked via
  ``integrity.validate_reference_tables`` before tables are
  returned).
* ``compute_checksum`` produces a deterministic SHA-256 hash of the raw
  tables for identity and change detection.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Non-mapping top level, missing keys or invalid values
  -> ``InvalidReferenceDataError``.
* Country with unknown currency  -> ``UnresolvedCurrencyReferenceError``.
"""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from types import MappingProxyType
from collections.abc import Callable
from typing import Any

import yaml

from currency_data.integrity import validate_reference_tables
from currency_data.schema import ReferenceTables
from currency_kernel.domain.currency import CountryMetadata, CurrencyMetadata
from currency_kernel.exceptions import InvalidReferenceDataError

_logger = logging.getLogger("currency_kernel.reference_data")

DEFAULT_DATA_DIR = Path(__file__).parent / "tables"
CURRENCIES_FILE = "currencies.yaml"
COUNTRIES_FILE = "countries.yaml"


def load_yaml_file(path: Path) -> Any:
    """
    Load a single YAML file and return its parsed contents (an empty dict
    for an empty file).

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def normalize_code(code: Any) -> str | None:
    """Uppercase and strip a lookup code; None for non-strings and blanks."""
    if not code or not isinstance(code, str):
        return None
    return code.upper().strip() or None


def parse_currency(code: str, data: dict[str, Any]) -> CurrencyMetadata:
    """
    Parse a ``CurrencyMetadata`` from a table entry.

    Raises:
        InvalidReferenceDataError: on a missing key or an invalid value.
    """
    try:
        return CurrencyMetadata(
            code=code,
            name=data["name"],
            decimals=data["decimals"],
            decimals_compact=data["decimals_compact"],
            digit_grouping=data["digit_grouping"],
            symbol=data["symbol"],
            symbol_native=data["symbol_native"],
            symbol_preferred=data["symbol_preferred"],
        )
    except KeyError as e:
        raise InvalidReferenceDataError("currency", code, f"missing key {e.args[0]!r}") from e
    except (TypeError, ValueError) as e:
        raise InvalidReferenceDataError("currency", code, str(e)) from e


def parse_country(code: str, data: dict[str, Any]) -> CountryMetadata:
    """Parse a ``CountryMetadata`` from a table entry."""
    try:
        currency_code = normalize_code(data["currency_code"])
        if currency_code is None:
            raise ValueError("currency_code must be a non-empty string")
        return CountryMetadata(code=code, name=data["name"], currency_code=currency_code)
    except KeyError as e:
        raise InvalidReferenceDataError("country", code, f"missing key {e.args[0]!r}") from e
    except (TypeError, ValueError) as e:
        raise InvalidReferenceDataError("country", code, str(e)) from e


def _parse_table(
    table: str,
    entries: Any,
    parse: Callable[[str, dict[str, Any]], Any],
) -> dict[str, Any]:
    if not isinstance(entries, dict):
        raise InvalidReferenceDataError(table, "*", f"expected a mapping, got {type(entries).__name__}")

    parsed: dict[str, Any] = {}
    for raw_code, data in entries.items():
        code = normalize_code(raw_code)
        if code is None:
            raise InvalidReferenceDataError(table, str(raw_code), "code must be a non-empty string")
        if not isinstance(data, dict):
            raise InvalidReferenceDataError(table, code, "entry must be a mapping")
        if code in parsed:
            raise InvalidReferenceDataError(table, code, "duplicate code")
        parsed[code] = parse(code, data)
    return parsed


def _table_section(table: str, raw: Any, key: str) -> Any:
    if not isinstance(raw, dict):
        raise InvalidReferenceDataError(table, "*", f"expected a mapping, got {type(raw).__name__}")
    return raw.get(key, {})


def compute_checksum(data: dict[str, Any]) -> str:
    """SHA-256 of the canonical JSON serialization of ``data``."""
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()


def load_reference_tables(data_dir: Path | None = None) -> ReferenceTables:
    """
    Load, parse and validate the currency and country tables.

    Args:
        data_dir: Directory holding ``currencies.yaml`` and
            ``countries.yaml``. Defaults to the packaged tables.

    Returns:
        A validated, read-only ``ReferenceTables``.
    """
    data_dir = Path(data_dir) if data_dir is not None else DEFAULT_DATA_DIR

    raw_currencies = load_yaml_file(data_dir / CURRENCIES_FILE)
    raw_countries = load_yaml_file(data_dir / COUNTRIES_FILE)

    currencies = _parse_table(
        "currency", _table_section("currency", raw_currencies, "currencies"), parse_currency
    )
    countries = _parse_table(
        "country", _table_section("country", raw_countries, "countries"), parse_country
    )

    validate_reference_tables(countries, currencies)

    checksum = compute_checksum(
        {"currencies": raw_currencies, "countries": raw_countries}
    )
    tables = ReferenceTables(
        currencies=MappingProxyType(currencies),
        countries=MappingProxyType(countries),
        checksum=checksum,
        data_dir=data_dir,
    )

    _logger.info(
        "reference_tables_loaded",
        extra={
            "data_dir": str(data_dir),
            "currency_count": tables.currency_count,
            "country_count": tables.country_count,
            "checksum": checksum,
        },
    )
    return tables
