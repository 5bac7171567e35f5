"""
currency_data -- reference-data layer for the currency kernel.

Responsibility:
    The read-only lookup collaborator of the formatting core: given a
    currency code, return its ``CurrencyMetadata`` (or None); given a
    country code, return its ``CountryMetadata`` (or None).

Architecture position:
    Sits beside ``currency_kernel``. The pure core never imports this
    package; only ``currency_kernel.services`` and the CLI do.

Invariants enforced:
    - Tables are loaded once per data directory and cached for process
      lifetime; every lookup sees the same immutable snapshot.
    - Every country's currency code resolves to a currency record
      (validated at load time).

Failure modes:
    - Lookups of unknown, empty or non-string codes return None.
    - Loading errors (``FileNotFoundError``, ``yaml.YAMLError``,
      ``ReferenceDataError``) propagate from the first lookup against a
      directory.

Concurrency:
    The async variants run the synchronous lookup in a worker thread with
    ``asyncio.to_thread``: one call per invocation, no retry, no timeout.
    Independent lookups may run concurrently.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

from currency_data.loader import DEFAULT_DATA_DIR, load_reference_tables, normalize_code
from currency_data.schema import ReferenceTables
from currency_kernel.domain.currency import CountryMetadata, CurrencyMetadata

__all__ = [
    "ReferenceTables",
    "get_reference_tables",
    "clear_reference_cache",
    "lookup_currency",
    "lookup_currencies",
    "lookup_country",
    "lookup_countries",
    "all_currencies",
    "all_countries",
    "get_currency_data",
    "get_currencies_data",
    "get_country_data",
    "get_countries_data",
    "get_all_currency_details",
    "get_all_country_details",
]


@lru_cache(maxsize=None)
def _load_cached(data_dir: Path) -> ReferenceTables:
    return load_reference_tables(data_dir)


def get_reference_tables(data_dir: Path | None = None) -> ReferenceTables:
    """Return the (cached) reference tables for ``data_dir``."""
    resolved = Path(data_dir).resolve() if data_dir is not None else DEFAULT_DATA_DIR.resolve()
    return _load_cached(resolved)


def clear_reference_cache() -> None:
    """Drop every cached table set. FOR TESTING ONLY."""
    _load_cached.cache_clear()


# ---------------------------------------------------------------------------
# Synchronous lookups
# ---------------------------------------------------------------------------


def lookup_currency(code: str, data_dir: Path | None = None) -> CurrencyMetadata | None:
    """Currency metadata for ``code``, or None if there is no record."""
    normalized = normalize_code(code)
    if normalized is None:
        return None
    return get_reference_tables(data_dir).currencies.get(normalized)


def lookup_currencies(
    codes: Iterable[str],
    data_dir: Path | None = None,
) -> list[CurrencyMetadata | None]:
    """Currency metadata for each code, aligned with the input order."""
    return [lookup_currency(code, data_dir) for code in codes]


def lookup_country(code: str, data_dir: Path | None = None) -> CountryMetadata | None:
    """Country metadata for ``code``, or None if there is no record."""
    normalized = normalize_code(code)
    if normalized is None:
        return None
    return get_reference_tables(data_dir).countries.get(normalized)


def lookup_countries(
    codes: Iterable[str],
    data_dir: Path | None = None,
) -> list[CountryMetadata | None]:
    return [lookup_country(code, data_dir) for code in codes]


def all_currencies(data_dir: Path | None = None) -> dict[str, CurrencyMetadata]:
    """Every currency record keyed by code (a fresh dict)."""
    return dict(get_reference_tables(data_dir).currencies)


def all_countries(data_dir: Path | None = None) -> dict[str, CountryMetadata]:
    return dict(get_reference_tables(data_dir).countries)


# ---------------------------------------------------------------------------
# Asynchronous lookups
# ---------------------------------------------------------------------------


async def get_currency_data(code: str, data_dir: Path | None = None) -> CurrencyMetadata | None:
    return await asyncio.to_thread(lookup_currency, code, data_dir)


async def get_currencies_data(
    codes: Iterable[str],
    data_dir: Path | None = None,
) -> list[CurrencyMetadata | None]:
    return await asyncio.to_thread(lookup_currencies, list(codes), data_dir)


async def get_country_data(code: str, data_dir: Path | None = None) -> CountryMetadata | None:
    return await asyncio.to_thread(lookup_country, code, data_dir)


async def get_countries_data(
    codes: Iterable[str],
    data_dir: Path | None = None,
) -> list[CountryMetadata | None]:
    return await asyncio.to_thread(lookup_countries, list(codes), data_dir)


async def get_all_currency_details(data_dir: Path | None = None) -> dict[str, CurrencyMetadata]:
    return await asyncio.to_thread(all_currencies, data_dir)


async def get_all_country_details(data_dir: Path | None = None) -> dict[str, CountryMetadata]:
    return await asyncio.to_thread(all_countries, data_dir)
