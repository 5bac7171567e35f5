"""
Reference tables schema.

``ReferenceTables`` is the runtime artifact of the data layer: the parsed
currency and country tables plus a checksum identifying the source files.
It is produced once per data directory by ``loader.load_reference_tables``
and never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from currency_kernel.domain.currency import CountryMetadata, CurrencyMetadata


@dataclass(frozen=True)
class ReferenceTables:
    """Parsed currency and country tables (read-only mappings)."""

    currencies: Mapping[str, CurrencyMetadata]
    countries: Mapping[str, CountryMetadata]
    checksum: str
    data_dir: Path

    @property
    def currency_count(self) -> int:
        return len(self.currencies)

    @property
    def country_count(self) -> int:
        return len(self.countries)
