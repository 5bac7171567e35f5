"""
Reference table integrity -- cross-table checks run at load time.

Every country's ``currency_code`` must resolve to a currency record. The
formatting core assumes this holds and never checks it, so a table set
that breaks it is rejected before any lookup can see it.
"""

from __future__ import annotations

from collections.abc import Mapping

from currency_kernel.domain.currency import CountryMetadata, CurrencyMetadata
from currency_kernel.exceptions import UnresolvedCurrencyReferenceError


def find_unresolved_countries(
    countries: Mapping[str, CountryMetadata],
    currencies: Mapping[str, CurrencyMetadata],
) -> list[str]:
    """Return the codes of countries whose currency has no record."""
    return sorted(
        code
        for code, country in countries.items()
        if country.currency_code not in currencies
    )


def validate_reference_tables(
    countries: Mapping[str, CountryMetadata],
    currencies: Mapping[str, CurrencyMetadata],
) -> None:
    """
    Raise if any country references an unknown currency.

    Raises:
        UnresolvedCurrencyReferenceError: listing every offending country.
    """
    unresolved = find_unresolved_countries(countries, currencies)
    if unresolved:
        raise UnresolvedCurrencyReferenceError(unresolved)
