"""
Typed Exception Hierarchy for the Currency Kernel.

The formatting core is total over its input domain and raises nothing of
its own. Absent currency metadata is a fallback path, not an error. The
exceptions below belong to the reference-data boundary, where malformed
tables must be caught once at load time instead of surfacing as odd
output later.

Every exception carries a ``code`` class attribute (machine-readable)
and structured fields (never only a message string), so callers catch
by type and log by field:

    try:
        tables = load_reference_tables(path)
    except UnresolvedCurrencyReferenceError as e:
        log.error("bad tables", extra={"countries": e.country_codes})

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    CurrencyKernelError (base)
    |
    +-- ReferenceDataError
        +-- InvalidReferenceDataError
        +-- UnresolvedCurrencyReferenceError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Code                           | When Raised
-------------------------------|------------------------------------------------
INVALID_REFERENCE_DATA         | A table entry is missing a key or has a bad value
UNRESOLVED_CURRENCY_REFERENCE  | A country names a currency with no record
"""


class CurrencyKernelError(Exception):
    """
    Base exception for all currency kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "CURRENCY_KERNEL_ERROR"


# Reference-data exceptions


class ReferenceDataError(CurrencyKernelError):
    """Base exception for reference-data (currency/country table) errors."""

    code: str = "REFERENCE_DATA_ERROR"


class InvalidReferenceDataError(ReferenceDataError):
    """A currency or country table entry cannot be parsed."""

    code: str = "INVALID_REFERENCE_DATA"

    def __init__(self, table: str, key: str, reason: str):
        self.table = table
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid {table} entry '{key}': {reason}")


class UnresolvedCurrencyReferenceError(ReferenceDataError):
    """One or more countries reference a currency code with no record."""

    code: str = "UNRESOLVED_CURRENCY_REFERENCE"

    def __init__(self, country_codes: list[str]):
        self.country_codes = sorted(country_codes)
        super().__init__(
            f"{len(self.country_codes)} country record(s) reference unknown "
            f"currencies: {', '.join(self.country_codes)}"
        )
