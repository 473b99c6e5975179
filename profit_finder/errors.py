"""Typed errors for price series loading and searching."""


class ProfitFinderError(Exception):
    """Base class for profit-finder errors."""


class InvalidInputError(ProfitFinderError, ValueError):
    """Raised when a price series or price file is malformed."""
