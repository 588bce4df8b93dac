"""
exchange_rates/errors.py – Exception hierarchy.

Parameter errors are raised before any network call is made.
Transport errors are wrapped in RequestFailedError with the original
requests exception chained as the cause.
"""


class ExchangeRatesError(Exception):
    """Base class for every error raised by this package."""


class InvalidParameterError(ExchangeRatesError, ValueError):
    """A request option is missing or invalid."""


class DateFormatError(InvalidParameterError):
    """A date does not match the compact yyyyMMdd pattern."""


class DateRangeError(InvalidParameterError):
    """Only one end of the date range was supplied."""


class UnknownCurrencyError(InvalidParameterError):
    """A currency tag or code is not in the catalogue."""


class RequestFailedError(ExchangeRatesError):
    """The HTTP request could not be completed."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause
