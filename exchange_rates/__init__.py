"""Client for the exchangeratesapi.io latest/history endpoints."""

from exchange_rates.client import ExchangeRatesClient, RatesResponse, fetch_rates
from exchange_rates.currency import Currency
from exchange_rates.errors import (
    DateFormatError,
    DateRangeError,
    ExchangeRatesError,
    InvalidParameterError,
    RequestFailedError,
    UnknownCurrencyError,
)
from exchange_rates.parameters import (
    BuildResult,
    RatesRequest,
    RatesRequestBuilder,
    serialize_symbols,
    to_api_date,
)
from exchange_rates.resource import Resource

__all__ = [
    "BuildResult",
    "Currency",
    "DateFormatError",
    "DateRangeError",
    "ExchangeRatesClient",
    "ExchangeRatesError",
    "InvalidParameterError",
    "RatesRequest",
    "RatesRequestBuilder",
    "RatesResponse",
    "RequestFailedError",
    "Resource",
    "UnknownCurrencyError",
    "fetch_rates",
    "serialize_symbols",
    "to_api_date",
]
