"""
exchange_rates/parameters.py – Request building and parameter encoding.

A request is described by a RatesRequestBuilder, which is an immutable
value: every with_* call returns a new builder, so a partially configured
builder can be shared and extended safely.

Finalising the builder decides which resource to call:

    no dates             ->  GET /latest?base=USD&symbols=JPY,EUR
    start and end dates  ->  GET /history?base=USD&start_at=2020-01-01&end_at=2020-01-31
    only one date        ->  DateRangeError

Dates are accepted in compact form (20200101) or as datetime.date objects
and are always sent hyphenated (2020-01-01).
"""

import logging
import re
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Iterable, Optional, Union

from config import COMPACT_DATE_FORMAT, DEFAULT_BASE_CURRENCY
from exchange_rates.currency import Currency
from exchange_rates.errors import DateFormatError, InvalidParameterError
from exchange_rates.resource import Resource

logger = logging.getLogger(__name__)

_COMPACT_DATE = re.compile(r"\d{8}")

CurrencyLike = Union[Currency, str]
DateLike = Union[date, str]


# ---------------------------------------------------------------------------
# Encoding helpers
# ---------------------------------------------------------------------------

def to_api_date(value: DateLike) -> str:
    """
    Convert a compact yyyyMMdd date (or a date object) to yyyy-MM-dd.

    >>> to_api_date("20200101")
    '2020-01-01'
    """
    if isinstance(value, date):
        if isinstance(value, datetime):
            value = value.date()
        return value.isoformat()

    if not isinstance(value, str) or not _COMPACT_DATE.fullmatch(value):
        raise DateFormatError(f"Expected a date in yyyyMMdd format, got {value!r}")

    try:
        parsed = datetime.strptime(value, COMPACT_DATE_FORMAT)
    except ValueError as exc:
        raise DateFormatError(f"Not a valid calendar date: {value!r}") from exc

    # isoformat() keeps the year at four digits (0099-01-01).
    return parsed.date().isoformat()


def serialize_symbols(currencies: Optional[Iterable[Currency]]) -> str:
    """Join currency tags with commas, keeping input order. None/empty -> ""."""
    if not currencies:
        return ""
    return ",".join(c.tag for c in currencies)


def _as_currency(value: CurrencyLike) -> Currency:
    if isinstance(value, Currency):
        return value
    return Currency.from_tag(value)


# ---------------------------------------------------------------------------
# Finalised request
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RatesRequest:
    base: Currency
    symbols: tuple[Currency, ...]
    start_at: Optional[str]
    end_at: Optional[str]
    resource: Resource

    @property
    def symbols_param(self) -> str:
        return serialize_symbols(self.symbols)

    def query_params(self) -> dict[str, str]:
        """Non-empty fields only, in the order the API documents them."""
        params = {
            "base": self.base.tag,
            "symbols": self.symbols_param,
            "start_at": self.start_at or "",
            "end_at": self.end_at or "",
        }
        return {key: value for key, value in params.items() if value}

    def query_string(self) -> str:
        # Commas in symbols stay literal, no percent-encoding.
        return "&".join(f"{key}={value}" for key, value in self.query_params().items())


@dataclass(frozen=True)
class BuildResult:
    """Outcome of RatesRequestBuilder.validate(): a request or an error."""

    request: Optional[RatesRequest] = None
    error: Optional[InvalidParameterError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> RatesRequest:
        if self.error is not None:
            raise self.error
        return self.request


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RatesRequestBuilder:
    base: Optional[Currency] = None
    symbols: tuple[Currency, ...] = field(default_factory=tuple)
    start_date: Optional[DateLike] = None
    end_date: Optional[DateLike] = None

    def with_base_currency(self, currency: CurrencyLike) -> "RatesRequestBuilder":
        _require(currency, "base currency")
        return replace(self, base=_as_currency(currency))

    def with_symbol_currencies(self, currencies: Iterable[CurrencyLike]) -> "RatesRequestBuilder":
        _require(currencies, "symbol currencies")
        if isinstance(currencies, Currency):
            currencies = [currencies]
        elif isinstance(currencies, str):
            currencies = [tag for tag in currencies.split(",") if tag.strip()]
        return replace(self, symbols=tuple(_as_currency(c) for c in currencies))

    def with_start_date(self, start_date: DateLike) -> "RatesRequestBuilder":
        _require(start_date, "start date")
        return replace(self, start_date=start_date)

    def with_end_date(self, end_date: DateLike) -> "RatesRequestBuilder":
        _require(end_date, "end date")
        return replace(self, end_date=end_date)

    def validate(self) -> BuildResult:
        """Finalise the options without raising; errors come back in the result."""
        try:
            resource = Resource.for_dates(self.start_date, self.end_date)
            start_at = end_at = None
            if resource is Resource.HISTORY:
                start_at = to_api_date(self.start_date)
                end_at = to_api_date(self.end_date)
        except InvalidParameterError as exc:
            logger.debug("Rejected request options: %s", exc)
            return BuildResult(error=exc)

        request = RatesRequest(
            base=self.base or Currency.from_tag(DEFAULT_BASE_CURRENCY),
            symbols=self.symbols,
            start_at=start_at,
            end_at=end_at,
            resource=resource,
        )
        logger.debug("Built %s request | %s", resource.path, request.query_string())
        return BuildResult(request=request)

    def build(self) -> RatesRequest:
        return self.validate().unwrap()


def _require(value, name: str) -> None:
    if value is None:
        raise InvalidParameterError(f"{name} must not be None")
