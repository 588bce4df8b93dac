"""
exchange_rates/client.py – Request sender.

Turns a finalised RatesRequest into a single GET call:

    GET {API_BASE_URL}/{latest|history}?base=USD&symbols=JPY,EUR

The body is handed back untouched; decoding the JSON is up to the caller.
Transport failures (DNS, refused connection, timeout, ...) surface as
RequestFailedError. Nothing is retried.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

import requests

from config import API_BASE_URL, API_TIMEOUT_SECONDS, REQUEST_HEADERS
from exchange_rates.errors import RequestFailedError
from exchange_rates.parameters import (
    CurrencyLike,
    DateLike,
    RatesRequest,
    RatesRequestBuilder,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RatesResponse:
    url: str
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class ExchangeRatesClient:
    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = API_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = session or requests

    def build_url(self, request: RatesRequest) -> str:
        url = f"{self.base_url}/{request.resource.path}"
        query = request.query_string()
        return f"{url}?{query}" if query else url

    def send(self, request: RatesRequest) -> RatesResponse:
        url = self.build_url(request)
        logger.info("Calling exchange rates API | %s", url)

        try:
            response = self._http.get(url, headers=REQUEST_HEADERS, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            logger.error("Network error reaching exchange rates API: %s", exc)
            raise RequestFailedError(f"Request to {url} failed: {exc}", cause=exc) from exc

        logger.info("Exchange rates API answered | HTTP %d | %d bytes", response.status_code, len(response.text))
        return RatesResponse(url=url, status_code=response.status_code, body=response.text)


def fetch_rates(
    base: Optional[CurrencyLike] = None,
    symbols: Optional[Iterable[CurrencyLike]] = None,
    start_date: Optional[DateLike] = None,
    end_date: Optional[DateLike] = None,
    client: Optional[ExchangeRatesClient] = None,
) -> RatesResponse:
    """
    One-shot helper: build the request from plain arguments and send it.

    Parameter errors are raised before anything goes over the wire.
    """
    builder = RatesRequestBuilder()
    if base is not None:
        builder = builder.with_base_currency(base)
    if symbols is not None:
        builder = builder.with_symbol_currencies(symbols)
    if start_date is not None:
        builder = builder.with_start_date(start_date)
    if end_date is not None:
        builder = builder.with_end_date(end_date)

    return (client or ExchangeRatesClient()).send(builder.build())
