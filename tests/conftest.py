"""
Shared pytest fixtures for the exchange-rates client test suite.
"""

from unittest.mock import Mock

import pytest

from exchange_rates import ExchangeRatesClient


# Raw body as the API returns it for /latest — tests only ever compare it
# verbatim, the client never decodes it.
LATEST_BODY = '{"rates":{"JPY":107.5,"EUR":0.92},"base":"USD","date":"2020-06-01"}'


@pytest.fixture
def latest_body():
    return LATEST_BODY


@pytest.fixture
def http_response(latest_body):
    response = Mock()
    response.status_code = 200
    response.text = latest_body
    return response


@pytest.fixture
def client():
    return ExchangeRatesClient(base_url="https://rates.test", timeout=5)
