"""
Tests for exchange_rates/client.py — mocks requests to avoid network dependency.
"""

from unittest.mock import Mock, patch

import pytest
import requests

from exchange_rates import (
    Currency,
    DateRangeError,
    ExchangeRatesClient,
    RatesRequestBuilder,
    RequestFailedError,
    fetch_rates,
)


def _history_request():
    return (
        RatesRequestBuilder()
        .with_base_currency(Currency.JAPANESE_YEN)
        .with_symbol_currencies([Currency.US_DOLLAR])
        .with_start_date("20200101")
        .with_end_date("20200131")
        .build()
    )


def test_latest_url(client):
    request = RatesRequestBuilder().build()
    assert client.build_url(request) == "https://rates.test/latest?base=USD"


def test_history_url(client):
    assert client.build_url(_history_request()) == (
        "https://rates.test/history?base=JPY&symbols=USD&start_at=2020-01-01&end_at=2020-01-31"
    )


def test_trailing_slash_in_base_url_is_ignored():
    client = ExchangeRatesClient(base_url="https://rates.test/")
    assert client.build_url(RatesRequestBuilder().build()).startswith("https://rates.test/latest?")


def test_send_returns_status_and_raw_body(client, http_response, latest_body):
    with patch("exchange_rates.client.requests.get", return_value=http_response) as get:
        response = client.send(RatesRequestBuilder().build())

    assert response.status_code == 200
    assert response.body == latest_body
    assert response.ok
    get.assert_called_once_with(
        "https://rates.test/latest?base=USD",
        headers={"Accept": "application/json"},
        timeout=5,
    )


def test_error_status_is_returned_not_raised(client):
    error = Mock(status_code=400, text='{"error":"start_at must be before end_at"}')
    with patch("exchange_rates.client.requests.get", return_value=error):
        response = client.send(_history_request())

    assert response.status_code == 400
    assert not response.ok
    assert "start_at" in response.body


@pytest.mark.parametrize("exc", [
    requests.exceptions.ConnectionError("connection refused"),
    requests.exceptions.Timeout("read timed out"),
])
def test_transport_failure_is_wrapped(client, exc):
    with patch("exchange_rates.client.requests.get", side_effect=exc) as get:
        with pytest.raises(RequestFailedError) as info:
            client.send(RatesRequestBuilder().build())

    assert info.value.cause is exc
    assert info.value.__cause__ is exc
    get.assert_called_once()  # no retries


def test_session_is_used_when_given(http_response):
    session = Mock(spec=requests.Session)
    session.get.return_value = http_response
    client = ExchangeRatesClient(base_url="https://rates.test", session=session)

    client.send(RatesRequestBuilder().build())

    session.get.assert_called_once()


def test_fetch_rates_builds_and_sends(client, http_response):
    with patch("exchange_rates.client.requests.get", return_value=http_response) as get:
        response = fetch_rates(base="JPY", symbols=["USD", "GBP"], client=client)

    assert response.url == "https://rates.test/latest?base=JPY&symbols=USD,GBP"
    get.assert_called_once()


def test_fetch_rates_rejects_half_range_before_sending(client):
    with patch("exchange_rates.client.requests.get") as get:
        with pytest.raises(DateRangeError):
            fetch_rates(start_date="20200101", client=client)

    get.assert_not_called()
