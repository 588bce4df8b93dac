"""
config.py – Central configuration for the exchange-rates client.
All tuneable parameters live here so nothing is hard-coded elsewhere.
"""

import os


def _env_seconds(name: str, default: str) -> float:
    raw = os.environ.get(name, default)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None


# ---------------------------------------------------------------------------
# Exchange Rates API (https://exchangeratesapi.io/)
# Two resources: /latest (today's snapshot) and /history (a date range).
# Both can be overridden at runtime through the environment.
# ---------------------------------------------------------------------------
API_BASE_URL: str = os.environ.get("EXCHANGE_RATES_API_URL", "https://api.exchangeratesapi.io")
API_TIMEOUT_SECONDS: float = _env_seconds("EXCHANGE_RATES_API_TIMEOUT", "30")

REQUEST_HEADERS: dict[str, str] = {"Accept": "application/json"}

# ---------------------------------------------------------------------------
# Request defaults
# ---------------------------------------------------------------------------
DEFAULT_BASE_CURRENCY: str = "USD"

# Callers pass dates compactly (20200101); the API gets ISO dates (2020-01-01).
COMPACT_DATE_FORMAT: str = "%Y%m%d"
