"""
exchange_rates/currency.py – Catalogue of the currencies the API quotes.

Each member carries a stable numeric code and its three-letter tag.
The tag is what goes on the wire (base=USD, symbols=JPY,EUR).
"""

from enum import Enum

from exchange_rates.errors import UnknownCurrencyError


class Currency(Enum):
    ICELAND_KRONA = (0, "ISK")
    PHILIPPINE_PESO = (1, "PHP")
    DANISH_KRONE = (2, "DKK")
    CANADIAN_DOLLAR = (3, "CAD")
    HONG_KONG_DOLLAR = (4, "HKD")
    HUNGARIAN_FORINT = (5, "HUF")
    CZECH_KORUNA = (6, "CZK")
    AUSTRALIAN_DOLLAR = (7, "AUD")
    ROMANIAN_LEU = (8, "RON")
    SWEDISH_KRONA = (9, "SEK")
    INDONESIAN_RUPIAH = (10, "IDR")
    INDIAN_RUPEE = (11, "INR")
    BRAZILIAN_REAL = (12, "BRL")
    RUSSIAN_RUBLE = (13, "RUB")
    CROATIAN_KUNA = (14, "HRK")
    JAPANESE_YEN = (15, "JPY")
    THAI_BAHT = (16, "THB")
    SWISS_FRANC = (17, "CHF")
    SINGAPORE_DOLLAR = (18, "SGD")
    POLISH_ZLOTY = (19, "PLN")
    BULGARIAN_LEV = (20, "BGN")
    TURKISH_LIRA = (21, "TRY")
    CHINESE_YUAN = (22, "CNY")
    NORWEGIAN_KRONE = (23, "NOK")
    NEW_ZEALAND_DOLLAR = (24, "NZD")
    SOUTH_AFRICAN_RAND = (25, "ZAR")
    US_DOLLAR = (26, "USD")
    MEXICAN_PESO = (27, "MXN")
    ISRAELI_NEW_SHEKEL = (28, "ILS")
    POUND_STERLING = (29, "GBP")
    KOREAN_WON = (30, "KRW")
    MALAYSIAN_RINGGIT = (31, "MYR")

    def __init__(self, code: int, tag: str):
        self.code = code
        self.tag = tag

    def __str__(self) -> str:
        return self.tag

    @classmethod
    def from_tag(cls, tag: str) -> "Currency":
        """Look a currency up by its tag, e.g. "jpy" -> JAPANESE_YEN."""
        try:
            return _BY_TAG[tag.strip().upper()]
        except (KeyError, AttributeError):
            raise UnknownCurrencyError(f"Unknown currency tag: {tag!r}") from None

    @classmethod
    def from_code(cls, code: int) -> "Currency":
        try:
            return _BY_CODE[code]
        except KeyError:
            raise UnknownCurrencyError(f"Unknown currency code: {code!r}") from None


_BY_TAG: dict[str, Currency] = {c.tag: c for c in Currency}
_BY_CODE: dict[int, Currency] = {c.code: c for c in Currency}
