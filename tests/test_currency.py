"""
Tests for exchange_rates/currency.py — the static currency catalogue.
"""

import pytest

from exchange_rates import Currency, UnknownCurrencyError


def test_catalogue_has_32_currencies():
    assert len(Currency) == 32


def test_codes_are_unique_and_contiguous():
    assert sorted(c.code for c in Currency) == list(range(32))


def test_tags_are_three_uppercase_letters():
    for currency in Currency:
        assert len(currency.tag) == 3
        assert currency.tag.isalpha() and currency.tag.isupper()


def test_known_entries():
    assert Currency.US_DOLLAR.code == 26
    assert Currency.US_DOLLAR.tag == "USD"
    assert Currency.JAPANESE_YEN.code == 15
    assert Currency.MALAYSIAN_RINGGIT.tag == "MYR"


def test_from_tag_is_case_insensitive():
    assert Currency.from_tag("jpy") is Currency.JAPANESE_YEN
    assert Currency.from_tag(" GBP ") is Currency.POUND_STERLING


def test_from_code():
    assert Currency.from_code(0) is Currency.ICELAND_KRONA


@pytest.mark.parametrize("tag", ["EUR", "XXX", "", None])
def test_from_tag_rejects_unknown(tag):
    with pytest.raises(UnknownCurrencyError):
        Currency.from_tag(tag)


def test_from_code_rejects_unknown():
    with pytest.raises(UnknownCurrencyError):
        Currency.from_code(32)


def test_str_is_tag():
    assert str(Currency.SWISS_FRANC) == "CHF"
