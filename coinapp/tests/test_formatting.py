from __future__ import annotations

from coinapp.utils.formatting import (
    as_abbreviated_string,
    as_currency_string,
    as_percentage_string,
    or_na,
)


def test_currency_precision_tiers():
    assert as_currency_string(45000.0) == "$45,000.00"
    assert as_currency_string(0.5) == "$0.5000"
    assert as_currency_string(0.001234) == "$0.001234"


def test_currency_symbol_is_configurable():
    assert as_currency_string(12.5, "€") == "€12.50"


def test_percentage_sign():
    assert as_percentage_string(3.456) == "+3.46%"
    assert as_percentage_string(0.0) == "+0.00%"
    assert as_percentage_string(-1.2) == "-1.20%"


def test_abbreviations():
    assert as_abbreviated_string(850_000_000_000) == "$850.00B"
    assert as_abbreviated_string(1_500_000_000_000) == "$1.50T"
    assert as_abbreviated_string(2_500_000) == "$2.50M"
    assert as_abbreviated_string(1_000) == "$1.00K"
    assert as_abbreviated_string(999) == "$999.00"


def test_or_na_distinguishes_absent_from_zero():
    assert or_na(None, as_currency_string) == "N/A"
    assert or_na(0.0, as_abbreviated_string) == "$0.00"
