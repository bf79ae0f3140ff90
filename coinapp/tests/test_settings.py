from __future__ import annotations

import pytest

from coinapp.config.currencies import Appearance, Currency
from coinapp.config.settings import Settings, parse_currency, parse_float, parse_int


def test_defaults(monkeypatch):
    for name in (
        "COINAPP_DB_URL",
        "COINGECKO_BASE_URL",
        "REQUEST_TIMEOUT_SECONDS",
        "PAGE_SIZE",
        "DEFAULT_CURRENCY",
        "APPEARANCE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.DATABASE_URL == "sqlite+aiosqlite:///./coinapp.db"
    assert s.COINGECKO_BASE_URL == "https://api.coingecko.com/api/v3"
    assert s.REQUEST_TIMEOUT_SECONDS == 30.0
    assert s.PAGE_SIZE == 50
    assert s.DEFAULT_CURRENCY is Currency.USD
    assert s.APPEARANCE is Appearance.SYSTEM
    assert s.LOG_LEVEL == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("COINGECKO_BASE_URL", "https://proxy.example.test/v3/")
    monkeypatch.setenv("PAGE_SIZE", "25")
    monkeypatch.setenv("DEFAULT_CURRENCY", "EUR")
    monkeypatch.setenv("APPEARANCE", "dark")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    s = Settings.from_env()

    assert s.COINGECKO_BASE_URL == "https://proxy.example.test/v3"
    assert s.PAGE_SIZE == 25
    assert s.DEFAULT_CURRENCY is Currency.EUR
    assert s.APPEARANCE is Appearance.DARK
    assert s.LOG_LEVEL == "DEBUG"


def test_bad_values_raise(monkeypatch):
    monkeypatch.setenv("DEFAULT_CURRENCY", "jpy")
    with pytest.raises(ValueError):
        Settings.from_env()

    monkeypatch.setenv("DEFAULT_CURRENCY", "usd")
    monkeypatch.setenv("PAGE_SIZE", "0")
    with pytest.raises(ValueError):
        Settings.from_env()


def test_parsers_fall_back_on_blank():
    assert parse_int("  ", 7) == 7
    assert parse_float(None, 1.5) == 1.5
    assert parse_currency("", Currency.RUB) is Currency.RUB


def test_currency_profiles():
    assert Currency.RUB.symbol == "₽"
    assert Currency.EUR.display_name == "EUR (€)"
    assert [c.value for c in Currency] == ["usd", "rub", "eur"]
