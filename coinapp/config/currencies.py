"""Currencies and appearance options a user can pick in settings."""

from __future__ import annotations

from enum import Enum


class Currency(str, Enum):
    USD = "usd"
    RUB = "rub"
    EUR = "eur"

    @property
    def display_name(self) -> str:
        return CURRENCY_PROFILES[self]["display_name"]

    @property
    def symbol(self) -> str:
        return CURRENCY_PROFILES[self]["symbol"]


class Appearance(str, Enum):
    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"


CURRENCY_PROFILES = {
    Currency.USD: {"display_name": "USD ($)", "symbol": "$"},
    Currency.RUB: {"display_name": "RUB (₽)", "symbol": "₽"},
    Currency.EUR: {"display_name": "EUR (€)", "symbol": "€"},
}
