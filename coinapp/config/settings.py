# coinapp/config/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass

from coinapp.config.currencies import Appearance, Currency


def parse_int(value: str | None, default: int) -> int:
    if value is None or value.strip() == "":
        return default
    return int(value)


def parse_float(value: str | None, default: float) -> float:
    if value is None or value.strip() == "":
        return default
    return float(value)


def parse_currency(value: str | None, default: Currency) -> Currency:
    if not value:
        return default
    try:
        return Currency(value.strip().lower())
    except ValueError as exc:
        raise ValueError(f"Bad DEFAULT_CURRENCY: {value}") from exc


def parse_appearance(value: str | None, default: Appearance) -> Appearance:
    if not value:
        return default
    try:
        return Appearance(value.strip().lower())
    except ValueError as exc:
        raise ValueError(f"Bad APPEARANCE: {value}") from exc


@dataclass(frozen=True)
class Settings:
    DATABASE_URL: str
    COINGECKO_BASE_URL: str
    REQUEST_TIMEOUT_SECONDS: float
    PAGE_SIZE: int
    DEFAULT_CURRENCY: Currency
    APPEARANCE: Appearance
    LOG_LEVEL: str

    @staticmethod
    def from_env() -> "Settings":
        page_size = parse_int(os.getenv("PAGE_SIZE"), 50)
        if page_size <= 0:
            raise ValueError(f"PAGE_SIZE must be positive, got {page_size}")

        return Settings(
            DATABASE_URL=os.getenv("COINAPP_DB_URL", "sqlite+aiosqlite:///./coinapp.db"),
            COINGECKO_BASE_URL=os.getenv("COINGECKO_BASE_URL", "https://api.coingecko.com/api/v3").rstrip("/"),
            REQUEST_TIMEOUT_SECONDS=parse_float(os.getenv("REQUEST_TIMEOUT_SECONDS"), 30.0),
            PAGE_SIZE=page_size,
            DEFAULT_CURRENCY=parse_currency(os.getenv("DEFAULT_CURRENCY"), Currency.USD),
            APPEARANCE=parse_appearance(os.getenv("APPEARANCE"), Appearance.SYSTEM),
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
