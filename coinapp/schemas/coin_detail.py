"""Pydantic models for the CoinGecko /coins/{id} payload."""

from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

DESCRIPTION_FALLBACK_ORDER = ("ru", "en")
DESCRIPTION_UNAVAILABLE = "Description unavailable"


class LocalizedDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    en: Optional[str] = None
    ru: Optional[str] = None

    def localized(self, order: Sequence[str] = DESCRIPTION_FALLBACK_ORDER) -> str:
        """Return the first non-blank text following ``order``.

        CoinGecko sends an empty string for locales it has no text for, so
        blank values are skipped the same way as missing ones.
        """
        for lang in order:
            text = getattr(self, lang, None)
            if text and text.strip():
                return text
        return DESCRIPTION_UNAVAILABLE


class ReposUrl(BaseModel):
    model_config = ConfigDict(frozen=True)

    github: Optional[List[str]] = None


class CoinLinks(BaseModel):
    model_config = ConfigDict(frozen=True)

    homepage: Optional[List[str]] = None
    blockchain_site: Optional[List[str]] = None
    twitter_screen_name: Optional[str] = None
    subreddit_url: Optional[str] = None
    repos_url: Optional[ReposUrl] = None


class CoinImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    thumb: Optional[str] = None
    small: Optional[str] = None
    large: Optional[str] = None


class MarketData(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_price: Optional[Dict[str, Optional[float]]] = None
    ath: Optional[Dict[str, Optional[float]]] = None
    ath_change_percentage: Optional[Dict[str, Optional[float]]] = None
    atl: Optional[Dict[str, Optional[float]]] = None
    market_cap: Optional[Dict[str, Optional[float]]] = None
    market_cap_rank: Optional[int] = None
    total_volume: Optional[Dict[str, Optional[float]]] = None
    high_24h: Optional[Dict[str, Optional[float]]] = None
    low_24h: Optional[Dict[str, Optional[float]]] = None
    price_change_percentage_24h: Optional[float] = None
    price_change_percentage_7d: Optional[float] = None
    price_change_percentage_30d: Optional[float] = None
    price_change_percentage_1y: Optional[float] = None
    circulating_supply: Optional[float] = None
    total_supply: Optional[float] = None
    max_supply: Optional[float] = None

    def price_in(self, currency: str) -> Optional[float]:
        return _lookup(self.current_price, currency)

    def market_cap_in(self, currency: str) -> Optional[float]:
        return _lookup(self.market_cap, currency)

    def volume_in(self, currency: str) -> Optional[float]:
        return _lookup(self.total_volume, currency)


def _lookup(values: Optional[Dict[str, Optional[float]]], currency: str) -> Optional[float]:
    if not values:
        return None
    return values.get(currency.lower())


class CoinDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    symbol: str
    name: str
    description: Optional[LocalizedDescription] = None
    links: Optional[CoinLinks] = None
    image: Optional[CoinImage] = None
    market_data: Optional[MarketData] = None
    genesis_date: Optional[date] = None
    developer_score: Optional[float] = None
    community_score: Optional[float] = None
    liquidity_score: Optional[float] = None

    @property
    def localized_description(self) -> str:
        if self.description is None:
            return DESCRIPTION_UNAVAILABLE
        return self.description.localized()
