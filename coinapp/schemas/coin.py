"""Pydantic models for the CoinGecko /coins/markets and /search payloads."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class SparklineData(BaseModel):
    """Price series for the last 7 days."""

    model_config = ConfigDict(frozen=True)

    price: Optional[List[float]] = None


class Coin(BaseModel):
    """One entry of a /coins/markets page.

    Optional fields stay ``None`` when CoinGecko omits them or sends null, so
    callers can tell "absent" apart from zero.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    symbol: str
    name: str
    image: str
    current_price: float

    market_cap: Optional[float] = None
    market_cap_rank: Optional[int] = None
    fully_diluted_valuation: Optional[float] = None
    total_volume: Optional[float] = None
    high_24h: Optional[float] = None
    low_24h: Optional[float] = None
    price_change_24h: Optional[float] = None
    price_change_percentage_24h: Optional[float] = None
    market_cap_change_24h: Optional[float] = None
    market_cap_change_percentage_24h: Optional[float] = None
    circulating_supply: Optional[float] = None
    total_supply: Optional[float] = None
    max_supply: Optional[float] = None
    ath: Optional[float] = None
    ath_change_percentage: Optional[float] = None
    ath_date: Optional[datetime] = None
    atl: Optional[float] = None
    atl_change_percentage: Optional[float] = None
    atl_date: Optional[datetime] = None
    last_updated: Optional[datetime] = None
    sparkline_in_7d: Optional[SparklineData] = None


class SearchCoin(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    symbol: str
    thumb: Optional[str] = None
    market_cap_rank: Optional[int] = None


class SearchResponse(BaseModel):
    coins: List[SearchCoin]
