"""Helpers for interacting with the public CoinGecko API."""

from __future__ import annotations

from typing import List, Optional
from urllib.parse import quote

from coinapp.schemas.coin import Coin, SearchCoin, SearchResponse
from coinapp.schemas.coin_detail import CoinDetail
from coinapp.services.errors import InvalidURLError
from coinapp.services.http_client import FetchClient


COINGECKO_BASE_URL = "https://api.coingecko.com/api/v3"
DEFAULT_PAGE_SIZE = 50


class CoinService:
    """Builds CoinGecko requests and hands them to a :class:`FetchClient`.

    Every call is a fresh request: nothing is cached or retried here.
    """

    def __init__(self, client: Optional[FetchClient] = None, base_url: str = COINGECKO_BASE_URL) -> None:
        self.client = client or FetchClient()
        self.base_url = base_url.rstrip("/")

    async def list_coins(
        self,
        currency: str = "usd",
        page: int = 1,
        per_page: int = DEFAULT_PAGE_SIZE,
    ) -> List[Coin]:
        """Return one page of coins ordered by market cap, as CoinGecko sent it."""

        params = {
            "vs_currency": currency,
            "order": "market_cap_desc",
            "per_page": per_page,
            "page": page,
            "sparkline": "true",
            "price_change_percentage": "24h",
        }
        return await self.client.fetch(f"{self.base_url}/coins/markets", List[Coin], params=params)

    async def fetch_detail(self, coin_id: str) -> CoinDetail:
        if not coin_id or not coin_id.strip():
            raise InvalidURLError("empty coin id")

        params = {
            "localization": "true",
            "tickers": "false",
            "market_data": "true",
            "community_data": "true",
            "developer_data": "true",
        }
        url = f"{self.base_url}/coins/{quote(coin_id.strip(), safe='')}"
        return await self.client.fetch(url, CoinDetail, params=params)

    async def search(self, query: str) -> List[SearchCoin]:
        response = await self.client.fetch(
            f"{self.base_url}/search",
            SearchResponse,
            params={"query": query},
        )
        return response.coins
