from __future__ import annotations

import httpx
import pytest

from coinapp.schemas.coin_detail import DESCRIPTION_UNAVAILABLE
from coinapp.services.coingecko import CoinService
from coinapp.services.errors import InvalidURLError, NoConnectionError
from coinapp.services.http_client import FetchClient


BASE = "https://api.example.test/api/v3"


def _coin(coin_id: str, name: str) -> dict:
    return {
        "id": coin_id,
        "symbol": coin_id[:3],
        "name": name,
        "image": f"https://example.test/{coin_id}.png",
        "current_price": 100.0,
    }


DETAIL = {
    "id": "bitcoin",
    "symbol": "btc",
    "name": "Bitcoin",
    "description": {"en": "Bitcoin is the first successful internet money.", "ru": ""},
    "links": {
        "homepage": ["https://bitcoin.org"],
        "twitter_screen_name": "bitcoin",
        "repos_url": {"github": ["https://github.com/bitcoin/bitcoin"]},
    },
    "image": {"thumb": "t.png", "small": "s.png", "large": "l.png"},
    "market_data": {
        "current_price": {"usd": 45000, "eur": 41000},
        "market_cap": {"usd": 850000000000},
        "price_change_percentage_24h": 3.45,
        "price_change_percentage_1y": 150.0,
    },
    "genesis_date": "2009-01-03",
    "developer_score": 98.5,
}


class _Recorder:
    def __init__(self, payload):
        self.payload = payload
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(200, json=self.payload)


def _service(handler) -> CoinService:
    return CoinService(FetchClient(transport=httpx.MockTransport(handler)), base_url=BASE)


@pytest.mark.asyncio
async def test_list_coins_builds_market_query_and_keeps_order():
    recorder = _Recorder([_coin("bitcoin", "Bitcoin"), _coin("ethereum", "Ethereum")])

    coins = await _service(recorder).list_coins(currency="eur", page=2, per_page=50)

    request = recorder.requests[0]
    assert request.url.path == "/api/v3/coins/markets"
    assert dict(request.url.params) == {
        "vs_currency": "eur",
        "order": "market_cap_desc",
        "per_page": "50",
        "page": "2",
        "sparkline": "true",
        "price_change_percentage": "24h",
    }
    assert [c.id for c in coins] == ["bitcoin", "ethereum"]


@pytest.mark.asyncio
async def test_fetch_detail_requests_full_payload():
    recorder = _Recorder(DETAIL)

    detail = await _service(recorder).fetch_detail("bitcoin")

    request = recorder.requests[0]
    assert request.url.path == "/api/v3/coins/bitcoin"
    assert request.url.params["localization"] == "true"
    assert request.url.params["tickers"] == "false"
    assert request.url.params["market_data"] == "true"
    assert request.url.params["community_data"] == "true"
    assert request.url.params["developer_data"] == "true"

    assert detail.market_data.price_in("usd") == 45000
    assert detail.market_data.price_in("RUB") is None
    assert detail.links.repos_url.github == ["https://github.com/bitcoin/bitcoin"]
    assert detail.genesis_date.year == 2009
    # blank "ru" text falls back to english
    assert detail.localized_description.startswith("Bitcoin is")


@pytest.mark.asyncio
async def test_fetch_detail_rejects_blank_id():
    recorder = _Recorder(DETAIL)
    with pytest.raises(InvalidURLError):
        await _service(recorder).fetch_detail("  ")
    assert recorder.requests == []


@pytest.mark.asyncio
async def test_search_returns_coins_sub_list():
    recorder = _Recorder(
        {
            "coins": [
                {"id": "ethereum", "name": "Ethereum", "symbol": "ETH", "market_cap_rank": 2},
                {"id": "ethereum-classic", "name": "Ethereum Classic", "symbol": "ETC", "thumb": "x.png"},
            ],
            "exchanges": [],
        }
    )

    results = await _service(recorder).search("eth")

    assert recorder.requests[0].url.path == "/api/v3/search"
    assert recorder.requests[0].url.params["query"] == "eth"
    assert [r.id for r in results] == ["ethereum", "ethereum-classic"]
    assert results[0].market_cap_rank == 2
    assert results[1].thumb == "x.png"


@pytest.mark.asyncio
async def test_service_propagates_client_errors_unchanged():
    def handler(request):
        raise httpx.ConnectError("offline")

    with pytest.raises(NoConnectionError):
        await _service(handler).list_coins()


def test_description_fallback_when_missing():
    from coinapp.schemas.coin_detail import CoinDetail

    detail = CoinDetail(id="x", symbol="x", name="X")
    assert detail.localized_description == DESCRIPTION_UNAVAILABLE

    detail = CoinDetail.model_validate({**DETAIL, "description": {"en": "hello", "ru": "привет"}})
    assert detail.localized_description == "привет"
