from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from coinapp.api.rendering import (
    coins_payload,
    get_coin_service,
    get_coins_list,
    get_favorites,
    render_error,
    render_state,
)
from coinapp.config.currencies import Currency
from coinapp.controllers.coin_detail import CoinDetailController
from coinapp.controllers.coins_list import CoinsListController


router = APIRouter(prefix="/coins", tags=["coins"])


class SearchTextRequest(BaseModel):
    text: str = Field("", description="Local filter over name and symbol")


class CurrencyRequest(BaseModel):
    currency: Currency


def _render_list(controller: CoinsListController) -> Dict[str, Any]:
    body = render_state(controller.state, coins_payload)
    body.update(
        {
            "page": controller.current_page,
            "has_more_data": controller.has_more_data,
            "is_loading_more": controller.is_loading_more,
            "load_more_error": render_error(controller.load_more_error),
            "search_text": controller.search_text,
            "currency": controller.currency.value,
            "total_loaded": len(controller.coins),
        }
    )
    return body


@router.get("")
async def get_coins(controller: CoinsListController = Depends(get_coins_list)):
    return _render_list(controller)


@router.post("/load")
async def load_coins(controller: CoinsListController = Depends(get_coins_list)):
    """First page load; also the retry action after an error."""
    await controller.load()
    return _render_list(controller)


@router.post("/refresh")
async def refresh_coins(controller: CoinsListController = Depends(get_coins_list)):
    await controller.refresh()
    return _render_list(controller)


@router.post("/load-more")
async def load_more_coins(controller: CoinsListController = Depends(get_coins_list)):
    await controller.load_more()
    return _render_list(controller)


@router.put("/search")
async def set_search_text(
    payload: SearchTextRequest,
    controller: CoinsListController = Depends(get_coins_list),
):
    controller.search_text = payload.text
    return _render_list(controller)


@router.put("/currency")
async def set_currency(
    payload: CurrencyRequest,
    controller: CoinsListController = Depends(get_coins_list),
):
    await controller.change_currency(payload.currency)
    return _render_list(controller)


@router.get("/{coin_id}")
async def get_coin_detail(
    coin_id: str,
    currency: Optional[Currency] = None,
    coin_service=Depends(get_coin_service),
    coins_list: CoinsListController = Depends(get_coins_list),
    favorites=Depends(get_favorites),
):
    summary = next((c for c in coins_list.coins if c.id == coin_id), None)
    controller = CoinDetailController(
        coin_id,
        coin_service,
        coin=summary,
        currency=currency or coins_list.currency,
        coin_currency=coins_list.coins_currency,
    )
    await controller.load()

    body = render_state(controller.state, lambda detail: detail.model_dump(mode="json"))
    body.update(
        {
            "id": coin_id,
            "summary": controller.summary(),
            "description": controller.description,
            "is_favorite": favorites.is_favorite(coin_id),
        }
    )
    return body
