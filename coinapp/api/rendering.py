"""JSON rendering of controller state for the screen endpoints."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from fastapi import Request

from coinapp.db.models import FavoriteCoin
from coinapp.schemas.coin import Coin
from coinapp.services.errors import NetworkError
from coinapp.state.display_state import DisplayState
from coinapp.utils.time import to_iso_z


def render_error(exc: Optional[BaseException]) -> Optional[Dict[str, Any]]:
    if exc is None:
        return None
    if isinstance(exc, NetworkError):
        return exc.to_dict()
    return {"kind": "unknown", "message": str(exc)}


def render_state(state: DisplayState, serialize: Callable[[Any], Any] = lambda x: x) -> Dict[str, Any]:
    return {
        "status": state.status.value,
        "data": state.map(serialize).data,
        "error": render_error(state.error),
    }


def coins_payload(coins: List[Coin]) -> List[Dict[str, Any]]:
    return [coin.model_dump(mode="json") for coin in coins]


def favorite_payload(row: FavoriteCoin) -> Dict[str, Any]:
    return {
        "id": row.id,
        "name": row.name,
        "symbol": row.symbol,
        "display_name": row.display_name,
        "display_symbol": row.display_symbol,
        "image_url": row.image_url,
        "added_at": to_iso_z(row.added_at) if row.added_at else None,
    }


# ----------------------------
# app.state accessors (wired in coinapp.main)
# ----------------------------
def get_coin_service(request: Request):
    return request.app.state.coin_service


def get_coins_list(request: Request):
    return request.app.state.coins_list


def get_favorites(request: Request):
    return request.app.state.favorites


def get_favorites_list(request: Request):
    return request.app.state.favorites_list
