from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from coinapp.api.rendering import favorite_payload, get_favorites, get_favorites_list, render_state
from coinapp.controllers.favorites import FavoritesListController
from coinapp.services.favorites import FavoritesService


router = APIRouter(prefix="/favorites", tags=["favorites"])


class FavoriteRequest(BaseModel):
    id: str = Field(..., min_length=1, description="CoinGecko coin id, e.g. bitcoin")
    name: Optional[str] = None
    symbol: Optional[str] = None
    image: Optional[str] = Field(default=None, description="Image URL")


class FavoriteStatus(BaseModel):
    id: str
    is_favorite: bool


def _render_favorites(controller: FavoritesListController):
    return render_state(controller.state, lambda rows: [favorite_payload(r) for r in rows])


@router.get("")
async def list_favorites(controller: FavoritesListController = Depends(get_favorites_list)):
    await controller.load()
    return _render_favorites(controller)


@router.post("", response_model=FavoriteStatus)
async def add_favorite(
    payload: FavoriteRequest,
    favorites: FavoritesService = Depends(get_favorites),
) -> FavoriteStatus:
    await favorites.add(payload)
    return FavoriteStatus(id=payload.id, is_favorite=favorites.is_favorite(payload.id))


@router.post("/toggle", response_model=FavoriteStatus)
async def toggle_favorite(
    payload: FavoriteRequest,
    favorites: FavoritesService = Depends(get_favorites),
) -> FavoriteStatus:
    await favorites.toggle(payload)
    return FavoriteStatus(id=payload.id, is_favorite=favorites.is_favorite(payload.id))


@router.get("/{coin_id}", response_model=FavoriteStatus)
async def favorite_status(
    coin_id: str,
    favorites: FavoritesService = Depends(get_favorites),
) -> FavoriteStatus:
    return FavoriteStatus(id=coin_id, is_favorite=favorites.is_favorite(coin_id))


@router.delete("/{coin_id}")
async def remove_favorite(
    coin_id: str,
    controller: FavoritesListController = Depends(get_favorites_list),
):
    await controller.remove_favorite(coin_id)
    return _render_favorites(controller)
