from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from coinapp.api.rendering import get_coin_service
from coinapp.services.errors import NetworkError, RateLimitedError


router = APIRouter(tags=["search"])


@router.get("/search")
async def search_coins(
    query: str = Query(..., min_length=1),
    coin_service=Depends(get_coin_service),
):
    try:
        coins = await coin_service.search(query)
    except NetworkError as exc:
        status = 429 if isinstance(exc, RateLimitedError) else 502
        raise HTTPException(status_code=status, detail=exc.to_dict()) from exc
    return [coin.model_dump(mode="json") for coin in coins]
