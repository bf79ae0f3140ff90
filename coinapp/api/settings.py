from __future__ import annotations

from fastapi import APIRouter

from coinapp.config.currencies import Currency
from coinapp.config.settings import get_settings


router = APIRouter(tags=["settings"])


@router.get("/settings")
async def read_settings():
    """User-facing preferences; read-only from the app's point of view."""
    s = get_settings()
    return {
        "currency": s.DEFAULT_CURRENCY.value,
        "appearance": s.APPEARANCE.value,
        "page_size": s.PAGE_SIZE,
        "currencies": [
            {"code": c.value, "display_name": c.display_name, "symbol": c.symbol}
            for c in Currency
        ],
    }
