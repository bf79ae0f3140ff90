# coinapp/main.py
from __future__ import annotations

import logging

from fastapi import FastAPI

from coinapp.api.coins import router as coins_router
from coinapp.api.favorites import router as favorites_router
from coinapp.api.health import router as health_router
from coinapp.api.search import router as search_router
from coinapp.api.settings import router as settings_router

from coinapp.config.settings import get_settings
from coinapp.controllers.coins_list import CoinsListController
from coinapp.controllers.favorites import FavoritesListController
from coinapp.db.session import create_tables
from coinapp.services.coingecko import CoinService
from coinapp.services.favorites import FavoritesService
from coinapp.services.http_client import FetchClient


logger = logging.getLogger("coinapp.main")

app = FastAPI(title="CoinApp API")

# Routers
app.include_router(health_router)
app.include_router(settings_router)
app.include_router(coins_router)
app.include_router(search_router)
app.include_router(favorites_router)


@app.get("/")
def root() -> dict[str, str]:
    return {"message": "CoinApp"}


@app.on_event("startup")
async def on_startup() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s | %(message)s",
    )

    # Ensure tables exist
    await create_tables()

    client = FetchClient(timeout=settings.REQUEST_TIMEOUT_SECONDS)
    coin_service = CoinService(client=client, base_url=settings.COINGECKO_BASE_URL)

    favorites = FavoritesService()
    await favorites.load()

    app.state.coin_service = coin_service
    app.state.favorites = favorites
    app.state.coins_list = CoinsListController(
        coin_service,
        page_size=settings.PAGE_SIZE,
        currency=settings.DEFAULT_CURRENCY,
    )
    app.state.favorites_list = FavoritesListController(favorites)

    logger.info(
        "coinapp started | currency=%s | page_size=%s",
        settings.DEFAULT_CURRENCY.value,
        settings.PAGE_SIZE,
    )


@app.on_event("shutdown")
async def on_shutdown() -> None:
    favorites_list = getattr(app.state, "favorites_list", None)
    if favorites_list is not None:
        favorites_list.close()
