"""State for the paginated, searchable coin list screen."""

from __future__ import annotations

import logging
from typing import List, Optional

from coinapp.config.currencies import Currency
from coinapp.schemas.coin import Coin
from coinapp.services.coingecko import DEFAULT_PAGE_SIZE, CoinService
from coinapp.services.errors import NetworkError
from coinapp.state.display_state import DisplayState

logger = logging.getLogger("coinapp.coins_list")


class CoinsListController:
    """Loads market pages, accumulates them and filters them locally.

    A page holding exactly ``page_size`` coins is taken to mean more pages
    may exist. That guess is wrong when the last page happens to be full;
    the next ``load_more`` then simply comes back empty.

    ``load_more`` failures do not change ``state``: the page cursor is rolled
    back and the cause is kept in ``load_more_error`` so a screen can offer
    a retry without losing what is already shown.
    """

    def __init__(
        self,
        coin_service: CoinService,
        page_size: int = DEFAULT_PAGE_SIZE,
        currency: Currency = Currency.USD,
    ) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")

        self.coin_service = coin_service
        self.page_size = page_size
        self.currency = currency

        self.state: DisplayState[List[Coin]] = DisplayState.idle()
        self.current_page = 1
        self.has_more_data = True
        self.is_loading_more = False
        self.load_more_error: Optional[NetworkError] = None

        self._all_coins: List[Coin] = []
        self._filtered_coins: List[Coin] = []
        self._search_text = ""
        # currency the accumulated coins were priced in; None before a load
        self._coins_currency: Optional[Currency] = None
        # bumped by every load() so a late load_more result can be dropped
        self._generation = 0

    # ---------- read-only views ----------

    @property
    def coins(self) -> List[Coin]:
        return list(self._all_coins)

    @property
    def filtered_coins(self) -> List[Coin]:
        return list(self._filtered_coins)

    @property
    def coins_currency(self) -> Optional[Currency]:
        return self._coins_currency

    @property
    def search_text(self) -> str:
        return self._search_text

    @search_text.setter
    def search_text(self, value: str) -> None:
        self._search_text = value or ""
        self._apply_filter()

    # ---------- operations ----------

    async def load(self) -> None:
        """Reset pagination and fetch the first page."""
        self._generation += 1
        self.state = DisplayState.loading()
        self.current_page = 1
        self.has_more_data = True
        self.is_loading_more = False
        self.load_more_error = None

        try:
            coins = await self.coin_service.list_coins(
                currency=self.currency.value,
                page=self.current_page,
                per_page=self.page_size,
            )
        except NetworkError as exc:
            logger.warning("coin list load failed | currency=%s | err=%r", self.currency.value, exc)
            self.state = DisplayState.failed(exc)
            return

        if not coins:
            self._all_coins = []
            self._filtered_coins = []
            self.state = DisplayState.empty()
        else:
            self._all_coins = list(coins)
            self._coins_currency = self.currency
            self._filter()
            self.state = DisplayState.loaded(list(self._filtered_coins))

        self.has_more_data = len(coins) == self.page_size
        logger.info(
            "coin list loaded | currency=%s | count=%s | has_more=%s",
            self.currency.value,
            len(coins),
            self.has_more_data,
        )

    async def load_more(self) -> None:
        """Fetch the next page and append it. No-op when nothing can be loaded."""
        if self.is_loading_more or not self.has_more_data or self.state.is_loading:
            return

        generation = self._generation
        self.is_loading_more = True
        self.load_more_error = None
        self.current_page += 1

        try:
            coins = await self.coin_service.list_coins(
                currency=self.currency.value,
                page=self.current_page,
                per_page=self.page_size,
            )
        except NetworkError as exc:
            if generation == self._generation:
                self.current_page -= 1
                self.load_more_error = exc
                logger.warning("coin list load_more failed | page=%s | err=%r", self.current_page + 1, exc)
            return
        finally:
            if generation == self._generation:
                self.is_loading_more = False

        if generation != self._generation:
            logger.debug("coin list load_more result dropped | page=%s", self.current_page)
            return

        self._all_coins.extend(coins)
        self._filter()
        self.state = DisplayState.loaded(list(self._filtered_coins))
        self.has_more_data = len(coins) == self.page_size
        logger.info(
            "coin list page loaded | page=%s | count=%s | total=%s",
            self.current_page,
            len(coins),
            len(self._all_coins),
        )

    async def refresh(self) -> None:
        await self.load()

    async def change_currency(self, currency: Currency) -> None:
        self.currency = currency
        await self.load()

    # ---------- filtering ----------

    def _filter(self) -> None:
        if not self._search_text:
            self._filtered_coins = list(self._all_coins)
            return

        query = self._search_text.lower()
        self._filtered_coins = [
            coin
            for coin in self._all_coins
            if query in coin.name.lower() or query in coin.symbol.lower()
        ]

    def _derive_state(self) -> DisplayState[List[Coin]]:
        if not self._filtered_coins and self._search_text:
            return DisplayState.empty()
        return DisplayState.loaded(list(self._filtered_coins))

    def _apply_filter(self) -> None:
        self._filter()
        # empty with coins on hand means the query filtered everything out
        filtered_out = self.state.is_empty and bool(self._all_coins)
        if self.state.is_loaded or filtered_out:
            self.state = self._derive_state()
