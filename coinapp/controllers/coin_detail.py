"""State for a single coin's detail screen."""

from __future__ import annotations

import logging
from typing import Optional

from coinapp.config.currencies import Currency
from coinapp.schemas.coin import Coin
from coinapp.schemas.coin_detail import CoinDetail, DESCRIPTION_UNAVAILABLE
from coinapp.services.coingecko import CoinService
from coinapp.services.errors import NetworkError
from coinapp.state.display_state import DisplayState
from coinapp.utils.formatting import (
    as_abbreviated_string,
    as_currency_string,
    as_percentage_string,
    or_na,
)

logger = logging.getLogger("coinapp.coin_detail")


class CoinDetailController:
    def __init__(
        self,
        coin_id: str,
        coin_service: CoinService,
        coin: Optional[Coin] = None,
        currency: Currency = Currency.USD,
        coin_currency: Optional[Currency] = None,
    ) -> None:
        self.coin_id = coin_id
        self.coin_service = coin_service
        self.coin = coin
        self.currency = currency
        # currency the list summary was priced in; defaults to ``currency``
        self.coin_currency = coin_currency or currency
        self.state: DisplayState[CoinDetail] = DisplayState.idle()

    async def load(self) -> None:
        self.state = DisplayState.loading()
        try:
            detail = await self.coin_service.fetch_detail(self.coin_id)
        except NetworkError as exc:
            logger.warning("coin detail load failed | coin=%s | err=%r", self.coin_id, exc)
            self.state = DisplayState.failed(exc)
            return
        self.state = DisplayState.loaded(detail)

    async def refresh(self) -> None:
        await self.load()

    # ---------- display values ----------
    # The list summary wins when it was priced in the selected currency;
    # otherwise the loaded detail's market data is read in that currency.

    def _summary(self) -> Optional[Coin]:
        if self.coin is None or self.coin_currency is not self.currency:
            return None
        return self.coin

    def _market_value(self, coin_attr: str, detail_getter: str) -> Optional[float]:
        coin = self._summary()
        if coin is not None:
            return getattr(coin, coin_attr)
        detail = self.state.data
        if detail is None or detail.market_data is None:
            return None
        return getattr(detail.market_data, detail_getter)(self.currency.value)

    def _change_24h(self) -> Optional[float]:
        coin = self._summary()
        if coin is not None:
            return coin.price_change_percentage_24h
        detail = self.state.data
        if detail is None or detail.market_data is None:
            return None
        return detail.market_data.price_change_percentage_24h

    @property
    def formatted_price(self) -> str:
        return or_na(self._market_value("current_price", "price_in"), as_currency_string, self.currency.symbol)

    @property
    def price_change_24h(self) -> str:
        return or_na(self._change_24h(), as_percentage_string)

    @property
    def is_price_up(self) -> Optional[bool]:
        """None when the 24h change is unknown."""
        change = self._change_24h()
        if change is None:
            return None
        return change >= 0

    @property
    def formatted_market_cap(self) -> str:
        return or_na(self._market_value("market_cap", "market_cap_in"), as_abbreviated_string, self.currency.symbol)

    @property
    def formatted_volume(self) -> str:
        return or_na(self._market_value("total_volume", "volume_in"), as_abbreviated_string, self.currency.symbol)

    @property
    def description(self) -> str:
        detail = self.state.data
        if detail is None:
            return DESCRIPTION_UNAVAILABLE
        return detail.localized_description

    def summary(self) -> dict:
        return {
            "price": self.formatted_price,
            "price_change_24h": self.price_change_24h,
            "is_price_up": self.is_price_up,
            "market_cap": self.formatted_market_cap,
            "volume": self.formatted_volume,
        }

