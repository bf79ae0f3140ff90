"""Favorited coin ids, kept in memory and mirrored into the local store."""

from __future__ import annotations

import inspect
import logging
from datetime import datetime
from typing import Awaitable, Callable, FrozenSet, List, Optional, Set, Union

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from coinapp.db import session as db_session
from coinapp.db.models import FavoriteCoin
from coinapp.utils.time import utcnow

logger = logging.getLogger("coinapp.favorites")

FavoritesCallback = Callable[[FrozenSet[str]], Union[None, Awaitable[None]]]


class FavoritesService:
    """Owns the set of favorited coin ids.

    The in-memory set only changes after the store commit succeeded. A failed
    write is logged and dropped: neither the set nor the subscribers hear
    about it. ``add`` accepts anything with ``id``, ``name``, ``symbol`` and
    optionally ``image`` (a :class:`Coin`, a search hit, an API payload).
    """

    def __init__(
        self,
        session_factory_fn: Optional[Callable] = None,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._session_factory_fn = session_factory_fn or db_session.session_factory
        self._clock = clock
        self._ids: Set[str] = set()
        self._subscribers: List[FavoritesCallback] = []

    @property
    def favorite_ids(self) -> FrozenSet[str]:
        return frozenset(self._ids)

    def is_favorite(self, coin_id: str) -> bool:
        return coin_id in self._ids

    async def load(self) -> None:
        """Rebuild the in-memory set from the store (app startup)."""
        try:
            async with self._session_factory_fn() as session:
                result = await session.execute(select(FavoriteCoin.id))
                ids = set(result.scalars().all())
        except SQLAlchemyError:
            logger.exception("failed to load favorites")
            ids = set()
        self._ids = ids
        logger.info("favorites loaded | count=%s", len(ids))

    async def add(self, coin) -> None:
        try:
            async with self._session_factory_fn() as session:
                existing = await session.get(FavoriteCoin, coin.id)
                if existing is None:
                    session.add(
                        FavoriteCoin(
                            id=coin.id,
                            name=coin.name,
                            symbol=coin.symbol,
                            image_url=getattr(coin, "image", None),
                            added_at=self._clock(),
                        )
                    )
                    await session.commit()
        except SQLAlchemyError:
            logger.exception("failed to save favorite | coin=%s", coin.id)
            return

        if coin.id in self._ids:
            return
        self._ids.add(coin.id)
        logger.info("favorite added | coin=%s", coin.id)
        await self._notify()

    async def remove(self, coin_id: str) -> None:
        try:
            async with self._session_factory_fn() as session:
                await session.execute(delete(FavoriteCoin).where(FavoriteCoin.id == coin_id))
                await session.commit()
        except SQLAlchemyError:
            logger.exception("failed to remove favorite | coin=%s", coin_id)
            return

        if coin_id not in self._ids:
            return
        self._ids.discard(coin_id)
        logger.info("favorite removed | coin=%s", coin_id)
        await self._notify()

    async def toggle(self, coin) -> None:
        if self.is_favorite(coin.id):
            await self.remove(coin.id)
        else:
            await self.add(coin)

    async def list_all(self) -> List[FavoriteCoin]:
        """All favorites, most recently added first."""
        try:
            async with self._session_factory_fn() as session:
                result = await session.execute(
                    select(FavoriteCoin).order_by(FavoriteCoin.added_at.desc())
                )
                return list(result.scalars().all())
        except SQLAlchemyError:
            logger.exception("failed to fetch favorites")
            return []

    def subscribe(self, callback: FavoritesCallback) -> Callable[[], None]:
        """Call ``callback`` with the new id set after every successful change.

        Coroutine callbacks are awaited. Returns a function that unsubscribes.
        """
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    async def _notify(self) -> None:
        snapshot = self.favorite_ids
        for callback in list(self._subscribers):
            try:
                result = callback(snapshot)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("favorites subscriber failed | callback=%r", callback)
