"""State for the favorites screen."""

from __future__ import annotations

from typing import FrozenSet, List

from coinapp.db.models import FavoriteCoin
from coinapp.services.favorites import FavoritesService
from coinapp.state.display_state import DisplayState


class FavoritesListController:
    """Lists stored favorites, newest first.

    With ``follow_changes`` the list reloads whenever another screen toggles
    a favorite through the shared :class:`FavoritesService`.
    """

    def __init__(self, favorites: FavoritesService, follow_changes: bool = True) -> None:
        self.favorites_service = favorites
        self.state: DisplayState[List[FavoriteCoin]] = DisplayState.idle()
        self.favorites: List[FavoriteCoin] = []
        self._unsubscribe = favorites.subscribe(self._on_change) if follow_changes else None

    async def load(self) -> None:
        self.state = DisplayState.loading()
        self.favorites = await self.favorites_service.list_all()
        self._publish()

    async def remove_favorite(self, coin_id: str) -> None:
        await self.favorites_service.remove(coin_id)
        # a failed delete leaves the id favorited, so the row stays
        self.favorites = [f for f in self.favorites if self.favorites_service.is_favorite(f.id)]
        self._publish()

    def is_favorite(self, coin_id: str) -> bool:
        return self.favorites_service.is_favorite(coin_id)

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def _on_change(self, _ids: FrozenSet[str]) -> None:
        await self.load()

    def _publish(self) -> None:
        if self.favorites:
            self.state = DisplayState.loaded(list(self.favorites))
        else:
            self.state = DisplayState.empty()
