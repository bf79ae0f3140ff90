"""Screen state shared by every controller: idle, loading, loaded, error, empty."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"
    EMPTY = "empty"


@dataclass(frozen=True)
class DisplayState(Generic[T]):
    """Exactly one status is active; ``payload`` is only set for LOADED and
    ``cause`` only for ERROR. Build values with the class constructors."""

    status: LoadStatus
    payload: Optional[T] = None
    cause: Optional[BaseException] = None

    @classmethod
    def idle(cls) -> "DisplayState[T]":
        return cls(LoadStatus.IDLE)

    @classmethod
    def loading(cls) -> "DisplayState[T]":
        return cls(LoadStatus.LOADING)

    @classmethod
    def loaded(cls, payload: T) -> "DisplayState[T]":
        return cls(LoadStatus.LOADED, payload=payload)

    @classmethod
    def failed(cls, cause: BaseException) -> "DisplayState[T]":
        return cls(LoadStatus.ERROR, cause=cause)

    @classmethod
    def empty(cls) -> "DisplayState[T]":
        return cls(LoadStatus.EMPTY)

    @property
    def is_idle(self) -> bool:
        return self.status is LoadStatus.IDLE

    @property
    def is_loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    @property
    def is_loaded(self) -> bool:
        return self.status is LoadStatus.LOADED

    @property
    def is_error(self) -> bool:
        return self.status is LoadStatus.ERROR

    @property
    def is_empty(self) -> bool:
        return self.status is LoadStatus.EMPTY

    @property
    def data(self) -> Optional[T]:
        return self.payload if self.is_loaded else None

    @property
    def error(self) -> Optional[BaseException]:
        return self.cause if self.is_error else None

    def map(self, transform: Callable[[T], U]) -> "DisplayState[U]":
        if self.is_loaded:
            return DisplayState.loaded(transform(self.payload))
        # idle/loading/error/empty carry nothing to transform
        return DisplayState(self.status, cause=self.cause)
