from sqlalchemy import Column, DateTime, Index, String

from coinapp.db.session import Base
from coinapp.utils.time import utcnow


class FavoriteCoin(Base):
    __tablename__ = "favorite_coins"
    __table_args__ = (
        Index("ix_favorite_coins_added_at", "added_at"),
    )

    # coin identifier, e.g. "bitcoin"; one row per coin
    id = Column(String, primary_key=True)
    name = Column(String, nullable=True)
    symbol = Column(String, nullable=True)
    image_url = Column(String, nullable=True)
    added_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    @property
    def display_name(self) -> str:
        return self.name or "Unknown"

    @property
    def display_symbol(self) -> str:
        return (self.symbol or "").upper()

    def __repr__(self) -> str:
        return f"FavoriteCoin(id={self.id!r}, added_at={self.added_at!r})"
