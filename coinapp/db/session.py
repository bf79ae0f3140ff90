from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from coinapp.config.settings import get_settings

DATABASE_URL = get_settings().DATABASE_URL

engine = create_async_engine(
    DATABASE_URL,
    echo=False,
)

SessionLocal = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    class_=AsyncSession,
)

class Base(DeclarativeBase):
    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        yield session


# favorites writes open a fresh session per mutation
def session_factory():
    return SessionLocal()


async def create_tables() -> None:
    import coinapp.db.models  # noqa: F401  registers FavoriteCoin

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
