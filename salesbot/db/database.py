"""
Relational database access for the lead store.
Any SQLAlchemy async URL works: sqlite+aiosqlite locally, postgresql+asyncpg in production.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from salesbot.config import settings
from salesbot.db.models import Base


class Database:
    """Owns one async engine and hands out transactional sessions."""

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None):
        self.url = make_url(url or settings.db_url)
        self.echo = settings.debug if echo is None else echo
        self._engine: Optional[AsyncEngine] = None
        self._sessions: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def dialect(self) -> str:
        """Backend name without driver, e.g. 'sqlite' or 'postgresql'."""
        return self.url.get_backend_name()

    def _engine_options(self) -> dict:
        if self.dialect == "sqlite":
            return {}
        # Server databases drop idle connections
        return {"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}

    async def init(self) -> None:
        """Create engine and the `leads` table if missing."""
        if self.dialect == "sqlite" and self.url.database and self.url.database != ":memory:":
            Path(self.url.database).parent.mkdir(parents=True, exist_ok=True)

        self._engine = create_async_engine(self.url, echo=self.echo, **self._engine_options())
        self._sessions = async_sessionmaker(self._engine, expire_on_commit=False)

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._sessions = None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session committed on success and rolled back on any error."""
        if self._sessions is None:
            await self.init()

        async with self._sessions() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
