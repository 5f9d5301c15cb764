"""Persistence providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tome.config import Settings
from tome.domain.repository import CommentRepository
from tome.persistence.database import create_engine, create_session_factory
from tome.persistence.repository import SqlCommentRepository
from tome.util.di.base import ProviderBase
from tome.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Swappable persistence component."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """SQL-backed comment store.

    One engine per process (APP scope); one session per request or
    lifespan scope.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        logfire.info("Database engine created", backend=engine.url.get_backend_name())
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Session for one scope.

        The repository commits each operation itself; whatever is still
        pending when the scope ends is committed, or rolled back on error.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Rolling back session", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return SqlCommentRepository(session)
