"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from lifequest.config import Settings
from lifequest.domain.repository import (
    BossRepository,
    JournalRepository,
    PendingOperationRepository,
    TaskRepository,
    UserStateRepository,
)
from lifequest.persistence.database import create_engine, create_session_factory
from lifequest.persistence.repository import (
    PostgresBossRepository,
    PostgresJournalRepository,
    PostgresPendingOperationRepository,
    PostgresTaskRepository,
    PostgresUserStateRepository,
)
from lifequest.util.di.base import ProviderBase
from lifequest.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        State snapshot, task changes and sync log entries of one request are
        committed together, or rolled back together on error.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_state_repository(self, session: AsyncSession) -> UserStateRepository:
        """Provide UserState repository."""
        return PostgresUserStateRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_task_repository(self, session: AsyncSession) -> TaskRepository:
        """Provide Task repository."""
        return PostgresTaskRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_boss_repository(self, session: AsyncSession) -> BossRepository:
        """Provide Boss repository."""
        return PostgresBossRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_journal_repository(self, session: AsyncSession) -> JournalRepository:
        """Provide Journal repository."""
        return PostgresJournalRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_pending_operation_repository(
        self, session: AsyncSession
    ) -> PendingOperationRepository:
        """Provide PendingOperation repository."""
        return PostgresPendingOperationRepository(session)
