"""Domain layer DI providers."""

from datetime import timedelta

from dishka import Scope, provide

from lifequest.config import ProgressionSettings, Settings
from lifequest.domain.repository import (
    BossRepository,
    JournalRepository,
    PendingOperationRepository,
    TaskRepository,
    UserStateRepository,
)
from lifequest.domain.service import (
    BossService,
    JournalService,
    ProgressionEngine,
    QuestService,
    RemoteStore,
    RewardService,
    SyncService,
)
from lifequest.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_sync_service(
        self,
        pending_operation_repository: PendingOperationRepository,
        remote_store: RemoteStore,
        settings: Settings,
    ) -> SyncService:
        """Provide sync domain service."""
        return SyncService(
            pending_operation_repository=pending_operation_repository,
            remote_store=remote_store,
            applied_retention=timedelta(
                hours=settings.remote.applied_retention_hours
            ),
        )

    @provide
    def get_progression_engine(
        self,
        user_state_repository: UserStateRepository,
        task_repository: TaskRepository,
        sync_service: SyncService,
        settings: ProgressionSettings,
    ) -> ProgressionEngine:
        """Provide the progression engine."""
        return ProgressionEngine(
            user_state_repository=user_state_repository,
            task_repository=task_repository,
            sync_service=sync_service,
            settings=settings,
        )

    @provide
    def get_boss_service(
        self, boss_repository: BossRepository, engine: ProgressionEngine
    ) -> BossService:
        """Provide boss domain service."""
        return BossService(boss_repository=boss_repository, engine=engine)

    @provide
    def get_quest_service(
        self,
        task_repository: TaskRepository,
        engine: ProgressionEngine,
        boss_service: BossService,
    ) -> QuestService:
        """Provide quest domain service."""
        return QuestService(
            task_repository=task_repository, engine=engine, boss_service=boss_service
        )

    @provide
    def get_reward_service(self, engine: ProgressionEngine) -> RewardService:
        """Provide reward domain service."""
        return RewardService(engine=engine)

    @provide
    def get_journal_service(
        self, journal_repository: JournalRepository, engine: ProgressionEngine
    ) -> JournalService:
        """Provide journal domain service."""
        return JournalService(journal_repository=journal_repository, engine=engine)
