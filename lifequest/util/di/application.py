"""Application layer DI providers."""

from dishka import Scope, provide

from lifequest.application.usecase.boss import (
    AssignBossUseCase,
    GetBossUseCase,
    ResetBossUseCase,
)
from lifequest.application.usecase.journal import (
    AddJournalEntryUseCase,
    DeleteJournalEntryUseCase,
    ListJournalEntriesUseCase,
)
from lifequest.application.usecase.notification import (
    DeleteNotificationUseCase,
    ListNotificationsUseCase,
    MarkNotificationsReadUseCase,
)
from lifequest.application.usecase.reward import (
    AddCustomRewardUseCase,
    DeleteCustomRewardUseCase,
    ListRewardsUseCase,
    RedeemRewardUseCase,
)
from lifequest.application.usecase.sync import GetSyncStatusUseCase, ReplaySyncUseCase
from lifequest.application.usecase.task import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    ListTasksUseCase,
    SetTaskCompletionUseCase,
)
from lifequest.application.usecase.user import (
    CreateUserUseCase,
    GetUserStateUseCase,
    StartSessionUseCase,
    UpgradeSkillUseCase,
)
from lifequest.domain.service import (
    BossService,
    JournalService,
    ProgressionEngine,
    QuestService,
    RewardService,
    SyncService,
)
from lifequest.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(self, engine: ProgressionEngine) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(engine=engine)

    @provide(scope=Scope.REQUEST)
    def get_get_user_state_use_case(
        self, engine: ProgressionEngine
    ) -> GetUserStateUseCase:
        """Provide get user state use case."""
        return GetUserStateUseCase(engine=engine)

    @provide(scope=Scope.REQUEST)
    def get_start_session_use_case(
        self, engine: ProgressionEngine
    ) -> StartSessionUseCase:
        """Provide start session use case."""
        return StartSessionUseCase(engine=engine)

    @provide(scope=Scope.REQUEST)
    def get_upgrade_skill_use_case(
        self, engine: ProgressionEngine
    ) -> UpgradeSkillUseCase:
        """Provide upgrade skill use case."""
        return UpgradeSkillUseCase(engine=engine)

    # Task use cases
    @provide(scope=Scope.REQUEST)
    def get_create_task_use_case(self, quest_service: QuestService) -> CreateTaskUseCase:
        """Provide create task use case."""
        return CreateTaskUseCase(quest_service=quest_service)

    @provide(scope=Scope.REQUEST)
    def get_list_tasks_use_case(self, quest_service: QuestService) -> ListTasksUseCase:
        """Provide list tasks use case."""
        return ListTasksUseCase(quest_service=quest_service)

    @provide(scope=Scope.REQUEST)
    def get_set_task_completion_use_case(
        self, quest_service: QuestService
    ) -> SetTaskCompletionUseCase:
        """Provide set task completion use case."""
        return SetTaskCompletionUseCase(quest_service=quest_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_task_use_case(self, quest_service: QuestService) -> DeleteTaskUseCase:
        """Provide delete task use case."""
        return DeleteTaskUseCase(quest_service=quest_service)

    # Boss use cases
    @provide(scope=Scope.REQUEST)
    def get_get_boss_use_case(self, boss_service: BossService) -> GetBossUseCase:
        """Provide get boss use case."""
        return GetBossUseCase(boss_service=boss_service)

    @provide(scope=Scope.REQUEST)
    def get_assign_boss_use_case(self, boss_service: BossService) -> AssignBossUseCase:
        """Provide assign boss use case."""
        return AssignBossUseCase(boss_service=boss_service)

    @provide(scope=Scope.REQUEST)
    def get_reset_boss_use_case(self, boss_service: BossService) -> ResetBossUseCase:
        """Provide reset boss use case."""
        return ResetBossUseCase(boss_service=boss_service)

    # Reward use cases
    @provide(scope=Scope.REQUEST)
    def get_list_rewards_use_case(
        self, reward_service: RewardService
    ) -> ListRewardsUseCase:
        """Provide list rewards use case."""
        return ListRewardsUseCase(reward_service=reward_service)

    @provide(scope=Scope.REQUEST)
    def get_redeem_reward_use_case(
        self, reward_service: RewardService
    ) -> RedeemRewardUseCase:
        """Provide redeem reward use case."""
        return RedeemRewardUseCase(reward_service=reward_service)

    @provide(scope=Scope.REQUEST)
    def get_add_custom_reward_use_case(
        self, reward_service: RewardService
    ) -> AddCustomRewardUseCase:
        """Provide add custom reward use case."""
        return AddCustomRewardUseCase(reward_service=reward_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_custom_reward_use_case(
        self, reward_service: RewardService
    ) -> DeleteCustomRewardUseCase:
        """Provide delete custom reward use case."""
        return DeleteCustomRewardUseCase(reward_service=reward_service)

    # Journal use cases
    @provide(scope=Scope.REQUEST)
    def get_add_journal_entry_use_case(
        self, journal_service: JournalService
    ) -> AddJournalEntryUseCase:
        """Provide add journal entry use case."""
        return AddJournalEntryUseCase(journal_service=journal_service)

    @provide(scope=Scope.REQUEST)
    def get_list_journal_entries_use_case(
        self, journal_service: JournalService
    ) -> ListJournalEntriesUseCase:
        """Provide list journal entries use case."""
        return ListJournalEntriesUseCase(journal_service=journal_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_journal_entry_use_case(
        self, journal_service: JournalService
    ) -> DeleteJournalEntryUseCase:
        """Provide delete journal entry use case."""
        return DeleteJournalEntryUseCase(journal_service=journal_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, engine: ProgressionEngine
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(engine=engine)

    @provide(scope=Scope.REQUEST)
    def get_mark_notifications_read_use_case(
        self, engine: ProgressionEngine
    ) -> MarkNotificationsReadUseCase:
        """Provide mark notifications read use case."""
        return MarkNotificationsReadUseCase(engine=engine)

    @provide(scope=Scope.REQUEST)
    def get_delete_notification_use_case(
        self, engine: ProgressionEngine
    ) -> DeleteNotificationUseCase:
        """Provide delete notification use case."""
        return DeleteNotificationUseCase(engine=engine)

    # Sync use cases
    @provide(scope=Scope.REQUEST)
    def get_replay_sync_use_case(self, sync_service: SyncService) -> ReplaySyncUseCase:
        """Provide replay sync use case."""
        return ReplaySyncUseCase(sync_service=sync_service)

    @provide(scope=Scope.REQUEST)
    def get_get_sync_status_use_case(
        self, sync_service: SyncService
    ) -> GetSyncStatusUseCase:
        """Provide get sync status use case."""
        return GetSyncStatusUseCase(sync_service=sync_service)
