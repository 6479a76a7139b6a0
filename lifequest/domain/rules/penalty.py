"""Journal deletion penalty with exponential backoff."""

from dataclasses import dataclass
from datetime import datetime, timedelta

from lifequest.config import ProgressionSettings
from lifequest.domain.model import RecentJournalDeletions, UserState
from lifequest.domain.rules.leveling import DEFAULT_SETTINGS


@dataclass(frozen=True)
class DeletionPenalty:
    """Penalty owed for deleting a journal entry.

    ``state`` carries the updated deletion counter only; the caller applies
    the XP and coin penalties.
    """

    xp_penalty: int
    coin_penalty: int
    state: UserState

    @property
    def applies(self) -> bool:
        return self.xp_penalty > 0 or self.coin_penalty > 0


def _within(moment: datetime, start: datetime, end: datetime) -> bool:
    return start <= moment <= end


def compute_deletion_penalty(
    state: UserState,
    entry_created_at: datetime,
    deletion_time: datetime,
    settings: ProgressionSettings = DEFAULT_SETTINGS,
) -> DeletionPenalty:
    """Price the deletion of an entry created at ``entry_created_at``.

    Entries older than the deletion window are free and leave the counter
    alone. Otherwise the multiplier doubles with every deletion made within
    the window of the previous one.
    """
    window = timedelta(minutes=settings.deletion_window_minutes)
    window_start = deletion_time - window
    if not _within(entry_created_at, window_start, deletion_time):
        return DeletionPenalty(xp_penalty=0, coin_penalty=0, state=state)

    recent = state.recent_journal_deletions
    count = recent.count
    if recent.last_deletion is None or not _within(
        recent.last_deletion, window_start, deletion_time
    ):
        count = 0

    multiplier = 2**count
    new_state = state.model_copy(
        update={
            "recent_journal_deletions": RecentJournalDeletions(
                count=count + 1, last_deletion=deletion_time
            )
        }
    )
    return DeletionPenalty(
        xp_penalty=settings.deletion_base_xp_penalty * multiplier,
        coin_penalty=settings.deletion_base_coin_penalty * multiplier,
        state=new_state,
    )
