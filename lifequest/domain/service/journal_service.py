"""Journal domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from lifequest.domain.error import NotFoundError, NotOwnerError
from lifequest.domain.model import JournalEntry, UserState
from lifequest.domain.repository import JournalRepository
from lifequest.domain.rules import (
    DeletionPenalty,
    apply_coin_delta,
    apply_xp_delta,
    compute_deletion_penalty,
)
from lifequest.domain.value import JournalEntryId, NotificationType, UserId

from .base import Service
from .progression_engine import ProgressionEngine
from .sync_service import JOURNAL


@dataclass(frozen=True)
class JournalDeletion:
    """Result of deleting a journal entry.

    ``coins_applied`` is False when the coin penalty exceeded the balance
    and was skipped.
    """

    state: UserState
    penalty: DeletionPenalty
    coins_applied: bool = True


class JournalService(Service):
    """Domain service for journal entries and their rewards."""

    def __init__(
        self, journal_repository: JournalRepository, engine: ProgressionEngine
    ) -> None:
        """Initialize journal service.

        Args:
            journal_repository: Journal entry repository
            engine: Progression engine
        """
        self.journal_repository = journal_repository
        self.engine = engine

    async def add_entry(
        self,
        user_id: UserId,
        text: Optional[str] = None,
        image_url: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> tuple[JournalEntry, UserState]:
        """Write a journal entry and grant the journaling reward.

        Returns:
            The stored entry and the rewarded user state
        """
        now = now or self.engine.now()
        settings = self.engine.settings
        with logfire.span("journal_service.add_entry", user_id=str(user_id)):
            state = await self.engine.get_user(user_id)
            entry = await self.journal_repository.save(
                JournalEntry(
                    id=JournalEntryId(uuid4()),
                    user_id=user_id,
                    date=now,
                    text=text,
                    image_url=image_url,
                )
            )
            await self.engine.sync_service.record_put(
                user_id, JOURNAL, str(entry.id), entry, now
            )

            change = apply_xp_delta(state, settings.journal_entry_xp, settings)
            new_state = apply_coin_delta(change.state, settings.journal_entry_coins).state
            new_state = self.engine.notify(
                new_state,
                "Journal entry saved!",
                f"You earned {settings.journal_entry_xp} XP and "
                f"{settings.journal_entry_coins} Coins.",
                now,
            )
            new_state = self.engine.announce_levels(new_state, change, now)
            saved = await self.engine.save_state(new_state, now)
            logfire.info("Journal entry saved", user_id=str(user_id), entry_id=str(entry.id))
            return entry, saved

    async def list_entries(
        self, user_id: UserId, limit: int = 50, offset: int = 0
    ) -> list[JournalEntry]:
        """List the user's entries, newest first."""
        return await self.journal_repository.find_by_user(user_id, limit, offset)

    async def delete_entry(
        self,
        user_id: UserId,
        entry_id: JournalEntryId,
        now: Optional[datetime] = None,
    ) -> JournalDeletion:
        """Delete an entry, charging the rapid-deletion penalty if it applies.

        Raises:
            NotFoundError: If the entry does not exist
            NotOwnerError: If the entry belongs to another user
        """
        now = now or self.engine.now()
        settings = self.engine.settings
        with logfire.span(
            "journal_service.delete_entry",
            user_id=str(user_id),
            entry_id=str(entry_id),
        ):
            entry = await self.journal_repository.find_by_id(entry_id)
            if entry is None:
                raise NotFoundError("JournalEntry", str(entry_id))
            if entry.user_id != user_id:
                raise NotOwnerError("journal entry", str(entry_id), str(user_id))

            state = await self.engine.get_user(user_id)
            penalty = compute_deletion_penalty(state, entry.date, now, settings)

            await self.journal_repository.delete(entry_id)
            await self.engine.sync_service.record_delete(
                user_id, JOURNAL, str(entry_id), now
            )

            if not penalty.applies:
                return JournalDeletion(state=state, penalty=penalty)

            change = apply_xp_delta(penalty.state, -penalty.xp_penalty, settings)
            ledger = apply_coin_delta(change.state, -penalty.coin_penalty)
            new_state = self.engine.notify(
                ledger.state,
                "Journal Penalty Applied",
                f"Entry deleted within an hour. You lost {penalty.xp_penalty} XP "
                f"and {penalty.coin_penalty} coins.",
                now,
                NotificationType.HEALTH_WARNING,
            )
            new_state = self.engine.announce_levels(new_state, change, now)
            saved = await self.engine.save_state(new_state, now)
            logfire.warn(
                "Journal penalty applied",
                user_id=str(user_id),
                xp_penalty=penalty.xp_penalty,
                coin_penalty=penalty.coin_penalty,
                coins_applied=ledger.success,
            )
            return JournalDeletion(
                state=saved, penalty=penalty, coins_applied=ledger.success
            )
