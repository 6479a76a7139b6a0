"""Journal entry entity."""

from datetime import datetime
from typing import Optional

from lifequest.domain.model.common import DomainModel
from lifequest.domain.value import JournalEntryId, UserId


class JournalEntry(DomainModel):
    """A journal entry. Deleting a fresh entry costs XP and coins."""

    id: JournalEntryId
    user_id: UserId
    date: datetime
    text: Optional[str] = None
    image_url: Optional[str] = None
