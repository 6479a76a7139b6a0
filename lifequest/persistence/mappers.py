"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand.
JSONB columns hold the JSON form of nested models; pydantic validation
rebuilds them on the way back.
"""

from typing import Any, Dict
from uuid import UUID

from lifequest.domain.model import Boss, JournalEntry, PendingOperation, Task, UserState

USER_STATE_JSON_FIELDS = {
    "debuffs",
    "skill_trees",
    "inventory",
    "redeemed_rewards",
    "custom_rewards",
    "recent_journal_deletions",
    "notifications",
}


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user_state(row: Dict[str, Any]) -> UserState:
    """Convert database row to UserState domain model.

    Args:
        row: Database row as dict

    Returns:
        UserState domain model
    """
    return UserState.model_validate({**row, "id": _uuid(row["id"])})


def user_state_to_dict(state: UserState) -> Dict[str, Any]:
    """Convert UserState domain model to database dict.

    Args:
        state: UserState domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = state.model_dump(exclude=USER_STATE_JSON_FIELDS)
    data.update(state.model_dump(mode="json", include=USER_STATE_JSON_FIELDS))
    return data


def row_to_task(row: Dict[str, Any]) -> Task:
    """Convert database row to Task domain model."""
    return Task.model_validate(
        {**row, "id": _uuid(row["id"]), "user_id": _uuid(row["user_id"])}
    )


def task_to_dict(task: Task) -> Dict[str, Any]:
    """Convert Task domain model to database dict.

    Enums are stored by value.
    """
    data = task.model_dump()
    data["category"] = task.category.value
    data["difficulty"] = task.difficulty.value
    data["type"] = task.type.value
    return data


def row_to_boss(row: Dict[str, Any]) -> Boss:
    """Convert database row to Boss domain model."""
    return Boss.model_validate(
        {**row, "id": _uuid(row["id"]), "user_id": _uuid(row["user_id"])}
    )


def boss_to_dict(boss: Boss) -> Dict[str, Any]:
    """Convert Boss domain model to database dict."""
    data = boss.model_dump(exclude={"resistances", "rewards"})
    data.update(boss.model_dump(mode="json", include={"resistances", "rewards"}))
    return data


def row_to_journal_entry(row: Dict[str, Any]) -> JournalEntry:
    """Convert database row to JournalEntry domain model."""
    return JournalEntry.model_validate(
        {**row, "id": _uuid(row["id"]), "user_id": _uuid(row["user_id"])}
    )


def journal_entry_to_dict(entry: JournalEntry) -> Dict[str, Any]:
    """Convert JournalEntry domain model to database dict."""
    return entry.model_dump()


def row_to_pending_operation(row: Dict[str, Any]) -> PendingOperation:
    """Convert database row to PendingOperation domain model.

    The ``seq`` ordering column has no domain counterpart and is dropped.
    """
    data = {k: v for k, v in row.items() if k != "seq"}
    return PendingOperation.model_validate(
        {**data, "id": _uuid(row["id"]), "user_id": _uuid(row["user_id"])}
    )


def pending_operation_to_dict(operation: PendingOperation) -> Dict[str, Any]:
    """Convert PendingOperation domain model to database dict."""
    data = operation.model_dump()
    data["kind"] = operation.kind.value
    return data
