"""initial_schema

Create the LifeQuest schema:
- User states (progression snapshot, nested parts as JSONB)
- Tasks (quests)
- Bosses (one current boss per user)
- Journal entries
- Pending operations (write-ahead sync log)

Revision ID: 3c1f0a7d52e4
Revises:
Create Date: 2026-10-18 09:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7d52e4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USER_STATES table
    # ========================================================================
    op.create_table(
        "user_states",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("xp", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("xp_to_next_level", sa.Integer(), nullable=False),
        sa.Column("skill_points", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("health", sa.Integer(), nullable=False, server_default="100"),
        sa.Column("max_health", sa.Integer(), nullable=False, server_default="100"),
        sa.Column("coins", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("gems", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("streak", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("longest_streak", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("tasks_completed", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "debuffs", postgresql.JSONB(), nullable=False, server_default="[]"
        ),
        sa.Column(
            "skill_trees", postgresql.JSONB(), nullable=False, server_default="[]"
        ),
        sa.Column(
            "inventory", postgresql.JSONB(), nullable=False, server_default="[]"
        ),
        sa.Column(
            "redeemed_rewards", postgresql.JSONB(), nullable=False, server_default="[]"
        ),
        sa.Column(
            "custom_rewards", postgresql.JSONB(), nullable=False, server_default="[]"
        ),
        sa.Column(
            "recent_journal_deletions",
            postgresql.JSONB(),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "notifications", postgresql.JSONB(), nullable=False, server_default="[]"
        ),
        sa.Column("member_since", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("last_login", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("coins >= 0", name="check_coins_non_negative"),
        sa.CheckConstraint("gems >= 0", name="check_gems_non_negative"),
        sa.CheckConstraint(
            "health >= 0 AND health <= max_health", name="check_health_bounds"
        ),
    )

    # ========================================================================
    # TASKS table
    # ========================================================================
    op.create_table(
        "tasks",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("intention", sa.Text(), nullable=True),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("difficulty", sa.String(10), nullable=False),  # 'Easy', ..., 'N/A'
        sa.Column("type", sa.String(20), nullable=False),  # 'One-time', 'Daily', ...
        sa.Column("completed", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("xp", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("coins", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("streak", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_completed", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("due_date", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["user_states.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_tasks_user_created", "tasks", ["user_id", "created_at"])

    # ========================================================================
    # BOSSES table
    # ========================================================================
    op.create_table(
        "bosses",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False, server_default=""),
        sa.Column("max_hp", sa.Integer(), nullable=False),
        sa.Column("current_hp", sa.Integer(), nullable=False),
        sa.Column(
            "resistances", postgresql.JSONB(), nullable=False, server_default="{}"
        ),
        sa.Column("rewards", postgresql.JSONB(), nullable=False, server_default="{}"),
        sa.Column("last_defeated_week", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["user_states.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id"),
        sa.UniqueConstraint("id"),
        sa.CheckConstraint("current_hp >= 0", name="check_boss_hp_non_negative"),
    )

    # ========================================================================
    # JOURNAL_ENTRIES table
    # ========================================================================
    op.create_table(
        "journal_entries",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("date", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("text", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["user_states.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_journal_entries_user_date", "journal_entries", ["user_id", "date"]
    )

    # ========================================================================
    # PENDING_OPERATIONS table (write-ahead sync log)
    # ========================================================================
    op.create_table(
        "pending_operations",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("seq", sa.BigInteger(), sa.Identity(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("kind", sa.String(10), nullable=False),  # 'put', 'delete'
        sa.Column("collection", sa.String(50), nullable=False),
        sa.Column("key", sa.String(255), nullable=False),
        sa.Column("payload", postgresql.JSONB(), nullable=False, server_default="{}"),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("attempts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_error", sa.Text(), nullable=True),
        sa.Column("applied_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("seq"),
    )
    # Replay reads only unapplied operations, in insertion order
    op.create_index(
        "idx_pending_operations_unapplied",
        "pending_operations",
        ["user_id", "seq"],
        postgresql_where=sa.text("applied_at IS NULL"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("pending_operations")
    op.drop_table("journal_entries")
    op.drop_table("bosses")
    op.drop_table("tasks")
    op.drop_table("user_states")
