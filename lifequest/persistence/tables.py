"""SQLAlchemy table definitions for LifeQuest.

They match the schema defined in Alembic migrations. Nested parts of the
user state (debuffs, skill trees, logs) are stored as JSONB documents.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USER STATES TABLE (one snapshot per account)
# ============================================================================
user_states_table = Table(
    "user_states",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("level", Integer, nullable=False, server_default="1"),
    Column("xp", Integer, nullable=False, server_default="0"),
    Column("xp_to_next_level", Integer, nullable=False),
    Column("skill_points", Integer, nullable=False, server_default="0"),
    Column("health", Integer, nullable=False, server_default="100"),
    Column("max_health", Integer, nullable=False, server_default="100"),
    Column("coins", Integer, nullable=False, server_default="0"),
    Column("gems", Integer, nullable=False, server_default="0"),
    Column("streak", Integer, nullable=False, server_default="0"),
    Column("longest_streak", Integer, nullable=False, server_default="0"),
    Column("tasks_completed", Integer, nullable=False, server_default="0"),
    Column("debuffs", JSONB, nullable=False, server_default="[]"),
    Column("skill_trees", JSONB, nullable=False, server_default="[]"),
    Column("inventory", JSONB, nullable=False, server_default="[]"),
    Column("redeemed_rewards", JSONB, nullable=False, server_default="[]"),
    Column("custom_rewards", JSONB, nullable=False, server_default="[]"),
    Column("recent_journal_deletions", JSONB, nullable=False, server_default="{}"),
    Column("notifications", JSONB, nullable=False, server_default="[]"),
    Column("member_since", TIMESTAMP(timezone=True), nullable=False),
    Column("last_login", TIMESTAMP(timezone=True), nullable=False),
    CheckConstraint("coins >= 0", name="check_coins_non_negative"),
    CheckConstraint("gems >= 0", name="check_gems_non_negative"),
    CheckConstraint(
        "health >= 0 AND health <= max_health", name="check_health_bounds"
    ),
)

# ============================================================================
# TASKS TABLE
# ============================================================================
tasks_table = Table(
    "tasks",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "user_id", UUID, ForeignKey("user_states.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=True),
    Column("intention", Text, nullable=True),
    Column("category", String(50), nullable=False),
    Column("difficulty", String(10), nullable=False),
    Column("type", String(20), nullable=False),
    Column("completed", Boolean, nullable=False, server_default="false"),
    Column("xp", Integer, nullable=False, server_default="0"),
    Column("coins", Integer, nullable=False, server_default="0"),
    Column("streak", Integer, nullable=False, server_default="0"),
    Column("last_completed", TIMESTAMP(timezone=True), nullable=True),
    Column("due_date", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_tasks_user_created", tasks_table.c.user_id, tasks_table.c.created_at)

# ============================================================================
# BOSSES TABLE (current boss per user)
# ============================================================================
bosses_table = Table(
    "bosses",
    metadata,
    Column(
        "user_id",
        UUID,
        ForeignKey("user_states.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("id", UUID, nullable=False, unique=True),
    Column("name", String(255), nullable=False),
    Column("title", String(255), nullable=False, server_default=""),
    Column("max_hp", Integer, nullable=False),
    Column("current_hp", Integer, nullable=False),
    Column("resistances", JSONB, nullable=False, server_default="{}"),
    Column("rewards", JSONB, nullable=False, server_default="{}"),
    Column("last_defeated_week", Integer, nullable=True),
    CheckConstraint("current_hp >= 0", name="check_boss_hp_non_negative"),
)

# ============================================================================
# JOURNAL ENTRIES TABLE
# ============================================================================
journal_entries_table = Table(
    "journal_entries",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "user_id", UUID, ForeignKey("user_states.id", ondelete="CASCADE"), nullable=False
    ),
    Column("date", TIMESTAMP(timezone=True), nullable=False),
    Column("text", Text, nullable=True),
    Column("image_url", Text, nullable=True),
)

Index(
    "idx_journal_entries_user_date",
    journal_entries_table.c.user_id,
    journal_entries_table.c.date,
)

# ============================================================================
# PENDING OPERATIONS TABLE (write-ahead sync log)
# ============================================================================
pending_operations_table = Table(
    "pending_operations",
    metadata,
    Column("id", UUID, primary_key=True),
    # Insertion order, the replay order for equal created_at values
    Column("seq", BigInteger, Identity(), nullable=False, unique=True),
    Column("user_id", UUID, nullable=False),
    Column("kind", String(10), nullable=False),  # 'put', 'delete'
    Column("collection", String(50), nullable=False),
    Column("key", String(255), nullable=False),
    Column("payload", JSONB, nullable=False, server_default="{}"),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
    Column("attempts", Integer, nullable=False, server_default="0"),
    Column("last_error", Text, nullable=True),
    Column("applied_at", TIMESTAMP(timezone=True), nullable=True),
)

Index(
    "idx_pending_operations_unapplied",
    pending_operations_table.c.user_id,
    pending_operations_table.c.seq,
    postgresql_where=pending_operations_table.c.applied_at.is_(None),
)
