"""Domain value objects for LifeQuest.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field

from lifequest.domain.value.common import ValueObject


class TaskCategory(str, Enum):
    """Life area a quest belongs to. Bosses resist or are weak to categories."""

    EDUCATION = "Education"
    CAREER = "Career"
    HEALTH = "Health"
    MENTAL_WELLNESS = "Mental Wellness"
    FINANCE = "Finance"
    SOCIAL = "Social"
    HOBBIES = "Hobbies"
    HOME = "Home"
    REWARD = "Reward"


class Difficulty(str, Enum):
    """Quest difficulty. Determines base boss damage."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"
    NOT_APPLICABLE = "N/A"


class TaskType(str, Enum):
    """Quest recurrence."""

    ONE_TIME = "One-time"
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"

    @property
    def is_recurring(self) -> bool:
        """Whether the quest repeats and tracks a streak."""
        return self is not TaskType.ONE_TIME


class RedeemPeriod(str, Enum):
    """Window over which a reward's redemption limit applies."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class EffectKind(str, Enum):
    """Kinds of debuff effects understood by the effect evaluator."""

    HEALTH_DRAIN = "healthDrain"  # flat HP loss per day
    HEALTH_DRAIN_PERCENT = "healthDrainPercent"  # percent of max HP per day


class ItemType(str, Enum):
    """Inventory item slot type."""

    WEAPON = "Weapon"
    ARMOR = "Armor"
    HELMET = "Helmet"
    SHIELD = "Shield"
    COLLECTIBLE = "Collectible"


class Rarity(str, Enum):
    """Item rarity."""

    COMMON = "Common"
    RARE = "Rare"
    EPIC = "Epic"
    LEGENDARY = "Legendary"


class RewardCategory(str, Enum):
    """Shop category of a reward."""

    ENTERTAINMENT = "Entertainment"
    RELAXATION = "Relaxation"
    TREAT = "Treat"
    ITEM = "Item"
    BOOST = "Boost"
    CUSTOM = "Custom"


class NotificationType(str, Enum):
    """Kind of user-facing notification."""

    REMINDER = "reminder"
    MOTIVATION = "motivation"
    ACHIEVEMENT = "achievement"
    HEALTH_WARNING = "health_warning"
    STREAK_REMINDER = "streak_reminder"
    DAILY_CHECK_IN = "daily_check_in"
    GENERIC = "generic"


class HitKind(str, Enum):
    """How a boss reacted to a hit."""

    CRITICAL = "critical"  # resistance < 1.0
    RESISTED = "resisted"  # resistance > 1.0
    NORMAL = "normal"
    NO_EFFECT = "no_effect"  # boss already defeated


class OperationKind(str, Enum):
    """Kinds of writes recorded in the pending-operation log."""

    PUT = "put"
    DELETE = "delete"


class DebuffEffect(ValueObject):
    """Serializable tagged effect descriptor attached to a debuff.

    Examples:
        {"kind": "healthDrain", "amount": 5}
        {"kind": "healthDrainPercent", "amount": 10}
    """

    kind: EffectKind
    amount: int = Field(ge=0)


class BossRewards(ValueObject):
    """Loot granted once when a boss is defeated."""

    xp: int = Field(default=0, ge=0)
    coins: int = Field(default=0, ge=0)
    gems: int = Field(default=0, ge=0)
