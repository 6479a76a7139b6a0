"""Starting state for new accounts and the built-in reward catalogue."""

from datetime import datetime
from uuid import uuid4

from lifequest.config import ProgressionSettings
from lifequest.domain.model import (
    Notification,
    RewardItem,
    Skill,
    SkillTree,
    UserState,
)
from lifequest.domain.rules.leveling import DEFAULT_SETTINGS, xp_for_level
from lifequest.domain.value import (
    NotificationId,
    RedeemPeriod,
    RewardCategory,
    RewardId,
    UserId,
)


def default_skill_trees() -> list[SkillTree]:
    """The five starting skill trees, all skills at level 0."""

    def tree(name: str, description: str, skills: list[tuple[str, int, int, str]]):
        return SkillTree(
            name=name,
            description=description,
            skills=[
                Skill(name=n, max_level=m, cost=c, description=d)
                for n, m, c, d in skills
            ],
        )

    return [
        tree(
            "Strength",
            "Increases physical power and damage.",
            [
                ("Overpower", 5, 1, "+5% damage to bosses per level."),
                ("Intimidation", 3, 2, "Chance to get double coins from a quest."),
            ],
        ),
        tree(
            "Endurance",
            "Boosts health and resilience to penalties.",
            [
                ("Toughness", 5, 1, "Reduce HP loss from missed daily quests by 10% per level."),
                ("Willpower", 3, 2, "Increases max HP by 5% per level."),
            ],
        ),
        tree(
            "Agility",
            "Improves speed, efficiency, and luck.",
            [
                ("Quickness", 5, 1, "+2% chance per level to find a rare item."),
                ("Momentum", 3, 2, "Completing tasks quickly grants bonus XP."),
            ],
        ),
        tree(
            "Intelligence",
            "Enhances learning, planning, and AI interactions.",
            [
                ("Aptitude", 5, 1, "+5% XP from Education & Career quests per level."),
                ("Insight", 3, 2, "AI coach provides more detailed suggestions."),
            ],
        ),
        tree(
            "Perception",
            "Increases awareness and the ability to find rewards.",
            [
                ("Scavenger", 5, 1, "+2% chance per level to find extra coins."),
                ("Sixth Sense", 3, 2, "Reveals one hidden objective in a Special Quest."),
            ],
        ),
    ]


def create_default_user(
    user_id: UserId,
    now: datetime,
    name: str | None = None,
    settings: ProgressionSettings = DEFAULT_SETTINGS,
) -> UserState:
    """Build the state every new account starts with."""
    return UserState(
        id=user_id,
        name=name or "Adventurer",
        level=1,
        xp=0,
        xp_to_next_level=xp_for_level(2, settings),
        health=100,
        max_health=100,
        coins=50,
        gems=5,
        skill_points=5,
        skill_trees=default_skill_trees(),
        notifications=[
            Notification(
                id=NotificationId(uuid4()),
                title="Welcome",
                message="Welcome to LifeQuest! Your adventure begins now.",
                date=now,
            )
        ],
        member_since=now,
        last_login=now,
    )


def _reward(reward_id: str, title: str, description: str, **kwargs) -> RewardItem:
    return RewardItem(
        id=RewardId(reward_id), title=title, description=description, **kwargs
    )


def default_rewards() -> list[RewardItem]:
    """Built-in shop rewards available to every user."""
    daily, weekly, monthly = (
        RedeemPeriod.DAILY,
        RedeemPeriod.WEEKLY,
        RedeemPeriod.MONTHLY,
    )
    return [
        _reward("reward-1", "Watch a Movie", "Relax and watch one movie.",
                coin_cost=200, category=RewardCategory.ENTERTAINMENT,
                level_requirement=5, redeem_limit=1, redeem_period=weekly),
        _reward("reward-2", "Gaming Session", "Play video games for one hour.",
                coin_cost=150, category=RewardCategory.ENTERTAINMENT,
                level_requirement=1, redeem_limit=2, redeem_period=daily),
        _reward("reward-3", "Order Takeout", "Get your favorite food delivered.",
                coin_cost=300, category=RewardCategory.TREAT,
                level_requirement=10, redeem_limit=2, redeem_period=weekly),
        _reward("reward-4", "Sleep In", "Skip your morning alarm, one time.",
                coin_cost=400, category=RewardCategory.RELAXATION,
                level_requirement=15, redeem_limit=1, redeem_period=monthly),
        _reward("reward-5", "Social Media Hour", "One hour of guilt-free scrolling.",
                coin_cost=100, category=RewardCategory.ENTERTAINMENT,
                level_requirement=1, redeem_limit=3, redeem_period=daily),
        _reward("reward-6", "Your Favorite Snack", "Indulge in a tasty treat.",
                coin_cost=50, category=RewardCategory.TREAT, level_requirement=1),
        _reward("gem-reward-1", "Rare Avatar Frame", "An exclusive frame for your avatar.",
                gem_cost=25, category=RewardCategory.ITEM, level_requirement=10),
        _reward("gem-reward-2", "Boss Fight Bonus", "+25% damage against the next boss.",
                gem_cost=50, category=RewardCategory.BOOST,
                level_requirement=20, redeem_limit=1, redeem_period=weekly),
        _reward("gem-reward-3", "Common Loot Box", "A chance to get common items or currency.",
                gem_cost=10, category=RewardCategory.ITEM, level_requirement=5),
        _reward("coin-reward-1", "Legendary Loot Box",
                "Guaranteed rare item, with a chance for legendary!",
                coin_cost=1000, category=RewardCategory.ITEM,
                level_requirement=25, redeem_limit=1, redeem_period=weekly),
        _reward("gem-reward-4", "Character Rename Token", "Change your adventurer's name.",
                gem_cost=100, category=RewardCategory.ITEM, level_requirement=1),
    ]
