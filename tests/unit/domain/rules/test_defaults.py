"""Unit tests for new-account defaults."""

from uuid import uuid4

from lifequest.domain.rules.defaults import create_default_user, default_rewards
from lifequest.domain.value import UserId
from tests.conftest import NOW


class TestCreateDefaultUser:
    def test_starting_state(self):
        user_id = UserId(uuid4())

        state = create_default_user(user_id, NOW, "Ada")

        assert state.id == user_id
        assert state.name == "Ada"
        assert (state.level, state.xp, state.xp_to_next_level) == (1, 0, 282)
        assert (state.health, state.max_health) == (100, 100)
        assert (state.coins, state.gems, state.skill_points) == (50, 5, 5)
        assert state.streak == state.longest_streak == 0
        assert state.debuffs == []
        assert state.member_since == state.last_login == NOW

    def test_skill_trees(self):
        state = create_default_user(UserId(uuid4()), NOW)

        assert [t.name for t in state.skill_trees] == [
            "Strength",
            "Endurance",
            "Agility",
            "Intelligence",
            "Perception",
        ]
        for tree in state.skill_trees:
            assert [(s.max_level, s.cost) for s in tree.skills] == [(5, 1), (3, 2)]
            assert all(s.level == 0 for s in tree.skills)

    def test_welcome_notification(self):
        state = create_default_user(UserId(uuid4()), NOW)

        assert len(state.notifications) == 1
        assert state.notifications[0].title == "Welcome"
        assert state.name == "Adventurer"


class TestDefaultRewards:
    def test_ids_are_unique(self):
        ids = [r.id for r in default_rewards()]
        assert len(ids) == len(set(ids))

    def test_every_reward_has_a_cost(self):
        assert all(r.coin_cost or r.gem_cost for r in default_rewards())
