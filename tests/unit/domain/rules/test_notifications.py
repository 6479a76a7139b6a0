"""Unit tests for the notification log."""

from lifequest.domain.rules.notifications import (
    mark_read,
    push_notification,
    remove_notification,
)
from lifequest.domain.value import NotificationType
from tests.conftest import NOW, make_user


class TestNotifications:
    def test_push_prepends(self):
        state = make_user()

        state = push_notification(state, "Level Up!", "Level 2", NOW, 100)

        assert state.notifications[0].title == "Level Up!"
        assert state.notifications[1].title == "Welcome"

    def test_push_keeps_newest_up_to_limit(self):
        state = make_user(notifications=[])
        for i in range(5):
            state = push_notification(state, f"n{i}", "", NOW, 3)

        assert [n.title for n in state.notifications] == ["n4", "n3", "n2"]

    def test_push_sets_type(self):
        state = push_notification(
            make_user(), "Exhausted!", "", NOW, 100, NotificationType.HEALTH_WARNING
        )

        assert state.notifications[0].type is NotificationType.HEALTH_WARNING
        assert not state.notifications[0].read

    def test_mark_one_read(self):
        state = push_notification(make_user(), "New", "", NOW, 100)
        target = state.notifications[0]

        state = mark_read(state, target.id)

        assert state.notifications[0].read
        assert not state.notifications[1].read

    def test_mark_all_read(self):
        state = push_notification(make_user(), "New", "", NOW, 100)

        state = mark_read(state, None)

        assert all(n.read for n in state.notifications)

    def test_remove(self):
        state = make_user()
        welcome = state.notifications[0]

        state = remove_notification(state, welcome.id)

        assert state.notifications == []
