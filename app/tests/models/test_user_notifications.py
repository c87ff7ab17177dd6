# ===========================================================================
# File: app/tests/models/test_user_notifications.py
# ===========================================================================
from app.models.user import UserInDB, UserNotification, NEW_STUFF_NOTIFICATION


def _user_with(*types: str) -> UserInDB:
    return UserInDB(
        username="reader_two",
        notifications=[UserNotification(type=t, data={"n": i}) for i, t in enumerate(types)],
    )


def test_add_notification_appends_unseen_by_default():
    user = _user_with()
    notification = user.add_notification("GROUP_INVITE", {"group": "party"})

    assert user.notifications == [notification]
    assert notification.seen is False
    assert notification.id


def test_remove_notification_only_removes_first_match():
    user = _user_with(NEW_STUFF_NOTIFICATION, "GROUP_INVITE", NEW_STUFF_NOTIFICATION)

    removed = user.remove_notification(NEW_STUFF_NOTIFICATION)

    assert removed.data == {"n": 0}
    assert [(n.type, n.data["n"]) for n in user.notifications] == [("GROUP_INVITE", 1), (NEW_STUFF_NOTIFICATION, 2)]


def test_remove_notification_without_match_is_noop():
    user = _user_with("GROUP_INVITE")
    assert user.remove_notification(NEW_STUFF_NOTIFICATION) is None
    assert len(user.notifications) == 1


def test_replace_notification_moves_it_to_the_end():
    user = _user_with(NEW_STUFF_NOTIFICATION, "GROUP_INVITE")

    replaced = user.replace_notification(NEW_STUFF_NOTIFICATION, {"title": "News"}, seen=True)

    assert [n.type for n in user.notifications] == ["GROUP_INVITE", NEW_STUFF_NOTIFICATION]
    assert user.notifications[-1].id == replaced.id
    assert replaced.seen is True
    assert replaced.data == {"title": "News"}


def test_is_contributor_admin_reflects_flag():
    assert UserInDB(username="plain_user").is_contributor_admin is False
    assert UserInDB(username="admin_user", contributor={"admin": True}).is_contributor_admin is True
