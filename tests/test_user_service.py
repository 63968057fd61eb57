import pytest

from social_api.errors import NotFoundError, ValidationError
from social_api.models.models import Friendship, User
from social_api.services import auth_service, user_service


def _user(db, email, **fields):
    return auth_service.register(
        db,
        first_name=fields.get("first_name", "Test"),
        last_name="User",
        email=email,
        password="secret123",
    )


def test_register_stores_hash_only(db):
    user = _user(db, "hash@x.com")
    assert user.password_hash != "secret123"
    assert user.password_hash.startswith("$2")


def test_register_duplicate_keeps_single_record(db):
    _user(db, "same@x.com")
    with pytest.raises(ValidationError):
        _user(db, "SAME@x.com")
    assert db.query(User).filter(User.email == "same@x.com").count() == 1


def test_friend_order_is_insertion_order(db):
    a = _user(db, "a@x.com")
    b = _user(db, "b@x.com")
    c = _user(db, "c@x.com")

    user_service.toggle_friend(db, a.user_id, c.user_id)
    user_service.toggle_friend(db, a.user_id, b.user_id)

    friends = user_service.get_user_friends(db, a.user_id)
    assert [f.user_id for f in friends] == [c.user_id, b.user_id]


def test_toggle_friend_involution(db):
    a = _user(db, "a@x.com")
    b = _user(db, "b@x.com")
    c = _user(db, "c@x.com")
    user_service.toggle_friend(db, a.user_id, c.user_id)
    before = (list(a.friends), list(b.friends))

    user_service.toggle_friend(db, a.user_id, b.user_id)
    assert b.user_id in a.friends and a.user_id in b.friends
    user_service.toggle_friend(db, a.user_id, b.user_id)

    assert (a.friends, b.friends) == before


def test_get_user_friends_skips_dangling_references(db):
    a = _user(db, "a@x.com")
    b = _user(db, "b@x.com")
    user_service.toggle_friend(db, a.user_id, b.user_id)
    # SQLite does not enforce foreign keys unless asked to
    db.add(Friendship(user_id=a.user_id, friend_id=4242))
    db.commit()
    db.expire(a)

    friends = user_service.get_user_friends(db, a.user_id)
    assert [f.user_id for f in friends] == [b.user_id]


def test_get_user_friends_unknown_user(db):
    with pytest.raises(NotFoundError):
        user_service.get_user_friends(db, 1)
