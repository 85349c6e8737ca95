import pytest

from bliss_api.app.core.exceptions import ConflictError
from bliss_api.app.schemas.user import UserCreate


def test_create_user_assigns_sequential_ids_and_defaults(make_user):
    first = make_user()
    second = make_user(bio="", interests=None)

    assert (first.id, second.id) == (1, 2)
    assert second.bio is None
    assert second.location is None
    assert second.profile_pic_url is None
    assert second.is_vip is False
    assert second.interests == []
    assert second.photos == []
    assert second.created_at is not None


def test_lookups_return_none_when_missing(users, make_user):
    make_user(username="Sofia")

    assert users.get_user(42) is None
    assert users.get_user_by_username("sofia") is None
    assert users.get_user_by_username("Sofia").username == "Sofia"


def test_update_user_merges_fields(users, make_user):
    user = make_user(name="Ana", age=30)

    updated = users.update_user(user.id, {"bio": "Hi", "interests": ["Arte"]})

    assert updated.name == "Ana"
    assert updated.age == 30
    assert updated.bio == "Hi"
    assert updated.interests == ["Arte"]
    assert users.update_user(999, {"bio": "x"}) is None


def test_returned_records_are_copies(users, make_user):
    user = make_user(interests=["Yoga"])

    user.interests.append("Cinema")

    assert users.get_user(user.id).interests == ["Yoga"]


def test_update_profile_ignores_protected_and_required_nulls(users, make_user):
    user = make_user(username="ana", name="Ana")

    updated = users.update_profile(user.id, {"username": "bob", "is_vip": True, "name": None, "bio": "new"})

    assert updated.username == "ana"
    assert updated.is_vip is False
    assert updated.name == "Ana"
    assert updated.bio == "new"


def test_store_does_not_enforce_minimum_age(make_user):
    assert make_user(age=17).age == 17


def test_registration_payload_rejects_minors():
    with pytest.raises(ValueError):
        UserCreate(username="kid", password="secret1", name="Kid", age=17, gender="male", looking_for="female")


def test_register_rejects_taken_username_and_hashes_password(users, store):
    payload = UserCreate(username="lucas", password="secret1", name="Lucas", age=32, gender="male", looking_for="female")
    user = users.register(payload)

    assert store.get("users", user.id)["password"] != "secret1"
    with pytest.raises(ConflictError):
        users.register(payload)
    assert store.count("users") == 1


def test_authenticate(users):
    users.register(UserCreate(username="julia", password="secret1", name="Julia", age=25, gender="female", looking_for="male"))

    assert users.authenticate("julia", "secret1").username == "julia"
    assert users.authenticate("julia", "wrong") is None
    assert users.authenticate("nobody", "secret1") is None
