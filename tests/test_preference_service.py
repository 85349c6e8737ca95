import pytest

from bliss_api.app.schemas.preference import PreferenceCreate
from bliss_api.app.services.preference_service import PreferenceService


@pytest.fixture
def preferences(store):
    return PreferenceService(store)


def test_get_returns_none_until_saved(preferences):
    assert preferences.get(1) is None


def test_upsert_applies_defaults(preferences):
    saved = preferences.upsert(PreferenceCreate(user_id=1))

    assert (saved.min_age, saved.max_age, saved.distance) == (18, 35, 50)
    assert saved.gender is None
    assert saved.interests == []


def test_zero_is_a_valid_override(preferences):
    saved = preferences.upsert(PreferenceCreate(user_id=1, min_age=0, distance=0))

    assert saved.min_age == 0
    assert saved.distance == 0


def test_second_upsert_overwrites_in_place(store, preferences):
    first = preferences.upsert(PreferenceCreate(user_id=1, min_age=25, gender="male", interests=["Arte"]))
    second = preferences.upsert(PreferenceCreate(user_id=1, max_age=40))

    assert store.count("preferences") == 1
    assert second.id == first.id
    assert second.max_age == 40
    assert second.min_age == 18
    assert second.gender is None
    assert preferences.get(1) == second


def test_defaults_for_unsaved_account(preferences):
    defaults = preferences.defaults(7)

    assert defaults.id is None
    assert defaults.user_id == 7
    assert (defaults.min_age, defaults.max_age, defaults.distance) == (18, 35, 50)
