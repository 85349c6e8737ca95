from datetime import datetime, timedelta, timezone

import pytest

from bliss_api.app.core.exceptions import NotFoundError
from bliss_api.app.schemas.preference import PreferenceCreate
from bliss_api.app.schemas.subscription import SubscriptionCreate
from bliss_api.app.services.discovery_service import DiscoveryService
from bliss_api.app.services.match_service import MatchService
from bliss_api.app.services.preference_service import PreferenceService
from bliss_api.app.services.subscription_service import SubscriptionService


@pytest.fixture
def discovery(store):
    return DiscoveryService(store)


@pytest.fixture
def save_prefs(store):
    def _save(user, **fields):
        return PreferenceService(store).upsert(PreferenceCreate(user_id=user.id, **fields))

    return _save


def ids(users):
    return [u.id for u in users]


def test_unknown_requester(discovery):
    with pytest.raises(NotFoundError):
        discovery.get_potential_matches(1)


def test_without_preferences_only_looking_for_applies(discovery, make_user):
    me = make_user(gender="male", looking_for="female")
    older = make_user(gender="female", age=60)
    man = make_user(gender="male")
    younger = make_user(gender="female", age=18)

    assert ids(discovery.get_potential_matches(me.id)) == [older.id, younger.id]
    assert man.id not in ids(discovery.get_potential_matches(me.id))


def test_looking_for_all_keeps_every_gender_in_insertion_order(discovery, make_user):
    me = make_user(looking_for="all")
    others = [make_user(gender=g) for g in ("female", "male", "nonbinary")]

    assert ids(discovery.get_potential_matches(me.id)) == ids(others)


def test_preference_gender_and_age_range(discovery, save_prefs, make_user):
    me = make_user(looking_for="all")
    match = make_user(gender="female", age=30)
    make_user(gender="male", age=30)
    make_user(gender="female", age=24)
    make_user(gender="female", age=41)
    save_prefs(me, gender="female", min_age=25, max_age=40)

    assert ids(discovery.get_potential_matches(me.id)) == [match.id]


def test_interest_filter_ignored_for_non_vip(discovery, save_prefs, make_user):
    me = make_user(looking_for="all")
    make_user(interests=["Sports"])
    make_user(interests=["Music", "Art"])

    save_prefs(me, interests=[])
    without_interests = ids(discovery.get_potential_matches(me.id))
    save_prefs(me, interests=["Music"])
    with_interests = ids(discovery.get_potential_matches(me.id))

    assert with_interests == without_interests
    assert len(with_interests) == 2


def test_interest_filter_applies_for_vip(discovery, save_prefs, users, make_user):
    me = make_user(looking_for="all")
    users.update_user(me.id, {"is_vip": True})
    make_user(interests=["Sports"])
    music = make_user(interests=["Music", "Art"])
    save_prefs(me, interests=["Music"])

    assert ids(discovery.get_potential_matches(me.id)) == [music.id]


def test_already_swiped_accounts_are_excluded(store, discovery, make_user):
    matches = MatchService(store)
    me = make_user(looking_for="all")
    liked, passed, admirer, fresh = make_user(), make_user(), make_user(), make_user()
    matches.record_swipe(me.id, liked.id, True)
    matches.record_swipe(me.id, passed.id, False)
    matches.record_swipe(admirer.id, me.id, True)

    assert ids(discovery.get_potential_matches(me.id)) == [admirer.id, fresh.id]

    matches.record_swipe(me.id, admirer.id, True)
    assert ids(discovery.get_potential_matches(me.id)) == [fresh.id]


def test_lapsed_vip_loses_interest_filter(store, discovery, save_prefs, make_user):
    me = make_user()
    sports = make_user(interests=["Sports"])
    music = make_user(interests=["Music"])
    save_prefs(me, interests=["Music"])
    SubscriptionService(store).create(
        SubscriptionCreate(
            user_id=me.id,
            plan_type="monthly",
            amount=990,
            start_date=datetime.now(timezone.utc) - timedelta(days=40),
        )
    )

    assert ids(discovery.get_potential_matches(me.id)) == [sports.id, music.id]
