from datetime import datetime, timedelta, timezone

import pytest

from bliss_api.app.core.exceptions import ConflictError
from bliss_api.app.schemas.subscription import SubscriptionCreate
from bliss_api.app.services.subscription_service import SubscriptionService, add_months


@pytest.fixture
def subscriptions(store):
    return SubscriptionService(store)


def monthly(user_id, **extra):
    return SubscriptionCreate(user_id=user_id, plan_type="monthly", amount=990, **extra)


def test_create_grants_vip_with_defaults(subscriptions, users, make_user):
    user = make_user()

    sub = subscriptions.create(monthly(user.id))

    assert sub.status == "active"
    assert sub.auto_renew is True
    assert sub.payment_method is None
    assert sub.amount == 990
    assert users.get_user(user.id).is_vip is True
    assert subscriptions.get_active(user.id) == sub


@pytest.mark.parametrize(
    "plan, expected",
    [
        ("monthly", datetime(2024, 2, 15, tzinfo=timezone.utc)),
        ("yearly", datetime(2025, 1, 15, tzinfo=timezone.utc)),
        ("weekly", datetime(2024, 2, 15, tzinfo=timezone.utc)),
    ],
)
def test_end_date_follows_plan(subscriptions, make_user, plan, expected):
    user = make_user()
    start = datetime(2024, 1, 15, tzinfo=timezone.utc)

    sub = subscriptions.create(SubscriptionCreate(user_id=user.id, plan_type=plan, amount=100, start_date=start))

    assert sub.end_date == expected


def test_add_months_clamps_to_month_end():
    assert add_months(datetime(2023, 1, 31), 1) == datetime(2023, 2, 28)
    assert add_months(datetime(2024, 1, 31), 1) == datetime(2024, 2, 29)
    assert add_months(datetime(2024, 2, 29), 12) == datetime(2025, 2, 28)
    assert add_months(datetime(2024, 12, 5), 1) == datetime(2025, 1, 5)


def test_second_active_subscription_is_rejected(store, subscriptions, users, make_user):
    user = make_user()
    existing = subscriptions.create(monthly(user.id, payment_method="credit_card"))

    with pytest.raises(ConflictError):
        subscriptions.create(SubscriptionCreate(user_id=user.id, plan_type="yearly", amount=7080))

    assert store.count("subscriptions") == 1
    assert subscriptions.get_active(user.id) == existing
    assert users.get_user(user.id).is_vip is True


def test_cancel_without_subscription_changes_nothing(subscriptions, users, make_user):
    user = make_user()
    users.update_user(user.id, {"is_vip": True})

    assert subscriptions.cancel(user.id) is False
    assert users.get_user(user.id).is_vip is True


def test_cancel_revokes_vip(store, subscriptions, users, make_user):
    user = make_user()
    sub = subscriptions.create(monthly(user.id))

    assert subscriptions.cancel(user.id) is True

    assert subscriptions.get_active(user.id) is None
    assert store.get("subscriptions", sub.id)["status"] == "cancelled"
    assert users.get_user(user.id).is_vip is False
    # A new subscription may start after cancelling.
    assert subscriptions.create(monthly(user.id)).status == "active"


def test_expire_due(store, subscriptions, users, make_user):
    lapsed, current = make_user(), make_user()
    old = subscriptions.create(monthly(lapsed.id, start_date=datetime.now(timezone.utc) - timedelta(days=40)))
    subscriptions.create(monthly(current.id))

    assert subscriptions.expire_due() == 1

    assert store.get("subscriptions", old.id)["status"] == "expired"
    assert users.get_user(lapsed.id).is_vip is False
    assert users.get_user(current.id).is_vip is True


def test_plans_catalog():
    plans = {plan.plan_type: plan for plan in SubscriptionService.plans()}

    assert plans["monthly"].amount == 990
    assert plans["yearly"].amount == 7080
    assert plans["yearly"].months == 12


def test_lapsed_subscription_does_not_block_renewal(store, subscriptions, users, make_user):
    user = make_user()
    old = subscriptions.create(monthly(user.id, start_date=datetime.now(timezone.utc) - timedelta(days=40)))

    renewed = subscriptions.create(monthly(user.id))

    assert store.get("subscriptions", old.id)["status"] == "expired"
    assert subscriptions.get_active(user.id) == renewed
    assert users.get_user(user.id).is_vip is True


def test_cancel_closes_every_active_record(store, subscriptions, users, make_user):
    user = make_user()
    users.set_vip(user.id, True)
    start = datetime.now(timezone.utc) - timedelta(days=1)
    ids = [
        store.insert(
            "subscriptions",
            {
                "user_id": user.id,
                "plan_type": "monthly",
                "start_date": start,
                "end_date": add_months(start, 1),
                "auto_renew": True,
                "status": "active",
                "payment_method": None,
                "amount": 990,
                "created_at": start,
                "updated_at": start,
            },
        )["id"]
        for _ in range(2)
    ]

    assert subscriptions.cancel(user.id) is True

    assert [store.get("subscriptions", i)["status"] for i in ids] == ["cancelled", "cancelled"]
    assert all(store.get("subscriptions", i)["updated_at"] > start for i in ids)
    assert subscriptions.get_active(user.id) is None
    assert users.get_user(user.id).is_vip is False
