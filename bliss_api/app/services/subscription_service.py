"""
VIP subscription ledger.

An account may hold any number of historical subscriptions but only one
with status ``active``.  Creating a subscription turns the account's
VIP flag on; cancelling or expiring it turns the flag off.  Payment
processing is out of scope: the amount and payment method are recorded
as given.
"""

import calendar
import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..core.config import settings
from ..core.exceptions import ConflictError
from ..core.store import DataStore, utcnow
from ..schemas.subscription import PlanRead, SubscriptionCreate, SubscriptionRead, SubscriptionUpdate
from .user_service import UserService

logger = logging.getLogger(__name__)

STATUS_ACTIVE = "active"
STATUS_CANCELLED = "cancelled"
STATUS_EXPIRED = "expired"

PLAN_MONTHS = {"monthly": 1, "yearly": 12}


def add_months(start: datetime, months: int) -> datetime:
    """Shift ``start`` by calendar months, clamping to the last day of the month.

    Jan 31 + 1 month is Feb 28 (29 in leap years); Feb 29 + 12 months
    is Feb 28.
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return start.replace(year=year, month=month, day=day)


def compute_end_date(start: datetime, plan_type: str) -> datetime:
    # Unknown plan types are billed as monthly.
    return add_months(start, PLAN_MONTHS.get(plan_type, 1))


class SubscriptionService:
    def __init__(self, store: DataStore) -> None:
        self.store = store
        self.users = UserService(store)

    def get_active(self, user_id: int) -> Optional[SubscriptionRead]:
        row = self.store.find(
            "subscriptions",
            lambda r: r["user_id"] == user_id and r["status"] == STATUS_ACTIVE,
        )
        return SubscriptionRead(**row) if row else None

    def create(self, data: SubscriptionCreate) -> SubscriptionRead:
        """Start a subscription and grant VIP.

        Raises ``ConflictError`` if the account already has an active
        subscription; nothing is changed in that case.  Lapsed
        subscriptions are expired first so they do not block renewal.
        """
        with self.store.lock:
            self.expire_due()
            if self.get_active(data.user_id) is not None:
                logger.warning("User %s already has an active subscription", data.user_id)
                raise ConflictError("User already has an active subscription")
            start = data.start_date or utcnow()
            if start.tzinfo is None:
                start = start.replace(tzinfo=timezone.utc)
            now = utcnow()
            row = self.store.insert(
                "subscriptions",
                {
                    "user_id": data.user_id,
                    "plan_type": data.plan_type,
                    "start_date": start,
                    "end_date": compute_end_date(start, data.plan_type),
                    "auto_renew": True if data.auto_renew is None else data.auto_renew,
                    "status": data.status or STATUS_ACTIVE,
                    "payment_method": data.payment_method or None,
                    "amount": data.amount,
                    "created_at": now,
                    "updated_at": now,
                },
            )
            self.users.set_vip(data.user_id, True)
        logger.info(
            "User %s subscribed to %s plan (%d) until %s",
            data.user_id,
            data.plan_type,
            data.amount,
            row["end_date"].isoformat(),
        )
        return SubscriptionRead(**row)

    def update(self, subscription_id: int, data: SubscriptionUpdate) -> Optional[SubscriptionRead]:
        changes = data.model_dump(exclude_unset=True)
        changes["updated_at"] = utcnow()
        row = self.store.update("subscriptions", subscription_id, changes)
        return SubscriptionRead(**row) if row else None

    def cancel(self, user_id: int) -> bool:
        """Cancel every active subscription of the account and revoke VIP.

        Returns ``False`` (changing nothing) when none was active.
        """
        with self.store.lock:
            active = self.store.select(
                "subscriptions",
                lambda r: r["user_id"] == user_id and r["status"] == STATUS_ACTIVE,
            )
            if not active:
                return False
            for row in active:
                self.update(row["id"], SubscriptionUpdate(status=STATUS_CANCELLED))
            self.users.set_vip(user_id, False)
        logger.info("User %s cancelled %d subscription(s)", user_id, len(active))
        return True

    def expire_due(self, now: Optional[datetime] = None) -> int:
        """Mark active subscriptions past their end date as expired.

        Affected accounts lose VIP.  Returns the number expired.
        """
        now = now or utcnow()
        with self.store.lock:
            due = self.store.select(
                "subscriptions",
                lambda r: r["status"] == STATUS_ACTIVE and r["end_date"] <= now,
            )
            for row in due:
                self.update(row["id"], SubscriptionUpdate(status=STATUS_EXPIRED))
                if self.get_active(row["user_id"]) is None:
                    self.users.set_vip(row["user_id"], False)
        if due:
            logger.info("Expired %d subscription(s)", len(due))
        return len(due)

    @staticmethod
    def plans() -> List[PlanRead]:
        return [
            PlanRead(plan_type="monthly", amount=settings.monthly_price, months=PLAN_MONTHS["monthly"]),
            PlanRead(plan_type="yearly", amount=settings.yearly_price, months=PLAN_MONTHS["yearly"]),
        ]
