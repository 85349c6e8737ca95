"""
Candidate discovery for swiping.

Candidates are every other account that passes all of the requester's
filters, returned in account creation order.  There is no ranking.

Filters:

* the requester's preferred gender, when one is saved;
* the requester's ``looking_for`` gender, unless it is ``"all"``;
* the saved minimum and maximum age;
* at least one shared interest with the saved interest list, applied
  only when the requester is VIP;
* accounts the requester already swiped on are excluded.  An account
  that swiped on the requester first stays visible so the requester
  can answer it.

Preferences that were never saved impose no age or gender limits; the
defaults shown to clients are not applied here.
"""

import logging
from typing import List

from ..core.exceptions import NotFoundError
from ..core.store import DataStore
from ..schemas.user import UserRead
from .match_service import MatchService
from .preference_service import PreferenceService
from .subscription_service import SubscriptionService
from .user_service import UserService

logger = logging.getLogger(__name__)

LOOKING_FOR_ALL = "all"


class DiscoveryService:
    def __init__(self, store: DataStore) -> None:
        self.users = UserService(store)
        self.preferences = PreferenceService(store)
        self.matches = MatchService(store)
        self.subscriptions = SubscriptionService(store)

    def get_potential_matches(self, user_id: int) -> List[UserRead]:
        """Raises ``NotFoundError`` if the requester does not exist."""
        # A lapsed plan must not keep the VIP interest filter.
        self.subscriptions.expire_due()
        requester = self.users.get_user(user_id)
        if requester is None:
            raise NotFoundError(f"User {user_id} not found")

        prefs = self.preferences.get(user_id)
        swiped = self.matches.swiped_user_ids(user_id)
        interest_filter = set()
        if requester.is_vip and prefs is not None and prefs.interests:
            interest_filter = set(prefs.interests)

        candidates = []
        for candidate in self.users.list_users():
            if candidate.id == user_id or candidate.id in swiped:
                continue
            if prefs is not None and prefs.gender and candidate.gender != prefs.gender:
                continue
            if requester.looking_for != LOOKING_FOR_ALL and candidate.gender != requester.looking_for:
                continue
            if prefs is not None and prefs.min_age and candidate.age < prefs.min_age:
                continue
            if prefs is not None and prefs.max_age and candidate.age > prefs.max_age:
                continue
            if interest_filter and not interest_filter.intersection(candidate.interests):
                continue
            candidates.append(candidate)

        logger.debug("Discovery for user %s returned %d candidates", user_id, len(candidates))
        return candidates
