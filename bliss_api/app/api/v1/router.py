"""
Top‑level router for version 1 of the API.

Aggregates the domain routers.  Order matters for ``/users``: the
profile router ends with the catch‑all ``/users/{user_id}`` route, so
it is included after the routers that define fixed ``/users/...``
paths.
"""

from fastapi import APIRouter

from .endpoints import auth, matches, messages, preferences, subscriptions, users

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(matches.router, prefix="/users", tags=["matches"])
router.include_router(preferences.router, prefix="/users", tags=["preferences"])
router.include_router(users.router, prefix="/users", tags=["users"])
# Defines ``/messages`` and ``/conversations`` itself.
router.include_router(messages.router, tags=["messages"])
router.include_router(subscriptions.router, prefix="/subscriptions", tags=["subscriptions"])
