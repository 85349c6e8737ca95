"""
Service layer.

Each service wraps one part of the data store: accounts, the swipe and
match ledger, messages, preferences, subscriptions and discovery.
Services are constructed with the ``DataStore`` they operate on, so the
HTTP handlers never touch store tables directly.
"""
