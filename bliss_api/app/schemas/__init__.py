"""
Pydantic schema definitions for API payloads.

Each domain (users, matches, messages, preferences, subscriptions)
defines its own request and response models.  All of them derive from
``CamelModel`` so they are populated from snake_case rows and
serialized with the camelCase field names the web client uses.
"""
