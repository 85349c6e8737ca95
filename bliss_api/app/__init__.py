"""
Application package initializer.

The project is organised by concern: ``core`` holds configuration,
logging, security and the in‑memory data store, ``services`` holds the
business logic for each domain (accounts, swipes and matches, messages,
preferences, subscriptions, discovery), ``schemas`` holds the pydantic
payload models and ``api/v1`` exposes everything over HTTP.
"""

from .main import app  # noqa: F401
