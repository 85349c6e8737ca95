"""
Version 1 of the API.

This subpackage bundles the endpoints used by the web client: auth,
profiles, discovery and swiping, preferences, messaging and VIP
subscriptions.
"""
