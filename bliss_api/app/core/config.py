"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the API
starts without any configuration; override them in production (at the
very least ``SECRET_KEY``).
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Bliss Dating API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    # One week, the lifetime of a login on the web client.
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 7)))
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # Populate the store with demo profiles, matches and messages on
    # startup.  Every demo account shares ``demo_password``.
    seed_demo_data: bool = os.getenv("SEED_DEMO_DATA", "false").lower() in {"1", "true", "yes"}
    demo_password: str = os.getenv("DEMO_PASSWORD", "password123")

    # Values reported to clients that have not saved preferences yet and
    # used when a saved preference omits a numeric field.
    default_min_age: int = int(os.getenv("DEFAULT_MIN_AGE", "18"))
    default_max_age: int = int(os.getenv("DEFAULT_MAX_AGE", "35"))
    default_distance: int = int(os.getenv("DEFAULT_DISTANCE", "50"))

    # VIP plan prices in minor currency units (cents).
    monthly_price: int = int(os.getenv("VIP_MONTHLY_PRICE", "990"))
    yearly_price: int = int(os.getenv("VIP_YEARLY_PRICE", "7080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
