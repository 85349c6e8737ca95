"""
Security helpers for password hashing and token authentication.

Access tokens are JSON Web Tokens signed with HMAC‑SHA256 and encoded
with base64url.  Each token carries the account id in ``sub``, an
expiration timestamp in ``exp`` and a random ``jti`` so that an
individual token can be revoked on logout.  Passwords are hashed with
PBKDF2‑HMAC‑SHA256 and stored as ``salthex$hashhex``.
"""

import base64
import hashlib
import hmac
import json
import logging
import os
import secrets
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings
from .store import DataStore, get_store

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Create a signed token with the given claims.

    Parameters
    ----------
    data : dict
        Claims to embed, typically ``{"sub": "<account id>"}``.
    expires_delta : Optional[int]
        Lifetime in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.

    Returns
    -------
    str
        ``header.payload.signature``, each part base64url encoded.
    """
    to_encode = data.copy()
    exp_seconds = expires_delta or settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    to_encode.setdefault("jti", secrets.token_hex(16))
    header = {"alg": settings.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify a token's signature and expiry.

    Returns the payload dictionary, or ``None`` when the token is
    malformed, tampered with or expired.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    try:
        actual_sig = _b64_url_decode(signature_b64)
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except (ValueError, UnicodeDecodeError):
        return None
    # Constant‑time comparison to prevent timing attacks
    if not hmac.compare_digest(_sign(signing_input, settings.secret_key), actual_sig):
        return None
    if not isinstance(data, dict):
        return None
    exp = data.get("exp")
    if not isinstance(exp, int) or exp < int(time.time()):
        return None
    return data


security = HTTPBearer(auto_error=False)


def _resolve_user(token: str, store: DataStore) -> Optional[Dict[str, Any]]:
    payload = decode_access_token(token)
    if not payload or store.is_token_revoked(payload.get("jti")):
        return None
    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        return None
    account = store.get("users", user_id)
    if account is None:
        return None
    payload["user_id"] = account["id"]
    payload["username"] = account["username"]
    return payload


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: DataStore = Depends(get_store),
) -> Dict[str, Any]:
    """Dependency that resolves the bearer token to an account.

    Raises HTTP 401 when the header is missing, the token is invalid,
    expired or revoked, or the account it names no longer exists.  The
    returned payload carries ``user_id`` and ``username``.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = _resolve_user(credentials.credentials, store)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return payload


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: DataStore = Depends(get_store),
) -> Optional[Dict[str, Any]]:
    """Like ``get_current_user`` but yields ``None`` instead of raising."""
    if credentials is None:
        return None
    return _resolve_user(credentials.credentials, store)


def require_vip(
    current_user: Dict[str, Any] = Depends(get_current_user),
    store: DataStore = Depends(get_store),
) -> Dict[str, Any]:
    """Dependency restricting an endpoint to accounts with the VIP flag.

    Lapsed subscriptions are expired before the flag is read.
    """
    # Imported here because the services import this module.
    from ..services.subscription_service import SubscriptionService

    SubscriptionService(store).expire_due()
    account = store.get("users", current_user["user_id"])
    if not account or not account.get("is_vip"):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="VIP subscription required",
        )
    return current_user


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password; the result
    is ``salthex$hashhex``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Check a plain password against a stored ``salthex$hashhex`` string."""
    if not hashed_password or "$" not in hashed_password:
        return False
    salt_hex, hash_hex = hashed_password.split("$", 1)
    try:
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        logger.warning("Stored password hash is malformed")
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
