import time

from bliss_api.app.core import security
from bliss_api.app.core.security import create_access_token, decode_access_token, hash_password, verify_password


def test_password_hash_roundtrip():
    hashed = hash_password("password123")

    assert "$" in hashed
    assert hashed != hash_password("password123")
    assert verify_password("password123", hashed)
    assert not verify_password("password124", hashed)
    assert not verify_password("password123", "garbage")
    assert not verify_password("password123", None)


def test_token_carries_subject_and_id():
    payload = decode_access_token(create_access_token({"sub": "5"}))

    assert payload["sub"] == "5"
    assert payload["jti"]
    assert payload["exp"] > time.time()


def test_tampered_or_malformed_tokens_are_rejected():
    token = create_access_token({"sub": "5"})
    header, payload, signature = token.split(".")
    forged = create_access_token({"sub": "6"}).split(".")[1]

    assert decode_access_token(f"{header}.{forged}.{signature}") is None
    assert decode_access_token("not-a-token") is None
    assert decode_access_token("a.b.c") is None


def test_expired_token_is_rejected(monkeypatch):
    token = create_access_token({"sub": "5"}, expires_delta=60)
    real_time = time.time
    monkeypatch.setattr(security.time, "time", lambda: real_time() + 120)

    assert decode_access_token(token) is None
