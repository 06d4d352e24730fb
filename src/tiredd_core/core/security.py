"""Credential and session-token primitives."""
from __future__ import annotations

import secrets

from nacl.exceptions import InvalidkeyError
from nacl.pwhash import argon2id

from tiredd_core.core.settings import settings
from tiredd_core.utils.hash import blake3_digest

SESSION_TOKEN_BYTES = 32


def hash_password(password: str) -> bytes:
    """Return an argon2id hash string (as bytes) for the password."""
    return argon2id.str(
        password.encode("utf-8"),
        opslimit=settings.password_hash_opslimit,
        memlimit=settings.password_hash_memlimit,
    )


def verify_password(password_hash: bytes, password: str) -> bool:
    """Return True if the password matches the stored argon2id hash."""
    try:
        return argon2id.verify(password_hash, password.encode("utf-8"))
    except InvalidkeyError:
        return False


def generate_session_token() -> str:
    """Return a new opaque, URL-safe session token."""
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)


def hash_session_token(token: str) -> bytes:
    """Return the digest under which a session token is stored."""
    return blake3_digest(token.encode("utf-8"))
