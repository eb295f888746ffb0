"""
Password hashing using argon2id.

Each hash embeds its own random salt and cost parameters, so verification
needs nothing but the stored hash string.
"""

from __future__ import annotations

import argon2

_hasher = argon2.PasswordHasher(
    time_cost=2,
    memory_cost=65536,  # 64 MB
    parallelism=1,
    hash_len=32,
    salt_len=16,
    type=argon2.Type.ID,  # argon2id
)


def hash_password(password: str) -> str:
    """Hash a password using argon2id. Returns the full hash string."""
    return _hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify a password against its argon2id hash.

    Returns True if the password matches. Never raises on mismatch.
    """
    try:
        return _hasher.verify(password_hash, password)
    except argon2.exceptions.VerifyMismatchError:
        return False
    except argon2.exceptions.InvalidHashError:
        return False


def check_needs_rehash(password_hash: str) -> bool:
    """Check if the hash needs to be updated (parameters changed)."""
    return _hasher.check_needs_rehash(password_hash)
