"""Password hashing utilities using Argon2."""

import argon2

_hasher = argon2.PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a password using Argon2."""
    return _hasher.hash(password)


def verify_password(password: str, pwhash: str) -> bool:
    """Verify a password against a stored hash.

    Returns True if the password matches, False otherwise (including when the
    stored value is not a valid Argon2 hash).
    """
    try:
        return _hasher.verify(pwhash, password)
    except argon2.exceptions.VerifyMismatchError:
        return False
    except argon2.exceptions.InvalidHashError:
        return False


def needs_rehash(pwhash: str) -> bool:
    """True when the hash was made with weaker parameters than the current hasher."""
    return _hasher.check_needs_rehash(pwhash)
