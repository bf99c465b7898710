"""
Password hashing with bcrypt.

The work factor comes from ApplicationConfig.BCRYPT_ROUNDS (12 by default,
roughly a quarter second per hash).
"""

import bcrypt

from config import ApplicationConfig


def hash_password(password: str) -> str:
    """Salted bcrypt hash of password, as a 60-char string"""
    password_hash = bcrypt.hashpw(
        password.encode("utf-8"), bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    )
    return password_hash.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check password against a stored bcrypt hash.

    A malformed or empty hash is a failed check, not an error.
    """
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def burn_password_check() -> None:
    """Run one hash so unknown-email logins cost about as much as known ones"""
    bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS))
