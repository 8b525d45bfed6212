"""Password Hasher — bcrypt hashing and verification at a fixed work factor.

Invariants:
    - Raw passwords are never stored, returned or logged
    - Work factor (rounds) is fixed per process, never varied per call
    - Passwords longer than 72 UTF-8 bytes are rejected (bcrypt would silently truncate)
    - Verification uses bcrypt.checkpw (constant-time digest comparison)

Design Decisions:
    - Pure sync functions: CPU-bound work, services push it to a thread
    - Stored hash is the bcrypt modular-crypt string ($2b$<cost>$<salt><digest>),
      so algorithm, cost and salt travel with the digest
"""

import bcrypt

from pokecatch.core.errors import InputValidationError

BCRYPT_MAX_PASSWORD_BYTES = 72
MIN_ROUNDS = 4
MAX_ROUNDS = 31


class PasswordHasher:
    """One-way salted hashing with a configured bcrypt cost."""

    def __init__(self, rounds: int = 12):
        if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
            raise ValueError(
                f"bcrypt rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}",
            )
        self.rounds = rounds

    def hash(self, raw_password: str) -> str:
        """Hash with a fresh salt. Returns the modular-crypt string."""
        encoded = _encode(raw_password)
        return bcrypt.hashpw(
            encoded, bcrypt.gensalt(rounds=self.rounds),
        ).decode("utf-8")

    def verify(self, raw_password: str, hashed_password: str) -> bool:
        """True if raw_password matches hashed_password."""
        try:
            encoded = _encode(raw_password)
        except InputValidationError:
            return False
        try:
            return bcrypt.checkpw(encoded, hashed_password.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False


def _encode(raw_password: str) -> bytes:
    encoded = raw_password.encode("utf-8")
    if not encoded:
        raise InputValidationError("Password is required", "password")
    if len(encoded) > BCRYPT_MAX_PASSWORD_BYTES:
        raise InputValidationError(
            f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes",
            "password",
        )
    return encoded
