"""Auth Service — credential registration, verification and token issuance.

Invariants:
    - Raw passwords are hashed before touching the store and never logged
    - Email uniqueness is decided by the users.email unique constraint, not a pre-check
    - A duplicate registration leaves the existing row untouched (rollback, no upsert)
    - Login never issues a token unless the bcrypt comparison matched

Design Decisions:
    - bcrypt work runs in a worker thread (asyncio.to_thread): keeps the event loop free
    - Unknown email (404) and wrong password (401) are distinct outcomes, matching the
      public login contract
"""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pokecatch.core.domain_types import UserId
from pokecatch.core.errors import (
    DuplicateCredentialError, InvalidCredentialError,
    StoreUnavailableError, UserNotFoundError,
)
from pokecatch.core.passwords import PasswordHasher
from pokecatch.core.tokens import TokenService
from pokecatch.models.user import User

logger = logging.getLogger(__name__)


class AuthService:
    """Credential store operations plus login token issuance."""

    def __init__(
        self, db: AsyncSession, hasher: PasswordHasher, tokens: TokenService,
    ):
        self.db = db
        self.hasher = hasher
        self.tokens = tokens

    async def register(self, email: str, raw_password: str) -> UserId:
        """Create a user. Raises DuplicateCredentialError if email is taken."""
        hashed = await asyncio.to_thread(self.hasher.hash, raw_password)
        user = User(email=email, hashed_password=hashed)
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info("Registration rejected: email already exists")
            raise DuplicateCredentialError(email)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Registration failed: {e}", exc_info=True)
            raise StoreUnavailableError("Could not persist user", "insert")

        logger.info("User registered", extra={"user_id": str(user.id)})
        return UserId(user.id)

    async def verify_credentials(self, email: str, raw_password: str) -> UserId:
        """Return the user id for a matching email/password pair."""
        result = await self.db.execute(
            select(User.id, User.hashed_password).where(User.email == email),
        )
        row = result.one_or_none()
        if row is None:
            raise UserNotFoundError()

        matches = await asyncio.to_thread(
            self.hasher.verify, raw_password, row.hashed_password,
        )
        if not matches:
            logger.info(
                "Login rejected: invalid credentials",
                extra={"user_id": str(row.id)},
            )
            raise InvalidCredentialError()
        return UserId(row.id)

    async def login(self, email: str, raw_password: str) -> str:
        """Verify credentials and issue a session token."""
        user_id = await self.verify_credentials(email, raw_password)
        token = self.tokens.issue(user_id)
        logger.info("Login successful", extra={"user_id": str(user_id)})
        return token
