"""Credential store: user creation, password hashing and verification."""

from __future__ import annotations

import asyncio

import structlog
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from moodmenu.core.auth import Role
from moodmenu.core.config import get_settings
from moodmenu.infrastructure.db.models import UserModel

logger = structlog.get_logger()

# bcrypt with a fixed, configured work factor
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().password_hash_rounds,
)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class AuthError(Exception):
    """Base exception for authentication errors."""

    pass


class UserExistsError(AuthError):
    """Raised when attempting to create a user with an existing email."""

    pass


class InvalidCredentialsError(AuthError):
    """Raised when login credentials are invalid."""

    pass


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


class AuthService:
    """Service for credential operations.

    bcrypt runs in a worker thread so a slow hash never blocks the event loop.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_user(
        self,
        *,
        email: str,
        password: str,
        role: Role = Role.USER,
    ) -> UserModel:
        """
        Create a new user.

        Raises:
            UserExistsError: if the email is already taken, including when a
                concurrent request commits the same email first.
        """
        await logger.ainfo("user_create_attempt", email=email, role=role.value)

        existing = await self.session.scalar(select(UserModel.id).where(UserModel.email == email))
        if existing is not None:
            await logger.awarning("user_create_duplicate_email", email=email)
            raise UserExistsError(f"User with email {email} already exists")

        hashed_password = await asyncio.to_thread(hash_password, password)

        user = UserModel(
            email=email,
            hashed_password=hashed_password,
            role=role,
        )

        try:
            self.session.add(user)
            await self.session.commit()
            await self.session.refresh(user)
        except IntegrityError as exc:
            # Lost the race against a concurrent insert of the same email
            await self.session.rollback()
            await logger.awarning("user_create_duplicate_email", email=email)
            raise UserExistsError(f"User with email {email} already exists") from exc

        await logger.ainfo("user_create_success", user_id=user.id, email=email, role=role.value)
        return user

    async def verify_credentials(self, *, email: str, password: str) -> UserModel:
        """
        Authenticate a user by email and password.

        Unknown emails and wrong passwords raise the same error.
        """
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self.session.execute(stmt)
        user = result.scalar_one_or_none()

        if user is None:
            # Spend the same hashing time as a real check
            await asyncio.to_thread(pwd_context.dummy_verify)
            await logger.awarning("login_user_not_found", email=email)
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        if not await asyncio.to_thread(verify_password, password, user.hashed_password):
            await logger.awarning("login_invalid_password", email=email)
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        return user

    async def list_users(self) -> list[UserModel]:
        """Return all users, newest first."""
        stmt = select(UserModel).order_by(UserModel.created_at.desc(), UserModel.email)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
