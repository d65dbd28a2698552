from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.models.users import User
from infrastructure.database.repositories.user_repository import UserRepository
from services.auth.passwords import hash_password, verify_password
from services.auth.token_service import TokenService
from services.errors import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoginResult:
    success: bool
    token: Optional[str] = None
    errors: Optional[str] = None


class AccountService:
    """Signup, login and profile maintenance for shop users."""

    def __init__(
        self,
        db: AsyncSession,
        token_service: TokenService,
        *,
        cart_slots: int = 300,
        user_repository: UserRepository | None = None,
    ) -> None:
        self.db = db
        self.token_service = token_service
        self.cart_slots = cart_slots
        self.user_repository = user_repository or UserRepository(db)

    async def signup(self, *, name: Optional[str], email: Optional[str], password: Optional[str]) -> str:
        if not name or not email or not password:
            raise ValidationError("All fields are required", detail_key="errors")

        existing = await self.user_repository.get_by_email(email)
        if existing:
            raise ConflictError("Existing user found with the same email")

        user = await self.user_repository.create_user(
            name=name,
            email=email,
            password=hash_password(password),
            cart_slots=self.cart_slots,
        )
        logger.info("Registered user id=%s", user.id)
        return self.token_service.issue(user.id)

    async def login(self, *, email: Optional[str], password: Optional[str]) -> LoginResult:
        user = await self.user_repository.get_by_email(email) if email else None
        if not user:
            return LoginResult(success=False, errors="Wrong Email Id")

        if password is None or not verify_password(password, user.password):
            return LoginResult(success=False, errors="Wrong Password")

        return LoginResult(success=True, token=self.token_service.issue(user.id))

    async def get_user(self, user_id: int) -> User:
        user = await self.user_repository.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    async def update_profile(self, user_id: int, *, name: str, email: str) -> User:
        # Email uniqueness is only checked at signup; the unique index still applies here.
        user = await self.get_user(user_id)
        return await self.user_repository.update_profile(user, name=name, email=email)
