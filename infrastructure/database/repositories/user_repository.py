from __future__ import annotations

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.models.users import CartItem, User


class UserRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, user_id: int) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(User.email == email)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def create_user(
        self,
        *,
        name: str,
        email: str,
        password: str,
        cart_slots: int = 0,
    ) -> User:
        user = User(name=name, email=email, password=password)
        self.db.add(user)
        await self.db.flush()

        if cart_slots > 0:
            await self.db.execute(
                insert(CartItem),
                [
                    {"user_id": user.id, "item_key": str(slot), "quantity": 0}
                    for slot in range(cart_slots)
                ],
            )
        return user

    async def update_profile(self, user: User, *, name: str, email: str) -> User:
        user.name = name
        user.email = email
        await self.db.flush()
        return user
