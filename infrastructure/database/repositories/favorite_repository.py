from __future__ import annotations

from typing import List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.models.users import Favorite
from infrastructure.database.repositories._upsert import dialect_insert


class FavoriteRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def add(self, *, user_id: int, product_id: int) -> bool:
        """Insert the favorite; False when the user already has it."""
        stmt = dialect_insert(self.db, Favorite.__table__).values(user_id=user_id, product_id=product_id)
        stmt = stmt.on_conflict_do_nothing(index_elements=["user_id", "product_id"])
        result = await self.db.execute(stmt)
        return result.rowcount > 0

    async def remove(self, *, user_id: int, product_id: int) -> None:
        stmt = delete(Favorite).where(
            Favorite.user_id == user_id,
            Favorite.product_id == product_id,
        )
        await self.db.execute(stmt)

    async def list_product_ids(self, user_id: int) -> List[int]:
        stmt = (
            select(Favorite.product_id)
            .where(Favorite.user_id == user_id)
            .order_by(Favorite.id)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def remove_product_everywhere(self, product_id: int) -> int:
        stmt = delete(Favorite).where(Favorite.product_id == product_id)
        result = await self.db.execute(stmt)
        return result.rowcount
