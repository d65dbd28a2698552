from __future__ import annotations

from typing import Dict

from sqlalchemy import delete, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.models.users import CartItem
from infrastructure.database.repositories._upsert import dialect_insert


class CartRepository:
    """Per-user cart counters, mutated with single atomic statements."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def increment(self, *, user_id: int, item_key: str) -> None:
        table = CartItem.__table__
        stmt = dialect_insert(self.db, table).values(
            user_id=user_id,
            item_key=item_key,
            quantity=1,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "item_key"],
            set_={"quantity": table.c.quantity + 1},
        )
        await self.db.execute(stmt)

    async def decrement(self, *, user_id: int, item_key: str) -> bool:
        stmt = (
            update(CartItem)
            .where(
                CartItem.user_id == user_id,
                CartItem.item_key == item_key,
                CartItem.quantity > 0,
            )
            .values(quantity=CartItem.quantity - 1)
        )
        result = await self.db.execute(stmt)
        return result.rowcount > 0

    async def get_cart(self, user_id: int) -> Dict[str, int]:
        stmt = (
            select(CartItem.item_key, CartItem.quantity)
            .where(CartItem.user_id == user_id)
            .order_by(CartItem.id)
        )
        result = await self.db.execute(stmt)
        return {item_key: quantity for item_key, quantity in result.all()}

    async def remove_product_everywhere(self, product_id: int) -> int:
        stmt = delete(CartItem).where(
            or_(
                CartItem.item_key == str(product_id),
                CartItem.item_key.like(f"{product_id}-%"),
            )
        )
        result = await self.db.execute(stmt)
        return result.rowcount
