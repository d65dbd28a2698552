from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.models.catalog import Product


class ProductRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_max_id(self) -> Optional[int]:
        result = await self.db.execute(select(func.max(Product.id)))
        return result.scalar_one_or_none()

    async def create_product(
        self,
        *,
        product_id: int,
        name: str,
        images: List[str],
        category: str,
        new_price: float,
        old_price: float,
        sizes: List[Dict[str, Any]],
    ) -> Product:
        product = Product(
            id=product_id,
            name=name,
            images=images,
            category=category,
            new_price=new_price,
            old_price=old_price,
            sizes=sizes,
        )
        self.db.add(product)
        await self.db.flush()
        return product

    async def delete_product(self, product_id: int) -> bool:
        result = await self.db.execute(delete(Product).where(Product.id == product_id))
        return result.rowcount > 0

    async def list_products(self) -> Sequence[Product]:
        """All products in catalog (id) order."""
        result = await self.db.execute(select(Product).order_by(Product.id))
        return result.scalars().all()

    async def list_products_newest_first(self) -> Sequence[Product]:
        result = await self.db.execute(select(Product).order_by(Product.date.desc(), Product.id.desc()))
        return result.scalars().all()

    async def list_slice(self, *, offset: int, limit: int) -> Sequence[Product]:
        stmt = select(Product).order_by(Product.id).offset(offset).limit(limit)
        result = await self.db.execute(stmt)
        return result.scalars().all()
