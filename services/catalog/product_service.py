from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.models.catalog import Product
from infrastructure.database.repositories.cart_repository import CartRepository
from infrastructure.database.repositories.favorite_repository import FavoriteRepository
from infrastructure.database.repositories.product_repository import ProductRepository
from services.errors import ServerError

logger = logging.getLogger(__name__)


class ProductCatalogService:
    """Product creation, removal and the storefront listings."""

    _MAX_ID_ATTEMPTS = 5
    NEW_COLLECTION_OFFSET = 1
    NEW_COLLECTION_SIZE = 8
    POPULAR_SIZE = 4

    def __init__(
        self,
        db: AsyncSession,
        *,
        product_repository: ProductRepository | None = None,
        cart_repository: CartRepository | None = None,
        favorite_repository: FavoriteRepository | None = None,
    ) -> None:
        self.db = db
        self.product_repository = product_repository or ProductRepository(db)
        self.cart_repository = cart_repository or CartRepository(db)
        self.favorite_repository = favorite_repository or FavoriteRepository(db)

    async def add_product(
        self,
        *,
        name: str,
        images: Optional[List[str]],
        category: str,
        new_price: float,
        old_price: float,
        sizes: Optional[List[Dict[str, Any]]],
    ) -> Product:
        """Create a product with id = current max id + 1 (1 for an empty catalog).

        The primary key rejects a concurrently allocated duplicate, in which case
        the id is recomputed and the insert retried.
        """
        for attempt in range(1, self._MAX_ID_ATTEMPTS + 1):
            max_id = await self.product_repository.get_max_id()
            next_id = (max_id or 0) + 1
            try:
                product = await self.product_repository.create_product(
                    product_id=next_id,
                    name=name,
                    images=list(images or []),
                    category=category,
                    new_price=new_price,
                    old_price=old_price,
                    sizes=list(sizes or []),
                )
            except IntegrityError:
                logger.warning("Product id %s was taken concurrently (attempt %s)", next_id, attempt)
                await self.db.rollback()
                continue

            logger.info("Added product id=%s name=%s", product.id, product.name)
            return product

        raise ServerError("Could not allocate a product id")

    async def remove_product(self, product_id: int) -> None:
        deleted = await self.product_repository.delete_product(product_id)
        if deleted:
            logger.info("Removed product %s from product catalog", product_id)
        else:
            logger.info("Product %s was not in the catalog; cleaning user data anyway", product_id)

        cart_rows = await self.cart_repository.remove_product_everywhere(product_id)
        favorite_rows = await self.favorite_repository.remove_product_everywhere(product_id)
        logger.info(
            "Product %s removed from all users' cart (%s rows) and favorites (%s rows)",
            product_id,
            cart_rows,
            favorite_rows,
        )

    async def list_all(self) -> Sequence[Product]:
        return await self.product_repository.list_products_newest_first()

    async def new_collections(self) -> Sequence[Product]:
        return await self.product_repository.list_slice(
            offset=self.NEW_COLLECTION_OFFSET,
            limit=self.NEW_COLLECTION_SIZE,
        )

    async def popular_in_women(self) -> Sequence[Product]:
        return await self.product_repository.list_slice(offset=0, limit=self.POPULAR_SIZE)
