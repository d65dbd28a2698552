from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.context import ContextScope
from infrastructure.database.repositories.cart_repository import CartRepository
from infrastructure.database.repositories.favorite_repository import FavoriteRepository
from infrastructure.database.repositories.user_repository import UserRepository
from services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _normalize_item_id(item_id: Any) -> Optional[str]:
    """Return the item id as it appears in cart keys, or None when it is not numeric."""
    if item_id is None or isinstance(item_id, bool):
        return None
    if isinstance(item_id, (int, float)):
        if isinstance(item_id, float):
            if math.isnan(item_id) or math.isinf(item_id):
                return None
            if item_id.is_integer():
                item_id = int(item_id)
        return str(item_id) if item_id else None
    if isinstance(item_id, str):
        candidate = item_id.strip()
        if not candidate:
            return None
        try:
            value = float(candidate)
        except ValueError:
            return None
        if math.isnan(value) or value == 0:
            return None
        return candidate
    return None


def cart_key(item_id: str, size: str) -> str:
    return f"{item_id}-{size}"


class CartService:
    """Cart counters and favorites for the authenticated user."""

    def __init__(
        self,
        db: AsyncSession,
        context: ContextScope,
        *,
        user_repository: UserRepository | None = None,
        cart_repository: CartRepository | None = None,
        favorite_repository: FavoriteRepository | None = None,
    ) -> None:
        self.db = db
        self.context = context
        self.user_repository = user_repository or UserRepository(db)
        self.cart_repository = cart_repository or CartRepository(db)
        self.favorite_repository = favorite_repository or FavoriteRepository(db)

    async def add_to_cart(self, item_id: Any, size: Any) -> None:
        normalized = _normalize_item_id(item_id)
        if normalized is None or not size:
            raise ValidationError("Invalid item ID or size")

        await self._ensure_user()
        await self.cart_repository.increment(
            user_id=self.context.user_id,
            item_key=cart_key(normalized, str(size)),
        )

    async def remove_from_cart(self, item_id: Any, size: Any) -> None:
        if item_id is None or item_id == "" or not size:
            raise ValidationError("Invalid itemId or size")

        normalized = _normalize_item_id(item_id) or str(item_id)
        await self._ensure_user()
        await self.cart_repository.decrement(
            user_id=self.context.user_id,
            item_key=cart_key(normalized, str(size)),
        )

    async def get_cart(self) -> Dict[str, int]:
        await self._ensure_user()
        return await self.cart_repository.get_cart(self.context.user_id)

    async def add_favorite(self, item_id: Any) -> Tuple[bool, str]:
        product_id = self._favorite_id(item_id)
        await self._ensure_user()
        added = await self.favorite_repository.add(user_id=self.context.user_id, product_id=product_id)
        if added:
            return True, "Added to favorites."
        return False, "Already in favorites."

    async def remove_favorite(self, item_id: Any) -> Tuple[bool, str]:
        await self._ensure_user()
        try:
            product_id = self._favorite_id(item_id)
        except ValidationError:
            # A missing or non-integer id matches no stored favorite
            product_id = None
        if product_id is not None:
            await self.favorite_repository.remove(user_id=self.context.user_id, product_id=product_id)
        return True, "Removed from favorites."

    async def get_favorites(self) -> List[int]:
        await self._ensure_user()
        return await self.favorite_repository.list_product_ids(self.context.user_id)

    async def _ensure_user(self) -> None:
        user = await self.user_repository.get_by_id(self.context.user_id)
        if not user:
            raise NotFoundError("User not found")

    @staticmethod
    def _favorite_id(item_id: Any) -> int:
        if isinstance(item_id, bool):
            raise ValidationError("Invalid itemId")
        normalized = _normalize_item_id(item_id)
        try:
            return int(normalized) if normalized is not None else int(item_id)
        except (TypeError, ValueError) as exc:
            raise ValidationError("Invalid itemId") from exc
