from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from rapidfuzz import fuzz, process, utils
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database.models.catalog import Product
from infrastructure.database.repositories.product_repository import ProductRepository
from services.errors import ValidationError

logger = logging.getLogger(__name__)


class ProductSearchService:
    """Name search over the catalog: substring match first, fuzzy match as a fallback.

    Both passes load the whole catalog into memory, which is only reasonable
    for small catalogs.
    """

    _DEFAULT_FUZZY_CUTOFF = 60.0

    def __init__(
        self,
        db: AsyncSession,
        *,
        fuzzy_cutoff: float = _DEFAULT_FUZZY_CUTOFF,
        product_repository: ProductRepository | None = None,
    ) -> None:
        self.db = db
        self.fuzzy_cutoff = fuzzy_cutoff
        self.product_repository = product_repository or ProductRepository(db)

    async def search(self, query: Optional[str]) -> List[Product]:
        if not query:
            raise ValidationError("Query is required")

        # Whitespace is part of the query; " shirt" does not match "Tshirt"
        needle = query.lower()
        products = list(await self.product_repository.list_products())

        matches = [product for product in products if needle in (product.name or "").lower()]
        if matches:
            return matches

        ranked = self.fuzzy_rank(needle, products, cutoff=self.fuzzy_cutoff)
        logger.debug("No substring match for '%s'; fuzzy fallback found %s", needle, len(ranked))
        return ranked

    @staticmethod
    def fuzzy_rank(needle: str, products: Sequence[Product], *, cutoff: float) -> List[Product]:
        """Products whose name scores >= cutoff, best score first, ties in catalog order."""
        names = list(dict.fromkeys(product.name or "" for product in products))
        scored = process.extract(
            needle,
            names,
            scorer=fuzz.WRatio,
            processor=utils.default_process,
            score_cutoff=cutoff,
            limit=None,
        )
        scores: Dict[str, float] = {name: score for name, score, _index in scored}

        kept = [product for product in products if (product.name or "") in scores]
        # sorted() is stable, so equal scores keep catalog order
        return sorted(kept, key=lambda product: -scores[product.name or ""])
