import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import Settings
from routers.dependencies import get_db, get_settings
from schemas import AddProductResponse, ProductResponse, SearchProductsResponse
from schemas.requests import AddProductRequest, RemoveProductRequest
from services.catalog import ProductCatalogService
from services.search import ProductSearchService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/addproduct", response_model=AddProductResponse)
async def add_product(payload: AddProductRequest, db: AsyncSession = Depends(get_db)):
    service = ProductCatalogService(db)
    product = await service.add_product(
        name=payload.name,
        images=payload.images,
        category=payload.category,
        new_price=payload.new_price,
        old_price=payload.old_price,
        sizes=[size.model_dump() for size in payload.sizes],
    )
    return AddProductResponse(
        name=product.name,
        first_image=product.images[0] if product.images else None,
    )


@router.post("/removeproduct")
async def remove_product(payload: RemoveProductRequest, db: AsyncSession = Depends(get_db)):
    service = ProductCatalogService(db)
    await service.remove_product(payload.id)
    return {
        "success": 1,
        "message": f"Product {payload.id} removed from Product collection, cart, and favorites",
    }


@router.get("/allproducts", response_model=List[ProductResponse])
async def all_products(db: AsyncSession = Depends(get_db)):
    """
    All products, newest first.
    """
    products = await ProductCatalogService(db).list_all()
    logger.info("All products fetched in descending order of date")
    return products


@router.get("/newcollections", response_model=List[ProductResponse])
async def new_collections(db: AsyncSession = Depends(get_db)):
    return await ProductCatalogService(db).new_collections()


@router.get("/popularinwomen", response_model=List[ProductResponse])
async def popular_in_women(db: AsyncSession = Depends(get_db)):
    return await ProductCatalogService(db).popular_in_women()


@router.get("/searchproducts", response_model=SearchProductsResponse)
async def search_products(
    query: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Case-insensitive name search, falling back to fuzzy matching when nothing matches exactly.
    """
    service = ProductSearchService(db, fuzzy_cutoff=settings.search_fuzzy_cutoff)
    products = await service.search(query)
    return SearchProductsResponse(
        products=[ProductResponse.model_validate(product) for product in products],
    )
