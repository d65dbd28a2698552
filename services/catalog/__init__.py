from .product_service import ProductCatalogService

__all__ = ["ProductCatalogService"]
