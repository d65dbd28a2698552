from .product_search import ProductSearchService

__all__ = ["ProductSearchService"]
