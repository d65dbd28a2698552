from .cart_repository import CartRepository
from .favorite_repository import FavoriteRepository
from .product_repository import ProductRepository
from .user_repository import UserRepository

__all__ = [
    "CartRepository",
    "FavoriteRepository",
    "ProductRepository",
    "UserRepository",
]
