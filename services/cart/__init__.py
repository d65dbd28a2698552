from .cart_service import CartService, cart_key

__all__ = ["CartService", "cart_key"]
