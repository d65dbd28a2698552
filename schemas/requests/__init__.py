from .auth import LoginRequest, SignupRequest, UpdateProfileRequest
from .cart import CartItemRequest, FavoriteRequest
from .payment import PaymentIntentRequest
from .product import AddProductRequest, RemoveProductRequest

__all__ = [
    "AddProductRequest",
    "CartItemRequest",
    "FavoriteRequest",
    "LoginRequest",
    "PaymentIntentRequest",
    "RemoveProductRequest",
    "SignupRequest",
    "UpdateProfileRequest",
]
