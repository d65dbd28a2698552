from .product import (
    AddProductResponse,
    ProductResponse,
    ProductSize,
    SearchProductsResponse,
    UploadResponse,
)
from .user import (
    AuthTokenResponse,
    GetUserResponse,
    UpdateProfileResponse,
    UserProfile,
    UserSummary,
)

__all__ = [
    "AddProductResponse",
    "AuthTokenResponse",
    "GetUserResponse",
    "ProductResponse",
    "ProductSize",
    "SearchProductsResponse",
    "UpdateProfileResponse",
    "UploadResponse",
    "UserProfile",
    "UserSummary",
]
