from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductSize(BaseModel):
    name: str
    quantity: int


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    images: List[str] = Field(default_factory=list)
    category: str
    new_price: float
    old_price: float
    sizes: List[ProductSize] = Field(default_factory=list)
    date: datetime
    available: bool = True


class AddProductResponse(BaseModel):
    success: int = 1
    name: str
    first_image: Optional[str] = None


class SearchProductsResponse(BaseModel):
    success: bool = True
    products: List[ProductResponse] = Field(default_factory=list)


class UploadResponse(BaseModel):
    success: int = 1
    image_urls: List[str] = Field(default_factory=list)
