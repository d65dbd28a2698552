from typing import List

from pydantic import BaseModel, Field

from schemas.product import ProductSize


class AddProductRequest(BaseModel):
    name: str = Field(..., min_length=1)
    images: List[str] = Field(default_factory=list)
    category: str = Field(..., min_length=1)
    new_price: float
    old_price: float
    sizes: List[ProductSize] = Field(default_factory=list)


class RemoveProductRequest(BaseModel):
    id: int
