from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class CartItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    item_id: Optional[Union[int, float, str]] = Field(default=None, alias="itemId")
    size: Optional[Union[str, int]] = None


class FavoriteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    item_id: Optional[Union[int, float, str]] = Field(default=None, alias="itemId")
