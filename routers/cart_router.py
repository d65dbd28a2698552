from typing import Dict, List

from fastapi import APIRouter, Depends

from infrastructure.context import RequestContextBundle
from routers.dependencies import get_user_context_bundle
from schemas.requests import CartItemRequest, FavoriteRequest
from services.cart import CartService

router = APIRouter()


def _cart_service(context_bundle: RequestContextBundle) -> CartService:
    return CartService(context_bundle.db, context_bundle.scope)


@router.post("/addtocart")
async def add_to_cart(
    payload: CartItemRequest,
    context_bundle: RequestContextBundle = Depends(get_user_context_bundle),
):
    await _cart_service(context_bundle).add_to_cart(payload.item_id, payload.size)
    return {"success": True}


@router.post("/removetocart")
async def remove_from_cart(
    payload: CartItemRequest,
    context_bundle: RequestContextBundle = Depends(get_user_context_bundle),
):
    await _cart_service(context_bundle).remove_from_cart(payload.item_id, payload.size)
    return {"success": True}


@router.post("/getcart", response_model=Dict[str, int])
async def get_cart(context_bundle: RequestContextBundle = Depends(get_user_context_bundle)):
    return await _cart_service(context_bundle).get_cart()


@router.post("/addfavorite")
async def add_favorite(
    payload: FavoriteRequest,
    context_bundle: RequestContextBundle = Depends(get_user_context_bundle),
):
    success, message = await _cart_service(context_bundle).add_favorite(payload.item_id)
    return {"success": success, "message": message}


@router.post("/removefavorite")
async def remove_favorite(
    payload: FavoriteRequest,
    context_bundle: RequestContextBundle = Depends(get_user_context_bundle),
):
    success, message = await _cart_service(context_bundle).remove_favorite(payload.item_id)
    return {"success": success, "message": message}


@router.get("/getfavorites", response_model=List[int])
async def get_favorites(context_bundle: RequestContextBundle = Depends(get_user_context_bundle)):
    return await _cart_service(context_bundle).get_favorites()
