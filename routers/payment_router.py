from fastapi import APIRouter, Depends

from routers.dependencies import get_payment_gateway
from schemas.requests import PaymentIntentRequest
from services.payment import PaymentGateway

router = APIRouter()


@router.post("/create-payment-intent")
async def create_payment_intent(
    payload: PaymentIntentRequest,
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    client_secret = await gateway.create_intent(amount=payload.amount, currency=payload.currency)
    return {"clientSecret": client_secret}
