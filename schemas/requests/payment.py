from pydantic import BaseModel, Field


class PaymentIntentRequest(BaseModel):
    amount: int = Field(..., gt=0, description="Amount in the currency's smallest unit")
    currency: str = Field(..., min_length=3, max_length=3)
