from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import Optional

import stripe

from services.errors import PaymentError

logger = logging.getLogger(__name__)


class PaymentGateway:
    """Creates card payment intents with Stripe and hands back the client secret."""

    def __init__(self, api_key: Optional[str], *, stripe_module=stripe) -> None:
        self._api_key = api_key
        self._stripe = stripe_module

    async def create_intent(self, *, amount: int, currency: str) -> str:
        if not self._api_key:
            raise PaymentError("STRIPE_SECRET_KEY is not configured")

        loop = asyncio.get_event_loop()
        try:
            intent = await loop.run_in_executor(
                None,
                partial(
                    self._stripe.PaymentIntent.create,
                    amount=amount,
                    currency=currency,
                    payment_method_types=["card"],
                    api_key=self._api_key,
                ),
            )
        except stripe.StripeError as exc:
            logger.error("Stripe rejected payment intent amount=%s currency=%s: %s", amount, currency, exc)
            raise PaymentError(getattr(exc, "user_message", None) or str(exc)) from exc

        return intent.client_secret
