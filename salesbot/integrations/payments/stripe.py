"""
Stripe Checkout provider implementation.
"""

import asyncio
import logging

import stripe

from salesbot.config import settings
from salesbot.core.checkout import CheckoutLineItem, CheckoutSession
from salesbot.core.errors import PaymentError
from salesbot.integrations.payments.base import BasePaymentGateway

logger = logging.getLogger(__name__)


class StripeCheckoutGateway(BasePaymentGateway):
    """Creates Stripe Checkout sessions in payment mode."""

    def __init__(self, api_key: str | None = None):
        self.api_key = api_key or settings.stripe_secret_key

        if not self.api_key:
            raise ValueError(
                "Stripe secret key not provided. "
                "Set STRIPE_SECRET_KEY in .env file."
            )

    @staticmethod
    def _line_item(item: CheckoutLineItem) -> dict:
        return {
            "price_data": {
                "currency": item.currency,
                "product_data": {"name": item.display_name},
                "unit_amount": item.unit_amount_minor_units,
            },
            "quantity": item.quantity,
        }

    def _create(self, line_items: list[CheckoutLineItem], success_url: str, cancel_url: str):
        return stripe.checkout.Session.create(
            api_key=self.api_key,
            payment_method_types=["card"],
            line_items=[self._line_item(item) for item in line_items],
            mode="payment",
            success_url=success_url,
            cancel_url=cancel_url,
        )

    async def create_session(
        self,
        line_items: list[CheckoutLineItem],
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        """Create session; the SDK call is blocking so it runs in a thread."""
        try:
            session = await asyncio.to_thread(self._create, line_items, success_url, cancel_url)
        except stripe.StripeError as e:
            logger.error(f"Stripe error: {e}", exc_info=True)
            raise PaymentError("Stripe rejected the checkout session")

        logger.info(f"Stripe checkout session created: {session.id}")
        return CheckoutSession(id=session.id, url=session.url)

    @property
    def name(self) -> str:
        return "stripe"
