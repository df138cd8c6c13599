"""
Payment provider factory and initialization.
"""

from typing import Optional

from salesbot.config import settings
from salesbot.integrations.payments.base import BasePaymentGateway
from salesbot.integrations.payments.stripe import StripeCheckoutGateway


def get_payment_gateway(provider: str | None = "stripe") -> Optional[BasePaymentGateway]:
    """
    Get payment provider instance.

    Returns:
        Provider instance, or None when it has no credentials configured
    """
    if provider == "stripe":
        if not settings.stripe_secret_key:
            return None
        return StripeCheckoutGateway()
    else:
        raise ValueError(f"Unknown payment provider: {provider}")


__all__ = [
    "BasePaymentGateway",
    "StripeCheckoutGateway",
    "get_payment_gateway",
]
