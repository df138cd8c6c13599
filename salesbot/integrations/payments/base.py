"""
Base interface for payment providers.
"""

from abc import ABC, abstractmethod

from salesbot.core.checkout import CheckoutLineItem, CheckoutSession


class BasePaymentGateway(ABC):
    """Abstract base class for hosted checkout providers."""

    @abstractmethod
    async def create_session(
        self,
        line_items: list[CheckoutLineItem],
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        """
        Create a hosted payment session.

        Args:
            line_items: Items to charge
            success_url: Redirect after payment
            cancel_url: Redirect when the customer aborts

        Returns:
            CheckoutSession with provider id and redirect URL

        Raises:
            PaymentError: If the provider rejects the request
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        pass
