"""
Error taxonomy shared by the core and the channel adapters.
"""


class SalesbotError(Exception):
    """Base class for all Salesbot errors."""


class ValidationError(SalesbotError):
    """Caller input is missing a mandatory field."""


class LoadError(SalesbotError):
    """Catalog source could not be parsed."""


class StoreError(SalesbotError):
    """Lead store backend failed to persist a record."""

    def __init__(self, message: str, backend: str | None = None):
        super().__init__(message)
        self.backend = backend


class PaymentError(SalesbotError):
    """Payment provider refused or failed to create a session."""


class PaymentUnavailableError(PaymentError):
    """No payment provider is configured."""
