"""
Base interface for lead stores.
Allows easy switching between MongoDB, SQL databases and a log-only fallback.
"""

from abc import ABC, abstractmethod

from salesbot.core.leads.models import CapturedLead, LeadInput


class BaseLeadStore(ABC):
    """Abstract base class for lead storage backends."""

    async def init(self) -> None:
        """Prepare connections or schema. No-op by default."""

    async def close(self) -> None:
        """Release connections. No-op by default."""

    @abstractmethod
    async def capture(self, lead: LeadInput) -> CapturedLead:
        """
        Persist a lead.

        The store assigns the creation timestamp. A capture either fully
        succeeds or leaves no record behind.

        Args:
            lead: Validated contact data

        Returns:
            CapturedLead with a backend-assigned id

        Raises:
            StoreError: If the backend fails
        """
        pass

    @property
    @abstractmethod
    def kind(self) -> str:
        """Backend name reported to callers."""
        pass
