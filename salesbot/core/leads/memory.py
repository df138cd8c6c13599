"""
Log-only lead store used when no database is available.
"""

import logging
import uuid

from salesbot.core.leads.base import BaseLeadStore
from salesbot.core.leads.models import CapturedLead, LeadInput

logger = logging.getLogger(__name__)


class LogOnlyLeadStore(BaseLeadStore):
    """Degraded mode: logs the lead and keeps nothing."""

    @property
    def kind(self) -> str:
        return "memory"

    async def capture(self, lead: LeadInput) -> CapturedLead:
        logger.info(f"Lead (not persisted): {lead.name} {lead.phone}")
        return CapturedLead(id=uuid.uuid4().hex, backend=self.kind)
