"""
Relational lead store (SQLite or PostgreSQL through async SQLAlchemy).
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from salesbot.core.errors import StoreError
from salesbot.core.leads.base import BaseLeadStore
from salesbot.core.leads.models import CapturedLead, LeadInput
from salesbot.db.database import Database
from salesbot.db.models import Lead

logger = logging.getLogger(__name__)


class SQLLeadStore(BaseLeadStore):
    """Stores leads in the `leads` table."""

    def __init__(self, url: Optional[str] = None, database: Optional[Database] = None):
        self.db = database or Database(url)

    @property
    def kind(self) -> str:
        return "postgres" if self.db.dialect.startswith("postgres") else self.db.dialect

    async def init(self) -> None:
        try:
            await self.db.init()
        except (SQLAlchemyError, OSError) as e:
            raise StoreError(f"Cannot initialize {self.kind} lead store: {e}", backend=self.kind)
        logger.info(f"Lead store ready: {self.kind}")

    async def close(self) -> None:
        await self.db.close()

    async def capture(self, lead: LeadInput) -> CapturedLead:
        """Insert lead in a single transaction."""
        try:
            async with self.db.session() as session:
                record = Lead(
                    name=lead.name,
                    phone=lead.phone,
                    email=lead.email,
                    message=lead.message,
                    created_at=datetime.now(timezone.utc),
                )
                session.add(record)
                await session.flush()  # Get the ID
                lead_id = record.id
        except (SQLAlchemyError, OSError) as e:
            raise StoreError(f"Failed to save lead: {e}", backend=self.kind)

        return CapturedLead(id=str(lead_id), backend=self.kind)
