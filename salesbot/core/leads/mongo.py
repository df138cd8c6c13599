"""
MongoDB lead store.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from salesbot.core.errors import StoreError
from salesbot.core.leads.base import BaseLeadStore
from salesbot.core.leads.models import CapturedLead, LeadInput

logger = logging.getLogger(__name__)


class MongoLeadStore(BaseLeadStore):
    """Stores leads as documents in a `leads` collection."""

    def __init__(
        self,
        uri: Optional[str] = None,
        database: str = "salesbot",
        collection_name: str = "leads",
        collection: Any = None,
    ):
        self.uri = uri
        self.database = database
        self.collection_name = collection_name
        self._client: Optional[AsyncMongoClient] = None
        self._collection = collection

        if collection is None and not uri:
            raise ValueError("MongoDB URI not provided. Set MONGODB_URI in .env file.")

    @property
    def kind(self) -> str:
        return "mongo"

    @property
    def collection(self) -> Any:
        """Get or create the leads collection handle."""
        if self._collection is None:
            self._client = AsyncMongoClient(self.uri)
            self._collection = self._client[self.database][self.collection_name]
        return self._collection

    async def init(self) -> None:
        try:
            await self.collection.create_index("created_at")
        except PyMongoError as e:
            raise StoreError(f"Cannot initialize MongoDB lead store: {e}", backend=self.kind)
        logger.info(f"Lead store ready: mongo ({self.database}.{self.collection_name})")

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
            self._collection = None

    async def capture(self, lead: LeadInput) -> CapturedLead:
        document = {
            **lead.to_dict(),
            "created_at": datetime.now(timezone.utc),
        }
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            raise StoreError(f"Failed to save lead: {e}", backend=self.kind)

        return CapturedLead(id=str(result.inserted_id), backend=self.kind)
