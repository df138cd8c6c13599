"""
Lead store factory and initialization.
"""

import logging

from salesbot.config import settings
from salesbot.core.leads.base import BaseLeadStore
from salesbot.core.leads.memory import LogOnlyLeadStore
from salesbot.core.leads.models import CapturedLead, LeadCaptureResult, LeadInput
from salesbot.core.leads.sql import SQLLeadStore

logger = logging.getLogger(__name__)


def get_lead_store(backend: str | None = None) -> BaseLeadStore:
    """
    Get lead store instance.

    Args:
        backend: 'auto', 'mongo', 'sql' or 'memory'.
                 If None, uses settings.lead_store_backend.
                 'auto' picks MongoDB when MONGODB_URI is set, else SQL.

    Returns:
        Lead store instance (not yet initialized)
    """
    backend = backend or settings.lead_store_backend

    if backend == "auto":
        backend = "mongo" if settings.mongodb_uri else "sql"

    if backend == "mongo":
        from salesbot.core.leads.mongo import MongoLeadStore

        return MongoLeadStore(uri=settings.mongodb_uri, database=settings.mongodb_database)
    elif backend == "sql":
        return SQLLeadStore(settings.db_url)
    elif backend == "memory":
        return LogOnlyLeadStore()
    else:
        raise ValueError(f"Unknown lead store backend: {backend}")


__all__ = [
    "BaseLeadStore",
    "CapturedLead",
    "LeadCaptureResult",
    "LeadInput",
    "LogOnlyLeadStore",
    "SQLLeadStore",
    "get_lead_store",
]
