"""
HTTP API for web clients and webhooks.
"""

from salesbot.api.app import create_app

__all__ = ["create_app"]
