"""
HTTP routes registration.
"""

from fastapi import FastAPI

from salesbot.api.routes.chat import router as chat_router
from salesbot.api.routes.shop import router as shop_router
from salesbot.api.routes.whatsapp import router as whatsapp_router


def register_routes(app: FastAPI) -> None:
    """Register all routers to the application."""
    app.include_router(shop_router)
    app.include_router(chat_router)
    app.include_router(whatsapp_router)
