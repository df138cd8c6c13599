"""
FastAPI dependencies.
"""

from fastapi import Request

from salesbot.core.facade import CommerceFacade


def get_facade(request: Request) -> CommerceFacade:
    """Facade attached to the application at startup."""
    return request.app.state.facade
