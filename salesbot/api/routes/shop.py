"""
Catalog, lead, cart and checkout endpoints.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from salesbot.api.deps import get_facade
from salesbot.api.schemas import CartAddRequest, CheckoutRequest, LeadRequest, RecommendRequest
from salesbot.core.errors import ValidationError
from salesbot.core.facade import CommerceFacade

router = APIRouter(tags=["shop"])
logger = logging.getLogger(__name__)


@router.get("/health")
async def health(facade: CommerceFacade = Depends(get_facade)) -> dict:
    return {
        "ok": True,
        "catalog": len(facade.catalog),
        "leadStore": facade.lead_store.kind,
        "payments": facade.payments.name if facade.payments else None,
    }


@router.get("/catalog")
async def get_catalog(facade: CommerceFacade = Depends(get_facade)) -> dict:
    catalog = facade.get_catalog()
    return {
        "ok": True,
        "count": catalog["count"],
        "products": [p.to_dict() for p in catalog["products"]],
    }


@router.post("/recommend")
async def recommend(
    payload: RecommendRequest,
    facade: CommerceFacade = Depends(get_facade),
) -> dict:
    results = facade.recommend(payload.query)
    return {
        "ok": True,
        "query": payload.query.strip().lower(),
        "results": [p.to_dict() for p in results],
    }


@router.post("/lead")
async def capture_lead(
    payload: LeadRequest,
    facade: CommerceFacade = Depends(get_facade),
):
    result = await facade.capture_lead(
        name=payload.name,
        phone=payload.phone,
        email=payload.email,
        message=payload.message,
    )

    if not result.saved:
        return JSONResponse(
            status_code=500,
            content={"ok": False, "error": result.error, "db": result.backend},
        )

    return {"ok": True, "saved": True, "db": result.backend, "id": result.id}


@router.post("/cart/add")
async def cart_add(
    payload: CartAddRequest,
    facade: CommerceFacade = Depends(get_facade),
) -> dict:
    cart = await facade.cart_add(payload.session_id, payload.product_id, payload.qty)
    return {"ok": True, "cart": cart}


@router.get("/cart/{session_id}")
async def cart_get(session_id: str, facade: CommerceFacade = Depends(get_facade)) -> dict:
    return {"ok": True, "cart": await facade.cart_get(session_id)}


@router.post("/checkout")
@router.post("/create-checkout-session")
async def checkout(
    payload: CheckoutRequest,
    facade: CommerceFacade = Depends(get_facade),
) -> dict:
    """Pay for explicit items, or for the session cart when no items are sent."""
    items = payload.items
    if items is None and payload.session_id:
        items = await facade.cart_checkout_items(payload.session_id)
    if items is None:
        raise ValidationError("Faltan items")

    session = await facade.create_checkout(
        items,
        success_url=payload.success_url,
        cancel_url=payload.cancel_url,
    )
    return {"ok": True, "id": session.id, "url": session.url}
