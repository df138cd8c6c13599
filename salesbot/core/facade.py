"""
Commerce facade - the single entry point used by every channel.

Usage:
    facade = await create_facade()
    products = facade.recommend("facial")
    reply = await facade.handle_message("tg:42", "recomiéndame", channel="telegram")
"""

import logging
from typing import Any, Iterable, Optional

from salesbot.config import settings
from salesbot.core.cart import CartLedger
from salesbot.core.catalog import CatalogIndex, Product
from salesbot.core.checkout import (
    CheckoutItem,
    CheckoutLineItem,
    CheckoutSession,
    build_line_items,
)
from salesbot.core.conversation import ConversationRouter, IntentMatcher, Reply
from salesbot.core.errors import PaymentUnavailableError, StoreError, ValidationError
from salesbot.core.leads import BaseLeadStore, LeadCaptureResult, LeadInput, get_lead_store
from salesbot.integrations.payments import BasePaymentGateway, get_payment_gateway

logger = logging.getLogger(__name__)


LEAD_STORE_FAILED_MESSAGE = "no se pudo guardar lead"


def _clean(value: Any) -> str:
    return str(value).strip() if value is not None else ""


class CommerceFacade:
    """Catalog queries, leads, carts, checkout and chat routing."""

    def __init__(
        self,
        catalog: CatalogIndex,
        lead_store: BaseLeadStore,
        router: ConversationRouter,
        cart: Optional[CartLedger] = None,
        payments: Optional[BasePaymentGateway] = None,
        recommend_limit: int = 6,
        default_currency: str = "usd",
        success_url: Optional[str] = None,
        cancel_url: Optional[str] = None,
        channel_routers: Optional[dict[str, ConversationRouter]] = None,
    ):
        self.catalog = catalog
        self.lead_store = lead_store
        self.router = router
        self.cart = cart or CartLedger()
        self.payments = payments
        self.recommend_limit = recommend_limit
        self.default_currency = default_currency
        self.success_url = success_url or settings.success_url
        self.cancel_url = cancel_url or settings.cancel_url
        self.channel_routers = channel_routers or {}

    # =========================================================================
    # CATALOG
    # =========================================================================

    def get_catalog(self) -> dict:
        return {"count": len(self.catalog), "products": list(self.catalog.products)}

    def recommend(self, query: Optional[str]) -> list[Product]:
        """
        Search the catalog for an explicit query.

        Raises:
            ValidationError: If query is empty
        """
        if not _clean(query):
            raise ValidationError("Falta query")
        return self.catalog.match(query, self.recommend_limit)

    # =========================================================================
    # LEADS
    # =========================================================================

    async def capture_lead(
        self,
        name: Optional[str],
        phone: Optional[str],
        email: Optional[str] = None,
        message: Optional[str] = None,
    ) -> LeadCaptureResult:
        """
        Validate and store a contact.

        Store failures are reported in the result, not raised.

        Raises:
            ValidationError: If name or phone is missing
        """
        name, phone = _clean(name), _clean(phone)
        if not name or not phone:
            raise ValidationError("Faltan name o phone")

        lead = LeadInput(name=name, phone=phone, email=_clean(email), message=_clean(message))

        try:
            captured = await self.lead_store.capture(lead)
        except StoreError as e:
            logger.error(f"Error saving lead ({self.lead_store.kind}): {e}", exc_info=True)
            return LeadCaptureResult(
                saved=False,
                backend=self.lead_store.kind,
                error=LEAD_STORE_FAILED_MESSAGE,
            )

        logger.info(f"Lead {captured.id} saved in {captured.backend}")
        return LeadCaptureResult(saved=True, backend=captured.backend, id=captured.id)

    # =========================================================================
    # CART
    # =========================================================================

    async def cart_add(
        self,
        session_id: Optional[str],
        product_id: Optional[str],
        qty: Any = None,
    ) -> dict[str, int]:
        """
        Raises:
            ValidationError: If session_id or product_id is missing
        """
        session_id, product_id = _clean(session_id), _clean(product_id)
        if not session_id or not product_id:
            raise ValidationError("Faltan sessionId o productId")
        return await self.cart.add(session_id, product_id, qty)

    async def cart_get(self, session_id: str) -> dict[str, int]:
        return await self.cart.get(session_id)

    async def cart_checkout_items(self, session_id: str) -> list[CheckoutItem]:
        """Checkout items for everything in the session cart."""
        cart = await self.cart.get(session_id)
        return [CheckoutItem(product_id=pid, quantity=qty) for pid, qty in cart.items()]

    # =========================================================================
    # CHECKOUT
    # =========================================================================

    def build_checkout_inputs(
        self, items: Optional[Iterable[CheckoutItem | dict]]
    ) -> list[CheckoutLineItem]:
        """
        Raises:
            ValidationError: If no items were given
        """
        if items is None or isinstance(items, (str, bytes, dict)):
            raise ValidationError("Faltan items")

        normalized = [
            item if isinstance(item, CheckoutItem) else CheckoutItem.from_dict(item)
            for item in items
            if isinstance(item, (CheckoutItem, dict))
        ]
        if not normalized:
            raise ValidationError("Faltan items")

        return build_line_items(normalized, self.catalog, self.default_currency)

    async def create_checkout(
        self,
        items: Optional[Iterable[CheckoutItem | dict]],
        success_url: Optional[str] = None,
        cancel_url: Optional[str] = None,
    ) -> CheckoutSession:
        """
        Open a hosted payment session.

        Raises:
            ValidationError: If no items were given
            PaymentUnavailableError: If no payment provider is configured
            PaymentError: If the provider fails
        """
        line_items = self.build_checkout_inputs(items)

        if self.payments is None:
            raise PaymentUnavailableError("pagos no configurados")

        return await self.payments.create_session(
            line_items,
            success_url=success_url or self.success_url,
            cancel_url=cancel_url or self.cancel_url,
        )

    # =========================================================================
    # CHAT
    # =========================================================================

    async def handle_message(self, session_id: str, text: Optional[str], channel: str = "chat") -> Reply:
        router = self.channel_routers.get(channel, self.router)
        reply = await router.handle(session_id, text)
        logger.info(
            f"[{channel}] {session_id}: {(text or '')[:50]!r} -> "
            f"{len(reply.products)} products"
        )
        return reply

    async def reset_conversation(self, session_id: str, channel: str = "chat") -> None:
        await self.channel_routers.get(channel, self.router).reset(session_id)


def create_router(catalog: CatalogIndex, search_when_idle: bool = False) -> ConversationRouter:
    """Conversation router configured from settings."""
    intents = IntentMatcher(
        catalog_keywords=settings.catalog_keywords,
        recommend_keywords=settings.recommend_keywords,
        catalog_shortcuts=settings.catalog_shortcuts,
        recommend_shortcuts=settings.recommend_shortcuts,
    )
    return ConversationRouter(
        catalog=catalog,
        intents=intents,
        match_limit=settings.chat_match_limit,
        assistant_name=settings.assistant_name,
        search_when_idle=search_when_idle,
    )


async def create_facade(
    catalog: Optional[CatalogIndex] = None,
    lead_store: Optional[BaseLeadStore] = None,
    payments: Optional[BasePaymentGateway] = None,
) -> CommerceFacade:
    """
    Wire the facade from settings.

    A lead store that cannot be initialized is replaced by the log-only
    store so the assistant keeps answering.
    """
    catalog = catalog if catalog is not None else CatalogIndex.load(settings.catalog_path)

    if lead_store is None:
        try:
            lead_store = get_lead_store()
            await lead_store.init()
        except (StoreError, ValueError) as e:
            logger.error(f"Lead store unavailable, leads will only be logged: {e}")
            lead_store = get_lead_store("memory")

    if payments is None:
        payments = get_payment_gateway()
        if payments is None:
            logger.info("STRIPE_SECRET_KEY not set, checkout disabled")

    channel_routers = {}
    if settings.whatsapp_search_when_idle:
        channel_routers["whatsapp"] = create_router(catalog, search_when_idle=True)

    return CommerceFacade(
        catalog=catalog,
        lead_store=lead_store,
        router=create_router(catalog),
        channel_routers=channel_routers,
        payments=payments,
        recommend_limit=settings.recommend_limit,
        default_currency=settings.default_currency,
    )
