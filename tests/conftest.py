"""
Shared fixtures: a small catalog, fake stores and a fake payment provider.
"""

import pytest

from salesbot.core.catalog import CatalogIndex
from salesbot.core.checkout import CheckoutLineItem, CheckoutSession
from salesbot.core.conversation import ConversationRouter, IntentMatcher
from salesbot.core.errors import PaymentError, StoreError
from salesbot.core.facade import CommerceFacade
from salesbot.core.leads import BaseLeadStore, CapturedLead, LeadInput, LogOnlyLeadStore
from salesbot.integrations.payments import BasePaymentGateway


CATALOG_ENTRIES = [
    {
        "id": "p1",
        "name": "Facial Serum",
        "category": "Skin Care",
        "short_desc": "Suero con vitamina C",
        "tags": ["facial", "energy"],
        "price": 25,
        "currency": "USD",
        "image_url": "https://example.com/p1.jpg",
        "buy_link": "https://example.com/buy/p1",
    },
    {
        "id": "p2",
        "name": "Multivitamínico",
        "category": "Nutrición",
        "short_desc": "Vitaminas diarias",
        "tags": ["vitaminas", "defensas"],
        "price": 39.9,
        "currency": "USD",
        "buy_link": "https://example.com/buy/p2",
    },
    {
        "id": "p3",
        "name": "Limpiador Multiusos",
        "category": "Hogar",
        "short_desc": "Limpieza para toda la casa",
        "tags": ["limpieza", "hogar"],
        "price": 18.75,
        "currency": "USD",
        "buy_link": "https://example.com/buy/p3",
    },
]


class RecordingLeadStore(BaseLeadStore):
    """Keeps captured leads in a list."""

    def __init__(self):
        self.leads: list[LeadInput] = []

    @property
    def kind(self) -> str:
        return "recording"

    async def capture(self, lead: LeadInput) -> CapturedLead:
        self.leads.append(lead)
        return CapturedLead(id=str(len(self.leads)), backend=self.kind)


class FailingLeadStore(BaseLeadStore):
    """Every write fails."""

    @property
    def kind(self) -> str:
        return "mongo"

    async def init(self) -> None:
        raise StoreError("connection refused", backend=self.kind)

    async def capture(self, lead: LeadInput) -> CapturedLead:
        raise StoreError("connection refused", backend=self.kind)


class FakePaymentGateway(BasePaymentGateway):
    """Records requested sessions instead of calling a provider."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls: list[dict] = []

    @property
    def name(self) -> str:
        return "fake"

    async def create_session(
        self,
        line_items: list[CheckoutLineItem],
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        self.calls.append({
            "line_items": line_items,
            "success_url": success_url,
            "cancel_url": cancel_url,
        })
        if self.fail:
            raise PaymentError("declined")
        return CheckoutSession(id=f"cs_test_{len(self.calls)}", url="https://pay.example.com/cs")


@pytest.fixture
def catalog() -> CatalogIndex:
    return CatalogIndex.parse(CATALOG_ENTRIES)


@pytest.fixture
def intents() -> IntentMatcher:
    return IntentMatcher(
        catalog_keywords=["catalog", "catálogo", "catalogo", "ver", "productos"],
        recommend_keywords=["recom", "suger", "aconsej"],
        catalog_shortcuts=["1"],
        recommend_shortcuts=["2"],
    )


@pytest.fixture
def router(catalog, intents) -> ConversationRouter:
    return ConversationRouter(catalog, intents, assistant_name="Asistente Test")


@pytest.fixture
def lead_store() -> RecordingLeadStore:
    return RecordingLeadStore()


@pytest.fixture
def payments() -> FakePaymentGateway:
    return FakePaymentGateway()


@pytest.fixture
def facade(catalog, router, lead_store, payments) -> CommerceFacade:
    return CommerceFacade(
        catalog=catalog,
        lead_store=lead_store,
        router=router,
        payments=payments,
        success_url="https://shop.example.com/success.html",
        cancel_url="https://shop.example.com/cancel.html",
    )


@pytest.fixture
def log_only_facade(catalog, router) -> CommerceFacade:
    return CommerceFacade(catalog=catalog, lead_store=LogOnlyLeadStore(), router=router)
