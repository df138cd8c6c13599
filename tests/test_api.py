"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from salesbot.api import create_app
from salesbot.core.catalog import CatalogIndex
from salesbot.core.facade import CommerceFacade
from salesbot.core.leads import LogOnlyLeadStore
from tests.conftest import FailingLeadStore, FakePaymentGateway


@pytest.fixture
def public_dir(tmp_path):
    (tmp_path / "index.html").write_text("<h1>chat</h1>", encoding="utf-8")
    return tmp_path


@pytest.fixture
def client(facade, public_dir):
    return TestClient(create_app(facade, public_dir=public_dir))


def make_client(facade, public_dir) -> TestClient:
    return TestClient(create_app(facade, public_dir=public_dir))


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "ok": True,
        "catalog": 3,
        "leadStore": "recording",
        "payments": "fake",
    }


def test_static_index(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "chat" in response.text


def test_catalog(client):
    data = client.get("/catalog").json()
    assert data["ok"] is True
    assert data["count"] == 3
    assert data["products"][0]["id"] == "p1"
    assert data["products"][0]["price"] == 25


def test_recommend(client):
    response = client.post("/recommend", json={"query": "  FACIAL "})
    data = response.json()

    assert response.status_code == 200
    assert data["query"] == "facial"
    assert [p["id"] for p in data["results"]] == ["p1"]


def test_recommend_without_query(client):
    response = client.post("/recommend", json={})
    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "Falta query"}


def test_lead(client, lead_store):
    response = client.post("/lead", json={"name": "Ana", "phone": 5551234})
    data = response.json()

    assert response.status_code == 200
    assert data == {"ok": True, "saved": True, "db": "recording", "id": "1"}
    assert lead_store.leads[0].phone == "5551234"


def test_lead_missing_phone(client, lead_store):
    response = client.post("/lead", json={"name": "Ana"})
    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "Faltan name o phone"}
    assert lead_store.leads == []


def test_lead_store_failure(catalog, router, public_dir):
    facade = CommerceFacade(catalog=catalog, lead_store=FailingLeadStore(), router=router)
    response = make_client(facade, public_dir).post("/lead", json={"name": "Ana", "phone": "1"})

    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "no se pudo guardar lead", "db": "mongo"}


def test_cart(client):
    response = client.post("/cart/add", json={"sessionId": "s1", "productId": "p1", "qty": 2})
    assert response.status_code == 200
    assert response.json() == {"ok": True, "cart": {"p1": 2}}

    client.post("/cart/add", json={"sessionId": "s1", "productId": "p1", "qty": "oops"})

    response = client.get("/cart/s1")
    assert response.json() == {"ok": True, "cart": {"p1": 3}}


def test_cart_unknown_session(client):
    assert client.get("/cart/nobody").json() == {"ok": True, "cart": {}}


def test_cart_add_missing_product(client):
    response = client.post("/cart/add", json={"sessionId": "s1"})
    assert response.status_code == 400
    assert response.json()["error"] == "Faltan sessionId o productId"


@pytest.mark.parametrize("path", ["/checkout", "/create-checkout-session"])
def test_checkout(client, payments, path):
    response = client.post(path, json={"items": [{"productId": "p1", "quantity": 2}]})

    assert response.status_code == 200
    assert response.json() == {"ok": True, "id": "cs_test_1", "url": "https://pay.example.com/cs"}
    line_item = payments.calls[0]["line_items"][0]
    assert line_item.unit_amount_minor_units == 2500
    assert line_item.quantity == 2


def test_checkout_from_session_cart(client, payments):
    client.post("/cart/add", json={"sessionId": "s1", "productId": "p2", "qty": 3})

    response = client.post("/checkout", json={"sessionId": "s1"})

    assert response.status_code == 200
    line_item = payments.calls[0]["line_items"][0]
    assert line_item.display_name == "Multivitamínico"
    assert line_item.unit_amount_minor_units == 3990
    assert line_item.quantity == 3


@pytest.mark.parametrize("body", [{}, {"items": []}, {"sessionId": "empty-cart"}])
def test_checkout_without_items(client, payments, body):
    response = client.post("/checkout", json=body)
    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "Faltan items"}
    assert payments.calls == []


def test_checkout_malformed_items(client):
    response = client.post("/checkout", json={"items": "p1"})
    assert response.status_code == 400
    assert response.json()["ok"] is False


def test_checkout_without_provider(catalog, router, public_dir):
    facade = CommerceFacade(catalog=catalog, lead_store=LogOnlyLeadStore(), router=router)
    response = make_client(facade, public_dir).post("/checkout", json={"items": [{"productId": "p1"}]})

    assert response.status_code == 503
    assert response.json() == {"ok": False, "error": "pagos no configurados"}


def test_checkout_provider_error(catalog, router, public_dir):
    facade = CommerceFacade(
        catalog=catalog,
        lead_store=LogOnlyLeadStore(),
        router=router,
        payments=FakePaymentGateway(fail=True),
    )
    response = make_client(facade, public_dir).post("/checkout", json={"items": [{"productId": "p1"}]})

    assert response.status_code == 502
    assert response.json() == {"ok": False, "error": "error de pago"}


def test_chat_recommendation_flow(client):
    reply = client.post("/chat", json={"sessionId": "abc", "text": "recomiéndame"}).json()["reply"]
    assert reply["products"] == []

    reply = client.post("/chat", json={"sessionId": "abc", "text": "energy"}).json()["reply"]
    assert reply["products"] == [{
        "name": "Facial Serum",
        "shortDescription": "Suero con vitamina C",
        "price": "25",
        "currency": "USD",
        "buyLink": "https://example.com/buy/p1",
        "imageUrl": "https://example.com/p1.jpg",
    }]


def test_chat_requires_session(client):
    response = client.post("/chat", json={"text": "hola"})
    assert response.status_code == 400
    assert response.json() == {"ok": False, "error": "Falta sessionId"}


def test_app_without_public_dir(tmp_path, facade):
    client = TestClient(create_app(facade, public_dir=tmp_path / "missing"))
    assert client.get("/health").status_code == 200
    assert client.get("/").status_code == 404


def test_empty_catalog(router, public_dir):
    facade = CommerceFacade(catalog=CatalogIndex(), lead_store=LogOnlyLeadStore(), router=router)
    data = make_client(facade, public_dir).get("/catalog").json()
    assert data == {"ok": True, "count": 0, "products": []}
