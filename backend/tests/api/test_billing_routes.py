"""Tests for the /api/billing endpoints."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from api import app
from api.dependencies import get_checkout_initiator, get_entitlement_resolver
from modules.billing.catalog import STRIPE_PRODUCTS
from modules.billing.exceptions import CheckoutFailedError
from modules.billing.models import CheckoutSession, Entitlement, SubscriptionStatus
from shared.config import get_settings


@pytest.fixture
def resolver():
    mock = MagicMock()
    mock.resolve = AsyncMock(return_value=Entitlement.none())
    app.dependency_overrides[get_entitlement_resolver] = lambda: mock
    return mock


@pytest.fixture
def initiator():
    mock = MagicMock()
    mock.initiate = AsyncMock(return_value=CheckoutSession(url="https://checkout.stripe.com/c/cs_1", session_id="cs_1"))
    app.dependency_overrides[get_checkout_initiator] = lambda: mock
    return mock


CHECKOUT_BODY = {
    "product_id": "prod_SjnDuBut536HjC",
    "price_id": "price_1RoJchRnZtvMGvfNpOAo3JfQ",
    "mode": "payment",
}


class TestProducts:
    def test_list_products(self, client, member, headers_for):
        response = client.get("/api/billing/products", headers=headers_for("member"))
        assert response.status_code == 200
        products = response.json()["products"]
        assert [p["id"] for p in products] == [p.id for p in STRIPE_PRODUCTS]

    def test_products_require_membership(self, client, pending, headers_for):
        assert client.get("/api/billing/products", headers=headers_for("pending")).status_code == 403


class TestEntitlement:
    def test_entitled(self, client, member, headers_for, resolver):
        resolver.resolve.return_value = Entitlement(
            entitled=True, product=STRIPE_PRODUCTS[0], status=SubscriptionStatus.ACTIVE,
        )
        headers = headers_for("member", "member@example.com")

        response = client.get("/api/billing/entitlement", headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data["entitled"] is True
        assert data["product"]["name"] == "BBQ"
        token = headers["Authorization"].removeprefix("Bearer ")
        resolver.resolve.assert_awaited_once_with("member", token)

    def test_not_entitled(self, client, member, headers_for, resolver):
        data = client.get("/api/billing/entitlement", headers=headers_for("member")).json()
        assert data == {"entitled": False, "product": None, "status": "none"}


class TestCheckout:
    def test_checkout_returns_url(self, client, member, headers_for, initiator):
        response = client.post("/api/billing/checkout", json=CHECKOUT_BODY, headers=headers_for("member"))

        assert response.status_code == 200
        assert response.json()["url"] == "https://checkout.stripe.com/c/cs_1"

        intent = initiator.initiate.call_args.args[0]
        frontend_url = get_settings().frontend_url.rstrip("/")
        assert intent.price_id == CHECKOUT_BODY["price_id"]
        assert intent.success_url == f"{frontend_url}/success"
        assert intent.cancel_url == f"{frontend_url}/purchase"

    def test_checkout_failure(self, client, member, headers_for, initiator):
        """Processor errors come back as 502 with the processor's message."""
        initiator.initiate.side_effect = CheckoutFailedError("No such price", status_code=400)

        response = client.post("/api/billing/checkout", json=CHECKOUT_BODY, headers=headers_for("member"))

        assert response.status_code == 502
        assert response.json()["error"] == "CHECKOUT_FAILED"
        assert response.json()["message"] == "No such price"

    def test_checkout_requires_session(self, client, initiator):
        response = client.post("/api/billing/checkout", json=CHECKOUT_BODY)
        assert response.status_code == 401
        initiator.initiate.assert_not_awaited()

    def test_invalid_mode(self, client, member, headers_for, initiator):
        body = {**CHECKOUT_BODY, "mode": "barter"}
        response = client.post("/api/billing/checkout", json=body, headers=headers_for("member"))
        assert response.status_code == 422
