import pytest

from decimal import Decimal

from launchpad_core.common.model import BondingCurveConfig
from launchpad_core.curves.single.quadratic import QuadraticBondingCurve
from launchpad_core.webapi.webapi import create_app

ATOM_URL = "https://portal.intuition.systems/explore/atom/0x" + "ab12" * 16


@pytest.fixture
def client():
    app = create_app(QuadraticBondingCurve(BondingCurveConfig()))
    app.config["TESTING"] = True
    return app.test_client()


def test_curve_status_at_zero(client):
    response = client.get("/curve/status")
    assert response.status_code == 200
    data = response.get_json()
    assert Decimal(data["price"]) == Decimal("0.0001533")
    assert Decimal(data["progress"]) == Decimal("0")
    assert Decimal(data["market_cap"]) == Decimal("107310")
    assert Decimal(data["bonding_curve_allocation"]) == Decimal("700000000")
    assert data["completed"] is False


def test_curve_status_with_supply(client):
    data = client.get("/curve/status?supply=350000000").get_json()
    assert Decimal(data["progress"]) == Decimal("50")
    assert Decimal(data["price"]) == Decimal("0.002031225")


def test_curve_status_overshoot_is_clamped(client):
    data = client.get("/curve/status?supply=800000000").get_json()
    assert Decimal(data["progress"]) == Decimal("100")
    assert data["completed"] is True


def test_curve_status_rejects_negative_supply(client):
    response = client.get("/curve/status?supply=-1")
    assert response.status_code == 422


def test_curve_quote_buy(client):
    response = client.post("/curve/quote", json={"action": "buy", "supply": "100000000", "amount": "1000"})
    assert response.status_code == 200
    data = response.get_json()
    assert data["side"] == "BUY"
    assert Decimal(data["payment_amount"]) == Decimal("0.3066")
    assert Decimal(data["min_tokens_out"]) == Decimal("990")


def test_curve_quote_sell(client):
    data = client.post(
        "/curve/quote", json={"action": "sell", "supply": "100000000", "amount": "1000"}
    ).get_json()
    assert data["side"] == "SELL"
    assert Decimal(data["payment_amount"]) == Decimal("0.303534")
    assert Decimal(data["fee"]) == Decimal("0.003066")
    assert data["min_tokens_out"] is None


@pytest.mark.parametrize(
    "body",
    [
        {"action": "hold", "supply": "0", "amount": "1"},
        {"action": "buy", "supply": "0", "amount": "0"},
        {"action": "buy", "amount": "1"},
    ]
)
def test_curve_quote_invalid_body(client, body):
    response = client.post("/curve/quote", json=body)
    assert response.status_code == 422


def test_validate_link(client):
    data = client.post("/tokens/link/validate", json={"link": f"{ATOM_URL}?ref=x"}).get_json()
    assert data == {"valid": True, "error": None, "normalized": ATOM_URL}


def test_validate_link_invalid(client):
    data = client.post("/tokens/link/validate", json={"link": "https://example.com"}).get_json()
    assert data["valid"] is False
    assert data["error"] == "Link must be from portal.intuition.systems"


def test_validate_link_empty(client):
    data = client.post("/tokens/link/validate", json={}).get_json()
    assert data == {"valid": True, "error": None, "normalized": ""}
