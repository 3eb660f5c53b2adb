import pytest

from decimal import Decimal

from launchpad_core.common.model import BondingCurveConfig, CreatorProfile, MemeToken
from launchpad_core.curves.single.quadratic import QuadraticBondingCurve
from launchpad_core.tokens.records import (
    build_token_update,
    merge_creator_profiles,
    recalculate_market_caps,
    token_from_row,
    token_to_row,
)


@pytest.fixture
def curve():
    return QuadraticBondingCurve(BondingCurveConfig())


def _make_row(**overrides):
    row = {
        "id": "9b1e3c1a-0000-0000-0000-000000000001",
        "name": "Pepe Launch",
        "symbol": "PEPE",
        "image": "https://img/pepe.png",
        "current_price": 0.0003066,
        "start_price": 0.0001533,
        "market_cap": 214620,
        "max_supply": 1000000000,
        "current_supply": 100000000,
        "holders": 3,
        "creator": "0xcreator",
        "intuition_link": None,
        "is_alpha": False,
        "contract_address": "0xtoken",
    }
    row.update(overrides)
    return row


def test_token_from_row():
    token = token_from_row(_make_row())
    assert token.id == "9b1e3c1a-0000-0000-0000-000000000001"
    assert token.current_price == Decimal("0.0003066")
    assert token.current_supply == Decimal("100000000")
    assert token.holders == 3
    assert token.intuition_link == ""
    assert token.is_completed is False
    assert token.creator_profile is None


def test_token_from_row_with_profile():
    token = token_from_row(_make_row(), {"display_name": "alice", "profile_image": "https://img/alice.png"})
    assert token.creator_profile == CreatorProfile(display_name="alice", profile_image="https://img/alice.png")


def test_token_from_row_missing_numbers_default_to_zero():
    token = token_from_row(_make_row(current_price=None, holders=None, current_supply=None))
    assert token.current_price == Decimal("0")
    assert token.current_supply == Decimal("0")
    assert token.holders == 0


def test_token_to_row_floors_counts():
    token = MemeToken(
        name="Pepe Launch",
        symbol="PEPE",
        contract_address="0xtoken",
        creator="0xcreator",
        max_supply=Decimal("1000000000.7"),
        current_supply=Decimal("12.9"),
        holders=1,
        intuition_link="",
    )
    row = token_to_row(token)
    assert row["max_supply"] == 1000000000
    assert row["current_supply"] == 12
    assert row["holders"] == 1
    assert row["intuition_link"] is None
    assert "id" not in row


def test_merge_creator_profiles():
    rows = [_make_row(creator="0xa"), _make_row(creator="0xb"), _make_row(creator="0xa", symbol="TWO")]
    profiles = [{"wallet_address": "0xa", "display_name": "alice", "profile_image": None}]
    tokens = merge_creator_profiles(rows, profiles)
    assert [t.creator_profile.display_name if t.creator_profile else None for t in tokens] == ["alice", None, "alice"]


def test_build_token_update_only_supplied_fields(curve):
    assert build_token_update(curve) == {}
    assert build_token_update(curve, holders=2.6) == {"holders": 2}
    assert build_token_update(curve, current_price="0.0003066") == {"current_price": Decimal("0.0003066")}


def test_build_token_update_recomputes_market_cap(curve):
    updates = build_token_update(
        curve,
        current_price=Decimal("0.0003066"),
        current_supply=Decimal("100000000.4"),
        is_completed=False,
    )
    assert updates["current_supply"] == 100000000
    assert updates["market_cap"] == curve.market_cap(Decimal("100000000.4"))
    assert updates["is_completed"] is False


def test_build_token_update_market_cap_at_zero_supply(curve):
    assert build_token_update(curve, current_supply=0)["market_cap"] == Decimal("107310")


def test_recalculate_market_caps(curve):
    rows = [
        {"id": 1, "current_price": Decimal("0.0003066"), "current_supply": 100000000},
        {"id": 2, "current_price": Decimal("0.5"), "current_supply": 0},
        {"id": 3, "current_price": Decimal("0.5"), "current_supply": -10},
        {"id": 4, "current_price": None, "current_supply": 5000},
    ]
    assert recalculate_market_caps(curve, rows) == [
        (1, Decimal("214620")),
        (2, Decimal("107310")),
    ]


def test_recalculate_market_caps_skips_supply_without_price(curve):
    rows = [{"id": 7, "current_price": None, "current_supply": 100000000}]
    assert recalculate_market_caps(curve, rows) == []
