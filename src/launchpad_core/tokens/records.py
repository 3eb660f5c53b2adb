"""
Mapping between MemeToken and the snake_case rows of the ``meme_tokens`` table,
plus the update payloads written after a trade.

Counts (supply, max supply, holders) are stored as whole numbers, so they are
floored on the way in. Market cap is never taken from the caller: it is
recomputed from supply through the bonding curve.
"""
import logging
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from launchpad_core.common.math import floor_decimal, to_decimal
from launchpad_core.common.model import CreatorProfile, MemeToken
from launchpad_core.curves.single.quadratic import QuadraticBondingCurve

logger = logging.getLogger(__name__)


def _decimal_or_zero(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    return to_decimal(value)


def token_from_row(row: Mapping[str, Any], profile: Optional[Mapping[str, Any]] = None) -> MemeToken:
    """
    Convert a table row into a MemeToken.

    :param row: dict keyed by column name
    :param profile: optional user_profiles row for the creator
    """
    creator_profile = None
    if profile:
        creator_profile = CreatorProfile(
            display_name=profile.get("display_name"),
            profile_image=profile.get("profile_image"),
        )

    return MemeToken(
        id=row.get("id"),
        name=row["name"],
        symbol=row["symbol"],
        image=row.get("image"),
        current_price=_decimal_or_zero(row.get("current_price")),
        start_price=_decimal_or_zero(row.get("start_price")),
        market_cap=_decimal_or_zero(row.get("market_cap")),
        max_supply=_decimal_or_zero(row.get("max_supply")),
        current_supply=_decimal_or_zero(row.get("current_supply")),
        holders=int(row.get("holders") or 0),
        creator=row.get("creator") or "",
        intuition_link=row.get("intuition_link") or "",
        is_alpha=bool(row.get("is_alpha")),
        contract_address=row.get("contract_address") or "",
        is_completed=bool(row.get("is_completed")),
        creator_profile=creator_profile,
    )


def token_to_row(token: MemeToken) -> Dict[str, Any]:
    """Insert payload for a new token. The id is assigned by the store."""
    return {
        "name": token.name,
        "symbol": token.symbol,
        "image": token.image,
        "current_price": token.current_price,
        "start_price": token.start_price,
        "market_cap": token.market_cap,
        "max_supply": floor_decimal(token.max_supply),
        "current_supply": floor_decimal(token.current_supply),
        "holders": floor_decimal(token.holders),
        "creator": token.creator,
        "intuition_link": token.intuition_link or None,
        "is_alpha": token.is_alpha,
        "contract_address": token.contract_address,
    }


def merge_creator_profiles(
    rows: Iterable[Mapping[str, Any]],
    profiles: Iterable[Mapping[str, Any]],
) -> List[MemeToken]:
    """Attach each creator's profile (matched on wallet_address) to their tokens."""
    profile_map = {p["wallet_address"]: p for p in profiles}
    return [token_from_row(row, profile_map.get(row.get("creator"))) for row in rows]


def build_token_update(
    curve: QuadraticBondingCurve,
    current_price: Optional[Any] = None,
    current_supply: Optional[Any] = None,
    holders: Optional[int] = None,
    is_completed: Optional[bool] = None,
) -> Dict[str, Any]:
    """
    Build the partial update written after a trade. Only supplied fields appear.
    A supplied supply also refreshes market_cap from the curve.
    """
    updates: Dict[str, Any] = {}
    if current_price is not None:
        updates["current_price"] = to_decimal(current_price)
    if current_supply is not None:
        updates["current_supply"] = floor_decimal(current_supply)
        updates["market_cap"] = curve.market_cap(current_supply)
    if holders is not None:
        updates["holders"] = floor_decimal(holders)
    if is_completed is not None:
        updates["is_completed"] = is_completed
    return updates


def recalculate_market_caps(
    curve: QuadraticBondingCurve,
    rows: Iterable[Mapping[str, Any]],
) -> List[Tuple[Any, Decimal]]:
    """
    Recompute market_cap for stored tokens as price * curve allocation.

    Rows with supply use their cached current_price; rows with no supply use the
    initial price. Rows with a negative supply, or with supply but no cached
    price, are left alone.

    :return: list of (id, market_cap) pairs to write back
    """
    allocation = curve.bonding_curve_allocation
    initial_price = curve.config.initial_price
    updates = []
    for row in rows:
        supply = _decimal_or_zero(row.get("current_supply"))
        if supply > 0:
            if row.get("current_price") is None:
                logger.warning("Skipping token %s with supply but no current price", row.get("id"))
                continue
            market_cap = to_decimal(row.get("current_price")) * allocation
        elif supply == 0:
            market_cap = initial_price * allocation
        else:
            logger.warning("Skipping token %s with negative supply %s", row.get("id"), supply)
            continue
        updates.append((row.get("id"), market_cap))
    logger.info("Recalculated market cap for %d tokens", len(updates))
    return updates
