import logging
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from flask import jsonify
from flask_openapi3 import Info, Tag
from flask_openapi3 import OpenAPI

from launchpad_core.common.enums import OrderSide
from launchpad_core.common.model import MemeToken
from launchpad_core.curves.single.quadratic import QuadraticBondingCurve
from launchpad_core.tokens.links import validate_intuition_link
from launchpad_core.trading.quote import TradeQuoter

logger = logging.getLogger(__name__)

info = Info(title="Bonding Curve API", version="1.0.0")


class CurveTransactionAction(Enum):
    buy = "buy"
    sell = "sell"


class CurveStatusQuery(BaseModel):
    supply: Decimal = Field(Decimal("0"), ge=0, description="Tokens already issued through the curve")


class CurveQuoteRequest(BaseModel):
    action: CurveTransactionAction = Field(description="Trade side to quote")
    supply: Decimal = Field(ge=0, description="Tokens already issued through the curve")
    amount: Decimal = Field(gt=0, description="Token amount to buy / sell")


class LinkValidationRequest(BaseModel):
    link: Optional[str] = Field("", description="Intuition portal atom link")


curve_status_tag = Tag(
    name="Bonding Curve Status",
    description="Get the spot price, progress and market cap of the curve at a given supply",
)

curve_quote_tag = Tag(
    name="Bonding Curve Quote",
    description="Estimate a buy or sell at the spot price for a given supply",
)

token_link_tag = Tag(
    name="Token Links",
    description="Validate and normalize the Intuition link attached to a token",
)


def create_app(curve: Optional[QuadraticBondingCurve] = None, quoter: Optional[TradeQuoter] = None) -> OpenAPI:
    """
    Build the API around a curve. Decimals are returned as strings.
    """
    curve = curve or QuadraticBondingCurve()
    quoter = quoter or TradeQuoter(curve)
    app = OpenAPI(__name__, info=info)

    @app.get("/curve/status", summary="Curve Status", tags=[curve_status_tag])
    def status(query: CurveStatusQuery):
        """
        Return the curve figures for the supply specified by the caller.
        """
        supply = query.supply
        return jsonify({
            "supply": str(supply),
            "bonding_curve_allocation": str(curve.bonding_curve_allocation),
            "price": str(curve.get_spot_price(supply)),
            "progress": str(curve.curve_progress(supply)),
            "market_cap": str(curve.market_cap(supply)),
            "completed": curve.is_complete(supply),
        })

    @app.post("/curve/quote", summary="Curve Quote", tags=[curve_quote_tag])
    def quote(body: CurveQuoteRequest):
        """
        Quote a buy or sell against the curve
        """
        side = OrderSide.from_str(body.action.name)
        token = MemeToken(name="", symbol="", contract_address="", creator="", current_supply=body.supply)
        result = quoter.quote(token, side, body.amount)
        logger.debug("Quoted %s %s at supply %s", side, body.amount, body.supply)
        return jsonify({
            "side": str(result.side),
            "token_amount": str(result.token_amount),
            "payment_amount": str(result.payment_amount),
            "price": str(result.price),
            "fee": str(result.fee),
            "min_tokens_out": str(result.min_tokens_out) if result.min_tokens_out is not None else None,
            "supply": str(result.supply),
        })

    @app.post("/tokens/link/validate", summary="Validate Link", tags=[token_link_tag])
    def validate_link(body: LinkValidationRequest):
        result = validate_intuition_link(body.link or "")
        return jsonify({
            "valid": result.valid,
            "error": result.error,
            "normalized": result.normalized,
        })

    return app
