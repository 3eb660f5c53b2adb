import logging
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from launchpad_core.common.enums import OrderSide
from launchpad_core.common.errors import TradeValidationError
from launchpad_core.common.math import Number, round_places, to_decimal
from launchpad_core.common.model import MemeToken, TradeQuote
from launchpad_core.curves.single.quadratic import QuadraticBondingCurve

logger = logging.getLogger(__name__)

PAYMENT_SYMBOL = "TRUST"
DEFAULT_SLIPPAGE = Decimal("0.01")

InputValue = Union[Number, None]


def _parse_input(value: InputValue) -> Optional[Decimal]:
    """Empty form input gives None; anything unparseable is a validation error."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if value == "":
            return None
    try:
        parsed = to_decimal(value)
    except (InvalidOperation, ValueError):
        raise TradeValidationError("Please enter a valid amount")
    if not parsed.is_finite():
        raise TradeValidationError("Please enter a valid amount")
    return parsed


class TradeQuoter:
    """
    Quotes and pre-checks buy/sell trades for the trade panel.

    Two prices are in play:
      - the reference price, the token's cached price (or the initial price when
        nothing usable is cached), used to link the token and payment inputs
      - the curve spot price at the token's cached supply, used for full quotes

    Both are estimates. The contract decides what a trade actually settles for.
    """

    def __init__(self, curve: QuadraticBondingCurve, slippage: Decimal = DEFAULT_SLIPPAGE):
        if slippage < 0 or slippage >= 1:
            raise ValueError("Slippage must be in [0, 1).")
        self.curve = curve
        self.slippage = slippage

    def reference_price(self, token: MemeToken) -> Decimal:
        if token.current_price and token.current_price > 0:
            return to_decimal(token.current_price)
        return self.curve.config.initial_price

    def payment_for_input(self, token: MemeToken, amount: InputValue) -> Optional[Decimal]:
        """Payment shown when the user types a token amount."""
        parsed = _parse_input(amount)
        if parsed is None:
            return None
        return round_places(parsed * self.reference_price(token))

    def tokens_for_input(self, token: MemeToken, payment: InputValue) -> Optional[Decimal]:
        """Token amount shown when the user types a payment."""
        parsed = _parse_input(payment)
        if parsed is None:
            return None
        return round_places(parsed / self.reference_price(token))

    def min_tokens_out(self, amount: Number) -> Decimal:
        return round_places(to_decimal(amount) * (Decimal("1") - self.slippage))

    def quote(self, token: MemeToken, side: OrderSide, amount: Number) -> TradeQuote:
        amount = to_decimal(amount)
        supply = to_decimal(token.current_supply)
        price = self.curve.get_spot_price(supply)

        if side == OrderSide.BUY:
            return TradeQuote(
                side=side,
                token_amount=amount,
                payment_amount=self.curve.payment_for_tokens(amount, supply),
                price=price,
                supply=supply,
                min_tokens_out=self.min_tokens_out(amount),
            )

        return TradeQuote(
            side=side,
            token_amount=amount,
            payment_amount=self.curve.proceeds_for_sale(amount, supply),
            price=price,
            supply=supply,
            fee=self.curve.sale_fee(amount, supply),
        )

    def validate_trade(
        self,
        token: MemeToken,
        side: OrderSide,
        amount: InputValue,
        payment: InputValue,
        wallet_address: Optional[str],
        balance: Optional[Number] = None,
    ) -> None:
        """
        Rejects a trade before it is sent to the wallet.

        :param balance: the wallet's current token balance; checked on sells, and on
            creator buys against the creator cap. Skipped when None.
        :raises TradeValidationError: with the message to show the user
        """
        if not wallet_address:
            raise TradeValidationError("Please connect your wallet first")

        if token.is_completed:
            raise TradeValidationError("Trading is disabled - Token launch has been completed")

        parsed_amount = _parse_input(amount)
        if parsed_amount is None or parsed_amount <= 0:
            raise TradeValidationError("Please enter a valid amount")

        parsed_payment = _parse_input(payment)
        if parsed_payment is None or parsed_payment <= 0:
            raise TradeValidationError(f"Invalid {PAYMENT_SYMBOL} amount calculated. Please check your input.")

        if not token.contract_address:
            raise TradeValidationError("Invalid token contract address")

        held = to_decimal(balance) if balance is not None else None

        if side == OrderSide.SELL and held is not None and parsed_amount > held:
            raise TradeValidationError(f"Insufficient {token.symbol} balance")

        is_creator = wallet_address.lower() == (token.creator or "").lower()
        if side == OrderSide.BUY and is_creator:
            already = held if held is not None else Decimal("0")
            if already + parsed_amount > self.curve.creator_max_buy:
                logger.info(
                    "Creator buy of %s on %s exceeds cap %s",
                    parsed_amount, token.contract_address, self.curve.creator_max_buy,
                )
                raise TradeValidationError(
                    f"Creator can buy at most {self.curve.creator_max_buy:,f} {token.symbol}"
                )
