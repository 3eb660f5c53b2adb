from decimal import Decimal

HUNDRED = Decimal("100")


class QuadraticCurveHelper:
    """A separate helper class for shared logic used by QuadraticBondingCurve."""

    @staticmethod
    def effective_supply(supply: Decimal, allocation: Decimal) -> Decimal:
        """Clamps supply to the curve allocation. Values below zero pass through."""
        return min(supply, allocation)

    @staticmethod
    def price_at(effective_supply: Decimal, initial_price: Decimal, price_step_size: Decimal) -> Decimal:
        """
        Quadratic price used by the launch contract:
            price = initial_price * (1 + (supply / price_step_size)^2)
        Zero supply returns initial_price untouched.
        """
        if effective_supply == 0:
            return initial_price
        ratio = effective_supply / price_step_size
        return initial_price * (Decimal("1") + ratio * ratio)

    @staticmethod
    def fee_for(amount: Decimal, fee_percent: Decimal) -> Decimal:
        return amount * fee_percent / HUNDRED

    @staticmethod
    def apply_transaction_fee(amount: Decimal, fee_percent: Decimal) -> Decimal:
        """
        Net of the sell fee: sellers receive amount - fee. Buys carry no client-side fee.
        """
        return amount - QuadraticCurveHelper.fee_for(amount, fee_percent)

    @staticmethod
    def percent_of(part: Decimal, whole: Decimal) -> Decimal:
        """Percentage of 'whole' covered by 'part', capped at 100."""
        return min(part / whole * HUNDRED, HUNDRED)
