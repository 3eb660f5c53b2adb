from decimal import Decimal

from launchpad_core.common.math import Number, to_decimal
from launchpad_core.curves.single.base import BondingCurve
from launchpad_core.curves.utils.quadratic_curve_helper import QuadraticCurveHelper as helper


class QuadraticBondingCurve(BondingCurve):
    """
        A quadratic ("pump" style) bonding curve matching the launch contract.

        The spot price is:
          price(s) = initial_price * (1 + (s / price_step_size)^2)

        with s clamped to the curve allocation (max_supply * bonding_curve_percent / 100).

        Conversions between tokens and payment use the spot price at the given
        supply rather than the integral over the curve, so they are estimates
        for display and input linking. The contract settles the real amounts.

        The curve holds no state besides its config; supply is passed on every call.
    """

    @property
    def creator_max_buy(self) -> Decimal:
        """Tokens the creator may buy of their own launch."""
        return self._config.creator_max_buy

    def get_spot_price(self, supply: Number) -> Decimal:
        """
        Return the spot price at 'supply'. Supply above the allocation is priced at the allocation.
        """
        effective = helper.effective_supply(to_decimal(supply), self.bonding_curve_allocation)
        return helper.price_at(effective, self._config.initial_price, self._config.price_step_size)

    def curve_progress(self, supply: Number) -> Decimal:
        return helper.percent_of(to_decimal(supply), self.bonding_curve_allocation)

    def is_complete(self, supply: Number) -> bool:
        return to_decimal(supply) >= self.bonding_curve_allocation

    def tokens_for_payment(self, payment_amount: Number, supply: Number) -> Decimal:
        return to_decimal(payment_amount) / self.get_spot_price(supply)

    def payment_for_tokens(self, token_amount: Number, supply: Number) -> Decimal:
        return to_decimal(token_amount) * self.get_spot_price(supply)

    def sale_fee(self, token_amount: Number, supply: Number) -> Decimal:
        """Fee withheld from the gross proceeds of a sell."""
        gross = self.payment_for_tokens(token_amount, supply)
        return helper.fee_for(gross, self._config.fee_percent)

    def proceeds_for_sale(self, token_amount: Number, supply: Number) -> Decimal:
        gross = self.payment_for_tokens(token_amount, supply)
        return helper.apply_transaction_fee(gross, self._config.fee_percent)

    def market_cap(self, supply: Number) -> Decimal:
        """
        Spot price times the whole curve allocation, not times 'supply'.
        This is the theoretical value of the allocation at the current price.
        """
        return self.get_spot_price(supply) * self.bonding_curve_allocation
