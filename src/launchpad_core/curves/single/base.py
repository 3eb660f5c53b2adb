from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from launchpad_core.common.math import Number
from launchpad_core.common.model import BondingCurveConfig


class BondingCurve(ABC):
    """Abstract base class defining the pricing interface of a launch bonding curve."""
    def __init__(self, config: Optional['BondingCurveConfig'] = None):
        """
        Initializes the bonding curve with an immutable configuration.

        :param config: BondingCurveConfig - curve parameters, contract defaults when omitted
        """
        self._config = config or BondingCurveConfig()

    @property
    def config(self) -> 'BondingCurveConfig':
        """Returns the bonding curve configuration."""
        return self._config

    @property
    def bonding_curve_allocation(self) -> Decimal:
        """Returns the number of tokens sellable through the curve."""
        return self._config.bonding_curve_allocation

    @abstractmethod
    def get_spot_price(self, supply: Number) -> Decimal:
        """
        Returns the spot price for a given supply.

        :param supply: Tokens already issued through the curve.
        :return: Decimal: The price at given supply.
        """
        pass

    @abstractmethod
    def curve_progress(self, supply: Number) -> Decimal:
        """
        Returns the percentage (0-100) of the curve allocation that has been filled.

        :param supply: Tokens already issued through the curve.
        """
        pass

    @abstractmethod
    def tokens_for_payment(self, payment_amount: Number, supply: Number) -> Decimal:
        """
        Estimates how many tokens 'payment_amount' buys at the spot price for 'supply'.

        :param payment_amount: Payment the user wants to spend.
        :param supply: Tokens already issued through the curve.
        """
        pass

    @abstractmethod
    def payment_for_tokens(self, token_amount: Number, supply: Number) -> Decimal:
        """
        Estimates the payment needed to buy 'token_amount' at the spot price for 'supply'.

        :param token_amount: Number of tokens the user wants to purchase.
        :param supply: Tokens already issued through the curve.
        """
        pass

    @abstractmethod
    def proceeds_for_sale(self, token_amount: Number, supply: Number) -> Decimal:
        """
        Estimates the net payment returned when selling 'token_amount', after the sell fee.

        :param token_amount: Number of tokens the user wants to sell.
        :param supply: Tokens already issued through the curve.
        """
        pass

    @abstractmethod
    def market_cap(self, supply: Number) -> Decimal:
        """
        Returns the valuation figure cached alongside price and supply.

        :param supply: Tokens already issued through the curve.
        """
        pass
