from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from launchpad_core.common.enums import BondingCurveType, OrderSide
from launchpad_core.common.math import to_decimal


@dataclass(frozen=True)
class BondingCurveConfig:
    """
    Immutable parameter set of the quadratic bonding curve.

    Defaults mirror the deployed launch contract:
      - 0.0001533 initial price per token
      - 1B max supply, 70% of it sold through the curve (700M)
      - 100M price step size
      - creator may buy at most 20% of the curve allocation (140M)
      - 1% fee on sell proceeds
    """
    initial_price: Decimal = Decimal("0.0001533")
    max_supply: Decimal = Decimal("1000000000")
    bonding_curve_percent: Decimal = Decimal("70")
    price_step_size: Decimal = Decimal("100000000")
    creator_max_buy_percent: Decimal = Decimal("20")
    fee_percent: Decimal = Decimal("1")
    curve_type: BondingCurveType = BondingCurveType.QUADRATIC

    def __post_init__(self):
        for name in (
            "initial_price",
            "max_supply",
            "bonding_curve_percent",
            "price_step_size",
            "creator_max_buy_percent",
            "fee_percent",
        ):
            object.__setattr__(self, name, to_decimal(getattr(self, name)))

        if self.initial_price <= Decimal("0"):
            raise ValueError("Initial price must be positive.")
        if self.max_supply <= Decimal("0"):
            raise ValueError("Max supply must be positive.")
        if self.bonding_curve_percent <= Decimal("0"):
            raise ValueError("Bonding curve percent must be positive.")
        if self.price_step_size <= Decimal("0"):
            raise ValueError("Price step size must be positive.")
        for name in ("bonding_curve_percent", "creator_max_buy_percent", "fee_percent"):
            value = getattr(self, name)
            if value < Decimal("0") or value > Decimal("100"):
                raise ValueError(f"{name} must be between 0 and 100.")
        if self.curve_type != BondingCurveType.QUADRATIC:
            raise ValueError("Invalid curve type.")

    @property
    def bonding_curve_allocation(self) -> Decimal:
        return self.max_supply * self.bonding_curve_percent / Decimal("100")

    @property
    def creator_max_buy(self) -> Decimal:
        return self.bonding_curve_allocation * self.creator_max_buy_percent / Decimal("100")


@dataclass
class CreatorProfile:
    display_name: Optional[str] = None
    profile_image: Optional[str] = None


@dataclass
class MemeToken:
    """A launched token as cached in the token table."""
    name: str
    symbol: str
    contract_address: str
    creator: str
    id: Optional[str] = None
    image: Optional[str] = None
    current_price: Decimal = Decimal("0")
    start_price: Decimal = Decimal("0")
    market_cap: Decimal = Decimal("0")
    max_supply: Decimal = Decimal("0")
    current_supply: Decimal = Decimal("0")
    holders: int = 0
    intuition_link: str = ""
    is_alpha: bool = False
    is_completed: bool = False
    creator_profile: Optional[CreatorProfile] = None


@dataclass
class ChainTokenInfo:
    """Post-trade token state read back from the curve contract."""
    current_supply: Decimal
    current_price: Decimal
    completed: bool = False


@dataclass
class TradeQuote:
    """
    Client-side estimate for a trade at the current spot price.

    For a buy, payment_amount is what the user pays; for a sell it is the net
    proceeds after fee. Settlement amounts come from the contract only.
    """
    side: OrderSide
    token_amount: Decimal
    payment_amount: Decimal
    price: Decimal
    supply: Decimal
    fee: Decimal = Decimal("0")
    min_tokens_out: Optional[Decimal] = None


@dataclass
class LinkValidation:
    valid: bool
    error: Optional[str] = None
    normalized: Optional[str] = None
