from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from launchpad_core.common.math import decimal_approx_equal
from launchpad_core.common.model import BondingCurveConfig
from launchpad_core.curves.single.quadratic import QuadraticBondingCurve


class QuadraticCurveValidator:
    """
    Specialized validator for the QuadraticBondingCurve.
    Performs:
      1) Param checks (step size, creator cap, fee)
      2) Boundary tests (price at 0, price past the allocation, progress at 0)
      3) Property tests over sampled supplies (monotonicity, floor, clamp,
         progress bounds, sell fee consistency, market cap formula)

    Each step returns a dict with:
      {
        "errors": [str...],
        "warnings": [str...],
        "info": {...}
      }
    and 'run_all_validations' aggregates them into a single result.
    """

    @staticmethod
    def validate_params(config: 'BondingCurveConfig') -> Dict[str, Any]:
        """
        Checks the curve configuration beyond what the dataclass enforces:
          - warns when the step size exceeds the allocation or the creator buy cap is zero
          - fee_percent below 100 so sellers receive something
        """
        errors: List[str] = []
        warnings: List[str] = []
        info: Dict[str, Any] = {}

        if config.price_step_size > config.bonding_curve_allocation:
            warnings.append(
                "QuadraticCurve: 'price_step_size' exceeds the curve allocation; "
                "price will never reach twice the initial price."
            )

        if config.creator_max_buy_percent == 0:
            warnings.append("QuadraticCurve: creator cannot buy any tokens of their own launch.")

        if config.fee_percent >= 100:
            errors.append("QuadraticCurve: 'fee_percent' must be < 100.")

        info["param_summary"] = {
            "initial_price": str(config.initial_price),
            "max_supply": str(config.max_supply),
            "bonding_curve_percent": str(config.bonding_curve_percent),
            "bonding_curve_allocation": str(config.bonding_curve_allocation),
            "price_step_size": str(config.price_step_size),
            "creator_max_buy": str(config.creator_max_buy),
            "fee_percent": str(config.fee_percent),
        }

        return {
            "errors": errors,
            "warnings": warnings,
            "info": info
        }

    @staticmethod
    def boundary_tests(curve: 'QuadraticBondingCurve') -> Dict[str, Any]:
        """
        Calls a few boundary conditions on the curve:
          - get_spot_price(0) equals the initial price
          - curve_progress(0) is 0
          - supply past the allocation prices and progresses like the allocation

        Returns a dict of errors/warnings/info.
        """
        errors: List[str] = []
        warnings: List[str] = []
        info: Dict[str, Any] = {}

        config = curve.config
        allocation = curve.bonding_curve_allocation

        price_at_zero = curve.get_spot_price(Decimal("0"))
        if price_at_zero != config.initial_price:
            errors.append(f"Spot price at supply=0 is {price_at_zero}, expected {config.initial_price}.")

        progress_at_zero = curve.curve_progress(Decimal("0"))
        if progress_at_zero != 0:
            errors.append(f"Curve progress at supply=0 is {progress_at_zero}, expected 0.")

        overshoot = allocation * Decimal("2")
        if curve.get_spot_price(overshoot) != curve.get_spot_price(allocation):
            errors.append("Spot price past the allocation differs from the price at the allocation.")
        if curve.curve_progress(overshoot) != Decimal("100"):
            errors.append("Curve progress past the allocation is not clamped to 100.")

        info["boundary_tests_run"] = True
        info["price_at_zero"] = str(price_at_zero)
        info["price_at_allocation"] = str(curve.get_spot_price(allocation))
        return {
            "errors": errors,
            "warnings": warnings,
            "info": info
        }

    @staticmethod
    def default_samples(curve: 'QuadraticBondingCurve', count: int = 20) -> List[Decimal]:
        """Evenly spaced supplies from 0 to the allocation, inclusive."""
        allocation = curve.bonding_curve_allocation
        return [allocation * Decimal(i) / Decimal(count) for i in range(count + 1)]

    @staticmethod
    def property_tests(
        curve: 'QuadraticBondingCurve',
        samples: Optional[Sequence[Decimal]] = None,
        token_amount: Decimal = Decimal("1000"),
    ) -> Dict[str, Any]:
        """
        Checks the pricing invariants at each sampled supply.
        Samples must be sorted ascending for the monotonicity check.
        """
        errors: List[str] = []
        warnings: List[str] = []
        info: Dict[str, Any] = {}

        config = curve.config
        allocation = curve.bonding_curve_allocation
        if samples is None:
            samples = QuadraticCurveValidator.default_samples(curve)

        previous_price = None
        for supply in samples:
            price = curve.get_spot_price(supply)

            if previous_price is not None and price < previous_price:
                errors.append(f"Spot price decreases at supply={supply}.")
            previous_price = price

            if supply >= 0 and price < config.initial_price:
                errors.append(f"Spot price at supply={supply} is below the initial price.")

            progress = curve.curve_progress(supply)
            if supply >= 0 and not (Decimal("0") <= progress <= Decimal("100")):
                errors.append(f"Curve progress at supply={supply} is out of bounds: {progress}.")

            expected_net = token_amount * price * (Decimal("1") - config.fee_percent / Decimal("100"))
            net = curve.proceeds_for_sale(token_amount, supply)
            if not decimal_approx_equal(net, expected_net):
                errors.append(f"Sell proceeds at supply={supply} are {net}, expected {expected_net}.")

            if curve.market_cap(supply) != price * allocation:
                errors.append(f"Market cap at supply={supply} is not price * allocation.")

        info["property_samples"] = len(samples)
        return {
            "errors": errors,
            "warnings": warnings,
            "info": info
        }

    @staticmethod
    def run_all_validations(
        curve: 'QuadraticBondingCurve',
        samples: Optional[Sequence[Decimal]] = None,
    ) -> Dict[str, Any]:
        """
        Aggregates:
          - param check
          - boundary tests
          - property tests
        Returns a dict with keys: errors, warnings, info
        """
        if not isinstance(curve, QuadraticBondingCurve):
            raise ValueError("Invalid curve type for QuadraticCurveValidator.")

        results = {
            "errors": [],
            "warnings": [],
            "info": {}
        }

        param_check = QuadraticCurveValidator.validate_params(curve.config)
        results["errors"].extend(param_check["errors"])
        results["warnings"].extend(param_check["warnings"])
        results["info"].update(param_check["info"])

        boundary = QuadraticCurveValidator.boundary_tests(curve)
        results["errors"].extend(boundary["errors"])
        results["warnings"].extend(boundary["warnings"])
        results["info"].update(boundary["info"])

        properties = QuadraticCurveValidator.property_tests(curve, samples)
        results["errors"].extend(properties["errors"])
        results["warnings"].extend(properties["warnings"])
        results["info"].update(properties["info"])

        return results
