from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP
from typing import Union

Number = Union[Decimal, int, float, str]

SIX_PLACES = Decimal("0.000001")


def to_decimal(value: Number) -> Decimal:
    """Coerce a number to Decimal. Floats go through str so 0.1 stays 0.1."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def decimal_approx_equal(a: Decimal, b: Decimal, tol: Decimal = Decimal("1e-18")) -> bool:
    return abs(a - b) < tol


def floor_decimal(value: Number) -> int:
    return int(to_decimal(value).to_integral_value(rounding=ROUND_FLOOR))


def round_places(value: Decimal, places: Decimal = SIX_PLACES) -> Decimal:
    return value.quantize(places, rounding=ROUND_HALF_UP)
