import pytest

from decimal import Decimal, InvalidOperation

from launchpad_core.common.math import decimal_approx_equal, floor_decimal, round_places, to_decimal


@pytest.mark.parametrize(
    "a, b, tol, expected",
    [
        (Decimal("1.000"), Decimal("1.000"), Decimal("0.0001"), True),

        (Decimal("1.0000"), Decimal("1.0001"), Decimal("0.001"), True),

        (Decimal("1.0000"), Decimal("1.0010"), Decimal("0.001"), False),

        (Decimal("-1.000"), Decimal("-0.999"), Decimal("0.01"), True),

        (Decimal("0.000"), Decimal("0.000"), Decimal("0.000"), False),
    ]
)
def test_decimal_approx_equal(a, b, tol, expected):
    """
    Test the decimal_approx_equal function with various inputs
    """
    result = decimal_approx_equal(a, b, tol)
    assert result == expected, f"Expected {expected} for a={a}, b={b}, tol={tol}, got {result}"


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("1.5"), Decimal("1.5")),
        (3, Decimal("3")),
        ("0.0001533", Decimal("0.0001533")),
        (0.1, Decimal("0.1")),
    ]
)
def test_to_decimal(value, expected):
    assert to_decimal(value) == expected


def test_to_decimal_rejects_garbage():
    with pytest.raises(InvalidOperation):
        to_decimal("abc")


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("100000000.9"), 100000000),
        (Decimal("5"), 5),
        (2.7, 2),
        (Decimal("-0.5"), -1),
    ]
)
def test_floor_decimal(value, expected):
    assert floor_decimal(value) == expected


def test_round_places_half_up():
    assert round_places(Decimal("0.0000005")) == Decimal("0.000001")
    assert round_places(Decimal("1.2345674")) == Decimal("1.234567")
