from enum import Enum


class BondingCurveType(Enum):
    QUADRATIC = "QUADRATIC"

    @classmethod
    def from_str(cls, curve_str):
        if curve_str.upper() == BondingCurveType.QUADRATIC.name:
            return BondingCurveType.QUADRATIC
        else:
            raise NotImplementedError(f"No bonding curve type enum for {curve_str}")

    def __hash__(self):
        return hash(self.value)

    def __str__(self):
        return self.name

    def __repr__(self):
        return self.__str__()


class OrderSide(Enum):
    BUY = "BUY"
    SELL = "SELL"

    @classmethod
    def from_str(cls, mode: str) -> "OrderSide":
        """
        Parse a trade side from the trade panel mode or the API action.
        :param mode: "buy" or "sell", any case, surrounding whitespace ignored
        :return: OrderSide or NotImplementedError
        """
        key = (mode or "").strip().upper()
        for side in cls:
            if side.name == key:
                return side
        raise NotImplementedError(f"No trade side for {mode!r}")

    def __str__(self):
        return self.name

    def __repr__(self):
        return self.__str__()
