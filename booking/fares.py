# =============================================================================
# booking/fares.py  —  Fare Classes & Money Arithmetic
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the closed set of fare classes and the pure arithmetic behind
#   passenger balances.  Nothing here touches a model instance except to
#   read its fare_class tag, so every rule is testable on plain numbers.
#
# THE GOLD DISCOUNT FORMULA:
#   discount = percentage / 10000 * balance
#
#   The divisor is 10000, not 100: passing 100 takes 1% off, passing 10000
#   takes everything off.  A balance of 10000.00 discounted by 100 ends at
#   9900.00, not 900.00.
# =============================================================================

from decimal import Decimal
from enum import Enum

GOLD_DISCOUNT_DIVISOR = Decimal(10000)


class FareClass(Enum):
    """Closed set of passenger variants."""

    STANDARD = "standard"
    GOLD = "gold"
    PREMIUM = "premium"


# Fare classes that take a seat away from every activity's capacity.
# Premium passengers are not counted.
SEAT_HOLDING_FARE_CLASSES = frozenset({FareClass.STANDARD, FareClass.GOLD})


def as_money(value) -> Decimal:
    """Coerce an int, float, str or Decimal amount to Decimal.

    Floats go through str() so 500.0 becomes Decimal("500.0") instead of
    the binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def gold_discount_amount(balance, percentage) -> Decimal:
    """Amount a Gold passenger's balance drops by for a given percentage.

    Args:
        balance: Current balance.
        percentage: Discount in hundredths of a percent (100 == 1%).

    Returns:
        percentage / 10000 * balance, unrounded.
    """
    return as_money(percentage) / GOLD_DISCOUNT_DIVISOR * as_money(balance)


def holds_activity_seat(passenger) -> bool:
    """True when the passenger's fare class counts against activity capacity."""
    return passenger.fare_class in SEAT_HOLDING_FARE_CLASSES


def count_seat_holders(passengers) -> int:
    return sum(1 for p in passengers if holds_activity_seat(p))
