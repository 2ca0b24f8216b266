# =============================================================================
# booking/sample_data.py  —  The "Dream Vacation" Demo Package
# =============================================================================
#
# A hardcoded package used by main.py and the end-to-end tests:
#   - Paris: Eiffel Tower Tour   (500.00, capacity 200)
#   - Tokyo: Disneyland Visit    (700.00, capacity 300)
#   - Roster: two Standard, one Gold, one Premium passenger
#
# Passenger numbers are caller-assigned and deliberately out of roster
# order (Jack is #4 but enrolled second).
# =============================================================================

from decimal import Decimal

from booking.models import (
    Activity,
    Destination,
    GoldPassenger,
    PremiumPassenger,
    StandardPassenger,
    TravelPackage,
)

PACKAGE_NAME = "Dream Vacation"
PACKAGE_CAPACITY = 500


def build_dream_vacation() -> tuple[TravelPackage, StandardPassenger]:
    """Build the demo package.

    Returns:
        (package, featured_passenger) where featured_passenger is Alice,
        the Standard passenger whose details the driver prints.
    """
    paris = Destination("Paris")
    tokyo = Destination("Tokyo")

    paris.add_activity(Activity(
        name="Eiffel Tower Tour",
        description="Guided tour of the Eiffel Tower",
        cost=Decimal("500.00"),
        capacity=200,
        destination=paris,
    ))
    tokyo.add_activity(Activity(
        name="Disneyland Visit",
        description="Visit to Disneyland theme park",
        cost=Decimal("700.00"),
        capacity=300,
        destination=tokyo,
    ))

    package = TravelPackage(PACKAGE_NAME, PACKAGE_CAPACITY)
    package.add_destination(paris)
    package.add_destination(tokyo)

    alice = StandardPassenger("Alice", 1, Decimal("10000.00"))
    package.add_passenger(alice)
    package.add_passenger(StandardPassenger("Jack", 4, Decimal("40000.00")))
    package.add_passenger(GoldPassenger("Bob", 2, Decimal("20000.00")))
    package.add_passenger(PremiumPassenger("Charlie", 3))

    return package, alice
