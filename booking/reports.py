# =============================================================================
# booking/reports.py  —  Console Reports over a TravelPackage
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a TravelPackage into the four text reports the driver prints:
#     1. Itinerary           — every destination and its activities
#     2. Passenger list      — the roster with declared vs. enrolled counts
#     3. Passenger details   — one passenger plus the "enrolled" activities
#     4. Available activities — spaces left on each activity
#
#   Each render_* function returns a string; TravelPackage.print_* prints
#   it.  The structured helpers (enrolled_activities, available_activities)
#   return data so the counting rules can be checked without parsing text.
#
# TWO QUIRKS THAT ARE KEPT AS IS:
#   - "Activities Enrolled" lists every activity in the package, whoever the
#     passenger is.  There is no passenger ⇄ activity enrollment relation.
#   - Remaining capacity subtracts ONE roster-wide count of Standard + Gold
#     passengers from every activity alike.
# =============================================================================

import logging

from booking.fares import FareClass, count_seat_holders
from booking.models import (
    Activity,
    ActivityAvailability,
    Destination,
    Passenger,
    TravelPackage,
)
from booking.settings import currency_symbol

logger = logging.getLogger(__name__)


def format_money(amount) -> str:
    """Render an amount with the configured currency symbol, e.g. "₹500.00"."""
    return f"{currency_symbol()}{amount:.2f}"


# -----------------------------------------------------------------------------
# Structured views
# -----------------------------------------------------------------------------
def enrolled_activities(package: TravelPackage) -> list[tuple[Activity, Destination]]:
    """Every (activity, destination) pair whose back-reference matches.

    Walks the itinerary in order and keeps an activity only when its
    destination attribute IS the destination it is listed under.  With a
    correctly built package that keeps everything; an activity filed under
    the wrong destination drops out.
    """
    pairs = []
    for destination in package.itinerary:
        for activity in destination.activities:
            if activity.destination is destination:
                pairs.append((activity, destination))
    return pairs


def available_activities(package: TravelPackage) -> list[ActivityAvailability]:
    """Activities with spaces left, in itinerary order.

    remaining = activity.capacity - (number of Standard + Gold passengers
    on the roster).  Only rows with remaining > 0 are returned.
    """
    seat_holders = count_seat_holders(package.passengers)
    logger.debug(f"{seat_holders} seat-holding passengers on {package.name!r}")

    rows = []
    for destination in package.itinerary:
        for activity in destination.activities:
            remaining = activity.capacity - seat_holders
            if remaining > 0:
                rows.append(ActivityAvailability(activity, destination, remaining))
    return rows


# -----------------------------------------------------------------------------
# Text reports
# -----------------------------------------------------------------------------
def render_itinerary(package: TravelPackage) -> str:
    lines = [f"Travel Package: {package.name}"]
    for destination in package.itinerary:
        lines.append(f"Destination: {destination.name}")
        for activity in destination.activities:
            lines.append(f"Activity: {activity.name}")
            lines.append(f"Description: {activity.description}")
            lines.append(f"Cost: {format_money(activity.cost)}")
            lines.append(f"Capacity: {activity.capacity}")
        lines.append("")
    return "\n".join(lines)


def render_passenger_list(package: TravelPackage) -> str:
    lines = [
        f"Passenger List for Travel Package: {package.name}",
        f"Capacity: {package.passenger_capacity}",
        f"Number of Passengers Enrolled: {len(package.passengers)}",
    ]
    for passenger in package.passengers:
        lines.append(
            f"Passenger: {passenger.name} - Passenger Number: {passenger.passenger_number}"
        )
    return "\n".join(lines)


def render_passenger_details(package: TravelPackage, passenger: Passenger) -> str:
    """Name, number, balance (Standard only) and the enrolled activities.

    Gold passengers have a balance too but it is not shown here; only the
    Standard fare class gets a Balance line.
    """
    lines = [
        "Passenger Details:",
        f"Name: {passenger.name}",
        f"Passenger Number: {passenger.passenger_number}",
    ]
    if passenger.fare_class is FareClass.STANDARD:
        lines.append(f"Balance: {format_money(passenger.balance)}")

    enrolled = enrolled_activities(package)
    if enrolled:
        lines.append("Activities Enrolled:")
        for activity, destination in enrolled:
            lines.append(
                f"{activity.name} at {destination.name} - {format_money(activity.cost)}"
            )
    return "\n".join(lines)


def render_available_activities(package: TravelPackage) -> str:
    lines = ["Available Activities:"]
    for row in available_activities(package):
        lines.append(
            f"{row.activity.name} at {row.destination.name}"
            f" - Spaces Available: {row.remaining_capacity}"
        )
    return "\n".join(lines)
