# =============================================================================
# booking/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that flows
# through a travel package: where it goes (Destination), what you can do
# there (Activity), who is travelling (the three passenger variants) and the
# package that ties them together (TravelPackage).
#
# OWNERSHIP:
#   TravelPackage  ──owns──▶  Destination  ──owns──▶  Activity
#        │                                              │
#        └──owns──▶  passengers          Activity.destination points back
#                                        (a plain reference, never checked)
#
# Every collection is append-only.  Nothing is validated: negative costs,
# duplicate passenger numbers and mismatched back-references are all
# accepted and simply show up in the reports.
# =============================================================================

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar

from booking.fares import FareClass, as_money, gold_discount_amount

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Destination — a stop on the itinerary
# -----------------------------------------------------------------------------
@dataclass(eq=False)
class Destination:
    """A named place holding its activities in insertion order."""

    name: str
    _activities: list["Activity"] = field(default_factory=list, init=False, repr=False)

    @property
    def activities(self) -> tuple["Activity", ...]:
        """Read-only view of the activities, in the order they were added."""
        return tuple(self._activities)

    def get_activities(self) -> tuple["Activity", ...]:
        return self.activities

    def add_activity(self, activity: "Activity") -> None:
        """Append an activity.  No duplicate or back-reference check."""
        self._activities.append(activity)
        logger.debug(f"Added activity {activity.name!r} to {self.name!r}")


# -----------------------------------------------------------------------------
# Activity — something bookable at a destination
# -----------------------------------------------------------------------------
# Frozen: once built, an activity never changes.  The destination field is
# left out of repr and eq so a Destination ⇄ Activity cycle can't recurse.
# -----------------------------------------------------------------------------
@dataclass(frozen=True, eq=False)
class Activity:
    """One bookable offering."""

    name: str                          # "Eiffel Tower Tour"
    description: str                   # "Guided tour of the Eiffel Tower"
    cost: Decimal                      # Price per participant
    capacity: int                      # Max concurrent participants
    destination: Destination = field(repr=False, compare=False)


# -----------------------------------------------------------------------------
# Passengers — a closed set of three variants
# -----------------------------------------------------------------------------
# The variants share two fields (name, passenger_number) but are NOT
# subclasses of a common base.  Code that needs variant-specific behaviour
# dispatches on the fare_class tag.  Premium has no balance attribute at all.
#
# name and passenger_number can't be reassigned once set; balance can.
# -----------------------------------------------------------------------------
_IDENTITY_FIELDS = ("name", "passenger_number")


def _identity_guarded_setattr(self, attr, value):
    if attr in _IDENTITY_FIELDS and attr in self.__dict__:
        raise AttributeError(f"{type(self).__name__}.{attr} cannot be reassigned")
    object.__setattr__(self, attr, value)


@dataclass(eq=False)
class StandardPassenger:
    """A passenger with a balance that purchases are deducted from."""

    fare_class: ClassVar[FareClass] = FareClass.STANDARD

    name: str
    passenger_number: int
    balance: Decimal

    __setattr__ = _identity_guarded_setattr

    def __post_init__(self):
        self.balance = as_money(self.balance)

    def get_name(self) -> str:
        return self.name

    def get_passenger_number(self) -> int:
        return self.passenger_number

    def get_balance(self) -> Decimal:
        return self.balance

    def deduct_balance(self, amount) -> None:
        """Subtract amount from the balance.  The balance may go negative."""
        self.balance -= as_money(amount)
        logger.debug(f"Passenger #{self.passenger_number} balance now {self.balance}")


@dataclass(eq=False)
class GoldPassenger:
    """A passenger with a balance that can be discounted."""

    fare_class: ClassVar[FareClass] = FareClass.GOLD

    name: str
    passenger_number: int
    balance: Decimal

    __setattr__ = _identity_guarded_setattr

    def __post_init__(self):
        self.balance = as_money(self.balance)

    def get_name(self) -> str:
        return self.name

    def get_passenger_number(self) -> int:
        return self.passenger_number

    def get_balance(self) -> Decimal:
        return self.balance

    def apply_discount(self, percentage) -> None:
        """Reduce the balance by gold_discount_amount(balance, percentage).

        percentage is in hundredths of a percent: 100 takes 1% off.
        """
        self.balance -= gold_discount_amount(self.balance, percentage)
        logger.debug(f"Passenger #{self.passenger_number} balance now {self.balance}")


@dataclass(eq=False)
class PremiumPassenger:
    fare_class: ClassVar[FareClass] = FareClass.PREMIUM

    name: str
    passenger_number: int

    __setattr__ = _identity_guarded_setattr

    def get_name(self) -> str:
        return self.name

    def get_passenger_number(self) -> int:
        return self.passenger_number


Passenger = StandardPassenger | GoldPassenger | PremiumPassenger


# -----------------------------------------------------------------------------
# ActivityAvailability — one row of the available-activities report
# -----------------------------------------------------------------------------
@dataclass
class ActivityAvailability:
    """Spaces left on an activity once seat-holding passengers are counted."""

    activity: Activity
    destination: Destination           # The destination the activity was listed under
    remaining_capacity: int            # capacity minus Standard + Gold roster count


# -----------------------------------------------------------------------------
# TravelPackage — the aggregate root
# -----------------------------------------------------------------------------
# passenger_capacity is informational only: add_passenger never checks it.
# The print_* methods are thin wrappers over booking.reports, which holds
# the actual report logic as pure functions returning text.
# -----------------------------------------------------------------------------
@dataclass(eq=False)
class TravelPackage:
    """An itinerary of destinations plus a roster of passengers."""

    name: str
    passenger_capacity: int
    _itinerary: list[Destination] = field(default_factory=list, init=False, repr=False)
    _passengers: list[Passenger] = field(default_factory=list, init=False, repr=False)

    @property
    def itinerary(self) -> tuple[Destination, ...]:
        return tuple(self._itinerary)

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        return tuple(self._passengers)

    def get_itinerary(self) -> tuple[Destination, ...]:
        return self.itinerary

    def get_passengers(self) -> tuple[Passenger, ...]:
        return self.passengers

    def add_destination(self, destination: Destination) -> None:
        self._itinerary.append(destination)
        logger.debug(f"Added destination {destination.name!r} to {self.name!r}")

    def add_passenger(self, passenger: Passenger) -> None:
        """Append a passenger.  passenger_capacity is not enforced."""
        self._passengers.append(passenger)
        logger.debug(
            f"Enrolled passenger #{passenger.passenger_number} ({passenger.name}) "
            f"in {self.name!r}: {len(self._passengers)}/{self.passenger_capacity}"
        )

    # --- Console reports ---
    # Imported lazily: booking.reports imports this module for type hints.

    def print_itinerary(self) -> None:
        from booking.reports import render_itinerary
        print(render_itinerary(self))

    def print_passenger_list(self) -> None:
        from booking.reports import render_passenger_list
        print(render_passenger_list(self))

    def print_passenger_details(self, passenger: Passenger) -> None:
        from booking.reports import render_passenger_details
        print(render_passenger_details(self, passenger))

    def print_available_activities(self) -> None:
        from booking.reports import render_available_activities
        print(render_available_activities(self))
