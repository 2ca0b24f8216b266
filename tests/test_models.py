"""Tests for the booking data models: destinations, activities, passengers, packages."""

import unittest
from decimal import Decimal

from booking.fares import FareClass
from booking.models import (
    Activity,
    Destination,
    GoldPassenger,
    PremiumPassenger,
    StandardPassenger,
    TravelPackage,
)


class TestDestination(unittest.TestCase):

    def setUp(self):
        self.destination = Destination("Test Destination")

    def test_add_activity_appends_at_end(self):
        first = Activity("First", "Description", Decimal("100.00"), 10, self.destination)
        second = Activity("Second", "Description", Decimal("200.00"), 20, self.destination)

        self.destination.add_activity(first)
        self.destination.add_activity(second)

        self.assertEqual(self.destination.get_activities(), (first, second))
        self.assertIs(self.destination.activities[-1], second)

    def test_add_activity_grows_by_one(self):
        activity = Activity("Test Activity", "Description", Decimal("500.00"), 200, self.destination)
        before = len(self.destination.activities)
        self.destination.add_activity(activity)
        self.assertEqual(len(self.destination.activities), before + 1)

    def test_duplicates_are_kept(self):
        activity = Activity("Test Activity", "Description", Decimal("500.00"), 200, self.destination)
        self.destination.add_activity(activity)
        self.destination.add_activity(activity)
        self.assertEqual(len(self.destination.activities), 2)

    def test_activities_view_is_read_only(self):
        self.assertIsInstance(self.destination.activities, tuple)
        with self.assertRaises(AttributeError):
            self.destination.activities.append("not an activity")


class TestActivity(unittest.TestCase):

    def test_getters_return_constructor_arguments(self):
        destination = Destination("Test Destination")
        activity = Activity("Test Activity", "Description", 500.00, 200, destination)

        self.assertEqual(activity.name, "Test Activity")
        self.assertEqual(activity.description, "Description")
        self.assertEqual(activity.cost, 500.00)
        self.assertIsInstance(activity.cost, float)
        self.assertEqual(activity.capacity, 200)
        self.assertIs(activity.destination, destination)

    def test_is_immutable(self):
        activity = Activity("Test Activity", "Description", Decimal("1"), 1, Destination("X"))
        with self.assertRaises(AttributeError):
            activity.capacity = 5

    def test_negative_values_are_accepted(self):
        activity = Activity("Odd", "Description", Decimal("-10.00"), -3, Destination("X"))
        self.assertEqual(activity.cost, Decimal("-10.00"))
        self.assertEqual(activity.capacity, -3)

    def test_repr_does_not_recurse_through_destination(self):
        destination = Destination("Paris")
        activity = Activity("Tour", "Description", Decimal("1"), 1, destination)
        destination.add_activity(activity)
        self.assertIn("Tour", repr(activity))
        self.assertNotIn("Paris", repr(activity))


class TestPassengers(unittest.TestCase):

    def test_standard_passenger_getters(self):
        passenger = StandardPassenger("Test Passenger", 1, Decimal("10000.00"))
        self.assertEqual(passenger.get_name(), "Test Passenger")
        self.assertEqual(passenger.get_passenger_number(), 1)
        self.assertIs(passenger.fare_class, FareClass.STANDARD)

    def test_premium_passenger_getters(self):
        passenger = PremiumPassenger("Test Passenger", 1)
        self.assertEqual(passenger.get_name(), "Test Passenger")
        self.assertEqual(passenger.get_passenger_number(), 1)
        self.assertIs(passenger.fare_class, FareClass.PREMIUM)

    def test_premium_passenger_has_no_balance(self):
        passenger = PremiumPassenger("Test Passenger", 1)
        self.assertFalse(hasattr(passenger, "balance"))

    def test_standard_deduct_balance(self):
        passenger = StandardPassenger("Test Passenger", 1, Decimal("10000.00"))
        passenger.deduct_balance(Decimal("500.00"))
        self.assertEqual(passenger.get_balance(), Decimal("9500.00"))

    def test_standard_deduct_balance_accepts_float(self):
        passenger = StandardPassenger("Test Passenger", 1, 10000.00)
        passenger.deduct_balance(500.00)
        self.assertEqual(passenger.balance, Decimal("9500.00"))

    def test_standard_balance_may_go_negative(self):
        passenger = StandardPassenger("Test Passenger", 1, Decimal("100.00"))
        passenger.deduct_balance(Decimal("250.00"))
        self.assertEqual(passenger.balance, Decimal("-150.00"))

    def test_gold_apply_discount_uses_hundredths_of_a_percent(self):
        # 100 is 1%, so 10000.00 drops by 100.00.
        passenger = GoldPassenger("Test Passenger", 1, Decimal("10000.00"))
        passenger.apply_discount(Decimal("100.00"))
        self.assertEqual(passenger.get_balance(), Decimal("9900.00"))

        float_passenger = GoldPassenger("Test Passenger", 2, 10000.00)
        float_passenger.apply_discount(100.00)
        self.assertEqual(float_passenger.balance, Decimal("9900.00"))

    def test_identity_cannot_be_reassigned(self):
        for passenger in (
            StandardPassenger("A", 1, Decimal("1")),
            GoldPassenger("B", 2, Decimal("1")),
            PremiumPassenger("C", 3),
        ):
            with self.subTest(fare_class=passenger.fare_class):
                with self.assertRaises(AttributeError):
                    passenger.name = "Someone Else"
                with self.assertRaises(AttributeError):
                    passenger.passenger_number = 99

    def test_balance_can_be_reassigned(self):
        passenger = GoldPassenger("Test Passenger", 1, Decimal("10.00"))
        passenger.balance = Decimal("20.00")
        self.assertEqual(passenger.balance, Decimal("20.00"))


class TestTravelPackage(unittest.TestCase):

    def setUp(self):
        self.package = TravelPackage("Test Package", 500)

    def test_add_destination(self):
        first = Destination("First")
        second = Destination("Second")
        self.package.add_destination(first)
        self.package.add_destination(second)
        self.assertEqual(self.package.get_itinerary(), (first, second))

    def test_add_passenger(self):
        standard = StandardPassenger("Test Passenger", 1, Decimal("10000.00"))
        premium = PremiumPassenger("Other Passenger", 2)
        self.package.add_passenger(standard)
        self.package.add_passenger(premium)
        self.assertEqual(self.package.get_passengers(), (standard, premium))

    def test_passenger_capacity_is_not_enforced(self):
        package = TravelPackage("Tiny Package", 1)
        for number in range(3):
            package.add_passenger(PremiumPassenger(f"P{number}", number))
        self.assertEqual(len(package.passengers), 3)
        self.assertEqual(package.passenger_capacity, 1)

    def test_views_are_read_only(self):
        self.assertIsInstance(self.package.itinerary, tuple)
        self.assertIsInstance(self.package.passengers, tuple)


if __name__ == "__main__":
    unittest.main()
