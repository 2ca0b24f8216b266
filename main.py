# =============================================================================
# main.py  —  Entry Point for the Travel Package Report
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
# WHAT HAPPENS:
#   1. Loads an optional .env file (LOG_LEVEL, TRAVEL_CURRENCY_SYMBOL)
#   2. Configures logging to STDERR so diagnostics never mix with the report
#   3. Builds the "Dream Vacation" sample package
#   4. Prints, separated by blank lines:
#        itinerary, passenger list, details for Alice, available activities
# =============================================================================

import logging
import sys

from dotenv import load_dotenv

# Load environment variables from .env before anything reads settings.
load_dotenv()

from booking import settings
from booking.sample_data import build_dream_vacation


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level(),
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def run_report() -> None:
    """Build the sample package and print all four reports."""
    package, featured = build_dream_vacation()
    logging.info(
        f"Built {package.name!r}: {len(package.itinerary)} destinations, "
        f"{len(package.passengers)} passengers"
    )

    package.print_itinerary()
    print()
    package.print_passenger_list()
    print()
    package.print_passenger_details(featured)
    print()
    package.print_available_activities()


if __name__ == "__main__":
    configure_logging()
    run_report()
