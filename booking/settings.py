# =============================================================================
# booking/settings.py  —  Runtime Settings
# =============================================================================
#
# All settings come from environment variables.  main.py calls
# load_dotenv() first, so values from a local .env file are visible here
# too.  Nothing is cached: each call reads the environment again, which
# keeps tests free to patch os.environ.
#
#   LOG_LEVEL               Logging level for main.py (default: WARNING)
#   TRAVEL_CURRENCY_SYMBOL  Prefix for costs and balances (default: ₹)
# =============================================================================

import os

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_CURRENCY_SYMBOL = "₹"


def log_level() -> str:
    """Logging level name, upper-cased for logging.basicConfig."""
    return os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def currency_symbol() -> str:
    """Symbol the reports put in front of every money amount."""
    return os.environ.get("TRAVEL_CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL)
