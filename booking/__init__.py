# =============================================================================
# booking/__init__.py
# =============================================================================
# This package contains ALL business logic for the travel package model.
#
# ARCHITECTURAL RULE:
#   Nothing in this package configures logging or loads .env files.  Every
#   module here is pure Python and can be imported in a bare REPL.  The
#   entry point (main.py) does the wiring; this package is the engine.
# =============================================================================
