"""A toy propositional satisfiability checker."""
import os

# Debug flag - can be set via environment variable TOYSAT_DEBUG
TOYSAT_DEBUG = os.environ.get("TOYSAT_DEBUG", "False").lower() in ("true", "1", "yes")

__version__ = "0.1.0"
