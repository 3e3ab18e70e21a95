"""
Static constants configuration.

Operational defaults (pool sizes, token lifetimes) and fixed API strings
that don't change based on environment.
"""

# =============================================================================
# OPERATIONAL CONSTANTS
# =============================================================================

# Database Pool Configuration
DEFAULT_POOL_SIZE = 20
DEFAULT_MAX_OVERFLOW = 40
DEFAULT_POOL_TIMEOUT = 30
DEFAULT_POOL_RECYCLE = 3600  # 1 hour

# Authentication
DEFAULT_JWT_EXPIRY_DAYS = 30
DEFAULT_BCRYPT_ROUNDS = 10

# =============================================================================
# API CONSTANTS
# =============================================================================

API_PREFIX = "/api"
INVOICES_PATH = f"{API_PREFIX}/invoices"


class IdPrefixes:
  """Prefixes for ULID primary keys."""

  USER = "user"
  INVOICE = "inv"
  CLIENT = "cli"
  ADDRESS = "addr"
  ITEM = "item"
