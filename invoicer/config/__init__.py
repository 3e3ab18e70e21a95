"""
Centralized configuration package for the Invoicer service.

Single source of truth for environment settings, constants and startup
validation.
"""

from .constants import API_PREFIX, INVOICES_PATH, IdPrefixes
from .env import EnvConfig, env
from .validation import ConfigValidationError, EnvValidator

__all__ = [
  "API_PREFIX",
  "ConfigValidationError",
  "EnvConfig",
  "EnvValidator",
  "INVOICES_PATH",
  "IdPrefixes",
  "env",
]
