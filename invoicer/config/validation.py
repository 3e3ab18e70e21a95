"""
Environment variable validation for startup checks.

This module provides validation functions to ensure all required
environment variables are properly configured at application startup.
"""

from typing import List, Dict, Any
import logging

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
  """Raised when configuration validation fails."""

  pass


class EnvValidator:
  """Validates environment configuration at startup."""

  @staticmethod
  def validate_required_vars(env_config) -> None:
    """
    Validate that all required environment variables are set.

    Args:
        env_config: The EnvConfig instance to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    errors = []
    warnings = []

    if not env_config.JWT_SECRET_KEY:
      errors.append("JWT_SECRET_KEY: JWT signing key is required")
    elif env_config.ENVIRONMENT == "prod":
      secret = str(env_config.JWT_SECRET_KEY)
      if "dev" in secret.lower() or "test" in secret.lower():
        errors.append("JWT_SECRET_KEY: Must not use development default in production")
      elif len(secret) < 32:
        errors.append("JWT_SECRET_KEY: Must be at least 32 characters for security")

    if env_config.ENVIRONMENT == "prod" and env_config.DATABASE_URL.startswith(
      "sqlite"
    ):
      errors.append("DATABASE_URL: SQLite is not supported in production")

    if not env_config.USER_REGISTRATION_ENABLED:
      warnings.append("USER_REGISTRATION_ENABLED: Signup endpoint is disabled")

    EnvValidator._validate_numeric_ranges(env_config, errors)
    EnvValidator._validate_urls(env_config, errors)

    if warnings:
      for warning in warnings:
        logger.warning(f"Config validation warning: {warning}")

    if errors:
      logger.error("Configuration validation failed:")
      for error in errors:
        logger.error(f"  - {error}")
      raise ConfigValidationError(
        f"Configuration validation failed with {len(errors)} errors. "
        "Please check environment variables."
      )

    logger.info("Configuration validation passed")

  @staticmethod
  def _validate_numeric_ranges(env_config, errors: List[str]) -> None:
    """Validate numeric configuration values are within reasonable ranges."""
    validations = [
      ("JWT_EXPIRY_DAYS", 0.01, 365, "JWT expiry"),
      ("BCRYPT_ROUNDS", 4, 31, "bcrypt work factor"),
      ("DATABASE_POOL_SIZE", 1, 500, "Database pool size"),
    ]

    for var_name, min_val, max_val, description in validations:
      value = getattr(env_config, var_name, None)
      if value is not None:
        if not (min_val <= value <= max_val):
          errors.append(
            f"{var_name}: {description} must be between {min_val} and {max_val}, got {value}"
          )

  @staticmethod
  def _validate_urls(env_config, errors: List[str]) -> None:
    """Validate database URL format."""
    value = getattr(env_config, "DATABASE_URL", None)
    if value and not value.startswith(
      ("postgresql://", "postgresql+psycopg2://", "postgres://", "sqlite://")
    ):
      errors.append(f"DATABASE_URL: Invalid URL format - {value.split('://')[0]}")

  @staticmethod
  def validate_startup(env_config) -> bool:
    """Perform startup validation and return success status."""
    try:
      EnvValidator.validate_required_vars(env_config)
      return True
    except ConfigValidationError as e:
      logger.error(f"Startup validation failed: {e}")
      return False

  @staticmethod
  def get_config_summary(env_config) -> Dict[str, Any]:
    """Get a summary of the current configuration for logging."""
    return {
      "environment": env_config.ENVIRONMENT,
      "debug": env_config.DEBUG,
      "database": {
        "type": "sqlite" if env_config.is_sqlite() else "postgresql",
        "configured": bool(env_config.DATABASE_URL),
      },
      "auth": {
        "registration_enabled": env_config.USER_REGISTRATION_ENABLED,
        "token_expiry_days": env_config.JWT_EXPIRY_DAYS,
      },
      "security": {
        "audit_logging": env_config.SECURITY_AUDIT_ENABLED,
      },
    }
