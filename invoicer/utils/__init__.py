"""Utility functions and helpers for the Invoicer service."""

from .ulid import generate_prefixed_ulid, parse_ulid

__all__ = [
  "generate_prefixed_ulid",
  "parse_ulid",
]
