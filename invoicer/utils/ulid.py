"""
Prefixed ULID primary keys.

Keys look like ``inv_01ARZ3NDEKTSV4RRFFQ69G5FAV``. ULIDs are time-ordered
and never reissued, so an item id dropped during reconciliation cannot
come back attached to a different item.
"""

from typing import Optional

from ulid import ULID


def generate_prefixed_ulid(prefix: str) -> str:
  """Return a new ULID string tagged with the record-type prefix."""
  return f"{prefix}_{ULID()}"


def parse_ulid(value: str) -> Optional[ULID]:
  """Parse a prefixed (or bare) ULID string, returning None if malformed."""
  _, _, raw = value.rpartition("_")
  try:
    return ULID.from_str(raw)
  except ValueError:
    return None
