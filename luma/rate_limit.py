from __future__ import annotations
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping, Optional

from requests.structures import CaseInsensitiveDict

LIMIT_HEADER = 'x-rate-limit-limit'
REMAINING_HEADER = 'x-rate-limit-remaining'
RESET_HEADER = 'x-rate-limit-reset'

# Optional sign and ASCII digits only; no whitespace or underscores.
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


@dataclass(frozen=True)
class RateLimitInfo:
    """Quota metadata for the API key, parsed from response headers."""

    limit: int
    remaining: int
    reset_at: datetime


def extract_rate_limit(headers: Mapping[str, str]) -> Optional[RateLimitInfo]:
    """Return RateLimitInfo when all three headers are present and numeric, else None."""
    lookup = CaseInsensitiveDict(headers)
    raw_limit = lookup.get(LIMIT_HEADER)
    raw_remaining = lookup.get(REMAINING_HEADER)
    raw_reset = lookup.get(RESET_HEADER)
    if raw_limit is None or raw_remaining is None or raw_reset is None:
        return None
    try:
        limit = _parse_int(raw_limit)
        remaining = _parse_int(raw_remaining)
        reset_at = datetime.fromtimestamp(float(raw_reset), tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return None
    return RateLimitInfo(limit=limit, remaining=remaining, reset_at=reset_at)


def _parse_int(raw: str) -> int:
    if not _INTEGER.fullmatch(raw):
        raise ValueError(f'not an integer: {raw!r}')
    return int(raw)
