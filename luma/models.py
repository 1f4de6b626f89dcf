from __future__ import annotations
import re
from datetime import datetime
from typing import Annotated, Any, Generic, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict

T = TypeVar('T')

# Tried in order: with fractional seconds first, then without.
TIMESTAMP_FORMATS = (
    '%Y-%m-%dT%H:%M:%S.%f%z',
    '%Y-%m-%dT%H:%M:%S%z',
)

# Internet date-time shape: zero-padded fields, mandatory Z or ±HH:MM offset.
TIMESTAMP_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})", re.ASCII)


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 timestamp as sent by the API.

    Accepts ``2024-02-10T10:00:00.500Z`` and ``2024-02-10T10:00:00Z``.
    Anything else raises ``ValueError`` naming the offending value.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and TIMESTAMP_SHAPE.fullmatch(value):
        for fmt in TIMESTAMP_FORMATS:
            try:
                return datetime.strptime(value, fmt)
            except ValueError:
                continue
    raise ValueError(f'Invalid date format: {value}')


Timestamp = Annotated[datetime, BeforeValidator(parse_timestamp)]


class Calendar(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: Optional[str] = None


class Event(BaseModel):
    """Luma event. Field names match the wire format (snake_case)."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: Optional[str] = None
    start_at: Timestamp
    end_at: Optional[Timestamp] = None
    timezone: Optional[str] = None
    url: Optional[str] = None


class Envelope(BaseModel, Generic[T]):
    """The ``{"entries": ...}`` wrapper most list endpoints respond with."""
    entries: T
