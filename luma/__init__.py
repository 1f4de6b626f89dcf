"""Typed client for the Luma public API (calendars and events).

Usage example:
    from luma.client import LumaClient
    client = LumaClient.from_env()
    events, rate_limit = client.list_events(calendar_id='cal-123', limit=50)
"""
from .client import LumaClient  # noqa: F401
from .endpoints import ListCalendarsRequest, ListEventsRequest, LumaRequest, build_request  # noqa: F401
from .exceptions import (  # noqa: F401
    ConfigurationError,
    DecodingFailedError,
    InvalidURLError,
    LumaAPIError,
    NetworkError,
    RequestFailedError,
)
from .models import Calendar, Envelope, Event, parse_timestamp  # noqa: F401
from .rate_limit import RateLimitInfo, extract_rate_limit  # noqa: F401
