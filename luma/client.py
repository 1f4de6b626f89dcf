from __future__ import annotations
from typing import List, Optional, Tuple

import requests

from .base_client import BaseClient
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, load_settings
from .endpoints import ListCalendarsRequest, ListEventsRequest
from .models import Calendar, Event
from .rate_limit import RateLimitInfo


class LumaClient(BaseClient):
    """Client for the Luma public API (calendars and events)."""

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL, session: Optional[requests.Session] = None,
                 timeout: float = DEFAULT_TIMEOUT):
        super().__init__(api_key, base_url, session=session, timeout=timeout)

    @classmethod
    def from_env(cls, session: Optional[requests.Session] = None) -> 'LumaClient':
        settings = load_settings()
        return cls(settings.api_key, base_url=settings.base_url, session=session, timeout=settings.timeout)

    def list_calendars(self) -> Tuple[List[Calendar], Optional[RateLimitInfo]]:
        return self.send(ListCalendarsRequest())

    def list_events(self, calendar_id: Optional[str] = None, limit: Optional[int] = None,
                    cursor: Optional[str] = None) -> Tuple[List[Event], Optional[RateLimitInfo]]:
        return self.send(ListEventsRequest(calendar_id=calendar_id, limit=limit, cursor=cursor))
