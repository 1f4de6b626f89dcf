from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, ClassVar, List, Optional, Tuple
from urllib.parse import urlsplit

import requests

from .exceptions import InvalidURLError
from .models import Calendar, Event

QueryItems = Tuple[Tuple[str, str], ...]


@dataclass(frozen=True)
class LumaRequest:
    """Describes one API operation and the type its response decodes to.

    Subclasses set ``path``, ``method`` and ``response_type``; those with
    parameters fill ``query_items`` in the order they should appear.
    """
    path: ClassVar[str] = ''
    method: ClassVar[str] = 'GET'
    response_type: ClassVar[Any] = Any

    query_items: QueryItems = field(default=(), init=False)

    def build(self, base_url: str, api_key: str,
              session: Optional[requests.Session] = None) -> requests.PreparedRequest:
        return build_request(self, base_url, api_key, session=session)


def make_request(descriptor: LumaRequest, base_url: str, api_key: str) -> requests.Request:
    url = base_url.rstrip('/') + '/' + descriptor.path.lstrip('/')
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidURLError(url) from e
    if parts.scheme not in ('http', 'https') or not parts.netloc:
        raise InvalidURLError(url)
    headers = {
        'Authorization': f'Bearer {api_key}',
        'Accept': 'application/json',
    }
    return requests.Request(
        descriptor.method.upper(),
        url,
        headers=headers,
        params=list(descriptor.query_items) or None,
    )


def build_request(descriptor: LumaRequest, base_url: str, api_key: str,
                  session: Optional[requests.Session] = None) -> requests.PreparedRequest:
    """Prepare the request for ``descriptor``.

    With a session, its default headers, cookies and auth are merged in the
    way ``Session.request`` does; the descriptor's own headers win.
    """
    req = make_request(descriptor, base_url, api_key)
    try:
        if session is not None:
            return session.prepare_request(req)
        return req.prepare()
    except ValueError as e:
        # MissingSchema, InvalidSchema and InvalidURL are ValueErrors
        raise InvalidURLError(req.url) from e


@dataclass(frozen=True)
class ListCalendarsRequest(LumaRequest):
    path: ClassVar[str] = 'calendar/list-calendars'
    response_type: ClassVar[Any] = List[Calendar]


@dataclass(frozen=True)
class ListEventsRequest(LumaRequest):
    """``calendar/list-events``; each filter is sent only when given."""
    path: ClassVar[str] = 'calendar/list-events'
    response_type: ClassVar[Any] = List[Event]

    calendar_id: Optional[str] = None
    limit: Optional[int] = None
    cursor: Optional[str] = None

    def __post_init__(self):
        items = []
        if self.calendar_id is not None:
            items.append(('calendar_id', self.calendar_id))
        if self.limit is not None:
            items.append(('limit', str(self.limit)))
        if self.cursor is not None:
            items.append(('cursor', self.cursor))
        object.__setattr__(self, 'query_items', tuple(items))
