from __future__ import annotations
import json
import random
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import parse_qs, urlsplit

import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict
from requests.utils import get_encoding_from_headers

_RANDOM = random.Random()


def seed_mock(seed: Optional[int] = None) -> None:
    if seed is not None:
        _RANDOM.seed(seed)


ADJECTIVES = ["Founders", "Builders", "Late Night", "Open Source", "Design", "Climate", "AI", "Crypto"]
NOUNS = ["Meetup", "Hack Night", "Demo Day", "Brunch", "Workshop", "Salon", "Summit", "Office Hours"]
CITIES = ["San Francisco", "New York", "London", "Berlin", "Lisbon", "Singapore"]
TIMEZONES = ["America/Los_Angeles", "America/New_York", "Europe/London", "Europe/Berlin", "Europe/Lisbon", "Asia/Singapore"]


def _iso(dt: datetime, fractional: bool) -> str:
    if fractional:
        return dt.strftime('%Y-%m-%dT%H:%M:%S.') + f"{dt.microsecond // 1000:03d}Z"
    return dt.strftime('%Y-%m-%dT%H:%M:%SZ')


def generate_mock_calendars(n: int = 3) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for i in range(n):
        city = _RANDOM.choice(CITIES)
        out.append({
            'id': f"cal-mock{i+1:03d}",
            'name': f"{city} {_RANDOM.choice(ADJECTIVES)}",
            'description': f"Community events in {city}" if _RANDOM.random() < 0.7 else None,
        })
    return out


def generate_mock_events(n: int = 10, calendar_ids: Optional[List[str]] = None) -> List[Dict[str, Any]]:
    """Events in the wire format; each carries a ``calendar_id`` used for filtering."""
    if not calendar_ids:
        calendar_ids = ['cal-mock001']
    base = datetime(2024, 2, 10, 17, 0, tzinfo=timezone.utc)
    out: List[Dict[str, Any]] = []
    for i in range(n):
        eid = f"evt-mock{i+1:03d}"
        start = base + timedelta(days=_RANDOM.randint(0, 60), minutes=30 * _RANDOM.randint(0, 8),
                                 milliseconds=_RANDOM.choice([0, 0, 250, 500]))
        # mix both timestamp shapes the API emits
        fractional = start.microsecond != 0
        has_end = _RANDOM.random() < 0.8
        out.append({
            'id': eid,
            'calendar_id': _RANDOM.choice(calendar_ids),
            'name': f"{_RANDOM.choice(ADJECTIVES)} {_RANDOM.choice(NOUNS)}",
            'description': 'Mock event' if _RANDOM.random() < 0.5 else None,
            'start_at': _iso(start, fractional),
            'end_at': _iso(start + timedelta(hours=_RANDOM.randint(1, 4)), fractional) if has_end else None,
            'timezone': _RANDOM.choice(TIMEZONES),
            'url': f"https://lu.ma/{eid}",
        })
    return out


def build_response(request: requests.PreparedRequest, status_code: int, body: bytes = b'',
                   headers: Optional[Dict[str, str]] = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.headers = CaseInsensitiveDict(headers or {})
    resp._content = body
    resp.encoding = get_encoding_from_headers(resp.headers)
    resp.url = request.url
    resp.request = request
    return resp


class StaticResponseAdapter(BaseAdapter):
    """Transport adapter answering every request with the same response, or raising ``error``."""

    def __init__(self, status_code: Optional[int] = 200, body: Any = b'', headers: Optional[Dict[str, str]] = None,
                 error: Optional[BaseException] = None):
        super().__init__()
        if isinstance(body, str):
            body = body.encode('utf-8')
        elif not isinstance(body, bytes):
            body = json.dumps(body).encode('utf-8')
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}
        self.error = error
        self.requests: List[requests.PreparedRequest] = []

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return build_response(request, self.status_code, self.body, self.headers)

    def close(self):
        pass


class MockLumaAdapter(BaseAdapter):
    """Offline stand-in for the Luma API serving generated calendars and events."""

    def __init__(self, calendars: Optional[List[Dict[str, Any]]] = None, events: Optional[List[Dict[str, Any]]] = None,
                 rate_limit: Optional[Tuple[int, int, int]] = (100, 99, 1700000000)):
        super().__init__()
        self.calendars = calendars if calendars is not None else generate_mock_calendars()
        self.events = events if events is not None else generate_mock_events(
            calendar_ids=[c['id'] for c in self.calendars])
        self.rate_limit = rate_limit

    def _headers(self) -> Dict[str, str]:
        headers = {'Content-Type': 'application/json'}
        if self.rate_limit:
            limit, remaining, reset = self.rate_limit
            headers.update({
                'x-rate-limit-limit': str(limit),
                'x-rate-limit-remaining': str(remaining),
                'x-rate-limit-reset': str(reset),
            })
        return headers

    def _list_events(self, query: Dict[str, List[str]]) -> List[Dict[str, Any]]:
        items: Iterable[Dict[str, Any]] = self.events
        if 'calendar_id' in query:
            wanted = query['calendar_id'][0]
            items = [e for e in items if e.get('calendar_id') == wanted]
        items = list(items)
        if 'limit' in query:
            items = items[:int(query['limit'][0])]
        return items

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        parts = urlsplit(request.url)
        query = parse_qs(parts.query)
        if request.method != 'GET':
            return build_response(request, 405, b'Method Not Allowed')
        if parts.path.endswith('/calendar/list-calendars'):
            entries = self.calendars
        elif parts.path.endswith('/calendar/list-events'):
            entries = self._list_events(query)
        else:
            return build_response(request, 404, b'Not Found')
        body = json.dumps({'entries': entries}).encode('utf-8')
        return build_response(request, 200, body, self._headers())

    def close(self):
        pass


def mock_session(adapter: BaseAdapter) -> requests.Session:
    session = requests.Session()
    session.trust_env = False
    session.mount('http://', adapter)
    session.mount('https://', adapter)
    return session
