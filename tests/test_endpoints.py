from dataclasses import FrozenInstanceError
from urllib.parse import parse_qsl, urlsplit

import pytest
import requests

from luma.endpoints import ListCalendarsRequest, ListEventsRequest, LumaRequest, build_request
from luma.exceptions import InvalidURLError

BASE_URL = 'https://api.lu.ma/v1'


def test_list_events_request_url_and_headers():
    req = build_request(ListEventsRequest(calendar_id='cal_123', limit=50), BASE_URL, 'test_key')
    assert req.method == 'GET'
    assert req.url.startswith(BASE_URL + '/calendar/list-events?')
    query = parse_qsl(urlsplit(req.url).query)
    assert sorted(query) == [('calendar_id', 'cal_123'), ('limit', '50')]
    assert req.headers['Authorization'] == 'Bearer test_key'
    assert req.headers['Accept'] == 'application/json'


def test_list_calendars_request_has_no_query_string():
    req = build_request(ListCalendarsRequest(), BASE_URL, 'test_key')
    assert req.url == BASE_URL + '/calendar/list-calendars'
    assert '?' not in req.url
    assert req.headers['Authorization'] == 'Bearer test_key'


def test_list_events_without_filters_omits_query_string():
    req = ListEventsRequest().build(BASE_URL, 'k')
    assert req.url == BASE_URL + '/calendar/list-events'


def test_list_events_query_items_keep_declared_order():
    assert ListEventsRequest(cursor='abc', limit=5, calendar_id='cal_9').query_items == (
        ('calendar_id', 'cal_9'), ('limit', '5'), ('cursor', 'abc'))
    assert ListEventsRequest(cursor='next').query_items == (('cursor', 'next'),)


@pytest.mark.parametrize('base_url', [BASE_URL, BASE_URL + '/'])
def test_single_separator_between_base_and_path(base_url):
    req = build_request(ListCalendarsRequest(), base_url, 'k')
    assert req.url == 'https://api.lu.ma/v1/calendar/list-calendars'


def test_custom_request_with_query_items():
    from dataclasses import dataclass
    from typing import ClassVar

    @dataclass(frozen=True)
    class CustomRequest(LumaRequest):
        path: ClassVar[str] = 'test'

        def __post_init__(self):
            object.__setattr__(self, 'query_items', (('a', 'b'),))

    req = build_request(CustomRequest(), BASE_URL, 'key')
    assert urlsplit(req.url).query == 'a=b'


def test_descriptors_are_immutable():
    req = ListEventsRequest(limit=1)
    with pytest.raises(FrozenInstanceError):
        req.limit = 2  # type: ignore[misc]


@pytest.mark.parametrize('base_url', ['api.lu.ma/v1', 'ftp://api.lu.ma/v1', 'https://', '', 'http://[::1/v1'])
def test_invalid_base_url_raises_invalid_url(base_url):
    with pytest.raises(InvalidURLError) as exc:
        build_request(ListCalendarsRequest(), base_url, 'k')
    assert str(exc.value) == 'Invalid URL'


def test_session_defaults_are_merged_but_descriptor_headers_win():
    session = requests.Session()
    session.headers.update({'X-Trace-Id': 'abc', 'Accept': '*/*', 'Authorization': 'Bearer other'})
    req = build_request(ListCalendarsRequest(), BASE_URL, 'test_key', session=session)
    assert req.headers['X-Trace-Id'] == 'abc'
    assert req.headers['Accept'] == 'application/json'
    assert req.headers['Authorization'] == 'Bearer test_key'
