import pytest

from luma.client import LumaClient
from luma.mock_provider import StaticResponseAdapter, mock_session

BASE_URL = 'https://api.lu.ma/v1'


@pytest.fixture
def make_client():
    """Build a LumaClient whose session answers through the given adapter."""
    def _make(adapter, base_url=BASE_URL):
        return LumaClient('test_key', base_url=base_url, session=mock_session(adapter))
    return _make


@pytest.fixture
def static_client(make_client):
    """Client plus the StaticResponseAdapter behind it."""
    def _make(status_code=200, body=b'', headers=None, error=None):
        adapter = StaticResponseAdapter(status_code=status_code, body=body, headers=headers, error=error)
        return make_client(adapter), adapter
    return _make


@pytest.fixture
def calendars_payload():
    return [
        {'id': 'cal_1', 'name': 'C1'},
        {'id': 'cal_2', 'name': 'C2', 'description': 'Second calendar'},
    ]


@pytest.fixture
def events_payload():
    return [
        {
            'id': 'evt_1',
            'name': 'Event 1',
            'start_at': '2024-02-10T10:00:00Z',
        },
        {
            'id': 'evt_2',
            'name': 'Event 2',
            'description': 'Late night hack',
            'start_at': '2024-02-11T18:30:00.250Z',
            'end_at': '2024-02-11T21:00:00.250Z',
            'timezone': 'America/New_York',
            'url': 'https://lu.ma/e/evt_2',
        },
    ]
