from datetime import datetime, timezone

import pytest

from luma.rate_limit import RateLimitInfo, extract_rate_limit

FULL = {
    'x-rate-limit-limit': '100',
    'x-rate-limit-remaining': '99',
    'x-rate-limit-reset': '1234567890',
}


def test_all_headers_present():
    info = extract_rate_limit(FULL)
    assert info == RateLimitInfo(limit=100, remaining=99,
                                 reset_at=datetime(2009, 2, 13, 23, 31, 30, tzinfo=timezone.utc))


def test_header_names_are_case_insensitive():
    headers = {k.upper(): v for k, v in FULL.items()}
    assert extract_rate_limit(headers) == extract_rate_limit(FULL)


def test_fractional_reset():
    info = extract_rate_limit({**FULL, 'x-rate-limit-reset': '1700000000.5'})
    assert info is not None
    assert info.reset_at == datetime.fromtimestamp(1700000000.5, tz=timezone.utc)


def test_no_headers():
    assert extract_rate_limit({}) is None


@pytest.mark.parametrize('missing', sorted(FULL))
def test_any_missing_header_yields_none(missing):
    headers = {k: v for k, v in FULL.items() if k != missing}
    assert extract_rate_limit(headers) is None


@pytest.mark.parametrize('name,value', [
    ('x-rate-limit-limit', 'abc'),
    ('x-rate-limit-remaining', '9.5'),
    ('x-rate-limit-limit', ' 100 '),
    ('x-rate-limit-remaining', '1_000'),
    ('x-rate-limit-reset', 'soon'),
    ('x-rate-limit-reset', ''),
    ('x-rate-limit-reset', '1e20'),
    ('x-rate-limit-reset', 'nan'),
])
def test_malformed_header_yields_none(name, value):
    assert extract_rate_limit({**FULL, name: value}) is None


def test_rate_limit_info_fields():
    reset = datetime.fromtimestamp(1000, tz=timezone.utc)
    info = RateLimitInfo(limit=100, remaining=50, reset_at=reset)
    assert info.limit == 100 and info.remaining == 50 and info.reset_at == reset
