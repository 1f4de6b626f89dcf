#!/usr/bin/env python
"""Environment & connectivity diagnostics for the Luma client.

Usage:
  python scripts/diagnose_env.py [--ping]

Without flags runs variable presence checks. Use --ping to call calendar/list-calendars.
"""
from __future__ import annotations
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from luma.client import LumaClient
from luma.config import API_KEY_ENV, BASE_URL_ENV, DEFAULT_BASE_URL, TIMEOUT_ENV, load_env_file
from luma.exceptions import ConfigurationError, LumaAPIError, RequestFailedError

MANDATORY: List[str] = [API_KEY_ENV]
OPTIONAL: List[str] = [BASE_URL_ENV, TIMEOUT_ENV]


def mask(val: str | None) -> str | None:
    if not val:
        return val
    if len(val) <= 6:
        return '*' * len(val)
    return val[:4] + '...' + val[-4:]


def check_presence() -> Dict[str, str]:
    return {k: 'OK' if (os.getenv(k) or '').strip() else 'MISSING' for k in MANDATORY}


def print_report() -> None:
    print('\n[VARIABLE PRESENCE]')
    widest = max(len(k) for k in MANDATORY + OPTIONAL)
    for k, status in check_presence().items():
        raw = os.getenv(k)
        print(f"  {k.ljust(widest)} : {status:<8} {'' if status != 'OK' else mask(raw)}")
    print('\n[OPTIONAL]')
    for k in OPTIONAL:
        raw = os.getenv(k)
        print(f"  {k.ljust(widest)} : {raw if raw else '(default)'}")
    print()


def ping() -> bool:
    try:
        client = LumaClient.from_env()
    except ConfigurationError as e:
        print(f"[luma] Skipping connectivity test ({e})")
        return False
    print(f"[luma] GET {client.base_url.rstrip('/')}/calendar/list-calendars")
    try:
        with client:
            calendars, rate_limit = client.list_calendars()
    except RequestFailedError as e:
        print(f"[luma] {e}")
        if e.status_code in (401, 403):
            print('HINT 401/403: Invalid API key, or the key belongs to a different calendar owner.')
        elif e.status_code == 404 and os.getenv(BASE_URL_ENV):
            print(f"HINT 404: Check {BASE_URL_ENV} (default {DEFAULT_BASE_URL}).")
        return False
    except LumaAPIError as e:
        print(f"[luma] {e}")
        return False
    print(f"[luma] OK: {len(calendars)} calendar(s)")
    if rate_limit is not None:
        print(f"[luma] Rate limit: {rate_limit.remaining}/{rate_limit.limit}, resets {rate_limit.reset_at.isoformat()}")
    return True


def main(argv: List[str]) -> int:
    logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    load_env_file(PROJECT_ROOT / '.env')
    flags = set(a for a in argv[1:] if a.startswith('--'))
    print_report()
    if '--ping' in flags:
        return 0 if ping() else 1
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
