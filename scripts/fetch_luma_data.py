#!/usr/bin/env python
"""CLI to fetch calendars or events from the Luma API.

Examples:
  python scripts/fetch_luma_data.py --resource calendars --out data/luma_calendars.json
  python scripts/fetch_luma_data.py --resource events --calendar-id cal-123 --limit 50 --out data/luma_events.json
  python scripts/fetch_luma_data.py --resource events --format csv --out data/luma_events.csv
  python scripts/fetch_luma_data.py --resource events --mock --seed 7 --out data/mock_events.json

Options:
  --mock (serve generated data instead of calling the API)
  --verbose

"""
from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on sys.path when running directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from luma.client import LumaClient
from luma.config import load_env_file
from luma.exceptions import ConfigurationError, LumaAPIError
from luma.mock_provider import MockLumaAdapter, mock_session, seed_mock
from pipelines.normalization import calendars_to_frame, events_to_frame

logger = logging.getLogger('fetch_luma_data')


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description='Fetch Luma calendars or events')
    p.add_argument('--resource', required=True, choices=['calendars', 'events'])
    p.add_argument('--calendar-id')
    p.add_argument('--limit', type=int)
    p.add_argument('--cursor')
    p.add_argument('--out', required=True, help='Output file path')
    p.add_argument('--format', choices=['json', 'csv'], default='json')
    p.add_argument('--mock', action='store_true', help='Use generated data, no network access')
    p.add_argument('--seed', type=int, help='Seed for --mock data')
    p.add_argument('--verbose', action='store_true')
    return p.parse_args(argv)


def build_client(args) -> LumaClient:
    if args.mock:
        seed_mock(args.seed)
        return LumaClient('mock-key', session=mock_session(MockLumaAdapter()))
    return LumaClient.from_env()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='[%(levelname)s] %(message)s')
    load_env_file(PROJECT_ROOT / '.env')
    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with build_client(args) as client:
            if args.resource == 'calendars':
                data, rate_limit = client.list_calendars()
                frame = calendars_to_frame
            else:
                data, rate_limit = client.list_events(calendar_id=args.calendar_id, limit=args.limit, cursor=args.cursor)
                frame = events_to_frame
    except (ConfigurationError, LumaAPIError) as e:
        logger.error('%s', e)
        return 1

    if args.format == 'csv':
        frame(data).to_csv(out_path, index=False)
    else:
        payload = [item.model_dump(mode='json') for item in data]
        out_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding='utf-8')

    if rate_limit is not None:
        logger.info('Rate limit: %d/%d remaining, resets %s', rate_limit.remaining, rate_limit.limit,
                    rate_limit.reset_at.isoformat())
    logger.info('Wrote %d %s to %s', len(data), args.resource, out_path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
