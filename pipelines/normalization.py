from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from luma.models import Calendar, Event

CALENDAR_COLUMNS = ['calendar_id', 'name', 'description']
EVENT_COLUMNS = [
    'event_id', 'name', 'description', 'start_at', 'end_at',
    'duration_minutes', 'timezone', 'url',
]


def _iso_utc(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    return dt.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')


def normalize_calendars(calendars: Sequence[Calendar]) -> List[Dict[str, Any]]:
    return [
        {'calendar_id': c.id, 'name': c.name, 'description': c.description}
        for c in calendars
    ]


def normalize_events(events: Sequence[Event]) -> List[Dict[str, Any]]:
    out = []
    for e in events:
        duration = None
        if e.end_at is not None:
            duration = round((e.end_at - e.start_at).total_seconds() / 60.0, 2)
        out.append({
            'event_id': e.id,
            'name': e.name,
            'description': e.description,
            'start_at': _iso_utc(e.start_at),
            'end_at': _iso_utc(e.end_at),
            'duration_minutes': duration,
            'timezone': e.timezone,
            'url': e.url,
        })
    return out


def calendars_to_frame(calendars: Sequence[Calendar]) -> pd.DataFrame:
    return pd.DataFrame(normalize_calendars(calendars), columns=CALENDAR_COLUMNS)


def events_to_frame(events: Sequence[Event]) -> pd.DataFrame:
    ordered = sorted(events, key=lambda e: e.start_at)
    return pd.DataFrame(normalize_events(ordered), columns=EVENT_COLUMNS)
