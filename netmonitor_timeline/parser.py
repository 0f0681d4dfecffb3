#!/usr/bin/env python3
"""Parse recorded network events from JSONL request logs."""

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Optional, Sequence
import dateparser

from .models import NetworkEvent, parse_network_event

# Event timestamps are compared as naive UTC, so parse the window the same way
DATEPARSER_SETTINGS = {"TIMEZONE": "UTC", "RETURN_AS_TIMEZONE_AWARE": False}


def event_start_datetime(event: NetworkEvent) -> datetime:
    """Convert an event start time to a naive UTC datetime."""
    dt = datetime.fromtimestamp(event.startTime / 1000, tz=timezone.utc)
    return dt.replace(tzinfo=None)


def filter_events_by_date(
    events: List[NetworkEvent], from_date: Optional[str], to_date: Optional[str]
) -> List[NetworkEvent]:
    """Keep the events that started inside the given date range."""
    if not from_date and not to_date:
        return events

    from_dt = None
    to_dt = None

    if from_date:
        from_dt = dateparser.parse(from_date, settings=DATEPARSER_SETTINGS)
        if not from_dt:
            raise ValueError(f"Could not parse from-date: {from_date}")
        # Relative day names start at midnight
        if from_date in ["today", "yesterday"] or "days ago" in from_date:
            from_dt = from_dt.replace(hour=0, minute=0, second=0, microsecond=0)

    if to_date:
        to_dt = dateparser.parse(to_date, settings=DATEPARSER_SETTINGS)
        if not to_dt:
            raise ValueError(f"Could not parse to-date: {to_date}")
        if to_date in ["today", "yesterday"] or "days ago" in to_date:
            to_dt = to_dt.replace(hour=23, minute=59, second=59, microsecond=999999)

    # dateparser returns naive datetimes unless the input carries an offset
    if from_dt and from_dt.tzinfo:
        from_dt = from_dt.astimezone(timezone.utc).replace(tzinfo=None)
    if to_dt and to_dt.tzinfo:
        to_dt = to_dt.astimezone(timezone.utc).replace(tzinfo=None)

    filtered_events: List[NetworkEvent] = []
    for event in events:
        event_dt = event_start_datetime(event)

        if from_dt and event_dt < from_dt:
            continue
        if to_dt and event_dt > to_dt:
            continue

        filtered_events.append(event)

    return filtered_events


def compute_duration(events: Sequence[NetworkEvent]) -> float:
    """Elapsed milliseconds from the earliest start to the latest end."""
    if not events:
        return 0.0
    earliest_start = min(event.startTime for event in events)
    latest_end = max(event.endTime for event in events)
    return latest_end - earliest_start


def load_network_events(jsonl_path: Path) -> List[NetworkEvent]:
    """Load and parse a JSONL request log, skipping malformed lines."""
    events: List[NetworkEvent] = []

    with open(jsonl_path, "r", encoding="utf-8") as f:
        logging.debug(f"Processing {jsonl_path}...")
        for line_no, line in enumerate(f):
            line = line.strip()
            if not line:
                continue
            try:
                event_dict: Any = json.loads(line)
                if not isinstance(event_dict, dict):
                    logging.warning(
                        f"Line {line_no} of {jsonl_path} is not a JSON object: {line}"
                    )
                    continue

                events.append(parse_network_event(event_dict))
            except json.JSONDecodeError as e:
                logging.warning(
                    f"Line {line_no} of {jsonl_path} | JSON decode error: {str(e)}"
                )
            except ValueError as e:
                error_msg = str(e)
                if "validation error" in error_msg.lower():
                    error_msg = re.sub(
                        r"    For further information visit https://errors.pydantic(.*)\n?",
                        "",
                        error_msg,
                    )
                logging.warning(f"Line {line_no} of {jsonl_path} | {error_msg}")

    return events


def load_directory_events(directory_path: Path) -> List[NetworkEvent]:
    """Load all JSONL request logs from a directory, ordered by start time."""
    all_events: List[NetworkEvent] = []

    for jsonl_file in sorted(directory_path.glob("*.jsonl")):
        all_events.extend(load_network_events(jsonl_file))

    all_events.sort(key=lambda event: event.startTime)
    return all_events
