#!/usr/bin/env python3
"""Build timeline axes from recorded network events."""

import logging
from pathlib import Path
from typing import Optional, Sequence

from .divider import DEFAULT_TICK_COUNT, divide
from .models import AxisResult, NetworkEvent
from .parser import (
    compute_duration,
    filter_events_by_date,
    load_directory_events,
    load_network_events,
)


def build_axis_for_events(
    events: Sequence[NetworkEvent], tick_count: int = DEFAULT_TICK_COUNT
) -> AxisResult:
    """Divide the span covered by the given events."""
    duration = compute_duration(events)
    logging.debug(f"{len(events)} visible events spanning {duration} ms")
    return divide(duration, tick_count)


def build_axis(
    input_path: Path,
    tick_count: int = DEFAULT_TICK_COUNT,
    from_date: Optional[str] = None,
    to_date: Optional[str] = None,
) -> AxisResult:
    """Load a JSONL request log (or a directory of them) and divide its span."""
    if not input_path.exists():
        raise FileNotFoundError(f"Input path not found: {input_path}")

    if input_path.is_file():
        events = load_network_events(input_path)
    else:
        events = load_directory_events(input_path)

    visible_events = filter_events_by_date(events, from_date, to_date)
    if events and not visible_events:
        logging.warning("No network events left after date filtering")

    return build_axis_for_events(visible_events, tick_count)
