#!/usr/bin/env python3
"""Tests if timing intervals are divided against seconds when appropriate."""

import re
import threading
from pathlib import Path

from netmonitor_timeline.converter import build_axis, build_axis_for_events
from netmonitor_timeline.models import NetworkEvent
from netmonitor_timeline.parser import load_network_events
from netmonitor_timeline.recorder import NetworkEventRecorder

TEST_DATA = Path(__file__).parent / "test_data"


def test_two_requests_three_seconds_apart():
    """Two requests with a 3 s gap produce second-scale divisions."""
    events = load_network_events(TEST_DATA / "two_requests.jsonl")
    assert len(events) == 2, "There should be only two requests made."

    axis = build_axis_for_events(events, 5)
    second_divisions = axis.divisions_by_unit("second")

    assert second_divisions, (
        "There should be at least one division on the seconds time scale."
    )
    assert re.match(r"\d+\.\d{2}\s\w+", second_divisions[0].label), (
        "The division on the seconds time scale looks legit."
    )
    assert not axis.divisions_by_unit("minute")


def test_requests_recorded_while_waiting():
    """Events recorded from another thread feed the axis once both arrive."""
    recorder = NetworkEventRecorder()

    def perform_requests():
        recorder.record(NetworkEvent(startTime=1_000, endTime=1_150))
        recorder.record(NetworkEvent(startTime=4_000, endTime=4_090))

    worker = threading.Thread(target=perform_requests)
    worker.start()
    events = recorder.wait_for_events(2, timeout=5)
    worker.join()

    axis = build_axis_for_events(events)
    assert axis.duration_ms == 3090
    assert axis.labels() == ["0 ms", "1.00 s", "2.00 s", "3.00 s"]


def test_long_session_reaches_minute_scale():
    axis = build_axis(TEST_DATA / "long_session.jsonl", 5)
    assert axis.duration_ms == 125000
    assert axis.divisions_by_unit("millisecond")
    assert axis.divisions_by_unit("second")
    assert axis.divisions_by_unit("minute")


def test_directory_of_logs_is_combined():
    axis = build_axis(TEST_DATA, 5)
    # Both logs start at the same instant, the long session ends last
    assert axis.duration_ms == 125000


def test_empty_request_set_gives_trivial_axis():
    axis = build_axis_for_events([], 5)
    assert axis.duration_ms == 0
    assert axis.labels() == ["0 ms"]
