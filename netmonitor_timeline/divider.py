#!/usr/bin/env python3
"""Divide a timeline duration into labelled axis divisions."""

import math
from typing import List

from .models import AxisResult, Division, TimeScale

MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND

DEFAULT_TICK_COUNT = 5
MAX_TICK_COUNT = 20

# Every step below a second divides 1000 and every step below a minute
# divides 60000, so an axis reaching either boundary always has a tick on it.
# Minute steps skip the second scale entirely, hence LEAD_IN_MS.
NICE_STEPS_MS: List[int] = [
    1,
    2,
    5,
    10,
    20,
    50,
    100,
    200,
    500,
    1 * MILLIS_PER_SECOND,
    2 * MILLIS_PER_SECOND,
    5 * MILLIS_PER_SECOND,
    10 * MILLIS_PER_SECOND,
    15 * MILLIS_PER_SECOND,
    30 * MILLIS_PER_SECOND,
    1 * MILLIS_PER_MINUTE,
    2 * MILLIS_PER_MINUTE,
    5 * MILLIS_PER_MINUTE,
    10 * MILLIS_PER_MINUTE,
    15 * MILLIS_PER_MINUTE,
    30 * MILLIS_PER_MINUTE,
]

# Largest second-scale nice step, placed ahead of the first minute tick
LEAD_IN_MS = 30 * MILLIS_PER_SECOND

UNIT_MARKERS = {"millisecond": "ms", "second": "s", "minute": "min"}


class InvalidArgument(ValueError):
    """Raised for a negative duration or a tick count below one."""


def scale_for(ms: float) -> TimeScale:
    """Pick the label unit for a time offset or step."""
    if ms < MILLIS_PER_SECOND:
        return "millisecond"
    if ms < MILLIS_PER_MINUTE:
        return "second"
    return "minute"


def snap_to_nice_step(raw_ms: float) -> int:
    """Return the smallest nice step that is at least ``raw_ms``."""
    for step in NICE_STEPS_MS:
        if step >= raw_ms:
            return step
    largest = NICE_STEPS_MS[-1]
    return largest * math.ceil(raw_ms / largest)


def _largest_step_within(duration_ms: float) -> int:
    largest = NICE_STEPS_MS[-1]
    if duration_ms >= largest:
        return largest * math.floor(duration_ms / largest)
    fitting = [step for step in NICE_STEPS_MS if step <= duration_ms]
    return fitting[-1] if fitting else NICE_STEPS_MS[0]


def format_division_label(offset_ms: float, unit: TimeScale) -> str:
    """Format a tick label, e.g. ``"750 ms"``, ``"3.00 s"`` or ``"1.50 min"``."""
    marker = UNIT_MARKERS[unit]
    if unit == "millisecond":
        return f"{int(round(offset_ms))} {marker}"
    if unit == "second":
        return f"{offset_ms / MILLIS_PER_SECOND:.2f} {marker}"
    return f"{offset_ms / MILLIS_PER_MINUTE:.2f} {marker}"


def divide(duration_ms: float, target_tick_count: int) -> AxisResult:
    """Compute the divisions of a timeline axis spanning ``duration_ms``.

    The tick interval is the smallest nice step covering
    ``duration_ms / target_tick_count``, shrunk to the largest nice step
    inside the duration when it would overshoot it. Ticks sit at whole
    multiples of the step and each one is labelled in the unit matching its
    own offset, so a multi-second axis still starts at ``"0 ms"``. Axes
    stepping in whole minutes get one extra ``"30.00 s"`` division between
    zero and the first step, so they still show the second scale.

    Args:
        duration_ms: Elapsed span of the visible requests, in milliseconds
        target_tick_count: Number of intervals the axis should roughly hold

    Returns:
        A fresh AxisResult, divisions ordered by offset starting at zero

    Raises:
        InvalidArgument: If the duration is negative or not finite, or the
            tick count is not an integer of at least one
    """
    if isinstance(target_tick_count, bool) or not isinstance(target_tick_count, int):
        raise InvalidArgument(
            f"target_tick_count must be an integer, got {target_tick_count!r}"
        )
    if target_tick_count < 1:
        raise InvalidArgument(
            f"target_tick_count must be at least 1, got {target_tick_count}"
        )
    if not math.isfinite(duration_ms) or duration_ms < 0:
        raise InvalidArgument(
            f"duration_ms must be a non-negative number, got {duration_ms}"
        )

    step = snap_to_nice_step(duration_ms / target_tick_count)
    if step > duration_ms > 0:
        step = _largest_step_within(duration_ms)

    offsets: List[int] = []
    k = 0
    while k * step <= duration_ms:
        offsets.append(k * step)
        k += 1
    if step >= MILLIS_PER_MINUTE:
        offsets.insert(1, LEAD_IN_MS)

    divisions: List[Division] = []
    for offset in offsets:
        unit = scale_for(offset)
        divisions.append(
            Division(
                offset_ms=offset,
                unit=unit,
                label=format_division_label(offset, unit),
            )
        )

    return AxisResult(duration_ms=duration_ms, step_ms=step, divisions=divisions)
