#!/usr/bin/env python3
"""Collect network events as they complete and wait for a given count."""

import logging
import threading
import time
from typing import List

from .divider import InvalidArgument
from .models import NetworkEvent


class NetworkEventRecorder:
    """Thread-safe collector of completed network events."""

    def __init__(self) -> None:
        self._events: List[NetworkEvent] = []
        self._condition = threading.Condition()

    def record(self, event: NetworkEvent) -> None:
        """Store a completed event and wake up any waiters."""
        with self._condition:
            self._events.append(event)
            self._condition.notify_all()

    @property
    def events(self) -> List[NetworkEvent]:
        with self._condition:
            return list(self._events)

    def clear(self) -> None:
        with self._condition:
            self._events.clear()

    def wait_for_events(self, count: int, timeout: float) -> List[NetworkEvent]:
        """Block until at least ``count`` events were recorded.

        Args:
            count: Number of events to wait for
            timeout: Maximum number of seconds to wait

        Returns:
            A snapshot of every recorded event

        Raises:
            InvalidArgument: If count is below one or timeout is negative
            TimeoutError: If fewer than ``count`` events arrive in time
        """
        if count < 1:
            raise InvalidArgument(f"count must be at least 1, got {count}")
        if timeout < 0:
            raise InvalidArgument(f"timeout must not be negative, got {timeout}")

        deadline = time.monotonic() + timeout
        with self._condition:
            while len(self._events) < count:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise TimeoutError(
                        f"Expected {count} network events, got {len(self._events)} "
                        f"after {timeout}s"
                    )
                self._condition.wait(remaining)
            logging.debug(f"Recorded {len(self._events)} network events")
            return list(self._events)
