"""Pydantic models for recorded network events and timeline axis divisions."""

from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, model_validator


TimeScale = Literal["millisecond", "second", "minute"]


class NetworkEvent(BaseModel):
    """A completed request, timestamps in milliseconds since a common epoch."""

    model_config = ConfigDict(allow_inf_nan=False)

    startTime: float
    endTime: float
    id: Optional[str] = None
    url: Optional[str] = None
    method: str = "GET"
    status: Optional[int] = None

    @model_validator(mode="after")
    def _check_timing(self) -> "NetworkEvent":
        if self.endTime < self.startTime:
            raise ValueError(
                f"endTime {self.endTime} precedes startTime {self.startTime}"
            )
        return self

    @property
    def total_time(self) -> float:
        return self.endTime - self.startTime


class Division(BaseModel):
    """One labelled tick mark on the timeline axis."""

    model_config = ConfigDict(frozen=True)

    offset_ms: float
    unit: TimeScale
    label: str


class AxisResult(BaseModel):
    """Divisions for one axis, ordered by offset."""

    model_config = ConfigDict(frozen=True)

    duration_ms: float
    step_ms: float
    divisions: List[Division]

    def divisions_by_unit(self, unit: TimeScale) -> List[Division]:
        """Return the divisions labelled with the given time scale."""
        return [division for division in self.divisions if division.unit == unit]

    def labels(self) -> List[str]:
        """Return the label text of every division, in axis order."""
        return [division.label for division in self.divisions]


def parse_network_event(data: Dict[str, Any]) -> NetworkEvent:
    """
    Parse a JSON dictionary into a NetworkEvent.

    Args:
        data: Dictionary parsed from one JSONL line

    Returns:
        The validated NetworkEvent

    Raises:
        ValueError: If the timestamps are missing, malformed or out of order
    """
    if "startTime" not in data or "endTime" not in data:
        raise ValueError(f"Network event without timing information: {data}")
    return NetworkEvent.model_validate(data)
