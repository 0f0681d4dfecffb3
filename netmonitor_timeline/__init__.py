"""Timeline axis divisions for recorded network activity."""

from .divider import InvalidArgument, divide
from .models import AxisResult, Division, NetworkEvent

__all__ = ["AxisResult", "Division", "InvalidArgument", "NetworkEvent", "divide"]
