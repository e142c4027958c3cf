from __future__ import annotations

from .errors import InvalidArgumentError, RetrierError
from .models.stop_strategy import StopStrategy
from .options import Options
from .stop_strategies import never_stop, stop_after_attempt, stop_after_delay, stop_all, stop_any

__all__ = [
    "InvalidArgumentError",
    "Options",
    "RetrierError",
    "StopStrategy",
    "never_stop",
    "stop_after_attempt",
    "stop_after_delay",
    "stop_all",
    "stop_any",
]
