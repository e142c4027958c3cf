from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StopStrategy(Protocol):
    def should_stop(self, previous_attempt_number: int, delay_since_first_attempt: int) -> bool: ...
