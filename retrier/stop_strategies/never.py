from __future__ import annotations

from dataclasses import dataclass
from typing import final

from retrier.stop_strategies.base import Stoppable


@final
@dataclass(frozen=True)
class NeverStop(Stoppable):
    """A stop strategy that keeps retrying forever."""

    def should_stop(self, previous_attempt_number: int, delay_since_first_attempt: int) -> bool:  # noqa: ARG002
        return False


NEVER_STOP = NeverStop()
