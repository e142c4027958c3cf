from __future__ import annotations

from dataclasses import dataclass
from typing import final

from retrier.stop_strategies.base import Stoppable
from retrier.utils import check_int


@final
@dataclass(frozen=True)
class StopAfterDelay(Stoppable):
    """A stop strategy that gives up once the time since the first attempt reaches max_delay.

    Both max_delay and the elapsed delay are expressed in milliseconds.
    """

    max_delay: int

    def __post_init__(self) -> None:
        check_int("max_delay", self.max_delay, 0)

    def should_stop(self, previous_attempt_number: int, delay_since_first_attempt: int) -> bool:  # noqa: ARG002
        return delay_since_first_attempt >= self.max_delay
