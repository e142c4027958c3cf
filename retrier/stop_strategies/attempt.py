from __future__ import annotations

from dataclasses import dataclass
from typing import final

from retrier.stop_strategies.base import Stoppable
from retrier.utils import check_int


@final
@dataclass(frozen=True)
class StopAfterAttempt(Stoppable):
    """A stop strategy that gives up once a number of attempts have failed."""

    max_attempt_number: int

    def __post_init__(self) -> None:
        check_int("max_attempt_number", self.max_attempt_number, 1)

    def should_stop(self, previous_attempt_number: int, delay_since_first_attempt: int) -> bool:  # noqa: ARG002
        return previous_attempt_number >= self.max_attempt_number
