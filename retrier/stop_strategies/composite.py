from __future__ import annotations

from dataclasses import dataclass
from typing import Any, final

from retrier.errors import InvalidArgumentError
from retrier.models.stop_strategy import StopStrategy
from retrier.stop_strategies.base import Stoppable


def check_strategy(strategy: Any) -> None:
    if not isinstance(strategy, StopStrategy):
        raise InvalidArgumentError("strategies", strategy, "a stop strategy")


def _check_strategies(strategies: Any) -> None:
    if not isinstance(strategies, tuple):
        msg = f"strategies must be `tuple`, got {type(strategies).__name__}"
        raise TypeError(msg)
    if not strategies:
        raise InvalidArgumentError("strategies", strategies, "non-empty")
    for s in strategies:
        check_strategy(s)


@final
@dataclass(frozen=True)
class StopAny(Stoppable):
    """Stops as soon as any of its strategies would stop."""

    strategies: tuple[StopStrategy, ...]

    def __post_init__(self) -> None:
        _check_strategies(self.strategies)

    def should_stop(self, previous_attempt_number: int, delay_since_first_attempt: int) -> bool:
        return any(s.should_stop(previous_attempt_number, delay_since_first_attempt) for s in self.strategies)


@final
@dataclass(frozen=True)
class StopAll(Stoppable):
    """Stops only when every one of its strategies would stop."""

    strategies: tuple[StopStrategy, ...]

    def __post_init__(self) -> None:
        _check_strategies(self.strategies)

    def should_stop(self, previous_attempt_number: int, delay_since_first_attempt: int) -> bool:
        return all(s.should_stop(previous_attempt_number, delay_since_first_attempt) for s in self.strategies)
