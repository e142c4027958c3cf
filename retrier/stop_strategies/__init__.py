from __future__ import annotations

from typing import TYPE_CHECKING

from typing_extensions import TypeAlias  # noqa: UP035

from retrier.errors import InvalidArgumentError
from retrier.logging import logger

from .attempt import StopAfterAttempt
from .composite import StopAll, StopAny, check_strategy
from .delay import StopAfterDelay
from .never import NEVER_STOP, NeverStop

if TYPE_CHECKING:
    from retrier.models.stop_strategy import StopStrategy

BuiltinStopStrategy: TypeAlias = NeverStop | StopAfterAttempt | StopAfterDelay | StopAny | StopAll


def never_stop() -> NeverStop:
    """Return the shared strategy that never stops retrying."""
    return NEVER_STOP


def stop_after_attempt(attempt_number: int) -> StopAfterAttempt:
    """Return a strategy that stops after `attempt_number` failed attempts.

    Raises InvalidArgumentError if `attempt_number` is lower than 1.
    """
    strategy = StopAfterAttempt(max_attempt_number=attempt_number)
    logger.debug("created %s", strategy)
    return strategy


def stop_after_delay(delay_millis: int) -> StopAfterDelay:
    """Return a strategy that stops once `delay_millis` have elapsed since the first attempt.

    Raises InvalidArgumentError if `delay_millis` is negative.
    """
    strategy = StopAfterDelay(max_delay=delay_millis)
    logger.debug("created %s", strategy)
    return strategy


def stop_any(*strategies: StopStrategy) -> StopStrategy:
    """Return a strategy that stops when any of `strategies` stops."""
    if not strategies:
        raise InvalidArgumentError("strategies", strategies, "non-empty")
    if len(strategies) == 1:
        check_strategy(strategies[0])
        return strategies[0]
    strategy = StopAny(strategies)
    logger.debug("created %s", strategy)
    return strategy


def stop_all(*strategies: StopStrategy) -> StopStrategy:
    """Return a strategy that stops only when all of `strategies` stop."""
    if not strategies:
        raise InvalidArgumentError("strategies", strategies, "non-empty")
    if len(strategies) == 1:
        check_strategy(strategies[0])
        return strategies[0]
    strategy = StopAll(strategies)
    logger.debug("created %s", strategy)
    return strategy


__all__ = [
    "NEVER_STOP",
    "BuiltinStopStrategy",
    "NeverStop",
    "StopAfterAttempt",
    "StopAfterDelay",
    "StopAll",
    "StopAny",
    "never_stop",
    "stop_after_attempt",
    "stop_after_delay",
    "stop_all",
    "stop_any",
]
