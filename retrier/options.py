from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from retrier.errors import InvalidArgumentError
from retrier.logging import configure, logger, resolve_level
from retrier.stop_strategies import StopAny, never_stop, stop_after_attempt, stop_after_delay
from retrier.utils import check_int

if TYPE_CHECKING:
    from collections.abc import Mapping

    from retrier.stop_strategies import BuiltinStopStrategy


@dataclass(frozen=True)
class Options:
    max_attempts: int | None = None
    max_delay: int | None = None  # milliseconds since the first attempt
    log_level: int | str | None = None

    def __post_init__(self) -> None:
        if self.max_attempts is not None:
            check_int("max_attempts", self.max_attempts, 1)
        if self.max_delay is not None:
            check_int("max_delay", self.max_delay, 0)
        if self.log_level is not None:
            resolve_level(self.log_level)

    def merge(self, *, max_attempts: int | None = None, max_delay: int | None = None, log_level: int | str | None = None) -> Options:
        return Options(
            max_attempts=max_attempts if max_attempts is not None else self.max_attempts,
            max_delay=max_delay if max_delay is not None else self.max_delay,
            log_level=log_level if log_level is not None else self.log_level,
        )

    def get_stop_strategy(self) -> BuiltinStopStrategy:
        strategies: list[BuiltinStopStrategy] = []
        if self.max_attempts is not None:
            strategies.append(stop_after_attempt(self.max_attempts))
        if self.max_delay is not None:
            strategies.append(stop_after_delay(self.max_delay))

        match strategies:
            case []:
                return never_stop()
            case [strategy]:
                return strategy
            case _:
                return StopAny(tuple(strategies))

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Options:
        """Read RETRIER_MAX_ATTEMPTS, RETRIER_MAX_DELAY_MS and RETRIER_LOG_LEVEL.

        A non-empty RETRIER_LOG_LEVEL also turns on stderr logging at that level.
        """
        env = os.environ if env is None else env
        opts = cls(
            max_attempts=_int_from_env(env, "RETRIER_MAX_ATTEMPTS"),
            max_delay=_int_from_env(env, "RETRIER_MAX_DELAY_MS"),
            log_level=env.get("RETRIER_LOG_LEVEL", "").strip() or None,
        )
        if opts.log_level is not None:
            configure(opts.log_level)
        logger.debug("loaded %s from environment", opts)
        return opts


def _int_from_env(env: Mapping[str, str], name: str) -> int | None:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgumentError(name, raw, "an integer") from None
