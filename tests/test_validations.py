from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from retrier import Options
from retrier.errors import InvalidArgumentError
from retrier.stop_strategies import StopAfterAttempt, StopAfterDelay, stop_after_attempt, stop_after_delay

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.mark.parametrize(
    "check",
    [
        lambda: stop_after_attempt(0),
        lambda: stop_after_attempt(-1),
        lambda: stop_after_delay(-1),
        lambda: StopAfterAttempt(0),
        lambda: StopAfterDelay(-1),
        lambda: Options(max_attempts=0),
        lambda: Options(max_delay=-1),
        lambda: Options().merge(max_attempts=0),
        lambda: Options().merge(max_delay=-1),
    ],
)
def test_validations(check: Callable[[], None]) -> None:
    with pytest.raises(InvalidArgumentError):
        check()


@pytest.mark.parametrize(
    "check",
    [
        lambda: stop_after_attempt("1"),
        lambda: stop_after_delay(1.0),
        lambda: Options(max_attempts=True),
        lambda: Options(max_delay="10"),
    ],
)
def test_type_validations(check: Callable[[], None]) -> None:
    with pytest.raises(TypeError):
        check()
