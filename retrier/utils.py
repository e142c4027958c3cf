from __future__ import annotations

from typing import Any

from retrier.errors import InvalidArgumentError


def check_int(param: str, value: Any, minimum: int) -> int:
    # bool is an int subclass but never a meaningful threshold
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{param} must be `int`, got {type(value).__name__}"
        raise TypeError(msg)
    if not (value >= minimum):
        raise InvalidArgumentError(param, value, f">= {minimum}")
    return value
