from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from retrier.models.stop_strategy import StopStrategy

if TYPE_CHECKING:
    from retrier.stop_strategies.composite import StopAll, StopAny


class Stoppable(ABC):
    @abstractmethod
    def should_stop(self, previous_attempt_number: int, delay_since_first_attempt: int) -> bool: ...

    def __or__(self, other: Any) -> StopAny:
        from retrier.stop_strategies.composite import StopAny  # noqa: PLC0415

        if not isinstance(other, StopStrategy):
            return NotImplemented
        return StopAny((self, other))

    def __ror__(self, other: Any) -> StopAny:
        from retrier.stop_strategies.composite import StopAny  # noqa: PLC0415

        if not isinstance(other, StopStrategy):
            return NotImplemented
        return StopAny((other, self))

    def __and__(self, other: Any) -> StopAll:
        from retrier.stop_strategies.composite import StopAll  # noqa: PLC0415

        if not isinstance(other, StopStrategy):
            return NotImplemented
        return StopAll((self, other))

    def __rand__(self, other: Any) -> StopAll:
        from retrier.stop_strategies.composite import StopAll  # noqa: PLC0415

        if not isinstance(other, StopStrategy):
            return NotImplemented
        return StopAll((other, self))
