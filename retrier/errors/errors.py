from __future__ import annotations

import json
from typing import Any


class RetrierError(Exception):
    def __init__(self, mesg: str, code: float, details: Any = None) -> None:
        super().__init__(mesg)
        self.mesg = mesg
        self.code = code
        if not details:
            self.details = None
        elif isinstance(details, str):
            self.details = details
        else:
            try:
                self.details = json.dumps(details, indent=2)
            except (TypeError, ValueError):
                self.details = repr(details)

    def __str__(self) -> str:
        newline = "\n"
        return f"[{self.code:03}] {self.mesg}{newline + self.details if self.details else ''}"

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.mesg, self.code, self.details))


# Error codes 100-199


class InvalidArgumentError(RetrierError, ValueError):
    def __init__(self, param: str, value: Any, constraint: str) -> None:
        super().__init__(f"{param} must be {constraint} but is {value!r}", 100)
        self.param = param
        self.value = value
        self.constraint = constraint

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.param, self.value, self.constraint))
