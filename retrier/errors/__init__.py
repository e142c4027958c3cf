from __future__ import annotations

from .errors import InvalidArgumentError, RetrierError

__all__ = ["InvalidArgumentError", "RetrierError"]
