"""Tagged per-stage results for the aggregation pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .errors import UpstreamError

T = TypeVar("T")


@dataclass(frozen=True)
class StageResult(Generic[T]):
    """Outcome of one pipeline stage: a value or the upstream error.

    Stages never decide whether a failure is fatal. The orchestrator calls
    ``unwrap()`` on mandatory stages and ``unwrap_or()`` on best-effort ones.
    """

    stage: str
    value: Optional[T] = None
    error: Optional[UpstreamError] = None

    @classmethod
    def success(cls, stage: str, value: T) -> "StageResult[T]":
        return cls(stage=stage, value=value)

    @classmethod
    def failure(cls, stage: str, error: UpstreamError) -> "StageResult[T]":
        return cls(stage=stage, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        if self.error is not None or self.value is None:
            return default
        return self.value
