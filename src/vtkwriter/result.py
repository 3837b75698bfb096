from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class FailureKind(str, Enum):
    ALREADY_SET = "already_set"
    EMPTY_INPUT = "empty_input"
    COUNT_MISMATCH = "count_mismatch"
    MISSING_PREREQUISITE = "missing_prerequisite"
    INVALID_ARGUMENT = "invalid_argument"


class VtkWriterError(RuntimeError):
    """Raised by Result.unwrap() when a writer call did not succeed."""

    def __init__(self, kind: FailureKind, message: str) -> None:
        super().__init__(f"{kind.value}: {message}")
        self.kind = kind


@dataclass(frozen=True)
class Result:
    """Outcome of a writer call.

    Truthy on success. A failed result carries the failure kind and a short
    human readable message; the writer is left untouched in that case.
    """

    failure: FailureKind | None = None
    message: str = ""
    value: Any = None

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: FailureKind, message: str) -> "Result":
        return cls(failure=kind, message=message)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> Any:
        if self.failure is not None:
            raise VtkWriterError(self.failure, self.message)
        return self.value
