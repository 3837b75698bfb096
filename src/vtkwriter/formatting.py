from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

DEFAULT_PRECISION = 10


@dataclass(frozen=True)
class NumberFormat:
    """Fixed-point number formatting independent of any process locale.

    Python's format mini-language always uses "." as decimal separator and no
    digit grouping unless asked, so the format string below is the whole locale.
    """

    precision: int = DEFAULT_PRECISION

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError("precision must be non-negative.")

    @property
    def format_spec(self) -> str:
        return f".{self.precision}f"

    def scalar(self, value: float) -> str:
        return format(float(value), self.format_spec)

    def triple(self, values: Iterable[float]) -> str:
        return " ".join(self.scalar(v) for v in values)

