from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Iterable, Iterator, Sequence, Union

import numpy as np


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))


@dataclass(frozen=True)
class Vector:
    """A field value with three components, as opposed to a position."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))


TripleLike = Union[Point, Vector, Sequence[float]]


def as_triples(values: Iterable[TripleLike] | np.ndarray) -> np.ndarray | None:
    """Return values as a float array of shape (n, 3), or None if they do not fit."""

    try:
        arr = np.asarray([tuple(v) for v in values] if not isinstance(values, np.ndarray) else values, dtype=float)
    except (TypeError, ValueError):
        return None
    if arr.size == 0:
        return np.zeros((0, 3), dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 3:
        return None
    return arr.copy()


def as_scalars(values: Iterable[float] | np.ndarray) -> np.ndarray | None:
    try:
        arr = np.asarray(values if isinstance(values, np.ndarray) else list(values), dtype=float)
    except (TypeError, ValueError):
        return None
    if arr.ndim != 1:
        return None
    return arr.copy()
