"""Section objects of a legacy VTK document.

Each section keeps the data it was given and renders its lines on demand. A
section that is not populated renders nothing, so the assembler can simply
concatenate them in file order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

import numpy as np

from vtkwriter.formatting import NumberFormat
from vtkwriter.topology import PolygonCells

LOOKUP_TABLE_NAME = "custom_table"


class DatasetType(str, Enum):
    UNSET = "UNSET"
    POLYDATA = "POLYDATA"
    STRUCTURED_GRID = "STRUCTURED_GRID"


class Section(Protocol):
    @property
    def is_populated(self) -> bool: ...

    def render(self, number_format: NumberFormat) -> list[str]: ...


@dataclass
class HeaderSection:
    dataset_type: DatasetType = DatasetType.UNSET
    dimensions: tuple[int, int, int] | None = None

    @property
    def is_populated(self) -> bool:
        return self.dataset_type is not DatasetType.UNSET

    @property
    def grid_point_count(self) -> int | None:
        if self.dimensions is None:
            return None
        x, y, z = self.dimensions
        return x * y * z

    @property
    def grid_cell_count(self) -> int | None:
        if self.dimensions is None:
            return None
        count = 1
        for dim in self.dimensions:
            count *= max(dim - 1, 1)
        return count

    def render(self, number_format: NumberFormat) -> list[str]:
        if not self.is_populated:
            return []
        lines = [f"DATASET {self.dataset_type.value}"]
        if self.dimensions is not None:
            lines.append("DIMENSIONS {} {} {}".format(*self.dimensions))
        lines.append("")
        return lines


@dataclass
class PointsSection:
    points: np.ndarray | None = None

    @property
    def is_populated(self) -> bool:
        return self.points is not None

    @property
    def count(self) -> int | None:
        return None if self.points is None else int(self.points.shape[0])

    def render(self, number_format: NumberFormat) -> list[str]:
        if self.points is None:
            return []
        lines = [f"POINTS {self.count} DOUBLE"]
        lines.extend(number_format.triple(p) for p in self.points)
        lines.append("")
        return lines


@dataclass
class PolygonSection:
    cells: PolygonCells | None = None

    @property
    def is_populated(self) -> bool:
        return self.cells is not None

    def render(self, number_format: NumberFormat) -> list[str]:
        if self.cells is None:
            return []
        lines = [f"POLYGONS {self.cells.n_cells} {self.cells.n_tokens}"]
        lines.extend(self.cells.lines())
        lines.append("")
        return lines


@dataclass(frozen=True)
class ScalarField:
    name: str
    values: np.ndarray

    def render(self, number_format: NumberFormat) -> list[str]:
        lines = [f"SCALARS {self.name} DOUBLE", f"LOOKUP_TABLE {LOOKUP_TABLE_NAME}"]
        lines.extend(number_format.scalar(v) for v in self.values)
        lines.append("")
        return lines


@dataclass(frozen=True)
class VectorField:
    name: str
    values: np.ndarray

    def render(self, number_format: NumberFormat) -> list[str]:
        lines = [f"VECTORS {self.name} DOUBLE"]
        lines.extend(number_format.triple(v) for v in self.values)
        lines.append("")
        return lines


@dataclass
class AttributeSection:
    """POINT_DATA or CELL_DATA block holding any number of named fields."""

    keyword: str
    count: int | None = None
    fields: list[ScalarField | VectorField] = field(default_factory=list)

    @property
    def is_populated(self) -> bool:
        return bool(self.fields)

    def has_field(self, name: str) -> bool:
        return any(f.name == name for f in self.fields)

    def add(self, item: ScalarField | VectorField, count: int) -> None:
        self.count = count
        self.fields.append(item)

    def render(self, number_format: NumberFormat) -> list[str]:
        if not self.fields:
            return []
        # the block line must appear only once, however many fields follow
        lines = [f"{self.keyword} {self.count}"]
        for item in self.fields:
            lines.extend(item.render(number_format))
        return lines
