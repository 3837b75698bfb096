"""Incremental builder for legacy ASCII VTK documents.

Usage:
    1. create a ``VtkWriter`` with the document title
    2. fill the parts in any order: header, points, topology, point and cell
       attributes (points must come before anything that needs their count)
    3. call ``get_file_content()`` or ``write_to_file(path)``

Every builder call returns a ``Result``; a failed call never changes the writer.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import numpy as np

from vtkwriter._config import WriterSettings, get_writer_settings
from vtkwriter.formatting import NumberFormat
from vtkwriter.geometry import as_scalars, as_triples
from vtkwriter.result import FailureKind, Result
from vtkwriter.sections import (
    AttributeSection,
    DatasetType,
    HeaderSection,
    PointsSection,
    PolygonSection,
    ScalarField,
    Section,
    VectorField,
)
from vtkwriter.titles import sanitize_field_name, sanitize_title
from vtkwriter.topology import hemisphere_cells, hemisphere_point_count

logger = logging.getLogger(__name__)

FILE_SIGNATURE = "# vtk DataFile Version 3.1"
ENCODING_MARKER = "ASCII"
DEFAULT_EXTENSION = ".vtk"


def _fail(kind: FailureKind, message: str) -> Result:
    logger.debug("VTK writer call rejected (%s): %s", kind.value, message)
    return Result.fail(kind, message)


class VtkWriter:
    """Collect the sections of one legacy VTK document and assemble them."""

    def __init__(
        self,
        title: str,
        settings: WriterSettings | None = None,
        number_format: NumberFormat | None = None,
    ) -> None:
        self._settings = settings or get_writer_settings()
        self.number_format = number_format or NumberFormat(precision=self._settings.precision)
        self.force_default_file_extension = self._settings.force_default_file_extension
        self.title = sanitize_title(title)
        self._header = HeaderSection()
        self._points = PointsSection()
        self._polygons = PolygonSection()
        self._point_data = AttributeSection("POINT_DATA")
        self._cell_data = AttributeSection("CELL_DATA")

    @property
    def dataset_type(self) -> DatasetType:
        return self._header.dataset_type

    @property
    def point_count(self) -> int | None:
        return self._points.count

    @property
    def grid_point_count(self) -> int | None:
        return self._header.grid_point_count

    @property
    def cell_count(self) -> int | None:
        if self._polygons.cells is not None:
            return self._polygons.cells.n_cells
        return self._header.grid_cell_count

    @property
    def sections(self) -> tuple[Section, ...]:
        return (self._header, self._points, self._polygons, self._point_data, self._cell_data)

    def set_header(
        self,
        dataset_type: DatasetType,
        dimensions: tuple[int, int, int] | None = None,
    ) -> Result:
        if self._header.is_populated:
            return _fail(FailureKind.ALREADY_SET, "only a single DATASET header is allowed")
        if dataset_type is DatasetType.UNSET:
            return _fail(FailureKind.INVALID_ARGUMENT, "a dataset type must be chosen")
        if dataset_type is DatasetType.STRUCTURED_GRID:
            if dimensions is None or len(dimensions) != 3:
                return _fail(FailureKind.INVALID_ARGUMENT, "a structured grid needs three dimensions")
            if any(int(d) < 1 for d in dimensions):
                return _fail(FailureKind.INVALID_ARGUMENT, f"grid dimensions must be positive, got {dimensions}")
            dimensions = (int(dimensions[0]), int(dimensions[1]), int(dimensions[2]))
        else:
            dimensions = None

        self._header.dataset_type = dataset_type
        self._header.dimensions = dimensions
        return Result.success()

    def header_polydata(self) -> Result:
        return self.set_header(DatasetType.POLYDATA)

    def header_structured_grid(self, x: int, y: int, z: int = 1) -> Result:
        return self.set_header(DatasetType.STRUCTURED_GRID, (x, y, z))

    def insert_points(self, points: Iterable | np.ndarray) -> Result:
        if self._points.is_populated:
            return _fail(FailureKind.ALREADY_SET, "points were already inserted")
        arr = as_triples(points)
        if arr is None:
            return _fail(FailureKind.INVALID_ARGUMENT, "points must be given as (x, y, z) triples")
        if arr.shape[0] == 0:
            return _fail(FailureKind.EMPTY_INPUT, "no points provided")

        self._points.points = arr
        return Result.success(arr.shape[0])

    def build_hemisphere(self, n_theta: int, m_phi: int) -> Result:
        """Add POLYGONS for a hemisphere of n_theta rings and m_phi sectors.

        The points must already be inserted apex first, then ring by ring with
        the sectors in the same order on every ring. Fewer than three sectors
        are refused even when the point count fits, since the apex cap would
        collapse into repeated or overlapping triangles.
        """

        if self.point_count is None:
            return _fail(FailureKind.MISSING_PREREQUISITE, "insert points before building topology")
        if self._polygons.is_populated:
            return _fail(FailureKind.ALREADY_SET, "topology was already built")
        if n_theta < 1 or m_phi < 3:
            return _fail(
                FailureKind.INVALID_ARGUMENT,
                f"need n_theta >= 1 and m_phi >= 3, got n_theta={n_theta}, m_phi={m_phi}",
            )
        expected = hemisphere_point_count(n_theta, m_phi)
        if expected != self.point_count:
            return _fail(
                FailureKind.COUNT_MISMATCH,
                f"{n_theta} rings x {m_phi} sectors + apex needs {expected} points, have {self.point_count}",
            )
        cells = hemisphere_cells(n_theta, m_phi)
        if self._cell_data.is_populated and self._cell_data.count != cells.n_cells:
            return _fail(
                FailureKind.COUNT_MISMATCH,
                f"cell data already describes {self._cell_data.count} cells, hemisphere has {cells.n_cells}",
            )

        self._polygons.cells = cells
        return Result.success(cells.n_cells)

    def point_attributes(self, values, title: str) -> Result:
        """Decorate the points with a scalar (1-D) or vector ((n, 3)) field."""

        return self._add_attribute(self._point_data, self.point_count, values, title, kind=None)

    def point_scalars(self, values, title: str) -> Result:
        return self._add_attribute(self._point_data, self.point_count, values, title, kind="scalars")

    def point_vectors(self, values, title: str) -> Result:
        return self._add_attribute(self._point_data, self.point_count, values, title, kind="vectors")

    def cell_attributes(self, values, title: str) -> Result:
        """Decorate the cells with a scalar (1-D) or vector ((n, 3)) field."""

        return self._add_attribute(self._cell_data, self.cell_count, values, title, kind=None)

    def cell_scalars(self, values, title: str) -> Result:
        return self._add_attribute(self._cell_data, self.cell_count, values, title, kind="scalars")

    def cell_vectors(self, values, title: str) -> Result:
        return self._add_attribute(self._cell_data, self.cell_count, values, title, kind="vectors")

    def _add_attribute(
        self,
        section: AttributeSection,
        count: int | None,
        values,
        title: str,
        kind: str | None,
    ) -> Result:
        target = "points" if section is self._point_data else "cells"
        if count is None:
            return _fail(FailureKind.MISSING_PREREQUISITE, f"the number of {target} is not known yet")

        name = sanitize_field_name(title)
        if not name:
            return _fail(FailureKind.INVALID_ARGUMENT, "attribute title must not be empty")
        if section.has_field(name):
            return _fail(FailureKind.ALREADY_SET, f"{section.keyword} already holds a field named {name!r}")

        if not isinstance(values, np.ndarray):
            # read one-shot iterables once; both shape checks need them
            try:
                values = list(values)
            except TypeError:
                return _fail(FailureKind.INVALID_ARGUMENT, f"{name}: values must be iterable")
        item = self._coerce_field(name, values, kind)
        if item is None:
            return _fail(FailureKind.INVALID_ARGUMENT, f"{name}: values must be scalars or (x, y, z) triples")
        length = item.values.shape[0]
        if length == 0:
            return _fail(FailureKind.EMPTY_INPUT, f"{name}: no values provided")
        if length != count:
            return _fail(FailureKind.COUNT_MISMATCH, f"{name}: {length} values for {count} {target}")

        section.add(item, count)
        return Result.success(name)

    @staticmethod
    def _coerce_field(name: str, values, kind: str | None) -> ScalarField | VectorField | None:
        if kind != "vectors":
            scalars = as_scalars(values)
            if scalars is not None:
                return ScalarField(name, scalars)
            if kind == "scalars":
                return None
        vectors = as_triples(values)
        if vectors is None:
            return None
        return VectorField(name, vectors)

    def finalize(self) -> Result:
        """Check cross-section consistency and return the document text."""

        if not self._header.is_populated:
            return _fail(FailureKind.MISSING_PREREQUISITE, "no DATASET header was set")
        if not self._points.is_populated:
            return _fail(FailureKind.MISSING_PREREQUISITE, "no points were inserted")
        grid_count = self.grid_point_count
        if grid_count is not None and grid_count != self.point_count:
            return _fail(
                FailureKind.COUNT_MISMATCH,
                f"grid dimensions describe {grid_count} points, {self.point_count} were inserted",
            )

        lines = [FILE_SIGNATURE, self.title, ENCODING_MARKER]
        for section in self.sections:
            lines.extend(section.render(self.number_format))
        return Result.success("".join(line + "\n" for line in lines))

    def get_file_content(self) -> str:
        result = self.finalize()
        return result.value if result else ""

    def output_path(self, path: str | Path) -> Path:
        path = Path(path)
        if self.force_default_file_extension:
            return path.with_suffix(DEFAULT_EXTENSION)
        return path

    def write_to_file(self, path: str | Path) -> Path | None:
        """Write the document to path; returns None when there is nothing to write."""

        content = self.get_file_content()
        if not content:
            logger.info("Nothing to write for %r; skipping %s", self.title, path)
            return None

        final_path = self.output_path(path)
        final_path.parent.mkdir(parents=True, exist_ok=True)
        final_path.write_text(content, encoding="ascii", newline="\n")
        logger.info("Wrote %s (%d points)", final_path, self.point_count)
        return final_path
