"""vtkwriter – incremental writer for legacy ASCII VTK files."""

from __future__ import annotations

from vtkwriter.formatting import NumberFormat
from vtkwriter.geometry import Point, Vector
from vtkwriter.result import FailureKind, Result, VtkWriterError
from vtkwriter.sections import DatasetType
from vtkwriter.titles import sanitize_field_name, sanitize_title
from vtkwriter.topology import PolygonCells, hemisphere_cells, hemisphere_points
from vtkwriter.writer import VtkWriter

__all__ = [
    "DatasetType",
    "FailureKind",
    "NumberFormat",
    "Point",
    "PolygonCells",
    "Result",
    "Vector",
    "VtkWriter",
    "VtkWriterError",
    "__version__",
    "hemisphere_cells",
    "hemisphere_points",
    "sanitize_field_name",
    "sanitize_title",
]

__version__ = "0.1.0"
