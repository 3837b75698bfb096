from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

Cell = tuple[int, ...]


@dataclass(frozen=True)
class PolygonCells:
    """Polygon connectivity as written to a POLYGONS block."""

    cells: tuple[Cell, ...]

    @property
    def n_cells(self) -> int:
        return len(self.cells)

    @property
    def n_tokens(self) -> int:
        # one vertex-count token per cell plus its indices
        return sum(len(cell) + 1 for cell in self.cells)

    def edge_counts(self) -> dict[tuple[int, int], int]:
        counts: dict[tuple[int, int], int] = {}
        for cell in self.cells:
            for k, a in enumerate(cell):
                b = cell[(k + 1) % len(cell)]
                key = (a, b) if a < b else (b, a)
                counts[key] = counts.get(key, 0) + 1
        return counts

    @property
    def boundary_edges(self) -> int:
        return sum(1 for count in self.edge_counts().values() if count == 1)

    @property
    def nonmanifold_edges(self) -> int:
        return sum(1 for count in self.edge_counts().values() if count > 2)

    def lines(self) -> list[str]:
        return [" ".join(str(token) for token in (len(cell), *cell)) for cell in self.cells]


def hemisphere_point_count(n_theta: int, m_phi: int) -> int:
    return n_theta * m_phi + 1


def hemisphere_token_count(n_theta: int, m_phi: int) -> int:
    return m_phi * (4 + 5 * (n_theta - 1))


def hemisphere_cells(n_theta: int, m_phi: int) -> PolygonCells:
    """Connectivity of a hemisphere sampled in n_theta rings of m_phi sectors.

    Point 0 is the apex, points 1..m_phi form the ring next to it, and further
    rings follow ring-major in the same sector order. The ordering is a caller
    contract; nothing here can check it.
    """

    if n_theta < 1:
        raise ValueError("n_theta must be at least 1.")
    if m_phi < 3:
        raise ValueError("m_phi must be at least 3.")

    cells: list[Cell] = []
    for i in range(1, m_phi + 1):
        cells.append((0, i, (i % m_phi) + 1))

    for j in range(2, n_theta + 1):
        for i in range(1, m_phi + 1):
            a = i + (j - 2) * m_phi
            b = i + (j - 1) * m_phi
            c = b + 1
            d = a + 1
            if i == m_phi:
                c -= m_phi
                d -= m_phi
            cells.append((a, b, c, d))
    return PolygonCells(cells=tuple(cells))


def hemisphere_points(
    n_theta: int,
    m_phi: int,
    radius: float = 1.0,
    center: Sequence[float] = (0.0, 0.0, 0.0),
) -> np.ndarray:
    """Sample a hemisphere in the point order hemisphere_cells expects.

    The apex sits on +z; ring n_theta lies on the equator.
    """

    if n_theta < 1:
        raise ValueError("n_theta must be at least 1.")
    if m_phi < 3:
        raise ValueError("m_phi must be at least 3.")

    thetas = np.arange(1, n_theta + 1, dtype=float) * (np.pi / 2.0) / n_theta
    phis = np.arange(m_phi, dtype=float) * (2.0 * np.pi) / m_phi
    theta_grid, phi_grid = np.meshgrid(thetas, phis, indexing="ij")
    rings = np.column_stack(
        [
            (np.sin(theta_grid) * np.cos(phi_grid)).ravel(),
            (np.sin(theta_grid) * np.sin(phi_grid)).ravel(),
            np.cos(theta_grid).ravel(),
        ]
    )
    points = np.vstack([np.array([[0.0, 0.0, 1.0]]), rings]) * radius
    return points + np.asarray(center, dtype=float).reshape(3)


def to_pyvista(points: np.ndarray, cells: PolygonCells):
    import pyvista as pv

    points = np.asarray(points, dtype=float).reshape(-1, 3)
    if cells.n_cells == 0:
        return pv.PolyData(points, deep=True)
    faces = np.hstack([np.array([len(cell), *cell], dtype=np.int64) for cell in cells.cells])
    return pv.PolyData(points, faces, deep=True)
