"""Example: export a simulated hemisphere scan with form deviations."""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np

from vtkwriter import VtkWriter
from vtkwriter.logging_config import setup_logging
from vtkwriter.topology import hemisphere_points

N_THETA = 12
M_PHI = 36
RADIUS = 5.0


def build(output: Path) -> Path | None:
    """Write a dome whose radius wobbles slightly with azimuth."""

    nominal = hemisphere_points(N_THETA, M_PHI, radius=RADIUS)
    directions = nominal / RADIUS
    azimuth = np.arctan2(nominal[:, 1], nominal[:, 0])
    deviation = 0.002 * np.cos(3.0 * azimuth) * np.hypot(directions[:, 0], directions[:, 1])
    measured = nominal + directions * deviation[:, np.newaxis]

    writer = VtkWriter("Simulated sphere scan, trefoil form error")
    writer.header_polydata().unwrap()
    writer.insert_points(measured).unwrap()
    writer.build_hemisphere(N_THETA, M_PHI).unwrap()
    writer.point_scalars(deviation, "radial deviation").unwrap()
    writer.point_vectors(directions * deviation[:, np.newaxis], "deviation vector").unwrap()
    return writer.write_to_file(output)


if __name__ == "__main__":
    setup_logging()
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("hemisphere_scan.vtk")
    build(target)
