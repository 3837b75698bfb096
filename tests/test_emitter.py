from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from vtkwriter import VtkWriter
from vtkwriter._config import WriterSettings


def _filled(writer: VtkWriter, points) -> VtkWriter:
    writer.header_polydata()
    writer.insert_points(points)
    writer.build_hemisphere(3, 4)
    writer.point_attributes(points[:, 2], "height")
    return writer


def test_write_forces_vtk_extension(tmp_path: Path, writer: VtkWriter, dome_points):
    _filled(writer, dome_points)
    written = writer.write_to_file(tmp_path / "scan.txt")

    assert written == tmp_path / "scan.vtk"
    assert not (tmp_path / "scan.txt").exists()
    assert written.read_text(encoding="ascii") == writer.get_file_content()


def test_write_without_suffix_gets_one(tmp_path: Path, writer: VtkWriter, dome_points):
    _filled(writer, dome_points)
    assert writer.write_to_file(tmp_path / "scan") == tmp_path / "scan.vtk"


def test_write_keeps_extension_when_not_forced(tmp_path: Path, dome_points):
    writer = VtkWriter("scan", settings=WriterSettings(force_default_file_extension=False))
    _filled(writer, dome_points)
    written = writer.write_to_file(tmp_path / "scan.txt")
    assert written == tmp_path / "scan.txt"
    assert written.read_text().startswith("# vtk DataFile Version 3.1\nscan\nASCII\n")


def test_empty_document_is_not_written(tmp_path: Path, writer: VtkWriter):
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    writer.insert_points(np.zeros((3, 3)))
    assert writer.write_to_file(out_dir / "nothing.vtk") is None
    assert list(out_dir.iterdir()) == []


def test_write_creates_parent_directories(tmp_path: Path, writer: VtkWriter, dome_points):
    _filled(writer, dome_points)
    written = writer.write_to_file(tmp_path / "runs" / "2026" / "dome.vtk")
    assert written.exists()


def test_write_uses_unix_newlines(tmp_path: Path, writer: VtkWriter, dome_points):
    _filled(writer, dome_points)
    raw = writer.write_to_file(tmp_path / "dome.vtk").read_bytes()
    assert b"\r\n" not in raw


def test_precision_from_settings(tmp_path: Path):
    writer = VtkWriter("coarse", settings=WriterSettings(precision=4))
    writer.header_polydata()
    writer.insert_points([(1.0, 2.0, 3.0)])
    assert "POINTS 1 DOUBLE\n1.0000 2.0000 3.0000\n" in writer.get_file_content()


def test_write_is_logged(tmp_path: Path, writer: VtkWriter, dome_points, caplog):
    _filled(writer, dome_points)
    with caplog.at_level(logging.INFO, logger="vtkwriter"):
        writer.write_to_file(tmp_path / "dome.vtk")
    assert "Wrote" in caplog.text
    assert "13 points" in caplog.text


def test_rejected_calls_are_logged(writer: VtkWriter, caplog):
    with caplog.at_level(logging.DEBUG, logger="vtkwriter"):
        writer.insert_points([])
    assert "empty_input" in caplog.text


def test_written_file_matches_document_for_non_ascii_title(tmp_path: Path, dome_points):
    writer = VtkWriter("Kugel Ø 5 mm, 20 °C", settings=WriterSettings())
    _filled(writer, dome_points)
    written = writer.write_to_file(tmp_path / "kugel.vtk")
    assert written.read_text(encoding="ascii") == writer.get_file_content()
    assert writer.get_file_content().splitlines()[1] == "Kugel ? 5 mm, 20 ?C"
