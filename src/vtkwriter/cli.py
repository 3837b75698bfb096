from __future__ import annotations

import logging
import pathlib

import numpy as np
import typer
from rich.console import Console
from rich.panel import Panel

from vtkwriter.logging_config import setup_logging
from vtkwriter.result import Result
from vtkwriter.topology import hemisphere_points
from vtkwriter.writer import VtkWriter

console = Console()
app = typer.Typer(help="Write point clouds and hemisphere scans as legacy VTK files.")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log writer diagnostics.")) -> None:
    setup_logging(logging.DEBUG if verbose else logging.WARNING, console=Console(stderr=True))


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


def _load_table(path: pathlib.Path) -> np.ndarray:
    if not path.exists():
        raise typer.BadParameter(f"Point file {path} does not exist.")
    try:
        table = np.loadtxt(path, dtype=float, comments="#", ndmin=2)
    except ValueError as exc:
        raise typer.BadParameter(f"Unable to parse {path}: {exc}") from exc
    if table.shape[1] < 3:
        raise typer.BadParameter(f"{path} needs at least three columns (x y z), found {table.shape[1]}.")
    return table


def _check(result: Result, action: str) -> None:
    if not result:
        raise typer.BadParameter(f"Cannot {action}: {result.message} ({result.failure.value}).")


def _add_extra_columns(writer: VtkWriter, table: np.ndarray) -> None:
    for column in range(3, table.shape[1]):
        _check(writer.point_scalars(table[:, column], f"column {column + 1}"), f"add column {column + 1}")


def _emit(writer: VtkWriter, output: pathlib.Path, overwrite: bool) -> None:
    final_output = writer.output_path(output)
    if final_output.exists() and not overwrite:
        free = _next_available_path(final_output)
        console.print(f"[yellow]Output {final_output} exists; writing to {free} instead.[/yellow]")
        final_output = free

    result = writer.finalize()
    _check(result, "assemble the document")
    written = writer.write_to_file(final_output)
    console.print(
        Panel(
            f"Wrote {writer.point_count} points to [green]{written}[/green].",
            title="Export complete",
            border_style="green",
        )
    )


@app.command()
def hemisphere(
    points: pathlib.Path = typer.Argument(..., help="Whitespace separated x y z rows, apex first, ring by ring."),
    n_theta: int = typer.Option(..., "--n-theta", min=1, help="Number of rings below the apex."),
    m_phi: int = typer.Option(..., "--m-phi", min=3, help="Number of sectors per ring."),
    output: pathlib.Path = typer.Option(pathlib.Path("hemisphere.vtk"), "--output", "-o", help="VTK file to produce."),
    title: str = typer.Option("", "--title", help="Title stored in the file."),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing file."),
) -> None:
    """
    Convert a hemisphere scan into a POLYDATA file with ring/sector polygons.
    Columns after x y z are stored as point scalars.
    """

    table = _load_table(points)
    writer = VtkWriter(title or points.stem)
    _check(writer.header_polydata(), "write the header")
    _check(writer.insert_points(table[:, :3]), "insert points")
    _check(writer.build_hemisphere(n_theta, m_phi), "build the hemisphere")
    _add_extra_columns(writer, table)
    _emit(writer, output, overwrite)


@app.command()
def grid(
    points: pathlib.Path = typer.Argument(..., help="Whitespace separated x y z rows in grid order."),
    nx: int = typer.Option(..., "--nx", min=1, help="Grid points along x."),
    ny: int = typer.Option(..., "--ny", min=1, help="Grid points along y."),
    nz: int = typer.Option(1, "--nz", min=1, help="Grid points along z."),
    output: pathlib.Path = typer.Option(pathlib.Path("grid.vtk"), "--output", "-o", help="VTK file to produce."),
    title: str = typer.Option("", "--title", help="Title stored in the file."),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing file."),
) -> None:
    """
    Convert grid samples into a STRUCTURED_GRID file.
    """

    table = _load_table(points)
    writer = VtkWriter(title or points.stem)
    _check(writer.header_structured_grid(nx, ny, nz), "write the header")
    _check(writer.insert_points(table[:, :3]), "insert points")
    _add_extra_columns(writer, table)
    _emit(writer, output, overwrite)


@app.command()
def demo(
    output: pathlib.Path = typer.Option(pathlib.Path("demo.vtk"), "--output", "-o", help="VTK file to produce."),
    n_theta: int = typer.Option(8, "--n-theta", min=1, help="Number of rings below the apex."),
    m_phi: int = typer.Option(24, "--m-phi", min=3, help="Number of sectors per ring."),
    radius: float = typer.Option(1.0, "--radius", help="Hemisphere radius."),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing file."),
) -> None:
    """
    Write a synthetic hemisphere with a height scalar and outward normals.
    """

    if radius <= 0:
        raise typer.BadParameter("Radius must be positive.")
    pts = hemisphere_points(n_theta, m_phi, radius=radius)
    normals = pts / np.linalg.norm(pts, axis=1, keepdims=True)
    writer = VtkWriter(f"Synthetic hemisphere r={radius:g} ({n_theta} rings, {m_phi} sectors)")
    _check(writer.header_polydata(), "write the header")
    _check(writer.insert_points(pts), "insert points")
    _check(writer.build_hemisphere(n_theta, m_phi), "build the hemisphere")
    _check(writer.point_scalars(pts[:, 2], "height"), "add heights")
    _check(writer.point_vectors(normals, "normal"), "add normals")
    _emit(writer, output, overwrite)
