#!/usr/bin/env python3
"""SurfMesh Command-Line Interface"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from surfmesh import __version__
from surfmesh.catalog import get_available_surfaces, get_surface, create_surface
from surfmesh.exceptions import SurfMeshException
from surfmesh.exporters import get_exporter
from surfmesh.utils.logging import configure_logging

logger = logging.getLogger(__name__)

surfmesh_theme = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "path": "blue",
})

console = Console(theme=surfmesh_theme)

app = typer.Typer(
    help="SurfMesh Command Line Interface - Triangulate height-field and parametric surfaces",
    add_completion=False
)


class ExportFormat(str, Enum):
    """Supported export formats."""
    OBJ = "obj"
    STL = "stl"
    PLY = "ply"


def print_error(message: str) -> None:
    console.print(f"[error]Error:[/error] {message}")


def print_success(message: str) -> None:
    console.print(f"[success]{message}[/success]")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    """Configure logging for every command."""
    configure_logging(verbose)


@app.command(name="version", help="Show surfmesh version")
def version_command():
    console.print(f"surfmesh {__version__}")


@app.command(name="list", help="List catalog surfaces")
def list_command():
    table = Table(title="Catalog Surfaces", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Kind", style="green")
    table.add_column("Boundary", style="yellow")
    table.add_column("Description")

    for name in get_available_surfaces():
        entry = get_surface(name)
        table.add_row(entry.name, entry.kind, str(list(entry.boundary)), entry.description)

    console.print(table)


@app.command(name="info", help="Build a catalog surface and show mesh statistics")
def info_command(
    name: str = typer.Argument(..., help="Catalog surface name"),
    slices: Optional[int] = typer.Option(None, "--slices", "-s", help="Grid resolution"),
):
    try:
        surface = create_surface(name, **_build_options(slices))
    except SurfMeshException as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    table = Table(title=f"Mesh: {name}", show_header=True)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Kind", surface.sampler.kind)
    table.add_row("Boundary", str(surface.boundary.as_list()))
    for key, value in surface.buffers.stats().items():
        table.add_row(key.replace('_', ' ').title(), str(value))

    console.print(table)


@app.command(name="export", help="Build a catalog surface and write it to a mesh file")
def export_command(
    name: str = typer.Argument(..., help="Catalog surface name"),
    output: Path = typer.Argument(..., help="Output file"),
    fmt: ExportFormat = typer.Option(ExportFormat.OBJ, "--format", "-f", help="Output format"),
    slices: Optional[int] = typer.Option(None, "--slices", "-s", help="Grid resolution"),
    ascii_stl: bool = typer.Option(False, "--ascii", help="Use the ASCII variant where available"),
    single_sided: bool = typer.Option(False, "--single-sided", help="Emit one winding per triangle"),
):
    try:
        surface = create_surface(name, double_sided=not single_sided, **_build_options(slices))
        exporter = get_exporter(fmt.value)
        written = exporter.export(surface.buffers, str(output), binary=not ascii_stl)
    except SurfMeshException as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_success(f"Exported {surface.buffers.triangle_count} triangles to {written}")


@app.command(name="plot", help="Render a catalog surface preview image with matplotlib")
def plot_command(
    name: str = typer.Argument(..., help="Catalog surface name"),
    output: Path = typer.Argument(..., help="Output image file"),
    slices: Optional[int] = typer.Option(None, "--slices", "-s", help="Grid resolution"),
):
    from surfmesh.plotting import plot_mesh

    try:
        surface = create_surface(name, **_build_options(slices))
    except SurfMeshException as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    output.parent.mkdir(parents=True, exist_ok=True)
    fig = plot_mesh(surface.buffers, filename=str(output), title=name)
    import matplotlib.pyplot as plt
    plt.close(fig)
    print_success(f"Saved preview to {output}")


def _build_options(slices: Optional[int]) -> dict:
    return {} if slices is None else {'slices': slices}


if __name__ == "__main__":
    app()
