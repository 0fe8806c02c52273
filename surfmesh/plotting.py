"""
Matplotlib preview of built surface meshes.

Only one winding of each triangle is drawn; the duplicated faces of a
double-sided mesh would otherwise be rendered on top of each other.
"""

import logging
from typing import Any, Optional, Tuple

from .mesh import MeshBuffers

# Set up logger
logger = logging.getLogger(__name__)

DEFAULT_COLORMAP = "viridis"


def plot_mesh(buffers: MeshBuffers,
              filename: Optional[str] = None,
              title: str = "Surface Mesh",
              colormap: str = DEFAULT_COLORMAP,
              figsize: Tuple[float, float] = (8, 6),
              dpi: int = 100,
              show_edges: bool = False) -> Any:
    """
    Plot mesh buffers as a shaded 3D triangle surface.

    Args:
        buffers: Built mesh buffers
        filename: Save the figure here if given (uses the Agg backend)
        title: Plot title
        colormap: Matplotlib colormap name
        figsize: Figure size (width, height) in inches
        dpi: Resolution used when saving
        show_edges: Draw triangle edges

    Returns:
        Matplotlib Figure object
    """
    import matplotlib
    if filename:
        matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    positions = buffers.positions
    faces = buffers.single_sided_faces()

    fig = plt.figure(figsize=figsize)
    ax = fig.add_subplot(111, projection='3d')
    surface = ax.plot_trisurf(
        positions[:, 0], positions[:, 1], positions[:, 2],
        triangles=faces,
        cmap=colormap,
        linewidth=0.2 if show_edges else 0.0,
        edgecolor='k' if show_edges else 'none',
        antialiased=True,
    )
    fig.colorbar(surface, ax=ax, shrink=0.6, label="Z")

    ax.set_title(title)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")

    if filename:
        fig.savefig(filename, dpi=dpi, bbox_inches='tight')
        logger.info(f"Saved mesh preview to {filename}")

    return fig
