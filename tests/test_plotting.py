"""
Tests for the matplotlib mesh preview.
"""
import os

import matplotlib.pyplot as plt

from surfmesh.plotting import plot_mesh
from surfmesh.surface import HeightFieldSurface, ParametricSurface


def test_plot_mesh_returns_figure():
    buffers = HeightFieldSurface(lambda x, y: x * x - y * y, slices=4).buffers
    fig = plot_mesh(buffers, title="Saddle")
    try:
        assert fig.axes[0].get_title() == "Saddle"
    finally:
        plt.close(fig)


def test_plot_mesh_saves_file(tmp_path):
    buffers = ParametricSurface(lambda u, v: (u, v, u * v), slices=3).buffers
    filename = str(tmp_path / "mesh.png")
    fig = plot_mesh(buffers, filename=filename, show_edges=True)
    plt.close(fig)
    assert os.path.getsize(filename) > 0


def test_single_sided_faces_drop_duplicates():
    buffers = HeightFieldSurface(lambda x, y: 0.0, slices=3).buffers
    faces = buffers.single_sided_faces()
    assert faces.shape == (18, 3)
    assert faces[0].tolist() == [0, 1, 5]
