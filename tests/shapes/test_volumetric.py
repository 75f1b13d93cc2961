from __future__ import annotations

import numpy as np
import pytest

numba = pytest.importorskip("numba")  # noqa: F401 - 重依存の存在確認

from engine.core import vecmath
from shapes.metaballs import BOUNDS_FACTOR, blob_layout, field_at, metaballs, surface_cells
from shapes.puffs import CLOUD_PUFFS, FLUID_PARTICLES, PUFF_SEGMENTS, cloud_volume, fluid_blob


def normals_and_centroids(mesh) -> tuple[np.ndarray, np.ndarray]:
    normals = np.array([vecmath.calculate_normal(f.verts) for f in mesh.faces()])
    centroids = np.array([vecmath.calculate_center(f.verts) for f in mesh.faces()])
    return normals, centroids


def test_field_is_inverse_square_sum() -> None:
    centers = np.array([[0.0, 0.0, 0.0], [10.0, 0.0, 0.0]])
    radii = np.array([2.0, 3.0])
    val = field_at([[5.0, 0.0, 0.0]], centers, radii)
    assert val.shape == (1,)
    assert val[0] == pytest.approx(4.0 / 25.0 + 9.0 / 25.0)


def test_field_at_blob_center_is_finite() -> None:
    centers = np.array([[0.0, 0.0, 0.0]])
    val = field_at([[0.0, 0.0, 0.0]], centers, np.array([1.0]))
    assert np.isfinite(val).all()


def test_surface_cells_need_mixed_corners() -> None:
    values = np.zeros((3, 3, 3))
    values[0, 0, 0] = 2.0  # 1 隅だけ内側
    cells = surface_cells(values, 1.0)
    assert cells.tolist() == [[0, 0, 0]]
    assert surface_cells(np.full((3, 3, 3), 2.0), 1.0).shape == (0, 3)
    assert surface_cells(np.zeros((3, 3, 3)), 1.0).shape == (0, 3)


@pytest.mark.smoke
def test_metaballs_emit_quads_on_the_isosurface() -> None:
    mesh = metaballs(50.0, time=0.0, grid=10)
    assert len(mesh) > 0
    assert np.all(np.diff(mesh.offsets) == 4)


def test_metaball_quads_face_down_the_field_gradient() -> None:
    size, grid = 50.0, 10
    mesh = metaballs(size, time=0.3, grid=grid)
    centers, radii = blob_layout(size, 0.3)
    h = size * BOUNDS_FACTOR / grid
    normals, centroids = normals_and_centroids(mesh)
    for n, c in zip(normals, centroids):
        grad = np.array(
            [
                field_at([c + d], centers, radii)[0] - field_at([c - d], centers, radii)[0]
                for d in np.eye(3) * h
            ]
        )
        assert np.dot(n, grad) <= 0.0


def test_metaballs_animate_with_time_and_are_deterministic() -> None:
    a = metaballs(50.0, time=1.0, grid=8)
    b = metaballs(50.0, time=1.0, grid=8)
    c = metaballs(50.0, time=2.5, grid=8)
    assert np.array_equal(a.coords, b.coords)
    assert a.coords.shape != c.coords.shape or not np.array_equal(a.coords, c.coords)


def test_puff_clusters_have_expected_face_counts() -> None:
    per_puff = PUFF_SEGMENTS * PUFF_SEGMENTS
    assert len(fluid_blob(50.0, time=0.0)) == FLUID_PARTICLES * per_puff
    assert len(cloud_volume(50.0, time=0.0)) == CLOUD_PUFFS * per_puff


def test_puffs_move_with_time() -> None:
    a = fluid_blob(50.0, time=0.0)
    b = fluid_blob(50.0, time=0.5)
    assert a.coords.shape == b.coords.shape
    assert not np.allclose(a.coords, b.coords)
    assert np.array_equal(cloud_volume(50.0, time=0.5).coords, cloud_volume(50.0, time=0.5).coords)


def test_cloud_is_wider_than_tall() -> None:
    mesh = cloud_volume(50.0, time=0.0)
    extent = mesh.coords.max(axis=0) - mesh.coords.min(axis=0)
    assert extent[0] > extent[1]
