from __future__ import annotations

import math

import numpy as np

from engine.core.mesh import Face, Mesh
from engine.core.transform_utils import (
    camera_point,
    mirrors_winding,
    to_camera_space,
    transform_combined,
    transform_point,
)


def test_identity_transform_returns_point() -> None:
    p = np.array([1.5, -2.0, 3.25])
    out = transform_point(p, (0, 0, 0), (0, 0, 0), (1, 1, 1))
    assert np.allclose(out, p)


def test_transform_order_is_scale_rotate_translate() -> None:
    p = (1.0, 0.0, 0.0)
    out = transform_point(p, (10.0, 0.0, 0.0), (0.0, 0.0, math.pi / 2), (2.0, 1.0, 1.0))
    # (2,0,0) → 回転で (0,2,0) → 移動で (10,2,0)
    assert np.allclose(out, [10.0, 2.0, 0.0], atol=1e-12)


def test_transform_combined_matches_transform_point() -> None:
    verts = np.array([[1.0, 2.0, 3.0], [-1.0, 0.5, 2.0], [0.0, -1.0, 1.0]])
    mesh = Mesh.from_faces([Face(verts, "#ffffff")])
    pos, rot, scl = (5.0, -3.0, 2.0), (0.2, 0.4, -0.6), (1.5, 0.5, 2.0)
    out = transform_combined(mesh, pos, rot, scl)
    assert np.allclose(out.coords, transform_point(verts, pos, rot, scl))
    # 入力は不変
    assert np.allclose(mesh.coords, verts)


def test_camera_pan_ignores_z() -> None:
    out = camera_point((10.0, 20.0, 30.0), (10.0, 5.0, 500.0), (0.0, 0.0, 0.0))
    assert np.allclose(out, [0.0, 15.0, 30.0])


def test_to_camera_space_matches_camera_point() -> None:
    verts = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 10.0]])
    mesh = Mesh.from_faces([Face(verts, "#ffffff")])
    cam_pos, cam_rot = (3.0, -2.0, 500.0), (0.4, -0.5, 0.1)
    out = to_camera_space(mesh, cam_pos, cam_rot)
    assert np.allclose(out.coords, camera_point(verts, cam_pos, cam_rot))


def test_mirrors_winding() -> None:
    assert not mirrors_winding((1.0, 1.0, 1.0))
    assert mirrors_winding((-1.0, 1.0, 1.0))
    assert not mirrors_winding((-1.0, -1.0, 1.0))
