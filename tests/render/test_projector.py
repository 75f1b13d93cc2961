from __future__ import annotations

import numpy as np
import pytest

from engine.render.projector import NEAR_DEPTH, perspective_scale, project_point, project_points


def test_origin_projects_to_viewport_center() -> None:
    p = project_point((0.0, 0.0, 0.0), 800, 600, 800.0, 500.0)
    assert (p.x, p.y) == (400.0, 300.0)
    assert p.scale == pytest.approx(800.0 / 500.0)


def test_scale_is_exact_above_floor() -> None:
    for z in (-480.0, 0.0, 250.0):
        assert perspective_scale(z, 800.0, 500.0) == 800.0 / (z + 500.0)


@pytest.mark.parametrize("z", [-490.0, -495.0, -500.0, -1000.0])
def test_scale_is_clamped_near_camera(z: float) -> None:
    assert z + 500.0 <= NEAR_DEPTH
    assert perspective_scale(z, 800.0, 500.0) == 800.0 / 10.0


def test_screen_y_is_flipped() -> None:
    up = project_point((0.0, 10.0, 0.0), 800, 600, 800.0, 500.0)
    right = project_point((10.0, 0.0, 0.0), 800, 600, 800.0, 500.0)
    assert up.y < 300.0
    assert right.x > 400.0


def test_project_points_matches_scalar_projection() -> None:
    verts = np.array([[10.0, -20.0, 30.0], [-5.0, 5.0, -495.0], [100.0, 100.0, 0.0]])
    out = project_points(verts, 800, 600, 800.0, 500.0)
    assert out.shape == (3, 2)
    for v, xy in zip(verts, out):
        p = project_point(v, 800, 600, 800.0, 500.0)
        assert np.allclose(xy, [p.x, p.y])


def test_no_clipping_outside_viewport() -> None:
    p = project_point((10000.0, 0.0, 0.0), 800, 600, 800.0, 500.0)
    assert p.x > 800.0
