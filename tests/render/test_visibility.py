from __future__ import annotations

import numpy as np

from engine.render.visibility import (
    DEFAULT_EPSILON,
    face_centroid,
    face_normal,
    is_face_visible,
    is_visible,
    orient_outward,
    view_direction,
)


def test_facing_camera_is_kept_and_facing_away_is_dropped() -> None:
    view = np.array([0.0, 0.0, 1.0])
    assert is_visible(np.array([0.0, 0.0, -1.0]), view)
    assert not is_visible(np.array([0.0, 0.0, 1.0]), view)


def test_boundary_dot_equal_to_epsilon_is_kept() -> None:
    view = np.array([0.0, 0.0, 1.0])
    eps = 0.25
    assert is_visible(np.array([0.0, 0.0, eps]), view, eps)
    assert not is_visible(np.array([0.0, 0.0, eps + 1e-9]), view, eps)


def test_grazing_faces_within_slack_are_kept() -> None:
    view = np.array([0.0, 0.0, 1.0])
    slightly_away = np.array([0.0, np.sqrt(1 - 0.1**2), 0.1])
    assert is_visible(slightly_away, view, DEFAULT_EPSILON)
    assert not is_visible(slightly_away, view, 0.0)


def test_view_direction_points_from_camera_to_centroid() -> None:
    d = view_direction((0.0, 0.0, 0.0), 500.0)
    assert np.allclose(d, [0.0, 0.0, 1.0])
    d = view_direction((300.0, 0.0, 0.0), 300.0)
    assert np.allclose(d, [np.sqrt(0.5), 0.0, np.sqrt(0.5)])


def test_is_face_visible_uses_perspective_view_ray() -> None:
    # 真横向きの面でも、視線が斜めなら手前側に見える
    normal = np.array([-1.0, 0.0, 0.0])
    assert is_face_visible(normal, (100.0, 0.0, 0.0), 500.0, 0.0)
    assert not is_face_visible(-normal, (100.0, 0.0, 0.0), 500.0, 0.0)


def test_orient_outward_flips_inward_normals_only() -> None:
    center = np.zeros(3)
    centroid = np.array([0.0, 0.0, 10.0])
    assert np.allclose(orient_outward((0.0, 0.0, -1.0), centroid, center), [0.0, 0.0, 1.0])
    assert np.allclose(orient_outward((0.0, 0.0, 1.0), centroid, center), [0.0, 0.0, 1.0])


def test_face_helpers() -> None:
    quad = np.array([[0, 0, 5], [2, 0, 5], [2, 2, 5], [0, 2, 5]], dtype=float)
    assert np.allclose(face_centroid(quad), [1.0, 1.0, 5.0])
    assert np.allclose(face_normal(quad), [0.0, 0.0, 1.0])
    assert np.allclose(face_normal(quad[:2]), [0.0, 0.0, 1.0])
