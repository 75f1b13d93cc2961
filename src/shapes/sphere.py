"""
どこで: `shapes.sphere`。
何を: 緯度経度グリッドの球（極帯は三角形、内側は四角形）を生成する。
なぜ: 球そのものに加え、流体/雲のパフ群の部品としても再利用するため。

頂点は `v(θ, φ) = r (sinθ cosφ, cosθ, sinθ sinφ)`、θ は北極 (y=+r) から南極へ。
ループ `(θ1,φ1) → (θ1,φ2) → (θ2,φ2) → (θ2,φ1)` は `∂φ x ∂θ` 方向、すなわち外向き。
面色は経度で色相、緯度で明度を変える装飾用グラデーション（物理的な陰影には使わない）。
"""

from __future__ import annotations

from typing import Any

import numpy as np

from common import settings
from engine.core.mesh import Face, Mesh
from util.color import hsl_string

from .registry import shape


def _sphere_point(radius: float, theta: float, phi: float) -> np.ndarray:
    st = np.sin(theta)
    return np.array(
        [radius * st * np.cos(phi), radius * np.cos(theta), radius * st * np.sin(phi)],
        dtype=np.float64,
    )


def sphere_faces(
    radius: float,
    segments: int,
    *,
    hue_start: float = 160.0,
    hue_span: float = 60.0,
) -> list[Face]:
    """原点中心・半径 `radius` の球面を `segments` 帯に分割した面列を返す。"""
    n = max(3, int(segments))
    faces: list[Face] = []
    for lat in range(n):
        theta1 = lat / n * np.pi
        theta2 = (lat + 1) / n * np.pi
        lightness = 40 + (lat / n) * 20
        for lon in range(n):
            phi1 = lon / n * 2 * np.pi
            phi2 = (lon + 1) / n * 2 * np.pi

            v1 = _sphere_point(radius, theta1, phi1)
            v2 = _sphere_point(radius, theta1, phi2)
            v3 = _sphere_point(radius, theta2, phi2)
            v4 = _sphere_point(radius, theta2, phi1)

            color = hsl_string((lon / n) * hue_span + hue_start, 100, lightness)
            if lat == 0:
                # 北極: v1 == v2 のため三角形
                verts = [v1, v3, v4]
            elif lat == n - 1:
                # 南極: v3 == v4 のため三角形
                verts = [v1, v2, v3]
            else:
                verts = [v1, v2, v3, v4]
            faces.append(Face(verts=np.stack(verts), color=color))
    return faces


@shape
def sphere(size: float = 50.0, *, time: float = 0.0, segments: int | None = None, **params: Any) -> Mesh:
    """半径 `size` の球を生成します。`segments` 省略時は設定値（既定 16）。"""
    n = settings.get().SPHERE_SEGMENTS if segments is None else int(segments)
    return Mesh.from_faces(sphere_faces(size, n))
