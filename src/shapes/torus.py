"""
どこで: `shapes.torus`。
何を: 主半径/副半径でパラメータ化したトーラスの四角形メッシュを生成する。
なぜ: 非凸形状のため、物体中心基準の法線補正に頼らず巻き順で外向きを保証する必要がある。

頂点 `v(θ, φ) = ((R + r cosφ) cosθ, r sinφ, (R + r cosφ) sinθ)`。
素直なループ `(θ1,φ1) → (θ2,φ1) → (θ2,φ2) → (θ1,φ2)` は内向きになるため、
`(θ1,φ2) → (θ2,φ2) → (θ2,φ1) → (θ1,φ1)` と逆順に並べる（`∂φ x ∂θ` = 外向き）。
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numba import njit

from common import settings
from engine.core.mesh import Face, Mesh
from util.color import hsl_string

from .registry import shape


@njit(cache=True)
def _torus_grid(major_radius: float, minor_radius: float, segments: int) -> np.ndarray:
    """`(segments+1, segments+1, 3)` の格子点 `grid[i, j] = v(θ_i, φ_j)` を返す。"""
    grid = np.empty((segments + 1, segments + 1, 3), dtype=np.float64)
    for i in range(segments + 1):
        theta = i / segments * 2 * np.pi
        ct = np.cos(theta)
        st = np.sin(theta)
        for j in range(segments + 1):
            phi = j / segments * 2 * np.pi
            r = major_radius + minor_radius * np.cos(phi)
            grid[i, j, 0] = r * ct
            grid[i, j, 1] = minor_radius * np.sin(phi)
            grid[i, j, 2] = r * st
    return grid


@shape
def torus(size: float = 50.0, *, time: float = 0.0, segments: int | None = None, **params: Any) -> Mesh:
    """トーラスを生成します（主半径 0.8·size, 副半径 0.3·size, 中心軸は Y）。"""
    n = settings.get().ROUND_SEGMENTS if segments is None else max(3, int(segments))
    grid = _torus_grid(size * 0.8, size * 0.3, n)

    faces: list[Face] = []
    for i in range(n):
        for j in range(n):
            # 逆順ループ（外向き）
            verts = np.stack([grid[i, j + 1], grid[i + 1, j + 1], grid[i + 1, j], grid[i, j]])
            color = hsl_string((i / n) * 40 + 180, 100, 45 + (j / n) * 15)
            faces.append(Face(verts=verts, color=color))
    return Mesh.from_faces(faces)
