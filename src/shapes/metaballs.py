"""
どこで: `shapes.metaballs`。
何を: 動くブロブの陰関数場を粗い格子でサンプリングし、表面セルごとに 1 枚の四角形を出す。
なぜ: 厳密な等値面抽出（marching cubes）なしに、メタボールを平面ポリゴンで近似表示するため。

手順:
1. 場 `f(p) = Σ r_i² / |p - c_i|²` を `(grid+1)³` の格子点で評価（numba カーネル）。
2. 8 隅がしきい値をまたぐ（内側と外側が混在する）セルを表面セルとする。
3. セル中心で中心差分の勾配を取り、絶対値最大の軸に垂直な四角形を置く。
   法線は場が減る向き（外向き）に巻く。近似であり、面同士は連結しない。

格子走査は O(grid³) で毎フレーム再計算する（キャッシュしない）。
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numba import njit

from common import settings
from engine.core.mesh import Face, Mesh
from util.color import hsl_string

from .registry import shape

THRESHOLD = 1.0
BOUNDS_FACTOR = 0.75

# (位相, x 角速度, y 角速度, z 角速度, 半径係数)
_BLOBS: tuple[tuple[float, float, float, float, float], ...] = (
    (0.0, 0.9, 1.3, 0.7, 0.30),
    (2.1, 1.1, 0.8, 1.2, 0.26),
    (4.2, 0.7, 1.1, 0.9, 0.22),
)

# 法線軸 → 四角形を張る 2 軸（e_u x e_v = e_axis）
_TANGENTS = {0: (1, 2), 1: (2, 0), 2: (0, 1)}


def blob_layout(size: float, time: float) -> tuple[np.ndarray, np.ndarray]:
    """時刻 `time` のブロブ中心 `(k, 3)` と半径 `(k,)`。"""
    centers = np.empty((len(_BLOBS), 3), dtype=np.float64)
    radii = np.empty(len(_BLOBS), dtype=np.float64)
    orbit = size * 0.35
    for i, (phase, wx, wy, wz, rf) in enumerate(_BLOBS):
        centers[i, 0] = orbit * np.sin(time * wx + phase)
        centers[i, 1] = orbit * 0.8 * np.sin(time * wy + phase * 1.7)
        centers[i, 2] = orbit * np.cos(time * wz + phase)
        radii[i] = size * (rf + 0.03 * np.sin(time * 1.3 + phase))
    return centers, radii


@njit(cache=True)
def _field(points: np.ndarray, centers: np.ndarray, radii: np.ndarray) -> np.ndarray:
    """各点での `Σ r² / d²`。ブロブ中心ちょうどの点は d² を下限で抑える。"""
    out = np.zeros(points.shape[0], dtype=np.float64)
    for p in range(points.shape[0]):
        acc = 0.0
        for k in range(centers.shape[0]):
            dx = points[p, 0] - centers[k, 0]
            dy = points[p, 1] - centers[k, 1]
            dz = points[p, 2] - centers[k, 2]
            d2 = dx * dx + dy * dy + dz * dz
            if d2 < 1e-12:
                d2 = 1e-12
            acc += radii[k] * radii[k] / d2
        out[p] = acc
    return out


def field_at(points, centers: np.ndarray, radii: np.ndarray) -> np.ndarray:
    """`(M, 3)` の点列で場を評価する。"""
    pts = np.ascontiguousarray(np.asarray(points, dtype=np.float64).reshape(-1, 3))
    return _field(pts, np.ascontiguousarray(centers), np.ascontiguousarray(radii))


def surface_cells(values: np.ndarray, threshold: float = THRESHOLD) -> np.ndarray:
    """隅の値がしきい値をまたぐセルの index `(S, 3)`（i, j, k の辞書順）。"""
    inside = (values >= threshold).astype(np.int8)
    count = (
        inside[:-1, :-1, :-1]
        + inside[1:, :-1, :-1]
        + inside[:-1, 1:, :-1]
        + inside[:-1, :-1, 1:]
        + inside[1:, 1:, :-1]
        + inside[1:, :-1, 1:]
        + inside[:-1, 1:, 1:]
        + inside[1:, 1:, 1:]
    )
    return np.argwhere((count > 0) & (count < 8))


def _oriented_quad(center: np.ndarray, axis: int, outward: float, half: float) -> np.ndarray:
    u, v = _TANGENTS[axis]
    du = np.zeros(3)
    dv = np.zeros(3)
    du[u] = half
    dv[v] = half
    quad = np.stack([center - du - dv, center + du - dv, center + du + dv, center - du + dv])
    if outward < 0:
        quad = quad[::-1].copy()
    return quad


@shape
def metaballs(size: float = 50.0, *, time: float = 0.0, grid: int | None = None, **params: Any) -> Mesh:
    """メタボール群を近似する四角形メッシュを生成します。"""
    n = settings.get().VOLUME_GRID if grid is None else max(2, int(grid))
    half_extent = size * BOUNDS_FACTOR
    if half_extent <= 0:
        return Mesh.empty()
    centers, radii = blob_layout(size, time)

    lin = np.linspace(-half_extent, half_extent, n + 1)
    gx, gy, gz = np.meshgrid(lin, lin, lin, indexing="ij")
    lattice = np.stack([gx, gy, gz], axis=-1).reshape(-1, 3)
    values = field_at(lattice, centers, radii).reshape(n + 1, n + 1, n + 1)

    cells = surface_cells(values)
    if cells.shape[0] == 0:
        return Mesh.empty()

    cell = lin[1] - lin[0]
    h = cell / 2.0
    cell_centers = lin[cells] + h  # (S, 3)

    # 中心差分の勾配（+x, -x, +y, -y, +z, -z の順にまとめて評価）
    offsets = np.array(
        [[h, 0, 0], [-h, 0, 0], [0, h, 0], [0, -h, 0], [0, 0, h], [0, 0, -h]], dtype=np.float64
    )
    probes = (cell_centers[:, None, :] + offsets[None, :, :]).reshape(-1, 3)
    sampled = field_at(probes, centers, radii).reshape(-1, 6)
    grad = (sampled[:, 0::2] - sampled[:, 1::2]) / (2.0 * h)

    faces: list[Face] = []
    for c, g in zip(cell_centers, grad):
        axis = int(np.argmax(np.abs(g)))
        # 場は外側へ向かって減少する
        outward = -1.0 if g[axis] > 0 else 1.0
        hue = 280 + 60 * (c[1] + half_extent) / (2 * half_extent)
        faces.append(Face(verts=_oriented_quad(c, axis, outward, h), color=hsl_string(hue, 100, 55)))
    return Mesh.from_faces(faces)
