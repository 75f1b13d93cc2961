"""
どこで: `engine.core` の変換ユーティリティ。
何を: 物体変換（ローカル → ワールド）とカメラ変換（ワールド → カメラ）。
なぜ: 変換順序の契約を一箇所に固定し、頂点 1 点にも `Mesh` 全体にも同じ規約で適用するため。

変換順序:
- 物体: スケール（成分積）→ 回転（X→Y→Z）→ 平行移動。
- カメラ: パン（x, y のみ符号反転して加算）→ カメラのオイラー回転。
状態は持たないため、物体ごとに並行に呼び出してよい。
"""

from __future__ import annotations

import numpy as np

from common.types import Vec3

from . import vecmath
from .mesh import Mesh


def transform_point(point, position: Vec3, rotation: Vec3, scale: Vec3) -> np.ndarray:
    """1 点（または `(N, 3)` の点列）に スケール → 回転 → 移動 を適用する。"""
    scaled = vecmath.as_vec(point) * np.asarray(scale, dtype=np.float64)
    rotated = vecmath.rotate_euler(scaled, rotation)
    return rotated + np.asarray(position, dtype=np.float64)


def transform_combined(
    mesh: Mesh,
    position: Vec3 = (0.0, 0.0, 0.0),
    rotation: Vec3 = (0.0, 0.0, 0.0),
    scale: Vec3 = (1.0, 1.0, 1.0),
) -> Mesh:
    """複合変換：スケール → 回転 → 移動を順次適用。

    引数:
        mesh: 変換対象の Mesh（ローカル座標）
        position: 最終的な中心位置
        rotation: (rx, ry, rz) 回転角度（ラジアン）
        scale: (sx, sy, sz) スケール係数

    返り値:
        ワールド座標の新しい Mesh
    """
    result = mesh

    # 1. スケール変換（原点中心）
    sx, sy, sz = scale
    if sx != 1 or sy != 1 or sz != 1:
        result = result.scale(sx, sy, sz)

    # 2. 回転変換（原点中心）
    rx, ry, rz = rotation
    if rx != 0 or ry != 0 or rz != 0:
        result = result.rotate(rx, ry, rz)

    # 3. 移動変換（最終位置へ）
    px, py, pz = position
    if px != 0 or py != 0 or pz != 0:
        result = result.translate(px, py, pz)

    return result


def camera_point(point, camera_position: Vec3, camera_rotation: Vec3) -> np.ndarray:
    """ワールド座標の点（または点列）をカメラ座標へ。パンは x, y のみ。"""
    pan = np.array([-float(camera_position[0]), -float(camera_position[1]), 0.0])
    return vecmath.rotate_euler(vecmath.as_vec(point) + pan, camera_rotation)


def to_camera_space(mesh: Mesh, camera_position: Vec3, camera_rotation: Vec3) -> Mesh:
    """ワールド座標の Mesh をカメラ座標へ（パン → 回転）。"""
    panned = mesh.translate(-float(camera_position[0]), -float(camera_position[1]), 0.0)
    rx, ry, rz = camera_rotation
    return panned.rotate(rx, ry, rz)


def mirrors_winding(scale: Vec3) -> bool:
    """スケールが鏡映（行列式が負）か。鏡映は巻き順＝法線の向きを反転させる。"""
    sx, sy, sz = scale
    return float(sx) * float(sy) * float(sz) < 0.0


__all__ = [
    "transform_point",
    "transform_combined",
    "camera_point",
    "to_camera_space",
    "mirrors_winding",
]
