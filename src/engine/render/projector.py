"""
どこで: `engine.render.projector`。
何を: カメラ座標の頂点を透視除算でスクリーン座標へ写す。
なぜ: カメラ面に近づく頂点でスケールが発散しないよう、下限付きの投影規約を固定するため。

規約:
- `effective = z + camera_distance`
- `scale = fov / effective`（`effective > 10`）、それ以外は `fov / 10`
- `x_s = x * scale + width / 2`、`y_s = -y * scale + height / 2`（スクリーンは下向きが +Y）
- クリップしない。画面外の多角形もそのまま出力する。
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

NEAR_DEPTH = 10.0


class ScreenPoint(NamedTuple):
    x: float
    y: float
    scale: float
    z: float


def perspective_scale(z: float, fov: float, camera_distance: float) -> float:
    effective = float(z) + float(camera_distance)
    if effective > NEAR_DEPTH:
        return float(fov) / effective
    return float(fov) / NEAR_DEPTH


def project_point(v, width: float, height: float, fov: float, camera_distance: float) -> ScreenPoint:
    """1 頂点を投影する。"""
    x, y, z = (float(c) for c in v)
    scale = perspective_scale(z, fov, camera_distance)
    return ScreenPoint(x * scale + width / 2, -y * scale + height / 2, scale, z)


def project_points(
    verts: np.ndarray, width: float, height: float, fov: float, camera_distance: float
) -> np.ndarray:
    """`(K, 3)` の頂点列をまとめて投影し、`(K, 2)` を返す。"""
    pts = np.asarray(verts, dtype=np.float64)
    effective = pts[:, 2] + float(camera_distance)
    denom = np.where(effective > NEAR_DEPTH, effective, NEAR_DEPTH)
    scale = float(fov) / denom
    out = np.empty((pts.shape[0], 2), dtype=np.float64)
    out[:, 0] = pts[:, 0] * scale + width / 2
    out[:, 1] = -pts[:, 1] * scale + height / 2
    return out


__all__ = ["NEAR_DEPTH", "ScreenPoint", "perspective_scale", "project_point", "project_points"]
