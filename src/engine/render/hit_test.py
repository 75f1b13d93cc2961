"""
どこで: `engine.render.hit_test`。
何を: 描画済みの面リストに対し、スクリーン座標の点がどの物体に当たるかを判定する。
なぜ: 描画面が塗った順（後ろほど手前）と同じ規約で選択を返し、見た目と選択を一致させるため。

内外判定は偶奇規則のレイキャスティング。辺をまたぐ条件は半開区間 `(yi > y) != (yj > y)` で、
頂点ちょうどを通るレイの二重計上を避ける（辺上の点の扱いは未定義）。
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numba import njit

from .types import ProjectedFace


@njit(cache=True)
def _contains_evenodd(polygon: np.ndarray, x: float, y: float) -> bool:
    n = polygon.shape[0]
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i, 0], polygon[i, 1]
        xj, yj = polygon[j, 0], polygon[j, 1]
        if (yi > y) != (yj > y):
            x_cross = (xj - xi) * (y - yi) / (yj - yi) + xi
            if x < x_cross:
                inside = not inside
        j = i
    return inside


def point_in_polygon(x: float, y: float, polygon) -> bool:
    """点 `(x, y)` が多角形 `(K, 2)` の内側か。頂点が 3 未満なら False。"""
    pts = np.ascontiguousarray(np.asarray(polygon, dtype=np.float64)[:, :2])
    if pts.shape[0] < 3:
        return False
    return bool(_contains_evenodd(pts, float(x), float(y)))


def pick_object(faces: Sequence[ProjectedFace], x: float, y: float) -> str | None:
    """点 `(x, y)` を含む最前面の面の所有物体 id。どれにも当たらなければ None。

    `faces` は描画順（奥 → 手前）を想定し、末尾から走査する。
    """
    for face in reversed(faces):
        if point_in_polygon(x, y, face.projected):
            return face.object_id
    return None


__all__ = ["point_in_polygon", "pick_object"]
