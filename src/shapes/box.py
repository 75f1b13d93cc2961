"""
どこで: `shapes.box`。
何を: 立方体（8 頂点・6 四角形）を生成する。
なぜ: 基本形状であり、未知種別のフォールバック先でもあるため。

巻き順は手で検証済みで、`(v1-v0) x (v2-v0)` が常に外向きになる。
"""

from __future__ import annotations

from typing import Any

import numpy as np

from engine.core.mesh import Face, Mesh

from .registry import shape

# 面ごとの頂点 index と基本色（前, 後, 上, 下, 右, 左）
_BOX_FACES: tuple[tuple[tuple[int, int, int, int], str], ...] = (
    ((4, 5, 6, 7), "#00ffff"),  # +Z
    ((1, 0, 3, 2), "#00cccc"),  # -Z
    ((7, 6, 2, 3), "#00eeee"),  # +Y
    ((0, 1, 5, 4), "#00aaaa"),  # -Y
    ((5, 1, 2, 6), "#00dddd"),  # +X
    ((0, 4, 7, 3), "#00bbbb"),  # -X
)


def box_vertices(size: float) -> np.ndarray:
    """原点中心・一辺 `size` の立方体の 8 頂点。"""
    s = size / 2.0
    return np.array(
        [
            [-s, -s, -s],
            [s, -s, -s],
            [s, s, -s],
            [-s, s, -s],
            [-s, -s, s],
            [s, -s, s],
            [s, s, s],
            [-s, s, s],
        ],
        dtype=np.float64,
    )


@shape
def box(size: float = 50.0, *, time: float = 0.0, **params: Any) -> Mesh:
    """立方体を生成します。"""
    v = box_vertices(size)
    return Mesh.from_faces(Face(verts=v[list(idx)], color=color) for idx, color in _BOX_FACES)
