from __future__ import annotations

from typing import Any

import numpy as np

from engine.core.mesh import Face, Mesh

from .registry import shape


@shape
def pyramid(size: float = 50.0, *, time: float = 0.0, **params: Any) -> Mesh:
    """四角錐を生成します（底面一辺 size, 高さ 1.4·size）。

    全 5 面とも `(v1-v0) x (v2-v0)` が外向きになる巻き順で並べる。
    """
    s = size / 2
    h = size * 1.4 / 2
    apex = np.array([0.0, h, 0.0])
    b0 = np.array([-s, -h, -s])
    b1 = np.array([s, -h, -s])
    b2 = np.array([s, -h, s])
    b3 = np.array([-s, -h, s])

    faces = [
        Face(verts=np.array([apex, b3, b2]), color="#00ffdd"),  # +Z
        Face(verts=np.array([apex, b2, b1]), color="#00eedd"),  # +X
        Face(verts=np.array([apex, b1, b0]), color="#00ddcc"),  # -Z
        Face(verts=np.array([apex, b0, b3]), color="#00ccbb"),  # -X
        Face(verts=np.array([b0, b1, b2, b3]), color="#00aabb"),  # -Y
    ]
    return Mesh.from_faces(faces)
