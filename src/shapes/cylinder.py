from __future__ import annotations

from typing import Any

import numpy as np

from common import settings
from engine.core.mesh import Face, Mesh
from util.color import hsl_string

from .registry import shape


@shape
def cylinder(size: float = 50.0, *, time: float = 0.0, segments: int | None = None, **params: Any) -> Mesh:
    """円柱を生成します（半径 0.6·size, 高さ 1.6·size, Y 軸方向）。

    側面は四角形、上下の蓋は共有中心頂点からの三角形ファン。
    """
    radius = size * 0.6
    h = size * 1.6 / 2
    n = settings.get().ROUND_SEGMENTS if segments is None else max(3, int(segments))
    top_center = np.array([0.0, h, 0.0])
    bottom_center = np.array([0.0, -h, 0.0])

    faces: list[Face] = []
    for i in range(n):
        a1 = i / n * 2 * np.pi
        a2 = (i + 1) / n * 2 * np.pi
        x1, z1 = radius * np.cos(a1), radius * np.sin(a1)
        x2, z2 = radius * np.cos(a2), radius * np.sin(a2)

        faces.append(
            Face(
                verts=np.array([[x1, h, z1], [x2, h, z2], [x2, -h, z2], [x1, -h, z1]]),
                color=hsl_string(170 + (i / n) * 30, 100, 50),
            )
        )
        faces.append(Face(verts=np.array([top_center, [x2, h, z2], [x1, h, z1]]), color="#00ffee"))
        faces.append(Face(verts=np.array([bottom_center, [x1, -h, z1], [x2, -h, z2]]), color="#00ccbb"))
    return Mesh.from_faces(faces)
