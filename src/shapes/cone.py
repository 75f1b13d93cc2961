from __future__ import annotations

from typing import Any

import numpy as np

from common import settings
from engine.core.mesh import Face, Mesh
from util.color import hsl_string

from .registry import shape


@shape
def cone(size: float = 50.0, *, time: float = 0.0, segments: int | None = None, **params: Any) -> Mesh:
    """円錐を生成します（底面半径 0.8·size, 高さ 1.6·size, 頂点は +Y）。"""
    radius = size * 0.8
    h = size * 1.6 / 2
    n = settings.get().ROUND_SEGMENTS if segments is None else max(3, int(segments))
    apex = np.array([0.0, h, 0.0])
    base_center = np.array([0.0, -h, 0.0])

    faces: list[Face] = []
    for i in range(n):
        a1 = i / n * 2 * np.pi
        a2 = (i + 1) / n * 2 * np.pi
        p1 = [radius * np.cos(a1), -h, radius * np.sin(a1)]
        p2 = [radius * np.cos(a2), -h, radius * np.sin(a2)]

        faces.append(Face(verts=np.array([apex, p2, p1]), color=hsl_string(175 + (i / n) * 25, 100, 50)))
        faces.append(Face(verts=np.array([base_center, p1, p2]), color="#00bbaa"))
    return Mesh.from_faces(faces)
