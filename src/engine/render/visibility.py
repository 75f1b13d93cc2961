"""
どこで: `engine.render.visibility`。
何を: 面の重心・法線の算出、法線の外向き補正、背面カリング判定。
なぜ: 透視投影下でも隣接面の間に隙間が出ないよう、しきい値付きの判定を一箇所に固定するため。

判定:
- 視線 `view_dir` はカメラ（カメラ座標で `(0, 0, -distance)`）から面重心への単位ベクトル。
- `dot(normal, view_dir) <= epsilon` なら可視（境界を含む）。epsilon は正の小さな値（既定 0.15）で、
  かすめ角の面を残す。
"""

from __future__ import annotations

import numpy as np

from engine.core import vecmath

DEFAULT_EPSILON = 0.15


def face_centroid(verts) -> np.ndarray:
    """頂点の算術平均。"""
    return vecmath.calculate_center(verts)


def face_normal(verts) -> np.ndarray:
    """先頭 3 頂点からの単位法線。頂点が 3 未満なら `(0, 0, 1)`。"""
    return vecmath.calculate_normal(verts)


def orient_outward(normal, centroid, object_center) -> np.ndarray:
    """物体中心 → 面重心 の向きと逆を向く法線を反転する。

    凸で中心に置かれた形状でのみ正しい推定。巻き順が検証済みでない面にだけ使う。
    """
    n = vecmath.as_vec(normal)
    outward = vecmath.subtract(centroid, object_center)
    if vecmath.dot(n, outward) < 0:
        return -n
    return n


def view_direction(centroid, camera_distance: float) -> np.ndarray:
    """カメラから面重心への単位ベクトル（カメラ座標）。"""
    c = vecmath.as_vec(centroid)
    return vecmath.normalize((c[0], c[1], c[2] + float(camera_distance)))


def is_visible(normal, view_dir, epsilon: float = DEFAULT_EPSILON) -> bool:
    """`dot(normal, view_dir) <= epsilon` なら可視。"""
    return vecmath.dot(normal, view_dir) <= epsilon


def is_face_visible(normal, centroid, camera_distance: float, epsilon: float = DEFAULT_EPSILON) -> bool:
    """重心とカメラ距離から視線を求めて判定する糖衣。"""
    return is_visible(normal, view_direction(centroid, camera_distance), epsilon)


__all__ = [
    "DEFAULT_EPSILON",
    "face_centroid",
    "face_normal",
    "orient_outward",
    "view_direction",
    "is_visible",
    "is_face_visible",
]
