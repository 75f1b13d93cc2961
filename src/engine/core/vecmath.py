"""
どこで: `engine.core.vecmath`。
何を: 3D ベクトル代数・オイラー回転・補間/丸めの純関数群。
なぜ: 変換/可視判定/ライティングの各段が同じ演算を共有し、副作用なしで合成できるようにするため。

規約:
- ベクトルは `np.ndarray`（float64, 形状 `(3,)`）。入力は tuple/list/ndarray を受理する。
- 回転・スカラー倍は `(..., 3)` にブロードキャストするため、頂点バッファ全体にも使える。
- すべて新しい配列を返し、引数を変更しない。
- 回転は右手系。`rotate_euler` は X → Y → Z の固定順（可換ではない）。
"""

from __future__ import annotations

from typing import Literal

import numpy as np

Axis = Literal["x", "y", "z", "xy", "xz", "yz", "none"]

_AXIS_MASKS: dict[str, tuple[float, float, float]] = {
    "x": (1.0, 0.0, 0.0),
    "y": (0.0, 1.0, 0.0),
    "z": (0.0, 0.0, 1.0),
    "xy": (1.0, 1.0, 0.0),
    "xz": (1.0, 0.0, 1.0),
    "yz": (0.0, 1.0, 1.0),
}


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    """成分から Vector3 を作る。"""
    return np.array([x, y, z], dtype=np.float64)


def as_vec(v) -> np.ndarray:
    """配列化（float64 のコピー）。"""
    return np.array(v, dtype=np.float64)


# ── 基本演算 ───────────────────
def add(a, b) -> np.ndarray:
    return as_vec(a) + as_vec(b)


def subtract(a, b) -> np.ndarray:
    return as_vec(a) - as_vec(b)


def multiply(v, s: float) -> np.ndarray:
    """スカラー倍。"""
    return as_vec(v) * float(s)


def divide(v, s: float) -> np.ndarray:
    """各成分をスカラーで除算。"""
    return as_vec(v) / float(s)


def dot(a, b) -> float:
    a = as_vec(a)
    b = as_vec(b)
    return float(a[0] * b[0] + a[1] * b[1] + a[2] * b[2])


def cross(a, b) -> np.ndarray:
    a = as_vec(a)
    b = as_vec(b)
    return np.array(
        [
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        ],
        dtype=np.float64,
    )


def length(v) -> float:
    v = as_vec(v)
    return float(np.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2]))


def normalize(v) -> np.ndarray:
    """単位ベクトル化。長さがちょうど 0 のときはゼロベクトルを返す（除算しない）。"""
    n = length(v)
    if n == 0.0:
        return np.zeros(3, dtype=np.float64)
    return divide(v, n)


# ── 回転（右手系、原点中心） ──────
def rotate_x(v, angle: float) -> np.ndarray:
    p = as_vec(v)
    c, s = np.cos(angle), np.sin(angle)
    y = p[..., 1] * c - p[..., 2] * s
    z = p[..., 1] * s + p[..., 2] * c
    p[..., 1], p[..., 2] = y, z
    return p


def rotate_y(v, angle: float) -> np.ndarray:
    p = as_vec(v)
    c, s = np.cos(angle), np.sin(angle)
    x = p[..., 0] * c + p[..., 2] * s
    z = -p[..., 0] * s + p[..., 2] * c
    p[..., 0], p[..., 2] = x, z
    return p


def rotate_z(v, angle: float) -> np.ndarray:
    p = as_vec(v)
    c, s = np.cos(angle), np.sin(angle)
    x = p[..., 0] * c - p[..., 1] * s
    y = p[..., 0] * s + p[..., 1] * c
    p[..., 0], p[..., 1] = x, y
    return p


def rotate_euler(v, rotation) -> np.ndarray:
    """オイラー回転。X → Y → Z の順に適用する（順序は契約）。"""
    rx, ry, rz = (float(a) for a in rotation)
    out = rotate_x(v, rx)
    out = rotate_y(out, ry)
    return rotate_z(out, rz)


def negated(rotation) -> np.ndarray:
    """各成分の符号を反転した角度（ライトの逆カメラ回転用）。"""
    return -as_vec(rotation)


# ── 面の代表量 ───────────────────
def calculate_normal(verts) -> np.ndarray:
    """先頭 3 頂点から `(v1-v0) x (v2-v0)` を正規化して返す。

    頂点が 3 未満の退化面は `(0, 0, 1)` を返す。
    """
    pts = np.asarray(verts, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[0] < 3:
        return vec3(0.0, 0.0, 1.0)
    return normalize(cross(pts[1] - pts[0], pts[2] - pts[0]))


def calculate_center(verts) -> np.ndarray:
    """頂点の算術平均。"""
    pts = np.asarray(verts, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[0] == 0:
        return np.zeros(3, dtype=np.float64)
    return pts.mean(axis=0)


# ── 補間・丸め ───────────────────
def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def lerp_vec3(a, b, t: float) -> np.ndarray:
    a = as_vec(a)
    return a + (as_vec(b) - a) * float(t)


def ease_in_out(t: float) -> float:
    return 2 * t * t if t < 0.5 else 1 - ((-2 * t + 2) ** 2) / 2


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def snap_to_grid(value: float, grid_size: float) -> float:
    """最も近い `grid_size` の倍数へ丸める（ちょうど中間は正方向へ）。"""
    return float(np.floor(value / grid_size + 0.5) * grid_size)


def constrain_to_axis(delta, axis: Axis | str) -> np.ndarray:
    """指定軸集合以外の成分を 0 にする。`none`（および未知の指定）は素通し。"""
    d = as_vec(delta)
    mask = _AXIS_MASKS.get(axis)
    if mask is None:
        return d
    return d * np.asarray(mask, dtype=np.float64)


__all__ = [
    "Axis",
    "vec3",
    "as_vec",
    "add",
    "subtract",
    "multiply",
    "divide",
    "dot",
    "cross",
    "length",
    "normalize",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "rotate_euler",
    "negated",
    "calculate_normal",
    "calculate_center",
    "lerp",
    "lerp_vec3",
    "ease_in_out",
    "ease_in_cubic",
    "ease_out_cubic",
    "clamp",
    "snap_to_grid",
    "constrain_to_axis",
]
