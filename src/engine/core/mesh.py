"""
面メッシュ型（プリミティブ生成と変換の共通表現）

本モジュールは、プリミティブ生成器が返し、変換パイプラインが受け取る唯一の表現
`Mesh` と、その 1 面分のビュー `Face` を提供する。

データモデル（不変条件）:
- `coords: float64 ndarray (N, 3)` — 全面の頂点ループを 1 本の連続メモリで保持（行は XYZ）。
- `offsets: int32 ndarray (M+1,)` — 各面の開始 index（末尾は必ず N）。
- i 番目の面の頂点ループは `coords[offsets[i] : offsets[i+1]]` で取り出せる。
- `colors: tuple[str, ...]` — 面ごとの基本色（長さ M）。Hex でも `hsl(...)` でもよい。
- `oriented: bool ndarray (M,)` — 巻き順が外向き法線を与えると検証済みか。

API 方針:
- 変換は `translate/scale/rotate/concat` の最小セットのみを提供。
- すべて純関数（副作用ゼロ）であり、新しい `Mesh` インスタンスを返す。
- 頂点をまとめて変換し、面ごとのループは `faces()` で取り出す。

直感図:

    # 三角形 1 枚 + 四角形 1 枚
    # coords (N=7)
    #   0..2  三角形
    #   3..6  四角形
    # offsets (M+1=3): [0, 3, 7]
    # colors: ("#00ffff", "hsl(170, 100%, 50%)")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np

from common.types import Vec3

from . import vecmath


@dataclass(frozen=True, eq=False)
class Face:
    """平面の頂点ループ 1 つと基本色。

    `verts` は (K, 3) float64。`(v1-v0) x (v2-v0)` が生の法線の向きを決める。
    `oriented=False` の面は、下流で物体中心を基準に法線を外向きへ補正される。
    """

    verts: np.ndarray
    color: str
    oriented: bool = True


def _normalize_mesh_input(
    coords: np.ndarray,
    offsets: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """`Mesh` 生成時の内部正規化ヘルパ。"""

    coords_arr = np.asarray(coords, dtype=np.float64)
    if coords_arr.ndim != 2 or coords_arr.shape[1] != 3:
        raise ValueError("coords は形状 (N, 3) の配列である必要があります。")
    coords_arr = np.ascontiguousarray(coords_arr)

    offsets_arr = np.asarray(offsets, dtype=np.int32)
    if offsets_arr.ndim != 1:
        raise ValueError("offsets は 1 次元配列である必要があります。")
    if offsets_arr.size == 0:
        raise ValueError("offsets は少なくとも1要素を含む必要があります。")
    if offsets_arr[0] != 0:
        raise ValueError("offsets[0] は常に 0 である必要があります。")
    if offsets_arr[-1] != coords_arr.shape[0]:
        raise ValueError("offsets[-1] は coords の行数と一致する必要があります。")
    if np.any(np.diff(offsets_arr) < 0):
        raise ValueError("offsets は単調非減少である必要があります。")
    offsets_arr = np.ascontiguousarray(offsets_arr)

    return coords_arr, offsets_arr


class Mesh:
    """面ループ集合の統一データ構造。

    フィールド:
    - `coords (N,3) float64`: すべての面の頂点を連結した配列。
    - `offsets (M+1,) int32`: 各面の開始 index（末尾は N）。
    - `colors (M,)`: 面ごとの基本色文字列。
    - `oriented (M,) bool`: 巻き順が外向きと検証済みか。
    """

    __slots__ = ("coords", "offsets", "colors", "oriented")

    coords: np.ndarray
    offsets: np.ndarray
    colors: tuple[str, ...]
    oriented: np.ndarray

    def __init__(
        self,
        coords: np.ndarray,
        offsets: np.ndarray,
        colors: Iterable[str],
        oriented: Iterable[bool] | np.ndarray | None = None,
    ) -> None:
        norm_coords, norm_offsets = _normalize_mesh_input(coords, offsets)
        n_faces = int(norm_offsets.shape[0] - 1)
        colors_t = tuple(str(c) for c in colors)
        if len(colors_t) != n_faces:
            raise ValueError(f"colors の長さ {len(colors_t)} が面数 {n_faces} と一致しません。")
        if oriented is None:
            oriented_arr = np.ones(n_faces, dtype=bool)
        else:
            oriented_arr = np.array(list(oriented), dtype=bool)
            if oriented_arr.shape != (n_faces,):
                raise ValueError("oriented の長さが面数と一致しません。")
        self.coords = norm_coords
        self.offsets = norm_offsets
        self.colors = colors_t
        self.oriented = oriented_arr

    # ── ファクトリ ───────────────────
    @classmethod
    def from_faces(cls, faces: Iterable[Face]) -> "Mesh":
        """`Face` 列を統一表現に詰め直して `Mesh` を生成する。

        Raises
        ------
        ValueError
            頂点配列が `(K, 3)` でない場合。
        """
        loops: list[np.ndarray] = []
        colors: list[str] = []
        oriented: list[bool] = []
        for face in faces:
            arr = np.asarray(face.verts, dtype=np.float64)
            if arr.ndim != 2 or arr.shape[1] != 3:
                raise ValueError(f"面の頂点配列の形状が不正です: {arr.shape}")
            loops.append(arr)
            colors.append(face.color)
            oriented.append(bool(face.oriented))

        if not loops:
            return cls.empty()

        offsets = np.empty(len(loops) + 1, dtype=np.int32)
        offsets[0] = 0
        for i, arr in enumerate(loops, start=1):
            offsets[i] = offsets[i - 1] + arr.shape[0]
        coords = np.concatenate(loops, axis=0)
        return cls(coords, offsets, colors, oriented)

    @classmethod
    def empty(cls) -> "Mesh":
        return cls(np.empty((0, 3), dtype=np.float64), np.array([0], dtype=np.int32), ())

    # ── 取り出し ─────────────────────
    def faces(self) -> Iterator[Face]:
        """各面を `Face`（頂点は読み取り専用ビュー）として順に返す。"""
        for i in range(len(self)):
            yield self.face(i)

    def face(self, i: int) -> Face:
        start, end = int(self.offsets[i]), int(self.offsets[i + 1])
        view = self.coords[start:end].view()
        view.setflags(write=False)
        return Face(verts=view, color=self.colors[i], oriented=bool(self.oriented[i]))

    def as_arrays(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        """`(coords, offsets)` を返す。`copy=False` は読み取り専用ビュー。"""
        if copy:
            return self.coords.copy(), self.offsets.copy()
        coords_view = self.coords.view()
        offsets_view = self.offsets.view()
        coords_view.setflags(write=False)
        offsets_view.setflags(write=False)
        return coords_view, offsets_view

    @property
    def is_empty(self) -> bool:
        return self.coords.size == 0

    def _with_coords(self, coords: np.ndarray) -> "Mesh":
        return Mesh(coords, self.offsets.copy(), self.colors, self.oriented.copy())

    # ── 変換（すべて純粋） ────────────
    def translate(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> "Mesh":
        """平行移動（純関数）。"""
        vec = np.array([dx, dy, dz], dtype=np.float64)
        return self._with_coords(self.coords + vec)

    def scale(
        self,
        sx: float = 1.0,
        sy: float | None = None,
        sz: float | None = None,
        center: Vec3 = (0.0, 0.0, 0.0),
    ) -> "Mesh":
        """拡大縮小（純関数）。`sy/sz` 省略時は `sx` を使う等方拡大。"""
        if sy is None:
            sy = sx
        if sz is None:
            sz = sx
        pivot = np.asarray(center, dtype=np.float64)
        factors = np.array([sx, sy, sz], dtype=np.float64)
        return self._with_coords((self.coords - pivot) * factors + pivot)

    def rotate(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        center: Vec3 = (0.0, 0.0, 0.0),
    ) -> "Mesh":
        """回転（純関数）。X→Y→Z の順に右手系で適用。

        Notes
        -----
        例として `(1, 0, 0)` を Z 軸に `π/2` 回転すると `(0, 1, 0)` に一致。
        """
        if x == 0 and y == 0 and z == 0:
            return self._with_coords(self.coords.copy())
        pivot = np.asarray(center, dtype=np.float64)
        rotated = vecmath.rotate_euler(self.coords - pivot, (x, y, z)) + pivot
        return self._with_coords(rotated)

    def concat(self, other: "Mesh") -> "Mesh":
        """面集合の連結（純関数）。後段の `offsets` は先行頂点数だけシフトする。"""
        offset_shift = self.coords.shape[0]
        new_coords = np.vstack([self.coords, other.coords])
        new_offsets = np.hstack([self.offsets, other.offsets[1:] + offset_shift]).astype(np.int32)
        return Mesh(
            new_coords,
            new_offsets,
            self.colors + other.colors,
            np.concatenate([self.oriented, other.oriented]),
        )

    def __add__(self, other: "Mesh") -> "Mesh":
        """糖衣: `concat` のエイリアス。"""
        return self.concat(other)

    def __len__(self) -> int:
        """面数（`M`）を返す。"""
        return int(self.offsets.shape[0] - 1)

    @property
    def n_vertices(self) -> int:
        return int(self.coords.shape[0])

    @property
    def n_faces(self) -> int:
        return len(self)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Mesh(N={self.n_vertices}, M={self.n_faces})"


__all__ = ["Face", "Mesh"]
