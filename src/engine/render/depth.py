"""
どこで: `engine.render.depth`。
何を: 画家のアルゴリズム用に面を奥 → 手前の順へ安定ソートする。
なぜ: 同じ深度の面の順序がフレーム間で入れ替わる（ちらつく）のを防ぐため。

深度キーは面重心のカメラ座標 z。投影規約（`z + camera_distance`）ではカメラは -z 側にあり、
z が大きいほど遠い。よって z の降順に並べる。`sorted(..., reverse=True)` は安定性を保つ。
"""

from __future__ import annotations

from typing import Iterable, TypeVar

from .types import ProjectedFace

T = TypeVar("T", bound=ProjectedFace)


def depth_key(face: ProjectedFace) -> float:
    return face.depth


def sort_back_to_front(faces: Iterable[T]) -> list[T]:
    """遠い面から順に並べた新しいリストを返す（同深度は入力順を保持）。"""
    return sorted(faces, key=depth_key, reverse=True)


__all__ = ["depth_key", "sort_back_to_front"]
