"""
どこで: `engine.render` 型定義。
何を: 1 フレームの出力単位 `ProjectedFace`。
なぜ: 描画面がそのまま配列順に塗れる自己完結した値（座標・色・深度・所有者）が必要。
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class ProjectedFace:
    """投影済みの 1 面。描画面は受け取った順に塗る（再ソートしない）。"""

    verts: np.ndarray  # (K, 3) カメラ座標
    projected: np.ndarray  # (K, 2) スクリーン座標 [px]
    color: str
    depth: float
    light_intensity: float
    object_id: str
    is_selected: bool = False
    normal: np.ndarray | None = None  # 外向きに揃えたカメラ座標の法線

    def points(self) -> list[tuple[float, float]]:
        """スクリーン多角形を `(x, y)` のリストで返す。"""
        return [(float(x), float(y)) for x, y in self.projected]

    @property
    def screen_centroid(self) -> tuple[float, float]:
        cx, cy = self.projected.mean(axis=0)
        return float(cx), float(cy)


__all__ = ["ProjectedFace"]
