"""
どこで: `engine.render.lighting`。
何を: 環境光 + 平行光（ランバート）の光量を [0, 1] に合算し、昼/夜のライト既定値を提供。
なぜ: カメラを周回させてもライトがワールドに固定されて見えるよう、光の向きをカメラ座標へ
      写す規約（逆回転）を一箇所にまとめるため。

平行光の向きはカメラ回転の各成分を符号反転した角度で、同じ X→Y→Z の順に回す。
これは厳密な逆回転ではない（順序が固定のため）が、表示上の挙動はこの規約に従う。
"""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from common.types import Vec3
from engine.core import vecmath
from engine.core.scene import Light

logger = logging.getLogger(__name__)


def light_direction_in_view(direction: Vec3, camera_rotation: Vec3) -> np.ndarray:
    """ワールド座標の光の向きをカメラ座標へ写し、正規化する。"""
    rotated = vecmath.rotate_euler(direction, vecmath.negated(camera_rotation))
    return vecmath.normalize(rotated)


def compute_light_intensity(normal, lights: Iterable[Light], camera_rotation: Vec3) -> float:
    """面法線（カメラ座標）に対する合計光量。結果は [0, 1] にクランプ。

    - ambient: `intensity` を無条件に加算。
    - directional: `max(0, dot(normal, dir)) * intensity` を加算。
    - 向きのない directional と未知種別は寄与 0（DEBUG ログ）。
    """
    total = 0.0
    for light in lights:
        if light.kind == "ambient":
            total += float(light.intensity)
        elif light.kind == "directional" and light.direction is not None:
            d = light_direction_in_view(light.direction, camera_rotation)
            total += max(0.0, vecmath.dot(normal, d)) * float(light.intensity)
        else:
            logger.debug("light %r contributes nothing", light)
    return vecmath.clamp(total, 0.0, 1.0)


def lights_for_mode(mode: str) -> tuple[Light, ...]:
    """照明モードの既定ライト（`day` 以外は夜として扱う）。"""
    if mode == "day":
        return (
            Light(kind="ambient", color="#ffffff", intensity=0.6),
            Light(kind="directional", color="#ffffee", intensity=1.0, direction=(1.0, 1.0, 0.5)),
        )
    return (
        Light(kind="ambient", color="#8888ff", intensity=0.3),
        Light(kind="directional", color="#aaaaff", intensity=0.5, direction=(-1.0, 1.0, 1.0)),
    )


__all__ = ["light_direction_in_view", "compute_light_intensity", "lights_for_mode"]
