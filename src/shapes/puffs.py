"""
どこで: `shapes.puffs`。
何を: 球/楕円体の「パフ」群で流体塊（fluidBlob）と雲（cloudVolume）を表す生成器。
なぜ: 粒子シミュレーションの見た目の代理として、時刻と粒子ごとの位相だけから決まる
      連続的なアニメーションを安価に作るため（物理シミュレーションは行わない）。

各パフは `shapes.sphere.sphere_faces` の低分割球を正の係数で拡縮・移動したもので、
巻き順（外向き）はそのまま保たれる。
"""

from __future__ import annotations

from typing import Any

import numpy as np

from engine.core.mesh import Mesh

from .registry import shape
from .sphere import sphere_faces

PUFF_SEGMENTS = 8
FLUID_PARTICLES = 6
CLOUD_PUFFS = 7

# 雲のパフは y 方向に潰した楕円体
CLOUD_SQUASH = (1.0, 0.6, 0.85)


def fluid_particles(size: float, time: float) -> list[tuple[np.ndarray, float]]:
    """流体塊の各粒子の (中心, 半径)。位相は `2π i / FLUID_PARTICLES`。"""
    out: list[tuple[np.ndarray, float]] = []
    orbit = size * 0.35
    for i in range(FLUID_PARTICLES):
        phase = 2 * np.pi * i / FLUID_PARTICLES
        wobble = 1.0 + 0.15 * np.sin(time * 1.3 + phase)
        center = np.array(
            [
                orbit * np.cos(phase + time * 0.8) * wobble,
                size * 0.2 * np.sin(time * 1.7 + phase * 2),
                orbit * np.sin(phase + time * 0.8) * wobble,
            ]
        )
        radius = size * (0.3 + 0.06 * np.sin(time * 2.1 + phase))
        out.append((center, float(radius)))
    return out


def cloud_puffs(size: float, time: float) -> list[tuple[np.ndarray, float]]:
    """雲の各パフの (中心, 半径)。x 方向に横長に並べ、ゆっくり漂い・呼吸させる。"""
    out: list[tuple[np.ndarray, float]] = []
    mid = (CLOUD_PUFFS - 1) / 2
    for i in range(CLOUD_PUFFS):
        phase = 2 * np.pi * i / CLOUD_PUFFS
        u = (i - mid) / mid
        center = np.array(
            [
                size * 0.55 * u + size * 0.08 * np.sin(time * 0.4 + phase),
                size * 0.12 * np.sin(phase * 2) + size * 0.05 * np.sin(time * 0.7 + phase),
                size * 0.18 * np.cos(phase * 3),
            ]
        )
        radius = size * (0.32 - 0.08 * abs(u)) * (1.0 + 0.08 * np.sin(time * 0.9 + phase))
        out.append((center, float(radius)))
    return out


def _puff_mesh(
    center: np.ndarray,
    radius: float,
    *,
    squash: tuple[float, float, float] = (1.0, 1.0, 1.0),
    hue_start: float,
    hue_span: float,
) -> Mesh:
    puff = Mesh.from_faces(sphere_faces(radius, PUFF_SEGMENTS, hue_start=hue_start, hue_span=hue_span))
    if squash != (1.0, 1.0, 1.0):
        puff = puff.scale(*squash)
    return puff.translate(*center)


def _combine(meshes: list[Mesh]) -> Mesh:
    result = Mesh.empty()
    for m in meshes:
        result = result.concat(m)
    return result


@shape("fluidBlob")
def fluid_blob(size: float = 50.0, *, time: float = 0.0, **params: Any) -> Mesh:
    """時刻に応じてうねる球パフの塊を生成します。"""
    return _combine(
        [_puff_mesh(c, r, hue_start=190.0, hue_span=40.0) for c, r in fluid_particles(size, time)]
    )


@shape("cloudVolume")
def cloud_volume(size: float = 50.0, *, time: float = 0.0, **params: Any) -> Mesh:
    """横長に並んだ楕円体パフの雲を生成します。"""
    return _combine(
        [
            _puff_mesh(c, r, squash=CLOUD_SQUASH, hue_start=200.0, hue_span=20.0)
            for c, r in cloud_puffs(size, time)
        ]
    )
