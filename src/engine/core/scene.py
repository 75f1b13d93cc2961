"""
どこで: `engine.core.scene`。
何を: レンダラが読むシーンのスナップショット型（物体・カメラ・ライト・マテリアル・設定）。
なぜ: 外部の状態ストアが所有するシーンを不変値として受け取り、描画中に変更されないことを型で保証するため。

すべて frozen dataclass。更新は `dataclasses.replace` で新しい値を作る（状態ストア側の責務）。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from common.types import PrimitiveKind, Vec3

LightKind = Literal["ambient", "directional"]


@dataclass(frozen=True)
class Material:
    """物体のマテリアル。レンダラが使うのは `color`（`#rrggbb` 想定）のみ。"""

    color: str = "#00ffff"
    id: str = "default"
    ambient: float = 0.2
    diffuse: float = 0.8
    specular: float = 0.5
    shininess: float = 32.0


@dataclass(frozen=True)
class SceneObject:
    """シーン上の 1 物体。`locked` はエディタ専用で描画には影響しない。"""

    id: str
    kind: PrimitiveKind | str = PrimitiveKind.BOX
    name: str = ""
    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    scale: Vec3 = (1.0, 1.0, 1.0)
    material: Material = field(default_factory=Material)
    visible: bool = True
    locked: bool = False


@dataclass(frozen=True)
class Camera:
    """カメラ。`position[2]` はカメラ距離（ドリー）を兼ねる。near/far は参考値のみ。"""

    position: Vec3 = (0.0, 0.0, 500.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    fov: float = 800.0
    near: float = 1.0
    far: float = 2000.0

    @property
    def distance(self) -> float:
        return float(self.position[2])


@dataclass(frozen=True)
class Light:
    """ライト。`direction` は directional のみが使う（ワールド座標）。"""

    kind: LightKind | str = "ambient"
    color: str = "#ffffff"
    intensity: float = 1.0
    direction: Vec3 | None = None


@dataclass(frozen=True)
class Scene:
    """1 回の描画で読むシーン全体。`grid_visible` などの表示フラグは描画コアでは無視する。"""

    objects: tuple[SceneObject, ...] = ()
    lights: tuple[Light, ...] = ()
    camera: Camera = field(default_factory=Camera)
    selected_object_id: str | None = None
    grid_visible: bool = True
    axis_visible: bool = True
    lighting_mode: Literal["day", "night"] = "night"


@dataclass(frozen=True)
class EngineConfig:
    """描画設定。

    属性:
        fov: 投影スケールの分子（>0）。
        camera_distance: 既定カメラの距離。描画時の距離は `Camera.position[2]` を使う。
        ambient_intensity / directional_intensity / light_direction: 既定ライトの値。
        cull_epsilon: 背面カリングのしきい値（`dot <= epsilon` を可視とする）。
        primitive_size: 生成器に渡す基準寸法。
    """

    fov: float = 800.0
    camera_distance: float = 500.0
    ambient_intensity: float = 0.3
    directional_intensity: float = 0.8
    light_direction: Vec3 = (2.0 / 3.0, 2.0 / 3.0, 1.0 / 3.0)  # normalize(1, 1, 0.5)
    cull_epsilon: float = 0.15
    primitive_size: float = 50.0


__all__ = ["LightKind", "Material", "SceneObject", "Camera", "Light", "Scene", "EngineConfig"]
