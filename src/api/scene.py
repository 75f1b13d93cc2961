"""
どこで: `api.scene`。
何を: シーン型の再輸出と、既定値（設定・カメラ・マテリアル・ライト・初期シーン）のファクトリ。
なぜ: エディタ起動直後と同じシーンをコードから一行で組み立て、描画結果を試せるようにするため。
"""

from __future__ import annotations

from common import settings
from common.types import PrimitiveKind
from engine.core.scene import Camera, EngineConfig, Light, Material, Scene, SceneObject
from engine.render.lighting import lights_for_mode

# 名前 → 基本色
DEFAULT_MATERIALS: dict[str, str] = {
    "cyan": "#00ffff",
    "magenta": "#ff00ff",
    "yellow": "#ffff00",
    "orange": "#ff8800",
    "green": "#00ff88",
}


def default_config() -> EngineConfig:
    """現在の設定スナップショットから `EngineConfig` を作る。"""
    s = settings.get()
    return EngineConfig(
        cull_epsilon=float(s.CULL_EPSILON),
        primitive_size=float(s.PRIMITIVE_SIZE),
    )


def default_camera(config: EngineConfig | None = None) -> Camera:
    """やや見下ろす角度の既定カメラ。距離は `config.camera_distance`。"""
    cfg = config or EngineConfig()
    return Camera(
        position=(0.0, 0.0, float(cfg.camera_distance)),
        rotation=(0.4, -0.5, 0.0),
        fov=float(cfg.fov),
    )


def lights_from_config(config: EngineConfig | None = None) -> tuple[Light, ...]:
    """`EngineConfig` の既定光量・向きから 環境光 + 平行光 を作る。"""
    cfg = config or EngineConfig()
    return (
        Light(kind="ambient", intensity=float(cfg.ambient_intensity)),
        Light(
            kind="directional",
            intensity=float(cfg.directional_intensity),
            direction=tuple(float(c) for c in cfg.light_direction),
        ),
    )


def default_material(name: str = "cyan") -> Material:
    """名前付きの既定マテリアル。

    例外:
        KeyError: 未知の名前。
    """
    return Material(color=DEFAULT_MATERIALS[name], id=name)


def default_scene(config: EngineConfig | None = None) -> Scene:
    """初期シーン（箱・球・トーラスの 3 物体、夜の照明）。"""
    return Scene(
        objects=(
            SceneObject(
                id="box-1",
                kind=PrimitiveKind.BOX,
                name="Cube 1",
                position=(-80.0, 30.0, 0.0),
                rotation=(0.3, 0.3, 0.0),
                material=default_material("cyan"),
            ),
            SceneObject(
                id="sphere-1",
                kind=PrimitiveKind.SPHERE,
                name="Sphere 1",
                position=(80.0, -20.0, 20.0),
                scale=(0.9, 0.9, 0.9),
                material=default_material("magenta"),
            ),
            SceneObject(
                id="torus-1",
                kind=PrimitiveKind.TORUS,
                name="Torus 1",
                position=(0.0, -60.0, -30.0),
                rotation=(0.5, 0.2, 0.0),
                material=default_material("yellow"),
            ),
        ),
        lights=lights_for_mode("night"),
        camera=default_camera(config),
        lighting_mode="night",
    )


__all__ = [
    "Camera",
    "EngineConfig",
    "Light",
    "Material",
    "Scene",
    "SceneObject",
    "DEFAULT_MATERIALS",
    "default_config",
    "default_camera",
    "default_material",
    "default_scene",
    "lights_for_mode",
    "lights_from_config",
]
