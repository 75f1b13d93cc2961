"""
どこで: `api` 入口（高レベル公開 API）。
何を: シーン型・既定値ファクトリ・`render_scene`・SVG 出力・ヒットテストを再輸出。
なぜ: 利用者が単一名前空間からシーン構築 → 描画 → 出力まで完結できるようにするため。

Usage:
    from api import default_scene, default_config, render_scene, write_svg

    cfg = default_config()
    faces = render_scene(default_scene(cfg), cfg, 800, 600, animation_time=0.0)
    write_svg(faces, 800, 600, "out.svg")
"""

from common.types import PrimitiveKind
from engine.core.scene import Camera, EngineConfig, Light, Material, Scene, SceneObject
from engine.export.svg import SvgParams, faces_to_svg, write_svg
from engine.render.hit_test import pick_object
from engine.render.renderer import render_scene
from engine.render.types import ProjectedFace
from shapes.registry import generate_mesh
from shapes.registry import shape as shape  # ユーザー拡張用デコレータ

from .scene import (
    DEFAULT_MATERIALS,
    default_camera,
    default_config,
    default_material,
    default_scene,
    lights_for_mode,
    lights_from_config,
)

__all__ = [
    # 描画
    "render_scene",
    "ProjectedFace",
    "generate_mesh",
    "shape",
    # シーン
    "Scene",
    "SceneObject",
    "Camera",
    "Light",
    "Material",
    "EngineConfig",
    "PrimitiveKind",
    "DEFAULT_MATERIALS",
    "default_config",
    "default_camera",
    "default_material",
    "default_scene",
    "lights_for_mode",
    "lights_from_config",
    # 出力/選択
    "faces_to_svg",
    "write_svg",
    "SvgParams",
    "pick_object",
]

# バージョン情報
__version__ = "0.1.0"
