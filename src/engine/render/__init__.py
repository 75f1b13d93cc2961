"""
どこで: `engine.render` サブパッケージ。
何を: カメラ座標の面 → 可視判定・ライティング・投影・深度ソート → `ProjectedFace` 列。
なぜ: 幾何（core/shapes）と描画面（SVG/キャンバス）の責務を分離し、描画順の契約を局所化するため。
"""

from .depth import sort_back_to_front
from .hit_test import pick_object
from .renderer import render_scene
from .types import ProjectedFace

__all__ = ["ProjectedFace", "render_scene", "sort_back_to_front", "pick_object"]
