"""
どこで: `engine.render.renderer`。
何を: 1 フレーム分のシーン描画（生成 → 物体変換 → カメラ変換 → 法線/カリング → ライティング →
      投影 → 深度ソート）を合成し、`ProjectedFace` のリストを返す公開エントリ。
なぜ: 各段を純関数に分けたまま、処理順とフレーム単位の契約（入力不変・同一入力で同一出力）を
      一箇所に集約するため。

メモ:
- 法線は生成器の巻き順を正とする（鏡映スケールのみ反転）。`oriented=False` の面だけ
  物体中心からの外向き推定で補正する。
- カメラ距離は `scene.camera.position[2]`。`EngineConfig.camera_distance` は既定カメラ用。
- メッシュはキャッシュしない（体積系は毎フレーム再サンプリングする）。
"""

from __future__ import annotations

import logging

import numpy as np

from common import settings
from engine.core import transform_utils, vecmath
from engine.core.scene import EngineConfig, Scene, SceneObject
from shapes.registry import generate_mesh
from util.color import apply_lighting_to_color

from .depth import sort_back_to_front
from .lighting import compute_light_intensity
from .projector import project_points
from .types import ProjectedFace
from .visibility import face_centroid, face_normal, is_face_visible, orient_outward

logger = logging.getLogger(__name__)


def _object_faces(
    obj: SceneObject,
    scene: Scene,
    config: EngineConfig,
    width: float,
    height: float,
    animation_time: float,
) -> tuple[list[ProjectedFace], int]:
    """1 物体の可視面を投影済みで返す（`(faces, culled_count)`）。"""
    camera = scene.camera
    distance = camera.distance

    local = generate_mesh(obj.kind, config.primitive_size, animation_time)
    world = transform_utils.transform_combined(local, obj.position, obj.rotation, obj.scale)
    view = transform_utils.to_camera_space(world, camera.position, camera.rotation)

    mirrored = transform_utils.mirrors_winding(obj.scale)
    center = None
    if not bool(np.all(view.oriented)):
        center = transform_utils.camera_point(obj.position, camera.position, camera.rotation)

    selected = scene.selected_object_id is not None and obj.id == scene.selected_object_id
    # マテリアル色が無ければ生成器の面色を使う
    base_color = obj.material.color if obj.material is not None else None
    out: list[ProjectedFace] = []
    culled = 0
    for face in view.faces():
        centroid = face_centroid(face.verts)
        normal = face_normal(face.verts)
        if not face.oriented:
            normal = orient_outward(normal, centroid, center)
        elif mirrored:
            normal = -normal

        if not is_face_visible(normal, centroid, distance, config.cull_epsilon):
            culled += 1
            continue

        intensity = compute_light_intensity(normal, scene.lights, camera.rotation)
        out.append(
            ProjectedFace(
                verts=np.array(face.verts, dtype=np.float64),
                projected=project_points(face.verts, width, height, config.fov, distance),
                color=apply_lighting_to_color(base_color or face.color, intensity),
                depth=float(centroid[2]),
                light_intensity=intensity,
                object_id=obj.id,
                is_selected=selected,
                normal=normal,
            )
        )
    return out, culled


def render_scene(
    scene: Scene,
    config: EngineConfig,
    viewport_width: float,
    viewport_height: float,
    animation_time: float = 0.0,
) -> list[ProjectedFace]:
    """シーンを描画順（奥 → 手前）の `ProjectedFace` リストへ変換する。

    引数:
        scene: シーンのスナップショット（変更しない）。
        config: 描画設定（fov / cull_epsilon / primitive_size を参照）。
        viewport_width, viewport_height: ビューポート寸法 [px]。
        animation_time: 時間依存の生成器に渡す時刻 [s]。

    返り値:
        描画面がこの順に塗るべき面のリスト。`visible=False` の物体は生成自体を省く。
    """
    faces: list[ProjectedFace] = []
    culled_total = 0
    for obj in scene.objects:
        if not obj.visible:
            continue
        obj_faces, culled = _object_faces(
            obj, scene, config, viewport_width, viewport_height, animation_time
        )
        faces.extend(obj_faces)
        culled_total += culled

    ordered = sort_back_to_front(faces)
    level = logging.INFO if settings.get().DEBUG_FRAME_STATS else logging.DEBUG
    if logger.isEnabledFor(level):
        logger.log(
            level,
            "render_scene: objects=%d faces=%d culled=%d t=%.3f",
            len(scene.objects),
            len(ordered),
            culled_total,
            animation_time,
        )
    return ordered


__all__ = ["render_scene"]
