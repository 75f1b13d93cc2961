"""共通フィクスチャ。

- 乱数シード固定
- 単位箱の最小シーンと既定設定
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings
from engine.core.scene import Camera, EngineConfig, Light, Material, Scene, SceneObject


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def config() -> EngineConfig:
    return EngineConfig(fov=800.0, camera_distance=500.0)


@pytest.fixture()
def unit_box() -> SceneObject:
    return SceneObject(id="box-1", name="Cube 1", material=Material(color="#00ffff"))


@pytest.fixture()
def box_scene(unit_box: SceneObject) -> Scene:
    """原点の箱 1 つ・環境光 1.0・正面カメラ。"""
    return Scene(
        objects=(unit_box,),
        lights=(Light(kind="ambient", intensity=1.0),),
        camera=Camera(position=(0.0, 0.0, 500.0), rotation=(0.0, 0.0, 0.0)),
    )


@pytest.fixture()
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """`SFX_*` を外した状態で設定を再読込し、終了後にも戻す。"""
    for name in (
        "SFX_PRIMITIVE_SIZE",
        "SFX_SPHERE_SEGMENTS",
        "SFX_ROUND_SEGMENTS",
        "SFX_VOLUME_GRID",
        "SFX_CULL_EPSILON",
        "SFX_DEBUG_FRAME_STATS",
        "SFX_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()
