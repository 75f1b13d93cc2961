"""
どこで: `common.settings`
何を: レンダラの既定パラメータを環境変数から型付きで一元管理し、起動時に読み込む。
なぜ: 分割数・カリング閾値などの既定値を散在させず、テストから差し替え可能にするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_float, env_int, env_str


@dataclass
class _Settings:
    # Shapes
    PRIMITIVE_SIZE: float = 50.0
    SPHERE_SEGMENTS: int = 16
    ROUND_SEGMENTS: int = 16
    VOLUME_GRID: int = 12

    # Render
    CULL_EPSILON: float = 0.15
    DEBUG_FRAME_STATS: bool = False

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - int は `env_int`、float は `env_float`、bool は `env_bool` を使用。
    - 分割数は下限丸めを適用（0 以下では面が作れない）。
    """
    # Shapes
    _settings.PRIMITIVE_SIZE = env_float("SFX_PRIMITIVE_SIZE", 50.0, min_value=0.0)
    _settings.SPHERE_SEGMENTS = env_int("SFX_SPHERE_SEGMENTS", 16, min_value=3) or 16
    _settings.ROUND_SEGMENTS = env_int("SFX_ROUND_SEGMENTS", 16, min_value=3) or 16
    _settings.VOLUME_GRID = env_int("SFX_VOLUME_GRID", 12, min_value=2) or 12

    # Render
    _settings.CULL_EPSILON = env_float("SFX_CULL_EPSILON", 0.15)
    _settings.DEBUG_FRAME_STATS = env_bool("SFX_DEBUG_FRAME_STATS", False)

    # Misc
    _settings.LOG_LEVEL = env_str("SFX_LOG_LEVEL", "INFO")


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
