"""
どこで: `common` の型定義。
何を: Vec2/Vec3 などの軽量エイリアスと、プリミティブ種別の列挙。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

from __future__ import annotations

from enum import Enum

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


class PrimitiveKind(str, Enum):
    """シーンオブジェクトのプリミティブ種別。

    値はエディタ側の表記（キャメルケース）をそのまま使う。
    レジストリ側はスネークケースに正規化して解決する。
    """

    BOX = "box"
    SPHERE = "sphere"
    CYLINDER = "cylinder"
    TORUS = "torus"
    CONE = "cone"
    PYRAMID = "pyramid"
    METABALLS = "metaballs"
    FLUID_BLOB = "fluidBlob"
    CLOUD_VOLUME = "cloudVolume"

    @property
    def is_volumetric(self) -> bool:
        """場のサンプリング/パフ群で近似する種別か。"""
        return self in (PrimitiveKind.METABALLS, PrimitiveKind.FLUID_BLOB, PrimitiveKind.CLOUD_VOLUME)


__all__ = ["Vec2", "Vec3", "PrimitiveKind"]
