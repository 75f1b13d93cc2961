"""
どこで: `shapes.registry`。
何を: プリミティブ種別名 → 生成関数 の表と、`@shape` 登録デコレータ、`generate_mesh` ディスパッチ。
なぜ: 種別ごとの純関数を継承なしで束ね、未知種別を box へ読み替える規約を一箇所に置くため。

生成関数の契約:
- `fn(size, *, time=0.0, **params) -> Mesh`（ローカル座標、原点中心）。
- 同じ `(size, time)` なら同じ `Mesh` を返す（乱数・外部状態を使わない）。
- 巻き順で外向き法線を与える面は `Face.oriented=True`（既定）。
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Mapping

from common.base_registry import BaseRegistry
from engine.core.mesh import Mesh

ShapeFn = Callable[..., Mesh]

FALLBACK_KIND = "box"

_shapes = BaseRegistry(label="shape")


def _check_signature(fn: Any) -> None:
    if not inspect.isfunction(fn):
        raise TypeError(f"@shape can only register functions: got {fn!r}")
    params = inspect.signature(fn).parameters.values()
    takes_time = any(
        p.name == "time" or p.kind is inspect.Parameter.VAR_KEYWORD for p in params
    )
    if not takes_time:
        raise TypeError(f"shape '{fn.__name__}' must accept a 'time' keyword")


def shape(arg: Any | None = None, /, name: str | None = None):
    """生成関数を登録するデコレータ。

    `@shape`（関数名で登録）、`@shape("fluidBlob")`、`@shape(name="fluidBlob")` のいずれも可。
    キーは snake_case に正規化される。

    例外:
        TypeError: 関数以外、または `time` キーワードを受け取らない関数。
        ValueError: 別の関数が同じキーで登録済み。
    """

    def _register(fn: Any, key: str | None) -> ShapeFn:
        _check_signature(fn)
        return _shapes.register(key)(fn)

    if inspect.isfunction(arg) and name is None:
        return _register(arg, None)
    key = arg if isinstance(arg, str) else name
    return lambda fn: _register(fn, key)


def get_shape(name: str) -> ShapeFn:
    """登録済みの生成関数。未登録なら KeyError。"""
    return _shapes.get(name)


def list_shapes() -> list[str]:
    return sorted(_shapes.list_all())


def is_shape_registered(name: str) -> bool:
    return _shapes.is_registered(name)


def unregister(name: str) -> None:
    _shapes.unregister(name)


def get_registry() -> Mapping[str, ShapeFn]:
    """キー → 生成関数 のコピー。"""
    return _shapes.registry


def generate_mesh(kind: Any, size: float = 50.0, time: float = 0.0) -> Mesh:
    """種別に応じたローカル座標の面メッシュを生成する。

    引数:
        kind: `PrimitiveKind` または種別名。未知/不正な値は box を生成する。
        size: 基準寸法。
        time: アニメーション時刻 [s]。時間依存の種別だけが参照する。
    """
    fn = _shapes.resolve(getattr(kind, "value", kind), FALLBACK_KIND)
    return fn(size, time=time)


__all__ = [
    "ShapeFn",
    "FALLBACK_KIND",
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    "unregister",
    "get_registry",
    "generate_mesh",
]
