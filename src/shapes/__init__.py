"""
どこで: `shapes` パッケージ（関数登録）。
何を: ビルトインのプリミティブ生成器を import 副作用で登録し、種別名から解決できるようにする。
なぜ: 生成ステージの拡張点を一箇所に集約し、レンダラからは `generate_mesh` だけを使うため。
"""

# 関数版 shape 定義を import して登録（副作用）
from . import box as _register_box  # noqa: F401
from . import cone as _register_cone  # noqa: F401
from . import cylinder as _register_cylinder  # noqa: F401
from . import metaballs as _register_metaballs  # noqa: F401
from . import puffs as _register_puffs  # noqa: F401
from . import pyramid as _register_pyramid  # noqa: F401
from . import sphere as _register_sphere  # noqa: F401
from . import torus as _register_torus  # noqa: F401
from .registry import generate_mesh, get_shape, is_shape_registered, list_shapes, shape  # re-export

__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    "generate_mesh",
]
