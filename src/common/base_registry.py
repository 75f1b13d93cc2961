"""
どこで: `common.base_registry`。
何を: 名前 → 生成関数の対応表（ディスパッチテーブル）と、キー表記の正規化。
なぜ: プリミティブ種別ごとの純関数を継承階層なしで束ね、キー表記揺れ
（`fluidBlob` / `fluid_blob` / `fluid-blob`）と未知キーの扱いを一箇所で吸収するため。
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Iterator

logger = logging.getLogger(__name__)

_WORD_BOUNDARY = re.compile(r"(.)([A-Z][a-z]+)")
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")


def normalize_key(name: str) -> str:
    """キーを snake_case に揃える（例: "cloudVolume" -> "cloud_volume"）。

    例外:
        TypeError: 文字列以外。
        ValueError: 空文字（前後の空白のみを含む）。
    """
    if not isinstance(name, str):
        raise TypeError(f"registry key must be str: got {type(name).__name__}")
    key = name.strip().replace("-", "_")
    if not key:
        raise ValueError("registry key must not be empty")
    if not any(c.isupper() for c in key):
        return key
    key = _WORD_BOUNDARY.sub(r"\1_\2", key)
    return _LOWER_UPPER.sub(r"\1_\2", key).lower()


class BaseRegistry:
    """正規化キーで関数を引く表。

    - `register(name)` はデコレータ。名前省略時は関数名を使う。
    - 同じキーへ別のオブジェクトを登録すると ValueError（同一オブジェクトの再登録は許容）。
    - `resolve(name, fallback)` は未知/不正キーを `fallback` に読み替える（DEBUG ログ）。
    """

    normalize_key = staticmethod(normalize_key)

    def __init__(self, label: str = "entry") -> None:
        self._label = label
        self._entries: dict[str, Any] = {}

    def register(self, name: str | None = None) -> Callable[[Any], Any]:
        def decorator(obj: Any) -> Any:
            key = normalize_key(name if name else obj.__name__)
            current = self._entries.get(key)
            if current is not None and current is not obj:
                raise ValueError(f"{self._label} '{key}' is already registered")
            self._entries[key] = obj
            return obj

        return decorator

    def get(self, name: str) -> Any:
        """登録済みの関数。未登録なら KeyError。"""
        key = normalize_key(name)
        try:
            return self._entries[key]
        except KeyError:
            raise KeyError(f"{self._label} '{name}' is not registered") from None

    def resolve(self, name: Any, fallback: str) -> Any:
        """`name` を引き、未知・不正な場合は `fallback` の関数を返す。"""
        try:
            return self.get(name)
        except (KeyError, TypeError, ValueError):
            logger.debug("%s %r not found; using %r", self._label, name, fallback)
            return self.get(fallback)

    def is_registered(self, name: Any) -> bool:
        """登録済みか。不正なキーは False。"""
        try:
            return normalize_key(name) in self._entries
        except (TypeError, ValueError):
            return False

    def list_all(self) -> list[str]:
        """登録順のキー一覧。"""
        return list(self._entries)

    def unregister(self, name: str) -> None:
        """登録を解除（未登録なら何もしない）。"""
        self._entries.pop(normalize_key(name), None)

    def clear(self) -> None:
        self._entries.clear()

    @property
    def registry(self) -> dict[str, Any]:
        """表のコピー（書き換えても本体に影響しない）。"""
        return dict(self._entries)

    def __contains__(self, name: object) -> bool:
        return self.is_registered(name)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
