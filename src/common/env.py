"""
どこで: `common.env`
何を: `SFX_*` 環境変数を型付きで読むヘルパ。
なぜ: 設定読み込みで `os.getenv` + 例外/境界ガードを繰り返さず、不正値を常に既定値へ倒すため。

共通規約: 未設定・空白のみ・解釈できない値は `default`。`min_value` 指定時は下限へ丸める。
"""

from __future__ import annotations

import math
import os
from typing import Optional

_TRUTHY = frozenset({"true", "t", "yes", "y", "on"})
_FALSY = frozenset({"false", "f", "no", "n", "off"})


def _raw(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """整数（例: 分割数）。"""
    raw = _raw(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(value, min_value) if min_value is not None else value


def env_float(name: str, default: float, *, min_value: Optional[float] = None) -> float:
    """有限の実数（例: カリング閾値）。nan/inf は既定値。"""
    raw = _raw(name)
    try:
        value = float(raw) if raw is not None else float(default)
    except ValueError:
        value = float(default)
    if not math.isfinite(value):
        value = float(default)
    return max(value, float(min_value)) if min_value is not None else value


def env_str(name: str, default: str) -> str:
    """前後空白を除いた文字列（例: ログレベル名）。"""
    raw = _raw(name)
    return default if raw is None else raw


def env_bool(name: str, default: bool = False) -> bool:
    """真偽値。整数は 0 以外を真、`true/false` `yes/no` `on/off` 系の語も受理。"""
    raw = _raw(name)
    if raw is None:
        return bool(default)
    word = raw.lower()
    if word in _TRUTHY:
        return True
    if word in _FALSY:
        return False
    try:
        return int(word) != 0
    except ValueError:
        return bool(default)


__all__ = ["env_int", "env_float", "env_str", "env_bool"]
