"""
どこで: `util.color`。
何を: 色文字列の解釈/生成（`#rrggbb` → RGB、`hsl(...)` 文字列化）とライティングによる着色。
なぜ: 生成器・レンダラ・SVG 出力で同一の受理仕様と書式を共有するため。
"""

from __future__ import annotations

import logging
import math
import re

logger = logging.getLogger(__name__)

_HEX6 = re.compile(r"[0-9a-fA-F]{6}")

# 光量 0 でも真っ黒にしないための下駄
MIN_BRIGHTNESS = 0.2


def parse_hex_rgb(s: str) -> tuple[int, int, int]:
    """`#rrggbb`（`#` は省略可）から RGB(0–255) を返す。

    受理形式: `#` を取り除いた残りがちょうど 6 桁の 16 進数。大文字/小文字は不問。

    例外:
        ValueError: 上記以外の文字列。
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    if not _HEX6.fullmatch(t):
        raise ValueError(f"invalid hex color: '{s}' (expected #RRGGBB)")
    return (int(t[0:2], 16), int(t[2:4], 16), int(t[4:6], 16))


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def rgb_string(r: float, g: float, b: float) -> str:
    """CSS 互換の `rgb(r,g,b)`（各成分は四捨五入した整数）。"""
    return f"rgb({_round_half_up(r)},{_round_half_up(g)},{_round_half_up(b)})"


def hsl_string(hue: float, saturation: float, lightness: float) -> str:
    """CSS 互換の `hsl(h, s%, l%)`。数値は余分な 0 を落として書く。"""
    return f"hsl({hue:g}, {saturation:g}%, {lightness:g}%)"


def apply_lighting_to_color(color: str, intensity: float) -> str:
    """基本色を光量で暗くした `rgb(...)` を返す。

    係数は `0.2 + intensity * 0.8`。Hex 以外（`hsl(...)` や不正な文字列）は
    着色せずそのまま返す（エラーにはしない）。
    """
    try:
        r, g, b = parse_hex_rgb(color)
    except (ValueError, AttributeError):
        logger.debug("color %r is not #rrggbb; lighting tint skipped", color)
        return color
    factor = MIN_BRIGHTNESS + intensity * (1.0 - MIN_BRIGHTNESS)
    return rgb_string(r * factor, g * factor, b * factor)


__all__ = [
    "MIN_BRIGHTNESS",
    "parse_hex_rgb",
    "rgb_string",
    "hsl_string",
    "apply_lighting_to_color",
]
