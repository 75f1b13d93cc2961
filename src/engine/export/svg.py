"""
どこで: `engine.export.svg`。
何を: `ProjectedFace` 列を受け取った順に `<polygon>` として塗る SVG 文書を生成/保存する。
なぜ: 描画面の参照実装として、画家のアルゴリズム（出力順に塗る）をそのまま確認できるようにするため。

規約:
- 面は再ソートしない。文書内の順序 = 描画順。
- 選択中（`is_selected`）の面にはハイライトの輪郭線を付ける。
- viewBox はビューポート寸法。画面外の多角形もそのまま出力する（クロップは閲覧側）。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable
from xml.sax.saxutils import quoteattr

from engine.render.types import ProjectedFace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SvgParams:
    """SVG 出力パラメータ。

    属性:
        background: 背景色。None で背景矩形を出力しない。
        stroke: 通常面の輪郭色（隣接面の継ぎ目を目立たなくするため塗り色と同じにする場合は None）。
        stroke_width: 通常面の輪郭幅 [px]。
        highlight: 選択面の輪郭色。
        highlight_width: 選択面の輪郭幅 [px]。
        decimals: 座標の小数桁数。
    """

    background: str | None = "#0a0a0f"
    stroke: str | None = None
    stroke_width: float = 0.5
    highlight: str = "#ffffff"
    highlight_width: float = 2.0
    decimals: int = 2


def _fmt(v: float, nd: int) -> str:
    return f"{round(float(v), nd):g}"


def _polygon(face: ProjectedFace, params: SvgParams) -> str:
    nd = int(params.decimals)
    points = " ".join(f"{_fmt(x, nd)},{_fmt(y, nd)}" for x, y in face.points())
    if face.is_selected:
        stroke, width = params.highlight, params.highlight_width
    else:
        stroke, width = (params.stroke or face.color), params.stroke_width
    return (
        f"<polygon points={quoteattr(points)} fill={quoteattr(face.color)} "
        f"stroke={quoteattr(stroke)} stroke-width={quoteattr(_fmt(width, nd))} "
        f"stroke-linejoin=\"round\" data-object-id={quoteattr(face.object_id)}/>"
    )


def faces_to_svg(
    faces: Iterable[ProjectedFace],
    width: float,
    height: float,
    params: SvgParams | None = None,
) -> str:
    """面リストを SVG 文字列へ変換する。

    引数:
        faces: 描画順（奥 → 手前）の面。
        width, height: ビューポート寸法 [px]。
        params: 出力パラメータ（省略時は既定）。
    """
    p = params or SvgParams()
    w, h = _fmt(width, 0), _fmt(height, 0)
    lines = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}">'
    ]
    if p.background is not None:
        lines.append(f'<rect width="100%" height="100%" fill={quoteattr(p.background)}/>')
    count = 0
    for face in faces:
        lines.append(_polygon(face, p))
        count += 1
    lines.append("</svg>")
    logger.debug("faces_to_svg: %d polygons", count)
    return "\n".join(lines) + "\n"


def write_svg(
    faces: Iterable[ProjectedFace],
    width: float,
    height: float,
    dest: str | Path | IO[str],
    params: SvgParams | None = None,
) -> None:
    """SVG を `dest`（パスまたは開かれたテキストファイル）へ書き出す。"""
    text = faces_to_svg(faces, width, height, params)
    if isinstance(dest, (str, Path)):
        path = Path(dest)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.info("wrote %s", path)
        return
    dest.write(text)


__all__ = ["SvgParams", "faces_to_svg", "write_svg"]
