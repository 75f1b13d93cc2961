from __future__ import annotations

import io
import xml.etree.ElementTree as ET
from pathlib import Path

import numpy as np

from engine.export.svg import SvgParams, faces_to_svg, write_svg
from engine.render.types import ProjectedFace

SVG_NS = "{http://www.w3.org/2000/svg}"


def _face(oid: str, color: str, selected: bool = False) -> ProjectedFace:
    return ProjectedFace(
        verts=np.zeros((3, 3)),
        projected=np.array([[10.0, 10.0], [20.5, 10.0], [15.0, 20.125]]),
        color=color,
        depth=0.0,
        light_intensity=1.0,
        object_id=oid,
        is_selected=selected,
    )


def test_polygons_keep_input_order_and_attributes() -> None:
    faces = [_face("a", "rgb(1,2,3)"), _face("b", "hsl(10, 50%, 50%)", selected=True)]
    root = ET.fromstring(faces_to_svg(faces, 800, 600))
    assert root.attrib["viewBox"] == "0 0 800 600"
    polys = root.findall(f"{SVG_NS}polygon")
    assert [p.attrib["data-object-id"] for p in polys] == ["a", "b"]
    assert polys[0].attrib["fill"] == "rgb(1,2,3)"
    assert polys[0].attrib["stroke"] == "rgb(1,2,3)"
    assert polys[0].attrib["points"] == "10,10 20.5,10 15,20.12"
    assert polys[1].attrib["stroke"] == "#ffffff"
    assert polys[1].attrib["stroke-width"] == "2"


def test_background_is_optional() -> None:
    root = ET.fromstring(faces_to_svg([], 100, 50, SvgParams(background=None)))
    assert root.findall(f"{SVG_NS}rect") == []
    root = ET.fromstring(faces_to_svg([], 100, 50))
    assert len(root.findall(f"{SVG_NS}rect")) == 1


def test_attribute_values_are_escaped() -> None:
    text = faces_to_svg([_face('x"<y>', "#ffffff")], 10, 10)
    poly = ET.fromstring(text).find(f"{SVG_NS}polygon")
    assert poly is not None
    assert poly.attrib["data-object-id"] == 'x"<y>'


def test_write_svg_to_path_and_stream(tmp_path: Path) -> None:
    faces = [_face("a", "#00ffff")]
    dest = tmp_path / "out" / "frame.svg"
    write_svg(faces, 800, 600, dest)
    assert dest.read_text(encoding="utf-8") == faces_to_svg(faces, 800, 600)
    buf = io.StringIO()
    write_svg(faces, 800, 600, buf)
    assert buf.getvalue() == faces_to_svg(faces, 800, 600)
