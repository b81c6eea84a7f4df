# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

# This file is part of boringlog.

# boringlog is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# boringlog is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with boringlog.  If not, see <https://www.gnu.org/licenses/>.

"""SVG serialization of scenes."""

import xml.etree.ElementTree as ET

from .scene import Circle, Line, Path, PatternRef, Polygon, Rect, Text, format_number

SVG_NS = "http://www.w3.org/2000/svg"


def _set(el, **attrs):
    for key, val in attrs.items():
        if val is None:
            continue
        if isinstance(val, PatternRef):
            val = val.url
        elif isinstance(val, (int, float)):
            val = format_number(val)
        el.set(key.replace("_", "-"), val)
    return el


def _append(parent, cmd):
    if isinstance(cmd, Rect):
        return _set(
            ET.SubElement(parent, "rect"),
            x=cmd.x, y=cmd.y, width=cmd.width, height=cmd.height, rx=cmd.rx,
            fill=cmd.fill, stroke=cmd.stroke, stroke_width=cmd.stroke_width, stroke_dasharray=cmd.dash,
        )
    if isinstance(cmd, Line):
        return _set(
            ET.SubElement(parent, "line"),
            x1=cmd.x1, y1=cmd.y1, x2=cmd.x2, y2=cmd.y2,
            stroke=cmd.stroke, stroke_width=cmd.stroke_width, stroke_dasharray=cmd.dash,
        )
    if isinstance(cmd, Text):
        el = _set(
            ET.SubElement(parent, "text"),
            x=cmd.x, y=cmd.y, fill=cmd.fill, font_size=f"{format_number(cmd.font_size)}px",
            font_weight=cmd.weight, text_anchor=cmd.anchor,
        )
        el.text = cmd.text
        return el
    if isinstance(cmd, Path):
        return _set(ET.SubElement(parent, "path"), d=cmd.d, fill=cmd.fill, stroke=cmd.stroke, stroke_width=cmd.stroke_width)
    if isinstance(cmd, Polygon):
        points = " ".join(f"{format_number(x)},{format_number(y)}" for x, y in cmd.points)
        return _set(ET.SubElement(parent, "polygon"), points=points, fill=cmd.fill, stroke=cmd.stroke)
    if isinstance(cmd, Circle):
        return _set(
            ET.SubElement(parent, "circle"),
            cx=cmd.cx, cy=cmd.cy, r=cmd.r, fill=cmd.fill, stroke=cmd.stroke, stroke_width=cmd.stroke_width,
        )
    raise TypeError(f"Unsupported draw command: {type(cmd).__name__}")


def scene_to_element(scene):
    width = format_number(scene.width)
    height = format_number(scene.height)
    root = ET.Element("svg", {
        "xmlns": SVG_NS,
        "width": width,
        "height": height,
        "viewBox": f"0 0 {width} {height}",
        "style": f"font-family: {scene.font_family}",
    })
    defs = ET.SubElement(root, "defs")
    for pattern in scene.patterns:
        tile = _set(
            ET.SubElement(defs, "pattern"),
            id=pattern.id, width=pattern.size, height=pattern.size,
        )
        tile.set("patternUnits", "userSpaceOnUse")
        _set(ET.SubElement(tile, "rect"), width=pattern.size, height=pattern.size, fill=pattern.fill)
        for primitive in pattern.primitives:
            _append(tile, primitive)

    dx, dy = scene.offset
    group = ET.SubElement(root, "g", {"transform": f"translate({format_number(dx)}, {format_number(dy)})"})
    for cmd in scene.commands:
        _append(group, cmd)
    return root


def scene_to_svg(scene):
    """Serialize *scene* to an SVG document string.

    Output depends only on the scene, so equal scenes give identical text.
    """
    return ET.tostring(scene_to_element(scene), encoding="unicode")
