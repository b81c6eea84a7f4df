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

"""Plotly view of boring log scenes.

Converts a rendered scene into a ``plotly.graph_objects.Figure`` for notebooks
and dashboards. Boxes, rules, paths and polygons become layout shapes; all
labels go into one text trace. Figure coordinates are the drawing's own
(inside the margins) with depth increasing downward.
"""

import plotly.graph_objects as go

from .render import render_scene
from .scene import Line, Path, PatternRef, Polygon, Rect, Scene, Text, format_number

TRANSPARENT = "rgba(0,0,0,0)"

_TEXT_POSITION = {
    "middle": "middle center",
    "end": "middle left",
    None: "middle right",
    "start": "middle right",
}


def _fill_color(scene, fill):
    if isinstance(fill, PatternRef):
        pattern = scene.pattern(fill.pattern_id)
        return pattern.fill if pattern is not None else TRANSPARENT
    if fill in (None, "none"):
        return TRANSPARENT
    return fill


def _line_style(stroke, width, dash):
    style = dict(color=stroke or TRANSPARENT, width=width if width is not None else 1)
    if dash:
        style["dash"] = "dot"
    return style


def _polygon_path(points):
    coords = [f"{format_number(x)},{format_number(y)}" for x, y in points]
    return "M " + " L ".join(coords) + " Z"


def scene_shapes(scene):
    shapes = []
    for cmd in scene.commands:
        if isinstance(cmd, Rect):
            shapes.append(dict(
                type="rect", xref="x", yref="y",
                x0=cmd.x, x1=cmd.x + cmd.width, y0=cmd.y, y1=cmd.y + cmd.height,
                fillcolor=_fill_color(scene, cmd.fill),
                line=_line_style(cmd.stroke, cmd.stroke_width, cmd.dash),
                layer="below",
            ))
        elif isinstance(cmd, Line):
            shapes.append(dict(
                type="line", xref="x", yref="y",
                x0=cmd.x1, x1=cmd.x2, y0=cmd.y1, y1=cmd.y2,
                line=_line_style(cmd.stroke, cmd.stroke_width, cmd.dash),
            ))
        elif isinstance(cmd, Path):
            shapes.append(dict(
                type="path", xref="x", yref="y", path=cmd.d,
                fillcolor=_fill_color(scene, cmd.fill),
                line=_line_style(cmd.stroke, cmd.stroke_width, None),
            ))
        elif isinstance(cmd, Polygon):
            shapes.append(dict(
                type="path", xref="x", yref="y", path=_polygon_path(cmd.points),
                fillcolor=_fill_color(scene, cmd.fill),
                line=_line_style(cmd.stroke, None, None),
            ))
    return shapes


def scene_text_trace(scene):
    texts = [cmd for cmd in scene.commands if isinstance(cmd, Text)]
    return go.Scatter(
        x=[t.x for t in texts],
        # scene y is the text baseline; plotly centers text on y
        y=[t.y - t.font_size * 0.35 for t in texts],
        mode="text",
        text=[f"<b>{t.text}</b>" if t.weight == "bold" else t.text for t in texts],
        textposition=[_TEXT_POSITION.get(t.anchor, "middle right") for t in texts],
        textfont=dict(size=[t.font_size for t in texts], color=[t.fill for t in texts]),
        showlegend=False,
        hoverinfo="text",
    )


def plot_boring_log(scene_or_record, config=None):
    """Render a scene, BoringRecord or JSON document as a plotly figure."""
    if scene_or_record is None:
        return go.Figure()
    if isinstance(scene_or_record, Scene):
        scene = scene_or_record
    else:
        scene = render_scene(scene_or_record, config)

    dx, dy = scene.offset
    border = scene.by_role("border")
    if border:
        width, height = border[0].width, border[0].height
    else:
        width, height = scene.width - 2 * dx, scene.height - 2 * dy
    fig = go.Figure(data=[scene_text_trace(scene)])
    fig.update_layout(
        height=scene.height,
        width=scene.width,
        margin=dict(l=dx, r=scene.width - dx - width, t=dy, b=scene.height - dy - height),
        xaxis=dict(range=[0, width], visible=False, fixedrange=True),
        yaxis=dict(range=[height, 0], visible=False, fixedrange=True),
        shapes=scene_shapes(scene),
        plot_bgcolor="white",
        showlegend=False,
    )
    return fig
