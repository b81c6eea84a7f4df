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

"""Boring log renderer.

:func:`render_scene` turns a record into a :class:`~boringlog.boring.scene.Scene`.
It is a pure function of (record, config): the record is never mutated and
two calls with the same inputs produce equal scenes. :class:`BoringLog` wraps
it with the set-data/render contract used by the editor.

Drawing order, back to front: header, column header row, depth scale, column
backgrounds, layer bands and text, samples, groundwater, well panel, legend,
outer border.
"""

import logging
import math

from .config import RenderConfig
from .layout import (
    COLUMN_HEADER_HEIGHT,
    LEGEND_ROW_HEIGHT,
    compute_layout,
    layer_bands,
    sample_marks,
)
from .patterns import pattern_id_for, resolve_code, resolve_pattern
from .record import Driller, as_record, format_depth
from .scene import Line, Path, PatternRef, Polygon, Rect, SceneBuilder, format_number
from .svg import scene_to_svg

logger = logging.getLogger(__name__)

HEADER_LINE_HEIGHT = 13
HEADER_FIRST_LINE = 16

SPT_MARKER_FILL = "#fff3cd"
SAMPLE_MARKER_FILL = "#d4edda"
ALERT_FILL = "#c00"
MUTED_FILL = "#666"
PANEL_FILL = "#fafafa"

PID_ALERT_PPM = 50

ODOR_ABBREVIATIONS = {
    "petroleum": "petrol.",
    "chlorinated": "chlor.",
    "organic": "org.",
}

# Columns painted white under the layer text
BACKGROUND_COLUMNS = ("uscs", "moisture", "odor", "pid", "sample", "spt", "recovery")


def _label(sb, colors, text, x, y, size, **kwargs):
    kwargs.setdefault("fill", colors["text"])
    return sb.text(text, x, y, font_size=size, **kwargs)


def _pattern_fill(cache, code):
    key = resolve_code(code)
    pattern_id = pattern_id_for(key)
    if pattern_id not in cache:
        cache[pattern_id] = resolve_pattern(key)
    return PatternRef(pattern_id)


def _draw_header(sb, record, layout, colors):
    boring = record.boring
    groundwater = record.groundwater
    width = layout.content_width
    sb.add(Rect(
        x=0, y=0, width=width, height=layout.header_height - COLUMN_HEADER_HEIGHT,
        fill=colors["header_bg"], stroke=colors["border"], role="header",
    ))

    col1_x = 10
    col2_x = width / 3
    col3_x = width / 3 * 2
    lh = HEADER_LINE_HEIGHT

    # Project and site
    y = HEADER_FIRST_LINE
    _label(sb, colors, f"BORING LOG: {boring.id}", col1_x, y, 13, weight="bold", role="title")
    y += lh + 2
    _label(sb, colors, f"Project: {boring.project or ''}", col1_x, y, 10)
    y += lh
    if boring.client:
        _label(sb, colors, f"Client: {boring.client}", col1_x, y, 10)
        y += lh
    if boring.location is not None:
        _label(sb, colors, f"Location: {boring.location.label()}", col1_x, y, 9)
        y += lh
    if boring.elevation is not None:
        _label(sb, colors, f"Surface Elev: {format_depth(boring.elevation)} ft", col1_x, y, 10)
        y += lh
    _label(sb, colors, f"Total Depth: {format_depth(layout.total_depth)} ft", col1_x, y, 10)
    if record.has_groundwater:
        y += lh
        text = f"GW Depth: {format_depth(groundwater.depth)} ft"
        if groundwater.note:
            text += f" ({groundwater.note})"
        _label(sb, colors, text, col1_x, y, 10, fill=colors["groundwater"])

    # Consultant and drilling
    y = HEADER_FIRST_LINE
    consultant = boring.consultant
    if consultant is not None:
        _label(sb, colors, "CONSULTANT", col2_x, y, 10, weight="bold")
        y += lh
        for value in (consultant.company, consultant.contact, consultant.phone):
            if value:
                _label(sb, colors, value, col2_x, y, 10)
                y += lh
    y += 4
    for prefix, value in (
        ("Method", boring.drilling_method),
        ("Equipment", boring.equipment),
        ("Logged By", boring.logged_by),
    ):
        if value:
            _label(sb, colors, f"{prefix}: {value}", col2_x, y, 9)
            y += lh

    # Driller and dates
    y = HEADER_FIRST_LINE
    _label(sb, colors, "DRILLER", col3_x, y, 10, weight="bold")
    y += lh
    driller = boring.driller
    if isinstance(driller, Driller):
        if driller.company:
            _label(sb, colors, driller.company, col3_x, y, 10)
            y += lh
        if driller.name:
            _label(sb, colors, driller.name, col3_x, y, 10)
            y += lh
        if driller.license:
            _label(sb, colors, f"License: {driller.license}", col3_x, y, 9)
            y += lh
    elif driller:
        _label(sb, colors, driller, col3_x, y, 10)
        y += lh
    y += 4
    if boring.date_start and boring.date_complete:
        _label(sb, colors, f"Start: {boring.date_start}", col3_x, y, 10)
        y += lh
        _label(sb, colors, f"Complete: {boring.date_complete}", col3_x, y, 10)
    else:
        date_text = " ".join(part for part in (boring.date, boring.time) if part)
        _label(sb, colors, f"Date: {date_text}", col3_x, y, 10)
    if boring.weather:
        y += lh
        _label(sb, colors, f"Weather: {boring.weather}", col3_x, y, 10)


def _draw_column_headers(sb, layout, colors):
    y = layout.column_header_y
    sb.add(Rect(
        x=0, y=y, width=layout.columns_width, height=COLUMN_HEADER_HEIGHT,
        fill="#e8e8e8", stroke=colors["border"], role="column-header-row",
    ))
    for col in layout.columns:
        sb.add(Line(x1=col.x, y1=y, x2=col.x, y2=y + COLUMN_HEADER_HEIGHT, stroke=colors["border"]))
        _label(sb, colors, col.label, col.center, y + 20, 9, weight="bold", anchor="middle", role="column-header")


def _draw_depth_scale(sb, record, layout, colors):
    depth_col = layout.column("depth")
    elev_col = layout.column("elevation")
    if depth_col is None:
        return
    top = layout.header_height
    height = layout.graphic_height
    sb.add(Rect(x=depth_col.x, y=top, width=depth_col.width, height=height, fill="white", stroke=colors["border"]))
    if elev_col is not None:
        sb.add(Rect(x=elev_col.x, y=top, width=elev_col.width, height=height, fill="white", stroke=colors["border"]))

    surface = record.boring.elevation
    grid_start = elev_col.right if elev_col is not None else depth_col.right
    for depth in layout.ticks:
        y = layout.y(depth)
        sb.add(Line(x1=depth_col.right - 10, y1=y, x2=depth_col.right, y2=y, stroke=colors["border"], role="depth-tick"))
        _label(sb, colors, format_depth(depth), depth_col.right - 15, y + 4, 9, anchor="end", role="depth-label")
        if surface is not None and elev_col is not None:
            _label(sb, colors, f"{surface - depth:.1f}", elev_col.center, y + 4, 8, anchor="middle", role="elevation-label")
        if 0 < depth < layout.total_depth:
            sb.add(Line(
                x1=grid_start, y1=y, x2=layout.columns_width, y2=y,
                stroke=colors["grid_line"], dash="2,2", role="grid-line",
            ))


def _draw_column_backgrounds(sb, layout, colors):
    for key in BACKGROUND_COLUMNS:
        col = layout.column(key)
        if col is None:
            continue
        sb.add(Rect(
            x=col.x, y=layout.header_height, width=col.width, height=layout.graphic_height,
            fill="white", stroke=colors["border"],
        ))


def _draw_layers(sb, record, layout, colors, cache):
    graphic = layout.column("graphic")
    uscs = layout.column("uscs")
    description = layout.column("description")
    moisture = layout.column("moisture")
    odor = layout.column("odor")
    pid = layout.column("pid")

    for band in layer_bands(record, layout):
        layer = band.layer
        if graphic is not None:
            sb.add(Rect(
                x=graphic.x, y=band.y_top, width=graphic.width, height=band.height,
                fill=_pattern_fill(cache, layer.uscs), stroke=colors["border"],
                role="layer-band", label=layer.uscs,
            ))
        if uscs is not None:
            _label(sb, colors, layer.uscs, uscs.center, band.text_y, 9, weight="bold", anchor="middle", role="layer-code")
        if description is not None:
            line_y = band.y_top + 12
            for line in band.description_lines:
                _label(sb, colors, line, description.x + 3, line_y, 10, role="layer-description")
                line_y += 12
        if layer.moisture and moisture is not None:
            _label(sb, colors, layer.moisture, moisture.center, band.text_y, 8, anchor="middle")
        if layer.odor and odor is not None:
            fill = ALERT_FILL if layer.has_odor else colors["text"]
            text = ODOR_ABBREVIATIONS.get(layer.odor, layer.odor)
            _label(sb, colors, text, odor.center, band.text_y, 8, anchor="middle", fill=fill, role="layer-odor")
        if layer.pid is not None and pid is not None:
            fill = ALERT_FILL if layer.pid > PID_ALERT_PPM else colors["text"]
            _label(sb, colors, f"{layer.pid:.1f}", pid.center, band.text_y, 8, anchor="middle", fill=fill, role="layer-pid")
        if layer.depth_top > 0 and graphic is not None:
            right = description.right if description is not None else graphic.right
            sb.add(Line(
                x1=graphic.x, y1=band.y_top, x2=right, y2=band.y_top,
                stroke=colors["border"], stroke_width=1.5, role="layer-boundary",
            ))


def _draw_samples(sb, record, layout, colors):
    sample_col = layout.column("sample")
    spt = layout.column("spt")
    recovery = layout.column("recovery")
    elev_col = layout.column("elevation") or layout.column("depth")
    line_start = elev_col.right if elev_col is not None else 0

    for mark in sample_marks(record, layout):
        sample = mark.sample
        if sample_col is not None:
            sb.add(Rect(
                x=sample_col.x + 3, y=mark.marker_y, width=sample_col.width - 6, height=mark.marker_height,
                fill=SPT_MARKER_FILL if sample.is_spt else SAMPLE_MARKER_FILL,
                stroke=colors["border"], rx=2, role="sample-marker", label=sample.id,
            ))
            if sample.has_range:
                _label(sb, colors, sample.id, sample_col.center, mark.marker_center - 3, 7, anchor="middle", role="sample-id")
                _label(sb, colors, sample.range_label(), sample_col.center, mark.marker_center + 7, 6,
                    anchor="middle", fill=MUTED_FILL, role="sample-range")
            else:
                _label(sb, colors, sample.id, sample_col.center, mark.center_y + 4, 7, anchor="middle", role="sample-id")

        n_value = sample.n_value
        if n_value is not None and spt is not None:
            _label(sb, colors, f"N={format_depth(n_value)}", spt.center, mark.center_y - 2, 9,
                weight="bold", anchor="middle", role="spt-n")
            _label(sb, colors, f"({sample.blows_text})", spt.center, mark.center_y + 9, 7,
                anchor="middle", fill=MUTED_FILL, role="spt-blows")

        if sample.recovery is not None and recovery is not None:
            _label(sb, colors, format_depth(sample.recovery), recovery.center, mark.center_y + 4, 9,
                anchor="middle", role="sample-recovery")

        if sample_col is not None:
            sb.add(Line(
                x1=line_start, y1=mark.depth_line_y, x2=sample_col.x, y2=mark.depth_line_y,
                stroke="#999", dash="1,2", role="sample-depth-line",
            ))


def groundwater_wave(x, y, width):
    """Path data for a wavy water line: one quadratic arc per 10 units, ending at ``x + width``."""
    width = max(width, 0)
    arcs = math.floor(width / 10)
    d = f"M {format_number(x)} {format_number(y)}"
    for i in range(arcs):
        x0 = x + i * 10
        d += f" Q {format_number(x0 + 5)},{format_number(y - 3)} {format_number(x0 + 10)},{format_number(y)}"
    rest = width - arcs * 10
    if rest > 0:
        x0 = x + arcs * 10
        d += f" Q {format_number(x0 + rest / 2)},{format_number(y - 3)} {format_number(x + width)},{format_number(y)}"
    return d


def _draw_groundwater(sb, record, layout, colors):
    graphic = layout.column("graphic")
    if not record.has_groundwater or graphic is None:
        return
    y = layout.y(record.groundwater.depth)
    gx = graphic.x
    sb.add(Polygon(
        points=((gx + 10, y), (gx + 2, y - 8), (gx + 18, y - 8)),
        fill=colors["groundwater"], role="groundwater-marker",
    ))
    sb.add(Path(
        d=groundwater_wave(gx, y, graphic.width),
        stroke=colors["groundwater"], stroke_width=2, role="groundwater-line",
    ))


def _draw_well_panel(sb, record, layout, colors):
    panel = layout.well_panel
    if panel is None:
        return
    well = record.well
    sb.add(Rect(
        x=panel.x, y=panel.y, width=panel.width, height=panel.height,
        fill=PANEL_FILL, stroke=colors["border"], role="well-panel",
    ))
    _label(sb, colors, "WELL CONSTRUCTION", panel.x + panel.width / 2, panel.y + 15, 9, weight="bold", anchor="middle")

    dx = panel.diagram_x
    dw = panel.diagram_width
    sb.add(Rect(
        x=dx, y=panel.diagram_top, width=dw, height=panel.diagram_height,
        fill="#f0f0f0", stroke=colors["border"], role="well-borehole",
    ))
    label_x = panel.x + panel.width - 5

    if well.has_seal:
        y1 = panel.y_for(well.seal_top)
        y2 = panel.y_for(well.seal_bottom)
        sb.add(Rect(x=dx + 5, y=y1, width=dw - 10, height=y2 - y1, fill=colors["well_seal"], stroke=colors["border"], role="well-seal"))
        _label(sb, colors, "Seal", label_x, (y1 + y2) / 2 + 4, 7, anchor="end")

    screen_width = 16
    if well.has_screen:
        y1 = panel.y_for(well.screen_top)
        y2 = panel.y_for(well.screen_bottom)
        sb.add(Rect(x=dx + 5, y=y1, width=dw - 10, height=y2 - y1, fill=colors["well_filter"], stroke=colors["border"], role="well-filter"))
        sb.add(Rect(
            x=dx + (dw - screen_width) / 2, y=y1, width=screen_width, height=y2 - y1,
            fill="white", stroke=colors["well_screen"], dash="3,2", role="well-screen",
        ))
        _label(sb, colors, "Screen", label_x, (y1 + y2) / 2 + 4, 7, anchor="end")

    casing_top = panel.diagram_top
    if well.screen_top is not None:
        casing_bottom = panel.y_for(well.screen_top)
    else:
        casing_bottom = panel.diagram_top + panel.diagram_height * 0.5
    for cx in (dx + (dw - screen_width) / 2, dx + (dw + screen_width) / 2):
        sb.add(Line(x1=cx, y1=casing_top, x2=cx, y2=casing_bottom, stroke=colors["well_casing"], stroke_width=2, role="well-casing"))

    details_y = panel.y + panel.height - 20
    if well.casing_diameter:
        text = f'Casing: {format_depth(well.casing_diameter)}" {well.casing_material or ""}'.rstrip()
        _label(sb, colors, text, panel.x + 5, details_y, 7, role="well-detail")
        details_y -= 10
    if well.screen_slot_size:
        _label(sb, colors, f'Slot: {format_depth(well.screen_slot_size)}"', panel.x + 5, details_y, 7, role="well-detail")


def _draw_legend(sb, layout, colors, cache):
    legend = layout.legend
    if legend is None:
        return
    top = layout.legend_top
    width = layout.content_width
    sb.add(Rect(x=0, y=top, width=width, height=legend.height, fill=PANEL_FILL, stroke=colors["border"], role="legend"))
    _label(sb, colors, "LEGEND", 10, top + 18, 11, weight="bold")

    swatch = 16
    start_x = 10
    content_y = top + 35
    if legend.columns:
        col_width = (width - 20) / legend.columns
        for index, entry in enumerate(legend.entries):
            x = start_x + (index % legend.columns) * col_width
            y = content_y + (index // legend.columns) * LEGEND_ROW_HEIGHT
            sb.add(Rect(
                x=x, y=y, width=swatch, height=swatch, fill=_pattern_fill(cache, entry.code),
                stroke=colors["border"], stroke_width=0.5, role="legend-swatch", label=entry.label,
            ))
            _label(sb, colors, entry.code, x + swatch + 5, y + 12, 9, weight="bold", role="legend-code")
            _label(sb, colors, entry.description, x + swatch + 28, y + 12, 8, fill="#555")

    if not legend.has_symbol_row:
        return
    symbol_y = content_y + legend.rows * LEGEND_ROW_HEIGHT + 8
    symbol_x = start_x
    for sample_type, description in legend.sample_types:
        sb.add(Rect(
            x=symbol_x, y=symbol_y, width=swatch, height=swatch,
            fill=SPT_MARKER_FILL if sample_type == "SPT" else SAMPLE_MARKER_FILL,
            stroke=colors["border"], rx=2, role="legend-sample", label=sample_type,
        ))
        _label(sb, colors, sample_type, symbol_x + swatch + 5, symbol_y + 12, 9, weight="bold")
        _label(sb, colors, description, symbol_x + swatch + 45, symbol_y + 12, 8, fill="#555")
        symbol_x += 180
    if legend.show_groundwater:
        sb.add(Polygon(
            points=((symbol_x, symbol_y), (symbol_x + 16, symbol_y), (symbol_x + 8, symbol_y + 16)),
            fill=colors["groundwater"], role="legend-groundwater",
        ))
        _label(sb, colors, "Groundwater level", symbol_x + 21, symbol_y + 12, 9)


def render_scene(record, config=None):
    """Render *record* (a BoringRecord or JSON document) into a Scene."""
    record = as_record(record)
    if record is None:
        raise ValueError("No boring log data to render")
    config = config if isinstance(config, RenderConfig) else RenderConfig.from_options(config)
    layout = compute_layout(record, config)
    colors = config.colors
    cache = {}

    sb = SceneBuilder()
    _draw_header(sb, record, layout, colors)
    _draw_column_headers(sb, layout, colors)
    _draw_depth_scale(sb, record, layout, colors)
    _draw_column_backgrounds(sb, layout, colors)
    _draw_layers(sb, record, layout, colors, cache)
    _draw_samples(sb, record, layout, colors)
    _draw_groundwater(sb, record, layout, colors)
    _draw_well_panel(sb, record, layout, colors)
    _draw_legend(sb, layout, colors, cache)
    sb.add(Rect(
        x=0, y=0, width=layout.content_width, height=layout.inner_height,
        stroke=colors["border"], stroke_width=2, role="border",
    ))

    patterns = [cache[key] for key in sorted(cache)]
    scene = sb.build(
        layout.width,
        layout.height,
        offset=(layout.margins["left"], layout.margins["top"]),
        patterns=patterns,
    )
    logger.debug(
        "Rendered boring %s: %sx%s, %d commands, %d patterns",
        record.boring.id, layout.width, layout.height, len(scene.commands), len(patterns),
    )
    return scene


class BoringLog:
    """Holds one record and re-renders it whenever data or options change.

    >>> log = BoringLog(depth_scale=15)
    >>> scene = log.set_data(record)
    >>> svg_text = log.to_svg()
    """

    def __init__(self, config=None, **options):
        self.config = RenderConfig.from_options(config, **options)
        self.data = None
        self.scene = None

    def set_data(self, data):
        self.data = data
        return self.render()

    def get_data(self):
        return self.data

    def render(self):
        if self.data is None:
            return None
        self.scene = render_scene(self.data, self.config)
        return self.scene

    def configure(self, **options):
        self.config.update(**options)
        return self.render()

    def to_svg(self):
        scene = self.render()
        if scene is None:
            return None
        return scene_to_svg(scene)
