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

"""Layout engine for boring log drawings.

All geometry is derived here from the record and configuration before any
drawing happens: the active column set, the depth-to-pixel mapping, tick
positions, legend and well-panel placement, wrapped description lines and
sample marker boxes. The renderer reads a :class:`Layout` and never makes
sizing decisions of its own.

Coordinates are relative to the drawing origin, i.e. inside the margins.
Depth increases downward: ``y = header_height + depth * depth_scale``.
"""

import math
from dataclasses import dataclass

import numpy as np

from .patterns import describe_code, describe_sample_type, pattern_id_for, resolve_code

COLUMN_HEADER_HEIGHT = 30
WELL_PANEL_GAP = 10

LEGEND_BASE_HEIGHT = 40
LEGEND_ROW_HEIGHT = 22
LEGEND_SYMBOL_ROW_HEIGHT = 28
LEGEND_MAX_COLUMNS = 4

SAMPLE_MARKER_HEIGHT = 16

DESCRIPTION_FONT_SIZE = 10
DESCRIPTION_LINE_HEIGHT = 12
# average glyph advance as a fraction of font size
CHAR_WIDTH_RATIO = 0.5


@dataclass(frozen=True)
class Column:
    key: str
    label: str
    width: float
    x: float

    @property
    def right(self):
        return self.x + self.width

    @property
    def center(self):
        return self.x + self.width / 2


@dataclass(frozen=True)
class LegendEntry:
    code: str
    description: str
    pattern_id: str

    @property
    def label(self):
        return f"{self.code} — {self.description}"


@dataclass(frozen=True)
class LegendGeometry:
    entries: tuple
    sample_types: tuple
    show_groundwater: bool
    columns: int
    rows: int
    height: float

    @property
    def has_symbol_row(self):
        return bool(self.sample_types) or self.show_groundwater


@dataclass(frozen=True)
class WellPanelGeometry:
    x: float
    y: float
    width: float
    height: float
    total_depth: float

    @property
    def diagram_x(self):
        return self.x + 20

    @property
    def diagram_width(self):
        return 40

    @property
    def diagram_top(self):
        return self.y + 25

    @property
    def diagram_height(self):
        return self.height - 50

    def y_for(self, depth):
        """Map a depth onto the panel's own scale, independent of depth_scale."""
        return self.diagram_top + (depth / self.total_depth) * self.diagram_height


@dataclass(frozen=True)
class LayerBand:
    layer: object
    y_top: float
    y_bottom: float
    description_lines: tuple

    @property
    def height(self):
        return self.y_bottom - self.y_top

    @property
    def text_y(self):
        # baseline for single-line labels centered in the band
        return self.y_top + self.height / 2 + 4


@dataclass(frozen=True)
class SampleMark:
    sample: object
    center_y: float
    marker_y: float
    marker_height: float
    depth_line_y: float

    @property
    def marker_center(self):
        return self.marker_y + self.marker_height / 2


@dataclass(frozen=True)
class Layout:
    columns: tuple
    total_depth: float
    depth_scale: float
    header_height: float
    footer_height: float
    tick_interval: float
    ticks: tuple
    legend: LegendGeometry | None
    legend_space: float
    well_panel: WellPanelGeometry | None
    margins: dict
    width: float
    height: float

    def y(self, depth):
        return self.header_height + depth * self.depth_scale

    def column(self, key):
        for col in self.columns:
            if col.key == key:
                return col
        return None

    @property
    def columns_width(self):
        return sum(col.width for col in self.columns)

    @property
    def well_space(self):
        return self.well_panel.width + WELL_PANEL_GAP if self.well_panel else 0

    @property
    def content_width(self):
        return self.columns_width + self.well_space

    @property
    def graphic_height(self):
        return self.total_depth * self.depth_scale

    @property
    def column_header_y(self):
        return self.header_height - COLUMN_HEADER_HEIGHT

    @property
    def legend_top(self):
        return self.header_height + self.graphic_height + self.footer_height

    @property
    def inner_height(self):
        return self.height - self.margins["top"] - self.margins["bottom"]


def tick_interval(total_depth):
    return 2 if total_depth <= 20 else 5


def depth_ticks(total_depth):
    """Tick depths from 0 through *total_depth* inclusive."""
    interval = tick_interval(total_depth)
    # tolerance keeps an exact final tick despite float accumulation
    return tuple(float(d) for d in np.arange(0, total_depth + 1e-9, interval))


def has_odor_data(layers):
    return any(layer.has_odor for layer in layers)


def has_pid_data(layers):
    return any(layer.pid is not None for layer in layers)


def resolve_columns(layers, config):
    """Ordered active columns; conditional columns sit just before ``sample``."""
    specs = list(config.base_columns.items())
    conditional = []
    if has_odor_data(layers) and "odor" in config.conditional_columns:
        conditional.append(("odor", config.conditional_columns["odor"]))
    if has_pid_data(layers) and "pid" in config.conditional_columns:
        conditional.append(("pid", config.conditional_columns["pid"]))

    keys = [key for key, _ in specs]
    insert_at = keys.index("sample") if "sample" in keys else len(specs)
    specs[insert_at:insert_at] = conditional

    columns = []
    x = 0
    for key, spec in specs:
        width = spec.get("width", 0)
        columns.append(Column(key=key, label=spec.get("label", key.title()), width=width, x=x))
        x += width
    return tuple(columns)


def used_codes(layers):
    codes = set()
    for layer in layers:
        codes.update(layer.codes)
    return sorted(codes)


def used_sample_types(samples):
    seen = []
    for sample in samples:
        if sample.type and sample.type not in seen:
            seen.append(sample.type)
    return seen


def legend_geometry(record):
    layers = record.sorted_layers()
    samples = record.sorted_samples()
    entries = tuple(
        LegendEntry(code=code, description=describe_code(code), pattern_id=pattern_id_for(resolve_code(code)))
        for code in used_codes(layers)
    )
    sample_types = tuple((t, describe_sample_type(t)) for t in used_sample_types(samples))
    show_groundwater = record.has_groundwater

    columns = min(len(entries), LEGEND_MAX_COLUMNS)
    rows = math.ceil(len(entries) / columns) if columns else 0
    symbol_row = LEGEND_SYMBOL_ROW_HEIGHT if (sample_types or show_groundwater) else 0
    height = LEGEND_BASE_HEIGHT + rows * LEGEND_ROW_HEIGHT + symbol_row
    return LegendGeometry(
        entries=entries,
        sample_types=sample_types,
        show_groundwater=show_groundwater,
        columns=columns,
        rows=rows,
        height=height,
    )


def text_width(text, font_size):
    return len(text) * font_size * CHAR_WIDTH_RATIO


def wrap_text(text, max_width, max_height,
    font_size=DESCRIPTION_FONT_SIZE,
    line_height=DESCRIPTION_LINE_HEIGHT):
    """Greedy word wrap bounded by width and height.

    Lines break only between words. Once the next line would not fit in
    *max_height* the remaining words are dropped.
    """
    lines = []
    line = ""
    used = 0
    for word in (text or "").split():
        candidate = f"{line} {word}" if line else word
        if text_width(candidate, font_size) > max_width and line:
            if used + line_height > max_height:
                return tuple(lines)
            lines.append(line)
            line = word
            used += line_height
        else:
            line = candidate
    if line and used + line_height <= max_height:
        lines.append(line)
    return tuple(lines)


def layer_bands(record, layout):
    description = layout.column("description")
    bands = []
    for layer in record.sorted_layers():
        y_top = layout.y(layer.depth_top)
        y_bottom = layout.y(layer.depth_bottom)
        lines = ()
        if description is not None:
            lines = wrap_text(layer.description, description.width - 6, (y_bottom - y_top) - 8)
        bands.append(LayerBand(layer=layer, y_top=y_top, y_bottom=y_bottom, description_lines=lines))
    return bands


def sample_marks(record, layout):
    marks = []
    for sample in record.sorted_samples():
        center_y = layout.y(sample.center)
        if sample.has_range:
            marker_y = layout.y(sample.top)
            marker_height = max(SAMPLE_MARKER_HEIGHT, (sample.bottom - sample.top) * layout.depth_scale)
            depth_line_y = marker_y
        else:
            marker_y = center_y - SAMPLE_MARKER_HEIGHT / 2
            marker_height = SAMPLE_MARKER_HEIGHT
            depth_line_y = center_y
        marks.append(SampleMark(
            sample=sample,
            center_y=center_y,
            marker_y=marker_y,
            marker_height=marker_height,
            depth_line_y=depth_line_y,
        ))
    return marks


def compute_layout(record, config):
    total_depth = record.resolved_total_depth
    columns = resolve_columns(record.layers, config)
    columns_width = sum(col.width for col in columns)

    legend = legend_geometry(record) if config.show_legend else None
    legend_space = max(config.legend_height, legend.height) if legend else 0

    well_panel = None
    if record.has_well:
        well_panel = WellPanelGeometry(
            x=columns_width + WELL_PANEL_GAP,
            y=config.header_height,
            width=config.well_panel_width,
            height=total_depth * config.depth_scale,
            total_depth=total_depth,
        )
    well_space = config.well_panel_width + WELL_PANEL_GAP if well_panel else 0

    margins = dict(config.margins)
    width = columns_width + well_space + margins["left"] + margins["right"]
    if config.width:
        width = max(width, config.width)
    height = (
        config.header_height
        + total_depth * config.depth_scale
        + config.footer_height
        + legend_space
        + margins["top"]
        + margins["bottom"]
    )

    return Layout(
        columns=columns,
        total_depth=total_depth,
        depth_scale=config.depth_scale,
        header_height=config.header_height,
        footer_height=config.footer_height,
        tick_interval=tick_interval(total_depth),
        ticks=depth_ticks(total_depth),
        legend=legend,
        legend_space=legend_space,
        well_panel=well_panel,
        margins=margins,
        width=width,
        height=height,
    )
