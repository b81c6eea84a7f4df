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

import pytest

from boringlog.boring import layout
from boringlog.boring.config import RenderConfig
from boringlog.boring.record import BoringRecord

BASE_KEYS = ["depth", "elevation", "graphic", "uscs", "description", "moisture", "sample", "spt", "recovery"]


def _record(layers=None, samples=None, total_depth=10, **extra):
    doc = {
        "boring": {"id": "B-1", "totalDepth": total_depth},
        "layers": layers if layers is not None else [{"depthTop": 0, "depthBottom": 10, "uscs": "SM"}],
        "samples": samples or [],
    }
    doc.update(extra)
    return BoringRecord.from_dict(doc)


def test_base_columns_without_optional_data():
    cols = layout.resolve_columns(_record().layers, RenderConfig())
    assert [c.key for c in cols] == BASE_KEYS
    assert [c.x for c in cols][:4] == [0, 40, 85, 145]


def test_odor_and_pid_columns_are_conditional():
    record = _record(layers=[
        {"depthTop": 0, "depthBottom": 5, "uscs": "SM", "odor": "petroleum"},
        {"depthTop": 5, "depthBottom": 10, "uscs": "CL", "pid": 0},
    ])
    keys = [c.key for c in layout.resolve_columns(record.layers, RenderConfig())]
    assert keys == BASE_KEYS[:6] + ["odor", "pid"] + BASE_KEYS[6:]


def test_odor_none_does_not_add_column():
    record = _record(layers=[{"depthTop": 0, "depthBottom": 5, "uscs": "SM", "odor": "none"}])
    keys = [c.key for c in layout.resolve_columns(record.layers, RenderConfig())]
    assert "odor" not in keys
    assert "pid" not in keys


@pytest.mark.parametrize("total_depth, expected", [
    (10, (0, 2, 4, 6, 8, 10)),
    (7, (0, 2, 4, 6)),
    (20, tuple(range(0, 21, 2))),
    (25, (0, 5, 10, 15, 20, 25)),
    (30, (0, 5, 10, 15, 20, 25, 30)),
])
def test_depth_ticks(total_depth, expected):
    assert layout.depth_ticks(total_depth) == expected


def test_depth_mapping_is_monotonic():
    lay = layout.compute_layout(_record(total_depth=30), RenderConfig())
    assert lay.y(0) == 190
    assert lay.y(1) == 210
    depths = [0, 0.1, 1, 2.5, 10, 29.9, 30]
    ys = [lay.y(d) for d in depths]
    assert all(a < b for a, b in zip(ys, ys[1:]))


def test_canvas_size():
    record = _record(samples=[{"depth": 2, "type": "SPT", "id": "S-1"}])
    lay = layout.compute_layout(record, RenderConfig())
    assert lay.columns_width == 605
    assert lay.width == 645
    # legend needs 40 + 22 + 28, less than the configured minimum
    assert lay.legend.height == 90
    assert lay.legend_space == 140
    assert lay.height == 190 + 200 + 40 + 140 + 40
    assert lay.well_panel is None


def test_well_panel_adds_width():
    lay = layout.compute_layout(_record(well={"screenTop": 4, "screenBottom": 8}), RenderConfig())
    assert lay.well_panel is not None
    assert lay.well_panel.x == 615
    assert lay.width == 645 + 160
    assert lay.well_panel.y_for(0) == lay.well_panel.diagram_top
    assert lay.well_panel.y_for(10) == lay.well_panel.diagram_top + lay.well_panel.diagram_height


def test_legend_grows_with_codes():
    codes = ["GW", "GP", "GM", "GC", "SW", "SP", "SM", "SC", "ML", "MH", "CL", "CH", "PT"]
    layers = [{"depthTop": i, "depthBottom": i + 1, "uscs": code} for i, code in enumerate(codes)]
    record = _record(
        layers=layers,
        samples=[{"depth": 1, "type": "SPT", "id": "S-1"}],
        total_depth=13,
        groundwater={"depth": 3},
    )
    lay = layout.compute_layout(record, RenderConfig())
    assert lay.legend.columns == 4
    assert lay.legend.rows == 4
    assert lay.legend.height == 40 + 4 * 22 + 28
    assert lay.legend_space == lay.legend.height


def test_hidden_legend_reserves_no_space():
    lay = layout.compute_layout(_record(), RenderConfig(show_legend=False))
    assert lay.legend is None
    assert lay.legend_space == 0
    assert lay.height == 190 + 200 + 40 + 40


def test_legend_entries_split_dual_codes():
    record = _record(layers=[
        {"depthTop": 0, "depthBottom": 2, "uscs": "GP-GM"},
        {"depthTop": 2, "depthBottom": 4, "uscs": "sm"},
        {"depthTop": 4, "depthBottom": 6, "uscs": "XYZ"},
        {"depthTop": 6, "depthBottom": 8, "uscs": "SM"},
    ])
    legend = layout.legend_geometry(record)
    assert [e.code for e in legend.entries] == ["GM", "GP", "SM", "XYZ"]
    assert legend.entries[-1].description == "XYZ"
    assert legend.entries[-1].pattern_id == "pattern-DEFAULT"
    assert legend.entries[2].label == "SM — Silty sand"


def test_width_option_is_a_minimum():
    assert layout.compute_layout(_record(), RenderConfig(width=900)).width == 900
    assert layout.compute_layout(_record(), RenderConfig(width=300)).width == 645


def test_wrap_text():
    assert layout.wrap_text("one two three", 1000, 100) == ("one two three",)
    assert layout.wrap_text("aaaa bbbb cccc", 45, 100) == ("aaaa bbbb", "cccc")
    assert layout.wrap_text("aaaa bbbb cccc", 45, 12) == ("aaaa bbbb",)
    assert layout.wrap_text("aaaa bbbb cccc", 45, 0) == ()
    assert layout.wrap_text("supercalifragilistic", 20, 100) == ("supercalifragilistic",)
    assert layout.wrap_text("", 100, 100) == ()


def test_sample_marker_geometry():
    record = _record(samples=[
        {"depth": 5, "type": "SPT", "id": "S-1"},
        {"depthTop": 2, "depthBottom": 2.2, "type": "GRAB", "id": "S-2"},
        {"depthTop": 6, "depthBottom": 8, "type": "CORE", "id": "S-3"},
    ])
    lay = layout.compute_layout(record, RenderConfig())
    thin, point, wide = layout.sample_marks(record, lay)
    assert (point.marker_y, point.marker_height, point.center_y) == (282, 16, 290)
    assert (thin.marker_y, thin.marker_height) == (230, 16)
    assert (wide.marker_y, wide.marker_height) == (310, 40)
    assert wide.depth_line_y == 310


def test_layer_band_description_fits_band():
    text = " ".join(["word"] * 200)
    record = _record(layers=[{"depthTop": 0, "depthBottom": 2, "uscs": "CL", "description": text}])
    lay = layout.compute_layout(record, RenderConfig())
    (band,) = layout.layer_bands(record, lay)
    assert band.height == 40
    # 32 units of room at 12 per line
    assert len(band.description_lines) == 2
    assert all(layout.text_width(line, 10) <= 194 for line in band.description_lines)


def test_untyped_samples_reserve_no_symbol_row():
    record = _record(samples=[{"depth": 2, "id": "S-1"}])
    legend = layout.legend_geometry(record)
    assert legend.sample_types == ()
    assert not legend.has_symbol_row
    assert legend.height == 40 + 22


def test_spaced_dual_code_joins_plain_codes_in_legend():
    record = _record(layers=[
        {"depthTop": 0, "depthBottom": 2, "uscs": "GP - GM"},
        {"depthTop": 2, "depthBottom": 4, "uscs": "GP"},
    ])
    legend = layout.legend_geometry(record)
    assert [e.code for e in legend.entries] == ["GM", "GP"]
    assert legend.entries[0].pattern_id == "pattern-GM"
