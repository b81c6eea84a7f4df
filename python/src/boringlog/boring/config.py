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

"""Renderer configuration.

Holds every option the layout engine and renderer read. Nested options
(columns, colors, margins) merge key by key over the defaults, so callers only
pass what they want to change::

    RenderConfig(depth_scale=15, colors={"groundwater": "#0044aa"})
"""

import copy

DEFAULT_BASE_COLUMNS = {
    "depth": {"width": 40, "label": "Depth"},
    "elevation": {"width": 45, "label": "Elev."},
    "graphic": {"width": 60, "label": "Soil"},
    "uscs": {"width": 45, "label": "USCS"},
    "description": {"width": 200, "label": "Description"},
    "moisture": {"width": 50, "label": "Moist."},
    "sample": {"width": 50, "label": "Sample"},
    "spt": {"width": 70, "label": "SPT N"},
    "recovery": {"width": 45, "label": "Rec."},
}

# Only shown when at least one layer carries the data
DEFAULT_CONDITIONAL_COLUMNS = {
    "odor": {"width": 55, "label": "Odor"},
    "pid": {"width": 45, "label": "PID"},
}

DEFAULT_COLORS = {
    "border": "#333",
    "header_bg": "#f5f5f5",
    "grid_line": "#ccc",
    "groundwater": "#0066cc",
    "text": "#333",
    "well_casing": "#666",
    "well_screen": "#999",
    "well_seal": "#8B4513",
    "well_filter": "#F4A460",
}

DEFAULT_MARGINS = {"top": 20, "right": 20, "bottom": 20, "left": 20}

_NESTED = ("base_columns", "conditional_columns", "colors", "margins")


def _merge_columns(defaults, overrides):
    merged = copy.deepcopy(defaults)
    for key, spec in (overrides or {}).items():
        if spec is None:
            merged.pop(key, None)
            continue
        if isinstance(spec, (int, float)):
            spec = {"width": spec}
        merged.setdefault(key, {"width": 0, "label": key.title()})
        merged[key].update(spec)
    return merged


class RenderConfig:
    def __init__(self,
        width=None,
        header_height=190,
        footer_height=40,
        legend_height=140,
        well_panel_width=150,
        show_legend=True,
        depth_scale=20,
        margins=None,
        base_columns=None,
        conditional_columns=None,
        colors=None):
        # width, when set, is a minimum canvas width; content never stretches
        self.width = width
        self.header_height = header_height
        self.footer_height = footer_height
        self.legend_height = legend_height
        self.well_panel_width = well_panel_width
        self.show_legend = show_legend
        self.depth_scale = depth_scale
        self.margins = {**DEFAULT_MARGINS, **(margins or {})}
        self.base_columns = _merge_columns(DEFAULT_BASE_COLUMNS, base_columns)
        self.conditional_columns = _merge_columns(DEFAULT_CONDITIONAL_COLUMNS, conditional_columns)
        self.colors = {**DEFAULT_COLORS, **(colors or {})}

    @classmethod
    def from_options(cls, config=None, **options):
        """Build a config from an existing config or mapping plus keyword overrides."""
        if isinstance(config, RenderConfig):
            base = config.copy()
        else:
            base = cls()
            if config:
                base.update(**config)
        return base.update(**options)

    def update(self, **kwargs):
        for key, val in kwargs.items():
            if key not in self.__dict__:
                raise ValueError(f"Unknown render option: {key}")
            if key == "margins":
                val = {**self.margins, **(val or {})}
            elif key == "colors":
                val = {**self.colors, **(val or {})}
            elif key in ("base_columns", "conditional_columns"):
                val = _merge_columns(getattr(self, key), val)
            setattr(self, key, val)
        return self

    def copy(self):
        clone = RenderConfig()
        clone.__dict__.update(copy.deepcopy(self.__dict__))
        return clone

    def to_dict(self):
        out = {key: val for key, val in self.__dict__.items() if key not in _NESTED}
        for key in _NESTED:
            out[key] = copy.deepcopy(getattr(self, key))
        return out

    def __eq__(self, other):
        if not isinstance(other, RenderConfig):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"RenderConfig(depth_scale={self.depth_scale}, show_legend={self.show_legend})"
