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

"""Soil classification fill patterns.

Every classification code maps to a 16x16 tile: a background rectangle in the
code's color plus a few primitives that identify the soil family (circles for
gravel, dots for sand, horizontal lines for silt, diagonals for clay, ...).
Lookup is total; unknown codes get the cross-hatched DEFAULT tile.
"""

from types import MappingProxyType

from .scene import Circle, Line, Path, Pattern

TILE_SIZE = 16
DEFAULT_CODE = "DEFAULT"

# code -> (tile kind, background fill)
PATTERN_TABLE = {
    # Gravels
    "GW": ("gravel", "#d4a574"),
    "GP": ("gravel", "#c9956a"),
    "GM": ("gravel-silt", "#bfae8e"),
    "GC": ("gravel-clay", "#a89070"),
    # Sands
    "SW": ("sand", "#f4e4bc"),
    "SP": ("sand", "#edd9a8"),
    "SM": ("sand-silt", "#e6d5a8"),
    "SC": ("sand-clay", "#d9c494"),
    # Silts
    "ML": ("silt", "#c4d4c4"),
    "MH": ("silt", "#a8c4a8"),
    # Clays
    "CL": ("clay", "#8fbc8f"),
    "CH": ("clay-heavy", "#6b8e6b"),
    # Organics and peat
    "OL": ("organic", "#8b7355"),
    "OH": ("organic", "#6b5344"),
    "PT": ("peat", "#4a3728"),
}

EXTENDED_PATTERN_TABLE = {
    "TS": ("topsoil", "#5d4e37"),
    "TOPSOIL": ("topsoil", "#5d4e37"),
    "FILL": ("fill", "#9e9e9e"),
    "QUA": ("rock", "#d4d4d4"),
    "ARG": ("rock", "#b8a090"),
    "ROCK": ("rock", "#c0c0c0"),
    "BR": ("rock", "#a0a0a0"),
    "ORGANICS": ("organic", "#6b5344"),
    "MK": ("silt", "#a8c4a8"),
    DEFAULT_CODE: ("default", "#e0e0e0"),
}

SOIL_DESCRIPTIONS = MappingProxyType({
    "GW": "Well-graded gravel",
    "GP": "Poorly graded gravel",
    "GM": "Silty gravel",
    "GC": "Clayey gravel",
    "SW": "Well-graded sand",
    "SP": "Poorly graded sand",
    "SM": "Silty sand",
    "SC": "Clayey sand",
    "ML": "Silt (low plasticity)",
    "MH": "Silt (high plasticity)",
    "CL": "Clay (low plasticity)",
    "CH": "Clay (high plasticity)",
    "OL": "Organic silt",
    "OH": "Organic clay",
    "PT": "Peat",
    "TS": "Topsoil",
    "TOPSOIL": "Topsoil",
    "FILL": "Fill material",
    "QUA": "Quartz",
    "ARG": "Argillite",
    "ROCK": "Rock",
    "BR": "Bedrock",
    "ORGANICS": "Organic material",
    "MK": "Micaceous silt",
})

SAMPLE_TYPE_DESCRIPTIONS = MappingProxyType({
    "SPT": "Standard Penetration Test",
    "SHELBY": "Shelby Tube Sample",
    "GRAB": "Grab Sample",
    "CORE": "Core Sample",
    "AUGER": "Auger Sample",
})


def _gravel():
    return (
        Circle(cx=4, cy=4, r=3, stroke="#333", stroke_width=1),
        Circle(cx=12, cy=12, r=3, stroke="#333", stroke_width=1),
    )


def _sand():
    return tuple(
        Circle(cx=cx, cy=cy, r=1, fill="#333")
        for cx, cy in [(4, 4), (12, 4), (8, 8), (4, 12), (12, 12)]
    )


def _silt():
    return tuple(
        Line(x1=0, y1=y, x2=TILE_SIZE, y2=y, stroke="#333", stroke_width=0.5)
        for y in (4, 12)
    )


def _clay(heavy=False):
    spacing = 4 if heavy else 8
    return tuple(
        Line(x1=i, y1=0, x2=i + TILE_SIZE, y2=TILE_SIZE, stroke="#333", stroke_width=0.5)
        for i in range(-16, 33, spacing)
    )


def _organic():
    return (Path(d="M2,8 Q8,2 14,8 Q8,14 2,8", stroke="#222", stroke_width=0.5),)


def _peat():
    # grass-like strokes
    return tuple(
        Line(x1=x, y1=16, x2=x, y2=4, stroke="#1a1a1a", stroke_width=1)
        for x in range(2, 15, 4)
    )


def _topsoil():
    dots = tuple(
        Circle(cx=cx, cy=cy, r=1.5, fill="#3d3225")
        for cx, cy in [(3, 5), (8, 3), (13, 6), (5, 11), (10, 13)]
    )
    return dots + (Path(d="M0,8 Q4,6 8,8 Q12,10 16,8", stroke="#3d3225", stroke_width=0.5),)


def _fill():
    shapes = [
        "M2,2 L5,2 L4,5 Z",
        "M10,3 L14,4 L12,7 L9,6 Z",
        "M3,10 L7,9 L6,13 L2,12 Z",
        "M11,11 L14,10 L15,14 L11,14 Z",
    ]
    return tuple(Path(d=d, stroke="#555", stroke_width=0.5) for d in shapes)


def _rock():
    courses = tuple(
        Line(x1=0, y1=y, x2=TILE_SIZE, y2=y, stroke="#666", stroke_width=0.5)
        for y in (0, 8, 16)
    )
    joints = tuple(
        Line(x1=x, y1=y1, x2=x, y2=y1 + 8, stroke="#666", stroke_width=0.5)
        for x, y1 in [(8, 0), (0, 8), (16, 8)]
    )
    return courses + joints


def _default():
    primitives = []
    for i in (0, 8, 16):
        primitives.append(Line(x1=i, y1=0, x2=i, y2=TILE_SIZE, stroke="#999", stroke_width=0.3))
        primitives.append(Line(x1=0, y1=i, x2=TILE_SIZE, y2=i, stroke="#999", stroke_width=0.3))
    return tuple(primitives)


TILE_BUILDERS = {
    "gravel": _gravel,
    "gravel-silt": lambda: _gravel() + _silt(),
    "gravel-clay": lambda: _gravel() + _clay(),
    "sand": _sand,
    "sand-silt": lambda: _sand() + _silt(),
    "sand-clay": lambda: _sand() + _clay(),
    "silt": _silt,
    "clay": _clay,
    "clay-heavy": lambda: _clay(heavy=True),
    "organic": _organic,
    "peat": _peat,
    "topsoil": _topsoil,
    "fill": _fill,
    "rock": _rock,
    "default": _default,
}


def pattern_id_for(code):
    return f"pattern-{code}"


def _build_patterns():
    patterns = {}
    for code, (kind, fill) in {**PATTERN_TABLE, **EXTENDED_PATTERN_TABLE}.items():
        patterns[code] = Pattern(id=pattern_id_for(code), fill=fill, primitives=TILE_BUILDERS[kind]())
    return MappingProxyType(patterns)


PATTERNS = _build_patterns()


def normalize_code(code):
    if code is None:
        return ""
    return str(code).strip().upper()


def resolve_code(code):
    """Return the catalog key used to draw *code*.

    Checks the whole code, then the primary code of a dual classification
    (``GP-GM`` -> ``GP``), then falls back to ``DEFAULT``.
    """
    upper = normalize_code(code)
    if upper in PATTERNS:
        return upper
    primary = upper.split("-")[0].strip()
    if primary in PATTERNS:
        return primary
    return DEFAULT_CODE


def resolve_pattern(code):
    return PATTERNS[resolve_code(code)]


def describe_code(code):
    upper = normalize_code(code)
    return SOIL_DESCRIPTIONS.get(upper, upper)


def describe_sample_type(sample_type):
    upper = normalize_code(sample_type)
    return SAMPLE_TYPE_DESCRIPTIONS.get(upper, upper)
