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

"""Scene graph for boring log drawings.

A scene is an ordered tuple of immutable draw commands plus the fill-pattern
tiles they reference. Later commands paint over earlier ones. The renderer
only produces scenes; serializers (SVG, plotly) only consume them.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PatternRef:
    """Fill that tiles a pattern defined on the scene."""

    pattern_id: str

    @property
    def url(self):
        return f"url(#{self.pattern_id})"


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: object = "none"
    stroke: str | None = None
    stroke_width: float | None = None
    rx: float | None = None
    dash: str | None = None
    role: str | None = None
    label: str | None = None


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str = "#333"
    stroke_width: float | None = None
    dash: str | None = None
    role: str | None = None


@dataclass(frozen=True)
class Text:
    text: str
    x: float
    y: float
    font_size: float = 12
    fill: str = "#333"
    weight: str | None = None
    anchor: str | None = None
    role: str | None = None


@dataclass(frozen=True)
class Path:
    d: str
    fill: str = "none"
    stroke: str | None = None
    stroke_width: float | None = None
    role: str | None = None


@dataclass(frozen=True)
class Polygon:
    points: tuple
    fill: str = "#333"
    stroke: str | None = None
    role: str | None = None


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    fill: str = "none"
    stroke: str | None = None
    stroke_width: float | None = None


@dataclass(frozen=True)
class Pattern:
    """A square fill tile: background color plus geometric primitives."""

    id: str
    fill: str
    primitives: tuple = ()
    size: float = 16


@dataclass(frozen=True)
class Scene:
    width: float
    height: float
    offset: tuple = (0.0, 0.0)
    patterns: tuple = ()
    commands: tuple = ()
    font_family: str = "Arial, sans-serif"

    def by_role(self, role):
        return [cmd for cmd in self.commands if getattr(cmd, "role", None) == role]

    def texts(self, role=None):
        return [
            cmd.text for cmd in self.commands
            if isinstance(cmd, Text) and (role is None or cmd.role == role)
        ]

    def pattern(self, pattern_id):
        for pattern in self.patterns:
            if pattern.id == pattern_id:
                return pattern
        return None


@dataclass
class SceneBuilder:
    """Mutable accumulator used while a single render is in progress."""

    commands: list = field(default_factory=list)

    def add(self, command):
        self.commands.append(command)
        return command

    def text(self, text, x, y, **kwargs):
        return self.add(Text(text=str(text), x=x, y=y, **kwargs))

    def build(self, width, height, offset=(0.0, 0.0), patterns=()):
        return Scene(
            width=width,
            height=height,
            offset=tuple(offset),
            patterns=tuple(patterns),
            commands=tuple(self.commands),
        )


def format_number(value):
    """Compact numeric text for coordinates: ``12.0`` -> ``"12"``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return f"{round(value, 4):g}"
