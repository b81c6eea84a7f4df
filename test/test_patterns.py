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

from boringlog.boring import patterns
from boringlog.boring.patterns import (
    DEFAULT_CODE,
    EXTENDED_PATTERN_TABLE,
    PATTERN_TABLE,
    PATTERNS,
    describe_code,
    describe_sample_type,
    resolve_code,
    resolve_pattern,
)
from boringlog.boring.scene import Pattern


def test_every_catalog_code_resolves_to_itself():
    for code, (_, fill) in {**PATTERN_TABLE, **EXTENDED_PATTERN_TABLE}.items():
        pattern = resolve_pattern(code)
        assert pattern.id == f"pattern-{code}"
        assert pattern.fill == fill
        assert pattern.size == 16


@pytest.mark.parametrize("code, expected", [
    ("sm", "SM"),
    (" cl ", "CL"),
    ("GP-GM", "GP"),
    ("sw-sc", "SW"),
    ("GP - GM", "GP"),
    ("TOPSOIL", "TOPSOIL"),
    ("XYZ", DEFAULT_CODE),
    ("X-SM", DEFAULT_CODE),
    ("", DEFAULT_CODE),
    (None, DEFAULT_CODE),
    ("-", DEFAULT_CODE),
])
def test_resolve_code_is_total(code, expected):
    assert resolve_code(code) == expected
    assert isinstance(resolve_pattern(code), Pattern)


def test_patterns_mapping_is_read_only():
    with pytest.raises(TypeError):
        PATTERNS["NEW"] = PATTERNS[DEFAULT_CODE]
    assert len(PATTERNS) == len(PATTERN_TABLE) + len(EXTENDED_PATTERN_TABLE)


def test_tiles_carry_primitives():
    for pattern in PATTERNS.values():
        assert pattern.primitives
    # dual-texture tiles combine both primitive sets
    assert len(PATTERNS["SM"].primitives) == len(PATTERNS["SP"].primitives) + len(PATTERNS["ML"].primitives)


def test_descriptions_fall_back_to_code():
    assert describe_code("sm") == "Silty sand"
    assert describe_code("BR") == "Bedrock"
    assert describe_code("xyz") == "XYZ"
    assert describe_sample_type("spt") == "Standard Penetration Test"
    assert describe_sample_type("VANE") == "VANE"
    assert patterns.pattern_id_for("GW") == "pattern-GW"
