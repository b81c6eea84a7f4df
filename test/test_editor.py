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

from boringlog.boring import BoringLog, BoringRecord
from boringlog.boring.editor import RecordEditor, default_document, parse_path


def _document():
    return {
        "boring": {"id": "B-7", "project": "Tank Farm", "totalDepth": 20},
        "layers": [{"depthTop": 0, "depthBottom": 3.5, "uscs": "SM"}],
        "samples": [{"depth": 2, "type": "SPT", "id": "S-1", "blows": [4, 5, 6]}],
    }


def test_parse_path():
    assert parse_path("boring.id") == ["boring", "id"]
    assert parse_path("layers[0].uscs") == ["layers", 0, "uscs"]
    assert parse_path("samples[1].blows.2") == ["samples", 1, "blows", 2]
    assert parse_path("boring.location.coords.0") == ["boring", "location", "coords", 0]


@pytest.mark.parametrize("path", ["", "boring..id", "layers[x].uscs", "layers[0", "bad-key"])
def test_malformed_paths_raise(path):
    with pytest.raises(ValueError):
        parse_path(path)


def test_set_and_get_values():
    doc = _document()
    editor = RecordEditor()
    editor.set_data(doc)
    editor.set_value("layers[0].uscs", "CL")
    editor.set_value("samples[0].blows.2", 9)
    editor.set_value("boring.location.coords.0", 512.0)

    assert editor.get_value("layers[0].uscs") == "CL"
    assert editor.get_value("samples[0].blows") == [4, 5, 9]
    assert editor.get_value("boring.location") == {"coords": [512.0]}
    assert editor.get_value("groundwater.depth") is None
    assert editor.get_value("layers[5].uscs") is None
    # the caller's document is copied, not edited in place
    assert doc["layers"][0]["uscs"] == "SM"


def test_cannot_descend_into_scalars():
    editor = RecordEditor().set_data(_document())
    with pytest.raises(ValueError):
        editor.set_value("boring.id.name", "x")
    with pytest.raises(ValueError):
        editor.set_value("boring.id[0]", "x")


def test_commit_updates_preview():
    log = BoringLog()
    editor = RecordEditor(log).set_data(_document())
    scene = editor.commit("layers[0].uscs", "CL")
    record = log.get_data()
    assert isinstance(record, BoringRecord)
    assert record.layers[0].uscs == "CL"
    assert scene.texts("layer-code") == ["CL"]

    scene = editor.commit("samples[0].blows.1", 10)
    assert scene.texts("spt-n") == ["N=16"]


def test_add_and_remove_layers():
    log = BoringLog()
    editor = RecordEditor(log).set_data(_document())
    index = editor.add_layer()
    assert index == 1
    new_layer = editor.get_data()["layers"][1]
    assert (new_layer["depthTop"], new_layer["depthBottom"]) == (3.5, 8.5)
    assert new_layer["uscs"] == ""
    assert len(log.scene.by_role("layer-band")) == 2

    removed = editor.remove_layer(0)
    assert removed["uscs"] == "SM"
    assert len(log.get_data().layers) == 1
    with pytest.raises(IndexError):
        editor.remove_layer(3)
    with pytest.raises(IndexError):
        editor.remove_layer(-1)


def test_add_and_remove_samples():
    log = BoringLog()
    editor = RecordEditor(log).set_data(_document())
    assert editor.add_sample() == 1
    sample = editor.get_data()["samples"][1]
    assert sample == {"id": "S-2", "type": "SPT", "depthTop": 0, "depthBottom": 1.5, "blows": [0, 0, 0], "recovery": 18}
    assert log.scene.texts("spt-n") == ["N=0", "N=11"]

    editor.remove_sample(0)
    assert [s.id for s in log.get_data().samples] == ["S-2"]
    with pytest.raises(IndexError):
        editor.remove_sample(1)


def test_editing_without_data_starts_from_default():
    editor = RecordEditor()
    assert editor.add_layer() == 0
    doc = editor.get_data()
    assert doc["boring"]["id"] == default_document()["boring"]["id"]
    assert doc["layers"][0]["depthBottom"] == 5


def test_set_data_accepts_records():
    record = BoringRecord.from_dict(_document())
    editor = RecordEditor().set_data(record)
    assert editor.get_value("boring.id") == "B-7"
    assert editor.get_value("samples[0].depth") == 2


def test_validate_reports_issues():
    editor = RecordEditor().set_data(_document())
    assert editor.validate() == []
    editor.set_value("layers[0].depthBottom", 0)
    assert [issue["type"] for issue in editor.validate()] == ["non_positive_thickness"]
