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

import datetime

import pandas as pd
import pytest

from boringlog.boring import data
from boringlog.boring.record import Driller, IntervalSample, PointSample

CSV_TEXT = """boring_id,project,depth_top,depth_bottom,uscs,description,sample_depth,sample_type,sample_id,blow1,blow2,blow3,groundwater_depth
B-12,Harbor Site,0,2.5,sm,Silty sand,,,,,,,
,,2.5,6,CL,Lean clay,3,spt,S-1,4,5,6,4.2
,,2.5,6,CL,Duplicate clay,3,SPT,S-1,9,9,9,
"""


def test_load_boring_log_folds_rows():
    record = data.load_boring_log(CSV_TEXT, date="2024-06-01")
    assert record.boring.id == "B-12"
    assert record.boring.project == "Harbor Site"
    assert record.boring.date == "2024-06-01"
    assert [layer.uscs for layer in record.layers] == ["SM", "CL"]
    (sample,) = record.samples
    assert isinstance(sample, PointSample)
    assert (sample.depth, sample.type, sample.id) == (3, "SPT", "S-1")
    assert sample.blows == (4, 5, 6)
    assert sample.n_value == 11
    assert record.groundwater.depth == 4.2
    # no explicit total depth: deepest observation wins
    assert record.boring.total_depth == 6


def test_duplicate_layers_keep_first_description():
    record = data.load_boring_log(CSV_TEXT)
    assert len(record.layers) == 2
    assert record.layers[1].description == "Lean clay"


def test_metadata_last_non_empty_value_wins():
    text = "project,client,depth_top,depth_bottom,uscs\nAlpha,Acme,0,1,SM\nBeta,,1,2,CL\n,,2,3,ML\n"
    record = data.load_boring_log(text)
    assert record.boring.project == "Beta"
    assert record.boring.client == "Acme"


def test_defaults_fill_missing_metadata():
    record = data.load_boring_log("depth_top,depth_bottom,uscs\n0,5,GW\n")
    assert record.boring.id == "B-1"
    assert record.boring.project == "Imported Project"
    assert record.boring.date == datetime.date.today().isoformat()
    assert record.layers[0].description == "GW soil"

    record = data.load_boring_log("depth_top,depth_bottom,uscs\n0,5,GW\n", boring_id="B-99", project="Yard")
    assert (record.boring.id, record.boring.project) == ("B-99", "Yard")


@pytest.mark.parametrize("text", [
    "",
    "depth_top,depth_bottom,uscs\n",
    "depth_top,depth_bottom,uscs\n,,\n  ,,\n",
])
def test_too_few_rows_raise(text):
    with pytest.raises(ValueError):
        data.load_boring_log(text)


def test_column_names_are_normalized():
    assert data.normalize_column_name(" Depth Top (ft) ") == "depth_top_ft"
    assert data.normalize_column_name("Sample-ID") == "sample_id"
    assert data.normalize_column_name("__USCS__") == "uscs"

    text = "Boring ID;Depth Top;Depth-Bottom;USCS;Sample Depth;Sample Type;Sample ID\nB-4;0;3;sp;1;grab;G-1\n"
    record = data.load_boring_log(text, delimiter=";")
    assert record.boring.id == "B-4"
    assert record.layers[0].uscs == "SP"
    assert record.samples[0].type == "GRAB"


def test_standardize_columns_applies_aliases():
    df = pd.DataFrame(columns=["From", "To", "Classification", "Notes"])
    out = data.standardize_columns(df)
    assert list(out.columns) == ["depth_top", "depth_bottom", "uscs", "notes"]

    out = data.standardize_columns(df, source_column_map={"Notes": "description"})
    assert list(out.columns)[-1] == "description"


def test_dataframe_source():
    df = pd.DataFrame({
        "from": [0.0, 4.0],
        "to": [4.0, 9.0],
        "classification": ["ML", "CH"],
        "pid": [1.5, None],
    })
    record = data.load_boring_log(df)
    assert [(layer.depth_top, layer.depth_bottom) for layer in record.layers] == [(0, 4), (4, 9)]
    assert record.layers[0].pid == 1.5
    assert record.layers[1].pid is None


def test_structured_and_bare_driller():
    text = "driller_company,driller_name,driller_license,depth_top,depth_bottom,uscs\nAcme,T. Ng,C57,0,1,SM\n"
    record = data.load_boring_log(text)
    assert record.boring.driller == Driller(company="Acme", name="T. Ng", license="C57")

    record = data.load_boring_log("driller,depth_top,depth_bottom,uscs\nJ. Smith,0,1,SM\n")
    assert record.boring.driller == "J. Smith"


def test_location_and_consultant():
    text = "coord_1,coord_2,consultant_company,consultant_phone,depth_top,depth_bottom,uscs\n512300,4174200,GeoServe,555-0100,0,1,SM\n"
    record = data.load_boring_log(text)
    assert record.boring.location.coords == (512300, 4174200)
    assert record.boring.location.system == "Unknown"
    assert record.boring.consultant.company == "GeoServe"
    assert record.boring.consultant.contact is None


def test_well_requires_type_diameter_or_screen():
    record = data.load_boring_log("well_casing_material,depth_top,depth_bottom,uscs\nPVC,0,1,SM\n")
    assert record.well is None

    text = "well_screen_top,well_screen_bottom,well_casing_material,depth_top,depth_bottom,uscs\n10,20,PVC,0,1,SM\n"
    record = data.load_boring_log(text)
    assert record.well.screen_top == 10
    assert record.well.casing_material == "PVC"


def test_interval_samples():
    text = "sample_depth_top,sample_depth_bottom,sample_type,sample_id,recovery\n5,6.5,shelby,T-1,16\n5,7,shelby,T-1,12\n"
    record = data.load_boring_log(text)
    (sample,) = record.samples
    assert isinstance(sample, IntervalSample)
    assert (sample.depth_top, sample.depth_bottom) == (5, 6.5)
    assert sample.recovery == 16
    assert record.boring.total_depth == 6.5


def test_malformed_numbers_are_absent():
    text = "elevation,depth_top,depth_bottom,uscs,pid\nn/a,abc,2,SM,\n,2,4,CL,high\n"
    record = data.load_boring_log(text)
    assert record.boring.elevation is None
    assert [layer.uscs for layer in record.layers] == ["CL"]
    assert record.layers[0].pid is None


def test_explicit_total_depth_wins():
    record = data.load_boring_log("total_depth,depth_top,depth_bottom,uscs\n40,0,5,SM\n")
    assert record.boring.total_depth == 40


def test_layers_and_samples_are_sorted():
    text = "depth_top,depth_bottom,uscs,sample_depth,sample_type,sample_id\n5,9,CL,7,SPT,S-2\n0,5,SM,1,SPT,S-1\n"
    record = data.load_boring_log(text)
    assert [layer.depth_top for layer in record.layers] == [0, 5]
    assert [sample.id for sample in record.samples] == ["S-1", "S-2"]


def test_csv_template():
    header = data.csv_template()
    columns = header.split(",")
    assert columns[:2] == ["boring_id", "project"]
    for col in ["depth_top", "uscs", "sample_depth", "blow3", "well_seal_material", "driller_license"]:
        assert col in columns
    assert data.csv_template(";").split(";") == columns
    # the template itself is a valid header row
    record = data.load_boring_log(header + "\n" + ",".join(["" for _ in columns[:-1]]) + ",x\n")
    assert record.layers == []
