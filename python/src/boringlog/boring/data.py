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

"""Delimited-text ingestion for boring logs.

A boring log spreadsheet is a single flat table. Every row may carry any mix
of boring metadata, a soil layer, a sample, groundwater and well columns;
rows are folded together into one :class:`~boringlog.boring.record.BoringRecord`.

Column headers are normalized and mapped onto the names in
:mod:`boringlog.datamodel` before any values are read, so ``Depth Top``,
``depth-top`` and ``From`` all land on ``depth_top``.
"""

import datetime
import io
import logging
import os
import re

import pandas as pd

from boringlog.datamodel import (
    BLOW_1,
    BLOW_2,
    BLOW_3,
    BORING_ID,
    BORINGLOG_DATA_MODEL,
    CLIENT,
    CONSULTANT_COMPANY,
    CONSULTANT_CONTACT,
    CONSULTANT_PHONE,
    DEFAULT_TOTAL_DEPTH,
    COORD_1,
    COORD_2,
    COORD_SYSTEM,
    DATE,
    DATE_COMPLETE,
    DATE_START,
    DEPTH_BOTTOM,
    DEPTH_TOP,
    DESCRIPTION,
    DRILLER,
    DRILLER_COMPANY,
    DRILLER_LICENSE,
    DRILLER_NAME,
    DRILLING_METHOD,
    ELEVATION,
    EQUIPMENT,
    GROUNDWATER_DEPTH,
    GROUNDWATER_NOTE,
    LOGGED_BY,
    MOISTURE,
    ODOR,
    PID,
    PROJECT,
    RECOVERY,
    SAMPLE_DEPTH,
    SAMPLE_DEPTH_BOTTOM,
    SAMPLE_DEPTH_TOP,
    SAMPLE_ID,
    SAMPLE_TYPE,
    TIME,
    TOTAL_DEPTH,
    USCS,
    WEATHER,
    WELL_CASING_DIAMETER,
    WELL_CASING_MATERIAL,
    WELL_FILTER_PACK,
    WELL_SCREEN_BOTTOM,
    WELL_SCREEN_SLOT_SIZE,
    WELL_SCREEN_TOP,
    WELL_SEAL_BOTTOM,
    WELL_SEAL_MATERIAL,
    WELL_SEAL_TOP,
    WELL_TYPE,
)

from .record import BoringRecord

logger = logging.getLogger(__name__)

DEFAULT_BORING_ID = "B-1"
DEFAULT_PROJECT = "Imported Project"

DEFAULT_COLUMN_MAP = {
    BORING_ID: ["boring_id", "boring", "borehole", "borehole_id", "hole_id", "boring_no"],
    PROJECT: ["project", "project_name"],
    DATE_START: ["date_start", "start_date", "started"],
    DATE_COMPLETE: ["date_complete", "complete_date", "completed", "date_completed"],
    DRILLING_METHOD: ["drilling_method", "method"],
    LOGGED_BY: ["logged_by", "logger", "geologist"],
    TOTAL_DEPTH: ["total_depth", "td", "final_depth"],
    ELEVATION: ["elevation", "elev", "surface_elevation", "ground_elevation", "rl"],
    COORD_1: ["coord_1", "easting", "x"],
    COORD_2: ["coord_2", "northing", "y"],
    COORD_SYSTEM: ["coord_system", "crs", "datum"],
    GROUNDWATER_DEPTH: ["groundwater_depth", "gw_depth", "water_depth"],
    GROUNDWATER_NOTE: ["groundwater_note", "gw_note"],
    DEPTH_TOP: ["depth_top", "from", "depth_from", "top"],
    DEPTH_BOTTOM: ["depth_bottom", "to", "depth_to", "bottom"],
    USCS: ["uscs", "classification", "soil_code", "uscs_code"],
    DESCRIPTION: ["description", "soil_description", "desc"],
    PID: ["pid", "pid_ppm"],
    SAMPLE_DEPTH: ["sample_depth", "samp_depth"],
    SAMPLE_DEPTH_TOP: ["sample_depth_top", "sample_from", "samp_from"],
    SAMPLE_DEPTH_BOTTOM: ["sample_depth_bottom", "sample_to", "samp_to"],
    SAMPLE_ID: ["sample_id", "sample_no", "sample"],
    BLOW_1: ["blow1", "blow_1", "blows_1"],
    BLOW_2: ["blow2", "blow_2", "blows_2"],
    BLOW_3: ["blow3", "blow_3", "blows_3"],
    RECOVERY: ["recovery", "rec"],
}

_COLUMN_LOOKUP = {}
for standard_col, variations in DEFAULT_COLUMN_MAP.items():
    for variation in variations:
        _COLUMN_LOOKUP[variation] = standard_col

NUMERIC_COLUMNS = [col for col, kind in BORINGLOG_DATA_MODEL.items() if kind in (float, int)]

BORING_TEXT_FIELDS = {
    BORING_ID: "id",
    PROJECT: "project",
    CLIENT: "client",
    DATE: "date",
    DATE_START: "dateStart",
    DATE_COMPLETE: "dateComplete",
    TIME: "time",
    WEATHER: "weather",
    EQUIPMENT: "equipment",
    DRILLING_METHOD: "drillingMethod",
    LOGGED_BY: "loggedBy",
}

WELL_FIELDS = {
    WELL_TYPE: "type",
    WELL_CASING_DIAMETER: "casingDiameter",
    WELL_CASING_MATERIAL: "casingMaterial",
    WELL_SCREEN_TOP: "screenTop",
    WELL_SCREEN_BOTTOM: "screenBottom",
    WELL_SCREEN_SLOT_SIZE: "screenSlotSize",
    WELL_FILTER_PACK: "filterPack",
    WELL_SEAL_TOP: "sealTop",
    WELL_SEAL_BOTTOM: "sealBottom",
    WELL_SEAL_MATERIAL: "sealMaterial",
}

# Columns folded with last-non-empty-wins, in the order they are read per row
METADATA_COLUMNS = (
    list(BORING_TEXT_FIELDS)
    + [TOTAL_DEPTH, ELEVATION, COORD_1, COORD_2, COORD_SYSTEM]
    + [CONSULTANT_COMPANY, CONSULTANT_CONTACT, CONSULTANT_PHONE]
    # a bare driller column feeds the same slot as driller_name
    + [DRILLER, DRILLER_COMPANY, DRILLER_NAME, DRILLER_LICENSE]
    + [GROUNDWATER_DEPTH, GROUNDWATER_NOTE]
    + list(WELL_FIELDS)
)


def normalize_column_name(name):
    """``" Depth Top (ft) "`` -> ``"depth_top_ft"``."""
    text = re.sub(r"[^a-z0-9]+", "_", str(name).lower().strip())
    return text.strip("_")


def standardize_columns(df, source_column_map=None):
    lookup = dict(_COLUMN_LOOKUP)
    if source_column_map:
        lookup.update({
            normalize_column_name(raw_name): normalize_column_name(expected_name)
            for raw_name, expected_name in source_column_map.items()
            if raw_name is not None and expected_name is not None
        })

    renamed = {}
    for col in df.columns:
        key = normalize_column_name(col)
        renamed[col] = lookup.get(key, key)
    out = df.rename(columns=renamed)
    if not out.columns.is_unique:
        out = out.loc[:, ~out.columns.duplicated()]
    return out


def csv_template(delimiter=","):
    """Header row naming every recognized column."""
    return delimiter.join(BORINGLOG_DATA_MODEL)


def _read_frame(source, delimiter):
    if isinstance(source, pd.DataFrame):
        df = source.copy()
        return df.astype(object).where(df.notna(), "").astype(str)
    if isinstance(source, os.PathLike) or (
        isinstance(source, str) and "\n" not in source and os.path.exists(source)
    ):
        handle = source
    elif isinstance(source, str):
        handle = io.StringIO(source)
    else:
        handle = source
    try:
        df = pd.read_csv(handle, sep=delimiter, dtype=str, keep_default_na=False, skip_blank_lines=True)
    except pd.errors.EmptyDataError as exc:
        raise ValueError("Boring log text must have a header row and at least one data row") from exc
    except pd.errors.ParserError as exc:
        raise ValueError(f"Unreadable boring log text: {exc}") from exc
    # rows shorter than the header leave NaN behind
    return df.fillna("")


def _present(value):
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return not pd.isna(value)


def _cell(row, col):
    value = row.get(col)
    if not _present(value):
        return None
    return value.strip() if isinstance(value, str) else value


def _to_count(value):
    return int(value) if float(value).is_integer() else value


class RecordBuilder:
    """Fold table rows into one boring log document.

    Metadata follows last-non-empty-wins per field. Layers and samples are
    collected in row order; duplicates are dropped with the first occurrence
    kept.
    """

    def __init__(self, boring_id=DEFAULT_BORING_ID, project=DEFAULT_PROJECT, date=None):
        self.meta = {
            BORING_ID: boring_id,
            PROJECT: project,
            DATE: date or datetime.date.today().isoformat(),
        }
        self.layers = []
        self.samples = []
        self.duplicates = 0
        self._layer_keys = set()
        self._sample_keys = set()

    def fold(self, row):
        for col in METADATA_COLUMNS:
            value = _cell(row, col)
            if value is None:
                continue
            key = DRILLER_NAME if col == DRILLER else col
            self.meta[key] = value
        self._add_layer(row)
        self._add_sample(row)
        return self

    def _add_layer(self, row):
        top = _cell(row, DEPTH_TOP)
        bottom = _cell(row, DEPTH_BOTTOM)
        uscs = _cell(row, USCS)
        if top is None or bottom is None or uscs is None:
            return
        key = (top, bottom)
        if key in self._layer_keys:
            self.duplicates += 1
            return
        self._layer_keys.add(key)
        layer = {
            "depthTop": top,
            "depthBottom": bottom,
            "uscs": uscs.upper(),
            "description": _cell(row, DESCRIPTION) or f"{uscs} soil",
        }
        for col in (MOISTURE, ODOR):
            value = _cell(row, col)
            if value is not None:
                layer[col] = value.lower()
        pid = _cell(row, PID)
        if pid is not None:
            layer["pid"] = pid
        self.layers.append(layer)

    def _add_sample(self, row):
        sample_type = _cell(row, SAMPLE_TYPE)
        sample_id = _cell(row, SAMPLE_ID)
        if sample_type is None or sample_id is None:
            return
        top = _cell(row, SAMPLE_DEPTH_TOP)
        bottom = _cell(row, SAMPLE_DEPTH_BOTTOM)
        if top is not None and bottom is not None:
            sample = {"depthTop": top, "depthBottom": bottom}
            key_depth = top
        else:
            depth = _cell(row, SAMPLE_DEPTH)
            if depth is None:
                return
            sample = {"depth": depth}
            key_depth = depth
        key = (key_depth, sample_id)
        if key in self._sample_keys:
            self.duplicates += 1
            return
        self._sample_keys.add(key)
        sample.update({"type": sample_type.upper(), "id": sample_id})

        blows = [_cell(row, col) for col in (BLOW_1, BLOW_2, BLOW_3)]
        if all(b is not None for b in blows):
            sample["blows"] = [_to_count(b) for b in blows]
        recovery = _cell(row, RECOVERY)
        if recovery is not None:
            sample["recovery"] = recovery
        self.samples.append(sample)

    def max_depth(self):
        depths = [layer["depthBottom"] for layer in self.layers]
        depths += [sample.get("depthBottom", sample.get("depth")) for sample in self.samples]
        return max(depths) if depths else 0

    def to_document(self):
        """The folded rows as a camelCase JSON document."""
        meta = self.meta
        boring = {
            field: meta[col] for col, field in BORING_TEXT_FIELDS.items() if meta.get(col) is not None
        }
        boring["totalDepth"] = meta.get(TOTAL_DEPTH) or self.max_depth() or DEFAULT_TOTAL_DEPTH
        if meta.get(ELEVATION) is not None:
            boring["elevation"] = meta[ELEVATION]
        if meta.get(COORD_1) is not None and meta.get(COORD_2) is not None:
            boring["location"] = {
                "coords": [meta[COORD_1], meta[COORD_2]],
                "system": meta.get(COORD_SYSTEM) or "Unknown",
            }
        consultant = {
            field: meta[col]
            for col, field in ((CONSULTANT_COMPANY, "company"), (CONSULTANT_CONTACT, "contact"), (CONSULTANT_PHONE, "phone"))
            if meta.get(col) is not None
        }
        if consultant:
            boring["consultant"] = consultant
        if meta.get(DRILLER_COMPANY) is not None or meta.get(DRILLER_LICENSE) is not None:
            boring["driller"] = {
                field: meta[col]
                for col, field in ((DRILLER_COMPANY, "company"), (DRILLER_NAME, "name"), (DRILLER_LICENSE, "license"))
                if meta.get(col) is not None
            }
        elif meta.get(DRILLER_NAME) is not None:
            boring["driller"] = meta[DRILLER_NAME]

        doc = {
            "boring": boring,
            "layers": sorted(self.layers, key=lambda layer: layer["depthTop"]),
            "samples": sorted(self.samples, key=lambda s: s.get("depthTop", s.get("depth"))),
        }
        if meta.get(GROUNDWATER_DEPTH) is not None:
            doc["groundwater"] = {"depth": meta[GROUNDWATER_DEPTH]}
            if meta.get(GROUNDWATER_NOTE) is not None:
                doc["groundwater"]["note"] = meta[GROUNDWATER_NOTE]
        if any(meta.get(col) is not None for col in (WELL_TYPE, WELL_CASING_DIAMETER, WELL_SCREEN_TOP)):
            doc["well"] = {field: meta[col] for col, field in WELL_FIELDS.items() if meta.get(col) is not None}
        return doc

    def build(self):
        return BoringRecord.from_dict(self.to_document())


def read_boring_table(source, delimiter=",", source_column_map=None):
    """Read *source* into a standardized string table with numeric columns coerced.

    Blank rows are dropped. Raises ``ValueError`` unless a header row and at
    least one data row remain.
    """
    df = _read_frame(source, delimiter)
    df = standardize_columns(df, source_column_map=source_column_map)
    df = df.loc[df.apply(lambda row: any(str(v).strip() for v in row), axis=1)] if not df.empty else df
    if df.empty:
        raise ValueError("Boring log text must have a header row and at least one data row")
    for col in NUMERIC_COLUMNS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col].str.strip(), errors="coerce")
    return df.reset_index(drop=True)


def load_boring_log(source,
    delimiter=",",
    boring_id=DEFAULT_BORING_ID,
    project=DEFAULT_PROJECT,
    date=None,
    source_column_map=None):
    """Load a delimited boring log table into a :class:`BoringRecord`.

    ``source`` may be delimited text, a file path, a file-like object or a
    ``pandas.DataFrame``. ``boring_id``, ``project`` and ``date`` are used
    when the table does not supply them; ``date`` defaults to today.
    """
    df = read_boring_table(source, delimiter=delimiter, source_column_map=source_column_map)
    unknown = [col for col in df.columns if col not in BORINGLOG_DATA_MODEL]
    if unknown:
        logger.debug("Ignoring unrecognized columns: %s", ", ".join(map(str, unknown)))

    builder = RecordBuilder(boring_id=boring_id, project=project, date=date)
    for row in df.to_dict(orient="records"):
        builder.fold(row)
    logger.debug(
        "Folded %d rows into %d layers and %d samples (%d duplicates dropped)",
        len(df), len(builder.layers), len(builder.samples), builder.duplicates,
    )
    return builder.build()
