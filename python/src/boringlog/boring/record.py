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

"""In-memory boring log record.

A :class:`BoringRecord` is the normalized form of one boring log: metadata,
soil layers, samples, groundwater and well construction. Records carry no
rendering behavior; the layout engine and renderer only read them.

The editor and ingestion exchange records as camelCase JSON documents
(``{"boring": {...}, "layers": [...], ...}``); :meth:`BoringRecord.from_dict`
and :meth:`BoringRecord.to_dict` convert between the two forms.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from boringlog.datamodel import DEFAULT_TOTAL_DEPTH


def _text(value):
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _number(value):
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except ValueError:
            return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _count(value):
    number = _number(value)
    if number is None:
        return None
    return int(number) if number.is_integer() else number


def _compact(mapping):
    return {key: val for key, val in mapping.items() if val is not None}


def format_depth(value):
    """Format a depth for labels: ``2.0`` -> ``"2"``, ``2.5`` -> ``"2.5"``."""
    if value is None:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


@dataclass
class Location:
    coords: tuple
    system: str = "Unknown"

    def label(self):
        return f"{', '.join(format_depth(c) for c in self.coords)} ({self.system})"


@dataclass
class Consultant:
    company: str | None = None
    contact: str | None = None
    phone: str | None = None


@dataclass
class Driller:
    company: str | None = None
    name: str | None = None
    license: str | None = None


@dataclass
class Boring:
    id: str
    project: str | None = None
    client: str | None = None
    date: str | None = None
    date_start: str | None = None
    date_complete: str | None = None
    time: str | None = None
    weather: str | None = None
    elevation: float | None = None
    location: Location | None = None
    consultant: Consultant | None = None
    # Older documents store a bare name; newer ones a structured Driller
    driller: str | Driller | None = None
    equipment: str | None = None
    drilling_method: str | None = None
    logged_by: str | None = None
    total_depth: float | None = None


@dataclass
class Layer:
    depth_top: float
    depth_bottom: float
    uscs: str = ""
    description: str = ""
    moisture: str | None = None
    odor: str | None = None
    pid: float | None = None

    def __post_init__(self):
        self.uscs = (self.uscs or "").strip().upper()
        if not self.description:
            self.description = f"{self.uscs} soil" if self.uscs else "Unclassified soil"

    @property
    def codes(self):
        """Constituent codes of a dual classification (``GP-GM`` -> ``["GP", "GM"]``)."""
        return [part.strip() for part in self.uscs.upper().split("-") if part.strip()]

    @property
    def has_odor(self):
        return bool(self.odor) and self.odor != "none"


@dataclass(kw_only=True)
class Sample:
    """Common fields of point and interval samples."""

    id: str = ""
    type: str = ""
    blows: tuple | None = None
    recovery: float | None = None

    def __post_init__(self):
        self.type = (self.type or "").strip().upper()
        if self.blows is not None:
            self.blows = tuple(self.blows)

    @property
    def is_spt(self):
        return self.type == "SPT"

    @property
    def n_value(self):
        """SPT N-value: blows of the 2nd and 3rd increments; the 1st is seating."""
        if self.blows is None or len(self.blows) != 3:
            return None
        return self.blows[1] + self.blows[2]

    @property
    def blows_text(self):
        if self.blows is None:
            return ""
        return "-".join(format_depth(b) for b in self.blows)

    @property
    def has_range(self):
        return False

    @property
    def key_depth(self):
        """Depth used for ordering and duplicate detection."""
        return self.top

    @property
    def center(self):
        return 0.5 * (self.top + self.bottom)


@dataclass(kw_only=True)
class PointSample(Sample):
    depth: float = 0.0

    @property
    def top(self):
        return self.depth

    @property
    def bottom(self):
        return self.depth


@dataclass(kw_only=True)
class IntervalSample(Sample):
    depth_top: float = 0.0
    depth_bottom: float = 0.0

    @property
    def top(self):
        return self.depth_top

    @property
    def bottom(self):
        return self.depth_bottom

    @property
    def has_range(self):
        return True

    def range_label(self):
        return f"({format_depth(self.depth_top)}-{format_depth(self.depth_bottom)})"


@dataclass
class Groundwater:
    depth: float | None = None
    note: str | None = None


@dataclass
class Well:
    type: str | None = None
    casing_diameter: float | None = None
    casing_material: str | None = None
    screen_top: float | None = None
    screen_bottom: float | None = None
    screen_slot_size: float | None = None
    filter_pack: str | None = None
    seal_top: float | None = None
    seal_bottom: float | None = None
    seal_material: str | None = None

    @property
    def is_empty(self):
        return all(val is None for val in vars(self).values())

    @property
    def has_screen(self):
        return self.screen_top is not None and self.screen_bottom is not None

    @property
    def has_seal(self):
        return self.seal_top is not None and self.seal_bottom is not None


@dataclass
class BoringRecord:
    boring: Boring
    layers: list = field(default_factory=list)
    samples: list = field(default_factory=list)
    groundwater: Groundwater | None = None
    well: Well | None = None

    @property
    def resolved_total_depth(self):
        return self.boring.total_depth or DEFAULT_TOTAL_DEPTH

    @property
    def has_groundwater(self):
        return self.groundwater is not None and self.groundwater.depth is not None

    @property
    def has_well(self):
        return self.well is not None and not self.well.is_empty

    def sorted_layers(self):
        return sorted(self.layers, key=lambda layer: layer.depth_top)

    def sorted_samples(self):
        return sorted(self.samples, key=lambda sample: sample.key_depth)

    @classmethod
    def from_dict(cls, doc):
        doc = doc or {}
        groundwater = _groundwater_from_dict(doc.get("groundwater"))
        well = _well_from_dict(doc.get("well"))
        return cls(
            boring=_boring_from_dict(doc.get("boring")),
            layers=[layer for layer in map(_layer_from_dict, doc.get("layers") or []) if layer is not None],
            samples=[sample for sample in map(_sample_from_dict, doc.get("samples") or []) if sample is not None],
            groundwater=groundwater,
            well=well,
        )

    def to_dict(self):
        out = {
            "boring": _boring_to_dict(self.boring),
            "layers": [_layer_to_dict(layer) for layer in self.layers],
            "samples": [_sample_to_dict(sample) for sample in self.samples],
        }
        if self.groundwater is not None:
            out["groundwater"] = _compact({"depth": self.groundwater.depth, "note": self.groundwater.note})
        if self.well is not None and not self.well.is_empty:
            out["well"] = _compact({
                "type": self.well.type,
                "casingDiameter": self.well.casing_diameter,
                "casingMaterial": self.well.casing_material,
                "screenTop": self.well.screen_top,
                "screenBottom": self.well.screen_bottom,
                "screenSlotSize": self.well.screen_slot_size,
                "filterPack": self.well.filter_pack,
                "sealTop": self.well.seal_top,
                "sealBottom": self.well.seal_bottom,
                "sealMaterial": self.well.seal_material,
            })
        return out


def as_record(obj):
    """Return *obj* as a :class:`BoringRecord`, converting JSON documents."""
    if obj is None or isinstance(obj, BoringRecord):
        return obj
    if isinstance(obj, Mapping):
        return BoringRecord.from_dict(obj)
    raise TypeError(f"Expected BoringRecord or mapping, got {type(obj).__name__}")


def _location_from_dict(loc):
    if not isinstance(loc, Mapping):
        return None
    coords = [_number(c) for c in (loc.get("coords") or [])]
    if len(coords) < 2 or any(c is None for c in coords[:2]):
        return None
    return Location(coords=tuple(coords[:2]), system=_text(loc.get("system")) or "Unknown")


def _driller_from_value(value):
    if isinstance(value, Mapping):
        driller = Driller(
            company=_text(value.get("company")),
            name=_text(value.get("name")),
            license=_text(value.get("license")),
        )
        if driller.company is None and driller.name is None and driller.license is None:
            return None
        return driller
    return _text(value)


def _boring_from_dict(boring):
    boring = boring or {}
    consultant = None
    raw_consultant = boring.get("consultant")
    if isinstance(raw_consultant, Mapping):
        consultant = Consultant(
            company=_text(raw_consultant.get("company")),
            contact=_text(raw_consultant.get("contact")),
            phone=_text(raw_consultant.get("phone")),
        )
        if consultant == Consultant():
            consultant = None
    return Boring(
        id=_text(boring.get("id")) or "",
        project=_text(boring.get("project")),
        client=_text(boring.get("client")),
        date=_text(boring.get("date")),
        date_start=_text(boring.get("dateStart")),
        date_complete=_text(boring.get("dateComplete")),
        time=_text(boring.get("time")),
        weather=_text(boring.get("weather")),
        elevation=_number(boring.get("elevation")),
        location=_location_from_dict(boring.get("location")),
        consultant=consultant,
        driller=_driller_from_value(boring.get("driller")),
        equipment=_text(boring.get("equipment")),
        drilling_method=_text(boring.get("drillingMethod")),
        logged_by=_text(boring.get("loggedBy")),
        total_depth=_number(boring.get("totalDepth")),
    )


def _layer_from_dict(layer):
    if not isinstance(layer, Mapping):
        return None
    top = _number(layer.get("depthTop"))
    bottom = _number(layer.get("depthBottom"))
    if top is None or bottom is None:
        return None
    moisture = _text(layer.get("moisture"))
    odor = _text(layer.get("odor"))
    return Layer(
        depth_top=top,
        depth_bottom=bottom,
        uscs=_text(layer.get("uscs")) or "",
        description=_text(layer.get("description")) or "",
        moisture=moisture.lower() if moisture else None,
        odor=odor.lower() if odor else None,
        pid=_number(layer.get("pid")),
    )


def _blows_from_value(blows):
    if blows is None:
        return None
    counts = [_count(b) for b in blows]
    if not counts or any(c is None for c in counts):
        return None
    return tuple(counts)


def _sample_from_dict(sample):
    if not isinstance(sample, Mapping):
        return None
    common = dict(
        id=_text(sample.get("id")) or "",
        type=_text(sample.get("type")) or "",
        blows=_blows_from_value(sample.get("blows")),
        recovery=_number(sample.get("recovery")),
    )
    top = _number(sample.get("depthTop"))
    bottom = _number(sample.get("depthBottom"))
    if top is not None and bottom is not None:
        return IntervalSample(depth_top=top, depth_bottom=bottom, **common)
    depth = _number(sample.get("depth"))
    if depth is None:
        return None
    return PointSample(depth=depth, **common)


def _groundwater_from_dict(gw):
    if not isinstance(gw, Mapping):
        return None
    groundwater = Groundwater(depth=_number(gw.get("depth")), note=_text(gw.get("note")))
    if groundwater.depth is None and groundwater.note is None:
        return None
    return groundwater


def _well_from_dict(well):
    if not isinstance(well, Mapping):
        return None
    parsed = Well(
        type=_text(well.get("type")),
        casing_diameter=_number(well.get("casingDiameter")),
        casing_material=_text(well.get("casingMaterial")),
        screen_top=_number(well.get("screenTop")),
        screen_bottom=_number(well.get("screenBottom")),
        screen_slot_size=_number(well.get("screenSlotSize")),
        filter_pack=_text(well.get("filterPack")),
        seal_top=_number(well.get("sealTop")),
        seal_bottom=_number(well.get("sealBottom")),
        seal_material=_text(well.get("sealMaterial")),
    )
    return None if parsed.is_empty else parsed


def _boring_to_dict(boring):
    out = _compact({
        "id": boring.id,
        "project": boring.project,
        "client": boring.client,
        "date": boring.date,
        "dateStart": boring.date_start,
        "dateComplete": boring.date_complete,
        "time": boring.time,
        "weather": boring.weather,
        "elevation": boring.elevation,
        "equipment": boring.equipment,
        "drillingMethod": boring.drilling_method,
        "loggedBy": boring.logged_by,
        "totalDepth": boring.total_depth,
    })
    if boring.location is not None:
        out["location"] = {"coords": list(boring.location.coords), "system": boring.location.system}
    if boring.consultant is not None:
        out["consultant"] = _compact(vars(boring.consultant))
    if isinstance(boring.driller, Driller):
        out["driller"] = _compact(vars(boring.driller))
    elif boring.driller is not None:
        out["driller"] = boring.driller
    return out


def _layer_to_dict(layer):
    return _compact({
        "depthTop": layer.depth_top,
        "depthBottom": layer.depth_bottom,
        "uscs": layer.uscs,
        "description": layer.description,
        "moisture": layer.moisture,
        "odor": layer.odor,
        "pid": layer.pid,
    })


def _sample_to_dict(sample):
    out = {"id": sample.id, "type": sample.type}
    if sample.has_range:
        out["depthTop"] = sample.depth_top
        out["depthBottom"] = sample.depth_bottom
    else:
        out["depth"] = sample.depth
    if sample.blows is not None:
        out["blows"] = list(sample.blows)
    if sample.recovery is not None:
        out["recovery"] = sample.recovery
    return out
