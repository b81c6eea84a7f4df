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

"""Headless record editor.

Keeps a JSON document of one boring log, applies field edits addressed by
path, and pushes the edited record into a :class:`~boringlog.boring.render.BoringLog`
so the drawing follows every confirmed change. Paths use dots for mapping
keys and either ``[i]`` or a bare integer segment for list positions::

    boring.id
    layers[0].uscs
    samples[1].blows.2
    boring.location.coords.0
"""

import copy
import datetime
import logging
import re

from .record import BoringRecord
from .validate import validate_record

logger = logging.getLogger(__name__)

_SEGMENT = re.compile(r"^([A-Za-z_]\w*)((?:\[\d+\])*)$")
_INDEX = re.compile(r"\[(\d+)\]")

NEW_LAYER_THICKNESS = 5


def parse_path(path):
    """Split an edit path into mapping keys (str) and list positions (int)."""
    if not isinstance(path, str) or not path:
        raise ValueError(f"Invalid edit path: {path!r}")
    keys = []
    for segment in path.split("."):
        if segment.isdigit():
            keys.append(int(segment))
            continue
        match = _SEGMENT.match(segment)
        if match is None:
            raise ValueError(f"Invalid edit path: {path!r}")
        keys.append(match.group(1))
        keys.extend(int(i) for i in _INDEX.findall(match.group(2)))
    return keys


def _child(container, key):
    if isinstance(key, int):
        if isinstance(container, list) and key < len(container):
            return container[key]
        return None
    if isinstance(container, dict):
        return container.get(key)
    return None


def _ensure(container, key, next_key):
    if isinstance(key, int):
        if not isinstance(container, list):
            raise ValueError(f"Cannot index {type(container).__name__} with {key}")
        while len(container) <= key:
            container.append(None)
        current = container[key]
    elif isinstance(container, dict):
        current = container.get(key)
    else:
        raise ValueError(f"Cannot look up '{key}' in {type(container).__name__}")
    if current is None:
        current = [] if isinstance(next_key, int) else {}
        container[key] = current
    elif not isinstance(current, (dict, list)):
        raise ValueError(f"Cannot descend into {type(current).__name__} at '{key}'")
    return current


def default_document():
    """A blank boring log ready for editing."""
    return {
        "boring": {
            "id": "B-1",
            "project": "New Project",
            "date": datetime.date.today().isoformat(),
            "totalDepth": 30,
        },
        "layers": [],
        "samples": [],
    }


class RecordEditor:
    def __init__(self, boring_log=None):
        self.boring_log = boring_log
        self.data = None

    def set_data(self, doc):
        if isinstance(doc, BoringRecord):
            doc = doc.to_dict()
        self.data = copy.deepcopy(doc) if doc is not None else None
        return self

    def get_data(self):
        return self.data

    def _document(self):
        if self.data is None:
            self.data = default_document()
        return self.data

    def get_value(self, path):
        obj = self.data
        for key in parse_path(path):
            if obj is None:
                return None
            obj = _child(obj, key)
        return obj

    def set_value(self, path, value):
        keys = parse_path(path)
        obj = self._document()
        for key, next_key in zip(keys[:-1], keys[1:]):
            obj = _ensure(obj, key, next_key)
        last = keys[-1]
        if isinstance(last, int):
            if not isinstance(obj, list):
                raise ValueError(f"Cannot index {type(obj).__name__} with {last}")
            while len(obj) <= last:
                obj.append(None)
        elif not isinstance(obj, dict):
            raise ValueError(f"Cannot set '{last}' on {type(obj).__name__}")
        obj[last] = value
        return self

    def update_preview(self):
        """Push the current document into the attached renderer."""
        if self.boring_log is None or self.data is None:
            return None
        logger.debug("Updating preview with %d layers", len(self.data.get("layers") or []))
        return self.boring_log.set_data(BoringRecord.from_dict(self.data))

    def commit(self, path, value):
        """Apply one confirmed field edit and refresh the preview."""
        self.set_value(path, value)
        return self.update_preview()

    def add_layer(self):
        layers = self._document().setdefault("layers", [])
        top = (layers[-1] or {}).get("depthBottom") if layers else 0
        top = top or 0
        layers.append({
            "depthTop": top,
            "depthBottom": top + NEW_LAYER_THICKNESS,
            "uscs": "",
            "description": "",
            "moisture": "",
            "odor": "",
            "pid": None,
        })
        self.update_preview()
        return len(layers) - 1

    def remove_layer(self, index):
        layers = self._document().setdefault("layers", [])
        if not 0 <= index < len(layers):
            raise IndexError(f"Layer index out of range: {index}")
        removed = layers.pop(index)
        self.update_preview()
        return removed

    def add_sample(self):
        samples = self._document().setdefault("samples", [])
        samples.append({
            "id": f"S-{len(samples) + 1}",
            "type": "SPT",
            "depthTop": 0,
            "depthBottom": 1.5,
            "blows": [0, 0, 0],
            "recovery": 18,
        })
        self.update_preview()
        return len(samples) - 1

    def remove_sample(self, index):
        samples = self._document().setdefault("samples", [])
        if not 0 <= index < len(samples):
            raise IndexError(f"Sample index out of range: {index}")
        removed = samples.pop(index)
        self.update_preview()
        return removed

    def validate(self):
        return validate_record(BoringRecord.from_dict(self._document()))
