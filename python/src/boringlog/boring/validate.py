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

"""QA/QC helpers for boring log records.

Advisory only: the renderer draws whatever it is given, so these checks are
for editors and import pipelines that want to flag suspicious input. Each
issue is a dict with ``type``, ``section``, ``index`` (position in the
record's own list) and a human-readable ``message``.
"""

from boringlog.datamodel import MOISTURE_OPTIONS, ODOR_OPTIONS

from .record import as_record, format_depth


def _issue(kind, section, index, message):
    return {"type": kind, "section": section, "index": index, "message": message}


def validate_layers(layers, total_depth=None):
    issues = []
    for idx, layer in enumerate(layers):
        if layer.depth_bottom <= layer.depth_top:
            issues.append(_issue(
                "non_positive_thickness", "layers", idx,
                f"Layer {idx} bottom {format_depth(layer.depth_bottom)} is not below top {format_depth(layer.depth_top)}",
            ))
        if layer.moisture and layer.moisture not in MOISTURE_OPTIONS:
            issues.append(_issue("unknown_moisture", "layers", idx, f"Layer {idx} moisture '{layer.moisture}' is not recognized"))
        if layer.odor and layer.odor not in ODOR_OPTIONS:
            issues.append(_issue("unknown_odor", "layers", idx, f"Layer {idx} odor '{layer.odor}' is not recognized"))
        if total_depth is not None and layer.depth_bottom > total_depth:
            issues.append(_issue(
                "depth_beyond_total", "layers", idx,
                f"Layer {idx} extends to {format_depth(layer.depth_bottom)}, below total depth {format_depth(total_depth)}",
            ))

    ordered = sorted(enumerate(layers), key=lambda pair: pair[1].depth_top)
    prev_bottom = None
    for idx, layer in ordered:
        if prev_bottom is not None:
            if layer.depth_top < prev_bottom:
                issues.append(_issue(
                    "layer_overlap", "layers", idx,
                    f"Layer {idx} top {format_depth(layer.depth_top)} overlaps the layer above (bottom {format_depth(prev_bottom)})",
                ))
            elif layer.depth_top > prev_bottom:
                issues.append(_issue(
                    "layer_gap", "layers", idx,
                    f"Gap between {format_depth(prev_bottom)} and {format_depth(layer.depth_top)} above layer {idx}",
                ))
        prev_bottom = layer.depth_bottom if prev_bottom is None else max(prev_bottom, layer.depth_bottom)
    return issues


def validate_samples(samples, total_depth=None):
    issues = []
    for idx, sample in enumerate(samples):
        if not sample.id:
            issues.append(_issue("missing_sample_id", "samples", idx, f"Sample {idx} has no id"))
        if sample.blows is not None:
            blows = sample.blows
            if len(blows) != 3 or any(b < 0 for b in blows):
                issues.append(_issue(
                    "invalid_blows", "samples", idx,
                    f"Sample {sample.id or idx} blows {list(blows)} must be three non-negative counts",
                ))
        if total_depth is not None and sample.bottom > total_depth:
            issues.append(_issue(
                "depth_beyond_total", "samples", idx,
                f"Sample {sample.id or idx} at {format_depth(sample.bottom)} is below total depth {format_depth(total_depth)}",
            ))
    return issues


def validate_record(record):
    """Run every check on *record* (a BoringRecord or JSON document)."""
    record = as_record(record)
    total_depth = record.boring.total_depth or None
    issues = validate_layers(record.layers, total_depth=total_depth)
    issues.extend(validate_samples(record.samples, total_depth=total_depth))
    return issues
