# Copyright (C) 2026 Darkmine Pty Ltd
# SPDX-License-Identifier: GPL-3.0-or-later

from . import config, data, editor, layout, patterns, record, render, scene, svg, validate, view
from .record import BoringRecord
from .config import RenderConfig
from .render import BoringLog, render_scene

__all__ = [
	"config",
	"data",
	"editor",
	"layout",
	"patterns",
	"record",
	"render",
	"scene",
	"svg",
	"validate",
	"view",
	"BoringLog",
	"BoringRecord",
	"RenderConfig",
	"render_scene",
]
