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

"""
Boringlog Open Data Model

Field names for the delimited-text boring log schema and the vocabularies
shared by ingestion, the editor and the renderer.

Column headers are normalized (lower-case, non-alphanumerics collapsed to
underscores) before they are matched against these names.
"""

# Boring metadata
BORING_ID = "boring_id"
PROJECT = "project"
CLIENT = "client"
DATE = "date"
DATE_START = "date_start"
DATE_COMPLETE = "date_complete"
TIME = "time"
WEATHER = "weather"
EQUIPMENT = "equipment"
DRILLING_METHOD = "drilling_method"
LOGGED_BY = "logged_by"
TOTAL_DEPTH = "total_depth"
ELEVATION = "elevation"
COORD_1 = "coord_1"
COORD_2 = "coord_2"
COORD_SYSTEM = "coord_system"

CONSULTANT_COMPANY = "consultant_company"
CONSULTANT_CONTACT = "consultant_contact"
CONSULTANT_PHONE = "consultant_phone"

DRILLER = "driller"
DRILLER_COMPANY = "driller_company"
DRILLER_NAME = "driller_name"
DRILLER_LICENSE = "driller_license"

# Groundwater
GROUNDWATER_DEPTH = "groundwater_depth"
GROUNDWATER_NOTE = "groundwater_note"

# Well construction
WELL_TYPE = "well_type"
WELL_CASING_DIAMETER = "well_casing_diameter"
WELL_CASING_MATERIAL = "well_casing_material"
WELL_SCREEN_TOP = "well_screen_top"
WELL_SCREEN_BOTTOM = "well_screen_bottom"
WELL_SCREEN_SLOT_SIZE = "well_screen_slot_size"
WELL_FILTER_PACK = "well_filter_pack"
WELL_SEAL_TOP = "well_seal_top"
WELL_SEAL_BOTTOM = "well_seal_bottom"
WELL_SEAL_MATERIAL = "well_seal_material"

# Soil layers
DEPTH_TOP = "depth_top"
DEPTH_BOTTOM = "depth_bottom"
USCS = "uscs"
DESCRIPTION = "description"
MOISTURE = "moisture"
ODOR = "odor"
PID = "pid"

# Samples
SAMPLE_DEPTH = "sample_depth"
SAMPLE_DEPTH_TOP = "sample_depth_top"
SAMPLE_DEPTH_BOTTOM = "sample_depth_bottom"
SAMPLE_TYPE = "sample_type"
SAMPLE_ID = "sample_id"
BLOW_1 = "blow1"
BLOW_2 = "blow2"
BLOW_3 = "blow3"
RECOVERY = "recovery"


MOISTURE_OPTIONS = ("dry", "moist", "wet", "saturated")
ODOR_OPTIONS = ("none", "petroleum", "chlorinated", "organic", "other")
SAMPLE_TYPES = ("SPT", "SHELBY", "GRAB", "CORE", "AUGER", "OTHER")
WELL_TYPES = ("monitoring", "production", "piezometer")

DEFAULT_TOTAL_DEPTH = 30.0


BORINGLOG_DATA_MODEL_BORING = {
    # Boring identifier shown in the title of the log
    BORING_ID: str,
    PROJECT: str,
    CLIENT: str,
    # Single drilling date, or a start/complete pair when drilling spans days
    DATE: str,
    DATE_START: str,
    DATE_COMPLETE: str,
    TIME: str,
    WEATHER: str,
    EQUIPMENT: str,
    DRILLING_METHOD: str,
    LOGGED_BY: str,
    # Final depth of the boring; derived from layers/samples when absent
    TOTAL_DEPTH: float,
    # Ground surface elevation, same length units as depths
    ELEVATION: float,
    # Location as a coordinate pair plus the name of the coordinate system
    COORD_1: float,
    COORD_2: float,
    COORD_SYSTEM: str,
    CONSULTANT_COMPANY: str,
    CONSULTANT_CONTACT: str,
    CONSULTANT_PHONE: str,
    # A bare driller name, kept for older files without the structured columns
    DRILLER: str,
    DRILLER_COMPANY: str,
    DRILLER_NAME: str,
    DRILLER_LICENSE: str,
}

BORINGLOG_DATA_MODEL_GROUNDWATER = {
    GROUNDWATER_DEPTH: float,
    GROUNDWATER_NOTE: str,
}

BORINGLOG_DATA_MODEL_WELL = {
    WELL_TYPE: str,
    # Casing diameter in inches
    WELL_CASING_DIAMETER: float,
    WELL_CASING_MATERIAL: str,
    WELL_SCREEN_TOP: float,
    WELL_SCREEN_BOTTOM: float,
    # Screen slot size in inches
    WELL_SCREEN_SLOT_SIZE: float,
    WELL_FILTER_PACK: str,
    WELL_SEAL_TOP: float,
    WELL_SEAL_BOTTOM: float,
    WELL_SEAL_MATERIAL: str,
}

BORINGLOG_DATA_MODEL_LAYER = {
    DEPTH_TOP: float,
    DEPTH_BOTTOM: float,
    # USCS or extended classification code; dual codes are joined by a hyphen (GP-GM)
    USCS: str,
    DESCRIPTION: str,
    # One of MOISTURE_OPTIONS
    MOISTURE: str,
    # One of ODOR_OPTIONS
    ODOR: str,
    # Photoionization detector reading, ppm
    PID: float,
}

BORINGLOG_DATA_MODEL_SAMPLE = {
    # Point samples use SAMPLE_DEPTH; interval samples use the top/bottom pair
    SAMPLE_DEPTH: float,
    SAMPLE_DEPTH_TOP: float,
    SAMPLE_DEPTH_BOTTOM: float,
    SAMPLE_TYPE: str,
    SAMPLE_ID: str,
    # SPT blow counts for the three 6-inch drive increments
    BLOW_1: int,
    BLOW_2: int,
    BLOW_3: int,
    RECOVERY: float,
}

BORINGLOG_DATA_MODEL = {
    **BORINGLOG_DATA_MODEL_BORING,
    **BORINGLOG_DATA_MODEL_GROUNDWATER,
    **BORINGLOG_DATA_MODEL_WELL,
    **BORINGLOG_DATA_MODEL_LAYER,
    **BORINGLOG_DATA_MODEL_SAMPLE,
}
