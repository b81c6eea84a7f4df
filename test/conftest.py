# SPDX-License-Identifier: GPL-3.0-or-later

# Copyright (C) 2026 Darkmine Pty Ltd

from pathlib import Path
import sys

import pytest


ROOT = Path(__file__).resolve().parents[1]
PYTHON_SRC_PATH = ROOT / "python" / "src"

if str(PYTHON_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(PYTHON_SRC_PATH))


@pytest.fixture
def spt_document():
    """One sand layer, one SPT sample and a water level in a 10 ft boring."""
    return {
        "boring": {"id": "B-7", "totalDepth": 10},
        "layers": [{"depthTop": 0, "depthBottom": 3.5, "uscs": "SM"}],
        "samples": [{"depth": 2, "type": "SPT", "id": "S-1", "blows": [4, 5, 6]}],
        "groundwater": {"depth": 3},
    }
