"""
Shared fixtures for glulam-ndt tests.
"""

import pytest

from glulam_ndt.models import LAYER_GRID
from glulam_ndt.parsers import build_layer_values


def _grid_values(values):
    depths = [slot.display_depth for slot in LAYER_GRID]
    return build_layer_values(dict(zip(depths, values)))


@pytest.fixture
def severe_scan():
    """Thickness scan with one severe zone between 30" and 40"."""
    return [(5, 120), (20, 130), (30, 172), (40, 175), (50, 128), (130, 131)]


@pytest.fixture
def healthy_scan():
    """Thickness scan with no elevated readings."""
    return [(20, 130), (40, 131), (60, 129)]


@pytest.fixture
def glue_line_values():
    """Depth scan where GL1 stands well above its neighbours."""
    return _grid_values([80, 130, 110, 108, 110, 108, 110, 108, 110])
