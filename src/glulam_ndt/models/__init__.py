"""
Pydantic models for glulam inspection records.

These models cover:
- Raw readings (Sample / LayerSample)
- The fixed depth-scan layer grid
- Detector results (Zone / IdentifiedLayer and their scan results)
"""

from glulam_ndt.enums import BeamLength, Confidence, Severity
from glulam_ndt.models.base import RecordModel
from glulam_ndt.models.grid import (
    GLUE_LINE_PREFIX,
    GLUE_LINES,
    LAYER_GRID,
    LUMBER_LAYERS,
    LayerSlot,
    slot_for_display_depth,
    slot_for_name,
)
from glulam_ndt.models.measurement import LayerSample, Sample
from glulam_ndt.models.results import (
    DepthScanResult,
    IdentifiedLayer,
    ThicknessScanResult,
    Zone,
)

__all__ = [
    "RecordModel",
    "Sample",
    "LayerSample",
    "LayerSlot",
    "LAYER_GRID",
    "GLUE_LINE_PREFIX",
    "LUMBER_LAYERS",
    "GLUE_LINES",
    "slot_for_display_depth",
    "slot_for_name",
    "Zone",
    "ThicknessScanResult",
    "IdentifiedLayer",
    "DepthScanResult",
    "BeamLength",
    "Confidence",
    "Severity",
]
