"""
glulam-ndt - Ultrasonic delamination analysis for glulam beams.

This package classifies suspected adhesive delamination in glued-laminated
beams from non-destructive time-of-flight scans: a sparse scan along the
beam length and a dense scan across one cross-section.
"""

__version__ = "0.1.0"

from glulam_ndt.config import DepthScanConfig, ThicknessScanConfig, load_config
from glulam_ndt.detection import detect_thickness_zones, locate_layers
from glulam_ndt.enums import BeamLength, Confidence, Severity
from glulam_ndt.errors import (
    AnalysisInputError,
    InsufficientData,
    InsufficientInteriorData,
    InsufficientLayerData,
)
from glulam_ndt.models import (
    LAYER_GRID,
    DepthScanResult,
    IdentifiedLayer,
    LayerSample,
    LayerSlot,
    Sample,
    ThicknessScanResult,
    Zone,
)
from glulam_ndt.parsers import build_layer_values, parse_samples
from glulam_ndt.workflow import BeamInspector, InspectionResult, inspect_files

__all__ = [
    # Detectors
    "detect_thickness_zones",
    "locate_layers",
    # Errors
    "AnalysisInputError",
    "InsufficientData",
    "InsufficientInteriorData",
    "InsufficientLayerData",
    # Models
    "Sample",
    "LayerSample",
    "LayerSlot",
    "LAYER_GRID",
    "Zone",
    "ThicknessScanResult",
    "IdentifiedLayer",
    "DepthScanResult",
    "BeamLength",
    "Confidence",
    "Severity",
    # Settings
    "ThicknessScanConfig",
    "DepthScanConfig",
    "load_config",
    # Input
    "parse_samples",
    "build_layer_values",
    # Workflow
    "BeamInspector",
    "InspectionResult",
    "inspect_files",
]
