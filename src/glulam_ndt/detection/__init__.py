"""
Delamination detectors.

- thickness.py: zone detector for the scan along the beam length
- layers.py: layer locator for the scan across one cross-section
- classification.py: ordered severity rules and coverage check for zones
"""

from .classification import SEVERITY_RULES, SeverityRule, classify_zone, needs_more_data
from .layers import locate_layers
from .thickness import compute_baseline, detect_thickness_zones, is_interior

__all__ = [
    "detect_thickness_zones",
    "locate_layers",
    "compute_baseline",
    "is_interior",
    "classify_zone",
    "needs_more_data",
    "SeverityRule",
    "SEVERITY_RULES",
]
