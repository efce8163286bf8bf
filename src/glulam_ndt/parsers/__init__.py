"""
Parsers for scan readings.

Provides parsers for:
- Thickness-wise scan files and raw (position, TOF) rows
- Depth-wise scan files and raw grid readings
"""

from glulam_ndt.parsers.scan_parser import (
    DepthScanData,
    DepthScanParser,
    ThicknessScanData,
    ThicknessScanParser,
    build_layer_values,
    parse_samples,
)

__all__ = [
    "ThicknessScanParser",
    "ThicknessScanData",
    "DepthScanParser",
    "DepthScanData",
    "parse_samples",
    "build_layer_values",
]
