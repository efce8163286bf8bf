"""
Workflow module for beam inspection.

Module structure:
- result.py: InspectionResult dataclass and text report
- inspector.py: BeamInspector orchestrator
"""

from typing import Optional, Union

from glulam_ndt.config import DepthScanConfig, ThicknessScanConfig
from glulam_ndt.enums import BeamLength

from .inspector import BeamInspector
from .result import InspectionResult

__all__ = [
    "BeamInspector",
    "InspectionResult",
    "inspect_files",
]


def inspect_files(
    thickness_path: str,
    beam_length: Optional[Union[BeamLength, str]] = None,
    depth_path: Optional[str] = None,
    zone_index: Optional[int] = None,
    thickness_config: Optional[ThicknessScanConfig] = None,
    depth_config: Optional[DepthScanConfig] = None,
) -> InspectionResult:
    """
    Convenience function to inspect a beam from scan files.

    Args:
        thickness_path: Thickness-wise scan file
        beam_length: Beam length; falls back to the file header
        depth_path: Depth-wise scan file (optional)
        zone_index: 0-based zone for the depth scan; falls back to the
            file header, then to the first zone
        thickness_config: Zone detector settings
        depth_config: Layer locator settings

    Returns:
        InspectionResult with both analyses merged

    Raises:
        ValueError: If no beam length is given or found in the file

    Example:
        result = inspect_files("beam_A.csv", "12ft", depth_path="beam_A_zone1.txt")
        print(result.summary())
    """
    from glulam_ndt.parsers import DepthScanParser, ThicknessScanParser

    thickness = ThicknessScanParser().parse(thickness_path)
    length = beam_length or thickness.beam_length
    if length is None:
        raise ValueError(
            f"Beam length not given and not found in {thickness_path} "
            "(add a '# Beam length: 8ft' header)"
        )

    layer_values = None
    if depth_path:
        depth = DepthScanParser().parse(depth_path)
        layer_values = depth.layer_values
        if zone_index is None and depth.zone_index is not None:
            zone_index = depth.zone_index - 1

    inspector = BeamInspector(thickness_config, depth_config)
    return inspector.inspect(
        thickness.samples, length, layer_values=layer_values, zone_index=zone_index
    )
