"""
Beam inspector for running both analyses in sequence.

The main orchestrator for an inspection: the thickness-wise scan is
analyzed first, and the depth-wise scan is only analyzed when at least
one zone was found to take it in.
"""

import logging
from typing import Iterable, Optional, Sequence, Union

from glulam_ndt.config import DepthScanConfig, ThicknessScanConfig, resolve_configs
from glulam_ndt.detection import detect_thickness_zones, locate_layers
from glulam_ndt.enums import BeamLength
from glulam_ndt.errors import AnalysisInputError
from glulam_ndt.models.measurement import LayerSample, Sample

from .result import InspectionResult

logger = logging.getLogger(__name__)


class BeamInspector:
    """
    Runs the zone detector and, for a chosen zone, the layer locator.

    Workflow:
    1. Thickness-wise readings → zones along the beam
    2. If zones were found and depth readings are given → layers at the
       cross-section taken in the selected zone

    Example:
        inspector = BeamInspector()
        result = inspector.inspect(samples, BeamLength.TWELVE_FT, layer_values)

        if result.has_delamination:
            print(result.summary())
    """

    def __init__(
        self,
        thickness_config: Optional[ThicknessScanConfig] = None,
        depth_config: Optional[DepthScanConfig] = None,
    ):
        """
        Initialize the inspector.

        Args:
            thickness_config: Zone detector settings (defaults if None)
            depth_config: Layer locator settings (defaults if None)
        """
        self.thickness_config, self.depth_config = resolve_configs(
            thickness_config, depth_config
        )

    def inspect(
        self,
        samples: Iterable[Sample],
        beam_length: Union[BeamLength, str, int],
        layer_values: Optional[Sequence[LayerSample]] = None,
        zone_index: Optional[int] = None,
    ) -> InspectionResult:
        """
        Inspect one beam.

        Input shortages are recorded on the result rather than raised,
        so the caller can report them and ask for more readings.

        Args:
            samples: Thickness-wise readings
            beam_length: BeamLength, its value ("8ft"/"12ft") or inches (96/144)
            layer_values: Filled depth-scan grid slots (optional)
            zone_index: 0-based zone the depth scan was taken in (defaults to the first)

        Returns:
            InspectionResult with both analyses merged
        """
        length = _as_beam_length(beam_length)
        result = InspectionResult(beam_length=length)

        try:
            result.thickness = detect_thickness_zones(
                samples, length.inches, config=self.thickness_config
            )
        except AnalysisInputError as e:
            logger.info(f"Thickness analysis not run: {e}")
            result.errors.append(str(e))
            return result

        logger.info(
            f"Thickness scan: {result.thickness.zone_count} zone(s) on {length.value} beam"
        )

        if layer_values is None:
            return result

        if not result.thickness.has_delamination:
            result.warnings.append(
                "Depth-scan readings ignored: no delamination zone to locate layers in"
            )
            return result

        selected = 0 if zone_index is None else zone_index
        if not 0 <= selected < result.thickness.zone_count:
            result.errors.append(
                f"Zone {selected + 1} does not exist "
                f"({result.thickness.zone_count} zone(s) detected)"
            )
            return result
        result.selected_zone = selected

        try:
            result.depth = locate_layers(layer_values, config=self.depth_config)
        except AnalysisInputError as e:
            logger.info(f"Layer analysis not run: {e}")
            result.errors.append(str(e))
            return result

        logger.info(
            f"Depth scan in zone {selected + 1}: "
            f"{len(result.depth.identified_layers)} layer(s) identified"
        )
        return result


def _as_beam_length(value: Union[BeamLength, str, int]) -> BeamLength:
    if isinstance(value, BeamLength):
        return value
    if isinstance(value, str):
        return BeamLength(value)
    return BeamLength.from_inches(value)
