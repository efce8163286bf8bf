"""
Depth-wise layer locator.

Pins a suspected delamination to a specific layer or glue line from a
dense scan across one cross-section. Two passes run over the filled
grid slots: a drop pass that looks for a sharp TOF decrease from one
slot to the next, and a glue-line pass that looks for a glue-line
reading standing well above both of its neighbours.
"""

import logging
from typing import Optional, Sequence

from glulam_ndt.config import DEFAULT_DEPTH_CONFIG, DepthScanConfig
from glulam_ndt.enums import Confidence
from glulam_ndt.errors import InsufficientLayerData
from glulam_ndt.models.measurement import LayerSample
from glulam_ndt.models.results import DepthScanResult, IdentifiedLayer

logger = logging.getLogger(__name__)


def _find_drops(
    layer_values: Sequence[LayerSample],
    config: DepthScanConfig,
) -> list[IdentifiedLayer]:
    """Flag the elevated side of each confirmed TOF drop."""
    found: list[IdentifiedLayer] = []
    values = [layer.value for layer in layer_values]

    for i in range(1, len(values)):
        prev = values[i - 1]
        curr = values[i]

        if not prev > curr * config.drop_ratio:
            continue

        # The whole preceding run must sit above the drop, not just one neighbour
        avg_before = sum(values[:i]) / i
        if not avg_before > curr * config.confirm_ratio:
            logger.debug(
                f"Unconfirmed drop at {layer_values[i].layer_name}: "
                f"avg before {avg_before:.1f} vs {curr:.1f}"
            )
            continue

        flagged = layer_values[i - 1]
        found.append(
            IdentifiedLayer(
                depth=flagged.actual_depth,
                display_depth=flagged.display_depth,
                layer_name=flagged.layer_name,
                confidence=(
                    Confidence.HIGH if prev > curr * config.high_drop_ratio else Confidence.MEDIUM
                ),
                drop_ratio=round(prev / curr, config.ratio_decimals),
            )
        )

    return found


def _find_glue_line_elevations(
    layer_values: Sequence[LayerSample],
    config: DepthScanConfig,
    flagged_depths: set[float],
) -> list[IdentifiedLayer]:
    """Flag glue lines reading well above the average of their neighbours."""
    found: list[IdentifiedLayer] = []

    for idx, layer in enumerate(layer_values):
        if not layer.is_glue_line:
            continue
        if idx == 0 or idx == len(layer_values) - 1:
            continue

        before = layer_values[idx - 1].value
        after = layer_values[idx + 1].value
        avg_adjacent = (before + after) / 2

        if not layer.value > avg_adjacent * config.glue_line_ratio:
            continue
        if layer.actual_depth in flagged_depths:
            continue

        flagged_depths.add(layer.actual_depth)
        found.append(
            IdentifiedLayer(
                depth=layer.actual_depth,
                display_depth=layer.display_depth,
                layer_name=layer.layer_name,
                confidence=Confidence.MEDIUM,
                elevation_ratio=round(layer.value / avg_adjacent, config.ratio_decimals),
            )
        )

    return found


def locate_layers(
    layer_values: Sequence[LayerSample],
    config: Optional[DepthScanConfig] = None,
) -> DepthScanResult:
    """
    Identify the layers or glue lines showing a delamination signature.

    Args:
        layer_values: Filled grid slots in grid order (ascending display depth)
        config: Detector settings (defaults to the fixed domain constants)

    Returns:
        DepthScanResult with drop detections first, then glue-line
        elevations, each in grid order and at most one entry per depth

    Raises:
        InsufficientLayerData: Fewer than the minimum number of filled slots
    """
    config = config or DEFAULT_DEPTH_CONFIG
    layer_values = list(layer_values)

    if len(layer_values) < config.min_filled_slots:
        raise InsufficientLayerData(
            found=len(layer_values), required=config.min_filled_slots
        )

    identified: list[IdentifiedLayer] = []
    flagged_depths: set[float] = set()

    for layer in _find_drops(layer_values, config):
        identified.append(layer)
        flagged_depths.add(layer.depth)

    identified.extend(_find_glue_line_elevations(layer_values, config, flagged_depths))

    logger.debug(f"Identified {len(identified)} layer(s) from {len(layer_values)} readings")

    return DepthScanResult(
        identified_layers=identified,
        has_delamination=len(identified) > 0,
    )
