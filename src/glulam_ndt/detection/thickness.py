"""
Thickness-wise zone detector.

Segments the beam axis into contiguous zones of elevated time-of-flight
from a sparse scan along the beam length. Readings within the edge
margin of either beam end are unreliable and never take part.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

import numpy as np

from glulam_ndt.config import DEFAULT_THICKNESS_CONFIG, ThicknessScanConfig
from glulam_ndt.detection.classification import classify_zone, needs_more_data
from glulam_ndt.enums import BeamLength
from glulam_ndt.errors import InsufficientData, InsufficientInteriorData
from glulam_ndt.models.measurement import Sample
from glulam_ndt.models.results import ThicknessScanResult, Zone

logger = logging.getLogger(__name__)

SampleInput = Union[Sample, tuple[float, float]]


@dataclass
class _OpenZone:
    """Zone being grown during the scan."""

    points: list[Sample] = field(default_factory=list)

    @property
    def end(self) -> float:
        return self.points[-1].position

    def add(self, point: Sample) -> None:
        self.points.append(point)


def _as_sample(item: SampleInput) -> Sample:
    if isinstance(item, Sample):
        return item
    position, tof = item
    return Sample(position=position, tof=tof)


def _beam_inches(beam_length: Union[BeamLength, float]) -> float:
    if isinstance(beam_length, BeamLength):
        return float(beam_length.inches)
    if isinstance(beam_length, str):
        return float(BeamLength(beam_length).inches)
    return float(beam_length)


def is_interior(position: float, beam_length_inches: float, edge_margin: float) -> bool:
    """Check if a position lies strictly inside the beam-end margins."""
    return edge_margin < position < beam_length_inches - edge_margin


def compute_baseline(samples: list[Sample]) -> tuple[float, float]:
    """
    Compute the healthy-bond baseline over a set of readings.

    Returns:
        Tuple of (mean, population standard deviation) of TOF
    """
    tofs = np.array([s.tof for s in samples], dtype=float)
    return float(np.mean(tofs)), float(np.std(tofs))


def _close_zone(
    open_zone: _OpenZone,
    baseline_mean: float,
    config: ThicknessScanConfig,
) -> Zone:
    points = open_zone.points
    tofs = [p.tof for p in points]
    start = points[0].position
    end = points[-1].position
    min_tof = min(tofs)
    max_tof = max(tofs)
    # fsum can still land one ulp outside the range on repeated decimals
    avg_tof = min(max(math.fsum(tofs) / len(tofs), min_tof), max_tof)

    more_data, interval = needs_more_data(end - start, len(points), config)
    confidence, severity = classify_zone(max_tof, avg_tof, len(points), config)

    return Zone(
        start=start,
        end=end,
        points=list(points),
        min_tof=min_tof,
        max_tof=max_tof,
        avg_tof=avg_tof,
        confidence=confidence,
        severity=severity,
        needs_more_data=more_data,
        suggested_interval=interval,
        elevation_ratio=avg_tof / baseline_mean if baseline_mean else math.inf,
    )


def detect_thickness_zones(
    samples: Iterable[SampleInput],
    beam_length_inches: Union[BeamLength, float],
    config: Optional[ThicknessScanConfig] = None,
) -> ThicknessScanResult:
    """
    Detect elevated-TOF zones along the beam.

    A reading is elevated when its TOF exceeds the suspicious threshold
    or sits more than the baseline offset above the interior mean.
    Elevated interior readings no further apart than the merge gap form
    one zone; a non-elevated interior reading closes the open zone.
    Edge readings are skipped without opening, extending or closing a zone.

    Args:
        samples: Valid (position, TOF) readings in any order
        beam_length_inches: Nominal beam length (96 or 144 in, or a BeamLength)
        config: Detector settings (defaults to the fixed domain constants)

    Returns:
        ThicknessScanResult with zones in position order

    Raises:
        InsufficientData: Fewer than the minimum number of readings
        InsufficientInteriorData: Too few readings away from the beam ends
    """
    config = config or DEFAULT_THICKNESS_CONFIG
    length = _beam_inches(beam_length_inches)
    readings = sorted((_as_sample(s) for s in samples), key=lambda s: s.position)

    if len(readings) < config.min_samples:
        raise InsufficientData(found=len(readings), required=config.min_samples)

    interior = [s for s in readings if is_interior(s.position, length, config.edge_margin)]
    if len(interior) < config.min_interior_samples:
        raise InsufficientInteriorData(
            found=len(interior), required=config.min_interior_samples
        )

    mean, std_dev = compute_baseline(interior)
    logger.debug(
        f"Baseline over {len(interior)} interior readings: "
        f"mean={mean:.2f} μs, std={std_dev:.2f} μs"
    )

    elevated_above = mean + config.baseline_offset
    zones: list[Zone] = []
    current: Optional[_OpenZone] = None

    for point in readings:
        if not is_interior(point.position, length, config.edge_margin):
            continue

        elevated = point.tof > config.suspicious_threshold or point.tof > elevated_above

        if not elevated:
            if current is not None:
                zones.append(_close_zone(current, mean, config))
            current = None
            continue

        if current is None:
            current = _OpenZone(points=[point])
        elif point.position - current.end <= config.merge_gap:
            current.add(point)
        else:
            zones.append(_close_zone(current, mean, config))
            current = _OpenZone(points=[point])

    if current is not None:
        zones.append(_close_zone(current, mean, config))

    logger.debug(f"Detected {len(zones)} zone(s) over {length:g} in beam")

    return ThicknessScanResult(
        zones=zones,
        suspicious_threshold=config.suspicious_threshold,
        likely_threshold=config.likely_threshold,
        definite_threshold=config.definite_threshold,
        mean=mean,
        std_dev=std_dev,
        has_delamination=len(zones) > 0,
    )
