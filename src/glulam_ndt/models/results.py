"""
Result models produced by the detectors.

Zones come from the thickness-wise scan; identified layers come from
the depth-wise scan at one cross-section.
"""

from typing import Optional

from pydantic import Field, model_validator

from glulam_ndt.enums import Confidence, Severity
from glulam_ndt.models.base import RecordModel
from glulam_ndt.models.measurement import Sample


class Zone(RecordModel):
    """
    A contiguous run of elevated-TOF readings along the beam.

    Attributes:
        start: Position of the first reading in the zone (inches)
        end: Position of the last reading in the zone (inches)
        points: Readings in the zone, position-ascending
        min_tof: Lowest TOF in the zone
        max_tof: Peak TOF in the zone
        avg_tof: Mean TOF in the zone
        confidence: Confidence grade of the call
        severity: Severity grade of the call
        needs_more_data: Whether coverage is too sparse to bound the defect
        suggested_interval: Recommended re-scan spacing in inches
        elevation_ratio: avg_tof relative to the interior baseline mean
    """

    start: float
    end: float
    points: list[Sample] = Field(..., min_length=1)
    min_tof: float
    max_tof: float
    avg_tof: float
    confidence: Confidence
    severity: Severity
    needs_more_data: bool = False
    suggested_interval: Optional[float] = None
    elevation_ratio: float

    @model_validator(mode="after")
    def _check_bounds(self) -> "Zone":
        if self.start > self.end:
            raise ValueError(f"Zone start {self.start} is after end {self.end}")
        if self.min_tof > self.max_tof:
            raise ValueError(f"Zone min TOF {self.min_tof} exceeds max TOF {self.max_tof}")
        if not self.min_tof <= self.avg_tof <= self.max_tof:
            raise ValueError(
                f"Zone average TOF {self.avg_tof} is outside [{self.min_tof}, {self.max_tof}]"
            )
        return self

    @property
    def span_length(self) -> float:
        """Length of the zone in inches."""
        return self.end - self.start

    @property
    def point_count(self) -> int:
        """Number of readings in the zone."""
        return len(self.points)

    @property
    def tof_pattern(self) -> str:
        """TOF readings across the zone, e.g. '172 → 175'."""
        return " → ".join(f"{p.tof:.0f}" for p in self.points)

    @property
    def positions(self) -> list[float]:
        """Positions of the readings in the zone."""
        return [p.position for p in self.points]

    def __str__(self) -> str:
        """String representation."""
        return (
            f'{self.severity} ({self.confidence} confidence): '
            f'{self.start:.1f}" to {self.end:.1f}"'
        )


class ThicknessScanResult(RecordModel):
    """
    Outcome of the thickness-wise zone detector.

    Attributes:
        zones: Detected zones in position order
        suspicious_threshold: TOF above which a reading is suspicious
        likely_threshold: Peak TOF for a likely (Moderate) delamination
        definite_threshold: Peak TOF for a definite (Severe) delamination
        mean: Interior baseline mean TOF
        std_dev: Interior baseline population standard deviation
        has_delamination: True when at least one zone was found
    """

    zones: list[Zone] = Field(default_factory=list)
    suspicious_threshold: float
    likely_threshold: float
    definite_threshold: float
    mean: float
    std_dev: float
    has_delamination: bool

    @property
    def thresholds(self) -> dict[str, float]:
        """Detection thresholds keyed by name."""
        return {
            "suspicious": self.suspicious_threshold,
            "likely": self.likely_threshold,
            "definite": self.definite_threshold,
        }

    @property
    def zone_count(self) -> int:
        """Number of detected zones."""
        return len(self.zones)


class IdentifiedLayer(RecordModel):
    """
    A depth flagged by the layer locator.

    Attributes:
        depth: Actual depth of the flagged layer (inches)
        display_depth: Displayed probe depth of the flagged slot (inches)
        layer_name: Grid name of the flagged slot
        confidence: Medium or High
        drop_ratio: prev/curr TOF ratio for drop detections
        elevation_ratio: value/neighbour-average ratio for glue-line detections
    """

    depth: float
    display_depth: Optional[float] = None
    layer_name: str
    confidence: Confidence
    drop_ratio: Optional[float] = None
    elevation_ratio: Optional[float] = None

    @property
    def detection(self) -> str:
        """Which pass produced this flag."""
        return "drop" if self.drop_ratio is not None else "glue-line elevation"

    def __str__(self) -> str:
        """String representation."""
        return f'{self.layer_name} at {self.depth}" ({self.confidence} confidence)'


class DepthScanResult(RecordModel):
    """
    Outcome of the depth-wise layer locator.

    Attributes:
        identified_layers: Flagged depths, drop detections first
        has_delamination: True when at least one layer was flagged
    """

    identified_layers: list[IdentifiedLayer] = Field(default_factory=list)
    has_delamination: bool
