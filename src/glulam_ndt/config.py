"""
Detector settings.

The defaults are the fixed domain constants derived from empirical
glulam beam data. They are not adaptive; overriding them is meant for
calibration studies, not routine inspection.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)


class ThicknessScanConfig(BaseModel):
    """
    Settings for the thickness-wise zone detector.

    Attributes:
        min_samples: Minimum valid readings before analysis runs
        min_interior_samples: Minimum readings away from the beam ends
        edge_margin: Distance from each beam end excluded from analysis (in)
        merge_gap: Largest gap between elevated readings kept in one zone (in)
        suspicious_threshold: TOF above which a reading is elevated (μs)
        likely_threshold: Peak TOF graded Moderate (μs)
        definite_threshold: Peak TOF graded Severe (μs)
        baseline_offset: TOF above the interior mean that counts as elevated (μs)
        sparse_max_points: Zones with at most this many points are sparse
        sparse_max_span: Sparse zones wider than this need more data (in)
        wide_min_span: Zones wider than this are wide (in)
        wide_min_points: Wide zones with fewer points need more data
        suggested_interval: Re-scan spacing recommended for under-sampled zones (in)
        mild_min_points: Minimum points for a Mild grade
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_samples: int = Field(default=3, ge=1)
    min_interior_samples: int = Field(default=3, ge=1)
    edge_margin: float = Field(default=10.0, ge=0)
    merge_gap: float = Field(default=20.0, ge=0)
    suspicious_threshold: float = Field(default=140.0, gt=0)
    likely_threshold: float = Field(default=150.0, gt=0)
    definite_threshold: float = Field(default=170.0, gt=0)
    baseline_offset: float = Field(default=10.0, ge=0)
    sparse_max_points: int = Field(default=2, ge=1)
    sparse_max_span: float = Field(default=6.0, ge=0)
    wide_min_span: float = Field(default=20.0, ge=0)
    wide_min_points: int = Field(default=6, ge=1)
    suggested_interval: float = Field(default=2.0, gt=0)
    mild_min_points: int = Field(default=2, ge=1)

    @model_validator(mode="after")
    def _check_threshold_order(self) -> "ThicknessScanConfig":
        if not (
            self.suspicious_threshold <= self.likely_threshold <= self.definite_threshold
        ):
            raise ValueError(
                "Thresholds must satisfy suspicious <= likely <= definite, got "
                f"{self.suspicious_threshold}/{self.likely_threshold}/{self.definite_threshold}"
            )
        return self


class DepthScanConfig(BaseModel):
    """
    Settings for the depth-wise layer locator.

    Attributes:
        min_filled_slots: Minimum filled grid slots before analysis runs
        drop_ratio: prev/curr ratio that makes a drop candidate
        confirm_ratio: Preceding-run average / curr ratio that confirms a drop
        high_drop_ratio: prev/curr ratio graded High confidence
        glue_line_ratio: Glue-line value / neighbour average that flags elevation
        ratio_decimals: Decimal places kept on reported ratios
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_filled_slots: int = Field(default=5, ge=2)
    drop_ratio: float = Field(default=1.2, gt=1)
    confirm_ratio: float = Field(default=1.15, gt=1)
    high_drop_ratio: float = Field(default=1.3, gt=1)
    glue_line_ratio: float = Field(default=1.3, gt=1)
    ratio_decimals: int = Field(default=2, ge=0)


DEFAULT_THICKNESS_CONFIG = ThicknessScanConfig()
DEFAULT_DEPTH_CONFIG = DepthScanConfig()


def load_config(
    path: str | Path,
) -> tuple[ThicknessScanConfig, DepthScanConfig]:
    """
    Load detector settings from a JSON file.

    The file may hold a "thickness" and/or a "depth" object; missing
    sections and keys keep their defaults.

    Args:
        path: Path to the JSON settings file

    Returns:
        Tuple of (ThicknessScanConfig, DepthScanConfig)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid JSON or has unknown keys
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, "r") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid settings file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Settings file {path} must hold a JSON object")

    unknown = set(raw) - {"thickness", "depth"}
    if unknown:
        raise ValueError(f"Unknown settings sections: {sorted(unknown)}")

    thickness = ThicknessScanConfig(**raw.get("thickness", {}))
    depth = DepthScanConfig(**raw.get("depth", {}))

    logger.debug(f"Loaded detector settings from {path}")
    return thickness, depth


def resolve_configs(
    thickness: Optional[ThicknessScanConfig] = None,
    depth: Optional[DepthScanConfig] = None,
) -> tuple[ThicknessScanConfig, DepthScanConfig]:
    """Fill in default settings where none were given."""
    return (
        thickness if thickness is not None else DEFAULT_THICKNESS_CONFIG,
        depth if depth is not None else DEFAULT_DEPTH_CONFIG,
    )
