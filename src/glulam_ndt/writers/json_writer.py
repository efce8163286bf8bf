"""
JSON writer for exporting inspection reports.

Writes the thickness-wise and depth-wise results of an inspection to
JSON files for downstream tools and record keeping.
"""

from __future__ import annotations

import json
import math
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any

from glulam_ndt.models.results import DepthScanResult, ThicknessScanResult
from glulam_ndt.workflow import InspectionResult


class ReportJSONEncoder(json.JSONEncoder):
    """Custom JSON encoder for datetime, Enum, and Path objects."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, Path):
            return str(obj)
        return super().default(obj)


def _finite(value: Any) -> Any:
    """Replace non-finite floats with None so the output stays strict JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_finite(v) for v in value]
    return value


def dumps_report(record: dict) -> str:
    """Serialize a report record to a strict JSON string."""
    return json.dumps(_finite(record), cls=ReportJSONEncoder, indent=2, ensure_ascii=False)


class JSONWriter:
    """
    Writes inspection results to JSON files.

    Produces thickness.json, depth.json (when a depth scan was analyzed)
    and inspection.json holding the merged report.
    """

    def __init__(self, output_dir: str | Path):
        """
        Initialize the JSON writer.

        Args:
            output_dir: Directory for output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def _dump(self, record: dict, filename: str) -> Path:
        output_path = self.output_dir / filename

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(_finite(record), f, cls=ReportJSONEncoder, indent=2, ensure_ascii=False)

        return output_path

    def write_thickness(self, result: ThicknessScanResult) -> Path:
        """
        Write a zone detector result to JSON.

        Args:
            result: The ThicknessScanResult to write

        Returns:
            Path to the written JSON file
        """
        return self._dump(result.to_dict(), "thickness.json")

    def write_depth(self, result: DepthScanResult) -> Path:
        """
        Write a layer locator result to JSON.

        Args:
            result: The DepthScanResult to write

        Returns:
            Path to the written JSON file
        """
        return self._dump(result.to_dict(), "depth.json")

    def write_all(self, result: InspectionResult) -> dict[str, Path]:
        """
        Write all parts of an inspection to JSON files.

        Args:
            result: The InspectionResult from BeamInspector

        Returns:
            Dict mapping report names to written file paths
        """
        paths: dict[str, Path] = {}

        if result.thickness:
            paths["thickness"] = self.write_thickness(result.thickness)

        if result.depth:
            paths["depth"] = self.write_depth(result.depth)

        report = result.to_dict()
        report["generated_at"] = datetime.now(timezone.utc)
        paths["inspection"] = self._dump(report, "inspection.json")

        return paths


def write_inspection_to_json(result: InspectionResult, output_dir: str | Path) -> dict[str, Path]:
    """
    Convenience function to write an inspection to JSON.

    Args:
        result: The InspectionResult from BeamInspector
        output_dir: Directory for output files

    Returns:
        Dict mapping report names to written file paths

    Example:
        result = BeamInspector().inspect(samples, "12ft")
        paths = write_inspection_to_json(result, "/data/reports/beam_A")
        print(f"Wrote report to: {paths['inspection']}")
    """
    writer = JSONWriter(output_dir)
    return writer.write_all(result)
