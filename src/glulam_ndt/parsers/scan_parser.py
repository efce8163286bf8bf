"""
Parsers for scan readings.

Turns raw operator input into validated readings for the detectors:
- (position, TOF) rows from the thickness-wise scan
- depth -> TOF readings from the depth-wise scan on the layer grid

Invalid entries (blank or non-numeric) are discarded, never repaired.
"""

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

import numpy as np
from numpy.typing import NDArray

from glulam_ndt.enums import BeamLength
from glulam_ndt.models.grid import LAYER_GRID, LayerSlot, slot_for_display_depth, slot_for_name
from glulam_ndt.models.measurement import LayerSample, Sample

# Fields on a data line may be separated by commas, semicolons, tabs or spaces
FIELD_SPLIT = re.compile(r"[,;\s]+")


def _to_float(value: Any) -> Optional[float]:
    """Convert a raw field to a finite float, or None if unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_samples(rows: Iterable[Any]) -> list[Sample]:
    """
    Build samples from raw thickness-scan rows.

    Each row is either a (position, tof) pair or a mapping with
    "position" and "tof" keys. Rows with a missing or non-numeric field
    are dropped.

    Args:
        rows: Raw rows as entered

    Returns:
        Valid samples in input order
    """
    samples = []
    for row in rows:
        if isinstance(row, Mapping):
            position, tof = row.get("position"), row.get("tof")
        elif isinstance(row, str):
            continue
        else:
            try:
                position, tof = row
            except (TypeError, ValueError):
                continue

        position = _to_float(position)
        tof = _to_float(tof)
        if position is None or tof is None:
            continue

        samples.append(Sample(position=position, tof=tof))

    return samples


def _resolve_slot(key: Union[str, float]) -> Optional[LayerSlot]:
    """Find a grid slot from a display depth or a layer name."""
    if isinstance(key, str):
        slot = slot_for_name(key)
        if slot is not None:
            return slot
    depth = _to_float(key.rstrip('"') if isinstance(key, str) else key)
    if depth is None:
        return None
    return slot_for_display_depth(depth)


def build_layer_values(readings: Mapping[Union[str, float], Any]) -> list[LayerSample]:
    """
    Reduce depth-scan readings to the filled grid slots.

    Readings are keyed by display depth (1.4 ... 7.0) or by layer name
    (Mid-L1, GL1, ...). Slots with a blank, non-numeric or zero reading
    count as not filled.

    Args:
        readings: Raw readings keyed by grid position

    Returns:
        Filled slots as LayerSample records, in grid order

    Raises:
        ValueError: If a key does not name a grid position
    """
    by_index: dict[int, float] = {}

    for key, raw in readings.items():
        slot = _resolve_slot(key)
        if slot is None:
            raise ValueError(f"Unknown layer position: {key!r}")

        value = _to_float(raw)
        if value is None or value == 0:
            continue
        by_index[slot.index] = value

    return [
        LayerSample(
            display_depth=slot.display_depth,
            actual_depth=slot.actual_depth,
            layer_name=slot.layer_name,
            value=by_index[slot.index],
        )
        for slot in LAYER_GRID
        if slot.index in by_index
    ]


@dataclass
class ThicknessScanData:
    """
    Parsed thickness-wise scan file.

    Attributes:
        file_path: Source file
        beam_length: Beam length from the header, if given
        samples: Valid readings in file order
        skipped: Data lines that could not be read
    """

    file_path: str
    beam_length: Optional[BeamLength] = None
    samples: list[Sample] = field(default_factory=list)
    skipped: int = 0

    @property
    def num_points(self) -> int:
        """Number of valid readings."""
        return len(self.samples)

    @property
    def position_range(self) -> tuple[float, float]:
        """Position range (min, max)."""
        if not self.samples:
            return (0.0, 0.0)
        positions = [s.position for s in self.samples]
        return (min(positions), max(positions))

    def to_numpy(self) -> dict[str, NDArray]:
        """Convert readings to numpy arrays."""
        return {
            "position": np.array([s.position for s in self.samples], dtype=float),
            "tof": np.array([s.tof for s in self.samples], dtype=float),
        }


@dataclass
class DepthScanData:
    """
    Parsed depth-wise scan file.

    Attributes:
        file_path: Source file
        zone_index: Zone the cross-section was taken in (1-based), if given
        layer_values: Filled grid slots in grid order
        skipped: Data lines that could not be read
    """

    file_path: str
    zone_index: Optional[int] = None
    layer_values: list[LayerSample] = field(default_factory=list)
    skipped: int = 0

    @property
    def num_filled(self) -> int:
        """Number of filled grid slots."""
        return len(self.layer_values)


class _ScanFileParser(ABC):
    """Shared file handling for the scan parsers."""

    def parse(self, file_path: str | Path):
        """
        Parse a scan file.

        Args:
            file_path: Path to the text/CSV file

        Returns:
            Parsed scan data

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If the file content is invalid
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()

        return self.parse_content(content, str(file_path))

    @abstractmethod
    def parse_content(self, content: str, file_path: str = ""):
        """Parse scan data from string content."""
        pass

    @staticmethod
    def _split_lines(content: str) -> tuple[list[str], list[str]]:
        """Separate '#' header lines from data lines."""
        header_lines = []
        data_lines = []

        for line in content.strip().splitlines():
            stripped = line.strip()

            if not stripped:
                continue

            if stripped.startswith("#"):
                header_lines.append(stripped[1:].strip())
            else:
                data_lines.append(stripped)

        return header_lines, data_lines


class ThicknessScanParser(_ScanFileParser):
    """
    Parser for thickness-wise scan files.

    Format:
    - Comment lines starting with #, optionally "# Beam length: 8ft"
    - An optional header row (e.g. "position,tof")
    - One reading per line: position and TOF, comma or space separated

    Usage:
        parser = ThicknessScanParser()
        data = parser.parse("beam_A_thickness.csv")

        print(f"{data.num_points} readings over {data.position_range}")
    """

    PATTERNS = {
        "beam_length": re.compile(r"Beam\s+length:\s*(8|12)\s*(?:ft|')", re.IGNORECASE),
    }

    def parse_content(self, content: str, file_path: str = "") -> ThicknessScanData:
        """
        Parse thickness-scan readings from string content.

        Args:
            content: File content as string
            file_path: Optional file path for reference

        Returns:
            ThicknessScanData with valid readings
        """
        header_lines, data_lines = self._split_lines(content)
        result = ThicknessScanData(file_path=file_path)

        match = self.PATTERNS["beam_length"].search("\n".join(header_lines))
        if match:
            result.beam_length = BeamLength(f"{match.group(1)}ft")

        rows = []
        for i, line in enumerate(data_lines):
            parts = FIELD_SPLIT.split(line)
            if i == 0 and all(_to_float(part) is None for part in parts):
                # Header row
                continue
            if len(parts) < 2:
                result.skipped += 1
                continue
            rows.append((parts[0], parts[1]))

        result.samples = parse_samples(rows)
        result.skipped += len(rows) - len(result.samples)
        return result


class DepthScanParser(_ScanFileParser):
    """
    Parser for depth-wise scan files.

    Format:
    - Comment lines starting with #, optionally "# Zone: 2"
    - One reading per line: display depth (1.4 ... 7.0) or layer name
      (Mid-L1, GL1, ...) followed by the TOF value

    Usage:
        parser = DepthScanParser()
        data = parser.parse("beam_A_zone1_depth.txt")

        result = locate_layers(data.layer_values)
    """

    PATTERNS = {
        "zone": re.compile(r"Zone:?\s*(\d+)", re.IGNORECASE),
    }

    def parse_content(self, content: str, file_path: str = "") -> DepthScanData:
        """
        Parse depth-scan readings from string content.

        Args:
            content: File content as string
            file_path: Optional file path for reference

        Returns:
            DepthScanData with filled grid slots

        Raises:
            ValueError: If a line names a position that is not on the grid
        """
        header_lines, data_lines = self._split_lines(content)
        result = DepthScanData(file_path=file_path)

        match = self.PATTERNS["zone"].search("\n".join(header_lines))
        if match:
            result.zone_index = int(match.group(1))

        readings: dict[str, str] = {}
        for i, line in enumerate(data_lines):
            parts = FIELD_SPLIT.split(line)
            if len(parts) < 2:
                result.skipped += 1
                continue

            key, raw = parts[0], parts[1]
            if _resolve_slot(key) is None:
                if _to_float(key.rstrip('"')) is None:
                    # Column header row such as "depth,tof", or free text
                    if i > 0:
                        result.skipped += 1
                    continue
                raise ValueError(f"Unknown layer position {key!r} in {file_path or 'input'}")
            readings[key] = raw

        result.layer_values = build_layer_values(readings)
        return result
