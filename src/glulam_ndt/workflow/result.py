"""
Inspection result dataclass.

Holds the merged output of the thickness-wise and depth-wise analyses.
"""

from dataclasses import dataclass, field
from typing import Optional

from glulam_ndt.enums import BeamLength
from glulam_ndt.models.results import DepthScanResult, ThicknessScanResult, Zone


@dataclass
class InspectionResult:
    """
    Result of inspecting one beam.

    Attributes:
        beam_length: Nominal beam length inspected
        thickness: Zone detector result (None if it could not run)
        depth: Layer locator result (None if not run)
        selected_zone: 0-based index of the zone the depth scan was taken in
        warnings: Non-fatal issues encountered
        errors: Input shortages that stopped an analysis
    """

    beam_length: BeamLength
    thickness: Optional[ThicknessScanResult] = None
    depth: Optional[DepthScanResult] = None
    selected_zone: Optional[int] = None

    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def has_delamination(self) -> bool:
        """Check if the thickness scan found at least one zone."""
        return self.thickness is not None and self.thickness.has_delamination

    @property
    def has_errors(self) -> bool:
        """Check if there were any errors."""
        return len(self.errors) > 0

    @property
    def zone(self) -> Optional[Zone]:
        """The zone the depth scan was taken in."""
        if self.thickness is None or self.selected_zone is None:
            return None
        return self.thickness.zones[self.selected_zone]

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary."""
        return {
            "beam_length": self.beam_length.value,
            "beam_length_inches": self.beam_length.inches,
            "has_delamination": self.has_delamination,
            "thickness": self.thickness.to_dict() if self.thickness else None,
            "selected_zone": self.selected_zone,
            "depth": self.depth.to_dict() if self.depth else None,
            "warnings": list(self.warnings),
            "errors": list(self.errors),
        }

    def summary(self) -> str:
        """Generate a human-readable report."""
        length = self.beam_length
        lines = ["Inspection Summary:"]
        lines.append(f"  Beam: {length.value} ({length.inches} inches)")

        if self.thickness is None:
            lines.append("  Thickness scan: Not analyzed")
        else:
            t = self.thickness
            lines.append(f"  Baseline TOF: {t.mean:.0f} μs (± {t.std_dev:.0f} μs)")
            lines.append(
                f"  Detection thresholds: Suspicious >{t.suspicious_threshold:g}μs, "
                f"Likely >{t.likely_threshold:g}μs, Definite >{t.definite_threshold:g}μs"
            )

            if t.has_delamination:
                lines.append(f"\nDelamination Detected - {t.zone_count} Zone(s) Found")
                for idx, zone in enumerate(t.zones):
                    lines.extend(_zone_lines(idx, zone, t.mean))
            else:
                lines.append("\nNo Delamination Detected")
                lines.append("  All measurements are within normal range.")

        if self.depth is not None:
            if self.depth.has_delamination:
                zone_label = f" (Zone {self.selected_zone + 1})" if self.selected_zone is not None else ""
                lines.append(f"\nLayer Analysis{zone_label}:")
                for layer in self.depth.identified_layers:
                    lines.append(f"  Delamination at: {layer.layer_name}")
                    lines.append(f'    Depth: {layer.depth}" from surface')
                    lines.append(f"    Confidence: {layer.confidence}")
                    if layer.drop_ratio is not None:
                        lines.append(f"    TOF drop ratio: {layer.drop_ratio:.2f}")
                    if layer.elevation_ratio is not None:
                        lines.append(f"    Glue-line elevation ratio: {layer.elevation_ratio:.2f}")
            else:
                lines.append("\nLayer Analysis: no layer identified")

        if self.warnings:
            lines.append(f"\nWarnings ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  - {w}")

        if self.errors:
            lines.append(f"\nErrors ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  - {e}")

        return "\n".join(lines)


def _zone_lines(idx: int, zone: Zone, baseline: float) -> list[str]:
    plural = "s" if zone.point_count > 1 else ""
    lines = [
        f"  Zone {idx + 1} - {zone.severity} Delamination ({zone.confidence} Confidence)",
        f'    Location: {zone.start:.1f}" to {zone.end:.1f}" from beam end',
        f'    Span: {zone.span_length:.1f}" with {zone.point_count} measurement{plural}',
        f"    TOF Range: {zone.min_tof:.0f} - {zone.max_tof:.0f} μs (Peak: {zone.max_tof:.0f} μs)",
        f"    Average in zone: {zone.avg_tof:.0f} μs (Baseline: {baseline:.0f} μs)",
        f"    Pattern: {zone.tof_pattern} μs",
        "    At positions: " + ", ".join(f'{p:.0f}"' for p in zone.positions),
    ]
    if zone.needs_more_data:
        lines.append(
            f"    Recommendation: Take additional measurements at "
            f'{zone.suggested_interval:g}" intervals to better map the full delamination extent.'
        )
    return lines
