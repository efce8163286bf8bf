"""
Tests for the inspection workflow and report export.
"""

import json

import pytest

from glulam_ndt.enums import BeamLength
from glulam_ndt.parsers import parse_samples
from glulam_ndt.workflow import BeamInspector, InspectionResult, inspect_files
from glulam_ndt.writers import JSONWriter, dumps_report, write_inspection_to_json


class TestBeamInspector:
    """Tests for the BeamInspector workflow."""

    def test_thickness_only(self, severe_scan):
        """Test an inspection without a depth scan."""
        result = BeamInspector().inspect(parse_samples(severe_scan), BeamLength.TWELVE_FT)

        assert result.has_delamination
        assert result.thickness.zone_count == 1
        assert result.depth is None
        assert result.selected_zone is None
        assert not result.has_errors

    def test_with_depth_scan(self, severe_scan, glue_line_values):
        """Test that the depth scan is analyzed in the first zone by default."""
        result = BeamInspector().inspect(
            parse_samples(severe_scan), "12ft", layer_values=glue_line_values
        )

        assert result.selected_zone == 0
        assert result.zone.start == 30
        assert result.depth.has_delamination
        assert result.depth.identified_layers[0].layer_name == "GL1"

    def test_beam_length_in_inches(self, severe_scan):
        result = BeamInspector().inspect(parse_samples(severe_scan), 144)
        assert result.beam_length is BeamLength.TWELVE_FT

    def test_depth_scan_without_zones(self, healthy_scan, glue_line_values):
        """Test that depth readings are ignored when no zone was found."""
        result = BeamInspector().inspect(
            parse_samples(healthy_scan), BeamLength.TWELVE_FT, layer_values=glue_line_values
        )

        assert not result.has_delamination
        assert result.depth is None
        assert len(result.warnings) == 1

    def test_insufficient_data_recorded(self):
        """Test that input shortages are reported, not raised."""
        result = BeamInspector().inspect(parse_samples([(20, 130)]), BeamLength.EIGHT_FT)

        assert result.has_errors
        assert result.thickness is None
        assert "at least 3" in result.errors[0]

    def test_insufficient_layer_data_recorded(self, severe_scan, glue_line_values):
        result = BeamInspector().inspect(
            parse_samples(severe_scan), BeamLength.TWELVE_FT, layer_values=glue_line_values[:3]
        )

        assert result.has_errors
        assert result.thickness is not None
        assert result.depth is None

    def test_zone_out_of_range(self, severe_scan, glue_line_values):
        """Test choosing a zone that does not exist."""
        result = BeamInspector().inspect(
            parse_samples(severe_scan),
            BeamLength.TWELVE_FT,
            layer_values=glue_line_values,
            zone_index=3,
        )

        assert result.has_errors
        assert result.depth is None


class TestInspectionResult:
    """Tests for the merged report."""

    def test_summary(self, severe_scan, glue_line_values):
        """Test the text report content."""
        result = BeamInspector().inspect(
            parse_samples(severe_scan), BeamLength.TWELVE_FT, layer_values=glue_line_values
        )
        text = result.summary()

        assert "Beam: 12ft (144 inches)" in text
        assert "Baseline TOF: 147 μs" in text
        assert "Zone 1 - Severe Delamination (High Confidence)" in text
        assert "Pattern: 172 → 175 μs" in text
        assert 'Take additional measurements at 2" intervals' in text
        assert "Delamination at: GL1" in text

    def test_summary_no_delamination(self, healthy_scan):
        result = BeamInspector().inspect(parse_samples(healthy_scan), BeamLength.TWELVE_FT)
        assert "No Delamination Detected" in result.summary()

    def test_summary_not_analyzed(self):
        result = InspectionResult(beam_length=BeamLength.EIGHT_FT, errors=["too few"])
        text = result.summary()
        assert "Thickness scan: Not analyzed" in text
        assert "too few" in text

    def test_to_dict(self, severe_scan):
        result = BeamInspector().inspect(parse_samples(severe_scan), BeamLength.TWELVE_FT)
        data = result.to_dict()

        assert data["beam_length"] == "12ft"
        assert data["beam_length_inches"] == 144
        assert data["has_delamination"] is True
        assert data["thickness"]["zones"][0]["severity"] == "Severe"
        assert data["depth"] is None


class TestInspectFiles:
    """Tests for the file-based convenience function."""

    def test_beam_length_from_header(self, tmp_path):
        thickness = tmp_path / "beam.csv"
        thickness.write_text("# Beam length: 12ft\n5 120\n20 130\n30 172\n40 175\n50 128\n130 131\n")
        depth = tmp_path / "depth.txt"
        depth.write_text("# Zone: 1\n1.4 80\n2.1 130\n2.8 110\n3.5 108\n4.2 110\n")

        result = inspect_files(str(thickness), depth_path=str(depth))

        assert result.beam_length is BeamLength.TWELVE_FT
        assert result.selected_zone == 0
        assert result.depth.has_delamination

    def test_missing_beam_length(self, tmp_path):
        thickness = tmp_path / "beam.csv"
        thickness.write_text("20 130\n40 131\n60 129\n")

        with pytest.raises(ValueError):
            inspect_files(str(thickness))


class TestJSONWriter:
    """Tests for JSON report export."""

    def test_write_all(self, tmp_path, severe_scan, glue_line_values):
        """Test that all report files are written."""
        result = BeamInspector().inspect(
            parse_samples(severe_scan), BeamLength.TWELVE_FT, layer_values=glue_line_values
        )
        paths = write_inspection_to_json(result, tmp_path / "out")

        assert set(paths) == {"thickness", "depth", "inspection"}
        for path in paths.values():
            assert path.exists()

        with open(paths["inspection"]) as f:
            report = json.load(f)
        assert report["beam_length"] == "12ft"
        assert "generated_at" in report
        assert report["depth"]["identified_layers"][0]["layer_name"] == "GL1"

    def test_thickness_only(self, tmp_path, healthy_scan):
        result = BeamInspector().inspect(parse_samples(healthy_scan), BeamLength.TWELVE_FT)
        paths = JSONWriter(tmp_path).write_all(result)

        assert set(paths) == {"thickness", "inspection"}
        with open(paths["thickness"]) as f:
            data = json.load(f)
        assert data["zones"] == []
        assert data["has_delamination"] is False

    def test_dumps_report_non_finite(self):
        """Test that non-finite values in a report become null."""
        text = dumps_report({"ratio": float("inf"), "zones": [{"elevation_ratio": float("nan")}]})

        assert "Infinity" not in text
        assert "NaN" not in text
        assert json.loads(text) == {"ratio": None, "zones": [{"elevation_ratio": None}]}
