"""
Tests for the CLI module.
"""

import json

import pytest

from glulam_ndt.cli.main import app


@pytest.fixture
def thickness_file(tmp_path):
    path = tmp_path / "beam_a.csv"
    path.write_text("""# Beam length: 12ft
position,tof
5,120
20,130
30,172
40,175
50,128
130,131
""")
    return path


@pytest.fixture
def zero_baseline_file(tmp_path):
    # Interior mean of exactly 0 μs with one elevated reading
    path = tmp_path / "zero.csv"
    path.write_text("20 -20\n40 -20\n60 40\n")
    return path


@pytest.fixture
def layers_file(tmp_path):
    path = tmp_path / "beam_a_zone1.txt"
    path.write_text("""# Zone: 1
1.4 80
2.1 130
2.8 110
3.5 108
4.2 110
4.9 108
5.6 110
6.3 108
7.0 110
""")
    return path


class TestCLIThickness:
    """Tests for the thickness command."""

    def test_thickness(self, thickness_file):
        assert app(["thickness", str(thickness_file)]) == 0

    def test_thickness_json(self, thickness_file, capsys):
        """Test JSON output from thickness."""
        result = app(["thickness", "--json", str(thickness_file)])
        assert result == 0

        data = json.loads(capsys.readouterr().out)
        assert data["beam_length"] == "12ft"
        assert data["has_delamination"] is True
        assert data["zones"][0]["severity"] == "Severe"

    def test_beam_length_option(self, tmp_path):
        path = tmp_path / "scan.csv"
        path.write_text("20 130\n40 131\n60 129\n")
        assert app(["thickness", "-b", "8ft", str(path)]) == 0

    def test_missing_beam_length(self, tmp_path):
        path = tmp_path / "scan.csv"
        path.write_text("20 130\n40 131\n60 129\n")
        assert app(["thickness", str(path)]) == 1

    def test_insufficient_data(self, tmp_path):
        """Test that too few readings exit with an error."""
        path = tmp_path / "scan.csv"
        path.write_text("20 130\n40 131\n")
        assert app(["thickness", "-b", "12ft", str(path)]) == 1

    def test_nonexistent_file(self):
        assert app(["thickness", "/nonexistent/scan.csv"]) == 1

    def test_header_row_no_warning(self, thickness_file, capsys):
        """Test that a column header row is not reported as an unreadable line."""
        assert app(["thickness", str(thickness_file)]) == 0
        assert "skipped" not in capsys.readouterr().err

    def test_json_zero_baseline(self, zero_baseline_file, capsys):
        """Test that an unbounded elevation ratio is written as null."""
        result = app(["thickness", "-b", "12ft", "--json", str(zero_baseline_file)])
        assert result == 0

        out = capsys.readouterr().out
        assert "Infinity" not in out
        data = json.loads(out)
        assert data["mean"] == 0
        assert data["zones"][0]["elevation_ratio"] is None


class TestCLILayers:
    """Tests for the layers command."""

    def test_layers_json(self, layers_file, capsys):
        result = app(["layers", "--json", str(layers_file)])
        assert result == 0

        data = json.loads(capsys.readouterr().out)
        assert data["identified_layers"][0]["layer_name"] == "GL1"

    def test_insufficient_layers(self, tmp_path):
        path = tmp_path / "depth.txt"
        path.write_text("1.4 100\n2.1 98\n")
        assert app(["layers", str(path)]) == 1


class TestCLIInspect:
    """Tests for the inspect command."""

    def test_inspect(self, thickness_file, layers_file):
        result = app(["inspect", "-t", str(thickness_file), "-l", str(layers_file)])
        assert result == 0

    def test_inspect_writes_output(self, thickness_file, layers_file, tmp_path):
        """Test that JSON reports are written to the output directory."""
        output_dir = tmp_path / "reports"
        result = app([
            "inspect",
            "-t", str(thickness_file),
            "-l", str(layers_file),
            "--zone", "1",
            "--output", str(output_dir),
        ])
        assert result == 0
        assert (output_dir / "inspection.json").exists()
        assert (output_dir / "depth.json").exists()

    def test_inspect_bad_zone(self, thickness_file, layers_file):
        result = app(["inspect", "-t", str(thickness_file), "-l", str(layers_file), "-z", "4"])
        assert result == 1

    def test_inspect_with_settings(self, thickness_file, tmp_path, capsys):
        """Test detector settings loaded from --config."""
        settings = tmp_path / "settings.json"
        settings.write_text(json.dumps({"thickness": {"definite_threshold": 180}}))

        result = app(["--config", str(settings), "inspect", "-t", str(thickness_file), "--json"])
        assert result == 0

        data = json.loads(capsys.readouterr().out)
        assert data["thickness"]["zones"][0]["severity"] == "Moderate"

    def test_inspect_json_zero_baseline(self, zero_baseline_file, capsys):
        result = app(["inspect", "-t", str(zero_baseline_file), "-b", "12ft", "--json"])
        assert result == 0

        out = capsys.readouterr().out
        assert "Infinity" not in out
        data = json.loads(out)
        assert data["thickness"]["zones"][0]["elevation_ratio"] is None


class TestCLIHelp:
    """Tests for CLI help."""

    def test_help_returns_zero(self):
        assert app(["--help"]) == 0

    def test_command_help(self):
        assert app(["inspect", "--help"]) == 0

    def test_grid(self, capsys):
        """Test the grid listing and its layer counts."""
        assert app(["grid"]) == 0

        out = capsys.readouterr().out
        assert "6 lumber layers, 5 glue lines" in out
        assert "GL4" in out
