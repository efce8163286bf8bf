"""
Tests for the depth-wise layer locator.
"""

import pytest

from glulam_ndt.config import DepthScanConfig
from glulam_ndt.detection import locate_layers
from glulam_ndt.enums import Confidence
from glulam_ndt.errors import InsufficientLayerData
from glulam_ndt.models import LAYER_GRID, LayerSample
from glulam_ndt.parsers import build_layer_values


def grid_values(values):
    """Build filled layer samples from TOF values in grid order."""
    depths = [slot.display_depth for slot in LAYER_GRID]
    return build_layer_values(dict(zip(depths, values)))


class TestPreconditions:
    """Tests for input shortage errors."""

    def test_fewer_than_five_slots(self):
        """Test that four filled slots are not enough."""
        with pytest.raises(InsufficientLayerData) as exc_info:
            locate_layers(grid_values([100, 100, 100, 100]))
        assert exc_info.value.found == 4
        assert exc_info.value.required == 5

    def test_five_slots_is_enough(self):
        """Test that exactly five filled slots run the analysis."""
        result = locate_layers(grid_values([100, 100, 100, 100, 100]))
        assert result.has_delamination is False
        assert result.identified_layers == []


class TestDropDetection:
    """Tests for the TOF drop pass."""

    def test_drop_flags_elevated_side(self):
        """Test a confirmed drop after Mid-L2."""
        result = locate_layers(grid_values([100, 98, 130, 95, 99, 101, 97, 100, 99]))

        assert result.has_delamination
        assert len(result.identified_layers) == 1

        layer = result.identified_layers[0]
        assert layer.layer_name == "Mid-L2"
        assert layer.depth == pytest.approx(2.1)
        assert layer.display_depth == pytest.approx(2.8)
        assert layer.confidence == Confidence.HIGH
        assert layer.drop_ratio == pytest.approx(1.37)
        assert layer.elevation_ratio is None
        assert layer.detection == "drop"

    def test_medium_confidence_drop(self):
        """Test a drop between 1.2x and 1.3x is Medium confidence."""
        result = locate_layers(grid_values([125, 125, 125, 100, 100]))

        assert len(result.identified_layers) == 1
        layer = result.identified_layers[0]
        assert layer.layer_name == "Mid-L2"
        assert layer.confidence == Confidence.MEDIUM
        assert layer.drop_ratio == pytest.approx(1.25)

    def test_unconfirmed_drop(self):
        """Test that a drop from a single high neighbour is not flagged."""
        result = locate_layers(grid_values([90, 90, 150, 110, 110]))

        assert result.has_delamination is False

    def test_rising_tof_is_not_a_drop(self):
        """Test that an increase across a boundary never triggers the drop pass."""
        result = locate_layers(grid_values([100, 100, 100, 100, 100, 100, 100, 100, 200]))

        assert result.has_delamination is False


class TestGlueLineElevation:
    """Tests for the glue-line elevation pass."""

    def test_elevated_glue_line(self, glue_line_values):
        """Test GL1 reading well above its neighbours."""
        result = locate_layers(glue_line_values)

        assert len(result.identified_layers) == 1
        layer = result.identified_layers[0]
        assert layer.layer_name == "GL1"
        assert layer.depth == pytest.approx(1.4)
        assert layer.display_depth == pytest.approx(2.1)
        assert layer.confidence == Confidence.MEDIUM
        assert layer.elevation_ratio == pytest.approx(1.37)
        assert layer.drop_ratio is None
        assert layer.detection == "glue-line elevation"

    def test_glue_line_without_successor(self):
        """Test that the last filled slot is never checked for elevation."""
        values = grid_values([100, 100, 100, 100, 100, 100, 100, 200])

        assert values[-1].layer_name == "GL4"
        assert locate_layers(values).has_delamination is False

    def test_deduplicated_against_drop(self):
        """Test that a glue line flagged by both passes appears once."""
        result = locate_layers(grid_values([100, 140, 100, 100, 100]))

        assert len(result.identified_layers) == 1
        layer = result.identified_layers[0]
        assert layer.layer_name == "GL1"
        assert layer.confidence == Confidence.HIGH
        assert layer.drop_ratio == pytest.approx(1.4)
        assert layer.elevation_ratio is None

    def test_drops_listed_before_elevations(self):
        """Test result ordering: drop pass first, then glue-line pass."""
        result = locate_layers(grid_values([80, 130, 110, 108, 110, 140, 90, 100, 100]))

        names = [layer.layer_name for layer in result.identified_layers]
        assert names == ["GL3", "GL1"]
        assert result.identified_layers[0].drop_ratio == pytest.approx(1.56)
        assert result.identified_layers[1].elevation_ratio == pytest.approx(1.37)

    def test_depths_are_unique(self):
        """Test that no depth is reported twice."""
        result = locate_layers(grid_values([80, 130, 110, 108, 110, 140, 90, 100, 100]))

        depths = [layer.depth for layer in result.identified_layers]
        assert len(depths) == len(set(depths))


class TestLocatorInputs:
    """Tests for how the locator treats its input."""

    def test_neighbours_follow_filled_sequence(self):
        """Test that a gap in the grid makes the next filled slot the neighbour."""
        values = [
            LayerSample(display_depth=1.4, actual_depth=0.7, layer_name="Mid-L1", value=100),
            LayerSample(display_depth=2.1, actual_depth=1.4, layer_name="GL1", value=95),
            LayerSample(display_depth=3.5, actual_depth=2.8, layer_name="GL2", value=150),
            LayerSample(display_depth=4.2, actual_depth=3.5, layer_name="Mid-L3", value=140),
            LayerSample(display_depth=4.9, actual_depth=4.2, layer_name="GL3", value=139),
        ]
        result = locate_layers(values)

        # GL2 neighbours are GL1 (95) and Mid-L3 (140): 150 < 117.5 * 1.3
        assert result.has_delamination is False

    def test_custom_config(self):
        """Test that overridden ratios are applied."""
        config = DepthScanConfig(glue_line_ratio=1.1, min_filled_slots=3)
        result = locate_layers(grid_values([100, 115, 100]), config=config)

        assert [layer.layer_name for layer in result.identified_layers] == ["GL1"]
        assert result.identified_layers[0].elevation_ratio == pytest.approx(1.15)

    def test_idempotent(self, glue_line_values):
        """Test that repeated calls give identical output."""
        assert locate_layers(glue_line_values) == locate_layers(glue_line_values)
