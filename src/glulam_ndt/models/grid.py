"""
Fixed depth-scan layer grid.

The depth-wise scan is taken at nine probe positions across a
6-lamination beam with 5 glue lines. Each position maps to either the
middle of a lumber layer or a glue line. The table is static and shared
by every caller; a different beam build-up is out of scope.
"""

from typing import Optional

from pydantic import Field

from glulam_ndt.models.base import RecordModel

GLUE_LINE_PREFIX = "GL"
LUMBER_LAYERS = 6
GLUE_LINES = 5

# Depth tolerance when matching a caller-supplied display depth to a slot
DEPTH_TOLERANCE = 1e-6


class LayerSlot(RecordModel):
    """
    One position on the depth-scan grid.

    Attributes:
        index: Position in the grid (0 = nearest the scanned face)
        display_depth: Depth label the operator reads from, in inches
        actual_depth: Depth of the layer centre or glue line, in inches
        layer_name: Mid-layer (Mid-Ln) or glue line (GLn) name
    """

    index: int = Field(..., ge=0)
    display_depth: float
    actual_depth: float
    layer_name: str

    @property
    def is_glue_line(self) -> bool:
        """Check if this slot is a glue line."""
        return self.layer_name.startswith(GLUE_LINE_PREFIX)

    def __str__(self) -> str:
        """String representation."""
        return f'{self.layer_name} @ {self.display_depth:.1f}" (actual {self.actual_depth:.1f}")'


def _build_grid() -> tuple[LayerSlot, ...]:
    display_depths = (1.4, 2.1, 2.8, 3.5, 4.2, 4.9, 5.6, 6.3, 7.0)
    actual_depths = (0.7, 1.4, 2.1, 2.8, 3.5, 4.2, 4.9, 5.6, 6.3)
    names = ("Mid-L1", "GL1", "Mid-L2", "GL2", "Mid-L3", "GL3", "Mid-L4", "GL4", "Mid-L5")

    return tuple(
        LayerSlot(index=i, display_depth=d, actual_depth=a, layer_name=n)
        for i, (d, a, n) in enumerate(zip(display_depths, actual_depths, names))
    )


LAYER_GRID: tuple[LayerSlot, ...] = _build_grid()


def slot_for_display_depth(depth: float) -> Optional[LayerSlot]:
    """
    Find the grid slot for a display depth.

    Args:
        depth: Display depth in inches

    Returns:
        The matching LayerSlot, or None if the depth is not on the grid
    """
    for slot in LAYER_GRID:
        if abs(slot.display_depth - depth) <= DEPTH_TOLERANCE:
            return slot
    return None


def slot_for_name(name: str) -> Optional[LayerSlot]:
    """Find the grid slot for a layer name (case-insensitive)."""
    wanted = name.strip().lower()
    for slot in LAYER_GRID:
        if slot.layer_name.lower() == wanted:
            return slot
    return None
