"""
Measurement models for raw scan readings.

Includes the thickness-wise Sample (position along the beam) and the
depth-wise LayerSample (one filled slot of the layer grid).
"""

from pydantic import Field

from glulam_ndt.models.base import RecordModel
from glulam_ndt.models.grid import GLUE_LINE_PREFIX


class Sample(RecordModel):
    """
    A single thickness-wise TOF reading.

    Attributes:
        position: Distance from the reference beam end in inches
        tof: Ultrasonic time-of-flight in microseconds
    """

    position: float = Field(
        ...,
        description="Position along the beam in inches",
        allow_inf_nan=False,
    )

    tof: float = Field(
        ...,
        description="Time-of-flight in microseconds (μs)",
        allow_inf_nan=False,
    )

    def __str__(self) -> str:
        """String representation."""
        return f'{self.position:g}": {self.tof:g} μs'


class LayerSample(RecordModel):
    """
    A depth-wise TOF reading taken at one slot of the layer grid.

    Attributes:
        display_depth: Depth label shown to the operator, in inches
        actual_depth: Depth of the layer centre or glue line, in inches
        layer_name: Grid name (Mid-L1, GL1, ..., Mid-L5)
        value: Time-of-flight in microseconds
    """

    display_depth: float = Field(..., description="Displayed probe depth in inches")
    actual_depth: float = Field(..., description="Actual layer depth in inches")
    layer_name: str = Field(..., description="Layer or glue line name")
    value: float = Field(
        ...,
        description="Time-of-flight in microseconds (μs)",
        gt=0,
        allow_inf_nan=False,
    )

    @property
    def is_glue_line(self) -> bool:
        """Check if this reading sits on a glue line."""
        return self.layer_name.startswith(GLUE_LINE_PREFIX)
