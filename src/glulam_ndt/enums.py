"""
Enums for inspection metadata.

These enums define the valid values for beam configuration and
the grading attached to detected delamination.
"""

from enum import Enum


class Confidence(str, Enum):
    """How strongly the readings support a delamination call."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Severity(str, Enum):
    """Severity grade of a suspected delamination zone."""

    POSSIBLE = "Possible"
    MILD = "Mild"
    MODERATE = "Moderate"
    SEVERE = "Severe"


class BeamLength(str, Enum):
    """Nominal beam lengths supported by the scan layout."""

    EIGHT_FT = "8ft"
    TWELVE_FT = "12ft"

    @property
    def inches(self) -> int:
        """Nominal length in inches."""
        return 96 if self is BeamLength.EIGHT_FT else 144

    @classmethod
    def from_inches(cls, inches: float) -> "BeamLength":
        """
        Look up the beam length for a nominal length in inches.

        Raises:
            ValueError: If the length is not one of the supported beams
        """
        for member in cls:
            if member.inches == inches:
                return member
        raise ValueError(f"Unsupported beam length: {inches} in (expected 96 or 144)")
