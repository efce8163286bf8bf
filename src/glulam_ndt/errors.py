"""Input shortage errors raised by the detectors before any analysis runs."""

from __future__ import annotations


class AnalysisInputError(ValueError):
    """Raised when a detector does not have enough readings to run."""

    def __init__(self, message: str, found: int, required: int):
        super().__init__(message)
        self.found = found
        self.required = required


class InsufficientData(AnalysisInputError):
    """Fewer valid thickness-scan samples than the minimum."""

    def __init__(self, found: int, required: int = 3):
        super().__init__(
            f"Please enter at least {required} measurements to analyze (got {found})",
            found=found,
            required=required,
        )


class InsufficientInteriorData(AnalysisInputError):
    """Too few samples remain once the beam-end margins are excluded."""

    def __init__(self, found: int, required: int = 3):
        super().__init__(
            "Not enough interior measurements "
            f"({found} of {required} required). "
            "Please add more measurements away from beam ends.",
            found=found,
            required=required,
        )


class InsufficientLayerData(AnalysisInputError):
    """Fewer filled depth-scan slots than the minimum."""

    def __init__(self, found: int, required: int = 5):
        super().__init__(
            f"Please enter at least {required} layer measurements (got {found})",
            found=found,
            required=required,
        )
