"""
Base model for inspection records.

Provides common configuration and serialization helpers shared by
the measurement and result models.
"""

from pydantic import BaseModel, ConfigDict


class RecordModel(BaseModel):
    """
    Base model for all inspection records.

    Provides:
    - Immutability once validated
    - Enum values in serialization
    - JSON serialization helpers
    """

    model_config = ConfigDict(
        # Records never change after they are produced
        frozen=True,
        # Use enum values in serialization
        use_enum_values=True,
        # Populate by field name or alias
        populate_by_name=True,
    )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        """Convert to JSON string."""
        return self.model_dump_json(by_alias=True)
