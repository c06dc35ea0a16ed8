"""Base model for all artifact builder Pydantic models.

This module provides a base model class that enforces consistent serialization
behavior across all models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ArtifactBaseModel(BaseModel):
    """Base model class for all artifact builder Pydantic models.

    This class enforces consistent serialization behavior:
    - by_alias=True: Use field aliases for serialization
    - mode="json": Use JSON-compatible serialization (e.g., Path -> str)
    """

    model_config = ConfigDict(
        extra="forbid",
        use_enum_values=True,
        validate_assignment=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary with consistent serialization parameters.

        Returns:
            Dictionary representation using JSON-compatible serialization
        """
        return self.model_dump(by_alias=True, mode="json")
