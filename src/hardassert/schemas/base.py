"""Base Pydantic model with strict defaults for hardassert schemas.

All hardassert schemas inherit from this base to ensure consistent
validation behavior for the terminator config and the frame record.
"""

from pydantic import BaseModel, ConfigDict


class HardAssertBaseModel(BaseModel):
    """Base model for all hardassert schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Strips whitespace from strings
    """

    model_config = ConfigDict(
        extra='forbid',           # Reject unknown fields
        validate_assignment=True, # Validate on field mutation
        str_strip_whitespace=True,# Strip whitespace from strings
    )
