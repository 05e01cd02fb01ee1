"""Base Pydantic model with strict defaults for pixcore configs."""

from pydantic import BaseModel, ConfigDict


class PixcoreBaseModel(BaseModel):
    """Base model for all pixcore configuration schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Strips whitespace from strings
    """

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
    )
