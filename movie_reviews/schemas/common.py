"""Common Pydantic schemas."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration.

    Fields are exposed in camelCase on the wire; request bodies accept
    either the camelCase alias or the Python field name.
    """

    model_config = {
        "from_attributes": True,
        "validate_assignment": True,
        "arbitrary_types_allowed": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class ErrorResponse(BaseModel):
    """Error response schema. Keys are rendered as-is, not camelCased."""

    error: str = Field(..., description="Error message")
    error_code: Optional[str] = Field(None, description="Error code")
    details: Dict[str, Any] = Field(default_factory=dict, description="Error details")
    timestamp: float = Field(..., description="Unix time of the error")


class MessageResponse(BaseSchema):
    """Plain confirmation message."""

    message: str = Field(..., description="Result message")


class HealthResponse(BaseSchema):
    """Health check response."""

    status: str = Field(..., description="Overall health status")
