"""
Base schemas and common response models.
"""
from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class IDSchema(BaseSchema):
    """Schema mixin for integer ID."""

    id: int


class MessageResponse(BaseSchema):
    """Simple message response."""

    message: str


class UpdatedResponse(BaseSchema):
    """Number of rows a mutation updated."""

    updated: int


class DeletedResponse(BaseSchema):
    """Number of rows a mutation deleted."""

    deleted: int
