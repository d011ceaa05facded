"""Read schemas for entities.

This module defines the pydantic configuration shared by schemas that are
built from ORM instances.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


# Base configuration for all entity schemas
class IdentitySchema(BaseModel):
    """Schema exposing the identifier of any entity."""

    model_config = ConfigDict(  # pyright: ignore[reportUnannotatedClassAttribute]
        from_attributes=True,
    )

    id: UUID | None = None
