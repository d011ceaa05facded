"""Shared UUID identity for SQLAlchemy entities."""

from entitybase.db.session import Base
from entitybase.models import BaseModel, IdentityMixin

__all__ = ["Base", "BaseModel", "IdentityMixin"]
