"""Shared identity for all persistent entities.

``IdentityMixin`` gives any declarative class a UUID primary key named ``id``.
``BaseModel`` is the abstract superclass most entities inherit from; classes
that already have another base can compose the mixin directly instead::

    class Note(BaseModel):
        __tablename__ = "notes"

    class Tag(IdentityMixin, Base):
        __tablename__ = "tags"

The identifier is ``None`` until assigned, either by application code or by
the ``before_insert`` hook below at first flush, and never changes afterwards.
"""

import logging
import uuid
from typing import Any

from sqlalchemy import Connection, Uuid, event
from sqlalchemy.orm import Mapped, Mapper, mapped_column, validates

from entitybase.core.settings import get_settings
from entitybase.db.session import Base
from entitybase.models.errors import (
    IdentifierReassignmentError,
    InvalidIdentifierError,
    MissingIdentifierError,
)
from entitybase.models.identifiers import assign_identifier, peek_identifier

logger = logging.getLogger(__name__)


class IdentityMixin:
    """Mixin adding a UUID primary key column."""

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)

    @validates("id", include_removes=True)
    def _validate_id(
        self, key: str, value: Any, is_remove: bool
    ) -> uuid.UUID | None:
        current = peek_identifier(self)

        if is_remove:
            if current is not None:
                raise IdentifierReassignmentError(type(self).__name__, current, None)
            return None

        if value is None:
            if current is None:
                return None
            raise IdentifierReassignmentError(type(self).__name__, current, value)

        if not isinstance(value, uuid.UUID):
            raise InvalidIdentifierError(value)

        if current is not None and value != current:
            raise IdentifierReassignmentError(type(self).__name__, current, value)

        return value

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={peek_identifier(self)!r}>"


class BaseModel(IdentityMixin, Base):
    """Abstract base for entities identified by a UUID primary key."""

    __abstract__ = True


@event.listens_for(IdentityMixin, "before_insert", propagate=True)
def _assign_identifier_before_insert(
    mapper: Mapper[Any], connection: Connection, target: IdentityMixin
) -> None:
    """Fill in a missing identifier right before the row is inserted."""
    if peek_identifier(target) is not None:
        return

    if not get_settings().auto_assign_identifiers:
        logger.warning(
            "Refusing to insert %s without an identifier", mapper.class_.__name__
        )
        raise MissingIdentifierError(mapper.class_.__name__)

    assign_identifier(target)
