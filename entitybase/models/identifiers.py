"""Identifier generation and assignment for entities."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from typing import TYPE_CHECKING

from sqlalchemy import inspect

from entitybase.core.settings import get_settings
from entitybase.models.errors import UnknownIdentifierStrategyError

if TYPE_CHECKING:
    from entitybase.models.base import IdentityMixin

logger = logging.getLogger(__name__)

IdentifierFactory = Callable[[], uuid.UUID]

IDENTIFIER_FACTORIES: dict[str, IdentifierFactory] = {
    "uuid4": uuid.uuid4,
    "uuid1": uuid.uuid1,
}


def get_identifier_factory(strategy: str | None = None) -> IdentifierFactory:
    """Resolve a strategy name to its factory.

    Args:
        strategy: Strategy name; defaults to the configured ``identifier_strategy``

    Raises:
        UnknownIdentifierStrategyError: If no factory is registered under the name
    """
    name = strategy if strategy is not None else get_settings().identifier_strategy
    try:
        return IDENTIFIER_FACTORIES[name]
    except KeyError:
        raise UnknownIdentifierStrategyError(name) from None


def generate_identifier() -> uuid.UUID:
    """Generate a new identifier with the configured strategy."""
    return get_identifier_factory()()


def peek_identifier(entity: IdentityMixin) -> uuid.UUID | None:
    """Return the entity's identifier without emitting a database load.

    Expired persistent instances report the identity they were loaded or
    flushed with. Assigning to or deleting ``id`` on such an instance still
    loads the old value first, so under asyncio load it beforehand, e.g.
    with ``await entity.awaitable_attrs.id``.
    """
    current = entity.__dict__.get("id")
    if current is None:
        identity = inspect(entity).identity
        if identity is not None:
            current = identity[0]
    return current


def assign_identifier(
    entity: IdentityMixin, factory: IdentifierFactory | None = None
) -> uuid.UUID:
    """Assign a fresh identifier to the entity unless it already has one.

    Args:
        entity: Entity to assign
        factory: Optional factory overriding the configured strategy

    Returns:
        The entity's identifier, existing or newly assigned
    """
    current = peek_identifier(entity)
    if current is not None:
        return current

    new_id = (factory or get_identifier_factory())()
    entity.id = new_id
    logger.debug("Assigned identifier %s to %s", new_id, type(entity).__name__)
    return new_id
