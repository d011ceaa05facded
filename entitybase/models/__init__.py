"""Entity identity module."""

from .base import BaseModel, IdentityMixin
from .errors import (
    IdentifierError,
    IdentifierReassignmentError,
    InvalidIdentifierError,
    MissingIdentifierError,
    UnknownIdentifierStrategyError,
)
from .identifiers import (
    IdentifierFactory,
    assign_identifier,
    generate_identifier,
    get_identifier_factory,
    peek_identifier,
)
from .schemas import IdentitySchema

__all__ = [
    "BaseModel",
    "IdentityMixin",
    "IdentitySchema",
    "IdentifierFactory",
    "assign_identifier",
    "generate_identifier",
    "get_identifier_factory",
    "peek_identifier",
    "IdentifierError",
    "IdentifierReassignmentError",
    "InvalidIdentifierError",
    "MissingIdentifierError",
    "UnknownIdentifierStrategyError",
]
