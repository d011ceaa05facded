"""Custom exceptions for entity identifiers."""

from uuid import UUID


class IdentifierError(ValueError):
    """Base class for identifier errors."""

    pass


class IdentifierReassignmentError(IdentifierError):
    """Raised when changing or clearing an identifier that is already assigned."""

    def __init__(self, entity_name: str, current: UUID, new: object):
        self.current = current
        self.new = new
        super().__init__(
            f"{entity_name} identifier is already assigned ({current}); "
            f"cannot replace it with {new!r}"
        )


class InvalidIdentifierError(IdentifierError):
    """Raised when an identifier value is not a UUID."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Identifier must be a uuid.UUID, got {type(value).__name__}")


class MissingIdentifierError(IdentifierError):
    """Raised when inserting an entity without an identifier while auto-assignment is off."""

    def __init__(self, entity_name: str):
        super().__init__(
            f"{entity_name} has no identifier and automatic assignment is disabled"
        )


class UnknownIdentifierStrategyError(IdentifierError):
    """Raised when an identifier strategy name is not registered."""

    def __init__(self, strategy: str):
        self.strategy = strategy
        super().__init__(f"Unknown identifier strategy: {strategy}")
