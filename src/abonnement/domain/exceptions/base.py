"""
Base domain exceptions.
"""


class AbonnementException(Exception):
    """Base exception for all Abonnement domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(AbonnementException):
    """Raised when entity is not found in repository."""

    def __init__(self, entity_type: str, entity_id: str):
        message = f"{entity_type} with ID {entity_id} not found"
        super().__init__(message, code="ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


class ValidationError(AbonnementException):
    """Raised when input or entity validation fails."""

    def __init__(self, field: str, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field
        self.reason = reason


class StorageError(AbonnementException):
    """
    Raised when the relational store fails.

    Carries only the operation name; the backend error is chained
    as __cause__ and never part of the message.
    """

    def __init__(self, operation: str):
        super().__init__(f"Failed to {operation} subscription", code="STORAGE_ERROR")
        self.operation = operation
