"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the HTTP
and CLI layers can catch them uniformly and translate them into status
codes or user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was rejected before reaching storage."""


class InvalidIdentifierError(ValidationError):
    """A product ID could not be parsed as an integer."""


class InvalidFieldError(ValidationError):
    """A single product field failed validation."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"Invalid value for '{field}'")


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StorageError(DomainException):
    """The storage collaborator failed to execute a statement."""
