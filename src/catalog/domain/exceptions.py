"""Domain-level exceptions.

All catalog errors are subclasses of DomainException so the CLI layer can
catch them uniformly and display user-friendly messages.

Policy checks in the domain services never raise: "not eligible" is
reported as ``False``.  Exceptions are reserved for malformed input
(ValidationError) and for use cases that target a missing entity
(NotFoundError) or that a policy check refused (BusinessRuleViolation).
"""

from __future__ import annotations

from enum import Enum


class ValidationErrorKind(Enum):
    EMPTY_VALUE = "empty-value"
    LENGTH_EXCEEDED = "length-exceeded"
    NEGATIVE_VALUE = "negative-value"
    INVALID_NUMBER = "invalid-number"
    INVALID_STATE = "invalid-state"


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """An invariant of a value object or entity was violated."""

    def __init__(
        self,
        message: str,
        kind: ValidationErrorKind = ValidationErrorKind.INVALID_STATE,
    ) -> None:
        super().__init__(message)
        self.kind = kind


class NotFoundError(DomainException):
    """A use case targeted an entity id that is not in the repository."""


class BusinessRuleViolation(DomainException):
    """A use case was refused by a domain-service policy check."""
