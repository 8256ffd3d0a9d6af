"""Domain exception hierarchy for structured error responses."""

from __future__ import annotations


class AppException(Exception):
    """Base exception for all domain errors.

    Subclasses set ``code`` and ``status_code`` at the class level; callers
    provide ``message`` and an optional ``details`` list.
    """

    code: str = "APP_ERROR"
    status_code: int = 500

    def __init__(self, message: str, details: list[dict] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or []


class NotFoundException(AppException):
    code = "NOT_FOUND"
    status_code = 404


class ConflictException(AppException):
    code = "CONFLICT"
    status_code = 409


class DuplicateSynonymException(ConflictException):
    """An active entry already maps this synonym in this language."""

    code = "DUPLICATE_SYNONYM"


class ValidationException(AppException):
    code = "VALIDATION_ERROR"
    status_code = 422


class CanonicalEqualsSynonymException(ValidationException):
    code = "CANONICAL_EQUALS_SYNONYM"
