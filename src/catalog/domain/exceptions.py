"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStockError(ValidationError):
    """A stock delta would drive a size's stock below zero."""

    def __init__(self, color: str, size, available: int, requested: int) -> None:
        self.color = color
        self.size = size
        self.available = available
        self.requested = requested
        super().__init__(
            f'Insufficient stock for color "{color}" size {size}. '
            f"Available: {available}, Requested: {requested}"
        )


class BulkStockUpdateError(DomainException):
    """Every triple of a bulk stock update failed."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("Failed to update stock")


class ConcurrencyConflictError(DomainException):
    """The stored aggregate changed since it was loaded."""


class MediaUploadError(DomainException):
    """The remote media host rejected or failed an upload."""


class ConfigurationError(DomainException):
    """An environment setting is missing or malformed."""
