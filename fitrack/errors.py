"""Error taxonomy shared by the projection stages."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .validate import ValidationResult


class InvalidInputError(ValueError):
    """Raised when inputs violate a precondition of a projection stage."""

    def __init__(self, message: str, validation: "ValidationResult | None" = None) -> None:
        super().__init__(message)
        self.validation = validation


class ArithmeticDegenerateError(ArithmeticError):
    """Raised when a result would be a division by zero or a non-real power."""
