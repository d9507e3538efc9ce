"""Exceptions raised by bscalc."""

from __future__ import annotations


class BSCalcError(Exception):
    """Base class for bscalc errors."""


class UsageError(BSCalcError):
    """Command line could not be used as given."""


class MalformedNumericInput(UsageError):
    """A numeric argument did not parse completely."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"not a number: {text!r}")


class DomainError(BSCalcError, ValueError):
    """Input outside the closed-form domain (T and sigma must be positive)."""

    def __init__(self, field: str, value: float) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} must be positive, got {value}")
