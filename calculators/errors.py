"""
Formula Errors

Exception hierarchy for the formula registry and evaluator. Every error is an
expected, recoverable condition: callers render them as a not-found page, a
per-field validation message, or a per-item failure in a batch.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from typing import Any, Iterable


class FormulaError(ValueError):
    """Base class for all formula registry and evaluation errors."""
    pass


class FormulaNotFoundError(FormulaError):
    """Raised when an identifier is not present in the registry."""

    def __init__(self, identifier: Any, available: Iterable[str] = ()):
        self.identifier = identifier
        available = list(available)
        message = f"Formula '{identifier}' not found."
        if available:
            message += f" Available: {', '.join(available)}"
        super().__init__(message)


class DuplicateFormulaError(FormulaError):
    """Raised when two definitions are registered under the same identifier."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Formula '{identifier}' is already registered")


class FormulaInputError(FormulaError):
    """Base class for errors tied to a single input field."""

    def __init__(self, name: str, message: str):
        self.name = name
        super().__init__(message)


class MissingVariableError(FormulaInputError):
    """A declared variable was not supplied and has no default."""

    def __init__(self, name: str):
        super().__init__(name, f"Missing required variable: '{name}'")


class InvalidNumberError(FormulaInputError):
    """A supplied value could not be coerced to a finite number."""

    def __init__(self, name: str, raw_value: Any):
        self.raw_value = raw_value
        super().__init__(name, f"Invalid number for '{name}': {raw_value!r}")


class CalculationError(FormulaError):
    """A calculation function raised instead of returning a numeric result."""

    def __init__(self, identifier: str, cause: BaseException):
        self.identifier = identifier
        self.cause = cause
        super().__init__(
            f"Calculation for '{identifier}' failed: "
            f"{type(cause).__name__}: {cause}"
        )
