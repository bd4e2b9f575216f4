"""
Calculator Formula System

Registry of calculator definitions and the evaluator that validates raw form
input and runs a calculator's formula.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from .errors import (
    FormulaError,
    FormulaNotFoundError,
    DuplicateFormulaError,
    FormulaInputError,
    MissingVariableError,
    InvalidNumberError,
    CalculationError,
)
from .base import (
    VariableKind,
    VariableSpec,
    FormulaDefinition,
    number,
    percentage,
    register_formula,
    lookup,
    get_formula,
    list_all,
    list_identifiers,
    list_categories,
    list_by_category,
)
from .evaluator import (
    evaluate,
    evaluate_many,
    coerce_inputs,
    validate_inputs,
    default_inputs,
)
from . import formulas

__all__ = [
    "FormulaError",
    "FormulaNotFoundError",
    "DuplicateFormulaError",
    "FormulaInputError",
    "MissingVariableError",
    "InvalidNumberError",
    "CalculationError",
    "VariableKind",
    "VariableSpec",
    "FormulaDefinition",
    "number",
    "percentage",
    "register_formula",
    "lookup",
    "get_formula",
    "list_all",
    "list_identifiers",
    "list_categories",
    "list_by_category",
    "evaluate",
    "evaluate_many",
    "coerce_inputs",
    "validate_inputs",
    "default_inputs",
]
