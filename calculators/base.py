"""
Formula Registry

Defines the immutable records that describe a calculator (FormulaDefinition and
VariableSpec) and the write-once registry that maps a calculator identifier to
its definition.

Definitions are registered at import time with the ``register_formula``
decorator and never change afterwards. Page rendering, feeds and sitemaps read
the registry through ``lookup`` and ``list_all``.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import math
import re
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from calculators.errors import DuplicateFormulaError, FormulaNotFoundError
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

FormulaResult = Union[float, Dict[str, float]]
CalculationFunction = Callable[[Mapping[str, float]], FormulaResult]

# Path-like keys: "capital-gains-tax", "tax/income", "financial/savings-goal"
IDENTIFIER_PATTERN = re.compile(r"^[a-z0-9]+(?:[-/][a-z0-9]+)*$")


class VariableKind(str, Enum):
    """Kind of a calculator input slot."""

    NUMBER = "number"
    # Entered as a whole-number percent (15 means 15%); formulas divide by 100
    PERCENTAGE = "percentage"


class VariableSpec(BaseModel):
    """Declared shape of one calculator input."""

    model_config = ConfigDict(frozen=True)

    kind: VariableKind = VariableKind.NUMBER
    label: str = Field(min_length=1)
    default: Optional[float] = None
    help_text: Optional[str] = None

    @field_validator('default')
    @classmethod
    def finite_default(cls, v):
        if v is not None and not math.isfinite(v):
            raise ValueError(f'Default must be a finite number: {v}')
        return v

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def is_percentage(self) -> bool:
        return self.kind == VariableKind.PERCENTAGE


def number(label: str, default: Optional[float] = None, help_text: Optional[str] = None) -> VariableSpec:
    """Declare a plain numeric input (amounts, counts, years)."""
    return VariableSpec(kind=VariableKind.NUMBER, label=label, default=default, help_text=help_text)


def percentage(label: str, default: Optional[float] = None, help_text: Optional[str] = None) -> VariableSpec:
    """Declare a percentage input, entered as a whole-number percent."""
    return VariableSpec(kind=VariableKind.PERCENTAGE, label=label, default=default, help_text=help_text)


class FormulaDefinition(BaseModel):
    """
    Immutable description of one calculator.

    The calculation function receives a read-only mapping that holds exactly
    the declared variables as floats. It must be pure and must return either a
    float or a dict of named floats.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    identifier: str
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    long_description: Optional[str] = None
    formula: Optional[str] = None
    category: str = "general"
    variables: Mapping[str, VariableSpec]
    calculate: CalculationFunction

    @field_validator('identifier')
    @classmethod
    def identifier_format(cls, v):
        if not IDENTIFIER_PATTERN.match(v):
            raise ValueError(
                f"Identifier must be lowercase, path-like (e.g. 'tax/income'): {v!r}"
            )
        return v

    @field_validator('variables')
    @classmethod
    def freeze_variables(cls, v):
        if not v:
            raise ValueError('A formula must declare at least one variable')
        return MappingProxyType(dict(v))

    @property
    def variable_names(self) -> List[str]:
        return list(self.variables.keys())

    def __repr__(self) -> str:
        return f"FormulaDefinition(identifier={self.identifier!r}, name={self.name!r})"


# Insertion-ordered: list_all() reflects registration order
_FORMULA_REGISTRY: Dict[str, FormulaDefinition] = {}


def register_definition(definition: FormulaDefinition) -> FormulaDefinition:
    """
    Add a definition to the registry.

    Raises:
        DuplicateFormulaError: If the identifier is already registered
    """
    if definition.identifier in _FORMULA_REGISTRY:
        raise DuplicateFormulaError(definition.identifier)

    _FORMULA_REGISTRY[definition.identifier] = definition
    logger.debug(
        f"Registered formula '{definition.identifier}' "
        f"({len(definition.variables)} variables)"
    )
    return definition


def register_formula(
    identifier: str,
    *,
    name: str,
    description: str,
    variables: Mapping[str, VariableSpec],
    category: str = "general",
    formula: Optional[str] = None,
    long_description: Optional[str] = None,
):
    """
    Decorator to register a calculation function as a formula.

    Usage:
        @register_formula(
            "capital-gains-tax",
            name="Capital Gains Tax",
            description="Estimate the tax owed on an investment sale",
            variables={"basis": number("Cost Basis ($)"), ...},
        )
        def capital_gains_tax(inputs):
            ...

    The decorated function is returned unchanged.
    """
    def decorator(func: CalculationFunction) -> CalculationFunction:
        register_definition(FormulaDefinition(
            identifier=identifier,
            name=name,
            description=description,
            long_description=long_description,
            formula=formula,
            category=category,
            variables=variables,
            calculate=func,
        ))
        return func
    return decorator


def _normalize_identifier(identifier) -> Optional[str]:
    if not isinstance(identifier, str):
        return None
    key = identifier.strip().strip('/').lower()
    return key or None


def lookup(identifier) -> Optional[FormulaDefinition]:
    """
    Find a formula by identifier.

    Leading/trailing slashes and whitespace are ignored, so route segments
    such as "/tax/income" resolve. Returns None for unknown, empty or
    non-string identifiers; never raises.
    """
    key = _normalize_identifier(identifier)
    if key is None:
        return None
    return _FORMULA_REGISTRY.get(key)


def get_formula(identifier) -> FormulaDefinition:
    """
    Find a formula by identifier.

    Raises:
        FormulaNotFoundError: If the identifier is not registered
    """
    definition = lookup(identifier)
    if definition is None:
        raise FormulaNotFoundError(identifier, _FORMULA_REGISTRY.keys())
    return definition


def list_all() -> List[FormulaDefinition]:
    """All registered formulas, in registration order."""
    return list(_FORMULA_REGISTRY.values())


def list_identifiers() -> List[str]:
    return list(_FORMULA_REGISTRY.keys())


def list_categories() -> List[str]:
    """Distinct categories in order of first registration."""
    categories: List[str] = []
    for definition in _FORMULA_REGISTRY.values():
        if definition.category not in categories:
            categories.append(definition.category)
    return categories


def list_by_category(category: str) -> List[FormulaDefinition]:
    return [d for d in _FORMULA_REGISTRY.values() if d.category == category]
