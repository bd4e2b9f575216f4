"""
Formula Evaluator

Validation-then-compute pipeline applied to a raw input mapping:

1. Completeness - every declared variable is supplied or has a default
2. Coercion - every value becomes a finite float
3. Extra keys - ignored
4. Invocation - the calculation function receives a read-only mapping of
   exactly the declared variables; its result is returned unmodified

The evaluator keeps no state between calls and is safe to use from any
number of threads.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import math
from decimal import Decimal, InvalidOperation
from numbers import Real
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union

from calculators.base import FormulaDefinition, FormulaResult, get_formula
from calculators.errors import (
    CalculationError,
    FormulaError,
    FormulaInputError,
    InvalidNumberError,
    MissingVariableError,
)
from utils.logging_config import setup_logger, get_perf_logger

logger = setup_logger(__name__)

FormulaRef = Union[FormulaDefinition, str]
EvaluationOutcome = Tuple[str, Union[FormulaResult, FormulaError]]


def _resolve(formula: FormulaRef) -> FormulaDefinition:
    if isinstance(formula, FormulaDefinition):
        return formula
    return get_formula(formula)


def coerce_number(name: str, raw_value: Any) -> float:
    """
    Coerce one raw form value to a finite float.

    Accepts ints, floats, Decimals and numeric strings (surrounding whitespace
    is ignored). Booleans, empty strings, text, NaN and infinities are
    rejected.

    Raises:
        InvalidNumberError: If the value is not a finite number
    """
    if isinstance(raw_value, bool):
        raise InvalidNumberError(name, raw_value)

    if isinstance(raw_value, str):
        text = raw_value.strip()
        if not text:
            raise InvalidNumberError(name, raw_value)
        try:
            value = float(text)
        except ValueError:
            raise InvalidNumberError(name, raw_value) from None
    elif isinstance(raw_value, Decimal):
        try:
            value = float(raw_value)
        except (InvalidOperation, ValueError):
            raise InvalidNumberError(name, raw_value) from None
    elif isinstance(raw_value, Real):
        try:
            value = float(raw_value)
        except OverflowError:
            raise InvalidNumberError(name, raw_value) from None
    else:
        raise InvalidNumberError(name, raw_value)

    if not math.isfinite(value):
        raise InvalidNumberError(name, raw_value)
    return value


def _completed_inputs(formula: FormulaDefinition, raw_inputs: Mapping[str, Any]) -> Dict[str, Any]:
    """Declared variables only, defaults filled in; raises on the first gap."""
    completed = {}
    for name, spec in formula.variables.items():
        raw_value = raw_inputs.get(name)
        if raw_value is None:
            if not spec.has_default:
                raise MissingVariableError(name)
            raw_value = spec.default
        completed[name] = raw_value
    return completed


def coerce_inputs(formula: FormulaRef, raw_inputs: Mapping[str, Any]) -> Dict[str, float]:
    """
    Run completeness and coercion checks, returning the numeric inputs.

    Keys that are not declared variables are dropped. Percentages are kept as
    entered (15 stays 15).

    Raises:
        FormulaNotFoundError: If an identifier is given and not registered
        MissingVariableError: For the first declared variable with no value
        InvalidNumberError: For the first value that is not a finite number
    """
    definition = _resolve(formula)
    completed = _completed_inputs(definition, raw_inputs)
    return {name: coerce_number(name, raw_value) for name, raw_value in completed.items()}


def validate_inputs(formula: FormulaRef, raw_inputs: Mapping[str, Any]) -> List[FormulaInputError]:
    """
    Collect every per-field problem for form display.

    Returns an empty list when ``evaluate`` would accept the inputs.
    """
    definition = _resolve(formula)
    issues: List[FormulaInputError] = []

    for name, spec in definition.variables.items():
        raw_value = raw_inputs.get(name)
        if raw_value is None:
            if spec.has_default:
                continue
            issues.append(MissingVariableError(name))
            continue
        try:
            coerce_number(name, raw_value)
        except InvalidNumberError as e:
            issues.append(e)

    return issues


def default_inputs(formula: FormulaRef) -> Dict[str, float]:
    """Declared defaults, for pre-populating a form. Variables without one are omitted."""
    definition = _resolve(formula)
    return {
        name: spec.default
        for name, spec in definition.variables.items()
        if spec.has_default
    }


def evaluate(formula: FormulaRef, raw_inputs: Mapping[str, Any]) -> FormulaResult:
    """
    Validate raw inputs and run the formula's calculation function.

    Args:
        formula: FormulaDefinition or registry identifier
        raw_inputs: Variable name -> raw value (string or number)

    Returns:
        A float or a dict of named floats, exactly as the calculation
        function produced it

    Raises:
        FormulaNotFoundError: If an identifier is given and not registered
        MissingVariableError: Declared variable absent with no default
        InvalidNumberError: Value is not a finite number
        CalculationError: The calculation function raised
    """
    definition = _resolve(formula)
    inputs = coerce_inputs(definition, raw_inputs)

    try:
        return definition.calculate(MappingProxyType(inputs))
    except Exception as e:
        logger.exception(f"Calculation failed for '{definition.identifier}'")
        raise CalculationError(definition.identifier, e) from e


def evaluate_many(requests: Iterable[Tuple[FormulaRef, Mapping[str, Any]]]) -> List[EvaluationOutcome]:
    """
    Evaluate several formulas, isolating failures per item.

    Args:
        requests: (formula or identifier, raw inputs) pairs

    Returns:
        (identifier, result or FormulaError) pairs in request order
    """
    outcomes: List[EvaluationOutcome] = []

    with get_perf_logger(logger, "evaluate_many", threshold_ms=500):
        for formula, raw_inputs in requests:
            identifier = formula.identifier if isinstance(formula, FormulaDefinition) else str(formula)
            try:
                outcomes.append((identifier, evaluate(formula, raw_inputs)))
            except FormulaError as e:
                logger.warning(f"Skipping '{identifier}': {e}")
                outcomes.append((identifier, e))

    failed = sum(1 for _, outcome in outcomes if isinstance(outcome, FormulaError))
    if failed:
        logger.info(f"Evaluated {len(outcomes)} formulas, {failed} failed")
    return outcomes
