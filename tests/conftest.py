"""
Shared fixtures for the calculator test-suite.
"""

import pytest

from calculators import base
from calculators.base import FormulaDefinition, number, percentage
from publishing.site_config import SiteConfig


@pytest.fixture
def isolated_registry(monkeypatch):
    """
    Copy of the live registry for tests that register formulas.
    Restored automatically after the test.
    """
    registry = dict(base._FORMULA_REGISTRY)
    monkeypatch.setattr(base, "_FORMULA_REGISTRY", registry)
    return registry


@pytest.fixture
def spy_formula():
    """
    Unregistered two-variable formula that records every call.
    Yields (definition, calls); calls holds the inputs of every invocation.
    """
    calls = []

    def calculate(inputs):
        calls.append(dict(inputs))
        return inputs["amount"] * inputs["rate"] / 100

    definition = FormulaDefinition(
        identifier="test/spy",
        name="Spy",
        description="Records its calls",
        variables={
            "amount": number("Amount"),
            "rate": percentage("Rate", default=10),
        },
        calculate=calculate,
    )
    return definition, calls


@pytest.fixture
def site():
    return SiteConfig(
        name="Test Calculators",
        url="https://calc.example.com/",
        description="Calculators for tests",
    )
