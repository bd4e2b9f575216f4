"""
Business Formulas

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from calculators.base import number, register_formula
from calculators.numeric import safe_divide


@register_formula(
    "business/break-even",
    name="Break-Even Calculator",
    description="Find how many units you need to sell to cover your costs",
    formula="breakEvenUnits = fixedCosts / (pricePerUnit - variableCostPerUnit)",
    category="business",
    variables={
        "fixedCosts": number("Fixed Costs", default=10000,
                             help_text="Total fixed costs per period"),
        "pricePerUnit": number("Price Per Unit", default=100,
                               help_text="Selling price per unit"),
        "variableCostPerUnit": number("Variable Cost Per Unit", default=60,
                                      help_text="Variable cost per unit"),
    },
)
def break_even(inputs):
    """
    With a zero or negative contribution margin no volume breaks even; units
    and revenue are reported as 0 and the (non-positive) margin is still
    shown. The margin ratio is 0 for a zero price.
    """
    price = inputs["pricePerUnit"]
    margin = price - inputs["variableCostPerUnit"]

    if margin > 0:
        units = inputs["fixedCosts"] / margin
    else:
        units = 0.0

    return {
        "breakEvenUnits": units,
        "breakEvenRevenue": units * price,
        "contributionMargin": margin,
        "contributionMarginRatio": safe_divide(margin, price) * 100,
    }
