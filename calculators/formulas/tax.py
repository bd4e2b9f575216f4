"""
Tax Formulas

- capital-gains-tax: flat-rate tax on the gain of a single sale
- tax/capital-gains: holding-period aware variant (long-term rate capped at 20%)
- tax/income: simplified federal brackets plus a flat state rate

Both capital gains formulas apply the clamp-on-loss rule: when the gain is
zero or negative the tax is 0, while the gain itself is still reported with
its true sign.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from calculators.base import number, percentage, register_formula
from calculators.numeric import percent_of, safe_divide

# Holding period (months) from which the long-term rate applies
LONG_TERM_HOLDING_MONTHS = 12
LONG_TERM_MAX_RATE = 20.0

# (lower bound of taxable income, tax owed at that bound, marginal rate)
FEDERAL_BRACKETS = [
    (539900, 162718.0, 0.37),
    (215950, 49335.0, 0.35),
    (170050, 34647.0, 0.32),
    (89075, 15213.0, 0.24),
    (41775, 4807.0, 0.22),
    (10275, 1027.5, 0.12),
]
FEDERAL_BASE_RATE = 0.10


@register_formula(
    "capital-gains-tax",
    name="Capital Gains Tax",
    description="Estimate the tax owed on the profit from selling an investment",
    formula="taxOwed = (salePrice - basis) * taxRate",
    category="tax",
    variables={
        "basis": number("Initial Investment Value ($)"),
        "salePrice": number("Final Investment Value ($)"),
        "taxRate": percentage("Tax Rate (%)", default=15),
    },
)
def capital_gains_tax(inputs):
    """
    Clamp-on-loss: a loss or break-even sale owes no tax; capitalGain keeps
    its sign for display. Tax owed is never negative, even for a negative rate.
    """
    capital_gain = inputs["salePrice"] - inputs["basis"]
    tax_owed = max(0.0, percent_of(capital_gain, inputs["taxRate"])) if capital_gain > 0 else 0.0
    return {
        "capitalGain": capital_gain,
        "taxOwed": tax_owed,
    }


@register_formula(
    "tax/capital-gains",
    name="Capital Gains Tax Calculator",
    description="Calculate tax on investment profits",
    formula="taxAmount = max(0, (salePrice - purchasePrice) * rate), rate = min(20%, bracket) when held >= 12 months",
    category="tax",
    variables={
        "purchasePrice": number("Purchase Price", default=10000,
                                help_text="Original purchase price of the investment"),
        "salePrice": number("Sale Price", default=15000,
                            help_text="Price at which the investment was sold"),
        "holdingPeriod": number("Holding Period (Months)", default=24,
                                help_text="Number of months the investment was held"),
        "taxBracket": percentage("Tax Bracket (%)", default=25,
                                 help_text="Your current income tax bracket"),
    },
)
def capital_gains_by_holding_period(inputs):
    """
    Clamp-on-loss applies: taxAmount is 0 for a loss, effectiveRate is 0 and
    netProfit equals the (negative) gain.
    """
    capital_gains = inputs["salePrice"] - inputs["purchasePrice"]

    tax_rate = inputs["taxBracket"]
    if inputs["holdingPeriod"] >= LONG_TERM_HOLDING_MONTHS:
        tax_rate = min(LONG_TERM_MAX_RATE, tax_rate)

    tax_amount = max(0.0, percent_of(capital_gains, tax_rate)) if capital_gains > 0 else 0.0
    effective_rate = tax_amount / capital_gains * 100 if capital_gains > 0 else 0.0

    return {
        "capitalGains": capital_gains,
        "taxAmount": tax_amount,
        "effectiveRate": effective_rate,
        "netProfit": capital_gains - tax_amount,
    }


def federal_income_tax(taxable_income: float) -> float:
    """Simplified progressive federal tax on taxable income."""
    for lower_bound, base_tax, rate in FEDERAL_BRACKETS:
        if taxable_income > lower_bound:
            return base_tax + (taxable_income - lower_bound) * rate
    return taxable_income * FEDERAL_BASE_RATE


@register_formula(
    "tax/income",
    name="Income Tax Calculator",
    description="Calculate your income tax and take-home pay",
    category="tax",
    variables={
        "grossIncome": number("Annual Gross Income", default=50000,
                              help_text="Your total annual income before taxes"),
        "deductions": number("Total Deductions", default=12950,
                             help_text="Standard deduction or total itemized deductions"),
        "taxCredits": number("Tax Credits", default=0,
                             help_text="Total tax credits you qualify for"),
        "stateTaxRate": percentage("State Tax Rate", default=5,
                                   help_text="Your state income tax rate"),
    },
)
def income_tax(inputs):
    """
    Taxable income and total tax are floored at 0 (credits cannot produce a
    refund). effectiveRate is 0 for zero gross income.
    """
    gross_income = inputs["grossIncome"]
    taxable_income = max(0.0, gross_income - inputs["deductions"])

    federal_tax = federal_income_tax(taxable_income)
    state_tax = percent_of(taxable_income, inputs["stateTaxRate"])
    total_tax = max(0.0, federal_tax + state_tax - inputs["taxCredits"])

    take_home_pay = gross_income - total_tax

    return {
        "taxableIncome": taxable_income,
        "totalTax": total_tax,
        "effectiveRate": safe_divide(total_tax, gross_income) * 100,
        "takeHomePay": take_home_pay,
        "monthlyTakeHome": take_home_pay / 12,
    }
