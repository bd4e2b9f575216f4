"""
Savings and Growth Formulas

Monthly compounding throughout. Rates are whole-number annual percents.
A zero rate falls back to straight-line accumulation rather than dividing by
a zero monthly rate.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from calculators.base import number, percentage, register_formula
from calculators.numeric import growth_factor, safe_divide

MONTHS_PER_YEAR = 12


@register_formula(
    "financial/compound",
    name="Compound Interest Calculator",
    description="See how your investments grow with compound interest",
    formula="FV = P(1 + r/12)^(12t) + PMT * ((1 + r/12)^(12t) - 1) / (r/12)",
    category="financial",
    variables={
        "principal": number("Initial Investment", default=10000,
                            help_text="Starting amount to invest"),
        "monthlyContribution": number("Monthly Contribution", default=500,
                                      help_text="Additional monthly investments"),
        "annualRate": percentage("Annual Interest Rate (%)", default=7,
                                 help_text="Expected annual return rate"),
        "years": number("Time Period (Years)", default=10,
                        help_text="Investment duration in years"),
    },
)
def compound_interest(inputs):
    principal = inputs["principal"]
    contribution = inputs["monthlyContribution"]
    monthly_rate = inputs["annualRate"] / 100 / MONTHS_PER_YEAR
    months = inputs["years"] * MONTHS_PER_YEAR

    factor = growth_factor(monthly_rate, months)
    if monthly_rate == 0:
        annuity = contribution * months
    else:
        annuity = contribution * (factor - 1) / monthly_rate

    future_value = principal * factor + annuity
    total_contributions = principal + contribution * months

    return {
        "futureValue": future_value,
        "totalContributions": total_contributions,
        "totalInterest": future_value - total_contributions,
        "effectiveRate": (safe_divide(future_value, total_contributions, default=1.0) - 1) * 100,
    }


@register_formula(
    "financial/inflation",
    name="Inflation Calculator",
    description="Calculate how inflation affects purchasing power over time",
    category="financial",
    variables={
        "currentAmount": number("Current Amount", default=10000,
                                help_text="Amount to calculate future value for"),
        "inflationRate": percentage("Annual Inflation Rate (%)", default=3,
                                    help_text="Expected annual inflation rate"),
        "years": number("Time Period (Years)", default=10,
                        help_text="Number of years to project"),
    },
)
def inflation(inputs):
    """presentValue is 0 when the inflation rate is -100% or lower."""
    current = inputs["currentAmount"]
    rate = inputs["inflationRate"] / 100
    years = inputs["years"]

    future_amount = current * growth_factor(rate, years)
    loss = future_amount - current

    return {
        "futureAmount": future_amount,
        "purchasingPowerLoss": loss,
        "presentValue": current * growth_factor(rate, -years),
        "percentageLoss": safe_divide(loss, current) * 100,
    }


@register_formula(
    "financial/savings-goal",
    name="Savings Goal Calculator",
    description="Plan how much to save each month to reach a target",
    category="financial",
    variables={
        "targetAmount": number("Target Amount", default=50000,
                               help_text="Amount you want to save"),
        "currentSavings": number("Current Savings", default=5000,
                                 help_text="Amount already saved"),
        "timeframe": number("Time to Goal (Years)", default=5,
                            help_text="Years to reach your goal"),
        "annualReturn": percentage("Expected Annual Return (%)", default=5,
                                   help_text="Expected investment return rate"),
    },
)
def savings_goal(inputs):
    """
    monthlyPayment is floored at 0 when current savings already grow past
    the target. A zero or negative timeframe needs no monthly payment.
    """
    target = inputs["targetAmount"]
    current = inputs["currentSavings"]
    monthly_rate = inputs["annualReturn"] / 100 / MONTHS_PER_YEAR
    months = inputs["timeframe"] * MONTHS_PER_YEAR

    factor = growth_factor(monthly_rate, months)
    amount_needed = target - current * factor

    if months <= 0:
        monthly_payment = 0.0
    elif monthly_rate == 0:
        monthly_payment = amount_needed / months
    else:
        monthly_payment = safe_divide(amount_needed * monthly_rate, factor - 1)
    monthly_payment = max(0.0, monthly_payment)

    total_contributions = monthly_payment * max(months, 0.0) + current
    total_interest = target - total_contributions

    return {
        "monthlyPayment": monthly_payment,
        "totalContributions": total_contributions,
        "totalInterest": total_interest,
        "effectiveRate": safe_divide(total_interest, total_contributions) * 100,
    }
