"""
Emergency Fund Formula

Recommended reserve starts at 3-6 months of expenses and grows by one month
for every point of job instability (10 = fully stable) and by one month per
dependent, up to three.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import math

from calculators.base import number, register_formula
from calculators.numeric import safe_divide

BASE_MIN_MONTHS = 3
BASE_MAX_MONTHS = 6
MAX_STABILITY = 10
MAX_DEPENDENT_MONTHS = 3


@register_formula(
    "emergency/fund",
    name="Emergency Fund Calculator",
    description="Work out how large your emergency fund should be",
    category="emergency",
    variables={
        "monthlyIncome": number("Monthly Income", default=5000,
                                help_text="Your total monthly income after taxes"),
        "monthlyExpenses": number("Monthly Expenses", default=4000,
                                  help_text="Your total monthly expenses"),
        "currentSavings": number("Current Emergency Savings", default=5000,
                                 help_text="Amount currently saved for emergencies"),
        "monthlySavings": number("Monthly Savings Contribution", default=500,
                                 help_text="Amount you can save each month"),
        "jobStability": number("Job Stability (1-10)", default=5,
                               help_text="1 = Very unstable, 10 = Very stable"),
        "dependents": number("Number of Dependents", default=0,
                             help_text="Number of people who depend on your income"),
    },
)
def emergency_fund(inputs):
    """
    monthsOfCoverage is 0 when expenses are 0. timeToGoal is 0 when the goal
    is already met and infinite (never reached) when nothing is saved each
    month.

    monthlyIncome is collected for the form but does not change the result.
    """
    expenses = inputs["monthlyExpenses"]
    current = inputs["currentSavings"]
    monthly_savings = inputs["monthlySavings"]

    extra_months = (MAX_STABILITY - inputs["jobStability"]) + min(inputs["dependents"], MAX_DEPENDENT_MONTHS)
    recommended_min = expenses * (BASE_MIN_MONTHS + extra_months)
    recommended_max = expenses * (BASE_MAX_MONTHS + extra_months)

    savings_goal = (recommended_min + recommended_max) / 2
    shortfall = max(0.0, savings_goal - current)

    if shortfall <= 0:
        time_to_goal = 0.0
    elif monthly_savings <= 0:
        time_to_goal = math.inf
    else:
        time_to_goal = shortfall / monthly_savings

    return {
        "monthlyExpenses": expenses,
        "recommendedMinimum": recommended_min,
        "recommendedMaximum": recommended_max,
        "currentShortfall": shortfall,
        "monthsOfCoverage": safe_divide(current, expenses),
        "savingsGoal": savings_goal,
        "monthlyContribution": monthly_savings,
        "timeToGoal": time_to_goal,
    }
