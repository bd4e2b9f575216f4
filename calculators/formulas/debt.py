"""
Debt and Mortgage Formulas

- debt/payoff: month-by-month payoff simulation, with and without an extra
  payment, capped at 30 years
- debt/credit-card: the same simulation with new monthly charges, capped at
  50 years
- mortgage/basic: amortized principal and interest plus escrow (property tax
  and insurance)
- mortgage/refinance: current versus new amortized payment over the
  remaining term, and the months needed to recover closing costs

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

import math
from typing import Tuple

from calculators.base import number, percentage, register_formula
from calculators.numeric import growth_factor, percent_of, safe_divide

MONTHS_PER_YEAR = 12
MAX_PAYOFF_MONTHS = 360
MAX_CREDIT_CARD_MONTHS = 600


def simulate_payoff(
    balance: float,
    monthly_rate: float,
    payment: float,
    new_charges: float = 0.0,
    max_months: int = MAX_PAYOFF_MONTHS,
) -> Tuple[int, float]:
    """
    Pay ``payment`` every month until the balance is cleared.

    ``new_charges`` is added to the balance every month. Returns
    (months, total interest). Stops at ``max_months`` when the payment never
    clears the balance.
    """
    months = 0
    total_interest = 0.0
    while balance > 0 and months < max_months:
        interest = balance * monthly_rate
        total_interest += interest
        balance = balance + interest + new_charges - payment
        months += 1
    return months, total_interest


def amortized_payment(principal: float, monthly_rate: float, payments: float) -> float:
    """
    Level monthly payment that repays ``principal`` over ``payments`` months.

    A 0% rate repays in equal installments. Zero or negative payments yield 0.
    """
    if payments <= 0:
        return 0.0
    if monthly_rate == 0:
        return principal / payments
    factor = growth_factor(monthly_rate, payments)
    return safe_divide(principal * monthly_rate * factor, factor - 1)


@register_formula(
    "debt/payoff",
    name="Debt Payoff Calculator",
    description="Calculate how quickly you can pay off your debt and how much you can save",
    category="debt",
    variables={
        "debtAmount": number("Total Debt Amount", default=10000,
                             help_text="Total amount of debt to be paid off"),
        "interestRate": percentage("Annual Interest Rate", default=15,
                                   help_text="Annual interest rate on your debt"),
        "minimumPayment": number("Minimum Monthly Payment", default=200,
                                 help_text="Minimum required monthly payment"),
        "extraPayment": number("Extra Monthly Payment", default=100,
                               help_text="Additional amount you can pay each month"),
        "paymentFrequency": number("Payment Frequency", default=12,
                                   help_text="Number of payments per year (12 for monthly, 26 for bi-weekly, 52 for weekly)"),
    },
)
def debt_payoff(inputs):
    """
    Payments that never clear the balance stop at 360 months; the interest
    accrued up to then is reported. effectiveInterestRate is 0 for zero debt.

    paymentFrequency is shown on the form; the simulation is always monthly.
    """
    debt = inputs["debtAmount"]
    monthly_rate = inputs["interestRate"] / 100 / MONTHS_PER_YEAR
    total_payment = inputs["minimumPayment"] + inputs["extraPayment"]

    months_minimum, interest_minimum = simulate_payoff(debt, monthly_rate, inputs["minimumPayment"])
    months_extra, interest_extra = simulate_payoff(debt, monthly_rate, total_payment)

    return {
        "totalPayment": debt + interest_extra,
        "totalInterest": interest_extra,
        "monthsToPayoff": float(months_extra),
        "monthlyPayment": total_payment,
        "effectiveInterestRate": safe_divide(interest_extra, debt) * 100,
        "totalDebt": debt,
        "savingsFromExtra": interest_minimum - interest_extra,
        "timeReduction": float(months_minimum - months_extra),
    }


@register_formula(
    "debt/credit-card",
    name="Credit Card Payoff Calculator",
    description="See how long it takes to clear a credit card balance and what extra payments save",
    category="debt",
    variables={
        "balance": number("Current Balance", default=5000,
                          help_text="Current credit card balance"),
        "interestRate": percentage("Annual Interest Rate (APR)", default=18.9,
                                   help_text="Annual Percentage Rate (APR) on your credit card"),
        "minimumPayment": number("Minimum Payment", default=100,
                                 help_text="Minimum required monthly payment"),
        "additionalPayment": number("Additional Monthly Payment", default=50,
                                    help_text="Extra amount you can pay each month"),
        "newPurchases": number("Monthly New Purchases", default=0,
                               help_text="Expected new charges each month"),
    },
)
def credit_card_payoff(inputs):
    """
    New purchases are charged every month before the payment. A balance that
    is never cleared stops at 600 months. totalPayment counts the new
    purchases paid off along the way.
    """
    balance = inputs["balance"]
    monthly_rate = inputs["interestRate"] / 100 / MONTHS_PER_YEAR
    new_purchases = inputs["newPurchases"]
    total_payment = inputs["minimumPayment"] + inputs["additionalPayment"]

    months_minimum, interest_minimum = simulate_payoff(
        balance, monthly_rate, inputs["minimumPayment"],
        new_charges=new_purchases, max_months=MAX_CREDIT_CARD_MONTHS,
    )
    months_extra, interest_extra = simulate_payoff(
        balance, monthly_rate, total_payment,
        new_charges=new_purchases, max_months=MAX_CREDIT_CARD_MONTHS,
    )

    return {
        "totalPayment": balance + interest_extra + new_purchases * months_extra,
        "totalInterest": interest_extra,
        "monthsToPayoff": float(months_extra),
        "monthlyPayment": total_payment,
        "effectiveInterestRate": safe_divide(interest_extra, balance) * 100,
        "totalDebt": balance,
        "interestSaved": interest_minimum - interest_extra,
        "timeReduction": float(months_minimum - months_extra),
    }


@register_formula(
    "mortgage/basic",
    name="Mortgage Calculator",
    description="Calculate your monthly mortgage payments and total costs",
    formula="M = L * r(1 + r)^n / ((1 + r)^n - 1)",
    category="mortgage",
    variables={
        "homePrice": number("Home Price", default=300000,
                            help_text="Total purchase price of the home"),
        "downPaymentPercent": percentage("Down Payment (%)", default=20,
                                         help_text="Percentage of home price as down payment"),
        "interestRate": percentage("Annual Interest Rate", default=6.5,
                                   help_text="Annual interest rate for the mortgage"),
        "loanTerm": number("Loan Term (Years)", default=30,
                           help_text="Length of the mortgage in years"),
        "propertyTax": percentage("Annual Property Tax", default=1.2,
                                  help_text="Annual property tax rate"),
        "homeInsurance": number("Annual Home Insurance", default=1200,
                                help_text="Annual home insurance premium"),
    },
)
def basic_mortgage(inputs):
    """
    A 0% rate repays the loan in equal installments. A zero or negative term
    has no principal-and-interest payment.
    """
    home_price = inputs["homePrice"]
    down_payment = percent_of(home_price, inputs["downPaymentPercent"])
    loan_amount = home_price - down_payment
    monthly_rate = inputs["interestRate"] / 100 / MONTHS_PER_YEAR
    payments = max(inputs["loanTerm"] * MONTHS_PER_YEAR, 0.0)

    principal_and_interest = amortized_payment(loan_amount, monthly_rate, payments)
    monthly_property_tax = percent_of(home_price, inputs["propertyTax"]) / MONTHS_PER_YEAR
    monthly_insurance = inputs["homeInsurance"] / MONTHS_PER_YEAR
    total_monthly = principal_and_interest + monthly_property_tax + monthly_insurance

    return {
        "monthlyPayment": total_monthly,
        "totalPayment": total_monthly * payments,
        "totalInterest": principal_and_interest * payments - loan_amount if payments else 0.0,
        "loanAmount": loan_amount,
        "downPaymentAmount": down_payment,
        "principalPaid": loan_amount,
        "interestRate": inputs["interestRate"],
        "loanTerm": inputs["loanTerm"],
    }


@register_formula(
    "mortgage/refinance",
    name="Mortgage Refinance Calculator",
    description="Compare your current mortgage payment with a refinanced one and find the break-even point",
    formula="breakEvenMonths = ceil(closingCosts / monthlySavings)",
    category="mortgage",
    variables={
        "currentBalance": number("Current Loan Balance", default=250000,
                                 help_text="Remaining balance on your current mortgage"),
        "currentRate": percentage("Current Interest Rate", default=5.5,
                                  help_text="Your current mortgage interest rate"),
        "newRate": percentage("New Interest Rate", default=4.0,
                              help_text="Interest rate for the new loan"),
        "remainingYears": number("Remaining Years", default=25,
                                 help_text="Years remaining on your current mortgage"),
        "closingCosts": number("Closing Costs", default=3000,
                               help_text="Total costs to refinance the loan"),
    },
)
def mortgage_refinance(inputs):
    """
    Both loans run over the remaining term. breakEvenMonths is 0 when the new
    loan saves nothing each month or there are no closing costs to recover.
    """
    balance = inputs["currentBalance"]
    closing_costs = inputs["closingCosts"]
    payments = max(inputs["remainingYears"] * MONTHS_PER_YEAR, 0.0)

    old_payment = amortized_payment(balance, inputs["currentRate"] / 100 / MONTHS_PER_YEAR, payments)
    new_payment = amortized_payment(balance, inputs["newRate"] / 100 / MONTHS_PER_YEAR, payments)
    monthly_savings = old_payment - new_payment

    if monthly_savings > 0 and closing_costs > 0:
        months = closing_costs / monthly_savings
        break_even = float(math.ceil(months)) if math.isfinite(months) else math.inf
    else:
        break_even = 0.0

    return {
        "newMonthlyPayment": new_payment,
        "oldMonthlyPayment": old_payment,
        "monthlySavings": monthly_savings,
        "totalSavings": monthly_savings * payments - closing_costs,
        "breakEvenMonths": break_even,
    }
