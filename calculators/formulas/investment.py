"""
Return on Investment Formulas

- roi/general: total and annualized ROI between two values
- investment/returns: price growth plus simple (non-reinvested) dividends
- investment/portfolio: target amounts and buy/sell adjustments for a
  stocks, bonds and cash split

Edge cases: a zero initial investment reports 0% ROI instead of dividing by
zero; a non-positive final value annualizes to -100%; a zero or negative
period annualizes to 0%.

Copyright (c) 2026 Andreas Wagner. All rights reserved.
"""

from calculators.base import number, percentage, register_formula
from calculators.numeric import annualized_percent, growth_factor, percent_of, safe_divide


@register_formula(
    "roi/general",
    name="General ROI Calculator",
    description="Calculate return on investment for various scenarios",
    formula="roi = (finalValue - initialInvestment) / initialInvestment",
    category="roi",
    variables={
        "initialInvestment": number("Initial Investment", default=1000,
                                    help_text="The amount of money initially invested"),
        "finalValue": number("Final Value", default=1500,
                             help_text="The final value of the investment"),
        "timePeriod": number("Time Period (Years)", default=1,
                             help_text="Investment duration in years"),
    },
)
def general_roi(inputs):
    initial = inputs["initialInvestment"]
    final = inputs["finalValue"]

    total_return = final - initial
    ratio = safe_divide(final, initial)

    return {
        "totalReturn": total_return,
        "roi": safe_divide(total_return, initial) * 100,
        "annualizedRoi": annualized_percent(ratio, inputs["timePeriod"]) if initial != 0 else 0.0,
    }


@register_formula(
    "investment/returns",
    name="Investment Returns Calculator",
    description="Calculate total returns including dividends and capital gains",
    category="investment",
    variables={
        "initialInvestment": number("Initial Investment", default=10000,
                                    help_text="Starting investment amount"),
        "yearsHeld": number("Investment Period (Years)", default=5,
                            help_text="Number of years investment is held"),
        "annualDividendYield": percentage("Annual Dividend Yield (%)", default=2,
                                          help_text="Expected annual dividend yield percentage"),
        "expectedGrowthRate": percentage("Expected Annual Growth Rate (%)", default=7,
                                         help_text="Expected annual price appreciation rate"),
    },
)
def investment_returns(inputs):
    initial = inputs["initialInvestment"]
    years = inputs["yearsHeld"]

    final_value = initial * growth_factor(inputs["expectedGrowthRate"] / 100, years)
    capital_gains = final_value - initial
    total_dividends = percent_of(initial, inputs["annualDividendYield"]) * years

    if initial != 0:
        annualized = annualized_percent((final_value + total_dividends) / initial, years)
    else:
        annualized = 0.0

    return {
        "totalReturn": capital_gains + total_dividends,
        "annualizedReturn": annualized,
        "totalDividends": total_dividends,
        "capitalGains": capital_gains,
        "finalValue": final_value,
    }


@register_formula(
    "investment/portfolio",
    name="Portfolio Rebalancing Calculator",
    description="Calculate adjustments needed to rebalance your investment portfolio",
    category="investment",
    variables={
        "currentStocks": number("Current Stock Value", default=60000,
                                help_text="Current value of stocks in portfolio"),
        "currentBonds": number("Current Bond Value", default=30000,
                               help_text="Current value of bonds in portfolio"),
        "currentCash": number("Current Cash Value", default=10000,
                              help_text="Current cash holdings"),
        "targetStocks": percentage("Target Stock Allocation (%)", default=60,
                                   help_text="Desired percentage in stocks"),
        "targetBonds": percentage("Target Bond Allocation (%)", default=30,
                                  help_text="Desired percentage in bonds"),
        "targetCash": percentage("Target Cash Allocation (%)", default=10,
                                 help_text="Desired percentage in cash"),
    },
)
def portfolio_rebalancing(inputs):
    """
    Targets are shares of the current total. A positive adjustment means buy
    (or add cash), a negative one sell. Targets that do not sum to 100% are
    applied as entered.
    """
    stocks = inputs["currentStocks"]
    bonds = inputs["currentBonds"]
    cash = inputs["currentCash"]
    total = stocks + bonds + cash

    stocks_target = percent_of(total, inputs["targetStocks"])
    bonds_target = percent_of(total, inputs["targetBonds"])
    cash_target = percent_of(total, inputs["targetCash"])

    return {
        "stocksTarget": stocks_target,
        "bondsTarget": bonds_target,
        "cashTarget": cash_target,
        "stocksAdjustment": stocks_target - stocks,
        "bondsAdjustment": bonds_target - bonds,
        "cashAdjustment": cash_target - cash,
    }
