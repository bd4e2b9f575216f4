# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the Finance Calculators project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Display helpers for calculator outputs.
"""

import math
import re

PERCENT_HINTS = ("rate", "roi", "ratio", "percentage", "annualized")
COUNT_HINTS = ("months", "units", "timetogoal", "timereduction", "loanterm")


def humanize(name: str) -> str:
    """'capitalGain' -> 'Capital Gain', 'roi' -> 'ROI'."""
    if name.lower() == "roi":
        return "ROI"
    words = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", name).split()
    return " ".join(w.upper() if w.lower() == "roi" else w[:1].upper() + w[1:] for w in words)


def output_format(name: str) -> str:
    """Guess how to display an output: 'percent', 'count' or 'currency'."""
    key = name.lower()
    if any(hint in key for hint in COUNT_HINTS):
        return "count"
    if any(hint in key for hint in PERCENT_HINTS):
        return "percent"
    return "currency"


def format_output(name: str, value: float) -> str:
    if not math.isfinite(value):
        return "n/a"

    kind = output_format(name)
    if kind == "percent":
        return f"{value:,.2f}%"
    if kind == "count":
        return f"{value:,.1f}"
    if value < 0:
        return f"-${abs(value):,.2f}"
    return f"${value:,.2f}"


def delta_color(name: str, value: float) -> str:
    """KPI colour class for signed money outputs ('pos', 'neg' or 'neu')."""
    if output_format(name) != "currency" or value == 0 or not math.isfinite(value):
        return "neu"
    return "pos" if value > 0 else "neg"
