# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the Finance Calculators project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

import streamlit as st

from calculators import list_by_category, list_categories, lookup
from utils.logging_config import setup_logger

logger = setup_logger(__name__)


def render_calculator_picker():
    """
    Sidebar navigation grouped by category.

    The selection is mirrored into the ``calculator`` query parameter so a
    calculator page can be linked directly. Returns the selected identifier.
    """
    requested = st.query_params.get("calculator")

    with st.sidebar:
        st.markdown("### CALCULATORS")

        categories = list_categories()
        requested_formula = lookup(requested) if requested else None
        if requested and requested_formula is None:
            st.warning(f"Calculator not found: {requested}")
            logger.info(f"Unknown calculator requested: {requested!r}")
        default_category = requested_formula.category if requested_formula else categories[0]

        category = st.selectbox(
            "Category",
            categories,
            index=categories.index(default_category),
            format_func=lambda c: c.replace('-', ' ').title(),
        )

        formulas = list_by_category(category)
        identifiers = [f.identifier for f in formulas]
        names = {f.identifier: f.name for f in formulas}
        if requested_formula and requested_formula.identifier in identifiers:
            index = identifiers.index(requested_formula.identifier)
        else:
            index = 0

        identifier = st.radio(
            "Calculator",
            identifiers,
            index=index,
            format_func=lambda i: names[i],
            label_visibility="collapsed",
        )

    if identifier != requested:
        st.query_params["calculator"] = identifier
    return identifier
