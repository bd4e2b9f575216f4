# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the Finance Calculators project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Finance Calculators - Streamlit Application

Renders any registered calculator as a form:
- Sidebar navigation by category
- Inputs pre-populated from declared defaults
- Per-field validation messages
- KPI board and table of named results

Run with: streamlit run app/calculator_app.py
"""

import sys
from html import escape
from pathlib import Path

# Fix module imports - add project root to path
_root = Path(__file__).parent.parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

import streamlit as st

from calculators import (
    FormulaError,
    default_inputs,
    evaluate,
    lookup,
    validate_inputs,
)
from publishing import calculator_url, load_site_config
from app.ui.components import render_kpi_dashboard, result_metrics, results_frame
from app.ui.sidebar import render_calculator_picker
from app.ui.styles import APP_STYLE
from utils.logging_config import setup_logger

logger = setup_logger(__name__)

st.set_page_config(
    page_title="Finance Calculators",
    page_icon="🧮",
    layout="centered",
    initial_sidebar_state="expanded"
)

st.markdown(APP_STYLE, unsafe_allow_html=True)


def render_form(formula):
    """
    Render one text input per declared variable.
    Returns the raw mapping (strings) or None until submitted.
    """
    defaults = default_inputs(formula)

    with st.form(key=f"form-{formula.identifier}"):
        raw_inputs = {}
        for name, spec in formula.variables.items():
            default = defaults.get(name)
            label = spec.label if not spec.is_percentage or "%" in spec.label else f"{spec.label} (%)"
            raw_inputs[name] = st.text_input(
                label,
                value="" if default is None else f"{default:g}",
                help=spec.help_text,
                key=f"{formula.identifier}:{name}",
            )
        submitted = st.form_submit_button("Calculate", type="primary")

    return raw_inputs if submitted else None


def main():
    """Main application entry point."""
    identifier = render_calculator_picker()
    formula = lookup(identifier)

    if formula is None:
        st.error("Calculator not found.")
        logger.info(f"Unknown calculator requested: {identifier!r}")
        return

    st.title(formula.name)
    st.caption(formula.description)
    if formula.long_description:
        st.markdown(formula.long_description)
    if formula.formula:
        st.markdown(f'<div class="formula-text">{escape(formula.formula)}</div>', unsafe_allow_html=True)

    raw_inputs = render_form(formula)
    if raw_inputs is None:
        return

    issues = validate_inputs(formula, raw_inputs)
    if issues:
        for issue in issues:
            label = formula.variables[issue.name].label
            st.error(f"{label}: {issue}")
        return

    try:
        result = evaluate(formula, raw_inputs)
    except FormulaError as e:
        st.error(f"Could not calculate: {e}")
        return

    st.markdown(render_kpi_dashboard(result_metrics(result)), unsafe_allow_html=True)

    with st.expander("Result table"):
        st.dataframe(results_frame(result), hide_index=True, use_container_width=True)

    site = load_site_config()
    st.caption(f"Link to this calculator: {calculator_url(site, formula)}")


if __name__ == "__main__":
    main()
