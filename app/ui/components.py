# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the Finance Calculators project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Reusable UI Components
"""

from html import escape

import pandas as pd

from app.ui.utils import delta_color, format_output, humanize


def result_metrics(result):
    """
    Normalize an evaluator result into KPI dicts.
    A bare number becomes a single 'Result' metric.
    """
    if isinstance(result, dict):
        items = result.items()
    else:
        items = [("result", result)]

    return [
        {
            "label": humanize(name),
            "value": format_output(name, value),
            "delta_color": delta_color(name, value),
        }
        for name, value in items
    ]


def results_frame(result) -> pd.DataFrame:
    """Result as a two-column table (Output, Value) for st.dataframe."""
    metrics = result_metrics(result)
    return pd.DataFrame(
        [(m["label"], m["value"]) for m in metrics],
        columns=["Output", "Value"],
    )


def render_kpi_dashboard(metrics, title="Results"):
    """
    Render the KPI board as a single HTML block using CSS Grid.
    metrics: List of dicts with 'label', 'value', 'delta_color' (opt)
    """
    items_html = ""
    for m in metrics:
        color_class = f"value-{m.get('delta_color', 'neu')}"
        items_html += '<div class="kpi-item"><div class="kpi-content-bar">'
        items_html += f'<div class="kpi-label">{escape(m["label"])}</div>'
        items_html += f'<div class="kpi-value {color_class}">{escape(m["value"])}</div>'
        items_html += '</div></div>'

    html = '<div class="kpi-board">'
    if title:
        html += f'<div class="kpi-header">{escape(title)}</div>'

    grid_class = "kpi-grid-wide" if len(metrics) > 4 else "kpi-grid-narrow"
    html += f'<div class="kpi-grid {grid_class}">{items_html}</div>'
    html += '</div>'
    return html
