# -----------------------------------------------------------------------------
# (c) 2026 Andreas Wagner. All Rights Reserved.
#
# This code is part of the Finance Calculators project.
# Unauthorized usage or distribution is not permitted.
# -----------------------------------------------------------------------------

"""
Application Styles and Design Tokens
"""

APP_STYLE = """
<style>
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&family=JetBrains+Mono:wght@400;500;700&display=swap');

    .block-container {
        padding-top: 3rem !important;
        padding-bottom: 3rem !important;
        max-width: 960px;
    }

    :root {
        --card-bg: rgba(28, 34, 45, 0.45);
        --card-border: rgba(75, 125, 163, 0.35);
        --text-primary: #ecf3fa;
        --text-secondary: #a8b5c8;
        --accent-primary: #4B7DA3;
        --positive: #6fbf8e;
        --negative: #d9776f;

        --font-primary: 'Inter', sans-serif;
        --font-mono: 'JetBrains Mono', monospace;
        --radius: 10px;
    }

    .formula-text {
        font-family: var(--font-mono);
        color: var(--text-secondary);
        font-size: 0.85rem;
        padding: 0.5rem 0.75rem;
        border-left: 3px solid var(--accent-primary);
        margin-bottom: 1rem;
    }

    /* KPI board */
    .kpi-board {
        background: var(--card-bg);
        border: 1px solid var(--card-border);
        border-radius: var(--radius);
        padding: 1rem 1.25rem;
        margin-top: 1rem;
    }
    .kpi-header {
        font-family: var(--font-primary);
        font-weight: 600;
        font-size: 1.1rem;
        color: var(--text-primary);
        margin-bottom: 0.75rem;
    }
    .kpi-grid {
        display: grid;
        gap: 0.75rem;
    }
    .kpi-grid-narrow { grid-template-columns: repeat(2, 1fr); }
    .kpi-grid-wide { grid-template-columns: repeat(3, 1fr); }
    .kpi-content-bar {
        border-left: 2px solid var(--accent-primary);
        padding-left: 0.75rem;
    }
    .kpi-label {
        font-size: 0.75rem;
        text-transform: uppercase;
        letter-spacing: 0.04em;
        color: var(--text-secondary);
    }
    .kpi-value {
        font-family: var(--font-mono);
        font-size: 1.25rem;
        color: var(--text-primary);
    }
    .value-pos { color: var(--positive); }
    .value-neg { color: var(--negative); }

    @media (max-width: 640px) {
        .kpi-grid-narrow, .kpi-grid-wide { grid-template-columns: 1fr; }
    }
</style>
"""
