"""Plotly visualisation helpers for the budget planner.

Each function accepts the :class:`~budget_planner.models.Calculations`
produced by :func:`budget_planner.calculations.aggregate` and returns a
``plotly.graph_objects.Figure`` that Streamlit renders via
``st.plotly_chart``.  Charts never recompute the budget; they only
reshape numbers already calculated.
"""

from __future__ import annotations

import numpy as np
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .calculations import summary_frame
from .models import CATEGORIES, Calculations

CATEGORY_COLORS = {
    "Needs": "#3b82f6",
    "Wants": "#a855f7",
    "Savings": "#22c55e",
    "Unallocated": "#9ca3af",
}


def _empty_figure(title: str = "No data to display") -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title=title)
    return fig


def progress_width(percentage: float, minimum: float = 5.0, maximum: float = 100.0) -> float:
    """Clamp a percentage to the width used for a progress bar.

    A small minimum keeps an empty category visible on the bar.
    """
    return float(np.clip(np.nan_to_num(percentage), minimum, maximum))


def create_allocation_chart(calculations: Calculations, title: str | None = None) -> go.Figure:
    """Donut chart of how income is split between the three categories.

    Parameters
    ----------
    calculations : Calculations
        Aggregated budget.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Donut chart with one slice per category plus any unallocated income.
    """
    if calculations.total_income <= 0 and calculations.total_expenses <= 0:
        return _empty_figure()
    values = {category.capitalize(): calculations.total_for(category) for category in CATEGORIES}
    values["Unallocated"] = max(calculations.remaining, 0.0)
    df = pd.DataFrame({"Category": list(values.keys()), "Amount": list(values.values())})
    df = df[df["Amount"] > 0]
    fig = px.pie(
        df,
        names="Category",
        values="Amount",
        hole=0.45,
        color="Category",
        color_discrete_map=CATEGORY_COLORS,
    )
    fig.update_layout(title=title or "Budget allocation")
    return fig


def create_target_comparison_chart(calculations: Calculations, title: str | None = None) -> go.Figure:
    """Grouped bar chart of actual versus ideal dollars per category.

    Parameters
    ----------
    calculations : Calculations
        Aggregated budget.
    title : str, optional
        Chart title.

    Returns
    -------
    plotly.graph_objects.Figure
        Bar chart with an ``Actual`` and an ``Ideal (50/30/20)`` bar per category.
    """
    if calculations.total_income <= 0 and calculations.total_expenses <= 0:
        return _empty_figure()
    frame = summary_frame(calculations)
    long_df = frame.melt(
        id_vars="Category",
        value_vars=["Amount", "Ideal"],
        var_name="Metric",
        value_name="Dollars",
    )
    long_df["Metric"] = long_df["Metric"].map({"Amount": "Actual", "Ideal": "Ideal (50/30/20)"})
    fig = px.bar(long_df, x="Category", y="Dollars", color="Metric", barmode="group")
    fig.update_layout(
        title=title or "Actual vs. ideal allocation",
        xaxis_title="Category",
        yaxis_title="Amount ($)",
    )
    return fig
