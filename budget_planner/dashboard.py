"""Streamlit app for the 50/30/20 budget calculator.

The page collects income and expenses in a form and only recalculates
when the user presses "Calculate Budget".  The calculated state lives in
a :class:`~budget_planner.session.BudgetSession` stored in
``st.session_state``; "Start Over" calls its ``reset`` method.

To run the dashboard from the command line::

    streamlit run budget_planner/Home.py
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, MutableMapping, Optional

import streamlit as st

if __package__:
    from . import visualization as viz
    from .calculations import items_frame, summary_frame
    from .config import configure_logging
    from .form import (
        EXPENSE_FIELDS,
        INCOME_FIELDS,
        budget_from_form,
        default_form_values,
        fields_for,
        validate_form_values,
    )
    from .formatting import (
        escape_dollar_for_markdown,
        escape_markdown_dollars,
        format_currency,
        format_percentage,
    )
    from .models import CATEGORIES, BALANCE_SUCCESS, BALANCE_WARNING
    from .pages.config import get_copy
    from .report import render_markdown_report
    from .session import BudgetSession
else:
    # Direct execution (``streamlit run budget_planner/dashboard.py``)
    CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
    PARENT_DIR = os.path.dirname(CURRENT_DIR)
    if PARENT_DIR not in sys.path:
        sys.path.insert(0, PARENT_DIR)
    from budget_planner import visualization as viz  # type: ignore
    from budget_planner.calculations import items_frame, summary_frame  # type: ignore
    from budget_planner.config import configure_logging  # type: ignore
    from budget_planner.form import (  # type: ignore
        EXPENSE_FIELDS,
        INCOME_FIELDS,
        budget_from_form,
        default_form_values,
        fields_for,
        validate_form_values,
    )
    from budget_planner.formatting import (  # type: ignore
        escape_dollar_for_markdown,
        escape_markdown_dollars,
        format_currency,
        format_percentage,
    )
    from budget_planner.models import CATEGORIES, BALANCE_SUCCESS, BALANCE_WARNING  # type: ignore
    from budget_planner.pages.config import get_copy  # type: ignore
    from budget_planner.report import render_markdown_report  # type: ignore
    from budget_planner.session import BudgetSession  # type: ignore

logger = logging.getLogger(__name__)

SESSION_KEY = 'budget_session'
FORM_VALUES_KEY = 'budget_form_values'

STATUS_ICONS = {
    'over': '🔺',
    'under': '🔻',
    'on-target': '✅',
}


def get_session(state: Optional[MutableMapping[str, Any]] = None) -> BudgetSession:
    """Return the session's :class:`BudgetSession`, creating it on first use."""
    state = st.session_state if state is None else state
    session = state.get(SESSION_KEY)
    if not isinstance(session, BudgetSession):
        session = BudgetSession()
        state[SESSION_KEY] = session
    return session


def get_form_values(state: Optional[MutableMapping[str, Any]] = None) -> Dict[str, float]:
    state = st.session_state if state is None else state
    values = state.get(FORM_VALUES_KEY)
    if not isinstance(values, dict):
        values = default_form_values()
        state[FORM_VALUES_KEY] = values
    return values


def handle_calculate(values: Dict[str, Any], state: Optional[MutableMapping[str, Any]] = None) -> list:
    """Validate submitted values and calculate them into the session.

    Returns:
        Validation errors; when non-empty the session is left untouched
    """
    state = st.session_state if state is None else state
    errors = validate_form_values(values)
    if errors:
        logger.info("Budget form rejected with %d validation error(s)", len(errors))
        return errors
    state[FORM_VALUES_KEY] = dict(values)
    get_session(state).calculate(budget_from_form(values))
    return []


def handle_reset(state: Optional[MutableMapping[str, Any]] = None) -> None:
    state = st.session_state if state is None else state
    state[FORM_VALUES_KEY] = default_form_values()
    get_session(state).reset()


def render_form() -> None:
    values = get_form_values()
    submitted: Dict[str, float] = {}
    with st.form('budget_form'):
        st.subheader('Income')
        cols = st.columns(len(INCOME_FIELDS))
        for col, field in zip(cols, INCOME_FIELDS):
            submitted[field.key] = col.number_input(
                field.label,
                min_value=0.0,
                step=50.0,
                value=float(values.get(field.key, 0.0)),
                key=f"input_{field.key}",
            )

        for category in CATEGORIES:
            st.subheader(get_copy('categories', category, 'heading', default=category.capitalize()))
            fields = fields_for(category)
            cols = st.columns(3)
            for index, field in enumerate(fields):
                submitted[field.key] = cols[index % 3].number_input(
                    field.label,
                    min_value=0.0,
                    step=10.0,
                    value=float(values.get(field.key, 0.0)),
                    key=f"input_{field.key}",
                )

        calculate_col, reset_col = st.columns(2)
        calculate = calculate_col.form_submit_button('Calculate Budget', type='primary')
        reset = reset_col.form_submit_button('Start Over')

    if reset:
        handle_reset()
        for field in INCOME_FIELDS + EXPENSE_FIELDS:
            st.session_state.pop(f"input_{field.key}", None)
        st.rerun()
    elif calculate:
        errors = handle_calculate(submitted)
        for error in errors:
            st.error(error)
        if not errors:
            st.success('Your budget has been calculated successfully.')


def render_summary(session: BudgetSession) -> None:
    calculations = session.calculations
    cols = st.columns(4)
    cols[0].metric('Total income', format_currency(calculations.total_income))
    cols[1].metric('Total expenses', format_currency(calculations.total_expenses))
    cols[2].metric('Remaining', format_currency(calculations.remaining))
    cols[3].metric('Savings rate', format_percentage(calculations.savings_percentage))

    balance = session.balance()
    if balance.status == BALANCE_WARNING:
        st.warning(escape_markdown_dollars(balance.message))
    elif balance.status == BALANCE_SUCCESS:
        st.success(escape_markdown_dollars(balance.message))

    chart_left, chart_right = st.columns(2)
    chart_left.plotly_chart(viz.create_allocation_chart(calculations), use_container_width=True)
    chart_right.plotly_chart(viz.create_target_comparison_chart(calculations), use_container_width=True)

    insights = session.insights()
    table = summary_frame(calculations, insights)
    st.dataframe(table.round(2), use_container_width=True, hide_index=True)
    with st.expander('Itemized expenses'):
        st.dataframe(items_frame(session.budget), use_container_width=True, hide_index=True)


def render_insights(session: BudgetSession) -> None:
    st.header('Budget Insights')
    st.caption(get_copy('app', 'insights_intro', default=''))

    insights = session.insights()
    highlighted = session.highlighted()
    total_income = session.calculations.total_income
    for category, insight in insights.items():
        heading = get_copy('categories', category, 'heading', default=category.capitalize())
        label = f"{STATUS_ICONS[insight.status]} {heading}"
        with st.expander(label, expanded=category == highlighted):
            description = get_copy('categories', category, 'description')
            st.markdown(f"**{escape_markdown_dollars(insight.message)}**", help=description)
            st.progress(viz.progress_width(insight.percentage) / 100)
            st.caption(
                f"Current: {format_percentage(insight.percentage)} · Target: {insight.target:.0f}% · "
                f"{escape_dollar_for_markdown(insight.amount)} of {escape_dollar_for_markdown(total_income)}"
            )
            st.markdown('**Tips for optimization:**')
            for tip in insight.tips:
                st.markdown(f"- {tip}")


def render_recommendations(session: BudgetSession) -> None:
    st.header('Budget Recommendations')
    for recommendation in session.recommendations().values():
        body = f"**{recommendation.title}**: {recommendation.description}"
        if recommendation.status == BALANCE_WARNING:
            st.warning(body)
        elif recommendation.status == BALANCE_SUCCESS:
            st.success(body)
        else:
            st.info(body)
    st.subheader('Tips')
    for tip in session.tips():
        st.markdown(f"- {escape_markdown_dollars(tip)}")


def render_report_download(session: BudgetSession) -> None:
    report = render_markdown_report(session.budget, session.calculations)
    st.download_button(
        'Download report',
        data=report,
        file_name='budget_report.md',
        mime='text/markdown',
    )


def main() -> None:
    """Entry point for the Streamlit app."""
    configure_logging()
    title = get_copy('app', 'title', default='50/30/20 Budget Calculator')
    st.set_page_config(page_title=title, page_icon='💰', layout='wide')
    st.title(title)
    st.markdown(get_copy('app', 'intro', default=''))

    render_form()

    session = get_session()
    if not session.is_calculated:
        st.info(get_copy('app', 'empty_state', default='Enter your income and expenses to get started.'))
        return

    st.divider()
    render_summary(session)
    st.divider()
    render_insights(session)
    st.divider()
    render_recommendations(session)
    render_report_download(session)


if __name__ == '__main__':
    main()
