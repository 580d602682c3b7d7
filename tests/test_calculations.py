"""Unit tests for budget_planner.calculations."""

from __future__ import annotations

import logging
import math

import pytest

from budget_planner.calculations import (
    aggregate,
    calculate_adjustment,
    calculate_ideal_amounts,
    calculate_percentage,
    calculate_total,
    coerce_finite,
    coerce_finite_non_negative,
    items_frame,
    summary_frame,
)
from budget_planner.insights import build_category_insights
from budget_planner.models import Budget, BudgetItem


def test_scenario_a_totals(scenario_a) -> None:
    calc = aggregate(scenario_a)
    assert calc.total_income == 4000
    assert calc.needs_total == 2200
    assert calc.wants_total == 750
    assert calc.savings_total == 800
    assert calc.total_expenses == 3750
    assert calc.remaining == 250
    assert calc.needs_percentage == pytest.approx(55.0)
    assert calc.wants_percentage == pytest.approx(18.75)
    assert calc.savings_percentage == pytest.approx(20.0)


def test_scenario_a_ideal_and_adjustments(scenario_a) -> None:
    calc = aggregate(scenario_a)
    assert calc.ideal_needs == pytest.approx(2000)
    assert calc.ideal_wants == pytest.approx(1200)
    assert calc.ideal_savings == pytest.approx(800)
    # positive adjustment means the category is below its ideal amount
    assert calc.needs_adjustment == pytest.approx(-200)
    assert calc.wants_adjustment == pytest.approx(450)
    assert calc.savings_adjustment == pytest.approx(0)


def test_all_zero_budget(empty_budget) -> None:
    calc = aggregate(empty_budget)
    assert calc.total_income == 0
    assert calc.total_expenses == 0
    assert calc.remaining == 0
    assert calc.needs_percentage == 0
    assert calc.wants_percentage == 0
    assert calc.savings_percentage == 0


def test_zero_income_with_expenses_has_zero_percentages(budget_factory) -> None:
    calc = aggregate(budget_factory(income=0, needs={'rent': 500}, wants={'fun': 100}))
    assert calc.needs_percentage == 0
    assert calc.wants_percentage == 0
    assert not math.isnan(calc.savings_percentage)
    assert calc.remaining == -600


def test_overspend_remaining_is_negative(overspent_budget) -> None:
    calc = aggregate(overspent_budget)
    assert calc.remaining == -200
    assert calc.needs_percentage == pytest.approx(120.0)


def test_absent_lists_are_treated_as_empty() -> None:
    calc = aggregate(Budget(income=1000, additional_income=0, needs=None, wants=None, savings=None))
    assert calc.total_expenses == 0
    assert calc.remaining == 1000


def test_totals_and_remaining_identities(budget_factory) -> None:
    budget = budget_factory(
        income=2875.35,
        additional_income=120.10,
        needs={'rent': 999.99, 'power': 87.13},
        wants={'coffee': 12.7, 'games': 59.99},
        savings={'ira': 333.33},
    )
    calc = aggregate(budget)
    assert calc.total_expenses == calc.needs_total + calc.wants_total + calc.savings_total
    assert calc.remaining == pytest.approx(calc.total_income - calc.total_expenses, abs=1e-9)
    assert calc.ideal_needs + calc.ideal_wants + calc.ideal_savings == pytest.approx(calc.total_income, abs=1e-9)


def test_aggregate_is_idempotent(scenario_a) -> None:
    assert aggregate(scenario_a) == aggregate(scenario_a)


def test_increasing_an_item_reduces_remaining_by_delta(budget_factory) -> None:
    delta = 37.5
    before = aggregate(budget_factory(income=3000, wants={'dining': 200, 'travel': 100}))
    after = aggregate(budget_factory(income=3000, wants={'dining': 200 + delta, 'travel': 100}))
    assert after.wants_total > before.wants_total
    assert after.wants_percentage > before.wants_percentage
    assert before.remaining - after.remaining == pytest.approx(delta, abs=1e-9)


def test_malformed_values_are_coerced_to_zero() -> None:
    budget = Budget(
        income=float('nan'),
        additional_income=None,
        needs=[
            BudgetItem('nan', float('nan'), 'needs'),
            BudgetItem('negative', -5, 'needs'),
            BudgetItem('text', '12.5', 'needs'),
            BudgetItem('missing', None, 'needs'),
        ],
        wants=[BudgetItem('infinite', float('inf'), 'wants')],
    )
    calc = aggregate(budget)
    assert calc.total_income == 0
    assert calc.needs_total == 12.5
    assert calc.wants_total == 0
    assert calc.needs_percentage == 0


def test_coercion_logs_a_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger='budget_planner.calculations'):
        assert coerce_finite_non_negative('abc') == 0.0
    assert 'non-numeric' in caplog.text


def test_coerce_helpers() -> None:
    assert coerce_finite(-3.5) == -3.5
    assert coerce_finite(None, default=7.0) == 7.0
    assert coerce_finite(float('-inf')) == 0.0
    assert coerce_finite_non_negative(-3.5) == 0.0
    assert coerce_finite_non_negative('42') == 42.0
    assert coerce_finite_non_negative([1, 2]) == 0.0


def test_aggregate_accepts_payload_mapping() -> None:
    calc = aggregate({
        'income': 1000,
        'additionalIncome': 250,
        'needs': [{'name': 'Rent', 'amount': 600, 'category': 'needs'}],
        'savings': [{'name': 'IRA', 'amount': 100}],
    })
    assert calc.total_income == 1250
    assert calc.needs_total == 600
    assert calc.wants_total == 0
    assert calc.savings_total == 100


def test_wrong_shapes_raise_type_error() -> None:
    with pytest.raises(TypeError):
        aggregate(42)
    with pytest.raises(TypeError):
        calculate_total([42])


def test_low_level_helpers() -> None:
    assert calculate_total(None) == 0
    assert calculate_total([]) == 0
    assert calculate_total([{'amount': 2}, {'amount': 3}]) == 5
    assert calculate_percentage(25, 0) == 0
    assert calculate_percentage(25, 100) == 25
    assert calculate_ideal_amounts(1000) == pytest.approx({'needs': 500, 'wants': 300, 'savings': 200})
    assert calculate_adjustment(actual=120, ideal=100) == -20


def test_calculations_to_dict_uses_camel_case(scenario_a) -> None:
    payload = aggregate(scenario_a).to_dict()
    assert payload['totalIncome'] == 4000
    assert payload['needsAdjustment'] == pytest.approx(-200)
    assert payload['idealSavings'] == pytest.approx(800)
    assert len(payload) == 15


def test_summary_frame(scenario_a) -> None:
    calc = aggregate(scenario_a)
    frame = summary_frame(calc, build_category_insights(calc))
    assert list(frame.columns) == ['Category', 'Amount', 'Percent', 'Target %', 'Ideal', 'Adjustment', 'Status']
    assert list(frame['Category']) == ['Needs', 'Wants', 'Savings']
    assert list(frame['Status']) == ['over', 'under', 'on-target']
    assert list(frame['Target %']) == [50.0, 30.0, 20.0]


def test_summary_frame_without_insights_has_blank_status(empty_budget) -> None:
    frame = summary_frame(aggregate(empty_budget))
    assert (frame['Status'] == '').all()


def test_items_frame_keeps_insertion_order(scenario_a, empty_budget) -> None:
    frame = items_frame(scenario_a)
    assert len(frame) == 15
    assert list(frame['Item'][:2]) == ['rent', 'utilities']
    assert frame.iloc[-1]['Category'] == 'Savings'

    empty = items_frame(empty_budget)
    assert empty.empty
    assert list(empty.columns) == ['Category', 'Item', 'Amount']
