"""Unit tests for budget_planner.recommendations."""

from __future__ import annotations

from budget_planner.calculations import aggregate
from budget_planner.recommendations import (
    EMERGENCY_FUND_TIP,
    category_recommendations,
    improvement_tips,
    overall_balance,
)


def test_surplus_is_success() -> None:
    summary = overall_balance(250)
    assert summary.status == 'success'
    assert summary.title == 'Budget Balance'
    assert '$250.00 unallocated' in summary.message


def test_exact_balance_is_success() -> None:
    summary = overall_balance(0)
    assert summary.status == 'success'
    assert 'perfectly balanced' in summary.message


def test_float_residue_counts_as_balanced() -> None:
    assert 'perfectly balanced' in overall_balance(0.1 + 0.2 - 0.3).message
    assert overall_balance(-1e-12).status == 'success'


def test_sub_cent_gaps_keep_their_sign() -> None:
    deficit = overall_balance(-0.004)
    assert deficit.status == 'warning'
    assert 'more in expenses than income' in deficit.message

    surplus = overall_balance(0.004)
    assert surplus.status == 'success'
    assert 'unallocated' in surplus.message


def test_deficit_is_warning_with_absolute_amount(overspent_budget) -> None:
    calc = aggregate(overspent_budget)
    summary = overall_balance(calc.remaining)
    assert summary.status == 'warning'
    assert '$200.00 more in expenses than income' in summary.message
    assert '-$200' not in summary.message


def test_non_finite_remaining_still_returns_a_result() -> None:
    assert overall_balance(float('nan')).status == 'success'


def test_category_recommendations_scenario_a(scenario_a) -> None:
    cards = category_recommendations(aggregate(scenario_a))
    assert cards['needs'].status == 'warning'
    assert cards['needs'].description.startswith('Your essential expenses are 55% of your income.')
    assert cards['wants'].status == 'success'
    assert 'below the 30% guideline' in cards['wants'].description
    assert cards['savings'].status == 'success'
    assert cards['savings'].title == 'Financial Security'


def test_category_recommendations_bands(budget_factory) -> None:
    cards = category_recommendations(aggregate(budget_factory(
        income=1000,
        needs={'rent': 470},
        wants={'fun': 280},
        savings={'ira': 100},
    )))
    assert 'aligning well' in cards['needs'].description
    assert 'balancing enjoyment' in cards['wants'].description
    assert cards['savings'].status == 'neutral'

    cards = category_recommendations(aggregate(budget_factory(income=1000, needs={'rent': 300})))
    assert 'efficiently' in cards['needs'].description
    assert cards['needs'].status == 'success'


def test_improvement_tips_scenario_a(scenario_a) -> None:
    tips = improvement_tips(aggregate(scenario_a))
    assert len(tips) == 3
    assert 'lower your essential expenses' in tips[0]
    assert tips[1] == EMERGENCY_FUND_TIP
    assert tips[2].startswith('Your unallocated $250.00')


def test_improvement_tips_for_overspent_budget(overspent_budget) -> None:
    tips = improvement_tips(aggregate(overspent_budget))
    assert EMERGENCY_FUND_TIP in tips
    assert 'bring your budget into balance' in tips[-1]
    assert any('automatic transfers' in tip for tip in tips)


def test_improvement_tips_for_empty_budget(empty_budget) -> None:
    tips = improvement_tips(aggregate(empty_budget))
    assert len(tips) == 2
    assert tips[-1] == EMERGENCY_FUND_TIP
