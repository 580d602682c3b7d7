"""Shared budgets used across the test modules."""

from __future__ import annotations

import pytest

from budget_planner.models import Budget, BudgetItem


def make_budget(income=0.0, additional_income=0.0, needs=None, wants=None, savings=None) -> Budget:
    """Build a budget from ``{name: amount}`` dictionaries."""
    def items(category, entries):
        return [BudgetItem(name, amount, category) for name, amount in (entries or {}).items()]

    return Budget(
        income=income,
        additional_income=additional_income,
        needs=items('needs', needs),
        wants=items('wants', wants),
        savings=items('savings', savings),
    )


@pytest.fixture
def scenario_a() -> Budget:
    return make_budget(
        income=3500,
        additional_income=500,
        needs={'rent': 1200, 'utilities': 150, 'groceries': 400, 'transport': 200, 'insurance': 150, 'other': 100},
        wants={'dining': 250, 'entertainment': 150, 'shopping': 200, 'subscriptions': 50, 'other': 100},
        savings={'savings': 300, 'emergency': 100, 'debt': 250, 'investments': 150},
    )


@pytest.fixture
def empty_budget() -> Budget:
    return Budget(income=0, additional_income=0, needs=[], wants=[], savings=[])


@pytest.fixture
def overspent_budget() -> Budget:
    return make_budget(income=1000, needs={'x': 1200})


@pytest.fixture
def budget_factory():
    return make_budget
