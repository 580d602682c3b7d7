"""Budget aggregation for the 50/30/20 rule.

This module reduces a :class:`~budget_planner.models.Budget` into its
:class:`~budget_planner.models.Calculations`: total income, category
totals, remaining balance, percentage of income per category, ideal
amounts and the signed adjustment needed to reach them.

Every function here is pure.  Malformed numbers coming from user
editable forms (``None``, ``NaN``, infinities, negative amounts) are
coerced to ``0`` through :func:`coerce_finite_non_negative` before any
arithmetic, so the aggregator never raises for present-but-bad data.
No rounding happens here; round only when displaying.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Iterable, Mapping, Optional, Union

import pandas as pd

from .models import (
    CATEGORIES,
    NEEDS,
    SAVINGS,
    TARGET_PERCENTAGES,
    TARGET_RATIOS,
    WANTS,
    Budget,
    BudgetItem,
    Calculations,
    CategoryInsight,
)

logger = logging.getLogger(__name__)


def coerce_finite(value: Any, default: float = 0.0) -> float:
    """Return ``value`` as a finite float, or ``default`` when that is impossible.

    Numeric strings (``"12.50"``) are accepted since form widgets
    frequently hand values back as text.
    """
    if value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("Coercing non-numeric value %r to %s", value, default)
        return default
    if not math.isfinite(number):
        logger.warning("Coercing non-finite value %r to %s", value, default)
        return default
    return number


def coerce_finite_non_negative(value: Any, default: float = 0.0) -> float:
    """Safe-number policy for monetary inputs: finite and ``>= 0`` or ``default``."""
    number = coerce_finite(value, default)
    if number < 0:
        logger.warning("Coercing negative amount %r to %s", value, default)
        return default
    return number


def _item_amount(item: Union[BudgetItem, Mapping[str, Any]]) -> float:
    if isinstance(item, BudgetItem):
        return coerce_finite_non_negative(item.amount)
    if isinstance(item, Mapping):
        return coerce_finite_non_negative(item.get('amount'))
    raise TypeError(f"Expected a BudgetItem or mapping, got {type(item).__name__}")


def calculate_total(items: Optional[Iterable[Union[BudgetItem, Mapping[str, Any]]]]) -> float:
    """Sum item amounts; a missing or empty list totals ``0``."""
    if not items:
        return 0.0
    total = 0.0
    for item in items:
        total += _item_amount(item)
    return total


def calculate_percentage(amount: float, total: float) -> float:
    """Percentage of ``total`` represented by ``amount``; ``0`` when ``total`` is zero."""
    if total == 0:
        return 0.0
    return (amount / total) * 100


def calculate_ideal_amounts(total_income: float) -> Dict[str, float]:
    """Ideal 50/30/20 dollar amounts for the given income."""
    return {category: total_income * TARGET_RATIOS[category] for category in CATEGORIES}


def calculate_adjustment(actual: float, ideal: float) -> float:
    """Amount to add to ``actual`` to reach ``ideal`` (negative means cut back)."""
    return ideal - actual


def aggregate(budget: Union[Budget, Mapping[str, Any]]) -> Calculations:
    """Compute the complete 50/30/20 breakdown for a budget.

    Args:
        budget: A :class:`Budget`, or a mapping in the camelCase payload shape
            accepted by :meth:`Budget.from_dict`

    Returns:
        Frozen :class:`Calculations`. Calling this twice on the same budget
        yields identical results.

    Raises:
        TypeError: If ``budget`` (or one of its items) has the wrong shape entirely

    Example:
        >>> calc = aggregate(Budget(income=1000, needs=[BudgetItem('Rent', 500, 'needs')]))
        >>> calc.needs_percentage, calc.remaining
        (50.0, 500.0)
    """
    if isinstance(budget, Mapping):
        budget = Budget.from_dict(budget)
    if not isinstance(budget, Budget):
        raise TypeError(f"Expected a Budget or mapping, got {type(budget).__name__}")

    total_income = coerce_finite_non_negative(budget.income) + coerce_finite_non_negative(
        budget.additional_income
    )

    needs_total = calculate_total(budget.needs)
    wants_total = calculate_total(budget.wants)
    savings_total = calculate_total(budget.savings)

    total_expenses = needs_total + wants_total + savings_total
    remaining = total_income - total_expenses

    ideal = calculate_ideal_amounts(total_income)

    calculations = Calculations(
        total_income=total_income,
        needs_total=needs_total,
        wants_total=wants_total,
        savings_total=savings_total,
        total_expenses=total_expenses,
        remaining=remaining,
        needs_percentage=calculate_percentage(needs_total, total_income),
        wants_percentage=calculate_percentage(wants_total, total_income),
        savings_percentage=calculate_percentage(savings_total, total_income),
        ideal_needs=ideal[NEEDS],
        ideal_wants=ideal[WANTS],
        ideal_savings=ideal[SAVINGS],
        needs_adjustment=calculate_adjustment(needs_total, ideal[NEEDS]),
        wants_adjustment=calculate_adjustment(wants_total, ideal[WANTS]),
        savings_adjustment=calculate_adjustment(savings_total, ideal[SAVINGS]),
    )
    logger.debug(
        "Aggregated budget: income=%.2f expenses=%.2f remaining=%.2f",
        total_income,
        total_expenses,
        remaining,
    )
    return calculations


def summary_frame(
    calculations: Calculations,
    insights: Optional[Mapping[str, CategoryInsight]] = None,
) -> pd.DataFrame:
    """Tabulate the per-category breakdown.

    Returns:
        DataFrame with columns: Category, Amount, Percent, Target %, Ideal,
        Adjustment, Status. Status is empty unless ``insights`` is supplied.
    """
    rows = []
    for category in CATEGORIES:
        insight = insights.get(category) if insights else None
        rows.append({
            'Category': category.capitalize(),
            'Amount': calculations.total_for(category),
            'Percent': calculations.percentage_for(category),
            'Target %': TARGET_PERCENTAGES[category],
            'Ideal': calculations.ideal_for(category),
            'Adjustment': calculations.adjustment_for(category),
            'Status': insight.status if insight else '',
        })
    return pd.DataFrame(rows)


def items_frame(budget: Budget) -> pd.DataFrame:
    """List every item in insertion order with columns Category, Item, Amount."""
    rows = [
        {
            'Category': item.category.capitalize(),
            'Item': item.name,
            'Amount': coerce_finite_non_negative(item.amount),
        }
        for item in budget.all_items()
    ]
    if not rows:
        return pd.DataFrame(columns=['Category', 'Item', 'Amount'])
    return pd.DataFrame(rows)
