"""Per-category insights for a calculated budget.

Each category's share of income is compared against its fixed target
(50/30/20).  The comparison is an absolute percentage-point difference:
a category is ``on-target`` when it sits within ``threshold`` points of
its target, otherwise ``over`` or ``under``.  One threshold,
:data:`~budget_planner.config.ON_TARGET_THRESHOLD`, is shared by all
three categories.

The tips returned by :func:`recommend` are fixed text keyed by
``(category, status)`` so the output is fully deterministic.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Union

from . import config
from .calculations import coerce_finite
from .formatting import format_currency
from .models import (
    CATEGORIES,
    STATUS_ON_TARGET,
    STATUS_OVER,
    STATUS_UNDER,
    STATUSES,
    TARGET_PERCENTAGES,
    Calculations,
    CategoryInsight,
    validate_category,
)

logger = logging.getLogger(__name__)

CATEGORY_TIPS: Dict[str, Dict[str, List[str]]] = {
    'needs': {
        STATUS_OVER: [
            "Look for ways to reduce housing costs, such as refinancing your mortgage or finding a roommate.",
            "Shop around for better deals on insurance and utilities.",
            "Use meal planning to reduce grocery expenses.",
        ],
        STATUS_UNDER: [
            "Make sure you're not sacrificing essential needs to save money.",
            "Check if your necessary expenses are properly categorized.",
            "Consider if you need to allocate more for healthcare or other essentials.",
        ],
        STATUS_ON_TARGET: [
            "You're right on target with your essential spending. Keep it up!",
        ],
    },
    'wants': {
        STATUS_OVER: [
            "Track subscriptions and consider which ones you can live without.",
            "Try implementing a 24-hour rule before making non-essential purchases.",
            "Look for free or low-cost alternatives for entertainment.",
        ],
        STATUS_UNDER: [
            "You're being very disciplined with your discretionary spending.",
            "Make sure you're allowing yourself some quality-of-life expenses.",
            "Consider if you can reallocate some of these savings to debt repayment.",
        ],
        STATUS_ON_TARGET: [
            "Your discretionary spending is well-balanced. Great job!",
        ],
    },
    'savings': {
        STATUS_OVER: [
            "Excellent job prioritizing savings and debt repayment!",
            "Make sure you have a balanced approach to short and long-term goals.",
            "Consider if you're paying down debt efficiently (focus on highest interest first).",
        ],
        STATUS_UNDER: [
            "Try automating your savings to ensure you meet your targets.",
            "Look for ways to reduce expenses in other areas to boost savings.",
            "Consider setting specific savings goals to stay motivated.",
        ],
        STATUS_ON_TARGET: [
            "You're right on track with your savings goals. Excellent work!",
        ],
    },
}


def _validate_status(status: str) -> str:
    if status not in STATUSES:
        raise ValueError(f"Unknown status '{status}'. Expected one of {', '.join(STATUSES)}")
    return status


def classify(
    actual_percentage: float,
    target_percentage: float,
    threshold: Optional[float] = None,
) -> str:
    """Classify a category's share of income against its target.

    Args:
        actual_percentage: Category total as a percentage of income
        target_percentage: Target share (50, 30 or 20)
        threshold: Tolerance in percentage points; defaults to
            :data:`config.ON_TARGET_THRESHOLD`

    Returns:
        ``'on-target'`` if ``|actual - target| <= threshold``, otherwise
        ``'over'`` or ``'under'``

    Example:
        >>> classify(50, 50)
        'on-target'
        >>> classify(18.75, 30)
        'under'
    """
    if threshold is None:
        threshold = config.ON_TARGET_THRESHOLD
    actual = coerce_finite(actual_percentage)
    target = coerce_finite(target_percentage)
    diff_points = actual - target
    if abs(diff_points) <= threshold:
        return STATUS_ON_TARGET
    return STATUS_OVER if actual > target else STATUS_UNDER


def recommend(category: str, status: str) -> List[str]:
    """Return the ordered optimisation tips for a category in the given status."""
    validate_category(category)
    _validate_status(status)
    return list(CATEGORY_TIPS[category][status])


def status_text(category: str, status: str, diff: float) -> str:
    """One-line headline describing how far a category is from its ideal amount."""
    validate_category(category)
    _validate_status(status)
    if status == STATUS_ON_TARGET:
        return f"Your {category} spending is right on target!"
    formatted_diff = format_currency(abs(coerce_finite(diff)))
    if status == STATUS_OVER:
        return f"You're over budget in {category} by {formatted_diff}"
    return f"You're under budget in {category} by {formatted_diff}"


def build_category_insights(
    calculations: Calculations,
    threshold: Optional[float] = None,
) -> Dict[str, CategoryInsight]:
    """Derive status, tips and headline for every category.

    Returns:
        Dictionary keyed by category in needs, wants, savings order
    """
    insights: Dict[str, CategoryInsight] = {}
    for category in CATEGORIES:
        amount = calculations.total_for(category)
        percentage = calculations.percentage_for(category)
        target = TARGET_PERCENTAGES[category]
        ideal = calculations.ideal_for(category)
        diff = amount - ideal
        status = classify(percentage, target, threshold)
        insights[category] = CategoryInsight(
            category=category,
            amount=amount,
            percentage=percentage,
            target=target,
            ideal=ideal,
            diff=diff,
            status=status,
            tips=recommend(category, status),
            message=status_text(category, status, diff),
        )
    logger.debug(
        "Category statuses: %s",
        ", ".join(f"{name}={insight.status}" for name, insight in insights.items()),
    )
    return insights


def _percentage_of(value: Union[CategoryInsight, float]) -> float:
    if isinstance(value, CategoryInsight):
        return value.percentage
    return coerce_finite(value)


def auto_highlight(
    insights: Mapping[str, Union[CategoryInsight, float]],
    threshold: Optional[float] = None,
) -> Optional[str]:
    """Pick the category that deviates most from its target.

    Only deviations strictly greater than ``threshold`` (default
    :data:`config.SIGNIFICANT_DEVIATION`) qualify.  Categories are visited
    in needs, wants, savings order and a later category must deviate by
    strictly more to win, so ties go to the earlier one.

    Args:
        insights: Category name to :class:`CategoryInsight` or to a plain percentage

    Returns:
        Category name, or ``None`` when nothing deviates significantly
    """
    if threshold is None:
        threshold = config.SIGNIFICANT_DEVIATION
    selected: Optional[str] = None
    largest = threshold
    for category in CATEGORIES:
        if category not in insights:
            continue
        deviation = abs(_percentage_of(insights[category]) - TARGET_PERCENTAGES[category])
        if deviation > largest:
            selected = category
            largest = deviation
    return selected
