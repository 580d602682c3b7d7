"""Budget-level recommendations.

:func:`overall_balance` reports whether income covers every planned
expense, based only on ``remaining``.  :func:`category_recommendations`
and :func:`improvement_tips` produce the softer guidance shown on the
recommendations card; their bands (45-50% needs, 25-30% wants, 15-20%
savings) are independent of the insight status tolerance.
"""

from __future__ import annotations

import math
from typing import Dict, List

from .calculations import coerce_finite
from .formatting import format_currency
from .models import (
    BALANCE_SUCCESS,
    BALANCE_WARNING,
    NEEDS,
    RECOMMENDATION_NEUTRAL,
    SAVINGS,
    WANTS,
    BalanceSummary,
    Calculations,
    Recommendation,
)

BALANCE_TITLE = "Budget Balance"

# Dollars; a remaining amount this close to zero counts as balanced
BALANCE_TOLERANCE = 1e-9

EMERGENCY_FUND_TIP = (
    "An emergency fund covering 3-6 months of expenses provides peace of mind "
    "and financial stability during unexpected situations"
)


def overall_balance(remaining: float) -> BalanceSummary:
    """Summarise the gap between income and planned expenses.

    ``remaining`` within ``BALANCE_TOLERANCE`` of zero counts as balanced
    (float residue from summing fractional amounts); any other value is
    judged by its sign, however small.

    Example:
        >>> overall_balance(-200).status
        'warning'
    """
    amount = coerce_finite(remaining)
    if math.isclose(amount, 0.0, abs_tol=BALANCE_TOLERANCE):
        return BalanceSummary(
            status=BALANCE_SUCCESS,
            title=BALANCE_TITLE,
            message=(
                "Your budget is perfectly balanced. Every dollar has a purpose, "
                "which is excellent for financial clarity."
            ),
        )
    if amount > 0:
        return BalanceSummary(
            status=BALANCE_SUCCESS,
            title=BALANCE_TITLE,
            message=(
                f"You have {format_currency(amount)} unallocated in your budget. "
                "This provides flexibility to strengthen your savings or enhance your quality of life."
            ),
        )
    return BalanceSummary(
        status=BALANCE_WARNING,
        title=BALANCE_TITLE,
        message=(
            f"Your budget shows {format_currency(abs(amount))} more in expenses than income. "
            "Finding ways to address this gap will help improve your financial stability."
        ),
    )


def _needs_recommendation(percentage: float) -> Recommendation:
    shown = f"{percentage:.0f}"
    if 45 <= percentage <= 50:
        return Recommendation(
            title="Essential Expenses",
            description=(
                f"Your essential expenses are {shown}% of your income, "
                "aligning well with the 50/30/20 guideline."
            ),
            status=BALANCE_SUCCESS,
        )
    if percentage < 45:
        return Recommendation(
            title="Essential Expenses",
            description=(
                f"Your essential expenses are {shown}% of your income. You're managing your "
                "necessities efficiently, which gives you flexibility in other areas."
            ),
            status=BALANCE_SUCCESS,
        )
    return Recommendation(
        title="Essential Expenses",
        description=(
            f"Your essential expenses are {shown}% of your income. If your goal is to follow "
            "the 50/30/20 guideline, you may want to review your necessary expenses."
        ),
        status=BALANCE_WARNING,
    )


def _wants_recommendation(percentage: float) -> Recommendation:
    shown = f"{percentage:.0f}"
    if 25 <= percentage <= 30:
        return Recommendation(
            title="Lifestyle & Discretionary",
            description=(
                f"Your discretionary spending is {shown}% of your income, "
                "balancing enjoyment with financial responsibility."
            ),
            status=BALANCE_SUCCESS,
        )
    if percentage < 25:
        return Recommendation(
            title="Lifestyle & Discretionary",
            description=(
                f"Your discretionary spending is {shown}% of your income. While this is below "
                "the 30% guideline, this may be a conscious choice to prioritize other financial goals."
            ),
            status=BALANCE_SUCCESS,
        )
    return Recommendation(
        title="Lifestyle & Discretionary",
        description=(
            f"Your discretionary spending is {shown}% of your income. Depending on your "
            "priorities, you might consider reviewing your non-essential expenses."
        ),
        status=BALANCE_WARNING,
    )


def _savings_recommendation(percentage: float) -> Recommendation:
    shown = f"{percentage:.0f}"
    if percentage >= 20:
        return Recommendation(
            title="Financial Security",
            description=(
                f"You're allocating {shown}% of your income to savings and debt repayment, "
                "which is excellent for building long-term financial security."
            ),
            status=BALANCE_SUCCESS,
        )
    if percentage >= 15:
        return Recommendation(
            title="Financial Security",
            description=(
                f"You're allocating {shown}% of your income to savings and debt repayment. "
                "If building savings is a priority, you're on a positive path."
            ),
            status=BALANCE_SUCCESS,
        )
    return Recommendation(
        title="Financial Security",
        description=(
            f"You're currently allocating {shown}% of your income to savings and debt repayment. "
            "If possible, increasing this percentage can help strengthen your financial future."
        ),
        status=RECOMMENDATION_NEUTRAL,
    )


def category_recommendations(calculations: Calculations) -> Dict[str, Recommendation]:
    """Build the recommendation card for each category."""
    return {
        NEEDS: _needs_recommendation(coerce_finite(calculations.needs_percentage)),
        WANTS: _wants_recommendation(coerce_finite(calculations.wants_percentage)),
        SAVINGS: _savings_recommendation(coerce_finite(calculations.savings_percentage)),
    }


def improvement_tips(calculations: Calculations) -> List[str]:
    """Collect the general improvement tips that apply to this budget.

    Category tips appear only when that category misses its target; the
    emergency fund tip is always included; a final tip covers any
    surplus or deficit.
    """
    tips: List[str] = []
    if calculations.needs_percentage > 50:
        tips.append(
            "If you'd like to align with the 50/30/20 guideline, you might explore options such as "
            "meal planning, comparing service providers, or refinancing debt to lower your essential expenses"
        )
    if calculations.wants_percentage > 30:
        tips.append(
            "Consider keeping a spending journal for a few weeks to identify patterns in your "
            "discretionary spending - this awareness often naturally helps in making more intentional choices"
        )
    if calculations.savings_percentage < 20:
        tips.append(
            "Depending on your financial goals, you may benefit from automatic transfers to your "
            "savings account to help build your financial cushion over time"
        )

    tips.append(EMERGENCY_FUND_TIP)

    remaining = coerce_finite(calculations.remaining)
    if math.isclose(remaining, 0.0, abs_tol=BALANCE_TOLERANCE):
        return tips
    if remaining > 0:
        tips.append(
            f"Your unallocated {format_currency(remaining)} could be directed toward your highest "
            "priority financial goal, whether that's debt reduction, saving for something special, "
            "or investing for the future"
        )
    else:
        tips.append(
            "Consider exploring ways to bring your budget into balance, whether through adjusting "
            "expenses or finding opportunities to increase your income through skills you enjoy using"
        )
    return tips
