"""Mapping between the budget input form and :class:`Budget`.

The form has a fixed set of numeric fields: two income lines and one
line per standard expense.  Each expense field becomes a labelled
:class:`BudgetItem` in its category, in the order listed here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .calculations import coerce_finite_non_negative
from .models import NEEDS, SAVINGS, WANTS, Budget, BudgetItem


@dataclass(frozen=True)
class FormField:
    key: str
    label: str
    category: Optional[str] = None


INCOME_FIELDS = (
    FormField('income', 'Monthly Income (after tax)'),
    FormField('additionalIncome', 'Additional Income'),
)

EXPENSE_FIELDS = (
    FormField('rent', 'Rent/Mortgage', NEEDS),
    FormField('utilities', 'Utilities', NEEDS),
    FormField('groceries', 'Groceries', NEEDS),
    FormField('transport', 'Transportation', NEEDS),
    FormField('insurance', 'Insurance', NEEDS),
    FormField('otherNeeds', 'Other Necessities', NEEDS),
    FormField('dining', 'Dining Out', WANTS),
    FormField('entertainment', 'Entertainment', WANTS),
    FormField('shopping', 'Shopping', WANTS),
    FormField('subscriptions', 'Subscriptions', WANTS),
    FormField('otherWants', 'Other Wants', WANTS),
    FormField('savings', 'Savings', SAVINGS),
    FormField('emergency', 'Emergency Fund', SAVINGS),
    FormField('debtPayment', 'Debt Payments', SAVINGS),
    FormField('investments', 'Investments', SAVINGS),
)

FORM_FIELDS = INCOME_FIELDS + EXPENSE_FIELDS


def fields_for(category: str) -> List[FormField]:
    return [field for field in EXPENSE_FIELDS if field.category == category]


def default_form_values() -> Dict[str, float]:
    """Every form field set to ``0.0`` (the state after "Start Over")."""
    return {field.key: 0.0 for field in FORM_FIELDS}


def validate_form_values(values: Mapping[str, Any]) -> List[str]:
    """Check raw form values before they are turned into a budget.

    Missing or blank fields are allowed (they default to zero).

    Returns:
        List of error messages, empty when the values are valid
    """
    errors = []
    for field in FORM_FIELDS:
        raw = values.get(field.key)
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            continue
        try:
            number = float(raw)
        except (TypeError, ValueError):
            errors.append(f"{field.label}: must be a number")
            continue
        if not math.isfinite(number):
            errors.append(f"{field.label}: must be a finite number")
        elif number < 0:
            errors.append(f"{field.label}: Amount must be a positive number")
    return errors


def budget_from_form(values: Mapping[str, Any]) -> Budget:
    """Build a :class:`Budget` from form values.

    Values are passed through the safe-number policy, so blank or invalid
    entries count as zero.  Call :func:`validate_form_values` first to
    surface errors to the user.
    """
    items: Dict[str, List[BudgetItem]] = {NEEDS: [], WANTS: [], SAVINGS: []}
    for field in EXPENSE_FIELDS:
        items[field.category].append(
            BudgetItem(
                name=field.label,
                amount=coerce_finite_non_negative(values.get(field.key)),
                category=field.category,
            )
        )
    return Budget(
        income=coerce_finite_non_negative(values.get('income')),
        additional_income=coerce_finite_non_negative(values.get('additionalIncome')),
        needs=items[NEEDS],
        wants=items[WANTS],
        savings=items[SAVINGS],
    )
