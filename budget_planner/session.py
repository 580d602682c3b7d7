"""Caller-owned state for one budgeting session.

A :class:`BudgetSession` holds the latest budget together with its
calculations.  It changes only through explicit commands:
:meth:`BudgetSession.calculate` replaces both, :meth:`BudgetSession.reset`
clears them.  Everything else is derived on demand from the stored
calculations, so the budget and its numbers can never drift apart.

The Streamlit UI keeps one instance in ``st.session_state``; tests and
other callers simply construct their own.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from .calculations import aggregate
from .insights import auto_highlight, build_category_insights
from .models import BalanceSummary, Budget, Calculations, CategoryInsight, Recommendation
from .recommendations import category_recommendations, improvement_tips, overall_balance
from .report import build_payload

logger = logging.getLogger(__name__)


class BudgetSession:
    """Holds the current budget and its calculations for one user."""

    def __init__(self, threshold: Optional[float] = None):
        """Initialize an empty session.

        Args:
            threshold: Optional on-target tolerance (percentage points) used for
                every category; defaults to the configured value.
        """
        self.threshold = threshold
        self._budget: Optional[Budget] = None
        self._calculations: Optional[Calculations] = None

    @property
    def budget(self) -> Optional[Budget]:
        """Copy of the calculated budget; editing it does not affect the session."""
        return copy.deepcopy(self._budget)

    @property
    def calculations(self) -> Optional[Calculations]:
        return self._calculations

    @property
    def is_calculated(self) -> bool:
        return self._calculations is not None

    def calculate(self, budget: Union[Budget, Mapping[str, Any]]) -> Calculations:
        """Calculate a snapshot of ``budget`` and make it the session's current budget.

        Later changes to the caller's object do not reach the session.
        """
        if isinstance(budget, Mapping):
            budget = Budget.from_dict(budget)
        else:
            budget = copy.deepcopy(budget)
        calculations = aggregate(budget)
        self._budget = budget
        self._calculations = calculations
        logger.info(
            "Budget calculated: income=%.2f remaining=%.2f",
            calculations.total_income,
            calculations.remaining,
        )
        return calculations

    def reset(self) -> None:
        """Discard the current budget and calculations."""
        self._budget = None
        self._calculations = None
        logger.info("Budget session reset")

    def _require_calculations(self) -> Calculations:
        if self._calculations is None:
            raise RuntimeError("No budget has been calculated in this session")
        return self._calculations

    def insights(self) -> Dict[str, CategoryInsight]:
        return build_category_insights(self._require_calculations(), self.threshold)

    def highlighted(self) -> Optional[str]:
        return auto_highlight(self.insights())

    def balance(self) -> BalanceSummary:
        return overall_balance(self._require_calculations().remaining)

    def recommendations(self) -> Dict[str, Recommendation]:
        return category_recommendations(self._require_calculations())

    def tips(self) -> List[str]:
        return improvement_tips(self._require_calculations())

    def payload(self, user_name: Optional[str] = None) -> Dict[str, Any]:
        """Budget plus calculations in the shape handed to export services."""
        calculations = self._require_calculations()
        return build_payload(self._budget, calculations, user_name=user_name)
