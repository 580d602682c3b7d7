"""Top-level package for the 50/30/20 Budget Planner.

The primary modules are:

* ``calculations`` – reduces a budget to totals, percentages and ideal amounts
* ``insights`` – per-category status, tips and highlight selection
* ``recommendations`` – overall balance and budget-level guidance
* ``session`` – the explicit state container used by the UI
* ``visualization`` – functions that generate Plotly figures
* ``dashboard`` – a Streamlit app that ties everything together

To run the dashboard from the command line you can execute:

```bash
streamlit run budget_planner/Home.py
```
"""

from . import calculations  # noqa: F401  # re-exported for convenience
from . import insights  # noqa: F401  # re-exported for convenience
from .calculations import aggregate, coerce_finite_non_negative
from .insights import auto_highlight, build_category_insights, classify, recommend
from .models import Budget, BudgetItem, Calculations, CategoryInsight
from .recommendations import overall_balance
from .session import BudgetSession

__all__ = [
    "calculations",
    "insights",
    "aggregate",
    "coerce_finite_non_negative",
    "classify",
    "recommend",
    "auto_highlight",
    "build_category_insights",
    "overall_balance",
    "Budget",
    "BudgetItem",
    "Calculations",
    "CategoryInsight",
    "BudgetSession",
]
