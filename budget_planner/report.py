"""Report text and export payloads for a calculated budget.

The PDF, email and cloud-upload services are external collaborators: they
receive the dictionary from :func:`build_payload` as-is and this package
never talks to them.  :func:`render_markdown_report` produces the human
readable summary offered as a download in the dashboard.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import config
from .calculations import coerce_finite_non_negative
from .formatting import format_currency, format_percentage, safe_filename
from .insights import build_category_insights
from .models import CATEGORIES, Budget, Calculations
from .recommendations import improvement_tips, overall_balance

logger = logging.getLogger(__name__)

CATEGORY_HEADINGS = {
    'needs': 'Needs (50%)',
    'wants': 'Wants (30%)',
    'savings': 'Savings & Debt (20%)',
}


def build_payload(
    budget: Budget,
    calculations: Calculations,
    user_name: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Combine a budget and its calculations into the export payload.

    Returns:
        Dictionary with the camelCase budget fields (``income``,
        ``additionalIncome``, ``needs``, ``wants``, ``savings``) plus
        ``calculations`` and, when provided, ``userName`` and ``createdAt``
    """
    payload = budget.to_dict()
    payload['calculations'] = calculations.to_dict()
    if user_name:
        payload['userName'] = user_name
    if created_at is not None:
        payload['createdAt'] = created_at.isoformat()
    return payload


def render_markdown_report(
    budget: Budget,
    calculations: Calculations,
    title: str = "50/30/20 Budget Report",
    threshold: Optional[float] = None,
) -> str:
    """Render a markdown summary of the budget, its insights and tips."""
    insights = build_category_insights(calculations, threshold)
    balance = overall_balance(calculations.remaining)

    lines: List[str] = [f"# {title}", ""]
    lines.append(f"- Total income: {format_currency(calculations.total_income)}")
    lines.append(f"- Total expenses: {format_currency(calculations.total_expenses)}")
    lines.append(f"- Remaining: {format_currency(calculations.remaining)}")
    lines.append("")

    for category in CATEGORIES:
        insight = insights[category]
        lines.append(f"## {CATEGORY_HEADINGS[category]}")
        lines.append("")
        lines.append(
            f"{format_currency(insight.amount)} of {format_currency(calculations.total_income)} "
            f"({format_percentage(insight.percentage)}, target {insight.target:.0f}%, "
            f"ideal {format_currency(insight.ideal)})"
        )
        lines.append("")
        for item in budget.items_for(category):
            lines.append(f"- {item.name}: {format_currency(coerce_finite_non_negative(item.amount))}")
        if budget.items_for(category):
            lines.append("")
        lines.append(f"**{insight.message}**")
        lines.append("")
        for tip in insight.tips:
            lines.append(f"- {tip}")
        lines.append("")

    lines.append(f"## {balance.title}")
    lines.append("")
    lines.append(balance.message)
    lines.append("")
    lines.append("## Tips")
    lines.append("")
    for tip in improvement_tips(calculations):
        lines.append(f"- {tip}")
    return "\n".join(lines).rstrip() + "\n"


def save_report(text: str, name: str, directory: Optional[Path] = None) -> Path:
    """Write a rendered report to ``directory`` (default :data:`config.EXPORT_DIR`).

    Raises:
        OSError: If the report cannot be written
    """
    target_dir = directory or config.ensure_export_directory()
    target_dir.mkdir(parents=True, exist_ok=True)
    target = target_dir / f"{safe_filename(name)}.md"
    try:
        target.write_text(text, encoding='utf-8')
    except OSError as e:
        raise OSError(f"Failed to save report to {target}: {e}") from e
    logger.info("Saved budget report to %s", target)
    return target
