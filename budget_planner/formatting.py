"""Formatting utilities for currency and text display."""

from __future__ import annotations

from typing import Optional, Union

from . import config


def escape_dollar_for_markdown(amount: float) -> str:
    """Format a dollar amount and escape the dollar sign for markdown rendering.

    Streamlit markdown treats ``$`` as a LaTeX math delimiter, which turns
    text between two amounts into italics.

    Example:
        >>> escape_dollar_for_markdown(1234.56)
        '\\\\$1,234.56'
    """
    return format_currency(amount).replace("$", "\\$")


def format_currency(amount: Union[float, int], include_sign: bool = True) -> str:
    """Format a currency amount with thousands separators and two decimals.

    Negative amounts keep the minus sign in front of the symbol.

    Example:
        >>> format_currency(1234.56)
        '$1,234.56'
        >>> format_currency(-200)
        '-$200.00'
        >>> format_currency(1234.56, include_sign=False)
        '1,234.56'
    """
    sign = "-" if amount < 0 else ""
    formatted = f"{abs(amount):,.2f}"
    symbol = config.CURRENCY_SYMBOL if include_sign else ""
    return f"{sign}{symbol}{formatted}"


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format a percentage value, e.g. ``format_percentage(18.75)`` -> ``'18.8%'``."""
    return f"{value:.{decimals}f}%"


def safe_filename(name: str, default: str = 'budget_report', max_length: Optional[int] = None) -> str:
    """Create a safe filename from a user-provided name.

    Keeps alphanumerics, spaces, underscores and hyphens, and turns spaces
    into underscores.

    Example:
        >>> safe_filename("Jane's Budget (May)!")
        'Janes_Budget_May'
        >>> safe_filename("", default="budget")
        'budget'
    """
    if not name:
        return default

    cleaned = ''.join(c for c in name if c.isalnum() or c in {' ', '_', '-'})
    cleaned = cleaned.strip().replace(' ', '_')

    while '__' in cleaned:
        cleaned = cleaned.replace('__', '_')

    if max_length is not None and len(cleaned) > max_length:
        cleaned = cleaned[:max_length]

    cleaned = cleaned.rstrip('_')

    return cleaned if cleaned else default


def escape_markdown_dollars(text: str) -> str:
    """Escape every ``$`` in already formatted text for Streamlit markdown."""
    return text.replace("$", "\\$")
