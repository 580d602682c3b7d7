"""Configuration management for the budget planner.

This module centralizes the tunable values of the 50/30/20 engine
(status tolerances, highlight threshold), paths, and environment
variable overrides.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Base project root - assumes this file is in budget_planner/
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r, using %s", name, raw, default)
        return default


# Percentage points a category may drift from its target and still count as on target
ON_TARGET_THRESHOLD = _float_from_env("BUDGET_ON_TARGET_THRESHOLD", 5.0)
STRICT_ON_TARGET_THRESHOLD = _float_from_env("BUDGET_STRICT_THRESHOLD", 2.0)

# Deviation (percentage points) above which a category is auto-highlighted
SIGNIFICANT_DEVIATION = _float_from_env("BUDGET_SIGNIFICANT_DEVIATION", 10.0)

CURRENCY_SYMBOL = os.getenv("BUDGET_CURRENCY_SYMBOL", "$")
LOG_LEVEL = os.getenv("BUDGET_LOG_LEVEL", "INFO")

# Exported reports
DATA_DIR = Path(os.getenv("BUDGET_DATA_DIR", _PROJECT_ROOT / "data"))
EXPORT_DIR = Path(os.getenv("BUDGET_EXPORT_DIR", DATA_DIR / "exports")).resolve()


def ensure_export_directory() -> Path:
    """Create the report export directory if it doesn't exist."""
    EXPORT_DIR.mkdir(parents=True, exist_ok=True)
    return EXPORT_DIR


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the Streamlit entry points."""
    resolved = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, resolved, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
