"""Data structures shared by the aggregator, insight engine and UI."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Mapping, Optional

NEEDS = 'needs'
WANTS = 'wants'
SAVINGS = 'savings'

# Priority order used whenever categories are evaluated in sequence
CATEGORIES = (NEEDS, WANTS, SAVINGS)

TARGET_PERCENTAGES: Dict[str, float] = {
    NEEDS: 50.0,
    WANTS: 30.0,
    SAVINGS: 20.0,
}
TARGET_RATIOS: Dict[str, float] = {
    NEEDS: 0.5,
    WANTS: 0.3,
    SAVINGS: 0.2,
}

STATUS_OVER = 'over'
STATUS_UNDER = 'under'
STATUS_ON_TARGET = 'on-target'
STATUSES = (STATUS_OVER, STATUS_UNDER, STATUS_ON_TARGET)

BALANCE_SUCCESS = 'success'
BALANCE_WARNING = 'warning'
RECOMMENDATION_NEUTRAL = 'neutral'


def validate_category(category: str) -> str:
    if category not in CATEGORIES:
        raise ValueError(f"Unknown budget category '{category}'. Expected one of {', '.join(CATEGORIES)}")
    return category


@dataclass(frozen=True)
class BudgetItem:
    name: str
    amount: float
    category: str

    def __post_init__(self) -> None:
        validate_category(self.category)
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"Budget item in {self.category} needs a non-empty name, got {self.name!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], category: Optional[str] = None) -> 'BudgetItem':
        """Build an item from its wire representation.

        ``category`` overrides the mapping's own value, which lets callers
        trust the list an item was found in rather than its label.  An item
        without a name is labelled with its category title.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Budget item must be a mapping, got {type(data).__name__}")
        resolved = validate_category(category or data.get('category'))
        name = str(data.get('name') or '').strip() or resolved.capitalize()
        return cls(name=name, amount=data.get('amount'), category=resolved)

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'amount': self.amount, 'category': self.category}


@dataclass
class Budget:
    """Raw user input: income plus three itemised category lists."""

    income: float = 0.0
    additional_income: float = 0.0
    needs: Optional[List[BudgetItem]] = field(default_factory=list)
    wants: Optional[List[BudgetItem]] = field(default_factory=list)
    savings: Optional[List[BudgetItem]] = field(default_factory=list)

    def items_for(self, category: str) -> List[BudgetItem]:
        validate_category(category)
        return list(getattr(self, category) or [])

    def all_items(self) -> List[BudgetItem]:
        items: List[BudgetItem] = []
        for category in CATEGORIES:
            items.extend(self.items_for(category))
        return items

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> 'Budget':
        """Parse the camelCase payload used by the form and export services."""
        if not isinstance(payload, Mapping):
            raise TypeError(f"Budget payload must be a mapping, got {type(payload).__name__}")
        lists: Dict[str, List[BudgetItem]] = {}
        for category in CATEGORIES:
            raw_items = payload.get(category) or []
            lists[category] = [
                item if isinstance(item, BudgetItem) else BudgetItem.from_dict(item, category=category)
                for item in raw_items
            ]
        return cls(
            income=payload.get('income'),
            additional_income=payload.get('additionalIncome', payload.get('additional_income')),
            **lists,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'income': self.income,
            'additionalIncome': self.additional_income,
            NEEDS: [item.to_dict() for item in self.items_for(NEEDS)],
            WANTS: [item.to_dict() for item in self.items_for(WANTS)],
            SAVINGS: [item.to_dict() for item in self.items_for(SAVINGS)],
        }


@dataclass(frozen=True)
class Calculations:
    total_income: float
    needs_total: float
    wants_total: float
    savings_total: float
    total_expenses: float
    remaining: float
    needs_percentage: float
    wants_percentage: float
    savings_percentage: float
    ideal_needs: float
    ideal_wants: float
    ideal_savings: float
    needs_adjustment: float
    wants_adjustment: float
    savings_adjustment: float

    def total_for(self, category: str) -> float:
        return getattr(self, f"{validate_category(category)}_total")

    def percentage_for(self, category: str) -> float:
        return getattr(self, f"{validate_category(category)}_percentage")

    def ideal_for(self, category: str) -> float:
        return getattr(self, f"ideal_{validate_category(category)}")

    def adjustment_for(self, category: str) -> float:
        return getattr(self, f"{validate_category(category)}_adjustment")

    def to_dict(self) -> Dict[str, float]:
        """Return the calculations keyed the way external services expect (camelCase)."""
        result = {}
        for key, value in asdict(self).items():
            head, *rest = key.split('_')
            result[head + ''.join(part.capitalize() for part in rest)] = value
        return result


@dataclass(frozen=True)
class CategoryInsight:
    category: str
    amount: float
    percentage: float
    target: float
    ideal: float
    diff: float
    status: str
    tips: List[str]
    message: str

    @property
    def deviation(self) -> float:
        """Absolute percentage-point distance from the target."""
        return abs(self.percentage - self.target)


@dataclass(frozen=True)
class BalanceSummary:
    status: str
    title: str
    message: str


@dataclass(frozen=True)
class Recommendation:
    title: str
    description: str
    status: str
