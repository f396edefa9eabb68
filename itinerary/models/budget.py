"""Budget models - manual expenses and derived breakdowns."""

from datetime import date

from pydantic import BaseModel, Field

from itinerary.models.common import BudgetCategory, BudgetStatus


class Expense(BaseModel):
    """Manual, pre-categorized cost entry."""

    id: str | None = None
    category: BudgetCategory
    amount: float = Field(..., ge=0)
    date: date
    description: str = ""


class BudgetBreakdown(BaseModel):
    """Amount per budget category."""

    accommodation: float = 0
    transportation: float = 0
    food: float = 0
    activities: float = 0
    miscellaneous: float = 0

    @property
    def total(self) -> float:
        """Sum across all categories."""
        return sum(self.amount_for(category) for category in BudgetCategory)

    def amount_for(self, category: BudgetCategory) -> float:
        """Amount recorded for a category."""
        return getattr(self, category.value)


class Budget(BaseModel):
    """Trip budget: a total plus an optional per-category allocation."""

    total: float = Field(..., ge=0)
    currency: str = "USD"
    allocation: BudgetBreakdown | None = None


class CategoryUsage(BaseModel):
    """Spending against the allocation of one category."""

    category: BudgetCategory
    allocated: float
    spent: float
    percent_used: float


class BudgetSummary(BaseModel):
    """Derived budget state; recomputed on demand, never stored as truth."""

    currency: str
    total: float
    spent: float
    remaining: float
    percent_used: float
    status: BudgetStatus
    per_traveler: float
    breakdown: BudgetBreakdown
    categories: list[CategoryUsage]
