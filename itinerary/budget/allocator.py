"""Budget categorization, breakdown and utilization."""

from itinerary.config import Settings, get_settings
from itinerary.models.budget import Budget, BudgetBreakdown, BudgetSummary, CategoryUsage, Expense
from itinerary.models.common import ActivityType, BudgetCategory, BudgetStatus
from itinerary.models.day import Activity

CATEGORY_BY_ACTIVITY_TYPE: dict[ActivityType, BudgetCategory] = {
    ActivityType.dining: BudgetCategory.food,
    ActivityType.transport: BudgetCategory.transportation,
    ActivityType.accommodation: BudgetCategory.accommodation,
    ActivityType.activity: BudgetCategory.activities,
    ActivityType.sightseeing: BudgetCategory.activities,
    ActivityType.entertainment: BudgetCategory.activities,
    ActivityType.cultural: BudgetCategory.activities,
    ActivityType.outdoor: BudgetCategory.activities,
}


def categorize(activity_type: ActivityType | str) -> BudgetCategory:
    """Budget category for an activity type; unknown types are miscellaneous."""
    try:
        known = ActivityType(activity_type)
    except ValueError:
        return BudgetCategory.miscellaneous
    return CATEGORY_BY_ACTIVITY_TYPE.get(known, BudgetCategory.miscellaneous)


def compute_breakdown(
    activities: list[Activity],
    expenses: list[Expense],
    traveler_count: int,
) -> BudgetBreakdown:
    """Sum activity costs and manual expenses per category.

    Per-person activity costs are multiplied by the traveler count. Expenses
    keep their declared category.

    Raises:
        ValueError: If traveler_count is below 1
    """
    if traveler_count < 1:
        raise ValueError(f"traveler_count must be >= 1, got {traveler_count}")

    totals: dict[BudgetCategory, float] = {category: 0.0 for category in BudgetCategory}

    for activity in activities:
        if activity.cost is None:
            continue
        multiplier = traveler_count if activity.cost.per_person else 1
        totals[categorize(activity.type)] += activity.cost.amount * multiplier

    for expense in expenses:
        totals[expense.category] += expense.amount

    return BudgetBreakdown(**{category.value: amount for category, amount in totals.items()})


def utilization_percent(spent: float, total: float) -> float:
    """Share of the budget used, in percent (0 when there is no budget)."""
    return spent / total * 100 if total > 0 else 0


def budget_status(percent_used: float, settings: Settings | None = None) -> BudgetStatus:
    """Status for a utilization percentage, checked from worst to best."""
    settings = settings or get_settings()
    if percent_used >= settings.budget_over_pct:
        return BudgetStatus.OVER
    if percent_used >= settings.budget_near_limit_pct:
        return BudgetStatus.NEAR_LIMIT
    if percent_used >= settings.budget_on_track_pct:
        return BudgetStatus.ON_TRACK
    return BudgetStatus.UNDER_BUDGET


def summarize_budget(
    budget: Budget,
    activities: list[Activity],
    expenses: list[Expense],
    traveler_count: int,
    settings: Settings | None = None,
) -> BudgetSummary:
    """Full budget picture derived from the live activities and expenses."""
    breakdown = compute_breakdown(activities, expenses, traveler_count)
    spent = breakdown.total
    percent_used = utilization_percent(spent, budget.total)

    categories: list[CategoryUsage] = []
    for category in BudgetCategory:
        category_spent = breakdown.amount_for(category)
        # Without an allocation, each category is measured against its own spend
        allocated = (
            budget.allocation.amount_for(category) if budget.allocation else category_spent
        )
        categories.append(
            CategoryUsage(
                category=category,
                allocated=allocated,
                spent=category_spent,
                percent_used=utilization_percent(category_spent, allocated),
            )
        )

    return BudgetSummary(
        currency=budget.currency,
        total=budget.total,
        spent=spent,
        remaining=budget.total - spent,
        percent_used=percent_used,
        status=budget_status(percent_used, settings),
        per_traveler=spent / traveler_count,
        breakdown=breakdown,
        categories=categories,
    )
