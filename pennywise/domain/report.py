"""Pure functions for report calculations and aggregations.

This module contains the functional core for reporting operations:
- No I/O operations (no network, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in paise (Money type).
"""

from collections.abc import Iterable
from dataclasses import dataclass

from pennywise.domain.expenses import Expense
from pennywise.domain.models import CategoryName, Money


@dataclass(frozen=True)
class CategoryShare:
    """Immutable slice of the category distribution chart."""

    category: CategoryName
    amount: Money
    percentage: float


def category_totals(expenses: Iterable[Expense], year: int, month: int) -> dict[CategoryName, Money]:
    """Sum expenses per category for one calendar month.

    Args:
        expenses: Expense records in any order.
        year: Calendar year.
        month: Calendar month, 1-based.

    Returns:
        Dictionary of category to total. Categories with no expenses in the
        month are omitted.
    """
    totals: dict[CategoryName, Money] = {}
    for expense in expenses:
        if expense.date.year == year and expense.date.month == month:
            totals[expense.category] = Money(totals.get(expense.category, 0) + expense.amount)
    return totals


def monthly_totals(expenses: Iterable[Expense]) -> dict[str, Money]:
    """Sum expenses per calendar month name.

    Buckets are keyed by short month name only ("Jan", "Feb", ...), so the
    same month of different years lands in one bucket. Keys appear in the
    order first seen in the input.

    Args:
        expenses: Expense records, usually newest first.

    Returns:
        Dictionary of short month name to total.
    """
    totals: dict[str, Money] = {}
    for expense in expenses:
        label = expense.date.strftime("%b")
        totals[label] = Money(totals.get(label, 0) + expense.amount)
    return totals


def category_shares(totals: dict[CategoryName, Money]) -> list[CategoryShare]:
    """Turn category totals into chart slices.

    Args:
        totals: Dictionary of category to total.

    Returns:
        List of CategoryShare in the order of the totals dictionary.
    """
    grand_total = sum(totals.values())
    if grand_total <= 0:
        return [CategoryShare(category=cat, amount=amt, percentage=0.0) for cat, amt in totals.items()]

    return [
        CategoryShare(category=cat, amount=amt, percentage=(amt / grand_total) * 100) for cat, amt in totals.items()
    ]


def available_years(expenses: Iterable[Expense]) -> list[int]:
    """Get the distinct years that have expenses, newest first."""
    return sorted({expense.date.year for expense in expenses}, reverse=True)


def calculate_histogram_bar_length(
    amount: Money,
    max_amount: Money,
    bar_width: int,
) -> int:
    """Calculate histogram bar length.

    Args:
        amount: Amount to display.
        max_amount: Maximum amount in dataset.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_amount <= 0:
        return 0
    return int((abs(amount) / max_amount) * bar_width)
