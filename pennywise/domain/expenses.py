"""Pure functions for expense records and new-entry validation.

This module contains the functional core for expense operations:
- No I/O operations (no network, no console, no files)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in paise (Money type). The backend stores rupees,
so conversion happens only in expense_from_row and expense_to_row.
"""

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from pennywise.domain.categorizer import categorize
from pennywise.domain.models import PAYMENT_TYPES, CategoryName, Description, Money, PaymentType


@dataclass(frozen=True)
class Expense:
    """Immutable expense record."""

    id: str | None
    description: Description
    amount: Money
    date: date
    category: CategoryName
    payment_type: PaymentType
    user_id: str


def parse_amount(raw: str | float | int) -> Money:
    """Parse a rupee amount into paise.

    Args:
        raw: Amount in rupees, as text or number (e.g. "1,250.50").

    Returns:
        Amount in paise, rounded half-up to the nearest paisa.

    Raises:
        ValueError: If the amount is not numeric.
    """
    text = str(raw).strip().replace("₹", "").replace(",", "")
    try:
        rupees = Decimal(text)
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount '{raw}'") from e

    if not rupees.is_finite():
        raise ValueError(f"Invalid amount '{raw}'")

    return Money(int((rupees * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)))


def paise_to_rupees(amount: Money) -> float:
    """Convert paise to the decimal rupee value the backend stores."""
    return amount / 100


def format_money(amount: Money, symbol: str = "₹") -> str:
    """Format money amount for display.

    Args:
        amount: Amount in paise.
        symbol: Currency symbol prefix.

    Returns:
        Formatted string (e.g., "₹1,234.50", or "-₹5.00" when negative).
    """
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount) / 100:,.2f}"


def validate_new_expense(
    description: str,
    amount: str,
    expense_date: str,
    payment_type: str,
    user_id: str,
    today: date,
) -> tuple[Expense | None, str | None]:
    """Validate a new entry and categorize it.

    Args:
        description: Free-text description.
        amount: Amount in rupees as entered.
        expense_date: Date in YYYY-MM-DD format.
        payment_type: One of PAYMENT_TYPES.
        user_id: Owner of the record.
        today: Current date; entries may not be dated after it.

    Returns:
        Tuple of (expense, error). Exactly one of them is None.
    """
    description = description.strip()
    if not description or not amount or not expense_date:
        return None, "All fields are required!"

    try:
        paise = parse_amount(amount)
    except ValueError:
        return None, f"Amount must be a number, got '{amount}'"

    if paise <= 0:
        return None, "Amount must be positive"

    try:
        parsed_date = date.fromisoformat(expense_date)
    except ValueError:
        return None, f"Invalid date '{expense_date}' (expected YYYY-MM-DD)"

    if parsed_date > today:
        return None, "Date cannot be in the future"

    if payment_type not in PAYMENT_TYPES:
        return None, f"Payment type must be one of: {', '.join(PAYMENT_TYPES)}"

    expense = Expense(
        id=None,
        description=Description(description),
        amount=paise,
        date=parsed_date,
        category=categorize(description),
        payment_type=PaymentType(payment_type),
        user_id=user_id,
    )
    return expense, None


def expense_from_row(row: dict[str, Any]) -> Expense:
    """Build an Expense from an expenses table row.

    Args:
        row: Row dictionary as returned by the backend.

    Returns:
        Expense with the amount converted to paise.
    """
    row_id = row.get("id")
    return Expense(
        id=str(row_id) if row_id is not None else None,
        description=Description(row["description"]),
        amount=parse_amount(row["amount"]),
        date=date.fromisoformat(str(row["date"])[:10]),
        category=CategoryName(row["category"]),
        payment_type=PaymentType(row.get("payment_type") or ""),
        user_id=row["user_id"],
    )


def expense_to_row(expense: Expense) -> dict[str, Any]:
    """Serialize a new Expense for insertion.

    The id is omitted; the backend assigns it.
    """
    return {
        "description": expense.description,
        "amount": paise_to_rupees(expense.amount),
        "date": expense.date.isoformat(),
        "category": expense.category,
        "payment_type": expense.payment_type,
        "user_id": expense.user_id,
    }
