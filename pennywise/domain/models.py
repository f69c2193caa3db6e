"""Domain type definitions for pennywise.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in paise (minor units)
- Month: Month in YYYY-MM format
- CategoryName: Name of an expense category
- Description: Expense description text
- PaymentType: How the expense was paid
"""

from typing import NewType

# Money amounts are held as paise (minor units) to avoid floating point errors
Money = NewType("Money", int)

# Month is always in YYYY-MM format (e.g., "2025-01")
Month = NewType("Month", str)

# Category name assigned by the categorizer
CategoryName = NewType("CategoryName", str)

# Expense description text
Description = NewType("Description", str)

PaymentType = NewType("PaymentType", str)

PAYMENT_TYPES: tuple[PaymentType, ...] = (
    PaymentType("Credit"),
    PaymentType("Debit"),
    PaymentType("Cash"),
)
