"""Domain models and types for pennywise.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from infrastructure
"""

from pennywise.domain.models import PAYMENT_TYPES, CategoryName, Description, Money, Month, PaymentType

__all__ = ["Money", "Month", "CategoryName", "Description", "PaymentType", "PAYMENT_TYPES"]
