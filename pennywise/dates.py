"""Date utilities for pennywise.

Pure functions for month selection and date parsing.
"""

from datetime import date, datetime

import pandas as pd

from pennywise.domain.models import Month


def parse_month(month: Month) -> tuple[int, int]:
    """Split a month into year and month number.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Tuple of (year, month) where month is 1-based.

    Raises:
        ValueError: If month is not a valid YYYY-MM string.
    """
    dt = datetime.strptime(month, "%Y-%m")
    return dt.year, dt.month


def month_name(month: int) -> str:
    """Get the full name of a 1-based month number (e.g., "January").

    Raises:
        ValueError: If month is outside 1-12.
    """
    return datetime(2000, month, 1).strftime("%B")


# Tried in order before falling back to pandas
DATE_FORMATS = ("%d/%m/%Y", "%d-%m-%Y", "%Y/%m/%d", "%d.%m.%Y")


def normalize_date(raw_date: str) -> str:
    """Normalize a user-entered date string to ISO format (YYYY-MM-DD).

    ISO dates and the explicit DATE_FORMATS are tried first. Anything else
    goes through pandas.to_datetime, read year first when the text starts
    with a four-digit year and day first otherwise.

    Args:
        raw_date: Raw date string.

    Returns:
        Normalized date in YYYY-MM-DD format.

    Raises:
        ValueError: If date cannot be parsed.
    """
    raw_date = raw_date.strip()
    try:
        return date.fromisoformat(raw_date).isoformat()
    except ValueError:
        pass

    for date_format in DATE_FORMATS:
        try:
            return datetime.strptime(raw_date, date_format).date().isoformat()
        except ValueError:
            continue

    year_first = raw_date[:4].isdigit()
    try:
        parsed_date = pd.to_datetime(raw_date, dayfirst=not year_first, yearfirst=year_first)
    except (ValueError, pd.errors.ParserError) as e:
        raise ValueError(f"Could not parse date '{raw_date}': {e}") from e

    if pd.isna(parsed_date):
        raise ValueError(f"Could not parse date '{raw_date}'")

    return parsed_date.strftime("%Y-%m-%d")
