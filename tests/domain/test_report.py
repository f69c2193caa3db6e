"""Tests for pennywise.domain.report pure functions."""

from datetime import date

from pennywise.domain.expenses import Expense
from pennywise.domain.models import CategoryName, Description, Money, PaymentType
from pennywise.domain.report import (
    available_years,
    calculate_histogram_bar_length,
    category_shares,
    category_totals,
    monthly_totals,
)


def make_expense(description: str, amount: int, on: date, category: str) -> Expense:
    return Expense(
        id=None,
        description=Description(description),
        amount=Money(amount),
        date=on,
        category=CategoryName(category),
        payment_type=PaymentType("Debit"),
        user_id="user-1",
    )


class TestCategoryTotals:
    """Tests for category_totals."""

    def test_empty_list(self) -> None:
        """Should return an empty mapping for no expenses."""
        assert category_totals([], 2024, 5) == {}

    def test_example_month(self) -> None:
        """Should total each category in the selected month."""
        expenses = [
            make_expense("Swiggy order", 25000, date(2024, 5, 2), "Food"),
            make_expense("Uber ride", 12000, date(2024, 5, 3), "Transport"),
        ]

        assert category_totals(expenses, 2024, 5) == {"Food": 25000, "Transport": 12000}

    def test_single_category_sums(self) -> None:
        """Should return one entry equal to the sum."""
        expenses = [
            make_expense("Zomato", 10000, date(2024, 5, 1), "Food"),
            make_expense("Swiggy", 5050, date(2024, 5, 20), "Food"),
            make_expense("Restaurant", 2000, date(2024, 5, 31), "Food"),
        ]

        assert category_totals(expenses, 2024, 5) == {"Food": 17050}

    def test_filters_other_months_and_years(self) -> None:
        """Should ignore expenses outside the selected year and month."""
        expenses = [
            make_expense("Rent", 1500000, date(2024, 5, 1), "Housing"),
            make_expense("Rent", 1500000, date(2024, 4, 1), "Housing"),
            make_expense("Rent", 1500000, date(2023, 5, 1), "Housing"),
            make_expense("Movie", 40000, date(2024, 6, 1), "Entertainment"),
        ]

        assert category_totals(expenses, 2024, 5) == {"Housing": 1500000}

    def test_omits_absent_categories(self) -> None:
        """Should not zero-fill categories without expenses."""
        expenses = [make_expense("Bus", 3000, date(2024, 5, 1), "Transport")]

        result = category_totals(expenses, 2024, 5)

        assert "Food" not in result
        assert list(result) == ["Transport"]

    def test_does_not_mutate_input(self) -> None:
        """Should leave the input list unchanged."""
        expenses = [make_expense("Bus", 3000, date(2024, 5, 1), "Transport")]
        snapshot = list(expenses)

        category_totals(expenses, 2024, 5)

        assert expenses == snapshot


class TestMonthlyTotals:
    """Tests for monthly_totals."""

    def test_empty_list(self) -> None:
        """Should return an empty mapping for no expenses."""
        assert monthly_totals([]) == {}

    def test_groups_by_short_month_name(self) -> None:
        """Should key buckets by short month name in first-seen order."""
        expenses = [
            make_expense("Uber", 12000, date(2024, 6, 3), "Transport"),
            make_expense("Swiggy", 25000, date(2024, 5, 2), "Food"),
            make_expense("Metro", 4000, date(2024, 5, 1), "Transport"),
        ]

        result = monthly_totals(expenses)

        assert result == {"Jun": 12000, "May": 29000}
        assert list(result) == ["Jun", "May"]

    def test_same_month_of_different_years_shares_bucket(self) -> None:
        """Should merge the same calendar month across years (known limitation)."""
        expenses = [
            make_expense("Rent", 1000000, date(2024, 1, 1), "Housing"),
            make_expense("Rent", 900000, date(2023, 1, 1), "Housing"),
        ]

        assert monthly_totals(expenses) == {"Jan": 1900000}


class TestCategoryShares:
    """Tests for category_shares."""

    def test_percentages(self) -> None:
        """Should compute each slice's share of the total."""
        shares = category_shares({CategoryName("Food"): Money(7500), CategoryName("Transport"): Money(2500)})

        assert [share.category for share in shares] == ["Food", "Transport"]
        assert shares[0].percentage == 75.0
        assert shares[1].percentage == 25.0

    def test_empty_totals(self) -> None:
        """Should return no slices for no totals."""
        assert category_shares({}) == []


class TestAvailableYears:
    """Tests for available_years."""

    def test_distinct_years_newest_first(self) -> None:
        """Should list each year once, newest first."""
        expenses = [
            make_expense("A", 100, date(2023, 3, 1), "Food"),
            make_expense("B", 100, date(2024, 3, 1), "Food"),
            make_expense("C", 100, date(2023, 7, 1), "Food"),
        ]

        assert available_years(expenses) == [2024, 2023]

    def test_empty_list(self) -> None:
        """Should return no years for no expenses."""
        assert available_years([]) == []


class TestCalculateHistogramBarLength:
    """Tests for calculate_histogram_bar_length."""

    def test_full_bar_for_max(self) -> None:
        """Should fill the width for the largest amount."""
        assert calculate_histogram_bar_length(Money(5000), Money(5000), 30) == 30

    def test_scales_proportionally(self) -> None:
        """Should scale to the largest amount."""
        assert calculate_histogram_bar_length(Money(2500), Money(5000), 30) == 15

    def test_zero_max(self) -> None:
        """Should return 0 when there is nothing to scale against."""
        assert calculate_histogram_bar_length(Money(100), Money(0), 30) == 0
