"""Report and categorize commands for viewing spending."""

import sys
from datetime import datetime

from rich.console import Console
from rich.markup import escape

from pennywise.commands.auth import require_session, require_settings
from pennywise.commands.expenses import load_expenses
from pennywise.dates import month_name, parse_month
from pennywise.domain.categorizer import CATEGORY_RULES, FALLBACK_CATEGORY, matching_keyword
from pennywise.domain.expenses import format_money
from pennywise.domain.models import CategoryName, Money, Month
from pennywise.domain.report import (
    available_years,
    calculate_histogram_bar_length,
    category_shares,
    category_totals,
    monthly_totals,
)

console = Console()

# One colour per slice, cycled
SLICE_COLORS = ["red", "green", "blue", "yellow", "bright_red", "cyan", "magenta", "dark_orange"]


def compute_report_month(month: Month | None) -> tuple[int, int]:
    """Resolve the selected year and month, defaulting to the current month.

    Args:
        month: Optional specific month (YYYY-MM format).

    Returns:
        Tuple of (year, month).
    """
    if month:
        return parse_month(month)

    now = datetime.now()
    return now.year, now.month


def render_category_distribution(totals: dict[CategoryName, Money], currency: str, bar_width: int = 30) -> None:
    """Render the category distribution chart for one month."""
    shares = category_shares(totals)
    max_amount = Money(max(share.amount for share in shares))

    for idx, share in enumerate(shares):
        color = SLICE_COLORS[idx % len(SLICE_COLORS)]
        bar = "█" * calculate_histogram_bar_length(share.amount, max_amount, bar_width)
        amount_display = format_money(share.amount, currency)
        console.print(f"  {escape(share.category):15} {amount_display:>14} {share.percentage:5.1f}%  [{color}]{bar}[/{color}]")

    total = Money(sum(totals.values()))
    console.print(f"\n  [bold]Total:[/bold] {format_money(total, currency)}\n")


def render_monthly_spending(totals: dict[str, Money], currency: str, bar_width: int = 40) -> None:
    """Render the monthly spending chart."""
    max_amount = Money(max(totals.values()))

    for label, amount in totals.items():
        bar = "█" * calculate_histogram_bar_length(amount, max_amount, bar_width)
        console.print(f"  {label:5} {format_money(amount, currency):>14}  [yellow]{bar}[/yellow]")


def report_command(month: str | None = None) -> None:
    """Show the category distribution for a month and monthly spending."""
    settings = require_settings()
    session = require_session()

    try:
        year, month_number = compute_report_month(Month(month) if month else None)
    except ValueError:
        console.print(f"[red]Invalid month '{escape(month or '')}' (expected YYYY-MM)[/red]", style="bold")
        sys.exit(1)

    expenses = load_expenses(settings, session)

    if not expenses:
        console.print("[dim]No expenses yet[/dim]")
        return

    years = ", ".join(str(y) for y in available_years(expenses))
    console.print(f"[bold cyan]Expense Distribution - {month_name(month_number)} {year}[/bold cyan]")
    console.print(f"[dim]Years with expenses: {years}[/dim]\n")

    totals = category_totals(expenses, year, month_number)
    if totals:
        render_category_distribution(totals, settings.currency)
    else:
        console.print(f"  [dim]No expenses in {month_name(month_number)} {year}[/dim]\n")

    console.print("[bold cyan]Monthly Spending[/bold cyan]\n")
    render_monthly_spending(monthly_totals(expenses), settings.currency)


def categorize_command(description: str) -> None:
    """Show which category a description would be filed under."""
    match = matching_keyword(description)

    if match is None:
        console.print(f"[magenta]{FALLBACK_CATEGORY}[/magenta] [dim](no keyword matched)[/dim]")
        return

    category, keyword = match
    console.print(f"[magenta]{category}[/magenta] [dim](matched '{keyword}')[/dim]")


def rules_command() -> None:
    """List the keyword rules in the order they are applied."""
    for idx, (keywords, category) in enumerate(CATEGORY_RULES, 1):
        console.print(f"  {idx}. [magenta]{category}[/magenta]: {', '.join(keywords)}")
    console.print(f"  [dim]Otherwise: {FALLBACK_CATEGORY}[/dim]")
