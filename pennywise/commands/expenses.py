"""Expense commands: add and list."""

import logging
import sys
from datetime import date

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pennywise.commands.auth import display_name, require_session, require_settings
from pennywise.config import Session, Settings
from pennywise.dates import normalize_date
from pennywise.domain.expenses import Expense, expense_from_row, expense_to_row, format_money, validate_new_expense
from pennywise.domain.pagination import build_page
from pennywise.integrations.supabase import SupabaseError, fetch_expenses, insert_expense

console = Console()
logger = logging.getLogger(__name__)


def load_expenses(settings: Settings, session: Session) -> list[Expense]:
    """Fetch the user's expenses, newest first, or exit on backend failure."""
    try:
        rows = fetch_expenses(settings, session)
    except SupabaseError as e:
        logger.error("Error fetching expenses: %s", e.message)
        console.print(f"[red]Error fetching expenses: {escape(e.message)}[/red]", style="bold")
        sys.exit(1)

    return [expense_from_row(row) for row in rows]


def add_command(
    description: str,
    amount: str,
    expense_date: str | None = None,
    payment_type: str = "Debit",
) -> None:
    """Add an expense, categorized from its description.

    Args:
        description: Expense description.
        amount: Amount in rupees.
        expense_date: Expense date (YYYY-MM-DD, DD/MM/YYYY, ...). Defaults to today.
        payment_type: Credit, Debit or Cash.
    """
    settings = require_settings()
    session = require_session()
    today = date.today()

    if expense_date:
        try:
            normalized_date = normalize_date(expense_date)
        except ValueError as e:
            console.print(f"[red]Invalid date format: {escape(str(e))}[/red]")
            console.print("[dim]Accepted formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, YYYY/MM/DD, DD.MM.YYYY[/dim]")
            sys.exit(1)
    else:
        normalized_date = today.isoformat()

    expense, error = validate_new_expense(
        description,
        amount,
        normalized_date,
        payment_type,
        session.user_id,
        today,
    )
    if expense is None:
        console.print(f"[red]{escape(error or '')}[/red]", style="bold")
        sys.exit(1)

    try:
        insert_expense(settings, session, expense_to_row(expense))
    except SupabaseError as e:
        logger.error("Error adding expense: %s", e.message)
        console.print(f"[red]Error adding expense: {escape(e.message)}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Expense added:")
    console.print(f"  Date: {expense.date.isoformat()}")
    console.print(f"  Description: {escape(expense.description)}")
    console.print(f"  Amount: {format_money(expense.amount, settings.currency)}")
    console.print(f"  Payment: {expense.payment_type}")
    console.print(f"  Category: [magenta]{escape(expense.category)}[/magenta]")


def render_page_navigation(number: int, total: int, has_previous: bool, has_next: bool) -> str:
    """Render the page selector line (e.g. "‹ Prev  1 [2] 3  Next ›").

    Args:
        number: Current page number.
        total: Total number of pages.
        has_previous: Whether a previous page exists.
        has_next: Whether a next page exists.

    Returns:
        Rich markup string.
    """
    prev_label = "‹ Prev" if has_previous else "[dim]‹ Prev[/dim]"
    next_label = "Next ›" if has_next else "[dim]Next ›[/dim]"
    pages = " ".join(f"[bold reverse] {n} [/bold reverse]" if n == number else f" {n} " for n in range(1, total + 1))
    return f"{prev_label}  {pages}  {next_label}"


def list_command(page: int = 1, page_size: int | None = None) -> None:
    """List expenses one page at a time."""
    settings = require_settings()
    session = require_session()

    size = page_size if page_size is not None else settings.page_size
    if size <= 0 or page < 1:
        console.print("[red]Page and page size must be positive[/red]", style="bold")
        sys.exit(1)

    expenses = load_expenses(settings, session)
    current = build_page(expenses, size, page)

    if current.total_pages == 0:
        console.print("[yellow]No expenses yet. Add one with 'pennywise add'[/yellow]")
        return

    if not current.items:
        console.print(f"[yellow]Page {page} is empty (there are {current.total_pages} pages)[/yellow]")
        return

    table = Table(title=f"Expenses for {escape(display_name(session.email))} (page {current.number} of {current.total_pages})")
    table.add_column("Date", style="cyan")
    table.add_column("Description", style="white")
    table.add_column("Amount", justify="right")
    table.add_column("Category", style="magenta")
    table.add_column("Payment", style="dim")

    for expense in current.items:
        table.add_row(
            expense.date.isoformat(),
            escape(expense.description),
            format_money(expense.amount, settings.currency),
            escape(expense.category),
            escape(expense.payment_type) if expense.payment_type else "[dim]-[/dim]",
        )

    console.print(table)
    console.print(
        render_page_navigation(current.number, current.total_pages, current.has_previous, current.has_next),
        justify="center",
    )
