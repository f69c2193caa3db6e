"""CLI entry point for pennywise."""

import typer

from pennywise.commands.auth import init_command, login_command, logout_command, signup_command, whoami_command
from pennywise.commands.expenses import add_command, list_command
from pennywise.commands.report import categorize_command, report_command, rules_command
from pennywise.log import configure_logging

app = typer.Typer(
    name="pennywise",
    help="PennyWISE - track your expenses and see where the money goes",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """PennyWISE - track your expenses and see where the money goes."""
    configure_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the configuration file with your backend credentials."""
    init_command(force)


@app.command()
def signup(
    email: str = typer.Option(..., prompt=True, help="Your email"),
    password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True, help="Your password"),
) -> None:
    """Create your account."""
    signup_command(email, password)


@app.command()
def login(
    email: str = typer.Option(..., prompt=True, help="Your email"),
    password: str = typer.Option(..., prompt=True, hide_input=True, help="Your password"),
) -> None:
    """Log in to your account."""
    login_command(email, password)


@app.command()
def logout() -> None:
    """Log out of your account."""
    logout_command()


@app.command()
def whoami() -> None:
    """Show who you are logged in as."""
    whoami_command()


@app.command()
def add(
    description: str,
    amount: str,
    date: str = typer.Option(None, "--date", "-d", help="Expense date (default: today, no future dates)"),
    payment_type: str = typer.Option("Debit", "--payment", "-p", help="Payment type: Credit, Debit or Cash"),
) -> None:
    """Add an expense; its category is picked from the description."""
    add_command(description, amount, date, payment_type)


@app.command(name="list")
def list_expenses(
    page: int = typer.Option(1, "--page", "-n", help="Page number"),
    page_size: int = typer.Option(None, "--page-size", help="Expenses per page (overrides config)"),
) -> None:
    """List your expenses, newest first."""
    list_command(page, page_size)


@app.command()
def report(
    month: str = typer.Option(None, "--month", help="Month for the category chart (YYYY-MM, default: this month)"),
) -> None:
    """Show your spending by category and by month."""
    report_command(month)


@app.command()
def categorize(description: str) -> None:
    """Show which category a description would get."""
    categorize_command(description)


@app.command()
def rules() -> None:
    """List the category keyword rules."""
    rules_command()


if __name__ == "__main__":
    app()
