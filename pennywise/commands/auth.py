"""Account commands: init, signup, login, logout, whoami."""

import logging
import sys

import typer
from rich.console import Console
from rich.markup import escape

from pennywise.config import (
    ConfigError,
    Session,
    Settings,
    clear_session,
    create_default_config,
    current_user,
    get_config_path,
    load_settings,
    save_session,
)
from pennywise.integrations.supabase import SupabaseError, get_user, sign_in, sign_out, sign_up

console = Console()
logger = logging.getLogger(__name__)


def require_settings() -> Settings:
    """Load settings or exit with a hint to run init."""
    try:
        return load_settings()
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]", style="bold")
        sys.exit(1)


def require_session() -> Session:
    """Load the signed-in session or exit with a hint to log in."""
    session = current_user()
    if session is None:
        console.print("[red]Not logged in. Run 'pennywise login' first.[/red]", style="bold")
        sys.exit(1)
    return session


def display_name(email: str) -> str:
    """Short name shown in headers (the part before the @)."""
    return email.split("@")[0]


def init_command(force: bool = False) -> None:
    """Create the configuration file with backend credentials."""
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'pennywise init --force' to overwrite[/yellow]")
        sys.exit(1)

    supabase_url = typer.prompt("Supabase project URL")
    anon_key = typer.prompt("Supabase anon key", hide_input=True)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(supabase_url.strip(), anon_key.strip(), config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print("[dim]Next: 'pennywise signup' or 'pennywise login'[/dim]")


def signup_command(email: str, password: str) -> None:
    """Register a new account."""
    settings = require_settings()

    try:
        session = sign_up(settings, email, password)
    except SupabaseError as e:
        logger.error("Sign-up failed: %s", e.message)
        console.print(f"[red]Sign-up failed: {escape(e.message)}[/red]", style="bold")
        sys.exit(1)

    if session is None:
        console.print("[green]✓[/green] Signup successful! Check your email to confirm.")
        return

    save_session(session)
    console.print(f"[green]✓[/green] Signup successful! Logged in as {escape(display_name(session.email))}")


def login_command(email: str, password: str) -> None:
    """Sign in and persist the session."""
    settings = require_settings()

    try:
        session = sign_in(settings, email, password)
    except SupabaseError as e:
        logger.error("Login failed: %s", e.message)
        console.print(f"[red]Login failed: {escape(e.message)}[/red]", style="bold")
        sys.exit(1)

    save_session(session)
    console.print(f"[green]✓[/green] Login successful! Welcome, {escape(display_name(session.email))}")


def logout_command() -> None:
    """Sign out and remove the persisted session."""
    session = current_user()
    if session is None:
        console.print("[yellow]Not logged in[/yellow]")
        return

    settings = require_settings()

    try:
        sign_out(settings, session.access_token)
    except SupabaseError as e:
        logger.error("Error logging out: %s", e.message)
        console.print(f"[red]Error logging out: {escape(e.message)}[/red]", style="bold")
        sys.exit(1)

    clear_session()
    console.print("[green]✓[/green] Logged out")


def whoami_command() -> None:
    """Show the signed-in user, verified against the backend."""
    session = require_session()
    settings = require_settings()

    try:
        user = get_user(settings, session.access_token)
    except SupabaseError as e:
        logger.error("Session check failed: %s", e.message)
        console.print(f"[red]Session is no longer valid: {escape(e.message)}[/red]", style="bold")
        console.print("[yellow]Run 'pennywise login' again[/yellow]")
        sys.exit(1)

    console.print(f"[bold]User:[/bold] {escape(display_name(user.email))}")
    console.print(f"[dim]{escape(user.email)} ({escape(user.id)})[/dim]")
