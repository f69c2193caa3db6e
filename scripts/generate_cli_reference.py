#!/usr/bin/env python3
"""Generate the pennywise CLI reference from the typer app."""

import sys
from pathlib import Path
from typing import Any

# Add parent directory to path to import pennywise
sys.path.insert(0, str(Path(__file__).parent.parent))

import typer
from typer.core import TyperArgument, TyperOption

from pennywise.cli import app
from pennywise.dates import DATE_FORMATS
from pennywise.domain.models import PAYMENT_TYPES
from pennywise.domain.pagination import DEFAULT_PAGE_SIZE

# Commands in the order a new user runs them
AUTH_FLOW = ["init", "signup", "login", "whoami", "logout"]

# strptime directive -> what the user types
FORMAT_LABELS = {"%d": "DD", "%m": "MM", "%Y": "YYYY"}


def format_label(date_format: str) -> str:
    """Turn a strptime format into a DD/MM/YYYY style label."""
    for directive, label in FORMAT_LABELS.items():
        date_format = date_format.replace(directive, label)
    return date_format


def argument_name(argument: TyperArgument) -> str:
    """Name a positional argument the way usage lines show it (DESCRIPTION)."""
    return (argument.name or "").upper()


def usage_line(name: str, command: Any) -> str:
    """Build the usage line, e.g. "pennywise add [OPTIONS] DESCRIPTION AMOUNT"."""
    pieces = [f"pennywise {name}"]
    if any(isinstance(param, TyperOption) for param in command.params):
        pieces.append("[OPTIONS]")
    pieces.extend(argument_name(param) for param in command.params if isinstance(param, TyperArgument))
    return " ".join(pieces)


def option_line(option: TyperOption) -> str:
    """Format one option as a markdown list item."""
    flags = ", ".join(f"`{flag}`" for flag in option.opts + option.secondary_opts)
    line = f"- {flags}"
    if option.help:
        line += f": {option.help}"
    if option.prompt:
        line += " (prompted when omitted)"
    elif option.default is not None and option.default is not False:
        line += f" (default: {option.default})"
    return line


def generate_command_doc(name: str, command: Any) -> list[str]:
    """Generate the section for one command."""
    lines = [
        f"### {name}",
        "",
        (command.help or "").strip(),
        "",
        "```bash",
        usage_line(name, command),
        "```",
        "",
    ]

    arguments = [param for param in command.params if isinstance(param, TyperArgument)]
    if arguments:
        lines.extend(["**Arguments:**", ""])
        lines.extend(f"- `{argument_name(param)}` (required)" for param in arguments)
        lines.append("")

    options = [param for param in command.params if isinstance(param, TyperOption)]
    if options:
        lines.extend(["**Options:**", ""])
        lines.extend(option_line(param) for param in options)
        lines.append("")

    return lines


def generate_getting_started() -> list[str]:
    """Describe the account flow and where settings come from."""
    return [
        "## Getting Started",
        "",
        "```bash",
        *(f"pennywise {name}" for name in AUTH_FLOW[:3]),
        "```",
        "",
        "`init` asks for the Supabase project URL and anon key and writes them to",
        "`$XDG_CONFIG_HOME/pennywise/config.toml` (`~/.config/pennywise/config.toml`",
        "when `XDG_CONFIG_HOME` is unset) with permissions 600.",
        "`signup` creates an account; if the project requires email confirmation,",
        "confirm it and then run `login`. `login` stores the session in",
        "`session.toml` next to the config file, and every other command reads it.",
        "`whoami` checks the stored session against the backend and `logout` signs",
        "out and removes it. The session is kept if the sign-out call fails.",
        "",
        "## Configuration",
        "",
        "| Setting | Config key | Environment override | Default |",
        "|---------|------------|----------------------|---------|",
        "| Project URL | `supabase.url` | `SUPABASE_URL` | (none) |",
        "| Anon key | `supabase.anon_key` | `SUPABASE_ANON_KEY` | (none) |",
        f"| Expenses per page | `display.page_size` | | {DEFAULT_PAGE_SIZE} |",
        "| Currency symbol | `display.currency` | | ₹ |",
        "",
        "Environment variables win over the config file. When both are set the",
        "config file is optional.",
        "",
    ]


def generate_add_notes() -> list[str]:
    """Describe the dates and payment types `add` accepts."""
    formats = ", ".join(f"`{format_label(fmt)}`" for fmt in ("%Y-%m-%d",) + DATE_FORMATS)
    payments = ", ".join(f"`{payment}`" for payment in PAYMENT_TYPES)
    return [
        "## Adding Expenses",
        "",
        f"`--date` accepts {formats}.",
        "Other spellings are parsed leniently, year first when the text starts with",
        "a four-digit year and day first otherwise. Dates in the future are rejected;",
        "without `--date` the expense is dated today.",
        "",
        f"`--payment` must be one of {payments}.",
        "The category is picked from the description; run `pennywise rules` to see",
        "the keywords, or `pennywise categorize TEXT` to try one out.",
        "",
    ]


def generate_cli_reference() -> str:
    """Generate complete CLI reference documentation."""
    group = typer.main.get_command(app)

    lines = [
        "---",
        "tags: [reference]",
        "---",
        "",
        "# CLI Commands Reference",
        "",
        "```bash",
        "pennywise [--verbose] COMMAND [OPTIONS] [ARGS]",
        "```",
        "",
        "`--verbose` / `-v` turns on debug logging, including every backend request.",
        "",
    ]
    lines.extend(generate_getting_started())
    lines.extend(generate_add_notes())
    lines.extend(["## Commands", ""])

    for name, command in group.commands.items():
        lines.extend(generate_command_doc(name, command))

    return "\n".join(lines)


def main() -> None:
    """Generate and write CLI reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "reference" / "cli-commands.md"

    doc = generate_cli_reference()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(doc)
    print(f"Generated CLI reference at {output_path}")


if __name__ == "__main__":
    main()
