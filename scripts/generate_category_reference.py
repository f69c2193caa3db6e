#!/usr/bin/env python3
"""Generate category rules and expenses table reference documentation."""

import sys
from pathlib import Path

# Add parent directory to path to import pennywise
sys.path.insert(0, str(Path(__file__).parent.parent))

from pennywise.domain.categorizer import CATEGORY_RULES, FALLBACK_CATEGORY
from pennywise.domain.models import PAYMENT_TYPES


def generate_rules_table() -> list[str]:
    """Generate the markdown table of keyword rules in evaluation order."""
    lines = [
        "| Order | Category | Keywords |",
        "|-------|----------|----------|",
    ]
    for idx, (keywords, category) in enumerate(CATEGORY_RULES, 1):
        keyword_list = ", ".join(f"`{kw}`" for kw in keywords)
        lines.append(f"| {idx} | {category} | {keyword_list} |")
    lines.append(f"| — | {FALLBACK_CATEGORY} | (no keyword matched) |")
    lines.append("")
    return lines


def generate_category_reference() -> str:
    """Generate complete category reference documentation."""
    lines = [
        "---",
        "tags: [reference]",
        "---",
        "",
        "# Categories Reference",
        "",
        "Every expense gets its category from its description when it is added.",
        "The description is lower-cased and checked against each rule in order;",
        "the first rule with a keyword contained anywhere in the description wins.",
        "",
        "## Rules",
        "",
    ]

    lines.extend(generate_rules_table())

    lines.extend(
        [
            "## Known Limitations",
            "",
            "- Keywords match inside longer words: `data` matches \"metadata\", `ola` matches \"cola\".",
            "- Earlier rules win: \"Uber to restaurant\" is Food, not Transport.",
            "- Categories are never recalculated after an expense is saved.",
            "",
        ]
    )

    lines.extend(
        [
            "## Expenses Table",
            "",
            "| Column | Description |",
            "|--------|-------------|",
            "| id | Assigned by the backend |",
            "| description | Text entered by the user |",
            "| amount | Amount in rupees (pennywise works in paise internally) |",
            "| date | Expense date (YYYY-MM-DD), never in the future |",
            "| category | One of the categories above |",
            f"| payment_type | {', '.join(PAYMENT_TYPES)} |",
            "| user_id | Owning user |",
            "",
        ]
    )

    return "\n".join(lines)


def main() -> None:
    """Generate and write category reference documentation."""
    output_path = Path(__file__).parent.parent / "docs" / "reference" / "categories.md"

    doc = generate_category_reference()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(doc)
    print(f"Generated category reference at {output_path}")


if __name__ == "__main__":
    main()
