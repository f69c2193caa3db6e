"""Keyword rules for assigning a category to an expense description.

Rules are evaluated in declaration order, and keywords within a rule in
declaration order. The first keyword found anywhere in the lower-cased
description wins. Matching is plain substring matching, so a keyword also
matches inside longer words ("data" in "metadata", "ola" in "cola").
"""

from pennywise.domain.models import CategoryName

CategoryRule = tuple[tuple[str, ...], CategoryName]

CATEGORY_RULES: tuple[CategoryRule, ...] = (
    (("zomato", "swiggy", "restaurant"), CategoryName("Food")),
    (("sip", "mutual fund", "stocks", "investment"), CategoryName("Investment")),
    (("movie", "cinema", "theater"), CategoryName("Entertainment")),
    (
        ("uber", "ola", "taxi", "cab", "auto", "ride", "bus", "train", "metro"),
        CategoryName("Transport"),
    ),
    (
        (
            "amazon",
            "flipkart",
            "ajio",
            "myntra",
            "westside",
            "max",
            "pantaloons",
            "zara",
            "h&m",
            "tshirt",
            "shirt",
            "pant",
            "jeans",
        ),
        CategoryName("Shopping"),
    ),
    (
        (
            "bigbasket",
            "grofers",
            "dmart",
            "reliance fresh",
            "spencer",
            "more supermarket",
            "vegetables",
            "fruits",
            "grocery",
        ),
        CategoryName("Groceries"),
    ),
    (("rent",), CategoryName("Housing")),
    (
        (
            "wifi",
            "electricity",
            "broadband",
            "bill",
            "recharge",
            "mobile",
            "internet",
            "data",
            "phone",
            "cable",
            "tv",
            "battery",
        ),
        CategoryName("Utilities"),
    ),
)

# Existing rows in the expenses table carry this spelling
FALLBACK_CATEGORY = CategoryName("Misseleneous")

CATEGORIES: tuple[CategoryName, ...] = tuple(category for _, category in CATEGORY_RULES) + (FALLBACK_CATEGORY,)


def matching_keyword(description: str) -> tuple[CategoryName, str] | None:
    """Find the rule keyword that decides a description's category.

    Args:
        description: Expense description text.

    Returns:
        Tuple of (category, keyword) for the first match, or None if no rule matches.
    """
    lower = description.lower()
    for keywords, category in CATEGORY_RULES:
        for keyword in keywords:
            if keyword in lower:
                return category, keyword
    return None


def categorize(description: str) -> CategoryName:
    """Assign a category to an expense description.

    Args:
        description: Expense description text (case-insensitive).

    Returns:
        Category of the first matching rule, or FALLBACK_CATEGORY.
    """
    match = matching_keyword(description)
    if match is None:
        return FALLBACK_CATEGORY
    return match[0]
