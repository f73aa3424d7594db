from __future__ import annotations

QUESTIONS_PER_QUIZ = 5
OPTIONS_PER_QUESTION = 4

DEFAULT_CATEGORIES: tuple[str, ...] = (
    "Math",
    "Science",
    "General Knowledge",
)


def parse_categories(raw_categories: str) -> tuple[str, ...]:
    """Splits a comma-separated category list, dropping blanks and duplicates."""
    ordered: list[str] = []
    for item in raw_categories.split(","):
        category = item.strip()
        if not category or category in ordered:
            continue
        ordered.append(category)
    return tuple(ordered) if ordered else DEFAULT_CATEGORIES
