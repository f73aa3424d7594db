from __future__ import annotations

import pytest

from quizmaster.game.questions.catalog import DEFAULT_CATEGORIES, parse_categories


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Math,Science,General Knowledge", ("Math", "Science", "General Knowledge")),
        (" Math , History,,Math ", ("Math", "History")),
        ("", DEFAULT_CATEGORIES),
        (" , ", DEFAULT_CATEGORIES),
    ],
)
def test_parse_categories(raw: str, expected: tuple[str, ...]) -> None:
    assert parse_categories(raw) == expected
