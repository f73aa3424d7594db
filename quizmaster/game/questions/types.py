from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class QuizQuestion:
    text: str
    options: tuple[str, ...]
    correct_option: str

    def is_correct(self, option: str) -> bool:
        return option == self.correct_option

    def has_option(self, option: str) -> bool:
        return option in self.options
