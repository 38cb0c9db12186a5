# quiz/difficulty.py
from __future__ import annotations

from enum import Enum


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def is_definite(self) -> bool:
        """Medium questions are definite integrals with a numeric answer."""
        return self is Difficulty.MEDIUM

    @property
    def tier(self) -> int:
        # menu tier for indefinite questions; medium draws from the definite menu instead
        return {Difficulty.EASY: 0, Difficulty.MEDIUM: 1, Difficulty.HARD: 2}[self]

    @classmethod
    def parse(cls, raw: str | int) -> "Difficulty":
        """Accept the enum value ("easy") or the stored ordinal (0, 1, 2)."""
        if isinstance(raw, int):
            members = list(cls)
            if 0 <= raw < len(members):
                return members[raw]
            raise ValueError(f"unknown difficulty ordinal: {raw}")
        try:
            return cls(raw.strip().lower())
        except ValueError:
            raise ValueError(f"unknown difficulty: {raw!r}") from None
