"""Shared clause and range helpers used by every segment renderer."""
from __future__ import annotations

from typing import List, Optional

from .models import NumericRange

TERMINAL_PUNCTUATION = ("?", ".", "!")


def format_range(singular: str, plural: str, value: NumericRange) -> str:
    """Render ``"Vol. 3"`` / ``"Vols. 3–5"``; empty labels give ``"3"`` / ``"3–5"``."""
    if value.start == value.end:
        label, body = singular, f"{value.start}"
    else:
        label, body = plural, f"{value.start}–{value.end}"
    return f"{label} {body}" if label else body


def terminate(text: str) -> str:
    """Append a period unless the text already ends in terminal punctuation."""
    if not text or text.endswith(TERMINAL_PUNCTUATION):
        return text
    return text + "."


class ClauseList:
    """Collects optional clauses, joining them with commas.

    A comma only ever separates two emitted clauses and the terminal period
    is only written when at least one clause was emitted.
    """

    def __init__(self):
        self.clauses: List[str] = []

    def add(self, clause: Optional[str]) -> "ClauseList":
        if clause:
            self.clauses.append(clause)
        return self

    def joined(self) -> str:
        return ", ".join(self.clauses)

    def sentence(self) -> str:
        return terminate(self.joined())
