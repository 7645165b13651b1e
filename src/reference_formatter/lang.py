"""English calendar names, ordinals and sentence casing."""
from __future__ import annotations

import re
from typing import Callable, FrozenSet, Iterable

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

CaseTransformer = Callable[[str], str]


def month_name(month: int) -> str:
    """Return the English name for a month number (1-12)."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {month}")
    return MONTH_NAMES[month - 1]


def ordinal(number: int) -> str:
    """Format number as ordinal (1st, 2nd, 3rd, etc.)."""
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


_WORD = re.compile(r"\S+")
_LETTERS = re.compile(r"[^\W\d_]+")
_DOTTED_ABBREVIATION = re.compile(r"(?:[^\W\d_]\.){2,}|[A-Z]\.")


def _is_abbreviation(word: str) -> bool:
    """``U.S.``, ``e.g.`` or an initial such as ``J.``."""
    return _DOTTED_ABBREVIATION.fullmatch(word.rstrip(",;)\"'")) is not None


class SentenceCaseTransformer:
    """Lower-case every word except the first and those that look like proper nouns.

    A word is kept as written when it is an acronym (``DNA``, ``U.S.``),
    carries inner capitals (``iPhone``, ``McDonald``), is the pronoun ``I``
    or is listed in ``keep``. The first word of the title and of every
    subtitle (after ``:``, ``?``, ``!``, ``.``) is capitalised; the period of
    an abbreviation does not start a subtitle.
    """

    def __init__(self, keep: Iterable[str] = ()):
        self.keep: FrozenSet[str] = frozenset(keep)

    def __call__(self, text: str) -> str:
        pieces = []
        position = 0
        capitalize_next = True
        for match in _WORD.finditer(text):
            word = match.group(0)
            pieces.append(text[position:match.start()])
            pieces.append(self._transform_word(word, capitalize_next))
            position = match.end()
            if _is_abbreviation(word):
                capitalize_next = False
            else:
                # Leading numbers or symbols do not use up the capital.
                capitalize_next = word[-1] in ":?!." or (capitalize_next and not _LETTERS.search(word))
        pieces.append(text[position:])
        return "".join(pieces)

    def _transform_word(self, word: str, capitalize: bool) -> str:
        segments = _LETTERS.findall(word)
        if not segments:
            return word
        if word in self.keep or segments[0] == "I" or _is_abbreviation(word):
            return word
        if any(self._is_proper(segment) for segment in segments):
            return word
        lowered = word.lower()
        if capitalize:
            for index, char in enumerate(lowered):
                if char.isalpha():
                    return lowered[:index] + char.upper() + lowered[index + 1:]
        return lowered

    @staticmethod
    def _is_proper(letters: str) -> bool:
        if len(letters) > 1 and letters.isupper():
            return True
        return any(char.isupper() for char in letters[1:])
