"""APA reference assembly."""
from __future__ import annotations

import re
from typing import Iterable, List, Optional

from .dates import render_date, render_retrieval_date
from .formatting import TERMINAL_PUNCTUATION
from .lang import CaseTransformer, SentenceCaseTransformer
from .models import Entry
from .names import render_name_list
from .reference_types import SourceType, classify_source
from .sources import render_source
from .titles import render_title

_WHITESPACE = re.compile(r"\s+")


class ReferenceFormatter:
    """Render entries as APA reference-list lines.

    Every segment is optional; missing fields simply drop the clause they
    would have produced, so sparse records still yield a short reference.
    """

    def __init__(self, case: Optional[CaseTransformer] = None):
        self.case = case or SentenceCaseTransformer()

    def classify(self, entry: Entry) -> SourceType:
        return classify_source(entry)

    def format(self, entry: Entry) -> str:
        source_type = self.classify(entry)
        segments = [
            self.format_author(entry),
            self.format_date(entry) + ".",
            self.format_title(entry),
            render_source(entry, source_type, self.case),
            render_retrieval_date(entry),
        ]
        return _join_segments(segments)

    def format_all(self, entries: Iterable[Entry]) -> List[str]:
        return [self.format(entry) for entry in entries]

    @staticmethod
    def format_author(entry: Entry) -> str:
        return render_name_list(entry.authors)

    @staticmethod
    def format_date(entry: Entry) -> str:
        return render_date(entry)

    def format_title(self, entry: Entry) -> Optional[str]:
        return render_title(entry, self.case)


def _join_segments(segments: Iterable[Optional[str]]) -> str:
    res = ""
    for segment in segments:
        text = _WHITESPACE.sub(" ", segment or "").strip()
        if not text:
            continue
        if res.endswith(TERMINAL_PUNCTUATION) and text[0] in TERMINAL_PUNCTUATION:
            text = text[1:].lstrip()
            if not text:
                continue
        res = f"{res} {text}" if res else text
    return res
