"""Plain-text listing of formatted references."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from .formatter import ReferenceFormatter
from .models import Entry
from .reference_types import label_for_kind


@dataclass(frozen=True)
class FormattedReference:
    key: str
    source_type: str
    reference: str

    def as_dict(self) -> Dict[str, str]:
        return {"key": self.key, "source_type": self.source_type, "reference": self.reference}


def format_library(entries: Iterable[Entry], formatter: ReferenceFormatter | None = None) -> List[FormattedReference]:
    formatter = formatter or ReferenceFormatter()
    return [
        FormattedReference(
            key=entry.key,
            source_type=label_for_kind(formatter.classify(entry).kind),
            reference=formatter.format(entry),
        )
        for entry in entries
    ]


def render_listing(results: List[FormattedReference], show_types: bool = False) -> str:
    """Return one reference per line, in input order."""
    lines = []
    for result in results:
        if show_types:
            lines.append(f"[{result.source_type}] {result.reference}")
        else:
            lines.append(result.reference)
    return "\n".join(lines)
