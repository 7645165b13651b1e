"""Title rendering with edition and volume qualifiers."""
from __future__ import annotations

from typing import Optional

from .formatting import format_range, terminate
from .lang import CaseTransformer, ordinal
from .models import Entry, EntryType
from .reference_types import Modality, TypeSpec

MULTIVOLUME_SPEC = TypeSpec(Modality.specific(EntryType.BOOK), Modality.specific(EntryType.BOOK))
BOOK_LIKE_SPEC = TypeSpec(
    Modality.alternate(
        EntryType.BOOK,
        EntryType.REPORT,
        EntryType.REFERENCE,
        EntryType.ANTHOLOGY,
        EntryType.PROCEEDINGS,
    )
)


def volume_label(entry: Entry) -> Optional[str]:
    if entry.volume is None:
        return None
    return format_range("Vol.", "Vols.", entry.volume)


def edition_label(entry: Entry) -> Optional[str]:
    if entry.edition is None:
        return None
    if isinstance(entry.edition, int):
        return ordinal(entry.edition)
    return entry.edition


def edition_volume_suffix(entry: Entry) -> str:
    """Return ``" (2nd ed., Vol. 4)."``-style suffixes, or ``""`` when neither is set."""
    edition = edition_label(entry)
    volume = volume_label(entry)
    if edition and volume:
        return f" ({edition} ed., {volume})."
    if edition:
        return f" ({edition} ed.)."
    if volume:
        return f" ({volume})."
    return ""


def render_title(entry: Entry, case: CaseTransformer) -> Optional[str]:
    if not entry.title:
        return None
    title = case(entry.title)

    match = MULTIVOLUME_SPEC.check(entry)
    if match is not None and entry.volume is not None:
        parent = entry.parents[match.parent_index]
        if parent.title:
            return f"{case(parent.title)}: {volume_label(entry)} {title}."

    if (entry.volume is not None or entry.edition is not None) and BOOK_LIKE_SPEC.check(entry):
        return title + edition_volume_suffix(entry)
    return terminate(title)
