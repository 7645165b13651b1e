"""Container and venue clauses, one renderer per source shape."""
from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

from .formatting import ClauseList, format_range, terminate
from .lang import CaseTransformer
from .models import Entry, Person, PersonRole
from .names import render_name_list
from .reference_types import SourceKind, SourceType
from .titles import edition_volume_suffix


def _title(entry: Entry, case: CaseTransformer) -> Optional[str]:
    return case(entry.title) if entry.title else None


def _volume_issue(*entries: Entry) -> Optional[str]:
    """Render ``"12(3)"`` from the first entry that carries a volume / issue."""
    volume = next((e.volume for e in entries if e.volume is not None), None)
    issue = next((e.issue for e in entries if e.issue is not None), None)
    text = ""
    if volume is not None:
        text += format_range("", "", volume)
    if issue is not None:
        text += f"({issue})"
    return text or None


def _locator(entry: Entry) -> Optional[str]:
    if entry.serial_number:
        return entry.serial_number
    if entry.page_range is not None:
        return format_range("", "", entry.page_range)
    return None


def _periodical_item(entry: Entry, parent: Entry, case: CaseTransformer) -> str:
    clauses = ClauseList()
    clauses.add(_title(parent, case))
    clauses.add(_volume_issue(parent, entry))
    clauses.add(_locator(entry))
    return clauses.sentence()


def _contained_in(persons: Sequence[Person], parent: Entry, case: CaseTransformer) -> str:
    res = ""
    comma = False
    if persons:
        label = "(Ed.)" if len(persons) == 1 else "(Eds.)"
        res = f"{render_name_list(persons)} {label}"
        comma = True

    title = _title(parent, case)
    if title:
        if comma:
            res += ", "
        res += title
        comma = False
        suffix = edition_volume_suffix(parent)
        res = res + suffix if suffix else terminate(res)

    if comma:
        res += "."
    if res:
        res = f"In {res}"

    publisher = parent.publisher_or_organization()
    if publisher:
        res = f"{res} {terminate(publisher)}" if res else terminate(publisher)
    return res


def _collection_item(entry: Entry, parent: Entry, case: CaseTransformer) -> str:
    return _contained_in(parent.editors, parent, case)


def _tv_series(entry: Entry, parent: Entry, case: CaseTransformer) -> str:
    producers = parent.persons_with_role(PersonRole.EXECUTIVE_PRODUCER) or entry.authors
    return _contained_in(producers, parent, case)


def _art_container(entry: Entry, parent: Entry, case: CaseTransformer) -> str:
    clauses = ClauseList()
    clauses.add(_title(parent, case))
    clauses.add(parent.organization or parent.archive or parent.publisher)
    return clauses.sentence()


def _web_item(entry: Entry, parent: Entry, case: CaseTransformer) -> str:
    clauses = ClauseList()
    clauses.add(_title(parent, case))
    clauses.add(parent.publisher_or_organization())
    return clauses.sentence()


def _news_item(entry: Entry, parent: Entry, case: CaseTransformer) -> str:
    clauses = ClauseList()
    clauses.add(_title(parent, case))
    clauses.add(_volume_issue(parent))
    clauses.add(_locator(entry))
    return clauses.sentence()


def _conference_talk(entry: Entry, parent: Entry, case: CaseTransformer) -> str:
    clauses = ClauseList()
    clauses.add(_title(parent, case))
    clauses.add(parent.organization or entry.organization)
    return clauses.sentence()


def _thesis(entry: Entry, case: CaseTransformer) -> str:
    return terminate(entry.archive or entry.organization or "")


def _manuscript(entry: Entry, case: CaseTransformer) -> str:
    return terminate(entry.archive or "")


def _standalone_art(entry: Entry, case: CaseTransformer) -> str:
    clauses = ClauseList()
    clauses.add(entry.organization or entry.publisher)
    clauses.add(entry.archive)
    return clauses.sentence()


def _standalone_web_item(entry: Entry, case: CaseTransformer) -> str:
    return terminate(entry.publisher_or_organization() or "")


def _generic(entry: Entry, case: CaseTransformer) -> str:
    return terminate(entry.publisher_or_organization() or "")


ParentRenderer = Callable[[Entry, Entry, CaseTransformer], str]
StandaloneRenderer = Callable[[Entry, CaseTransformer], str]

PARENT_RENDERERS: Dict[SourceKind, ParentRenderer] = {
    SourceKind.PERIODICAL_ITEM: _periodical_item,
    SourceKind.COLLECTION_ITEM: _collection_item,
    SourceKind.TV_SERIES: _tv_series,
    SourceKind.ART_CONTAINER: _art_container,
    SourceKind.WEB_ITEM: _web_item,
    SourceKind.NEWS_ITEM: _news_item,
    SourceKind.CONFERENCE_TALK: _conference_talk,
}

STANDALONE_RENDERERS: Dict[SourceKind, StandaloneRenderer] = {
    SourceKind.THESIS: _thesis,
    SourceKind.MANUSCRIPT: _manuscript,
    SourceKind.STANDALONE_ART: _standalone_art,
    SourceKind.STANDALONE_WEB_ITEM: _standalone_web_item,
    SourceKind.GENERIC: _generic,
}


def render_source(entry: Entry, source_type: SourceType, case: CaseTransformer) -> str:
    """Render the venue clause for an already classified entry."""
    kind = source_type.kind
    if kind in PARENT_RENDERERS:
        return PARENT_RENDERERS[kind](entry, source_type.parent_of(entry), case)
    return STANDALONE_RENDERERS[kind](entry, case)
