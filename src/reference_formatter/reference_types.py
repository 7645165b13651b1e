"""Source shape classification for entries and their parents."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, FrozenSet, Optional, Tuple

from .errors import ClassificationError
from .models import Entry, EntryType

logger = logging.getLogger(__name__)


class ModalityKind(Enum):
    ANY = "any"
    SPECIFIC = "specific"
    ALTERNATE = "alternate"


@dataclass(frozen=True)
class Modality:
    """Predicate over an entry type tag."""

    kind: ModalityKind
    types: FrozenSet[EntryType] = frozenset()

    @classmethod
    def any(cls) -> "Modality":
        return cls(ModalityKind.ANY)

    @classmethod
    def specific(cls, entry_type: EntryType) -> "Modality":
        return cls(ModalityKind.SPECIFIC, frozenset({entry_type}))

    @classmethod
    def alternate(cls, *entry_types: EntryType) -> "Modality":
        return cls(ModalityKind.ALTERNATE, frozenset(entry_types))

    def matches(self, candidate: EntryType) -> bool:
        if self.kind is ModalityKind.ANY:
            return True
        return candidate in self.types


@dataclass(frozen=True)
class SpecMatch:
    parent_index: Optional[int] = None


@dataclass(frozen=True)
class TypeSpec:
    """An (own type, parent type) pattern.

    ``parent=None`` means no parent is required; otherwise the first parent
    whose type matches is reported.
    """

    own: Modality
    parent: Optional[Modality] = None

    @classmethod
    def single(cls, entry_type: EntryType) -> "TypeSpec":
        return cls(Modality.specific(entry_type))

    def check(self, entry: Entry) -> Optional[SpecMatch]:
        if not self.own.matches(entry.entry_type):
            return None
        if self.parent is None:
            return SpecMatch()
        for index, parent in enumerate(entry.parents):
            if self.parent.matches(parent.entry_type):
                return SpecMatch(index)
        return None


class SourceKind(Enum):
    PERIODICAL_ITEM = ("periodical-item", "Periodical Item", True)
    COLLECTION_ITEM = ("collection-item", "Collection Item", True)
    TV_SERIES = ("tv-series", "TV Series Episode", True)
    THESIS = ("thesis", "Thesis", False)
    MANUSCRIPT = ("manuscript", "Manuscript", False)
    ART_CONTAINER = ("art-container", "Artwork in Container", True)
    STANDALONE_ART = ("standalone-art", "Artwork", False)
    STANDALONE_WEB_ITEM = ("standalone-web-item", "Web Page", False)
    WEB_ITEM = ("web-item", "Web Item", True)
    NEWS_ITEM = ("news-item", "News Item", True)
    CONFERENCE_TALK = ("conference-talk", "Conference Talk", True)
    GENERIC = ("generic", "Generic", False)

    def __init__(self, key: str, label: str, needs_parent: bool):
        self.key = key
        self.label = label
        self.needs_parent = needs_parent


@dataclass(frozen=True)
class SourceType:
    """Classification result; ``parent_index`` points into ``entry.parents``."""

    kind: SourceKind
    parent_index: Optional[int] = None

    def parent_of(self, entry: Entry) -> Entry:
        if self.parent_index is None or not 0 <= self.parent_index < len(entry.parents):
            raise ClassificationError(
                f"{self.kind.key} result for {entry.key!r} carries invalid parent index "
                f"{self.parent_index} ({len(entry.parents)} parents)"
            )
        return entry.parents[self.parent_index]


@dataclass(frozen=True)
class ClassificationRule:
    kind: SourceKind
    specs: Tuple[TypeSpec, ...]
    guard: Optional[Callable[[Entry], bool]] = None

    def apply(self, entry: Entry) -> Optional[SourceType]:
        for spec in self.specs:
            match = spec.check(entry)
            if match is None:
                continue
            if self.guard is not None and not self.guard(entry):
                return None
            return SourceType(self.kind, match.parent_index)
        return None


def _has_issue_and_volume(entry: Entry) -> bool:
    return entry.issue is not None and entry.volume is not None


_ANY = Modality.any()

# Order is significant: the first matching rule decides the shape.
CLASSIFICATION_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(
        SourceKind.PERIODICAL_ITEM,
        (TypeSpec(_ANY, Modality.specific(EntryType.PERIODICAL)),),
    ),
    ClassificationRule(
        SourceKind.COLLECTION_ITEM,
        (
            TypeSpec(Modality.specific(EntryType.IN_ANTHOLOGY), Modality.specific(EntryType.ANTHOLOGY)),
            TypeSpec(Modality.specific(EntryType.ENTRY), _ANY),
            TypeSpec(_ANY, Modality.specific(EntryType.REFERENCE)),
            TypeSpec(Modality.specific(EntryType.ARTICLE), Modality.specific(EntryType.PROCEEDINGS)),
        ),
    ),
    ClassificationRule(
        SourceKind.TV_SERIES,
        (TypeSpec(Modality.specific(EntryType.VIDEO), Modality.specific(EntryType.VIDEO)),),
        guard=_has_issue_and_volume,
    ),
    ClassificationRule(SourceKind.THESIS, (TypeSpec.single(EntryType.THESIS),)),
    ClassificationRule(SourceKind.MANUSCRIPT, (TypeSpec.single(EntryType.MANUSCRIPT),)),
    ClassificationRule(
        SourceKind.ART_CONTAINER,
        (TypeSpec(_ANY, Modality.specific(EntryType.ARTWORK)),),
    ),
    ClassificationRule(
        SourceKind.STANDALONE_ART,
        (TypeSpec(Modality.alternate(EntryType.ARTWORK, EntryType.EXHIBITION)),),
    ),
    ClassificationRule(SourceKind.STANDALONE_WEB_ITEM, (TypeSpec.single(EntryType.WEB_ITEM),)),
    ClassificationRule(
        SourceKind.WEB_ITEM,
        (
            TypeSpec(_ANY, Modality.alternate(EntryType.MISC, EntryType.BLOG, EntryType.WEB_ITEM)),
            TypeSpec(Modality.specific(EntryType.WEB_ITEM), _ANY),
        ),
    ),
    ClassificationRule(
        SourceKind.CONFERENCE_TALK,
        (TypeSpec(_ANY, Modality.specific(EntryType.CONFERENCE)),),
    ),
    ClassificationRule(
        SourceKind.NEWS_ITEM,
        (TypeSpec(_ANY, Modality.specific(EntryType.NEWSPAPER_ISSUE)),),
    ),
)


def classify_source(entry: Entry) -> SourceType:
    """Return the source shape for the entry, falling back to ``GENERIC``."""
    for rule in CLASSIFICATION_RULES:
        source_type = rule.apply(entry)
        if source_type is None:
            continue
        if source_type.kind.needs_parent:
            source_type.parent_of(entry)
        logger.debug("Classified %r as %s", entry.key, source_type.kind.key)
        return source_type
    logger.debug("No shape matched %r, using generic", entry.key)
    return SourceType(SourceKind.GENERIC)


def label_for_kind(kind: SourceKind | None) -> str:
    if kind is None:
        return SourceKind.GENERIC.label
    return kind.label
