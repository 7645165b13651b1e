import pytest

from reference_formatter.errors import ClassificationError
from reference_formatter.models import Entry, EntryType, NumericRange
from reference_formatter.reference_types import (
    Modality,
    SourceKind,
    SourceType,
    TypeSpec,
    classify_source,
    label_for_kind,
)


def _entry(entry_type: EntryType, *parent_types: EntryType, **fields) -> Entry:
    parents = tuple(
        Entry(key=f"parent{index}", entry_type=parent_type) for index, parent_type in enumerate(parent_types)
    )
    return Entry(key="e", entry_type=entry_type, parents=parents, **fields)


def test_modality_matching():
    assert Modality.any().matches(EntryType.BOOK)
    assert Modality.specific(EntryType.BOOK).matches(EntryType.BOOK)
    assert not Modality.specific(EntryType.BOOK).matches(EntryType.REPORT)
    assert Modality.alternate(EntryType.BLOG, EntryType.MISC).matches(EntryType.MISC)
    assert not Modality.alternate(EntryType.BLOG, EntryType.MISC).matches(EntryType.BOOK)


def test_type_spec_reports_first_matching_parent():
    entry = _entry(EntryType.ARTICLE, EntryType.BOOK, EntryType.PERIODICAL, EntryType.PERIODICAL)
    match = TypeSpec(Modality.any(), Modality.specific(EntryType.PERIODICAL)).check(entry)

    assert match is not None
    assert match.parent_index == 1


def test_periodical_item():
    assert classify_source(_entry(EntryType.ARTICLE, EntryType.PERIODICAL)) == SourceType(
        SourceKind.PERIODICAL_ITEM, 0
    )


def test_periodical_wins_over_later_rules():
    entry = _entry(EntryType.WEB_ITEM, EntryType.BLOG, EntryType.PERIODICAL)
    result = classify_source(entry)

    assert result.kind is SourceKind.PERIODICAL_ITEM
    assert result.parent_of(entry).entry_type is EntryType.PERIODICAL


@pytest.mark.parametrize(
    "own, parent",
    [
        (EntryType.IN_ANTHOLOGY, EntryType.ANTHOLOGY),
        (EntryType.ENTRY, EntryType.BOOK),
        (EntryType.ARTICLE, EntryType.REFERENCE),
        (EntryType.ARTICLE, EntryType.PROCEEDINGS),
    ],
)
def test_collection_item_alternatives(own, parent):
    assert classify_source(_entry(own, parent)).kind is SourceKind.COLLECTION_ITEM


def test_tv_series_needs_issue_and_volume():
    episode = _entry(EntryType.VIDEO, EntryType.VIDEO, issue=3, volume=NumericRange.single(1))
    missing_issue = _entry(EntryType.VIDEO, EntryType.VIDEO, volume=NumericRange.single(1))

    assert classify_source(episode) == SourceType(SourceKind.TV_SERIES, 0)
    assert classify_source(missing_issue).kind is SourceKind.GENERIC


@pytest.mark.parametrize(
    "entry, kind",
    [
        (_entry(EntryType.THESIS), SourceKind.THESIS),
        (_entry(EntryType.MANUSCRIPT), SourceKind.MANUSCRIPT),
        (_entry(EntryType.ORIGINAL, EntryType.ARTWORK), SourceKind.ART_CONTAINER),
        (_entry(EntryType.EXHIBITION), SourceKind.STANDALONE_ART),
        (_entry(EntryType.ARTWORK), SourceKind.STANDALONE_ART),
        (_entry(EntryType.WEB_ITEM), SourceKind.STANDALONE_WEB_ITEM),
        (_entry(EntryType.WEB_ITEM, EntryType.BOOK), SourceKind.STANDALONE_WEB_ITEM),
        (_entry(EntryType.POST, EntryType.BLOG), SourceKind.WEB_ITEM),
        (_entry(EntryType.ARTICLE, EntryType.CONFERENCE), SourceKind.CONFERENCE_TALK),
        (_entry(EntryType.ARTICLE, EntryType.NEWSPAPER_ISSUE), SourceKind.NEWS_ITEM),
        (_entry(EntryType.BOOK), SourceKind.GENERIC),
    ],
)
def test_cascade_shapes(entry, kind):
    assert classify_source(entry).kind is kind


def test_thesis_precedes_art_container():
    assert classify_source(_entry(EntryType.THESIS, EntryType.ARTWORK)).kind is SourceKind.THESIS


@pytest.mark.parametrize("entry_type", list(EntryType))
def test_entries_without_parents_never_get_parent_shapes(entry_type):
    result = classify_source(_entry(entry_type))

    assert not result.kind.needs_parent
    assert result.parent_index is None


def test_invalid_parent_index_is_a_contract_violation():
    entry = _entry(EntryType.ARTICLE, EntryType.PERIODICAL)

    with pytest.raises(ClassificationError):
        SourceType(SourceKind.PERIODICAL_ITEM, 3).parent_of(entry)


def test_labels():
    assert label_for_kind(SourceKind.PERIODICAL_ITEM) == "Periodical Item"
    assert label_for_kind(None) == "Generic"
