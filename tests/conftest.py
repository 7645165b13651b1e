import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

import pytest

from reference_formatter.formatter import ReferenceFormatter
from reference_formatter.lang import SentenceCaseTransformer
from reference_formatter.models import Date, Entry, EntryType, NumericRange, Person


@pytest.fixture()
def case() -> SentenceCaseTransformer:
    return SentenceCaseTransformer()


@pytest.fixture()
def formatter() -> ReferenceFormatter:
    return ReferenceFormatter()


@pytest.fixture()
def three_authors():
    return (
        Person.parse("van de Graf, Judith"),
        Person.parse("Günther, Hans-Joseph"),
        Person.parse("Mädje, Laurenz Elias"),
    )


@pytest.fixture()
def journal_article(three_authors) -> Entry:
    journal = Entry(
        key="journal",
        entry_type=EntryType.PERIODICAL,
        title="Journal of Testing",
        volume=NumericRange.single(4),
        issue=2,
    )
    return Entry(
        key="graf2020",
        entry_type=EntryType.ARTICLE,
        parents=(journal,),
        title="A Study of Things",
        authors=three_authors,
        date=Date(2020, 3, 5),
        page_range=NumericRange(10, 12),
    )


@pytest.fixture()
def sample_library() -> dict:
    """A small library mirroring typical reference list content."""

    return {
        "graf2020": {
            "type": "article",
            "title": "A Study of Things",
            "author": ["van de Graf, Judith", "Günther, Hans-Joseph", "Mädje, Laurenz Elias"],
            "date": "2020-03-05",
            "page-range": "10-12",
            "parent": {"type": "periodical", "title": "Journal of Testing", "volume": 4, "issue": 2},
        },
        "patel2019": {
            "type": "book",
            "title": "Data Validation Handbook",
            "author": "Patel, Ravi",
            "date": "2019",
            "edition": 2,
            "publisher": "Testing Press",
        },
        "adams2023": {
            "type": "thesis",
            "title": "Reference Integrity in Practice",
            "author": {"family": "Adams", "given": "Kim"},
            "date": 2023,
            "organization": "University of Oslo",
        },
    }
