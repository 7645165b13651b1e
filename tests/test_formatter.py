from reference_formatter.formatter import ReferenceFormatter
from reference_formatter.models import Date, Entry, EntryType, Person, QualifiedUrl


def test_journal_article_reference(formatter, journal_article):
    assert formatter.format(journal_article) == (
        "van de Graf, J., Günther, H.-J., & Mädje, L. E. (2020, March 5). "
        "A study of things. Journal of testing, 4(2), 10–12."
    )


def test_formatting_is_idempotent(formatter, journal_article):
    assert formatter.format(journal_article) == formatter.format(journal_article)


def test_minimal_entry_still_renders(formatter):
    assert formatter.format(Entry(key="x", entry_type=EntryType.MISC)) == "(n. d.)."


def test_missing_author_is_omitted(formatter):
    entry = Entry(key="x", entry_type=EntryType.BOOK, title="Untitled Work")

    assert formatter.format(entry) == "(n. d.). Untitled work."


def test_book_with_retrieval_date(formatter):
    entry = Entry(
        key="patel2019",
        entry_type=EntryType.BOOK,
        title="Data Validation Handbook",
        authors=(Person("Patel", "Ravi"),),
        date=Date(2019),
        publisher="Testing Press",
        url=QualifiedUrl("https://example.com/book", Date(2021, 6, 7)),
    )

    assert formatter.format(entry) == (
        "Patel, R. (2019). Data validation handbook. Testing Press. "
        "(Retrieved June 7, 2021, from https://example.com/book)"
    )


def test_question_title_is_not_double_punctuated(formatter):
    entry = Entry(
        key="q",
        entry_type=EntryType.BOOK,
        title="Why Now?",
        authors=(Person("Doe", "Jane"),),
        date=Date(2019),
        publisher="Testing Press",
    )

    assert formatter.format(entry) == "Doe, J. (2019). Why now? Testing Press."


def test_whitespace_is_collapsed(formatter):
    entry = Entry(key="s", entry_type=EntryType.BOOK, title="Spaced   Out  Title", date=Date(2001))

    assert formatter.format(entry) == "(2001). Spaced out title."


def test_custom_case_transformer():
    formatter = ReferenceFormatter(case=str.upper)
    entry = Entry(key="u", entry_type=EntryType.BOOK, title="Loud Title", date=Date(2001))

    assert formatter.format(entry) == "(2001). LOUD TITLE."


def test_format_all_keeps_order(formatter, journal_article):
    thesis = Entry(key="t", entry_type=EntryType.THESIS, title="A Thesis", organization="MIT")
    results = formatter.format_all([thesis, journal_article])

    assert results[0] == "(n. d.). A thesis. MIT."
    assert results[1].startswith("van de Graf")
