"""Data models for bibliographic entries."""
from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple, Union


class EntryType(str, Enum):
    """Closed set of entry type tags."""

    ARTICLE = "article"
    CHAPTER = "chapter"
    ENTRY = "entry"
    IN_ANTHOLOGY = "in-anthology"
    REPORT = "report"
    THESIS = "thesis"
    WEB_ITEM = "web-item"
    SCENE = "scene"
    ARTWORK = "artwork"
    PATENT = "patent"
    CASE = "case"
    NEWSPAPER_ISSUE = "newspaper-issue"
    LEGISLATION = "legislation"
    MANUSCRIPT = "manuscript"
    ORIGINAL = "original"
    POST = "post"
    MISC = "misc"
    PERFORMANCE = "performance"
    PERIODICAL = "periodical"
    PROCEEDINGS = "proceedings"
    BOOK = "book"
    BLOG = "blog"
    REFERENCE = "reference"
    CONFERENCE = "conference"
    ANTHOLOGY = "anthology"
    THREAD = "thread"
    VIDEO = "video"
    AUDIO = "audio"
    EXHIBITION = "exhibition"

    @classmethod
    def from_name(cls, value: str) -> "EntryType":
        """Look up a type tag, accepting `InAnthology`, `in_anthology` or `in-anthology`."""
        key = re.sub(r"(?<=[a-z])(?=[A-Z])", "-", value.strip()).replace("_", "-").lower()
        return cls(key)


class PersonRole(str, Enum):
    TRANSLATOR = "translator"
    AFTERWORD = "afterword"
    FOREWORD = "foreword"
    INTRODUCTION = "introduction"
    ANNOTATOR = "annotator"
    COMMENTATOR = "commentator"
    HOLDER = "holder"
    COMPILER = "compiler"
    FOUNDER = "founder"
    COLLABORATOR = "collaborator"
    ORGANIZER = "organizer"
    CAST_MEMBER = "cast-member"
    COMPOSER = "composer"
    PRODUCER = "producer"
    EXECUTIVE_PRODUCER = "executive-producer"
    WRITER = "writer"
    CINEMATOGRAPHY = "cinematography"
    DIRECTOR = "director"
    ILLUSTRATOR = "illustrator"
    NARRATOR = "narrator"

    @classmethod
    def from_name(cls, value: str) -> "PersonRole":
        key = re.sub(r"(?<=[a-z])(?=[A-Z])", "-", value.strip()).replace("_", "-").lower()
        return cls(key)


@dataclass(frozen=True)
class Person:
    """A person credited on an entry."""

    family: str
    given: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None

    @classmethod
    def from_strings(cls, parts: Sequence[str]) -> "Person":
        """Build a person from ``[family, given, suffix]``.

        Leading lower-case words of the family name are split off as the
        name prefix, so ``"van de Graf"`` yields prefix ``"van de"``.
        """
        cleaned = [part.strip() for part in parts]
        if not cleaned or not cleaned[0]:
            raise ValueError("A person needs at least a family name")

        words = cleaned[0].split()
        split_at = 0
        while split_at < len(words) - 1 and words[split_at][:1].islower():
            split_at += 1
        prefix = " ".join(words[:split_at]) or None
        family = " ".join(words[split_at:])

        given = cleaned[1] if len(cleaned) > 1 and cleaned[1] else None
        suffix = cleaned[2] if len(cleaned) > 2 and cleaned[2] else None
        return cls(family=family, given=given, prefix=prefix, suffix=suffix)

    @classmethod
    def parse(cls, value: str) -> "Person":
        """Parse ``"Family, Given"`` or ``"Family, Given, Suffix"``."""
        return cls.from_strings(value.split(","))

    def initials(self, delimiter: str = ".") -> Optional[str]:
        """Return initials for the given names, e.g. ``"H.-J."`` or ``"L. E."``."""
        if not self.given:
            return None
        words = []
        for token in self.given.split():
            pieces = [f"{piece[0]}{delimiter}" for piece in token.split("-") if piece]
            if pieces:
                words.append("-".join(pieces))
        return " ".join(words) or None


@dataclass(frozen=True)
class Date:
    year: int
    month: Optional[int] = None
    day: Optional[int] = None

    def __post_init__(self) -> None:
        if self.month is not None and not 1 <= self.month <= 12:
            raise ValueError(f"Month out of range: {self.month}")
        if self.day is not None:
            if self.month is None:
                raise ValueError("A day requires a month")
            last_day = calendar.monthrange(self.year, self.month)[1]
            if not 1 <= self.day <= last_day:
                raise ValueError(f"Day out of range: {self.year:04d}-{self.month:02d}-{self.day}")

    @classmethod
    def parse(cls, value: Union[str, int]) -> "Date":
        """Parse ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD``."""
        text = str(value).strip()
        match = re.fullmatch(r"(-?\d{1,4})(?:-(\d{1,2})(?:-(\d{1,2}))?)?", text)
        if not match:
            raise ValueError(f"Unrecognised date: {value!r}")
        year, month, day = match.groups()
        return cls(
            year=int(year),
            month=int(month) if month else None,
            day=int(day) if day else None,
        )


Bound = Union[int, str]


@dataclass(frozen=True)
class NumericRange:
    """An inclusive range such as a volume span or page range."""

    start: Bound
    end: Bound

    @classmethod
    def single(cls, value: Bound) -> "NumericRange":
        return cls(value, value)

    @classmethod
    def parse(cls, value: Union[str, int]) -> "NumericRange":
        """Parse ``"3"``, ``"3-5"`` or ``"3–5"``; numeric bounds become ints."""
        if isinstance(value, int):
            return cls.single(value)
        parts = [part.strip() for part in re.split(r"\s*[-–]\s*", str(value).strip(), maxsplit=1)]
        if not parts[0]:
            raise ValueError(f"Unrecognised range: {value!r}")
        start = _coerce_bound(parts[0])
        end = _coerce_bound(parts[1]) if len(parts) > 1 and parts[1] else start
        return cls(start, end)


def _coerce_bound(value: str) -> Bound:
    return int(value) if value.isdigit() else value


@dataclass(frozen=True)
class QualifiedUrl:
    value: str
    visit_date: Optional[Date] = None


@dataclass(frozen=True)
class Entry:
    """An immutable bibliographic record and its chain of parents."""

    key: str
    entry_type: EntryType
    parents: Tuple["Entry", ...] = ()
    title: Optional[str] = None
    authors: Tuple[Person, ...] = ()
    editors: Tuple[Person, ...] = ()
    affiliated: Tuple[Tuple[Person, PersonRole], ...] = ()
    date: Optional[Date] = None
    volume: Optional[NumericRange] = None
    issue: Optional[Union[int, str]] = None
    edition: Optional[Union[int, str]] = None
    page_range: Optional[NumericRange] = None
    serial_number: Optional[str] = None
    url: Optional[QualifiedUrl] = None
    publisher: Optional[str] = None
    organization: Optional[str] = None
    archive: Optional[str] = None

    def persons_with_role(self, role: PersonRole) -> Tuple[Person, ...]:
        return tuple(person for person, person_role in self.affiliated if person_role == role)

    def publisher_or_organization(self) -> Optional[str]:
        return self.publisher or self.organization
