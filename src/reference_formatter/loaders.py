"""Load entries from JSON libraries.

A library is a JSON object mapping keys to records::

    {
      "graf2020": {
        "type": "article",
        "title": "A study",
        "author": ["van de Graf, Judith", {"family": "Mädje", "given": "Laurenz"}],
        "date": "2020-03",
        "page-range": "10-12",
        "parent": {"type": "periodical", "title": "Journal", "volume": 4, "issue": 2}
      }
    }
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple

from .errors import EntryLoadError
from .models import Date, Entry, EntryType, NumericRange, Person, PersonRole, QualifiedUrl

logger = logging.getLogger(__name__)

KNOWN_FIELDS = {
    "type",
    "title",
    "author",
    "editor",
    "affiliated",
    "date",
    "volume",
    "issue",
    "edition",
    "page-range",
    "serial-number",
    "url",
    "publisher",
    "organization",
    "archive",
    "parent",
}


def load_library(path: str | Path) -> List[Entry]:
    """Read a JSON library file and return its entries in file order."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise EntryLoadError(f"not valid UTF-8 ({exc.reason} at byte {exc.start})", key=str(path)) from exc
    except json.JSONDecodeError as exc:
        raise EntryLoadError(f"invalid JSON ({exc})", key=str(path)) from exc
    return entries_from_mapping(data)


def entries_from_mapping(data: Any) -> List[Entry]:
    if not isinstance(data, Mapping):
        raise EntryLoadError("a library must be a JSON object of key -> record")
    return [entry_from_record(str(key), record) for key, record in data.items()]


def entry_from_record(key: str, record: Any) -> Entry:
    if not isinstance(record, Mapping):
        raise EntryLoadError("record must be an object", key=key)
    unknown = set(record) - KNOWN_FIELDS
    if unknown:
        logger.debug("Ignoring unknown fields on %s: %s", key, ", ".join(sorted(unknown)))
    try:
        return _build_entry(key, record)
    except EntryLoadError:
        raise
    except (TypeError, ValueError) as exc:
        raise EntryLoadError(str(exc), key=key) from exc


def _build_entry(key: str, record: Mapping[str, Any]) -> Entry:
    if "type" not in record:
        raise EntryLoadError("missing 'type'", key=key)
    entry_type = EntryType.from_name(str(record["type"]))

    parents_raw = record.get("parent") or []
    if isinstance(parents_raw, Mapping):
        parents_raw = [parents_raw]
    parents = tuple(
        entry_from_record(f"{key}/parent{index}", parent) for index, parent in enumerate(parents_raw)
    )

    return Entry(
        key=key,
        entry_type=entry_type,
        parents=parents,
        title=_text(record.get("title")),
        authors=_persons(record.get("author")),
        editors=_persons(record.get("editor")),
        affiliated=_affiliated(record.get("affiliated")),
        date=_date(record.get("date")),
        volume=_range(record.get("volume")),
        issue=_number_or_text(record.get("issue")),
        edition=_number_or_text(record.get("edition")),
        page_range=_range(record.get("page-range")),
        serial_number=_text(record.get("serial-number")),
        url=_url(record.get("url")),
        publisher=_text(record.get("publisher")),
        organization=_text(record.get("organization")),
        archive=_text(record.get("archive")),
    )


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _number_or_text(value: Any) -> Optional[int | str]:
    text = _text(value)
    if text is None:
        return None
    return int(text) if text.isdigit() else text


def _range(value: Any) -> Optional[NumericRange]:
    if value is None or value == "":
        return None
    return NumericRange.parse(value)


def _person(value: Any) -> Person:
    if isinstance(value, str):
        return Person.parse(value)
    if isinstance(value, Mapping):
        if not value.get("family"):
            raise ValueError("person objects need a 'family' name")
        person = Person.from_strings([str(value["family"]), str(value.get("given") or "")])
        return Person(
            family=person.family,
            given=person.given,
            prefix=_text(value.get("prefix")) or person.prefix,
            suffix=_text(value.get("suffix")),
        )
    raise TypeError(f"cannot read a person from {value!r}")


def _persons(value: Any) -> Tuple[Person, ...]:
    if value is None:
        return ()
    if isinstance(value, (str, Mapping)):
        value = [value]
    return tuple(_person(item) for item in value)


def _affiliated(value: Any) -> Tuple[Tuple[Person, PersonRole], ...]:
    if value is None:
        return ()
    pairs: List[Tuple[Person, PersonRole]] = []
    for group in value:
        if not isinstance(group, Mapping) or "role" not in group:
            raise ValueError("affiliated items need a 'role' and 'names'")
        role = PersonRole.from_name(str(group["role"]))
        pairs.extend((person, role) for person in _persons(group.get("names")))
    return tuple(pairs)


def _url(value: Any) -> Optional[QualifiedUrl]:
    if value is None:
        return None
    if isinstance(value, str):
        return QualifiedUrl(value.strip()) if value.strip() else None
    if isinstance(value, Mapping) and value.get("value"):
        visited = _date(value.get("date"))
        return QualifiedUrl(str(value["value"]).strip(), visited)
    raise ValueError(f"cannot read a url from {value!r}")


def _date(value: Any) -> Optional[Date]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return Date.parse(value)
