"""Publication and retrieval date rendering."""
from __future__ import annotations

from typing import Optional

from .lang import month_name
from .models import Entry

NO_DATE = "(n. d.)"


def render_date(entry: Entry) -> str:
    date = entry.date
    if date is None:
        return NO_DATE
    if date.month is None:
        return f"({date.year:04d})"
    if date.day is None:
        return f"({date.year:04d}, {month_name(date.month)})"
    return f"({date.year:04d}, {month_name(date.month)} {date.day})"


def render_retrieval_date(entry: Entry) -> Optional[str]:
    """Return the retrieval statement for online entries.

    Only the full-date form is parenthesised; a url without a visit date is
    returned bare.
    """
    if entry.url is None:
        return None
    url = entry.url.value
    visited = entry.url.visit_date
    if visited is None:
        return url
    if visited.month is None:
        return f"Retrieved {visited.year:04d}, from {url}"
    if visited.day is None:
        return f"Retrieved {month_name(visited.month)} {visited.year:04d}, from {url}"
    return f"(Retrieved {month_name(visited.month)} {visited.day}, {visited.year:04d}, from {url})"
