"""Author and editor name rendering."""
from __future__ import annotations

from typing import Sequence

from .models import Person

# Lists longer than this are truncated to the first names and the last one.
MAX_LISTED_NAMES = 20
TRUNCATED_HEAD = 19


def render_name(person: Person) -> str:
    """Render ``"van de Graf, J."`` style names."""
    name = f"{person.prefix} {person.family}" if person.prefix else person.family
    initials = person.initials(".")
    if initials:
        name += f", {initials}"
    if person.suffix:
        name += f", {person.suffix}"
    return name


def render_name_list(persons: Sequence[Person]) -> str:
    """Join names APA-style: ``"A, B, & C"``; more than twenty names are elided."""
    names = [render_name(person) for person in persons]
    if len(names) > MAX_LISTED_NAMES:
        return ", ".join(names[:TRUNCATED_HEAD]) + ", ... " + names[-1]
    if len(names) < 2:
        return "".join(names)
    return ", ".join(names[:-1]) + ", & " + names[-1]
