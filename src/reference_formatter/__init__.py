"""APA reference formatting toolkit."""

from .errors import ClassificationError, EntryLoadError, ReferenceFormatterError
from .formatter import ReferenceFormatter
from .lang import SentenceCaseTransformer
from .loaders import entries_from_mapping, load_library
from .models import Date, Entry, EntryType, NumericRange, Person, PersonRole, QualifiedUrl
from .reference_types import Modality, SourceKind, SourceType, TypeSpec, classify_source

__all__ = [
    "ReferenceFormatter",
    "SentenceCaseTransformer",
    "Entry",
    "EntryType",
    "Person",
    "PersonRole",
    "Date",
    "NumericRange",
    "QualifiedUrl",
    "Modality",
    "TypeSpec",
    "SourceKind",
    "SourceType",
    "classify_source",
    "load_library",
    "entries_from_mapping",
    "ReferenceFormatterError",
    "ClassificationError",
    "EntryLoadError",
]
