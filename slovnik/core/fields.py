"""Field schema shared by every dictionary row."""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from .languages import LanguageKey

Entry = Sequence[str]

ID_FIELD = "id"
ADDITION_FIELD = "addition"
DETAILS_FIELD = "partOfSpeech"
NON_LANGUAGE_FIELDS = frozenset({ID_FIELD, ADDITION_FIELD, DETAILS_FIELD})

DEFAULT_HEADER: Tuple[str, ...] = (
    ID_FIELD,
    "isv",
    ADDITION_FIELD,
    DETAILS_FIELD,
    "en",
    "ru",
    "be",
    "uk",
    "pl",
    "cs",
    "sk",
    "bg",
    "mk",
    "sr",
    "hr",
    "sl",
    "de",
)


class FieldSchema:
    """Ordered header mapping field names to row positions."""

    def __init__(self, header: Sequence[str] = DEFAULT_HEADER) -> None:
        self.header: Tuple[str, ...] = tuple(header)
        self._positions: Dict[str, int] = {name: i for i, name in enumerate(self.header)}
        self.languages: Tuple[LanguageKey, ...] = tuple(
            LanguageKey(name) for name in self.header if name not in NON_LANGUAGE_FIELDS
        )

    def __len__(self) -> int:
        return len(self.header)

    def position(self, name: str) -> int:
        # Accepts LanguageKey members as well as plain field names.
        return self._positions[getattr(name, "value", name)]

    def get(self, entry: Entry, name: str) -> str:
        return entry[self.position(name)]

    def entry_id(self, entry: Entry) -> str:
        return entry[self._positions[ID_FIELD]]


__all__ = [
    "ADDITION_FIELD",
    "DEFAULT_HEADER",
    "DETAILS_FIELD",
    "Entry",
    "FieldSchema",
    "ID_FIELD",
    "NON_LANGUAGE_FIELDS",
]
