"""Display projection of ranked dictionary entries."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Sequence

from slovnik.core.fields import ADDITION_FIELD, DETAILS_FIELD, Entry, FieldSchema
from slovnik.core.languages import LanguageKey, LanguageLike, resolve_language
from slovnik.core.scripts import (
    StyleLike,
    get_cyrillic,
    get_latin,
    latin_to_gla,
    latin_to_ipa,
)
from slovnik.core.text import convert_cases, is_verified, remove_brackets, remove_exclamation_mark

_CAMEL_CASE_KEYS = {
    "original_cyr": "originalCyr",
    "original_gla": "originalGla",
    "add_cyr": "addCyr",
    "add_gla": "addGla",
}


def _cell(value: str) -> str:
    return value.replace("|", "\\|")


@dataclass(frozen=True)
class DisplayRecord:
    """One search result rendered for the UI."""

    translate: str
    original: str
    original_cyr: str
    original_gla: str
    add: str
    add_cyr: str
    add_gla: str
    details: str
    ipa: str
    checked: bool

    def as_dict(self) -> Dict[str, Any]:
        return {_CAMEL_CASE_KEYS.get(key, key): value for key, value in asdict(self).items()}


class DictionaryResultFormatter:
    """Render ranked entries in all three scripts."""

    def __init__(self, schema: FieldSchema) -> None:
        self.schema = schema

    def format_entry(
        self,
        entry: Entry,
        from_lang: LanguageLike,
        to_lang: LanguageLike,
        style: StyleLike,
    ) -> DisplayRecord:
        from_key = resolve_language(from_lang)
        lang = resolve_language(to_lang) if from_key is LanguageKey.ISV else from_key

        isv = self.schema.get(entry, LanguageKey.ISV)
        add = self.schema.get(entry, ADDITION_FIELD)
        translate = self.schema.get(entry, lang)
        latin = get_latin(isv, style)
        add_latin = get_latin(add, style)

        return DisplayRecord(
            translate=remove_exclamation_mark(translate),
            original=latin,
            original_cyr=get_cyrillic(isv, style),
            original_gla=latin_to_gla(latin),
            add=convert_cases(add_latin),
            add_cyr=convert_cases(get_cyrillic(add, style)),
            add_gla=convert_cases(latin_to_gla(add_latin)),
            details=self.schema.get(entry, DETAILS_FIELD),
            ipa=latin_to_ipa(get_latin(remove_brackets(isv, "[", "]"), style)),
            checked=is_verified(translate),
        )

    def format_for_display(
        self,
        entries: Iterable[Entry],
        from_lang: LanguageLike,
        to_lang: LanguageLike,
        style: StyleLike,
    ) -> List[DisplayRecord]:
        return [self.format_entry(entry, from_lang, to_lang, style) for entry in entries]

    def render_markdown(
        self,
        records: Sequence[DisplayRecord],
        query: str = "",
    ) -> str:
        """Render records as a markdown table for the search UI."""

        if not records:
            if query.strip():
                return f"❌ Nothing found for '{query.strip()}'."
            return "Type a word to start searching."

        lines: List[str] = [
            "| Interslavic | Кириллица | Ⰳⰾⰰⰳⱁⰾⰹⱌⰰ | Translation | Details | IPA |",
            "|---|---|---|---|---|---|",
        ]
        for record in records:
            original = record.original + (f" {record.add}" if record.add else "")
            original_cyr = record.original_cyr + (f" {record.add_cyr}" if record.add_cyr else "")
            original_gla = record.original_gla + (f" {record.add_gla}" if record.add_gla else "")
            translate = record.translate if record.checked else f"{record.translate} ⚠️"
            cells = [
                original,
                original_cyr,
                original_gla,
                translate,
                record.details,
                f"[{record.ipa}]",
            ]
            lines.append("| " + " | ".join(_cell(cell) for cell in cells) + " |")
        return "\n".join(lines)


__all__ = ["DictionaryResultFormatter", "DisplayRecord"]
