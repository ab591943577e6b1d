"""Token index built once per word list, or rehydrated from a snapshot."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from .fields import ADDITION_FIELD, DETAILS_FIELD, Entry, FieldSchema
from .languages import LanguageKey, LanguageLike, prepare_token, resolve_language
from .morphology import MorphologyProvider, expand_word_forms
from .scripts import RenderStyle, get_latin
from .text import is_verified, remove_brackets, remove_exclamation_mark, split_words

IndexKey = Tuple[str, LanguageKey]
SnapshotPairs = List[Tuple[Tuple[str, str], List[str]]]


def _unique(tokens: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(tokens))


class TokenIndex:
    """Normalized search tokens keyed by ``(entry_id, language)``."""

    def __init__(self) -> None:
        self._tokens: Dict[IndexKey, List[str]] = {}

    def __len__(self) -> int:
        return len(self._tokens)

    def __contains__(self, key: object) -> bool:
        return key in self._tokens

    def set(self, entry_id: str, language: LanguageLike, tokens: Sequence[str]) -> None:
        self._tokens[(entry_id, resolve_language(language))] = list(tokens)

    def tokens(self, entry_id: str, language: LanguageKey) -> List[str]:
        return self._tokens[(entry_id, language)]

    def export(self) -> SnapshotPairs:
        """Return ``[((entry_id, language), tokens), ...]`` in insertion order."""

        return [
            ((entry_id, language.value), list(tokens))
            for (entry_id, language), tokens in self._tokens.items()
        ]

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence]) -> "TokenIndex":
        """Rehydrate from :meth:`export` output, including its JSON round-trip."""

        index = cls()
        for key, tokens in pairs:
            entry_id, language = key
            index.set(str(entry_id), language, tokens)
        return index


class IndexBuilder:
    """Tokenizes every language field of every entry."""

    def __init__(self, schema: FieldSchema, morphology: MorphologyProvider) -> None:
        self.schema = schema
        self.morphology = morphology

    def _clean_field(self, entry: Entry, language: LanguageKey) -> str:
        field = self.schema.get(entry, language)
        field = remove_brackets(field, "[", "]")
        return remove_brackets(field, "(", ")")

    def entry_tokens(self, entry: Entry) -> Dict[LanguageKey, List[str]]:
        tokens: Dict[LanguageKey, List[str]] = {}
        for language in self.schema.languages:
            field = self._clean_field(entry, language)
            if language is LanguageKey.ISV:
                chunks = split_words(field) + expand_word_forms(
                    self.schema.get(entry, LanguageKey.ISV),
                    self.schema.get(entry, ADDITION_FIELD),
                    self.schema.get(entry, DETAILS_FIELD),
                    self.morphology,
                )
                tokens[LanguageKey.ISV_SRC] = _unique(
                    prepare_token(
                        LanguageKey.ISV_SRC, get_latin(chunk, RenderStyle.ETYMOLOGICAL)
                    )
                    for chunk in chunks
                )
            else:
                chunks = [remove_exclamation_mark(chunk.strip()) for chunk in split_words(field)]
            tokens[language] = _unique(prepare_token(language, chunk) for chunk in chunks)
        return tokens

    def build(self, rows: Iterable[Entry]) -> TokenIndex:
        index = TokenIndex()
        for entry in rows:
            entry_id = self.schema.entry_id(entry)
            for language, tokens in self.entry_tokens(entry).items():
                index.set(entry_id, language, tokens)
        return index


def compute_completion_statistics(
    rows: Sequence[Entry],
    schema: FieldSchema,
) -> Dict[str, str]:
    """Percentage of verified translations per language, one decimal place."""

    statistics: Dict[str, str] = {}
    total = len(rows)
    for language in schema.languages:
        if not total:
            statistics[language.value] = "0.0"
            continue
        unverified = sum(1 for entry in rows if not is_verified(schema.get(entry, language)))
        statistics[language.value] = f"{(1 - unverified / total) * 100:.1f}"
    return statistics


__all__ = [
    "IndexBuilder",
    "IndexKey",
    "SnapshotPairs",
    "TokenIndex",
    "compute_completion_statistics",
]
