"""Edit-distance ranking of filtered candidates."""

from __future__ import annotations

import sys
from typing import Dict, List, Sequence

from rapidfuzz.distance import Levenshtein

from .fields import Entry, FieldSchema
from .index import TokenIndex
from .languages import LanguageKey
from .matcher import SearchPlan

MAX_RESULTS = 50


def _leading_tokens(tokens: Sequence[str], word: str) -> Sequence[str]:
    # Short queries are ranked against the first one or two synonyms only.
    if len(word) in (1, 2):
        return tokens[: len(word)]
    return tokens


def min_distance(text: str, tokens: Sequence[str]) -> int:
    return min((Levenshtein.distance(text, token) for token in tokens), default=sys.maxsize)


class EntryRanker:
    def __init__(self, schema: FieldSchema, index: TokenIndex, limit: int = MAX_RESULTS) -> None:
        self.schema = schema
        self.index = index
        self.limit = limit

    def distance(self, entry: Entry, plan: SearchPlan) -> int:
        entry_id = self.schema.entry_id(entry)
        word = plan.query.word
        from_isv = plan.from_lang is LanguageKey.ISV

        tokens = _leading_tokens(self.index.tokens(entry_id, plan.from_lang), word)
        best = min_distance(plan.isv_input if from_isv else plan.lang_input, tokens)
        if plan.query.two_way:
            tokens = _leading_tokens(self.index.tokens(entry_id, plan.to_lang), word)
            best = min(best, min_distance(plan.lang_input if from_isv else plan.isv_input, tokens))
        return best

    def rank(self, entries: Sequence[Entry], plan: SearchPlan) -> List[Entry]:
        """Stable sort by ascending distance, truncated to ``limit``."""

        distances: Dict[int, int] = {
            position: self.distance(entry, plan) for position, entry in enumerate(entries)
        }
        order = sorted(range(len(entries)), key=distances.__getitem__)
        return [entries[position] for position in order[: self.limit]]


__all__ = ["EntryRanker", "MAX_RESULTS", "min_distance"]
