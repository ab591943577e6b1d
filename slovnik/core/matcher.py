"""Candidate filtering for one dictionary query.

Filtering runs in two passes over the word list. The first pass compares
prepared tokens in the requested direction(s) and applies the part-of-speech
pattern. The second pass re-checks Interslavic matches against the user's
folding preferences whenever the query contains a letter they care about.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .fields import DETAILS_FIELD, Entry, FieldSchema
from .folding import FoldingConfiguration
from .index import TokenIndex
from .languages import LanguageKey, prepare_query
from .query import ParsedQuery, SearchType, matches_pos
from .scripts import RenderStyle, get_latin


@dataclass(frozen=True)
class SearchPlan:
    """Everything one query needs, resolved before touching the word list."""

    query: ParsedQuery
    from_lang: LanguageKey
    to_lang: LanguageKey
    search_type: SearchType
    style: RenderStyle
    isv_input: str
    lang_input: str
    etym_input: str
    folded_input: str
    etymological: bool

    @property
    def lang(self) -> LanguageKey:
        """The non-Interslavic side of the translation pair."""

        return self.to_lang if self.from_lang is LanguageKey.ISV else self.from_lang

    @property
    def isv_side(self) -> bool:
        return self.from_lang is LanguageKey.ISV or self.query.two_way

    @property
    def lang_side(self) -> bool:
        return self.to_lang is LanguageKey.ISV or self.query.two_way


def build_plan(
    query: ParsedQuery,
    from_lang: LanguageKey,
    to_lang: LanguageKey,
    search_type: SearchType,
    style: RenderStyle,
    folding: FoldingConfiguration,
) -> Optional[SearchPlan]:
    """Prepare the query inputs; ``None`` when nothing is left to search for."""

    lang = to_lang if from_lang is LanguageKey.ISV else from_lang
    isv_input = prepare_query(LanguageKey.ISV, query.word)
    lang_input = prepare_query(lang, query.word)
    if not isv_input or not lang_input:
        return None

    if query.force_end:
        search_type = SearchType.END

    # Every pair activated under the etymological style means the user wants
    # exact etymological spelling, same as the explicit option.
    etymological = from_lang is LanguageKey.ISV and (
        query.etymological
        or (style is RenderStyle.ETYMOLOGICAL and folding.is_fully_active())
    )

    latin = get_latin(query.word, style)
    return SearchPlan(
        query=query,
        from_lang=from_lang,
        to_lang=to_lang,
        search_type=search_type,
        style=style,
        isv_input=isv_input,
        lang_input=lang_input,
        etym_input=prepare_query(
            LanguageKey.ISV_SRC, get_latin(query.word, RenderStyle.ETYMOLOGICAL)
        ),
        folded_input=folding.apply(latin, style),
        etymological=etymological,
    )


def _any_token_matches(tokens: Sequence[str], text: str, search_type: SearchType) -> bool:
    # One-letter queries only look at the entry's first (headword) token.
    if len(text) == 1:
        return bool(tokens) and search_type.matches(tokens[0], text)
    return any(search_type.matches(token, text) for token in tokens)


class EntryMatcher:
    """Applies both filter passes of a :class:`SearchPlan`."""

    def __init__(
        self,
        schema: FieldSchema,
        index: TokenIndex,
        folding: FoldingConfiguration,
    ) -> None:
        self.schema = schema
        self.index = index
        self.folding = folding

    def _lang_matches(self, entry_id: str, plan: SearchPlan) -> bool:
        tokens = self.index.tokens(entry_id, plan.lang)
        return any(plan.search_type.matches(token, plan.lang_input) for token in tokens)

    def first_pass(self, entry: Entry, plan: SearchPlan) -> bool:
        entry_id = self.schema.entry_id(entry)
        matched = False
        if plan.isv_side:
            if plan.etymological:
                tokens = self.index.tokens(entry_id, LanguageKey.ISV_SRC)
                matched = _any_token_matches(tokens, plan.etym_input, plan.search_type)
            else:
                tokens = self.index.tokens(entry_id, LanguageKey.ISV)
                matched = _any_token_matches(tokens, plan.isv_input, plan.search_type)
        if plan.lang_side:
            matched = matched or self._lang_matches(entry_id, plan)
        if matched and not matches_pos(self.schema.get(entry, DETAILS_FIELD), plan.query.pos_groups):
            return False
        return matched

    def folding_applies(self, plan: SearchPlan) -> bool:
        return (
            plan.isv_side
            and not plan.etymological
            and plan.style.supports_folding
            and self.folding.has_target_in(plan.isv_input)
        )

    def second_pass(self, entry: Entry, plan: SearchPlan) -> bool:
        entry_id = self.schema.entry_id(entry)
        matched = True
        if self.folding_applies(plan):
            tokens = [
                self.folding.apply(token, plan.style)
                for token in self.index.tokens(entry_id, LanguageKey.ISV_SRC)
            ]
            matched = _any_token_matches(tokens, plan.folded_input, plan.search_type)
        if not matched and plan.lang_side:
            matched = self._lang_matches(entry_id, plan)
        return matched

    def filter(self, entries: Iterable[Entry], plan: SearchPlan) -> List[Entry]:
        candidates = [entry for entry in entries if self.first_pass(entry, plan)]
        if not self.folding_applies(plan):
            return candidates
        return [entry for entry in candidates if self.second_pass(entry, plan)]


__all__ = ["EntryMatcher", "SearchPlan", "build_plan"]
