"""Indexing, matching and ranking for the Interslavic dictionary."""

from .engine import DictionaryEngine, DictionaryNotBuiltError
from .fields import DEFAULT_HEADER, FieldSchema
from .folding import REPLACEABLE_LETTERS, FoldingConfiguration
from .index import IndexBuilder, TokenIndex, compute_completion_statistics
from .languages import LanguageKey, isv_to_eng_latin, prepare_query, prepare_token
from .matcher import EntryMatcher, SearchPlan
from .morphology import MorphologyProvider, NullMorphologyProvider, expand_word_forms
from .query import ParsedQuery, SearchType, parse_query
from .ranker import MAX_RESULTS, EntryRanker
from .scripts import RenderStyle

__all__ = [
    "DEFAULT_HEADER",
    "DictionaryEngine",
    "DictionaryNotBuiltError",
    "EntryMatcher",
    "EntryRanker",
    "FieldSchema",
    "FoldingConfiguration",
    "IndexBuilder",
    "LanguageKey",
    "MAX_RESULTS",
    "MorphologyProvider",
    "NullMorphologyProvider",
    "ParsedQuery",
    "REPLACEABLE_LETTERS",
    "RenderStyle",
    "SearchPlan",
    "SearchType",
    "TokenIndex",
    "compute_completion_statistics",
    "expand_word_forms",
    "isv_to_eng_latin",
    "parse_query",
    "prepare_query",
    "prepare_token",
]
