"""The dictionary engine: one explicitly owned index plus folding state."""

from __future__ import annotations

from contextlib import nullcontext
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ..utils.observability import get_logger
from ..utils.telemetry import StructuredTelemetry
from .fields import DEFAULT_HEADER, Entry, FieldSchema
from .folding import FoldingConfiguration
from .index import IndexBuilder, SnapshotPairs, TokenIndex, compute_completion_statistics
from .languages import LanguageLike, isv_to_eng_latin, resolve_language
from .matcher import EntryMatcher, SearchPlan, build_plan
from .morphology import MorphologyProvider, NullMorphologyProvider
from .query import SearchType, parse_query, resolve_search_type
from .ranker import MAX_RESULTS, EntryRanker
from .scripts import RenderStyle, StyleLike, resolve_style


class DictionaryNotBuiltError(RuntimeError):
    """Raised when the engine is queried before :meth:`DictionaryEngine.build`."""


class DictionaryEngine:
    """Bidirectional search over an Interslavic word list.

    The engine is constructed empty and must be built (from rows, or from a
    snapshot exported by :meth:`get_index`) before it answers queries. The
    folding configuration is session state: it survives across queries until
    one of the folding mutators changes it.
    """

    def __init__(
        self,
        *,
        header: Sequence[str] = DEFAULT_HEADER,
        morphology: Optional[MorphologyProvider] = None,
        folding: Optional[FoldingConfiguration] = None,
        telemetry: Optional[StructuredTelemetry] = None,
        max_results: int = MAX_RESULTS,
    ) -> None:
        self.schema = FieldSchema(header)
        self.morphology: MorphologyProvider = morphology or NullMorphologyProvider()
        self.folding = folding or FoldingConfiguration()
        self.telemetry = telemetry
        self.max_results = max_results

        self._words: List[Entry] = []
        self._index: Optional[TokenIndex] = None
        self._statistics: Dict[str, str] = {}
        self._logger = get_logger(__name__).bind(component="dictionary_engine")

    @property
    def is_built(self) -> bool:
        return self._index is not None

    def _timer(self, name: str, metadata: Optional[Dict] = None):
        if self.telemetry is None:
            return nullcontext({})
        return self.telemetry.timer(name, metadata)

    def _require_index(self) -> TokenIndex:
        if self._index is None:
            raise DictionaryNotBuiltError("Dictionary index has not been built yet")
        return self._index

    def build(
        self,
        rows: Iterable[Entry],
        snapshot: Optional[Iterable[Sequence]] = None,
        statistics: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Index ``rows``, or adopt a previously exported snapshot verbatim."""

        words = [list(row) for row in rows]
        with self._timer("index.build", {"rows": len(words)}) as timing:
            if snapshot is None:
                index = IndexBuilder(self.schema, self.morphology).build(words)
                computed = compute_completion_statistics(words, self.schema)
                timing["source"] = "rows"
            else:
                index = TokenIndex.from_pairs(snapshot)
                computed = dict(statistics or {})
                timing["source"] = "snapshot"
            timing["keys"] = len(index)

        self._words = words
        self._index = index
        self._statistics = computed
        self._logger.info(
            "Dictionary index ready",
            context={"rows": len(words), "keys": len(index), "source": timing["source"]},
        )

    def get_word_list(self) -> List[Entry]:
        return self._words

    def get_index(self) -> SnapshotPairs:
        return self._require_index().export()

    def get_completion_statistics(self) -> Dict[str, str]:
        return dict(self._statistics)

    def get_field(self, entry: Entry, name: str) -> str:
        return self.schema.get(entry, name)

    def isv_to_eng_latin(self, text: str) -> str:
        return isv_to_eng_latin(text)

    def toggle_folding_letters(self, letters: str) -> FoldingConfiguration:
        return self.folding.toggle(letters)

    def set_folding_configuration(
        self,
        pairs: Union[Iterable[Sequence[str]], Mapping[str, Sequence[str]]],
    ) -> None:
        self.folding.set(pairs)

    def plan(
        self,
        text: str,
        from_lang: LanguageLike,
        to_lang: LanguageLike,
        search_type: Union[SearchType, str] = SearchType.BEGIN,
        pos_filter: str = "",
        style: StyleLike = RenderStyle.STANDARD,
    ) -> Optional[SearchPlan]:
        return build_plan(
            parse_query(text, pos_filter),
            resolve_language(from_lang),
            resolve_language(to_lang),
            resolve_search_type(search_type),
            resolve_style(style),
            self.folding,
        )

    def search(
        self,
        text: str,
        from_lang: LanguageLike,
        to_lang: LanguageLike,
        search_type: Union[SearchType, str] = SearchType.BEGIN,
        pos_filter: str = "",
        style: StyleLike = RenderStyle.STANDARD,
    ) -> List[Entry]:
        """Return up to ``max_results`` raw entries ordered by edit distance."""

        index = self._require_index()
        plan = self.plan(text, from_lang, to_lang, search_type, pos_filter, style)
        if plan is None:
            return []

        with self._timer("search.filter") as timing:
            candidates = EntryMatcher(self.schema, index, self.folding).filter(self._words, plan)
            timing["candidates"] = len(candidates)
        with self._timer("search.rank"):
            return EntryRanker(self.schema, index, self.max_results).rank(candidates, plan)


__all__ = ["DictionaryEngine", "DictionaryNotBuiltError"]
