"""Dictionary service orchestrating index builds, searches and formatting."""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from slovnik.core import (
    DictionaryEngine,
    FoldingConfiguration,
    MorphologyProvider,
    RenderStyle,
    SearchType,
)
from slovnik.core.fields import Entry
from slovnik.core.index import SnapshotPairs

from ...utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)
from ...utils.telemetry import StructuredTelemetry
from .result_formatter import DictionaryResultFormatter, DisplayRecord


class DictionaryService:
    """Instrumented facade over :class:`DictionaryEngine`.

    Every public operation of the engine is exposed here. Builds and searches
    are wrapped in a telemetry trace, an OpenTelemetry span and Prometheus
    metrics; failures are logged with their request context and re-raised.
    """

    def __init__(
        self,
        *,
        engine: Optional[DictionaryEngine] = None,
        morphology: Optional[MorphologyProvider] = None,
        formatter: Optional[DictionaryResultFormatter] = None,
        telemetry: Optional[StructuredTelemetry] = None,
    ) -> None:
        self.telemetry = telemetry or StructuredTelemetry()
        if engine is None:
            engine = DictionaryEngine(morphology=morphology, telemetry=self.telemetry)
        else:
            engine.telemetry = self.telemetry
        self.engine = engine
        self.formatter = formatter or DictionaryResultFormatter(engine.schema)
        self._latest_trace: Dict[str, Any] = {}

        self._logger = get_logger(__name__).bind(component="dictionary_service")

        self._metric_request_total = create_counter(
            "slovnik_search_requests_total",
            "Total dictionary search requests received.",
        )
        self._metric_request_failures = create_counter(
            "slovnik_search_request_failures_total",
            "Total dictionary search requests that raised an exception.",
        )
        self._metric_request_duration = create_histogram(
            "slovnik_search_request_seconds",
            "Latency of dictionary search requests.",
        )
        self._metric_empty_queries = create_counter(
            "slovnik_search_empty_queries_total",
            "Searches whose word normalized to nothing.",
        )
        self._metric_results = create_counter(
            "slovnik_search_results_total",
            "Entries returned by dictionary searches.",
            label_names=("direction",),
        )
        self._metric_builds = create_counter(
            "slovnik_index_builds_total",
            "Dictionary index builds by source.",
            label_names=("source",),
        )

    # Index lifecycle ---------------------------------------------------------
    def build(
        self,
        rows: Iterable[Entry],
        snapshot: Optional[Iterable[Sequence]] = None,
        statistics: Optional[Mapping[str, str]] = None,
    ) -> None:
        source = "rows" if snapshot is None else "snapshot"
        self.telemetry.start_trace("build_index")
        self.telemetry.annotate("input.source", source)

        with start_span("index.build", {"source": source}) as span:
            try:
                self.engine.build(rows, snapshot, statistics)
            except Exception as exc:
                self._logger.error(
                    "Dictionary index build failed",
                    context={"source": source, "error": str(exc)},
                )
                record_exception(span, exc)
                self._latest_trace = self.telemetry.snapshot()
                raise

            self._metric_builds.labels(source=source).inc()
            rows_total = len(self.engine.get_word_list())
            self.telemetry.annotate("result.rows", rows_total)
            self._latest_trace = self.telemetry.snapshot()
            add_span_attributes(span, {"index.rows": rows_total})
            self._logger.info(
                "Dictionary index build completed",
                context={
                    "source": source,
                    "rows": rows_total,
                    "seconds": self.telemetry.last_duration("index.build"),
                },
            )

    def get_word_list(self) -> List[Entry]:
        return self.engine.get_word_list()

    def get_index(self) -> SnapshotPairs:
        return self.engine.get_index()

    def get_completion_statistics(self) -> Dict[str, str]:
        return self.engine.get_completion_statistics()

    def get_latest_telemetry(self) -> Dict[str, Any]:
        return copy.deepcopy(self._latest_trace)

    def get_field(self, entry: Entry, name: str) -> str:
        return self.engine.get_field(entry, name)

    def isv_to_eng_latin(self, text: str) -> str:
        return self.engine.isv_to_eng_latin(text)

    # Folding preferences -----------------------------------------------------
    def toggle_folding_letters(self, letters: str) -> FoldingConfiguration:
        folding = self.engine.toggle_folding_letters(letters)
        self._logger.debug("Folding letters toggled", context=folding.as_dict())
        return folding

    def set_folding_configuration(
        self,
        pairs: Union[Iterable[Sequence[str]], Mapping[str, Sequence[str]]],
    ) -> None:
        self.engine.set_folding_configuration(pairs)
        self._logger.debug("Folding configuration set", context=self.engine.folding.as_dict())

    # Queries -----------------------------------------------------------------
    def search(
        self,
        text: str,
        from_lang: str,
        to_lang: str,
        search_type: Union[SearchType, str] = SearchType.BEGIN,
        pos_filter: str = "",
        style: Union[RenderStyle, str] = RenderStyle.STANDARD,
    ) -> List[Entry]:
        """Search while recording telemetry, metrics and a tracing span."""

        telemetry = self.telemetry
        request_context: Dict[str, Any] = {
            "text": text,
            "from": str(getattr(from_lang, "value", from_lang)),
            "to": str(getattr(to_lang, "value", to_lang)),
            "search_type": str(getattr(search_type, "value", search_type)),
            "style": str(getattr(style, "value", style)),
        }
        if pos_filter:
            request_context["pos_filter"] = pos_filter

        telemetry.start_trace("search")
        telemetry.increment("search.invoked")
        for key, value in request_context.items():
            telemetry.annotate(f"input.{key}", value)

        self._metric_request_total.inc()
        self._logger.debug("Search request received", context=request_context)

        with start_span("search.request", request_context) as span:
            try:
                with self._metric_request_duration.time():
                    results = self.engine.search(
                        text,
                        from_lang,
                        to_lang,
                        search_type=search_type,
                        pos_filter=pos_filter,
                        style=style,
                    )
            except Exception as exc:
                failure_context = dict(request_context)
                failure_context["error"] = str(exc)
                self._metric_request_failures.inc()
                self._logger.error("Search request failed", context=failure_context)
                record_exception(span, exc)
                telemetry.increment("search.failed")
                self._latest_trace = telemetry.snapshot()
                raise

            if not results and telemetry.last_duration("search.filter") is None:
                self._metric_empty_queries.inc()
                telemetry.increment("search.empty_query")

            direction = f"{request_context['from']}-{request_context['to']}"
            self._metric_results.labels(direction=direction).inc(len(results))
            telemetry.annotate("result.count", len(results))
            telemetry.increment("search.completed")
            self._latest_trace = telemetry.snapshot()
            add_span_attributes(span, {"search.success": True, "result.total": len(results)})
            self._logger.debug(
                "Search request completed",
                context={"text": text, "results": len(results)},
            )
            return results

    def format_for_display(
        self,
        entries: Iterable[Entry],
        from_lang: str,
        to_lang: str,
        style: Union[RenderStyle, str] = RenderStyle.STANDARD,
    ) -> List[DisplayRecord]:
        return self.formatter.format_for_display(entries, from_lang, to_lang, style)

    def search_and_format(
        self,
        text: str,
        from_lang: str,
        to_lang: str,
        search_type: Union[SearchType, str] = SearchType.BEGIN,
        pos_filter: str = "",
        style: Union[RenderStyle, str] = RenderStyle.STANDARD,
    ) -> List[DisplayRecord]:
        results = self.search(text, from_lang, to_lang, search_type, pos_filter, style)
        return self.format_for_display(results, from_lang, to_lang, style)


__all__ = ["DictionaryService"]
