"""Application wiring for the slovnik dictionary."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

if __package__ in {None, ""}:
    import sys

    repo_root = Path(__file__).resolve().parents[2]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))

from slovnik.app.data.wordlist import WordListRepository
from slovnik.app.services.dictionary_service import DictionaryService
from slovnik.app.services.result_formatter import DisplayRecord
from slovnik.app.ui.gradio import create_interface
from slovnik.core import MorphologyProvider, RenderStyle
from slovnik.utils.logging_config import configure_logging
from slovnik.utils.observability import get_logger
from slovnik.utils.telemetry import TelemetryLogger

DEFAULT_WORDLIST_PATH = "wordlist.txt"


class SlovnikApp:
    """High-level application facade bundling dependencies."""

    def __init__(
        self,
        wordlist_path: Optional[str] = None,
        snapshot_path: Optional[str] = None,
        *,
        repository: Optional[WordListRepository] = None,
        service: Optional[DictionaryService] = None,
        morphology: Optional[MorphologyProvider] = None,
        log_telemetry: bool = False,
    ) -> None:
        self.wordlist_path = wordlist_path or os.environ.get(
            "SLOVNIK_WORDLIST", DEFAULT_WORDLIST_PATH
        )
        self.snapshot_path = snapshot_path or os.environ.get("SLOVNIK_SNAPSHOT") or None
        self._logger = get_logger(__name__).bind(component="app_facade")
        self._logger.info(
            "Initialising application facade",
            context={"wordlist_path": self.wordlist_path, "snapshot_path": self.snapshot_path},
        )

        self.repository = repository or WordListRepository(self.wordlist_path, self.snapshot_path)
        self.service = service or DictionaryService(morphology=morphology)
        if log_telemetry:
            self.service.telemetry.add_listener(TelemetryLogger())

        try:
            rows = self.repository.load_rows()
            snapshot = self.repository.load_snapshot()
        except (OSError, ValueError) as exc:
            self._logger.error(
                "Dictionary data could not be loaded",
                context={"wordlist_path": self.wordlist_path, "error": str(exc)},
            )
            raise

        if snapshot is None:
            self.service.build(rows)
        else:
            index, statistics = snapshot
            self.service.build(rows, index, statistics)

    # Public API ------------------------------------------------------------
    def search(self, text: str, from_lang: str, to_lang: str, **kwargs) -> List[DisplayRecord]:
        style = kwargs.pop("style", RenderStyle.STANDARD)
        results = self.service.search(text, from_lang, to_lang, style=style, **kwargs)
        return self.service.format_for_display(results, from_lang, to_lang, style)

    def export_snapshot(self) -> Path:
        """Persist the current index so the next start can skip the build."""

        return self.repository.save_snapshot(
            self.service.get_index(),
            self.service.get_completion_statistics(),
        )

    def create_gradio_interface(self):
        return create_interface(self.service)


def _should_share_interface() -> bool:
    """Return whether the Gradio UI should request a public share link."""

    env_value = os.environ.get("SLOVNIK_SHARE", "")
    return str(env_value).strip().lower() in {"1", "true", "yes", "on"}


def main() -> None:
    configure_logging()
    app = SlovnikApp(log_telemetry=True)
    interface = app.create_gradio_interface()
    interface.launch(
        server_name="0.0.0.0",
        server_port=7860,
        share=_should_share_interface(),
    )


__all__ = ["SlovnikApp", "main"]


if __name__ == "__main__":
    main()
