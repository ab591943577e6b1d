"""Loading of the delimited word list and of exported index snapshots."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from slovnik.core.fields import DEFAULT_HEADER, ID_FIELD
from slovnik.core.index import SnapshotPairs
from slovnik.utils.observability import get_logger

DATA_DELIMITER = "<>"

Snapshot = Tuple[SnapshotPairs, Dict[str, str]]


def parse_word_list(
    text: str,
    header: Sequence[str] = DEFAULT_HEADER,
    *,
    delimiter: str = DATA_DELIMITER,
) -> List[List[str]]:
    """Parse ``text`` whose first line names the columns.

    Columns are reordered into ``header``; header fields absent from the file
    are filled with empty strings, unknown columns are ignored.
    """

    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        return []

    columns = [name.strip() for name in lines[0].split(delimiter)]
    if ID_FIELD not in columns:
        raise ValueError(f"Word list header lacks the {ID_FIELD!r} column")

    positions = {name: i for i, name in enumerate(columns)}
    rows: List[List[str]] = []
    for line_number, line in enumerate(lines[1:], start=2):
        values = line.split(delimiter)
        if len(values) != len(columns):
            raise ValueError(
                f"Line {line_number} has {len(values)} fields, expected {len(columns)}"
            )
        rows.append(
            [values[positions[name]].strip() if name in positions else "" for name in header]
        )
    return rows


class WordListRepository:
    """File-backed source for the word list and its optional snapshot."""

    def __init__(
        self,
        wordlist_path: str | Path,
        snapshot_path: Optional[str | Path] = None,
        *,
        header: Sequence[str] = DEFAULT_HEADER,
    ) -> None:
        self.wordlist_path = Path(wordlist_path)
        self.snapshot_path = Path(snapshot_path) if snapshot_path else None
        self.header = tuple(header)
        self._logger = get_logger(__name__).bind(
            component="wordlist_repository",
            wordlist_path=str(self.wordlist_path),
        )

    def load_rows(self) -> List[List[str]]:
        if not self.wordlist_path.exists():
            raise FileNotFoundError(f"Word list not found: {self.wordlist_path}")
        rows = parse_word_list(self.wordlist_path.read_text(encoding="utf-8"), self.header)
        self._logger.info("Word list loaded", context={"rows": len(rows)})
        return rows

    def load_snapshot(self) -> Optional[Snapshot]:
        """Return ``(index_pairs, statistics)`` or ``None`` without a snapshot file."""

        if self.snapshot_path is None or not self.snapshot_path.exists():
            return None
        payload: Any = json.loads(self.snapshot_path.read_text(encoding="utf-8"))
        if not isinstance(payload, dict) or "index" not in payload or "statistics" not in payload:
            raise ValueError(f"Malformed snapshot: {self.snapshot_path}")
        self._logger.info(
            "Index snapshot loaded",
            context={"snapshot_path": str(self.snapshot_path), "keys": len(payload["index"])},
        )
        return payload["index"], dict(payload["statistics"])

    def save_snapshot(self, index: SnapshotPairs, statistics: Dict[str, str]) -> Path:
        if self.snapshot_path is None:
            raise ValueError("No snapshot path configured")
        self.snapshot_path.parent.mkdir(parents=True, exist_ok=True)
        self.snapshot_path.write_text(
            json.dumps({"index": index, "statistics": statistics}, ensure_ascii=False),
            encoding="utf-8",
        )
        self._logger.info(
            "Index snapshot written",
            context={"snapshot_path": str(self.snapshot_path), "keys": len(index)},
        )
        return self.snapshot_path


__all__ = ["DATA_DELIMITER", "Snapshot", "WordListRepository", "parse_word_list"]
