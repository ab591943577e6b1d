import sys
from pathlib import Path
from typing import List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from slovnik.core import DictionaryEngine
from slovnik.core.fields import DEFAULT_HEADER


def _make_row(entry_id: str, isv: str, details: str = "", en: str = "", **fields: str) -> List[str]:
    """Build a row aligned with the default header."""

    values = {name: "" for name in DEFAULT_HEADER}
    values.update(id=entry_id, isv=isv, partOfSpeech=details, en=en)
    values.update(fields)
    return [values[name] for name in DEFAULT_HEADER]


SAMPLE_ROWS = [
    _make_row("1", "dom", "m.", "house, home", ru="дом", addition="(+2)"),
    _make_row("2", "domašnji", "adj.", "domestic, home"),
    _make_row("3", "kupola", "f.", "dome"),
    _make_row("4", "gråd", "m.", "city, town"),
    _make_row("5", "gradina", "f.", "garden"),
    _make_row("6", "čas", "m.", "time, hour"),
    _make_row("7", "cena", "f.", "price"),
    _make_row("8", "a, beseda", "conj.", "and"),
    _make_row("9", "brat", "m.anim.", "brother", ru="брат"),
    _make_row("10", "kuča", "f.", "house", ru="!дом", sr="кућа"),
    _make_row("11", "jelka", "f.", "fir", ru="ёлка"),
    _make_row("12", "sestra, sestrica", "f.", "!sister"),
]


@pytest.fixture
def sample_rows() -> List[List[str]]:
    return [list(row) for row in SAMPLE_ROWS]


@pytest.fixture
def engine(sample_rows) -> DictionaryEngine:
    dictionary = DictionaryEngine()
    dictionary.build(sample_rows)
    return dictionary


@pytest.fixture
def make_row():
    return _make_row
