import json

import pytest

from slovnik.app.data.wordlist import WordListRepository, parse_word_list
from slovnik.core.fields import DEFAULT_HEADER

WORDLIST = "\n".join(
    [
        "isv<>id<>partOfSpeech<>en<>ru<>extra",
        "dom<>1<>m.<>house, home<>дом<>ignored",
        "",
        "gråd<>4<>m.<>city<>!город<>",
    ]
)


def test_parse_word_list_reorders_columns():
    rows = parse_word_list(WORDLIST)

    assert len(rows) == 2
    first = dict(zip(DEFAULT_HEADER, rows[0]))
    assert first["id"] == "1"
    assert first["isv"] == "dom"
    assert first["en"] == "house, home"
    assert first["addition"] == ""
    assert first["de"] == ""
    assert dict(zip(DEFAULT_HEADER, rows[1]))["ru"] == "!город"


def test_parse_word_list_rejects_bad_rows():
    with pytest.raises(ValueError, match="Line 2"):
        parse_word_list("id<>isv\n1<>dom<>extra")
    with pytest.raises(ValueError):
        parse_word_list("isv<>en\ndom<>house")
    assert parse_word_list("") == []


def test_repository_loads_rows_and_snapshots(tmp_path):
    wordlist_path = tmp_path / "wordlist.txt"
    wordlist_path.write_text(WORDLIST, encoding="utf-8")
    repository = WordListRepository(wordlist_path, tmp_path / "cache" / "snapshot.json")

    assert len(repository.load_rows()) == 2
    assert repository.load_snapshot() is None

    written = repository.save_snapshot([(("1", "isv"), ["dom"])], {"isv": "100.0"})

    assert json.loads(written.read_text(encoding="utf-8"))["statistics"] == {"isv": "100.0"}
    index, statistics = repository.load_snapshot()
    assert index == [[["1", "isv"], ["dom"]]]
    assert statistics == {"isv": "100.0"}


def test_repository_errors(tmp_path):
    missing = WordListRepository(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        missing.load_rows()
    with pytest.raises(ValueError):
        missing.save_snapshot([], {})

    snapshot_path = tmp_path / "snapshot.json"
    snapshot_path.write_text(json.dumps({"index": []}), encoding="utf-8")
    with pytest.raises(ValueError):
        WordListRepository(tmp_path / "missing.txt", snapshot_path).load_snapshot()
