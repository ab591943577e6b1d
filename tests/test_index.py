import json

import pytest

from slovnik.core import (
    DictionaryEngine,
    DictionaryNotBuiltError,
    FieldSchema,
    IndexBuilder,
    LanguageKey,
    NullMorphologyProvider,
    TokenIndex,
    compute_completion_statistics,
    expand_word_forms,
)


class DummyMorphology(NullMorphologyProvider):
    """Provider stub that records calls and returns predictable forms."""

    def __init__(self) -> None:
        self.noun_calls = []

    def decline_noun(self, word, addition, gender, animated, plural, singular, indeclinable):
        self.noun_calls.append((word, gender, animated))
        return [word + "a", word + "u", word + "om"]

    def conjugate_verb(self, word, addition):
        return [word[:-2] + "ju"]


def test_index_holds_normalized_and_etymological_tokens(engine):
    index = TokenIndex.from_pairs(engine.get_index())

    assert index.tokens("4", LanguageKey.ISV) == ["grad"]
    assert index.tokens("4", LanguageKey.ISV_SRC) == ["gråd"]
    assert index.tokens("8", LanguageKey.ISV) == ["a", "beseda"]
    assert index.tokens("1", LanguageKey.EN) == ["house", "home"]
    assert index.tokens("12", LanguageKey.EN) == ["sister"]
    assert index.tokens("10", LanguageKey.RU) == ["дом"]
    assert index.tokens("11", LanguageKey.RU) == ["елка"]


def test_every_language_key_is_indexed(engine):
    keys = {tuple(key) for key, _ in engine.get_index()}

    for language in LanguageKey:
        assert ("1", language.value) in keys


def test_bracketed_annotations_are_not_indexed(make_row):
    schema = FieldSchema()
    tokens = IndexBuilder(schema, NullMorphologyProvider()).entry_tokens(
        make_row("1", "dom [arch.]", "m.", "house (building)")
    )

    assert tokens[LanguageKey.ISV] == ["dom"]
    assert tokens[LanguageKey.EN] == ["house"]


def test_completion_statistics(engine):
    statistics = engine.get_completion_statistics()

    assert statistics["isv"] == "100.0"
    assert statistics["en"] == "91.7"
    assert statistics["ru"] == "91.7"
    assert statistics["de"] == "100.0"
    assert "isv-src" not in statistics


def test_completion_statistics_of_empty_word_list():
    statistics = compute_completion_statistics([], FieldSchema())

    assert statistics["en"] == "0.0"


def test_unbuilt_engine_raises():
    engine = DictionaryEngine()

    assert not engine.is_built
    with pytest.raises(DictionaryNotBuiltError):
        engine.get_index()
    with pytest.raises(DictionaryNotBuiltError):
        engine.search("dom", "isv", "en")


def test_expand_word_forms_declines_each_gender():
    morphology = DummyMorphology()

    forms = expand_word_forms("sirota", "", "m./f.", morphology)

    assert forms == ["sirotaa", "sirotau", "sirotaom"]
    assert [call[1] for call in morphology.noun_calls] == ["masculine", "feminine"]


def test_expand_word_forms_handles_each_headword():
    forms = expand_word_forms("dělati, robiti", "", "v.ipf.", DummyMorphology())

    assert forms == ["dělaju", "robiju"]


def test_inflected_forms_are_searchable(make_row):
    engine = DictionaryEngine(morphology=DummyMorphology())
    engine.build([make_row("1", "dom", "m.", "house"), make_row("2", "brat", "m.anim.", "brother")])

    results = engine.search("domom", "isv", "en", search_type="full")

    assert [entry[0] for entry in results] == ["1"]
    assert engine.morphology.noun_calls[1] == ("brat", "masculine", True)


def test_snapshot_round_trip_gives_identical_results(sample_rows):
    original = DictionaryEngine()
    original.build(sample_rows)

    payload = json.loads(
        json.dumps(
            {"index": original.get_index(), "statistics": original.get_completion_statistics()},
            ensure_ascii=False,
        )
    )
    restored = DictionaryEngine()
    restored.build(sample_rows, payload["index"], payload["statistics"])

    assert restored.get_completion_statistics() == original.get_completion_statistics()
    queries = [
        ("dom", "isv", "en", {}),
        ("dom -b", "isv", "en", {}),
        ("grad -etym", "isv", "en", {}),
        ("ina", "isv", "en", {"search_type": "end"}),
        ("house", "en", "isv", {}),
        ("kuća", "sr", "isv", {}),
        ("dom -p noun", "isv", "en", {}),
    ]
    for text, from_lang, to_lang, options in queries:
        assert restored.search(text, from_lang, to_lang, **options) == original.search(
            text, from_lang, to_lang, **options
        )


def test_pronoun_and_numeral_subtypes_reach_the_provider():
    calls = []

    class RecordingMorphology(NullMorphologyProvider):
        def decline_pronoun(self, word, pronoun_type):
            calls.append(pronoun_type)
            return [word + "go"]

        def decline_numeral(self, word, numeral_type):
            calls.append(numeral_type)
            return [word + "h"]

    morphology = RecordingMorphology()

    assert expand_word_forms("kto", "", "pron.int.rel.", morphology) == ["ktogo"]
    assert expand_word_forms("dva", "", "num.ord.card.", morphology) == ["dvah"]
    assert calls == ["interrogative", "cardinal"]
