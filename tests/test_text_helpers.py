import pytest

from slovnik.core.languages import LanguageKey, isv_to_eng_latin, prepare_query, prepare_token
from slovnik.core.scripts import (
    RenderStyle,
    get_cyrillic,
    get_latin,
    latin_to_gla,
    latin_to_ipa,
    normalize,
    resolve_style,
    sr_gajevica_to_vukovica,
)
from slovnik.core.text import (
    convert_cases,
    is_verified,
    remove_brackets,
    remove_exclamation_mark,
    split_words,
)


def test_remove_brackets_drops_annotations():
    assert remove_brackets("dom [house]", "[", "]") == "dom"
    assert remove_brackets("(arch.) grad", "(", ")") == "grad"
    assert remove_brackets("plain", "[", "]") == "plain"


def test_unverified_marker_helpers():
    assert remove_exclamation_mark("!foo") == "foo"
    assert remove_exclamation_mark("foo!") == "foo!"
    assert not is_verified("!foo")
    assert is_verified("foo")
    assert is_verified("")


def test_split_words_prefers_semicolon():
    assert split_words("a, b") == ["a", " b"]
    assert split_words("a; b, c") == ["a", " b, c"]
    assert split_words("") == [""]


def test_convert_cases_names_numeric_cases():
    assert convert_cases("(+2)") == "(+Gen)"
    assert convert_cases("(+4), (+7)") == "(+Acc), (+Voc)"
    assert convert_cases("(+9)") == "(+9)"


def test_get_latin_per_style():
    assert get_latin("gråd", RenderStyle.STANDARD) == "grad"
    assert get_latin("gråd", RenderStyle.ETYMOLOGICAL) == "gråd"
    assert get_latin("đak", "3") == "džak"
    assert get_latin("Đak", "3") == "Džak"
    assert get_latin("město", "J") == "mesto"
    assert get_latin("byti", "J") == "biti"
    assert get_latin("byti", "3") == "byti"


def test_get_latin_reads_cyrillic_input():
    assert get_latin("дом", RenderStyle.STANDARD) == "dom"
    assert get_latin("Часть", RenderStyle.STANDARD) == "Čast"


def test_other_scripts():
    assert get_cyrillic("dom", "3") == "дом"
    assert get_cyrillic("Dom", "3") == "Дом"
    assert get_cyrillic("ljubov", "3") == "љубов"
    assert latin_to_gla("dom") == "ⰴⱁⰿ"
    assert latin_to_ipa("Dom") == "dɔm"
    assert latin_to_ipa("čas") == "t͡ʃas"
    assert sr_gajevica_to_vukovica("kuća") == "кућа"
    assert sr_gajevica_to_vukovica("ljubav") == "љубав"


def test_unknown_style_is_rejected():
    with pytest.raises(ValueError):
        resolve_style("X")


def test_normalize_strips_combining_marks():
    assert normalize("čašě") == "case"


def test_isv_to_eng_latin():
    assert isv_to_eng_latin("dobry") == "dobri"
    assert isv_to_eng_latin("gråd") == "grad"
    assert isv_to_eng_latin("domašnji") == "domasnji"


@pytest.mark.parametrize(
    "language, text, expected",
    [
        (LanguageKey.ISV, "Žena", "zena"),
        (LanguageKey.ISV, "město", "mesto"),
        (LanguageKey.ISV_SRC, "Gråd", "gråd"),
        (LanguageKey.EN, "Ice cream, ", "icecream"),
        (LanguageKey.RU, "Ёлка", "елка"),
        (LanguageKey.PL, "Łódź", "lodz"),
        (LanguageKey.DE, "Straße", "strasse"),
        (LanguageKey.SR, "кућа", "кућа"),
    ],
)
def test_prepare_token(language, text, expected):
    assert prepare_token(language, text) == expected


def test_prepare_query_converts_serbian_latin():
    assert prepare_query("sr", "Kuća") == "кућа"
    assert prepare_token("sr", "Kuća") == "kuća"


def test_unknown_language_is_rejected():
    with pytest.raises(ValueError):
        prepare_token("xx", "dom")
