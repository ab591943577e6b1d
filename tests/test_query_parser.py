import pytest

from slovnik.core.query import (
    SearchType,
    entry_pos_tags,
    matches_pos,
    parse_pos_pattern,
    parse_query,
    resolve_search_type,
)
from slovnik.core.word_details import (
    get_gender,
    get_genders,
    get_numeral_type,
    get_part_of_speech,
    get_pronoun_type,
    is_animated,
    is_indeclinable,
    is_plural,
)


def test_parse_query_extracts_options():
    query = parse_query("dom -p noun.m+v.ipf -b")

    assert query.word == "dom"
    assert query.two_way is True
    assert query.force_end is False
    assert query.etymological is False
    assert query.pos_groups == (("noun", "m"), ("v", "ipf"))


def test_parse_query_flags():
    assert parse_query("ina -end").force_end is True
    assert parse_query("gråd -etym").etymological is True
    assert parse_query("dom").options == ()


def test_pos_filter_is_used_without_pos_option():
    assert parse_query("dom", pos_filter="adj").pos_groups == (("adj",),)
    assert parse_query("dom -p v", pos_filter="adj").pos_groups == (("v",),)
    assert parse_query("dom").pos_groups == ()


def test_parse_pos_pattern_ignores_spaces_and_slashes():
    assert parse_pos_pattern("m./f.") == (("m", "f"),)
    assert parse_pos_pattern("adj + adv") == (("adj",), ("adv",))


def test_entry_pos_tags_adds_noun_for_genders():
    assert entry_pos_tags("m.anim.") == {"m", "anim", "noun"}
    assert "noun" not in entry_pos_tags("adj.")


def test_matches_pos():
    assert matches_pos("m.", ())
    assert matches_pos("m.", (("noun",),))
    assert not matches_pos("adj.", (("noun",),))
    assert matches_pos("v.tr. ipf.", (("noun",), ("v", "ipf")))
    assert not matches_pos("v.tr. pf.", (("v", "ipf"),))


def test_search_type_predicates():
    assert SearchType.BEGIN.matches("domašnji", "dom")
    assert SearchType.FULL.matches("dom", "dom")
    assert not SearchType.FULL.matches("doma", "dom")
    assert SearchType.END.matches("abab", "ab")
    assert not SearchType.END.matches("abba", "ab")
    assert SearchType.SOME.matches("gradina", "adi")


def test_unknown_search_type_is_rejected():
    assert resolve_search_type("end") is SearchType.END
    with pytest.raises(ValueError):
        resolve_search_type("fuzzy")


def test_word_details_classification():
    assert get_part_of_speech("m.anim.") == "noun"
    assert get_part_of_speech("v.tr. ipf.") == "verb"
    assert get_part_of_speech("adj.") == "adjective"
    assert get_part_of_speech("pron.pers.") == "pronoun"
    assert get_part_of_speech("") == ""
    assert get_gender("f.pl.") == "feminine"
    assert get_genders("m./f.") == ["masculine", "feminine"]
    assert is_animated("m.anim.")
    assert is_plural("f.pl.")
    assert is_indeclinable("n.indecl.")
    assert get_pronoun_type("pron.pers.") == "personal"
    assert get_numeral_type("num.card.") == "cardinal"


def test_subtype_lookup_follows_table_order():
    assert get_pronoun_type("pron.int.rel.") == "interrogative"
    assert get_pronoun_type("pron.rel.int.") == "interrogative"
    assert get_numeral_type("num.ord.card.") == "cardinal"
    assert get_numeral_type("adj.") == ""
