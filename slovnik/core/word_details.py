"""Classification of the raw part-of-speech / details field.

Details look like ``m.anim.``, ``f.pl.``, ``m./f.``, ``v.tr. ipf.``,
``adj.``, ``pron.pers.`` or ``num.card.``.
"""

from __future__ import annotations

import re
from typing import FrozenSet, List

_TAG_SPLIT = re.compile(r"[.\s/]+")

_POS_BY_TAG = (
    ("v", "verb"),
    ("adj", "adjective"),
    ("adv", "adverb"),
    ("pron", "pronoun"),
    ("num", "numeral"),
    ("prep", "preposition"),
    ("conj", "conjunction"),
    ("intj", "interjection"),
    ("particle", "particle"),
    ("prefix", "prefix"),
    ("suffix", "suffix"),
    ("phrase", "phrase"),
)

_GENDER_BY_TAG = (
    ("m", "masculine"),
    ("f", "feminine"),
    ("n", "neuter"),
)

_PRONOUN_TYPES = {
    "pers": "personal",
    "dem": "demonstrative",
    "int": "interrogative",
    "rel": "relative",
    "poss": "possessive",
    "indef": "indefinite",
    "refl": "reflexive",
    "neg": "negative",
    "univ": "universal",
}

_NUMERAL_TYPES = {
    "card": "cardinal",
    "ord": "ordinal",
    "coll": "collective",
    "fract": "fractional",
    "mult": "multiplicative",
    "diff": "differential",
    "subst": "substantivized",
}


def detail_tags(details: str) -> FrozenSet[str]:
    return frozenset(tag for tag in _TAG_SPLIT.split(details.lower()) if tag)


def get_part_of_speech(details: str) -> str:
    tags = detail_tags(details)
    for tag, name in _POS_BY_TAG:
        if tag in tags:
            return name
    if any(tag in tags for tag, _ in _GENDER_BY_TAG):
        return "noun"
    return ""


def get_gender(details: str) -> str:
    tags = detail_tags(details)
    for tag, name in _GENDER_BY_TAG:
        if tag in tags:
            return name
    return ""


def get_genders(details: str) -> List[str]:
    """All genders in declension order; ``m./f.`` yields two."""

    tags = detail_tags(details)
    return [name for tag, name in _GENDER_BY_TAG if tag in tags]


def is_animated(details: str) -> bool:
    return "anim" in detail_tags(details)


def is_plural(details: str) -> bool:
    return "pl" in detail_tags(details)


def is_singular(details: str) -> bool:
    return "sg" in detail_tags(details)


def is_indeclinable(details: str) -> bool:
    return "indecl" in detail_tags(details)


def get_pronoun_type(details: str) -> str:
    tags = detail_tags(details)
    for tag, name in _PRONOUN_TYPES.items():
        if tag in tags:
            return name
    return ""


def get_numeral_type(details: str) -> str:
    tags = detail_tags(details)
    for tag, name in _NUMERAL_TYPES.items():
        if tag in tags:
            return name
    return ""


__all__ = [
    "detail_tags",
    "get_gender",
    "get_genders",
    "get_numeral_type",
    "get_part_of_speech",
    "get_pronoun_type",
    "is_animated",
    "is_indeclinable",
    "is_plural",
    "is_singular",
]
