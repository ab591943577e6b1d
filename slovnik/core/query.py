"""Parsing of the search box mini language.

A query is a word followed by options introduced with ``" -"``::

    dom -end            suffix match
    dom -etym           compare against etymological orthography
    dom -b              match either side of the translation pair
    dom -p noun.m+v.ipf masculine nouns or imperfective verbs
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

OPTION_SEPARATOR = " -"
_POS_IGNORED = re.compile(r"[ /]")

PosGroups = Tuple[Tuple[str, ...], ...]


class SearchType(str, Enum):
    BEGIN = "begin"
    FULL = "full"
    END = "end"
    SOME = "some"

    def matches(self, candidate: str, text: str) -> bool:
        if self is SearchType.BEGIN:
            return candidate.startswith(text)
        if self is SearchType.FULL:
            return candidate == text
        if self is SearchType.END:
            return candidate.endswith(text)
        return text in candidate


def resolve_search_type(value: Union[SearchType, str]) -> SearchType:
    return value if isinstance(value, SearchType) else SearchType(str(value))


@dataclass(frozen=True)
class ParsedQuery:
    """Base word plus the inline options of one query."""

    word: str
    options: Tuple[str, ...] = ()
    force_end: bool = False
    etymological: bool = False
    two_way: bool = False
    pos_groups: PosGroups = ()


def parse_pos_pattern(pattern: str) -> PosGroups:
    """``noun.m+v.ipf`` -> ``(("noun", "m"), ("v", "ipf"))``."""

    cleaned = _POS_IGNORED.sub("", pattern)
    return tuple(
        tuple(tag for tag in group.split(".") if tag)
        for group in cleaned.split("+")
        if group
    )


def parse_query(text: str, pos_filter: str = "") -> ParsedQuery:
    segments = [segment.strip() for segment in text.split(OPTION_SEPARATOR)]
    word, options = segments[0], tuple(segments[1:])

    pos_option = next((option for option in options if option[:2] == "p "), None)
    if pos_option is not None:
        pos_groups = parse_pos_pattern(pos_option[2:])
    elif pos_filter:
        pos_groups = ((pos_filter,),)
    else:
        pos_groups = ()

    return ParsedQuery(
        word=word,
        options=options,
        force_end="end" in options,
        etymological="etym" in options,
        two_way="b" in options,
        pos_groups=pos_groups,
    )


def entry_pos_tags(details: str) -> set:
    """Tags of an entry; any gender tag also implies ``noun``."""

    tags = set(tag for tag in _POS_IGNORED.sub("", details).split(".") if tag)
    if tags & {"m", "n", "f"}:
        tags.add("noun")
    return tags


def matches_pos(details: str, groups: PosGroups) -> bool:
    if not groups:
        return True
    tags = entry_pos_tags(details)
    return any(all(tag in tags for tag in group) for group in groups)


__all__ = [
    "OPTION_SEPARATOR",
    "ParsedQuery",
    "PosGroups",
    "SearchType",
    "entry_pos_tags",
    "matches_pos",
    "parse_pos_pattern",
    "parse_query",
    "resolve_search_type",
]
