"""Small string helpers applied to raw dictionary fields."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import List

UNVERIFIED_MARKER = "!"

_CASE_NAMES = {
    "1": "Nom",
    "2": "Gen",
    "3": "Dat",
    "4": "Acc",
    "5": "Ins",
    "6": "Loc",
    "7": "Voc",
}
_CASE_PATTERN = re.compile(r"\+\s*([1-7])")


@lru_cache(maxsize=8)
def _bracket_pattern(left: str, right: str) -> re.Pattern:
    return re.compile(f"{re.escape(left)}[^{re.escape(right)}]*{re.escape(right)}")


def remove_brackets(text: str, left: str, right: str) -> str:
    """Drop every ``left ... right`` annotation from ``text``."""

    return _bracket_pattern(left, right).sub("", text).strip()


def remove_exclamation_mark(text: str) -> str:
    """Strip the leading unverified marker, if any."""

    if text.startswith(UNVERIFIED_MARKER):
        return text[len(UNVERIFIED_MARKER):]
    return text


def is_verified(text: str) -> bool:
    return not text.startswith(UNVERIFIED_MARKER)


def split_words(text: str) -> List[str]:
    """Split a field into synonyms; ``;`` wins over ``,`` when present."""

    if ";" in text:
        return text.split(";")
    return text.split(",")


def convert_cases(text: str) -> str:
    """Replace numeric case references such as ``(+2)`` with case names."""

    return _CASE_PATTERN.sub(lambda match: "+" + _CASE_NAMES[match.group(1)], text)


__all__ = [
    "UNVERIFIED_MARKER",
    "convert_cases",
    "is_verified",
    "remove_brackets",
    "remove_exclamation_mark",
    "split_words",
]
