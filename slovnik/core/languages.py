"""Supported language keys and their search normalization strategies."""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Dict, Union

from .scripts import (
    RenderStyle,
    filter_latin,
    get_latin,
    normalize,
    sr_gajevica_to_vukovica,
)


class LanguageKey(str, Enum):
    """Every key the token index may hold.

    ``ISV_SRC`` is not a header field: it carries the Interslavic tokens in
    etymological orthography, kept apart from the normalized ``ISV`` tokens.
    """

    ISV = "isv"
    ISV_SRC = "isv-src"
    EN = "en"
    RU = "ru"
    BE = "be"
    UK = "uk"
    PL = "pl"
    CS = "cs"
    SK = "sk"
    BG = "bg"
    MK = "mk"
    SR = "sr"
    HR = "hr"
    SL = "sl"
    DE = "de"


LanguageLike = Union[LanguageKey, str]
Normalizer = Callable[[str], str]

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")


def resolve_language(value: LanguageLike) -> LanguageKey:
    return value if isinstance(value, LanguageKey) else LanguageKey(str(value))


def _base_prepare(text: str) -> str:
    lowered = text.lower().replace(" ", "").replace(",", "")
    return _COMBINING_MARKS.sub("", lowered)


def isv_to_eng_latin(text: str) -> str:
    """Reduce Interslavic text to plain ASCII-like Latin for fuzzy matching."""

    return normalize(get_latin(text, RenderStyle.STANDARD)).replace("y", "i")


def _identity(text: str) -> str:
    return text


def _russian(text: str) -> str:
    return text.replace("ё", "е")


_TOKEN_STRATEGIES: Dict[LanguageKey, Normalizer] = {
    LanguageKey.ISV: isv_to_eng_latin,
    LanguageKey.ISV_SRC: _identity,
    LanguageKey.EN: _identity,
    LanguageKey.RU: _russian,
    LanguageKey.BE: _identity,
    LanguageKey.UK: _identity,
    LanguageKey.PL: filter_latin,
    LanguageKey.CS: filter_latin,
    LanguageKey.SK: filter_latin,
    LanguageKey.BG: _identity,
    LanguageKey.MK: _identity,
    LanguageKey.SR: _identity,
    LanguageKey.HR: filter_latin,
    LanguageKey.SL: filter_latin,
    LanguageKey.DE: filter_latin,
}

# Serbian entries are stored in Cyrillic, but users often type Latin.
_QUERY_STRATEGIES: Dict[LanguageKey, Normalizer] = {
    **_TOKEN_STRATEGIES,
    LanguageKey.SR: sr_gajevica_to_vukovica,
}

_missing = set(LanguageKey) - set(_TOKEN_STRATEGIES)
if _missing:  # pragma: no cover - guards edits to the enum
    raise RuntimeError(f"No normalization strategy for {sorted(key.value for key in _missing)}")


def prepare_token(language: LanguageLike, text: str) -> str:
    """Normalize an indexed token for ``language``."""

    return _TOKEN_STRATEGIES[resolve_language(language)](_base_prepare(text))


def prepare_query(language: LanguageLike, text: str) -> str:
    """Normalize user input for comparison against ``language`` tokens."""

    return _QUERY_STRATEGIES[resolve_language(language)](_base_prepare(text))


__all__ = [
    "LanguageKey",
    "isv_to_eng_latin",
    "prepare_query",
    "prepare_token",
    "resolve_language",
]
