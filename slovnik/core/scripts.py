"""Script conversion for Interslavic text and the related search helpers.

Interslavic is written in Latin, Cyrillic and Glagolitic. The dictionary
stores headwords in the etymological Latin alphabet; every rendering goes
through :func:`get_latin` first and is converted from there.
"""

from __future__ import annotations

import re
import unicodedata
from enum import Enum
from typing import Dict, Tuple, Union

from unidecode import unidecode


class RenderStyle(str, Enum):
    """Orthographic convention used to render or compare Interslavic text."""

    ETYMOLOGICAL = "2"
    STANDARD = "3"
    SOUTHERN = "J"

    @property
    def supports_folding(self) -> bool:
        return self in (RenderStyle.ETYMOLOGICAL, RenderStyle.STANDARD)


StyleLike = Union[RenderStyle, str]
_Table = Tuple[re.Pattern, Dict[str, str]]

_CYRILLIC_PATTERN = re.compile("[\u0400-\u04ff]")


def _compile(table: Dict[str, str]) -> _Table:
    keys = sorted(table, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(key) for key in keys), re.IGNORECASE)
    return pattern, table


def _transliterate(text: str, compiled: _Table) -> str:
    pattern, table = compiled

    def _replace(match: re.Match) -> str:
        found = match.group(0)
        value = table.get(found.lower(), found)
        if found[:1].isupper():
            return value[:1].upper() + value[1:]
        return value

    return pattern.sub(_replace, text)


_CYRILLIC_TO_LATIN = _compile(
    {
        "а": "a", "б": "b", "в": "v", "г": "g", "ґ": "g", "д": "d", "е": "e",
        "є": "ě", "ж": "ž", "з": "z", "и": "i", "і": "i", "ї": "ji", "ј": "j",
        "й": "j", "к": "k", "л": "l", "љ": "lj", "м": "m", "н": "n", "њ": "nj",
        "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u", "ў": "u",
        "ф": "f", "х": "h", "ц": "c", "ч": "č", "ш": "š", "щ": "šč", "ъ": "",
        "ы": "y", "ь": "", "э": "e", "ю": "ju", "я": "ja", "ё": "jo", "ђ": "đ",
        "ћ": "ć", "џ": "dž", "ѣ": "ě", "ѧ": "ę", "ѫ": "ų", "ѕ": "dz",
    }
)

# Etymological letters collapse onto the standard alphabet.
_ETYMOLOGICAL_TO_STANDARD = {
    "å": "a", "ę": "e", "ų": "u", "ò": "o", "ŕ": "r", "ľ": "l", "ń": "n",
    "ť": "t", "ď": "d", "ś": "s", "ź": "z", "đ": "dž", "ć": "č",
}
_STANDARD = _compile(_ETYMOLOGICAL_TO_STANDARD)
_SOUTHERN = _compile({"ě": "e", "y": "i"})

_LATIN_TO_CYRILLIC = _compile(
    {
        "a": "а", "b": "б", "c": "ц", "č": "ч", "ć": "ћ", "d": "д", "dž": "џ",
        "đ": "ђ", "e": "е", "ě": "є", "f": "ф", "g": "г", "h": "х", "i": "и",
        "j": "ј", "k": "к", "l": "л", "lj": "љ", "m": "м", "n": "н", "nj": "њ",
        "o": "о", "p": "п", "r": "р", "s": "с", "š": "ш", "t": "т", "u": "у",
        "v": "в", "y": "ы", "z": "з", "ž": "ж", "å": "а", "ę": "ѧ", "ų": "ѫ",
        "ò": "о", "ŕ": "р", "ľ": "љ", "ń": "њ", "ť": "т", "ď": "д", "ś": "с",
        "ź": "з",
    }
)

_LATIN_TO_GLAGOLITIC = _compile(
    {
        "a": "ⰰ", "b": "ⰱ", "v": "ⰲ", "g": "ⰳ", "d": "ⰴ",
        "e": "ⰵ", "ž": "ⰶ", "dz": "ⰷ", "z": "ⰸ", "i": "ⰹ",
        "j": "ⰻ", "đ": "ⰼ", "ć": "ⰼ", "k": "ⰽ", "l": "ⰾ",
        "m": "ⰿ", "n": "ⱀ", "o": "ⱁ", "p": "ⱂ", "r": "ⱃ",
        "s": "ⱄ", "t": "ⱅ", "u": "ⱆ", "f": "ⱇ", "h": "ⱈ",
        "c": "ⱌ", "č": "ⱍ", "š": "ⱎ", "y": "ⱏⰹ",
        "ě": "ⱑ", "ę": "ⱔ", "ų": "ⱘ", "dž": "ⰴⰶ",
        "å": "ⰰ", "ò": "ⱁ", "ŕ": "ⱃ", "ľ": "ⰾ", "ń": "ⱀ",
        "ť": "ⱅ", "ď": "ⰴ", "ś": "ⱄ", "ź": "ⰸ",
    }
)

_LATIN_TO_IPA = _compile(
    {
        "a": "a", "b": "b", "c": "t͡s", "č": "t͡ʃ", "ć": "t͡ɕ", "d": "d",
        "dž": "d͡ʒ", "đ": "d͡ʑ", "e": "ɛ", "ě": "jɛ", "f": "f", "g": "ɡ",
        "h": "x", "i": "i", "j": "j", "k": "k", "l": "l", "lj": "ʎ", "m": "m",
        "n": "n", "nj": "ɲ", "o": "ɔ", "p": "p", "r": "r", "s": "s", "š": "ʃ",
        "t": "t", "u": "u", "v": "v", "y": "ɪ", "z": "z", "ž": "ʒ", "å": "ɒ",
        "ę": "æ", "ų": "ʊ", "ò": "ɔ", "ŕ": "r̩", "ľ": "ʎ", "ń": "ɲ", "ť": "c",
        "ď": "ɟ", "ś": "ɕ", "ź": "ʑ",
    }
)

_SERBIAN_LATIN_TO_CYRILLIC = _compile(
    {
        "a": "а", "b": "б", "c": "ц", "č": "ч", "ć": "ћ", "d": "д", "dž": "џ",
        "đ": "ђ", "e": "е", "f": "ф", "g": "г", "h": "х", "i": "и", "j": "ј",
        "k": "к", "l": "л", "lj": "љ", "m": "м", "n": "н", "nj": "њ", "o": "о",
        "p": "п", "r": "р", "s": "с", "š": "ш", "t": "т", "u": "у", "v": "в",
        "z": "з", "ž": "ж",
    }
)


def resolve_style(style: StyleLike) -> RenderStyle:
    """Return ``style`` as a :class:`RenderStyle`; unknown values raise ``ValueError``."""

    return style if isinstance(style, RenderStyle) else RenderStyle(str(style))


def get_latin(text: str, style: StyleLike) -> str:
    """Render Interslavic ``text`` (Latin or Cyrillic) in Latin under ``style``."""

    resolved = resolve_style(style)
    if _CYRILLIC_PATTERN.search(text):
        text = _transliterate(text, _CYRILLIC_TO_LATIN)
    if resolved is RenderStyle.ETYMOLOGICAL:
        return text
    text = _transliterate(text, _STANDARD)
    if resolved is RenderStyle.SOUTHERN:
        text = _transliterate(text, _SOUTHERN)
    return text


def get_cyrillic(text: str, style: StyleLike) -> str:
    return _transliterate(get_latin(text, style), _LATIN_TO_CYRILLIC)


def latin_to_gla(text: str) -> str:
    return _transliterate(text, _LATIN_TO_GLAGOLITIC)


def latin_to_ipa(text: str) -> str:
    return _transliterate(text.lower(), _LATIN_TO_IPA)


def sr_gajevica_to_vukovica(text: str) -> str:
    """Convert Serbian Latin (Gajevica) to Serbian Cyrillic (Vukovica)."""

    return _transliterate(text, _SERBIAN_LATIN_TO_CYRILLIC)


def filter_latin(text: str) -> str:
    """Fold national Latin letters (``ł``, ``ř``, ``ß`` ...) onto plain ASCII."""

    return unidecode(text)


def normalize(text: str) -> str:
    """Strip combining marks after canonical decomposition."""

    decomposed = unicodedata.normalize("NFD", text)
    return "".join(char for char in decomposed if unicodedata.category(char) != "Mn")


__all__ = [
    "RenderStyle",
    "filter_latin",
    "get_cyrillic",
    "get_latin",
    "latin_to_gla",
    "latin_to_ipa",
    "normalize",
    "resolve_style",
    "sr_gajevica_to_vukovica",
]
