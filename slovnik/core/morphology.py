"""Inflected word forms appended to the Interslavic search tokens."""

from __future__ import annotations

from typing import List, Protocol, Sequence

from . import word_details


class MorphologyProvider(Protocol):
    """Inflection tables, one method per declinable part of speech."""

    def conjugate_verb(self, word: str, addition: str) -> Sequence[str]:
        ...

    def decline_adjective(self, word: str) -> Sequence[str]:
        ...

    def decline_noun(
        self,
        word: str,
        addition: str,
        gender: str,
        animated: bool,
        plural: bool,
        singular: bool,
        indeclinable: bool,
    ) -> Sequence[str]:
        ...

    def decline_pronoun(self, word: str, pronoun_type: str) -> Sequence[str]:
        ...

    def decline_numeral(self, word: str, numeral_type: str) -> Sequence[str]:
        ...


class NullMorphologyProvider:
    """Provider that knows no inflections; only dictionary forms get indexed."""

    def conjugate_verb(self, word: str, addition: str) -> Sequence[str]:
        return ()

    def decline_adjective(self, word: str) -> Sequence[str]:
        return ()

    def decline_noun(
        self,
        word: str,
        addition: str,
        gender: str,
        animated: bool,
        plural: bool,
        singular: bool,
        indeclinable: bool,
    ) -> Sequence[str]:
        return ()

    def decline_pronoun(self, word: str, pronoun_type: str) -> Sequence[str]:
        return ()

    def decline_numeral(self, word: str, numeral_type: str) -> Sequence[str]:
        return ()


def _unique(items: Sequence[str]) -> List[str]:
    return list(dict.fromkeys(items))


def expand_word_forms(
    headword: str,
    addition: str,
    details: str,
    provider: MorphologyProvider,
) -> List[str]:
    """Return the deduplicated inflections of every comma-separated headword."""

    pos = word_details.get_part_of_speech(details)
    forms: List[str] = []
    for element in headword.split(","):
        element = element.strip()
        if pos == "verb":
            forms.extend(provider.conjugate_verb(element, addition))
        elif pos == "adjective":
            forms.extend(provider.decline_adjective(element))
        elif pos == "noun":
            animated = word_details.is_animated(details)
            plural = word_details.is_plural(details)
            singular = word_details.is_singular(details)
            indeclinable = word_details.is_indeclinable(details)
            # m./f. nouns decline in both genders
            for gender in word_details.get_genders(details):
                forms.extend(
                    provider.decline_noun(
                        element, addition, gender, animated, plural, singular, indeclinable
                    )
                )
        elif pos == "pronoun":
            forms.extend(provider.decline_pronoun(element, word_details.get_pronoun_type(details)))
        elif pos == "numeral":
            forms.extend(provider.decline_numeral(element, word_details.get_numeral_type(details)))
    return _unique(forms)


__all__ = ["MorphologyProvider", "NullMorphologyProvider", "expand_word_forms"]
