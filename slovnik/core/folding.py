"""Session-scoped letter folding preferences for Interslavic search.

Every pair in :data:`REPLACEABLE_LETTERS` maps a letter onto a plainer
spelling. A pair the user has *activated* keeps its letter distinct: a query
containing the plain spelling no longer matches the marked letter. Inactive
pairs are folded whenever the folding-sensitive pass compares text.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Sequence, Tuple, Union

from .languages import LanguageKey, prepare_token
from .scripts import RenderStyle, StyleLike, resolve_style

LetterPair = Tuple[str, str]

REPLACEABLE_LETTERS: Tuple[LetterPair, ...] = (
    ("đ", "dž"),
    ("ć", "č"),
    ("ž", "z"),
    ("š", "s"),
    ("č", "c"),
    ("ě", "e"),
    ("y", "i"),
    ("å", "a"),
    ("ę", "e"),
    ("ų", "u"),
    ("ò", "o"),
    ("ŕ", "r"),
    ("ľ", "l"),
    ("ń", "n"),
    ("ť", "t"),
    ("ď", "d"),
    ("ś", "s"),
    ("ź", "z"),
)

# Letters the standard alphabet keeps; the rest always fold under it.
STANDARD_LETTERS = frozenset({"š", "ž", "č", "ě", "y"})


class FoldingConfiguration:
    """Ordered set of activated letter pairs owned by one engine."""

    def __init__(self, pairs: Iterable[Sequence[str]] = ()) -> None:
        self._pairs: List[LetterPair] = []
        self.set(pairs)

    @property
    def pairs(self) -> Tuple[LetterPair, ...]:
        return tuple(self._pairs)

    @property
    def sources(self) -> List[str]:
        return [source for source, _ in self._pairs]

    @property
    def targets(self) -> List[str]:
        return [target for _, target in self._pairs]

    def set(self, pairs: Union[Iterable[Sequence[str]], Mapping[str, Sequence[str]]]) -> None:
        """Replace the activated pairs wholesale.

        Accepts ``(source, target)`` pairs or the ``{"from": [...], "to": [...]}``
        shape produced by :meth:`as_dict`.
        """

        if isinstance(pairs, Mapping):
            pairs = zip(pairs["from"], pairs["to"])
        self._pairs = [(str(source), str(target)) for source, target in pairs]

    def toggle(self, letters: str) -> "FoldingConfiguration":
        """Flip every known letter in ``letters`` and return ``self``."""

        for letter in letters:
            for source, target in REPLACEABLE_LETTERS:
                if source != letter:
                    continue
                active = self.sources
                if source in active:
                    del self._pairs[active.index(source)]
                else:
                    self._pairs.append((source, target))
        return self

    def is_fully_active(self) -> bool:
        active = set(self.sources)
        return all(source in active for source, _ in REPLACEABLE_LETTERS)

    def has_target_in(self, text: str) -> bool:
        return any(target in text for target in self.targets)

    def apply(self, text: str, style: StyleLike) -> str:
        """Fold every inactive letter of ``text`` onto its plain spelling."""

        resolved = resolve_style(style)
        active = set(self.sources)
        text = prepare_token(LanguageKey.ISV_SRC, text)
        for source, target in REPLACEABLE_LETTERS:
            keep = source in active and not (
                resolved is RenderStyle.STANDARD and source not in STANDARD_LETTERS
            )
            if not keep:
                text = text.replace(source, target)
        return text

    def as_dict(self) -> Dict[str, List[str]]:
        return {"from": self.sources, "to": self.targets}

    def __repr__(self) -> str:
        return f"FoldingConfiguration({self._pairs!r})"


__all__ = [
    "FoldingConfiguration",
    "LetterPair",
    "REPLACEABLE_LETTERS",
    "STANDARD_LETTERS",
]
