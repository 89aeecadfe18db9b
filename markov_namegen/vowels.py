"""
Vowel classification for cluster segmentation.

Only romance-language vowels count by default: a, e, i, o, u and their
accented forms, plus the Dutch ``ĳ`` ligature. ``y`` and ``w`` are
consonants, as are ``æ``, ``œ`` and ``ø``.
"""

import unicodedata
from functools import lru_cache
from typing import Callable, Iterable

VowelClassifier = Callable[[str], bool]

ROMANCE_VOWELS = frozenset('aeiou')
LIGATURE_VOWELS = frozenset('ĳĲ')


@lru_cache(maxsize=512)
def _base_letter(ch: str) -> str:
    # NFD splits 'é' into 'e' + combining accent
    return unicodedata.normalize('NFD', ch)[0].lower()


def is_romance_vowel(ch: str) -> bool:
    """True if ``ch`` is a romance-language vowel, accents included."""
    if not ch:
        return False
    if ch in LIGATURE_VOWELS:
        return True
    return _base_letter(ch) in ROMANCE_VOWELS


class RomanceVowels:
    """
    Romance vowel classifier extended with extra characters.

    >>> is_vowel = RomanceVowels(extra='y')
    >>> is_vowel('y'), is_vowel('é'), is_vowel('b')
    (True, True, False)
    """

    def __init__(self, extra: Iterable[str] = ''):
        self.extra = frozenset(c.lower() for c in extra)

    def __call__(self, ch: str) -> bool:
        return ch.lower() in self.extra or is_romance_vowel(ch)

    def __repr__(self):
        return f"RomanceVowels(extra={''.join(sorted(self.extra))!r})"


def make_classifier(extra: Iterable[str] = '') -> VowelClassifier:
    """Plain romance classifier when there are no extras, extended otherwise."""
    extra = ''.join(extra or '')
    if not extra:
        return is_romance_vowel
    return RomanceVowels(extra)
