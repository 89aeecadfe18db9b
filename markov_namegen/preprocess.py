"""
Corpus preprocessing: raw strings to sentinel-bracketed symbol sequences.

Each training string is lowercased, stripped of surrounding whitespace and of
any sentinel characters, split into symbols (characters or clusters) and
wrapped in the sentinel, e.g. ``"Foobar" -> ['#', 'f', 'oo', 'b', 'a', 'r', '#']``
in cluster mode.
"""

from enum import Enum
from typing import Iterable, Iterator, List

from .clusters import clusterize
from .settings import get_setting
from .vowels import VowelClassifier, is_romance_vowel

SENTINEL = get_setting('chain.sentinel', '#')


class SymbolMode(Enum):
    """What a single chain symbol is."""
    CHARACTER = 'character'
    CLUSTER = 'cluster'


def normalize(raw: str) -> str:
    """Lowercase, trim, and drop sentinel characters."""
    return raw.lower().strip().replace(SENTINEL, '')


def to_symbols(word: str, mode: SymbolMode,
               is_vowel: VowelClassifier = is_romance_vowel) -> List[str]:
    """Split an already-normalized word into symbols, sentinels included."""
    if not word:
        return [SENTINEL, SENTINEL]
    if mode is SymbolMode.CLUSTER:
        body = clusterize(word, is_vowel)
    else:
        body = list(word)
    return [SENTINEL, *body, SENTINEL]


def preprocess(strings: Iterable[str], mode: SymbolMode = SymbolMode.CHARACTER,
               is_vowel: VowelClassifier = is_romance_vowel) -> Iterator[List[str]]:
    """Lazily turn raw corpus strings into training sequences."""
    mode = SymbolMode(mode)
    for raw in strings:
        yield to_symbols(normalize(raw), mode, is_vowel)
