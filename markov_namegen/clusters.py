"""
Vowel/Consonant Clustering
==========================
Splits a word into maximal runs of vowels and consonants, e.g.
``"foobar" -> ["f", "oo", "b", "a", "r"]``. Cluster-level chains use these
runs as their symbols, so they learn syllable-ish structure rather than
letter-by-letter transitions.
"""

from typing import List

from .vowels import VowelClassifier, is_romance_vowel


def clusterize(word: str, is_vowel: VowelClassifier = is_romance_vowel) -> List[str]:
    """
    Segment ``word`` into alternating vowel and consonant clusters.

    Args:
        word: Non-empty (normally lowercased) string
        is_vowel: Character classifier; romance vowels by default

    Returns:
        Clusters in order; joining them gives back ``word``

    Raises:
        ValueError: If ``word`` is empty
    """
    if not word:
        raise ValueError("Cannot clusterize an empty string")

    clusters = []
    current = word[0]
    vowel_run = is_vowel(word[0])

    for ch in word[1:]:
        if is_vowel(ch) == vowel_run:
            current += ch
        else:
            clusters.append(current)
            current = ch
            vowel_run = not vowel_run

    clusters.append(current)
    return clusters
