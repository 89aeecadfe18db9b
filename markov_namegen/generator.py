#!/usr/bin/env python3
"""
Markov Chain Name Generators
============================
Generate names that sort-of resemble a training corpus.

Two flavours share one algorithm and differ only in what a chain symbol is:

- CharacterChainGenerator: one symbol per letter
- ClusterChainGenerator: one symbol per vowel or consonant run
  ("foobar" -> f, oo, b, a, r), which keeps syllable shapes more intact

Create instances through the builder:

    names = ['augustus', 'tiberius', 'caligula', 'claudius', 'nero']
    namegen = (CharacterChainGenerator.builder()
               .with_order(2)
               .with_prior(0.007)
               .with_pattern('^[a-z]{4,8}$')
               .with_seed(123)
               .train(names)
               .build())
    namegen.generate_one()

Generation walks the chain from the start sentinel until the end sentinel
comes up. When a pattern is set, candidates that don't match are discarded
and the walk starts over. An impossible pattern (say, one requiring a letter
absent from the corpus) loops forever unless ``max_attempts`` is set.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from .chain import MarkovModel
from .errors import PatternUnsatisfiableError
from .preprocess import SENTINEL, SymbolMode
from .rng import default_source
from .settings import get_setting

logger = logging.getLogger(__name__)


class RandomTextGenerator(ABC):
    """Anything that can produce random text strings one at a time."""

    @abstractmethod
    def generate_one(self) -> str:
        """Produce a single string."""

    def generate(self, count: int) -> List[str]:
        """
        Produce ``count`` independent strings.

        Duplicates are possible; each entry is a separate ``generate_one()``.
        """
        if count < 0:
            raise ValueError(f"count must be zero or greater, got {count}")
        return [self.generate_one() for _ in range(count)]

    def __iter__(self) -> Iterator[str]:
        while True:
            yield self.generate_one()


class ChainGenerator(RandomTextGenerator):
    """
    Rejection-sampling walker over a trained :class:`MarkovModel`.

    Holds the model, the compiled acceptance pattern and its own random
    source. The model is never mutated, so generators built from one model
    are independent; a single generator is not safe to share across threads
    unless its random source is.
    """

    mode: SymbolMode = SymbolMode.CHARACTER
    DEFAULT_ORDER: int = get_setting('chain.default_order', 3)
    DEFAULT_PRIOR: Optional[float] = 0.005

    def __init__(self,
                 model: MarkovModel,
                 pattern: Optional[re.Pattern] = None,
                 rng=None,
                 max_attempts: Optional[int] = None):
        self._model = model
        self._pattern = pattern
        self._rng = rng if rng is not None else default_source()
        self._max_attempts = max_attempts

    @property
    def model(self) -> MarkovModel:
        return self._model

    @property
    def order(self) -> int:
        return self._model.order

    @property
    def pattern(self) -> Optional[str]:
        return self._pattern.pattern if self._pattern is not None else None

    @property
    def max_attempts(self) -> Optional[int]:
        return self._max_attempts

    def _generate_string(self) -> str:
        """One sentinel-to-sentinel walk, sentinels stripped."""
        symbols = [SENTINEL]
        while True:
            symbols.append(self._model.random_next(symbols, self._rng))
            if symbols[-1] == SENTINEL:
                break
        return ''.join(symbols[1:-1])

    def generate_one(self) -> str:
        """
        Generate one name, re-rolling until it matches the pattern (if any).

        Raises:
            UndefinedContextError: If the model was trained on nothing
            PatternUnsatisfiableError: If ``max_attempts`` candidates all failed
        """
        if self._pattern is None:
            return self._generate_string()

        attempts = 0
        while self._max_attempts is None or attempts < self._max_attempts:
            attempts += 1
            candidate = self._generate_string()
            if self._pattern.search(candidate):
                logger.debug(f"{type(self).__name__} generated '{candidate}' after {attempts} attempt(s)")
                return candidate
            logger.debug(
                f"{type(self).__name__} generated '{candidate}' which doesn't match "
                f"the regex pattern. Re-rolling!"
            )

        raise PatternUnsatisfiableError(self._pattern.pattern, attempts)

    def __repr__(self):
        return (
            f"{type(self).__name__}(order={self.order}, prior={self._model.prior}, "
            f"pattern={self.pattern!r}, contexts={self._model.context_count})"
        )


class CharacterChainGenerator(ChainGenerator):
    """Markov chain over single characters."""

    mode = SymbolMode.CHARACTER
    DEFAULT_PRIOR = get_setting('character.default_prior', 0.005)

    @classmethod
    def builder(cls):
        from .builder import CharacterChainGeneratorBuilder
        return CharacterChainGeneratorBuilder()


class ClusterChainGenerator(ChainGenerator):
    """
    Markov chain over vowel/consonant clusters.

    The cluster alphabet is much larger than the letter alphabet, so the
    default prior is smaller than the character generator's.
    """

    mode = SymbolMode.CLUSTER
    DEFAULT_PRIOR = get_setting('cluster.default_prior', 0.001)

    @classmethod
    def builder(cls):
        from .builder import ClusterChainGeneratorBuilder
        return ClusterChainGeneratorBuilder()
