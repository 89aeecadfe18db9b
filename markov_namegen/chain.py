#!/usr/bin/env python3
"""
Multi-Order Markov Chain
========================
Weighted Markov chain over arbitrary hashable symbols (characters or
clusters), used as the statistical engine behind every name generator.

Training records, for every position in a sequence, one observation for
each context length from 1 up to the model order:

    ['#', 'l', 'u', 'c', ...]   order 3, predicting 'c':
        ('u',)          -> 'c'
        ('l', 'u')      -> 'c'
        ('#', 'l', 'u') -> 'c'

Sampling uses the longest trailing context that has been observed, falling
back to shorter ones. Near the start of a sequence only short contexts exist.

Prior:
------
Observed transitions weigh 1.0 per occurrence and are never normalized. A
prior adds a flat weight for every symbol of the alphabet to whichever
context is sampled, so unseen transitions stay possible. A prior of 0.1 makes
an unseen transition as likely as one seen a tenth of a time; across a large
alphabet that adds up quickly, so 0.001-0.01 is a sensible range.
"""

import logging
import math
from collections import defaultdict, Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Hashable, Iterable, Mapping, Optional, Sequence, Tuple

from .errors import ConfigurationError, UndefinedContextError

logger = logging.getLogger(__name__)

Symbol = Hashable
Context = Tuple[Symbol, ...]


def validate_order(order: Any) -> int:
    """Return ``order`` if it is a positive int, else raise ConfigurationError."""
    if isinstance(order, bool) or not isinstance(order, int) or order <= 0:
        raise ConfigurationError(f"Order must be an integer greater than zero, got {order!r}")
    return order


def validate_prior(prior: Any) -> Optional[float]:
    """Return ``prior`` as a float (or None), rejecting negative and non-finite values."""
    if prior is None:
        return None
    if isinstance(prior, bool) or not isinstance(prior, (int, float)):
        raise ConfigurationError(f"Prior must be a number or None, got {prior!r}")
    if prior < 0 or not math.isfinite(prior):
        raise ConfigurationError(f"Prior must be a finite number, zero or greater, got {prior!r}")
    return float(prior)


# =============================================================================
# TRAINED MODEL
# =============================================================================

@dataclass(frozen=True)
class MarkovModel:
    """
    Read-only multi-order Markov chain.

    Built by :meth:`ChainTrainer.build`; never mutated afterwards, so one
    instance can be sampled from several generators or threads at once as
    long as each brings its own random source.
    """
    order: int
    prior: Optional[float]
    transitions: Mapping[Context, Mapping[Symbol, int]] = field(hash=False)
    alphabet: Tuple[Symbol, ...]
    _tables: Mapping[Context, Tuple[tuple, tuple]] = field(
        default_factory=dict, compare=False, repr=False
    )

    @property
    def context_count(self) -> int:
        return len(self.transitions)

    def _lookup(self, sequence: Sequence[Symbol]) -> Optional[Context]:
        """Longest trailing context of ``sequence`` with recorded successors."""
        for length in range(min(self.order, len(sequence)), 0, -1):
            context = tuple(sequence[-length:])
            if context in self.transitions:
                return context
        return None

    def _weights(self, context: Context) -> Tuple[tuple, tuple]:
        observed = self.transitions[context]
        if self.prior is None:
            return tuple(observed), tuple(float(c) for c in observed.values())
        return self.alphabet, tuple(observed.get(s, 0) + self.prior for s in self.alphabet)

    def successors(self, sequence: Sequence[Symbol]) -> Dict[Symbol, float]:
        """
        Successor weights used when sampling after ``sequence``.

        Raises:
            UndefinedContextError: If no trailing context was ever observed
        """
        context = self._lookup(sequence)
        if context is None:
            raise UndefinedContextError(sequence[-self.order:])
        symbols, weights = self._tables[context]
        return dict(zip(symbols, weights))

    def random_next(self, sequence: Sequence[Symbol], rng) -> Symbol:
        """
        Sample the next symbol after ``sequence``.

        Args:
            sequence: Symbols so far (only the last ``order`` matter)
            rng: Random source providing ``choices()``

        Raises:
            UndefinedContextError: If no trailing context was ever observed
        """
        context = self._lookup(sequence)
        if context is None:
            raise UndefinedContextError(sequence[-self.order:])
        symbols, weights = self._tables[context]
        return rng.choices(symbols, weights=weights)[0]


# =============================================================================
# TRAINER
# =============================================================================

class ChainTrainer:
    """Accumulates symbol sequences into transition counts."""

    def __init__(self, order: int = 3):
        self.order = validate_order(order)
        self.transitions = defaultdict(Counter)
        self._alphabet = {}
        self.sequences_seen = 0

    def train(self, sequences: Iterable[Sequence[Symbol]]) -> int:
        """
        Add sequences to the counts; repeated calls are cumulative.

        Returns:
            Number of sequences consumed by this call
        """
        consumed = 0
        for seq in sequences:
            consumed += 1
            for symbol in seq:
                self._alphabet.setdefault(symbol, None)
            for i in range(1, len(seq)):
                for length in range(1, min(self.order, i) + 1):
                    context = tuple(seq[i - length:i])
                    self.transitions[context][seq[i]] += 1

        self.sequences_seen += consumed
        return consumed

    def build(self, prior: Optional[float] = None) -> MarkovModel:
        """Freeze the counts into a :class:`MarkovModel`."""
        prior = validate_prior(prior)
        transitions = MappingProxyType({
            context: MappingProxyType(dict(counts))
            for context, counts in self.transitions.items()
        })
        alphabet = tuple(sorted(self._alphabet, key=str))

        model = MarkovModel(
            order=self.order,
            prior=prior,
            transitions=transitions,
            alphabet=alphabet,
        )
        tables = {context: model._weights(context) for context in transitions}
        object.__setattr__(model, '_tables', MappingProxyType(tables))

        logger.debug(
            f"Built order-{self.order} chain: {len(transitions)} contexts, "
            f"{len(alphabet)} symbols, {self.sequences_seen} sequences, prior={prior}"
        )
        return model
