#!/usr/bin/env python3
"""
Generator Builders
==================
Fluent configuration and training front-end for the chain generators.

Settings live in an immutable :class:`GeneratorConfig`; every ``with_*``
call validates and swaps in a new config, so a bad order or prior fails at
the setter rather than during training or generation.

Lifecycle:
    with_*()  ->  train() [repeatable, cumulative]  ->  build() [once]

Order is fixed by the first ``train()`` call, since counts already gathered
can't be re-keyed to a different context length. The pattern is compiled
only in ``build()``.
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import Any, Iterable, Optional, Type

from .chain import ChainTrainer, validate_order, validate_prior
from .errors import ConfigurationError, PatternCompilationError
from .generator import ChainGenerator, CharacterChainGenerator, ClusterChainGenerator
from .preprocess import SymbolMode, preprocess
from .rng import is_random_source, seeded
from .settings import get_setting
from .vowels import VowelClassifier, make_classifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorConfig:
    """Validated generator settings."""
    order: int = 3
    prior: Optional[float] = None
    pattern: Optional[str] = None
    rng: Any = None               # None -> fresh non-deterministic source at build
    max_attempts: Optional[int] = None  # None -> re-roll forever
    extra_vowels: str = ''        # cluster mode only

    def __post_init__(self):
        validate_order(self.order)
        object.__setattr__(self, 'prior', validate_prior(self.prior))
        if self.pattern is not None and not isinstance(self.pattern, str):
            raise ConfigurationError(f"Pattern must be a string, got {type(self.pattern).__name__}")
        if self.rng is not None and not is_random_source(self.rng):
            raise ConfigurationError(f"Random source must provide choices(), got {self.rng!r}")
        if self.max_attempts is not None:
            if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int) \
                    or self.max_attempts < 1:
                raise ConfigurationError(
                    f"max_attempts must be a positive integer or None, got {self.max_attempts!r}"
                )
        if not isinstance(self.extra_vowels, str):
            raise ConfigurationError("extra_vowels must be a string of characters")

    def compile_pattern(self) -> Optional[re.Pattern]:
        if self.pattern is None:
            return None
        try:
            return re.compile(self.pattern)
        except re.error as e:
            raise PatternCompilationError(self.pattern, str(e)) from e


class ChainGeneratorBuilder:
    """Shared builder logic; subclasses pick the generator class and mode."""

    generator_class: Type[ChainGenerator] = ChainGenerator

    def __init__(self, config: GeneratorConfig = None):
        if type(self) is ChainGeneratorBuilder:
            raise TypeError(
                "ChainGeneratorBuilder is abstract; use CharacterChainGeneratorBuilder "
                "or ClusterChainGeneratorBuilder"
            )
        self._config = config if config is not None else self.default_config()
        self._trainer: Optional[ChainTrainer] = None
        self._built = False

    @classmethod
    def default_config(cls) -> GeneratorConfig:
        """Defaults from ``configs/app.yaml`` and the generator class."""
        return GeneratorConfig(
            order=cls.generator_class.DEFAULT_ORDER,
            prior=cls.generator_class.DEFAULT_PRIOR,
            max_attempts=get_setting('generation.max_attempts'),
        )

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def mode(self) -> SymbolMode:
        return self.generator_class.mode

    @property
    def is_trained(self) -> bool:
        return self._trainer is not None

    def _ensure_open(self):
        if self._built:
            raise ConfigurationError("Builder was already consumed by build()")

    def _update(self, **changes):
        self._ensure_open()
        self._config = replace(self._config, **changes)
        return self

    # -------------------------------------------------------------------------
    # Settings
    # -------------------------------------------------------------------------

    def with_order(self, order: int):
        """
        Context length for the chain. Must be set before ``train()``.

        1-3 is the useful range; higher orders copy the corpus more closely
        and use more memory.
        """
        validate_order(order)
        if self.is_trained:
            raise ConfigurationError(
                f"Order is fixed at {self._config.order} once training has started"
            )
        return self._update(order=order)

    def with_prior(self, prior: float):
        """Weight of unobserved transitions; larger means stranger names."""
        return self._update(prior=prior)

    def without_prior(self):
        """Only ever produce transitions seen in training."""
        return self._update(prior=None)

    def with_pattern(self, pattern: str):
        """Only accept names matching this regex (searched, not full-matched)."""
        return self._update(pattern=pattern)

    def with_random_source(self, rng):
        """Use ``rng`` (e.g. ``random.Random(7)``) for all sampling."""
        return self._update(rng=rng)

    def with_seed(self, seed: int):
        """Shorthand for a seeded deterministic random source."""
        return self._update(rng=seeded(seed))

    def with_max_attempts(self, max_attempts: Optional[int]):
        """Give up after this many rejected candidates; None retries forever."""
        return self._update(max_attempts=max_attempts)

    # -------------------------------------------------------------------------
    # Training & build
    # -------------------------------------------------------------------------

    def _vowel_classifier(self) -> VowelClassifier:
        return make_classifier(self._config.extra_vowels)

    def train(self, strings: Iterable[str]):
        """
        Feed a corpus of names. Calls accumulate.

        Args:
            strings: Any iterable of strings, e.g. an open file's lines
        """
        self._ensure_open()
        if isinstance(strings, str):
            raise TypeError("train() expects an iterable of strings, not a single string")

        if self._trainer is None:
            self._trainer = ChainTrainer(order=self._config.order)

        sequences = preprocess(strings, self.mode, self._vowel_classifier())
        consumed = self._trainer.train(sequences)
        logger.debug(
            f"{type(self).__name__}: trained on {consumed} {self.mode.value} sequences "
            f"({self._trainer.sequences_seen} total)"
        )
        return self

    def build(self) -> ChainGenerator:
        """
        Freeze the model and return the generator. The builder is spent after.

        Raises:
            PatternCompilationError: If the pattern is not a valid regex
        """
        self._ensure_open()
        config = self._config
        pattern = config.compile_pattern()

        trainer = self._trainer or ChainTrainer(order=config.order)
        if trainer.sequences_seen == 0:
            logger.warning(f"{type(self).__name__}: building from an empty corpus; generation will fail")
        model = trainer.build(prior=config.prior)

        self._built = True
        return self.generator_class(
            model,
            pattern=pattern,
            rng=config.rng,
            max_attempts=config.max_attempts,
        )


class CharacterChainGeneratorBuilder(ChainGeneratorBuilder):
    """Builder for :class:`CharacterChainGenerator`."""

    generator_class = CharacterChainGenerator


class ClusterChainGeneratorBuilder(ChainGeneratorBuilder):
    """
    Builder for :class:`ClusterChainGenerator`.

    Vowels are the romance set (accented forms included); ``y`` and ``w``
    count as consonants unless added with :meth:`with_extra_vowels`.
    """

    generator_class = ClusterChainGenerator

    @classmethod
    def default_config(cls) -> GeneratorConfig:
        return replace(
            super().default_config(),
            extra_vowels=get_setting('cluster.extra_vowels', '') or '',
        )

    def with_extra_vowels(self, chars: str):
        """Treat ``chars`` as vowels too. Must be set before ``train()``."""
        if self.is_trained:
            raise ConfigurationError("Vowel set is fixed once training has started")
        return self._update(extra_vowels=chars)
