#!/usr/bin/env python3
"""
markov-namegen - Markov Chain Name Generator
============================================

Generates names that statistically resemble a training corpus, using
order-N Markov chains over characters or vowel/consonant clusters.

Quick Start
-----------
    from markov_namegen import CharacterChainGenerator

    dwarves = ['dopey', 'sneezy', 'bashful', 'sleepy', 'happy', 'grumpy', 'doc']
    namegen = CharacterChainGenerator.builder().train(dwarves).build()
    namegen.generate_one()

    # Cluster chain with a length filter and reproducible output
    from markov_namegen import ClusterChainGenerator, default_corpus

    namegen = (ClusterChainGenerator.builder()
               .with_order(3)
               .with_prior(0.0005)
               .with_pattern('^[a-z]{4,8}$')
               .with_seed(123)
               .train(default_corpus())
               .build())
    namegen.generate(10)

Modules
-------
    markov_namegen.generator - Character and cluster chain generators
    markov_namegen.builder   - Fluent configuration and training
    markov_namegen.chain     - Multi-order weighted Markov chain
    markov_namegen.clusters  - Vowel/consonant segmentation
    markov_namegen.corpus    - Corpus files and the bundled Roman names

CLI Usage
---------
    python -m markov_namegen generate -n 10
    python -m markov_namegen generate --mode cluster --pattern '^[a-z]{4,8}$'
"""

__version__ = "0.4.0"

from .errors import (
    NameGenError,
    ConfigurationError,
    PatternCompilationError,
    UndefinedContextError,
    PatternUnsatisfiableError,
)
from .chain import MarkovModel, ChainTrainer
from .vowels import is_romance_vowel, RomanceVowels
from .clusters import clusterize
from .preprocess import SENTINEL, SymbolMode, preprocess
from .rng import TrueRandom
from .generator import (
    RandomTextGenerator,
    ChainGenerator,
    CharacterChainGenerator,
    ClusterChainGenerator,
)
from .builder import (
    GeneratorConfig,
    CharacterChainGeneratorBuilder,
    ClusterChainGeneratorBuilder,
)
from .corpus import read_corpus, default_corpus

__all__ = [
    '__version__',
    # Errors
    'NameGenError',
    'ConfigurationError',
    'PatternCompilationError',
    'UndefinedContextError',
    'PatternUnsatisfiableError',
    # Chain engine
    'MarkovModel',
    'ChainTrainer',
    # Preprocessing
    'is_romance_vowel',
    'RomanceVowels',
    'clusterize',
    'SENTINEL',
    'SymbolMode',
    'preprocess',
    'TrueRandom',
    # Generators
    'RandomTextGenerator',
    'ChainGenerator',
    'CharacterChainGenerator',
    'ClusterChainGenerator',
    'GeneratorConfig',
    'CharacterChainGeneratorBuilder',
    'ClusterChainGeneratorBuilder',
    # Corpus
    'read_corpus',
    'default_corpus',
]
