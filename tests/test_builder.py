"""
Tests for Generator Builders
============================
Tests for GeneratorConfig validation and the builder lifecycle:
fail-fast setters, order locking, pattern compilation and single use.
"""

import random
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from markov_namegen import (
    CharacterChainGenerator,
    ClusterChainGenerator,
    CharacterChainGeneratorBuilder,
    ChainGenerator,
    ClusterChainGeneratorBuilder,
    GeneratorConfig,
    ConfigurationError,
    PatternCompilationError,
    TrueRandom,
)
from markov_namegen.builder import ChainGeneratorBuilder

DWARVES = ['dopey', 'sneezy', 'bashful', 'sleepy', 'happy', 'grumpy', 'doc']


class TestGeneratorConfig:
    """Tests for GeneratorConfig validation."""

    def test_defaults(self):
        """Test a bare config is valid."""
        config = GeneratorConfig()
        assert config.order == 3
        assert config.pattern is None
        assert config.max_attempts is None

    def test_rejects_bad_order(self):
        """Test order must be positive."""
        with pytest.raises(ConfigurationError):
            GeneratorConfig(order=0)

    def test_rejects_negative_prior(self):
        """Test prior must be non-negative."""
        with pytest.raises(ConfigurationError):
            GeneratorConfig(prior=-0.5)

    def test_prior_coerced_to_float(self):
        """Test integer priors become floats."""
        assert GeneratorConfig(prior=1).prior == 1.0

    def test_rejects_bad_max_attempts(self):
        """Test max_attempts must be a positive int."""
        for value in (0, -3, 2.5, True):
            with pytest.raises(ConfigurationError):
                GeneratorConfig(max_attempts=value)

    def test_rejects_non_string_pattern(self):
        """Test pattern must be a string."""
        with pytest.raises(ConfigurationError):
            GeneratorConfig(pattern=42)

    def test_rejects_bad_random_source(self):
        """Test the random source must provide choices()."""
        with pytest.raises(ConfigurationError):
            GeneratorConfig(rng=object())

    def test_compile_pattern(self):
        """Test a valid pattern compiles."""
        assert GeneratorConfig(pattern='^a').compile_pattern().search('abc')
        assert GeneratorConfig().compile_pattern() is None

    def test_compile_bad_pattern(self):
        """Test an invalid pattern raises PatternCompilationError."""
        with pytest.raises(PatternCompilationError) as exc:
            GeneratorConfig(pattern='[a-').compile_pattern()
        assert exc.value.pattern == '[a-'


class TestBuilderDefaults:
    """Tests for per-variant defaults."""

    def test_character_defaults(self):
        """Test character builder defaults."""
        config = CharacterChainGenerator.builder().config
        assert config.order == 3
        assert config.prior == pytest.approx(0.005)

    def test_cluster_defaults(self):
        """Test cluster builder defaults to a smaller prior."""
        config = ClusterChainGenerator.builder().config
        assert config.order == 3
        assert config.prior == pytest.approx(0.001)
        assert config.extra_vowels == ''

    def test_factory_types(self):
        """Test builder() factories return the matching builder."""
        assert isinstance(CharacterChainGenerator.builder(), CharacterChainGeneratorBuilder)
        assert isinstance(ClusterChainGenerator.builder(), ClusterChainGeneratorBuilder)

    def test_build_types(self):
        """Test build() returns the matching generator."""
        assert isinstance(CharacterChainGeneratorBuilder().train(DWARVES).build(), CharacterChainGenerator)
        assert isinstance(ClusterChainGeneratorBuilder().train(DWARVES).build(), ClusterChainGenerator)

    def test_base_builder_is_abstract(self):
        """Test only the character and cluster builders can be created."""
        with pytest.raises(TypeError):
            ChainGeneratorBuilder()

    def test_base_generator_has_no_builder(self):
        """Test the builder factory exists only on the concrete generators."""
        assert not hasattr(ChainGenerator, 'builder')


class TestBuilderSetters:
    """Setters validate immediately and chain."""

    @pytest.fixture
    def builder(self):
        return CharacterChainGenerator.builder()

    def test_chaining(self, builder):
        """Test every setter returns the builder."""
        result = (builder.with_order(2)
                  .with_prior(0.007)
                  .with_pattern('foo')
                  .with_seed(1)
                  .with_max_attempts(10)
                  .train(DWARVES))
        assert result is builder

    def test_order_zero_fails_at_setter(self, builder):
        """Test a zero order is rejected before training."""
        with pytest.raises(ConfigurationError, match="greater than zero"):
            builder.with_order(0)

    def test_negative_order_fails(self, builder):
        """Test a negative order is rejected."""
        with pytest.raises(ValueError):
            builder.with_order(-2)

    def test_negative_prior_fails_at_setter(self, builder):
        """Test a negative prior is rejected before training."""
        with pytest.raises(ConfigurationError):
            builder.with_prior(-0.1)

    def test_infinite_prior_fails_at_setter(self, builder):
        """Test an infinite prior is refused before training or generation."""
        with pytest.raises(ConfigurationError):
            builder.with_prior(float('inf'))

    def test_failed_setter_keeps_config(self, builder):
        """Test a rejected value leaves the previous config in place."""
        builder.with_order(2)
        with pytest.raises(ConfigurationError):
            builder.with_order(0)
        assert builder.config.order == 2

    def test_order_applies_to_model(self, builder):
        """Test the chosen order reaches the model."""
        namegen = builder.with_order(2).train(DWARVES).build()
        assert namegen.order == 2
        assert max(len(context) for context in namegen.model.transitions) == 2

    def test_prior_applies_to_model(self, builder):
        """Test the chosen prior reaches the model."""
        assert builder.with_prior(0.01).train(DWARVES).build().model.prior == pytest.approx(0.01)

    def test_without_prior(self, builder):
        """Test without_prior() clears smoothing."""
        assert builder.with_prior(0.3).without_prior().train(DWARVES).build().model.prior is None

    def test_invalid_pattern_not_checked_eagerly(self, builder):
        """Test with_pattern() accepts anything string-shaped."""
        builder.with_pattern('(unclosed')
        assert builder.config.pattern == '(unclosed'

    def test_invalid_pattern_fails_at_build(self, builder):
        """Test an invalid pattern surfaces at build()."""
        builder.with_pattern('(unclosed').train(DWARVES)
        with pytest.raises(PatternCompilationError):
            builder.build()

    def test_random_source_injected(self, builder):
        """Test an injected random source is used by the generator."""
        rng = random.Random(5)
        namegen = builder.with_random_source(rng).train(DWARVES).build()
        assert namegen._rng is rng

    def test_default_random_source(self, builder):
        """Test the default random source is non-deterministic."""
        namegen = builder.train(DWARVES).build()
        assert isinstance(namegen._rng, TrueRandom)

    def test_bad_random_source(self, builder):
        """Test random sources without choices() are rejected."""
        with pytest.raises(ConfigurationError):
            builder.with_random_source('not an rng')

    def test_max_attempts(self, builder):
        """Test the retry ceiling reaches the generator."""
        assert builder.with_max_attempts(50).train(DWARVES).build().max_attempts == 50
        with pytest.raises(ConfigurationError):
            CharacterChainGenerator.builder().with_max_attempts(0)


class TestBuilderLifecycle:
    """Order locking and single use."""

    def test_order_locked_after_training(self):
        """Test with_order() fails once training has started."""
        builder = CharacterChainGenerator.builder().train(DWARVES)
        with pytest.raises(ConfigurationError, match="training"):
            builder.with_order(2)

    def test_order_locked_after_empty_training(self):
        """Test even an empty train() call locks the order."""
        builder = CharacterChainGenerator.builder().train([])
        assert builder.is_trained
        with pytest.raises(ConfigurationError):
            builder.with_order(2)

    def test_other_settings_open_after_training(self):
        """Test prior and pattern can still change after training."""
        builder = CharacterChainGenerator.builder().train(DWARVES)
        builder.with_prior(0.1).with_pattern('y$').with_seed(3)
        namegen = builder.build()
        assert namegen.pattern == 'y$'

    def test_multiple_train_calls(self):
        """Test repeated train() calls accumulate."""
        builder = CharacterChainGenerator.builder().without_prior()
        builder.train(['ab']).train(['ab'])
        model = builder.build().model
        assert dict(model.transitions[('#',)]) == {'a': 2}

    def test_train_rejects_single_string(self):
        """Test passing a bare string is an error, not a corpus of letters."""
        with pytest.raises(TypeError):
            CharacterChainGenerator.builder().train('dopey')

    def test_build_once(self):
        """Test a builder can't build twice."""
        builder = CharacterChainGenerator.builder().train(DWARVES)
        builder.build()
        with pytest.raises(ConfigurationError):
            builder.build()

    def test_no_changes_after_build(self):
        """Test setters and train() fail after build()."""
        builder = CharacterChainGenerator.builder().train(DWARVES)
        builder.build()
        with pytest.raises(ConfigurationError):
            builder.with_prior(0.1)
        with pytest.raises(ConfigurationError):
            builder.train(DWARVES)

    def test_build_without_training(self):
        """Test an untrained builder still builds."""
        namegen = CharacterChainGenerator.builder().build()
        assert namegen.model.context_count == 0


class TestClusterBuilder:
    """Cluster-specific options."""

    def test_clusters_become_symbols(self):
        """Test the model is keyed by clusters."""
        model = ClusterChainGenerator.builder().without_prior().train(['Foobar']).build().model
        assert dict(model.transitions[('#', 'f', 'oo')]) == {'b': 1}

    def test_extra_vowels(self):
        """Test extra vowels change segmentation."""
        plain = ClusterChainGenerator.builder().train(['sky']).build().model
        with_y = ClusterChainGenerator.builder().with_extra_vowels('y').train(['sky']).build().model
        assert dict(plain.transitions[('#',)]) == {'sky': 1}
        assert dict(with_y.transitions[('#',)]) == {'sk': 1}

    def test_extra_vowels_locked_after_training(self):
        """Test the vowel set can't change mid-training."""
        builder = ClusterChainGenerator.builder().train(['sky'])
        with pytest.raises(ConfigurationError):
            builder.with_extra_vowels('y')
