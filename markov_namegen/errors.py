"""Exceptions raised while configuring, training and sampling name generators."""


class NameGenError(Exception):
    """Base class for every error raised by markov_namegen."""


class ConfigurationError(NameGenError, ValueError):
    """Invalid builder setting (order, prior, retry ceiling, lifecycle misuse)."""


class PatternCompilationError(NameGenError, ValueError):
    """The acceptance pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"Invalid acceptance pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class UndefinedContextError(NameGenError, LookupError):
    """The model has no recorded successors for any suffix of the context."""

    def __init__(self, context):
        super().__init__(
            f"No successors recorded for context {list(context)!r}; "
            f"was the model trained on any sequences?"
        )
        self.context = tuple(context)


class PatternUnsatisfiableError(NameGenError, RuntimeError):
    """No candidate matched the acceptance pattern within the retry ceiling."""

    def __init__(self, pattern: str, attempts: int):
        super().__init__(
            f"No generated name matched {pattern!r} after {attempts} attempts"
        )
        self.pattern = pattern
        self.attempts = attempts
