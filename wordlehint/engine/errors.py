"""
Engine error types.

All of them subclass ValueError so callers that already guard against bad
input with `except ValueError` keep working.
"""


class EngineError(ValueError):
    """Base class for everything the engine raises on bad input or state."""


class MalformedFeedback(EngineError):
    """A feedback pattern has the wrong length or a symbol outside X/Y/Z."""


class WordLengthMismatch(EngineError):
    """A word is not exactly five a-z letters."""


class EmptyCandidateSet(EngineError):
    """
    Accumulated constraints ruled out every word.

    Usually means feedback was mistyped upstream, or the word list does not
    contain the target.
    """
