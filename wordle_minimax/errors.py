"""Exceptions raised by the solver."""

from typing import Optional


class WordleError(Exception):
    """Base class for solver errors."""


class InputError(WordleError, ValueError):
    """A supplied word is malformed or not usable for the requested game."""


class LexiconError(WordleError, ValueError):
    """The word lists cannot be used to play."""


class ConsistencyError(WordleError, RuntimeError):
    """
    The candidate set became empty mid-game.

    This only happens when the secret was not drawn from the answer list or
    the feedback computation disagrees with itself.
    """

    def __init__(self, guess: str, secret: Optional[str], feedback: int):
        self.guess = guess
        self.secret = secret
        self.feedback = feedback
        against = f"secret '{secret}'" if secret is not None else "an unknown secret"
        super().__init__(
            f"No candidates remaining after guess '{guess}' "
            f"against {against} (pattern {feedback})"
        )

    def __reduce__(self):
        return (type(self), (self.guess, self.secret, self.feedback))
