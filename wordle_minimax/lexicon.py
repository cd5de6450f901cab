"""
Word lists.

Two lists drive a game: the answers (words that can be the secret) and the
guesses (words the solver may play). Both are kept sorted so that guess
indices, and with them the selector's tie-break, are stable across runs.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .errors import InputError, LexiconError
from .feedback import WORD_LENGTH, words_to_chars


# Location of the bundled word lists
DATA_DIR = Path(__file__).resolve().parent.parent / "words"
DEFAULT_ANSWERS_PATH = DATA_DIR / "answers.txt"
DEFAULT_GUESSES_PATH = DATA_DIR / "allowed_guesses.txt"


def is_word(word: str) -> bool:
    """True for exactly five ASCII lowercase letters."""
    return len(word) == WORD_LENGTH and all('a' <= c <= 'z' for c in word)


def check_word(word: str) -> str:
    """Validate a user-supplied word, raising InputError if malformed."""
    if not all('a' <= c <= 'z' for c in word):
        raise InputError(f"word must be ascii lowercase: {word!r}")
    if len(word) != WORD_LENGTH:
        raise InputError(f"word must be {WORD_LENGTH} letters: {word!r}")
    return word


def load_words(filepath, verbose: bool = False) -> List[str]:
    """
    Load a newline-separated word list.

    Blank lines are skipped, as are entries that are not five letters; the
    result is sorted with duplicates removed.
    """
    words = set()
    skipped = 0
    with open(filepath, 'r') as f:
        for line in f:
            w = line.strip().lower()
            if not w:
                continue
            if not is_word(w):
                skipped += 1
                continue
            words.add(w)
    if verbose and skipped:
        print(f"Skipped {skipped} malformed entries in {filepath}")
    return sorted(words)


class Lexicon:
    """
    Immutable answer and guess lists.

    Any answer missing from the guess list is added to it, so every candidate
    can always be played.
    """

    def __init__(self, answers: Iterable[str], guesses: Optional[Iterable[str]] = None,
                 verbose: bool = False):
        answers = sorted(set(w.lower() for w in answers))
        guesses = set(w.lower() for w in (guesses if guesses is not None else answers))

        if not answers:
            raise LexiconError("Answer list is empty")
        for w in answers:
            if not is_word(w):
                raise LexiconError(f"Malformed answer: {w!r}")
        for w in guesses:
            if not is_word(w):
                raise LexiconError(f"Malformed guess: {w!r}")

        missing = set(answers) - guesses
        if missing and verbose:
            print(f"Adding {len(missing)} answers missing from the guess list")

        self.answers: Tuple[str, ...] = tuple(answers)
        self.guesses: Tuple[str, ...] = tuple(sorted(guesses | missing))

        self.answer_to_idx = {w: i for i, w in enumerate(self.answers)}
        self.guess_to_idx = {w: i for i, w in enumerate(self.guesses)}

        self.n_answers = len(self.answers)
        self.n_guesses = len(self.guesses)

        # Convert to char arrays for numba
        self.answer_chars = words_to_chars(self.answers)
        self.guess_chars = words_to_chars(self.guesses)

        # Guess row of each answer
        self.answer_guess_idx = np.array(
            [self.guess_to_idx[w] for w in self.answers], dtype=np.int32)

    @classmethod
    def from_files(cls, answers_path=DEFAULT_ANSWERS_PATH,
                   guesses_path=DEFAULT_GUESSES_PATH, verbose: bool = False) -> "Lexicon":
        """Load both lists from disk."""
        answers = load_words(answers_path, verbose=verbose)
        guesses = load_words(guesses_path, verbose=verbose)
        if verbose:
            print(f"Answers: {len(answers)}, Guesses: {len(guesses)}")
        return cls(answers, guesses, verbose=verbose)

    def is_answer(self, word: str) -> bool:
        return word in self.answer_to_idx

    def is_guess(self, word: str) -> bool:
        return word in self.guess_to_idx

    def __repr__(self):
        return f"Lexicon(answers={self.n_answers}, guesses={self.n_guesses})"
