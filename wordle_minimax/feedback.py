"""
Wordle Feedback
===============

Feedback for a guess against a secret is five marks, one per position:

    0 = gray   (letter absent, or all its copies already accounted for)
    1 = yellow (letter present elsewhere)
    2 = green  (letter in the right place)

Marks are packed into a single base-3 integer with position 0 as the least
significant digit, so every pattern fits in 0..242 and all-green is 242.

Duplicate letters follow the official rules: greens are allocated first and
each consumes one copy of its letter from the secret; yellows are then
allocated left to right only while unused copies remain.
"""

import numpy as np
from numba import jit, prange
from typing import List, Sequence, Tuple


# ============================================================================
# CONSTANTS
# ============================================================================

WORD_LENGTH = 5
GRAY = 0
YELLOW = 1
GREEN = 2
CORRECT_PATTERN = 242  # 2 + 2*3 + 2*9 + 2*27 + 2*81 = 242 (all green)
N_PATTERNS = 243  # 3^5 possible feedback patterns

_PATTERN_LETTERS = 'BYG'
_PATTERN_EMOJI = ('⬛', '🟨', '🟩')

# black on white / yellow / green
_ANSI_TILES = ('\x1b[30;47m', '\x1b[30;43m', '\x1b[30;42m')
_ANSI_RESET = '\x1b[0m'


# ============================================================================
# NUMBA-ACCELERATED FEEDBACK COMPUTATION
# ============================================================================

@jit(nopython=True, cache=True)
def compute_feedback(guess: np.ndarray, answer: np.ndarray) -> int:
    """
    Compute Wordle feedback for a guess against an answer.

    Args:
        guess: shape (5,) array of char codes (0-25 for a-z)
        answer: shape (5,) array of char codes

    Returns:
        Integer feedback pattern (0-242)
    """
    feedback = np.zeros(5, dtype=np.int32)
    answer_counts = np.zeros(26, dtype=np.int32)

    # Count letters in answer
    for i in range(5):
        answer_counts[answer[i]] += 1

    # First pass: mark greens
    for i in range(5):
        if guess[i] == answer[i]:
            feedback[i] = GREEN
            answer_counts[guess[i]] -= 1

    # Second pass: mark yellows while copies remain
    for i in range(5):
        if feedback[i] == GRAY:
            c = guess[i]
            if answer_counts[c] > 0:
                feedback[i] = YELLOW
                answer_counts[c] -= 1

    return feedback[0] + 3*feedback[1] + 9*feedback[2] + 27*feedback[3] + 81*feedback[4]


@jit(nopython=True, parallel=True, cache=True)
def compute_feedback_matrix(guess_chars: np.ndarray, answer_chars: np.ndarray) -> np.ndarray:
    """
    Compute feedback for all guess/answer pairs in parallel.

    Args:
        guess_chars: shape (n_guesses, 5) array of char codes
        answer_chars: shape (n_answers, 5) array of char codes

    Returns:
        shape (n_guesses, n_answers) feedback matrix
    """
    n_guesses = guess_chars.shape[0]
    n_answers = answer_chars.shape[0]
    result = np.zeros((n_guesses, n_answers), dtype=np.uint8)

    for i in prange(n_guesses):
        for j in range(n_answers):
            result[i, j] = compute_feedback(guess_chars[i], answer_chars[j])

    return result


# ============================================================================
# WORD-LEVEL HELPERS
# ============================================================================

def words_to_chars(words: Sequence[str]) -> np.ndarray:
    """Convert words to a (n, 5) char code array."""
    arr = np.zeros((len(words), WORD_LENGTH), dtype=np.int32)
    for i, w in enumerate(words):
        for j, c in enumerate(w):
            arr[i, j] = ord(c) - ord('a')
    return arr


def evaluate(guess: str, secret: str) -> int:
    """
    Feedback pattern for `guess` checked against `secret`.

    Either word may come from outside the answer list.
    """
    chars = words_to_chars([guess, secret])
    return int(compute_feedback(chars[0], chars[1]))


def encode_marks(marks: Sequence[int]) -> int:
    """Pack five marks (0/1/2) into a pattern code."""
    code = 0
    multiplier = 1
    for m in marks:
        if m not in (GRAY, YELLOW, GREEN):
            raise ValueError(f"Invalid mark: {m}")
        code += m * multiplier
        multiplier *= 3
    return code


def decode_feedback(code: int) -> Tuple[int, ...]:
    """Unpack a pattern code into its five marks."""
    marks = []
    for _ in range(WORD_LENGTH):
        marks.append(code % 3)
        code //= 3
    return tuple(marks)


def pattern_to_int(pattern: str) -> int:
    """Convert pattern string (e.g., 'BBYGG') to integer (0-242)."""
    marks = []
    for c in pattern.upper():
        if c not in _PATTERN_LETTERS:
            raise ValueError(f"Invalid pattern char: {c}")
        marks.append(_PATTERN_LETTERS.index(c))
    if len(marks) != WORD_LENGTH:
        raise ValueError(f"Pattern must have {WORD_LENGTH} characters: {pattern}")
    return encode_marks(marks)


def feedback_to_string(code: int) -> str:
    """Convert a pattern code to 'B'/'Y'/'G' letters."""
    return ''.join(_PATTERN_LETTERS[m] for m in decode_feedback(code))


def feedback_to_emoji(code: int) -> str:
    """Convert a pattern code to an emoji tile row."""
    return ''.join(_PATTERN_EMOJI[m] for m in decode_feedback(code))


def colorize(guess: str, code: int) -> str:
    """Render a guess as ANSI colored tiles."""
    out: List[str] = []
    for c, m in zip(guess, decode_feedback(code)):
        out.append(_ANSI_TILES[m])
        out.append(c)
    out.append(_ANSI_RESET)
    return ''.join(out)
