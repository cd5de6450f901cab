"""
Minimax Wordle Solver
=====================

Plays Wordle by always choosing the guess whose worst-case feedback leaves
the fewest candidate answers.

A game moves through three states:
- IN_PROGRESS: candidates remain and guesses are left
- WON: the last guess was the secret
- LOST: the turn limit was reached without finding the secret

Losing is a normal outcome. An empty candidate set is not: it means the
secret was never a legal answer or the feedback rules disagree with
themselves, and it raises ConsistencyError.

The opening guess only depends on the word lists, so it is computed once per
solver (or supplied) and reused for every game.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .errors import ConsistencyError, InputError
from .feedback import CORRECT_PATTERN, N_PATTERNS, compute_feedback_matrix, feedback_to_emoji
from .lexicon import Lexicon, check_word
from .partition import partition_indices
from .selector import select_index


# ============================================================================
# CONSTANTS
# ============================================================================

MAX_TURNS = 6


# ============================================================================
# GAME RECORDS
# ============================================================================

class GameState(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Step:
    """One turn: the guess, its feedback, and how many candidates it faced."""
    guess: str
    feedback: int
    n_candidates: int


@dataclass(frozen=True)
class GameTrace:
    """Record of a finished game."""
    secret: str
    steps: Tuple[Step, ...]
    state: GameState

    @property
    def guesses(self) -> List[str]:
        return [s.guess for s in self.steps]

    @property
    def n_guesses(self) -> int:
        return len(self.steps)

    @property
    def won(self) -> bool:
        return self.state is GameState.WON


class Game:
    """
    Step-wise minimax play against a hidden secret.

    The game never sees the secret; feedback is supplied through apply(),
    either by MinimaxSolver.solve or by a caller relaying a real board.
    `secret` is only used to label a ConsistencyError.
    """

    def __init__(self, solver: "MinimaxSolver", secret: Optional[str] = None):
        self.solver = solver
        self.secret = secret
        self.candidates = np.arange(solver.lexicon.n_answers, dtype=np.int32)
        self.turn = 0
        self.state = GameState.IN_PROGRESS
        self.steps: List[Step] = []

    def next_guess(self) -> str:
        """The solver's choice for the current turn."""
        if self.state is not GameState.IN_PROGRESS:
            raise RuntimeError(f"Game is over ({self.state.value})")
        if self.turn == 0:
            return self.solver.first_guess
        return self.solver.best_guess(self.candidates)

    def apply(self, guess: str, feedback: int) -> GameState:
        """Record the feedback observed for `guess` and narrow the candidates."""
        if self.state is not GameState.IN_PROGRESS:
            raise RuntimeError(f"Game is over ({self.state.value})")

        lexicon = self.solver.lexicon
        guess_idx = lexicon.guess_to_idx.get(guess)
        if guess_idx is None:
            raise InputError(f"Not in guess list: {guess}")
        if not 0 <= feedback < N_PATTERNS:
            raise InputError(f"Invalid feedback pattern: {feedback}")

        self.steps.append(Step(guess, int(feedback), len(self.candidates)))
        self.turn += 1

        if feedback == CORRECT_PATTERN:
            answer_idx = lexicon.answer_to_idx.get(guess)
            if answer_idx is None or answer_idx not in self.candidates:
                raise ConsistencyError(guess, self.secret, feedback)
            self.candidates = np.array([answer_idx], dtype=np.int32)
            self.state = GameState.WON
            return self.state

        groups = partition_indices(self.solver.feedback_matrix[guess_idx], self.candidates)
        self.candidates = groups.get(feedback, self.candidates[:0])
        if len(self.candidates) == 0:
            raise ConsistencyError(guess, self.secret, feedback)

        max_turns = self.solver.max_turns
        if max_turns is not None and self.turn >= max_turns:
            self.state = GameState.LOST
        return self.state

    def remaining(self) -> List[str]:
        """Candidate words still consistent with every observed feedback."""
        answers = self.solver.lexicon.answers
        return [answers[c] for c in self.candidates]

    def trace(self) -> GameTrace:
        return GameTrace(self.secret, tuple(self.steps), self.state)


# ============================================================================
# SOLVER CLASS
# ============================================================================

class MinimaxSolver:
    """
    Worst-case minimizing Wordle solver.

    Precomputes the (guess × answer) feedback matrix once; each turn then
    scores every guess against the live candidates using matrix lookups.
    """

    def __init__(self, lexicon: Lexicon, first_guess: Optional[str] = None,
                 max_turns: Optional[int] = MAX_TURNS, verbose: bool = False):
        """
        Initialize solver.

        Args:
            lexicon: Answer and guess word lists
            first_guess: Opening guess; computed from the full answer list if None
            max_turns: Guesses allowed per game; None or 0 plays until solved
            verbose: Print progress
        """
        if max_turns is not None and max_turns < 0:
            raise ValueError(f"max_turns must be non-negative: {max_turns}")

        self.lexicon = lexicon
        self.max_turns = max_turns or None
        self.verbose = verbose

        # Precompute feedback matrix: shape (n_guesses, n_answers)
        if verbose:
            print(f"Precomputing feedback matrix ({lexicon.n_guesses} guesses × "
                  f"{lexicon.n_answers} answers)...")
        start = time.time()
        self.feedback_matrix = compute_feedback_matrix(lexicon.guess_chars, lexicon.answer_chars)
        if verbose:
            print(f"Done in {time.time() - start:.1f}s")

        self._setup_first_guess(first_guess)

    def _setup_first_guess(self, first_guess: Optional[str]):
        """Resolve the opening guess index."""
        if first_guess is not None:
            first_guess = check_word(first_guess)
            if first_guess not in self.lexicon.guess_to_idx:
                raise InputError(f"First guess is not in the guess list: {first_guess}")
            self.first_guess_idx = self.lexicon.guess_to_idx[first_guess]
            if self.verbose:
                print(f"Using first guess: {first_guess}")
            return

        if self.verbose:
            print("Computing best first guess...")
        start = time.time()
        self.first_guess_idx = self._find_best_guess_idx(
            np.arange(self.lexicon.n_answers, dtype=np.int32))
        if self.verbose:
            print(f"Best first guess: {self.first_guess} ({time.time() - start:.1f}s)")

    @property
    def first_guess(self) -> str:
        return self.lexicon.guesses[self.first_guess_idx]

    def _find_best_guess_idx(self, candidates: np.ndarray) -> int:
        return select_index(self.feedback_matrix, candidates, self.lexicon.answer_guess_idx)

    def find_best_first_guess(self) -> str:
        """Recompute the minimax opening for the full answer list."""
        idx = self._find_best_guess_idx(np.arange(self.lexicon.n_answers, dtype=np.int32))
        return self.lexicon.guesses[idx]

    def best_guess(self, candidates: np.ndarray) -> str:
        """Minimax guess for a set of candidate answer indices."""
        return self.lexicon.guesses[self._find_best_guess_idx(candidates)]

    def new_game(self, secret: Optional[str] = None) -> Game:
        return Game(self, secret)

    def solve(self, answer: str, verbose: bool = False) -> GameTrace:
        """
        Play one game against a known answer.

        Args:
            answer: Target word, must be in the answer list
            verbose: Print each turn

        Returns:
            GameTrace of the finished game
        """
        answer = check_word(answer)
        answer_idx = self.lexicon.answer_to_idx.get(answer)
        if answer_idx is None:
            raise InputError(f"word is not a possible answer: {answer}")

        game = self.new_game(answer)
        while game.state is GameState.IN_PROGRESS:
            n_cand = len(game.candidates)
            guess = game.next_guess()
            feedback = int(self.feedback_matrix[self.lexicon.guess_to_idx[guess], answer_idx])
            game.apply(guess, feedback)

            if verbose:
                print(f"  Turn {game.turn}: {guess} -> {feedback_to_emoji(feedback)} "
                      f"({n_cand} -> {len(game.candidates)} candidates)")

        return game.trace()
