"""
Minimax Wordle Solver
=====================

Picks, every turn, the guess that minimizes the worst-case number of
remaining candidate answers.

On the original 2315-word answer list it wins every game in at most 5
guesses, averaging about 3.81.
"""

__version__ = "1.0.0"

from .errors import ConsistencyError, InputError, LexiconError, WordleError
from .feedback import CORRECT_PATTERN, evaluate
from .harness import Statistics, benchmark
from .lexicon import Lexicon, load_words
from .partition import partition
from .selector import select
from .solver import Game, GameState, GameTrace, MinimaxSolver
