import pytest

from wordle_minimax.lexicon import Lexicon
from wordle_minimax.solver import MinimaxSolver


# Four answers that differ only in their first letter. Guessing any one of
# them leaves three lumped together, while bfhmz and mhfbz tell all four
# apart and zzzzz tells nothing.
ANSWERS = ["bills", "fills", "hills", "mills"]
GUESSES = ["bfhmz", "mhfbz", "zzzzz"]


@pytest.fixture
def lexicon():
    return Lexicon(ANSWERS, GUESSES)


@pytest.fixture
def solver(lexicon):
    return MinimaxSolver(lexicon)


@pytest.fixture
def word_files(tmp_path):
    answers = tmp_path / "answers.txt"
    guesses = tmp_path / "guesses.txt"
    answers.write_text("\n".join(ANSWERS) + "\n")
    guesses.write_text("\n".join(GUESSES) + "\n")
    return answers, guesses
