"""
Command-line entry point.

    wordle-minimax            play every answer and print statistics
    wordle-minimax WORD       solve one answer and show the guesses
"""

import argparse
import sys
import time

from tqdm import tqdm

from .errors import ConsistencyError, InputError, LexiconError
from .feedback import colorize, feedback_to_string
from .harness import benchmark
from .lexicon import DEFAULT_ANSWERS_PATH, DEFAULT_GUESSES_PATH, Lexicon, check_word
from .solver import MAX_TURNS, MinimaxSolver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordle-minimax",
        description="Wordle solver that minimizes the worst-case number of remaining answers.",
    )
    parser.add_argument(
        "word",
        nargs="?",
        help="Answer to solve. Omit to play every answer and report statistics.",
    )
    parser.add_argument(
        "--answers",
        default=str(DEFAULT_ANSWERS_PATH),
        help="Word list of possible answers (default: %(default)s).",
    )
    parser.add_argument(
        "--guesses",
        default=str(DEFAULT_GUESSES_PATH),
        help="Word list of allowed guesses (default: %(default)s).",
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=MAX_TURNS,
        help="Guesses allowed per game; 0 plays until solved (default: %(default)s).",
    )
    parser.add_argument(
        "--first-guess",
        default=None,
        help="Opening guess to use instead of computing it.",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker processes for benchmark mode (default: %(default)s).",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Benchmark only the first N answers.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print feedback as B/Y/G letters instead of colored tiles.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print setup timings, and each answer's guess count in benchmark mode.",
    )
    return parser


def run_single(solver: MinimaxSolver, word: str, color: bool = True, verbose: bool = False) -> int:
    try:
        trace = solver.solve(word, verbose=verbose)
    except ConsistencyError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for step in trace.steps:
        if color:
            print(colorize(step.guess, step.feedback))
        else:
            print(f"{step.guess} {feedback_to_string(step.feedback)}")

    if trace.won:
        print(f"Solved in {trace.n_guesses} guesses")
    else:
        print(f"Lost after {trace.n_guesses} guesses")
    return 0


def run_benchmark(solver: MinimaxSolver, workers: int = 1, limit: int = None,
                  verbose: bool = False) -> int:
    words = solver.lexicon.answers
    if limit is not None:
        words = words[:limit]

    progress = sys.stderr.isatty()

    def report(trace):
        tqdm.write(f"{trace.secret}: {trace.n_guesses}")

    start = time.time()
    stats = benchmark(solver, words, workers=workers, progress=progress,
                      on_game=report if verbose else None)
    if verbose:
        print(f"Played {stats.words} games in {time.time() - start:.1f}s")

    for answer, message in stats.errors:
        print(f"error: {answer}: {message}", file=sys.stderr)

    print(stats.summary())
    return 1 if stats.errors else 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_turns < 0:
        parser.error(f"--max-turns must be non-negative: {args.max_turns}")
    if args.workers < 1:
        parser.error(f"--workers must be at least 1: {args.workers}")
    if args.limit is not None and args.limit < 1:
        parser.error(f"--limit must be at least 1: {args.limit}")

    word = None
    try:
        if args.word is not None:
            word = check_word(args.word)
        lexicon = Lexicon.from_files(args.answers, args.guesses, verbose=args.verbose)
        if word is not None and not lexicon.is_answer(word):
            raise InputError(f"word is not a possible answer: {word}")
        solver = MinimaxSolver(lexicon, first_guess=args.first_guess,
                               max_turns=args.max_turns, verbose=args.verbose)
    except (InputError, LexiconError, OSError) as exc:
        parser.error(str(exc))

    if word is not None:
        return run_single(solver, word, color=not args.no_color, verbose=args.verbose)
    return run_benchmark(solver, workers=args.workers, limit=args.limit, verbose=args.verbose)


if __name__ == "__main__":
    sys.exit(main())
