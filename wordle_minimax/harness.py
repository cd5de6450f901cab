"""
Benchmark harness.

Plays the solver against every answer (or a chosen subset) and aggregates the
guess counts. Games are independent, so they can be spread over worker
processes. Each run of games produces a partial Statistics record; the parts
come back in answer order and are merged into one.

A ConsistencyError aborts only the game that raised it. The answer is kept in
Statistics.errors and the counters from other games are left untouched.
"""

import multiprocessing as mp
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from tqdm import tqdm

from .errors import ConsistencyError
from .solver import GameTrace, MinimaxSolver


@dataclass
class Statistics:
    """Aggregate results over many games."""
    games: int = 0
    wins: int = 0
    total_guesses: int = 0
    max_guesses: Optional[int] = None
    min_guesses: Optional[int] = None
    distribution: Counter = field(default_factory=Counter)
    errors: List[Tuple[str, str]] = field(default_factory=list)

    def record(self, trace: GameTrace):
        n = trace.n_guesses
        self.games += 1
        self.total_guesses += n
        if trace.won:
            self.wins += 1
        self.max_guesses = n if self.max_guesses is None else max(self.max_guesses, n)
        self.min_guesses = n if self.min_guesses is None else min(self.min_guesses, n)
        self.distribution[n] += 1

    def record_error(self, answer: str, exc: Exception):
        self.errors.append((answer, str(exc)))

    def merge(self, other: "Statistics") -> "Statistics":
        """Combine two records (sum counts, max of maxima, min of minima)."""
        maxima = [m for m in (self.max_guesses, other.max_guesses) if m is not None]
        minima = [m for m in (self.min_guesses, other.min_guesses) if m is not None]
        return Statistics(
            games=self.games + other.games,
            wins=self.wins + other.wins,
            total_guesses=self.total_guesses + other.total_guesses,
            max_guesses=max(maxima) if maxima else None,
            min_guesses=min(minima) if minima else None,
            distribution=self.distribution + other.distribution,
            errors=self.errors + other.errors,
        )

    @property
    def words(self) -> int:
        """Games attempted, including aborted ones."""
        return self.games + len(self.errors)

    @property
    def average(self) -> float:
        return self.total_guesses / self.games if self.games else 0.0

    @property
    def win_rate(self) -> float:
        """Percentage of attempted games that were won."""
        return 100.0 * self.wins / self.words if self.words else 0.0

    def summary(self) -> str:
        return (f"Words={self.words} Max={self.max_guesses or 0} Min={self.min_guesses or 0} "
                f"Avg={self.average:.2f} Win={self.win_rate:.2f}%")


# ============================================================================
# WORKERS
# ============================================================================

_SOLVER: Optional[MinimaxSolver] = None


def _init_worker(solver: MinimaxSolver):
    global _SOLVER
    _SOLVER = solver


def _play_chunk(solver: MinimaxSolver, words: Sequence[str]) -> Tuple[Statistics, List[GameTrace]]:
    """Play a run of answers, returning their partial Statistics and traces."""
    stats = Statistics()
    traces = []
    for answer in words:
        try:
            trace = solver.solve(answer)
        except ConsistencyError as exc:
            stats.record_error(answer, exc)
            continue
        stats.record(trace)
        traces.append(trace)
    return stats, traces


def _worker_chunk(words: Sequence[str]):
    return _play_chunk(_SOLVER, words)


def _iter_chunks(solver: MinimaxSolver, words: Sequence[str], workers: int) -> Iterable:
    if workers <= 1:
        for word in words:
            yield _play_chunk(solver, [word])
        return

    # numba's OpenMP threading layer is not fork-safe once a parallel kernel has run
    ctx = mp.get_context("spawn")
    chunk_size = max(1, len(words) // (workers * 8))
    chunks = [words[i:i + chunk_size] for i in range(0, len(words), chunk_size)]
    with ctx.Pool(processes=workers, initializer=_init_worker, initargs=(solver,)) as pool:
        yield from pool.imap(_worker_chunk, chunks)


def benchmark(solver: MinimaxSolver, words: Optional[Sequence[str]] = None,
              workers: int = 1, progress: bool = False,
              on_game: Optional[Callable[[GameTrace], None]] = None) -> Statistics:
    """
    Play every word and aggregate the results.

    Args:
        solver: MinimaxSolver instance
        words: Answers to play (default: the whole answer list)
        workers: Worker processes; 1 plays in this process
        progress: Show a progress bar
        on_game: Called with each finished GameTrace, in answer order

    Returns:
        Statistics for the run
    """
    if words is None:
        words = solver.lexicon.answers
    words = list(words)

    stats = Statistics()
    with tqdm(total=len(words), disable=not progress, desc="Games", unit="game") as bar:
        for chunk_stats, traces in _iter_chunks(solver, words, workers):
            stats = stats.merge(chunk_stats)
            if on_game is not None:
                for trace in traces:
                    on_game(trace)
            bar.update(chunk_stats.words)

    return stats
