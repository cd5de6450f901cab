import numpy as np

from wordle_minimax.feedback import CORRECT_PATTERN, evaluate, pattern_to_int
from wordle_minimax.partition import partition, partition_indices, worst_case

from .conftest import ANSWERS
from .test_feedback import SAMPLE


def test_partition_groups_by_feedback():
    groups = partition("bills", ANSWERS)
    assert groups == {
        CORRECT_PATTERN: ["bills"],
        pattern_to_int("BGGGG"): ["fills", "hills", "mills"],
    }


def test_partition_is_exact_cover():
    for guess in SAMPLE:
        groups = partition(guess, SAMPLE)
        members = [w for group in groups.values() for w in group]
        assert sorted(members) == sorted(SAMPLE)
        assert all(len(group) > 0 for group in groups.values())
        for code, group in groups.items():
            assert all(evaluate(guess, w) == code for w in group)


def test_partition_empty_candidates():
    assert partition("crane", []) == {}


def test_partition_indices(solver):
    lexicon = solver.lexicon
    row = solver.feedback_matrix[lexicon.guess_to_idx["bfhmz"]]
    candidates = np.arange(lexicon.n_answers, dtype=np.int32)
    groups = partition_indices(row, candidates)
    assert sorted(groups) == [2, 3, 9, 27]
    assert [lexicon.answers[g[0]] for _, g in sorted(groups.items())] == ANSWERS


def test_worst_case(solver):
    lexicon = solver.lexicon
    candidates = np.arange(lexicon.n_answers, dtype=np.int32)

    row = solver.feedback_matrix[lexicon.guess_to_idx["bills"]]
    assert worst_case(row, candidates) == 3
    assert worst_case(row, candidates[:1]) == 1

    row = solver.feedback_matrix[lexicon.guess_to_idx["zzzzz"]]
    assert worst_case(row, candidates) == 4


def test_partition_indices_matches_words(solver):
    lexicon = solver.lexicon
    candidates = np.arange(lexicon.n_answers, dtype=np.int32)
    for guess in lexicon.guesses:
        row = solver.feedback_matrix[lexicon.guess_to_idx[guess]]
        by_index = partition_indices(row, candidates)
        by_word = partition(guess, lexicon.answers)
        assert {p: [lexicon.answers[c] for c in g] for p, g in by_index.items()} == by_word
        assert max(len(g) for g in by_index.values()) == worst_case(row, candidates)
