import pytest

from wordle_minimax.errors import InputError, LexiconError
from wordle_minimax.lexicon import Lexicon, check_word, load_words


def test_load_words_filters_and_sorts(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("crane\n\nSLATE\n  cigar  \ntoolong\nab1de\ncrane\nfour\n")
    assert load_words(path) == ["cigar", "crane", "slate"]


def test_lexicon_merges_answers_into_guesses():
    lexicon = Lexicon(["crane", "cigar"], ["slate"])
    assert lexicon.answers == ("cigar", "crane")
    assert lexicon.guesses == ("cigar", "crane", "slate")
    assert lexicon.is_answer("crane") and lexicon.is_guess("crane")
    assert not lexicon.is_answer("slate") and lexicon.is_guess("slate")
    assert [lexicon.guesses[i] for i in lexicon.answer_guess_idx] == ["cigar", "crane"]


def test_lexicon_char_arrays():
    lexicon = Lexicon(["abcde"], ["zzzzz"])
    assert list(lexicon.answer_chars[0]) == [0, 1, 2, 3, 4]
    assert lexicon.guess_chars.shape == (2, 5)


def test_lexicon_rejects_bad_lists():
    with pytest.raises(LexiconError):
        Lexicon([], ["crane"])
    with pytest.raises(LexiconError):
        Lexicon(["cran"], ["crane"])
    with pytest.raises(LexiconError):
        Lexicon(["crane"], ["sl8te"])


def test_lexicon_from_files(word_files):
    lexicon = Lexicon.from_files(*word_files)
    assert lexicon.n_answers == 4
    assert lexicon.n_guesses == 7


def test_check_word():
    assert check_word("crane") == "crane"
    for bad in ["cran", "cranes", "cr4ne", "", "crâne", "CRANE", " crane"]:
        with pytest.raises(InputError):
            check_word(bad)
