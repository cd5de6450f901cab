import pytest

from wordle_minimax.cli import main
from wordle_minimax.errors import ConsistencyError
from wordle_minimax.solver import MinimaxSolver


def run(word_files, *args):
    answers, guesses = word_files
    return main(["--answers", str(answers), "--guesses", str(guesses), *args])


def test_single_game(word_files, capsys):
    assert run(word_files, "hills", "--no-color") == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["bfhmz BBYBB", "hills GGGGG", "Solved in 2 guesses"]


def test_single_game_colored(word_files, capsys):
    assert run(word_files, "bills") == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("\x1b[30;42mb")
    assert out[-1] == "Solved in 2 guesses"


def test_single_game_lost(word_files, capsys):
    assert run(word_files, "mills", "--max-turns", "1", "--no-color") == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Lost after 1 guesses"


def test_benchmark(word_files, capsys):
    assert run(word_files) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "Words=4 Max=2 Min=2 Avg=2.00 Win=100.00%"


def test_benchmark_verbose_limit(word_files, capsys):
    assert run(word_files, "--verbose", "--limit", "2") == 0
    out = capsys.readouterr().out
    assert "bills: 2\n" in out
    assert "fills: 2\n" in out
    assert "hills: 2" not in out
    assert out.splitlines()[-1] == "Words=2 Max=2 Min=2 Avg=2.00 Win=100.00%"


@pytest.mark.parametrize("word", ["zzzzz", "hil1s", "hillss", "HILLS"])
def test_bad_word_is_input_error(word_files, capsys, word):
    with pytest.raises(SystemExit) as info:
        run(word_files, word)
    assert info.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error" in captured.err


def test_missing_word_list(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        main(["--answers", str(tmp_path / "nope.txt"), "--guesses", str(tmp_path / "nope.txt")])
    assert info.value.code == 2


def test_bad_options(word_files):
    for args in (["--max-turns", "-1"], ["--workers", "0"], ["--limit", "0"]):
        with pytest.raises(SystemExit) as info:
            run(word_files, *args)
        assert info.value.code == 2


def break_game(monkeypatch, secret):
    solve = MinimaxSolver.solve

    def broken(self, answer, verbose=False):
        if answer == secret:
            raise ConsistencyError("bfhmz", answer, 0)
        return solve(self, answer, verbose)

    monkeypatch.setattr(MinimaxSolver, "solve", broken)


def test_single_game_consistency_error(word_files, capsys, monkeypatch):
    break_game(monkeypatch, "hills")
    assert run(word_files, "hills", "--no-color") == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: ")
    assert "bfhmz" in captured.err and "hills" in captured.err


def test_benchmark_consistency_error(word_files, capsys, monkeypatch):
    break_game(monkeypatch, "hills")
    assert run(word_files) == 1
    captured = capsys.readouterr()
    errors = captured.err.splitlines()
    assert len(errors) == 1
    assert errors[0].startswith("error: hills: ")
    assert "bfhmz" in errors[0]
    assert captured.out.splitlines()[-1] == "Words=4 Max=2 Min=2 Avg=2.00 Win=75.00%"
