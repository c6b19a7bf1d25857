import io

from chainlab.treasure import Clue, TreasureHunt, default_hunt, main


def test_default_hunt_clues():
    hunt = default_hunt()
    assert [clue.answer for clue in hunt.clues] == [2, 6, 9, 0, 7]
    assert hunt.clues[0] == Clue("Even Prime", 2)


def test_correct_answers_win():
    lines = list(default_hunt().play([2, 6, 9, 0, 7]))
    assert lines[-1] == "Won the treasure :)"
    assert lines[:-1] == [clue.text for clue in default_hunt().clues]


def test_wrong_answers_count_down_and_reset():
    hunt = TreasureHunt([Clue("first", 1), Clue("second", 2)])
    lines = list(hunt.play([5, 5, 1, 5, 2]))
    assert "2 chances more" in lines
    assert "1 chances more" in lines
    assert lines.count("2 chances more") == 2
    assert lines[-1] == "Won the treasure :)"


def test_three_wrong_answers_lose():
    hunt = TreasureHunt([Clue("first", 1)])
    lines = list(hunt.play([0, 0, 0, 1]))
    assert lines[-1] == "Better luck next time!"
    assert "Won the treasure :)" not in lines
    assert lines.count("first") == 3


def test_answers_run_out():
    hunt = TreasureHunt([Clue("first", 1), Clue("second", 2)])
    lines = list(hunt.play([1]))
    assert lines == ["first", "second"]


def test_empty_hunt_is_won():
    assert list(TreasureHunt().play([])) == ["Won the treasure :)"]


def test_add_clue_appends():
    hunt = TreasureHunt()
    hunt.add_clue("riddle", 4)
    assert hunt.clues == [Clue("riddle", 4)]


def test_main_plays_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n6\nnine\n9\n0\n7\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "Won the treasure :)"
    assert "2 chances more" in lines