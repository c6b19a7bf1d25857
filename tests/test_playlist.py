import io

import pytest

from chainlab.doubly import EmptyListError
from chainlab.playlist import Playlist, main


def _playlist(*songs):
    playlist = Playlist()
    for song in songs:
        playlist.add(song)
    return playlist


def test_add_puts_newest_first():
    playlist = _playlist("a", "b", "c")
    assert list(playlist) == ["c", "b", "a"]
    assert len(playlist) == 3


def test_format():
    assert _playlist("a", "b").format() == "b->a->NULL"


def test_format_empty():
    assert Playlist().format() == "No songs in playList"


@pytest.mark.parametrize("song", ["a", "b", "c"])
def test_remove(song):
    playlist = _playlist("a", "b", "c")
    playlist.remove(song)
    assert song not in list(playlist)
    assert len(playlist) == 2


def test_remove_absent_raises():
    playlist = _playlist("a")
    with pytest.raises(ValueError):
        playlist.remove("z")
    assert list(playlist) == ["a"]


def test_remove_from_empty_raises():
    with pytest.raises(EmptyListError):
        Playlist().remove("a")


def test_search():
    songs = ["one", "two", "three", "four"]
    playlist = _playlist(*songs)
    assert all(playlist.search(song) for song in songs)
    assert playlist.search("five") is False
    assert Playlist().search("one") is False


def test_main_session(monkeypatch, capsys):
    session = (
        "1\nsong one\n1\nsong two\n3\n4\nsong one\n4\nmissing\n"
        "2\nsong two\n2\nmissing\n5\n"
    )
    monkeypatch.setattr("sys.stdin", io.StringIO(session))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "song two->song one->NULL" in lines
    assert "Found: song one" in lines
    assert "Not found" in lines
    assert "Removed: song two" in lines
    assert "song not found: missing" in lines


def test_main_search_empty(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\nanything\n5\n"))
    main([])
    assert "Play List is Empty." in capsys.readouterr().out.splitlines()