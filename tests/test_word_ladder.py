import io

import pytest

from dsalab.word_ladder import DictionaryError, WordLadder, is_one_letter_off, main

WORDS = ["stone", "store", "shore", "apple", "score", "snore"]


def test_is_one_letter_off():
    assert is_one_letter_off("stone", "store")
    assert not is_one_letter_off("stone", "stone")
    assert not is_one_letter_off("stone", "shore")
    assert not is_one_letter_off("stone", "ston")


def test_find_ladder_shortest_path():
    ladder = WordLadder(WORDS).find_ladder("stone", "shore")
    assert ladder[0] == "stone"
    assert ladder[-1] == "shore"
    assert len(ladder) == 3
    assert all(is_one_letter_off(a, b) for a, b in zip(ladder, ladder[1:]))


def test_find_ladder_follows_dictionary_order():
    assert WordLadder(["stone", "store", "shore"]).find_ladder("stone", "shore") == [
        "stone",
        "store",
        "shore",
    ]


def test_same_start_and_end():
    assert WordLadder(WORDS).find_ladder("apple", "apple") == ["apple"]


def test_no_ladder():
    assert WordLadder(WORDS).find_ladder("stone", "apple") is None


def test_unknown_word_raises():
    with pytest.raises(ValueError):
        WordLadder(WORDS).find_ladder("stone", "zzzzz")


def test_search_leaves_dictionary_intact():
    ladder = WordLadder(WORDS)
    ladder.find_ladder("stone", "shore")
    assert ladder.words == WORDS
    assert ladder.find_ladder("stone", "score")[-1] == "score"


def test_wrong_length_word_rejected():
    with pytest.raises(DictionaryError):
        WordLadder(["stone", "toolong"])


def test_from_file(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text("stone store\nshore\n", encoding="utf-8")
    assert WordLadder.from_file(str(path)).words == ["stone", "store", "shore"]


def test_from_missing_file(tmp_path):
    with pytest.raises(DictionaryError):
        WordLadder.from_file(str(tmp_path / "missing.txt"))


def test_output_ladder_writes_file(tmp_path):
    out = tmp_path / "output.txt"
    result = WordLadder(["stone", "store", "shore"]).output_ladder("stone", "shore", str(out))
    assert out.read_text(encoding="utf-8") == "".join(f"{word}\n" for word in result)
    assert result[-1] == "shore"


def test_output_ladder_without_ladder(tmp_path):
    out = tmp_path / "output.txt"
    assert WordLadder(WORDS).output_ladder("stone", "apple", str(out)) is None
    assert out.read_text(encoding="utf-8") == "No Word Ladder Found.\n"


def test_main_reprompts_and_writes(tmp_path, monkeypatch, capsys):
    dictionary = tmp_path / "dictionary.txt"
    dictionary.write_text("stone\nstore\nshore\n", encoding="utf-8")
    out = tmp_path / "output.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\nstone\nshore\n"))
    code = main(["--dictionary", str(dictionary), "--output", str(out)])
    assert code == 0
    assert "Word must have exactly 5 characters." in capsys.readouterr().out
    assert out.read_text(encoding="utf-8").splitlines()[0] == "stone"
    assert out.read_text(encoding="utf-8").splitlines()[-1] == "shore"


def test_main_missing_dictionary(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("stone\nshore\n"))
    code = main(["--dictionary", str(tmp_path / "none.txt"), "--output", str(tmp_path / "o.txt")])
    assert code == 1
    assert "Cannot open file" in capsys.readouterr().out