import pytest

from puzzlebox.wordladder import word_ladder


@pytest.mark.parametrize(
    "start, end, dictionary, expected",
    [
        ("from", "to", [], 0),
        ("hit", "cog", ["hot", "dot", "dog", "lot", "log", "cog"], 5),
        ("hot", "dog", ["hot", "dog", "cog", "pot", "dot"], 3),
        ("a", "b", ["c", "b"], 2),
        ("lost", "cost", ["most", "fist", "lost", "cost", "fish"], 2),
        ("talk", "tail", ["talk", "tons", "fall", "tail", "gale", "hall", "negs"], 0),
        ("hot", "dog", ["hot", "dog"], 0),
    ],
)
def test_word_ladder(start, end, dictionary, expected):
    assert word_ladder(start, end, dictionary) == expected


def test_dictionary_is_not_modified():
    dictionary = ["hot", "dot"]
    assert word_ladder("hit", "dog", dictionary) == 4
    assert dictionary == ["hot", "dot"]


def test_same_start_and_end():
    assert word_ladder("cat", "cat", []) == 1