import pytest

from puzzlebox.jaro import distance

EPSILON = 0.000001


@pytest.mark.parametrize(
    "word1, word2, expected",
    [
        ("dixon", "dicksonx", 0.766667),
        ("dicksonx", "DIXON", 0.766667),
        ("Cosmo", "Kosmo", 0.866667),
        ("Cosmer Kramo", "Kosmoo Karme", 0.694444),
        ("MARTHA", "marhta", 0.944444),
        ("five", "ten", 0),
        ("jones", "johnson", 0.790476),
        ("impression", "impression", 1),
        ("jaro", "oraj", 0.5),
        ("", "", 1),
        (" ", " ", 1),
        ("c++", "++c", 0.555556),
    ],
)
def test_distance(word1, word2, expected):
    assert distance(word1, word2) == pytest.approx(expected, abs=EPSILON)


def test_one_empty_word():
    assert distance("abc", "") == 0.0


def test_result_in_unit_interval():
    value = distance("kitten", "sitting")
    assert 0.0 <= value <= 1.0