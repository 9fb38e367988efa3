import pytest

from puzzlebox.coins import piles


@pytest.mark.parametrize(
    "coins, expected",
    [
        (1, 1),
        (2, 2),
        (3, 3),
        (4, 5),
        (5, 7),
        (6, 11),
        (7, 15),
        (10, 42),
        (15, 176),
        (22, 1002),
        (30, 5604),
        (100, 190569292),
    ],
)
def test_piles(coins, expected):
    assert piles(coins) == expected


def test_zero_coins():
    assert piles(0) == 1


def test_negative_coins():
    with pytest.raises(ValueError):
        piles(-1)