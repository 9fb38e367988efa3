import pytest

from puzzlebox.sumdecimal import sum_decimal


@pytest.mark.parametrize(
    "n, expected",
    [
        (2, 4482),
        (-1, 0),
        (1, 0),
        (100, 0),
        (0, 0),
        (4627, 4426),
        (1234, 4477),
    ],
)
def test_sum_decimal(n, expected):
    assert sum_decimal(n) == expected


@pytest.mark.parametrize("square", [4, 9, 144, 10000])
def test_perfect_squares_give_zero(square):
    assert sum_decimal(square) == 0