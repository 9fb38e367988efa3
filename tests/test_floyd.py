import pytest

from puzzlebox.floyd import triangle


@pytest.mark.parametrize(
    "rows, expected",
    [
        (0, []),
        (1, [[1]]),
        (2, [[1], [2, 3]]),
        (3, [[1], [2, 3], [4, 5, 6]]),
        (4, [[1], [2, 3], [4, 5, 6], [7, 8, 9, 10]]),
        (5, [[1], [2, 3], [4, 5, 6], [7, 8, 9, 10], [11, 12, 13, 14, 15]]),
        (
            6,
            [
                [1],
                [2, 3],
                [4, 5, 6],
                [7, 8, 9, 10],
                [11, 12, 13, 14, 15],
                [16, 17, 18, 19, 20, 21],
            ],
        ),
    ],
)
def test_triangle(rows, expected):
    assert triangle(rows) == expected


def test_row_lengths_grow_by_one():
    assert [len(row) for row in triangle(10)] == list(range(1, 11))


def test_negative_rows():
    with pytest.raises(ValueError):
        triangle(-1)