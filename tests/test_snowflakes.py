import pytest

from puzzlebox.snowflakes import overlaid_triangles


@pytest.mark.parametrize(
    "n, m, want",
    [
        (1, 1, 1),
        (3, 1, 30),
        (3, 3, 6),
        (11, 1, 3027630),
        (11, 3, 19862070),
    ],
)
def test_overlaid_triangles(n, m, want):
    assert overlaid_triangles(n, m) == want


@pytest.mark.parametrize("m", [2, 4])
def test_even_depth_is_zero(m):
    assert overlaid_triangles(5, m) == 0


@pytest.mark.parametrize("n, m", [(3, 5), (3, -1), (-1, 1)])
def test_out_of_range_raises(n, m):
    with pytest.raises(ValueError):
        overlaid_triangles(n, m)