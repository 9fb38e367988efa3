import pytest

from puzzlebox.spiral import element, main, render


def test_smallest_spiral():
    assert element(1, 0, 0) == 0


def test_render_two():
    assert render(2) == "3 2 \n0 1 \n"


def test_render_empty():
    assert render(0) == ""


@pytest.mark.parametrize("n", [2, 4, 6, 10])
def test_even_spiral_largest_top_left(n):
    assert element(n, 0, 0) == n * n - 1


@pytest.mark.parametrize("n", range(1, 8))
def test_every_number_once_and_consecutive_adjacent(n):
    positions = {element(n, x, y): (x, y) for x in range(n) for y in range(n)}
    assert sorted(positions) == list(range(n * n))
    for k in range(n * n - 1):
        (x1, y1), (x2, y2) = positions[k], positions[k + 1]
        assert abs(x1 - x2) + abs(y1 - y2) == 1


@pytest.mark.parametrize("x, y", [(-1, 0), (0, 3), (3, 0)])
def test_outside_position_rejected(x, y):
    with pytest.raises(ValueError):
        element(3, x, y)


def test_render_rows_have_equal_width():
    lines = render(10).splitlines()
    assert len(lines) == 10
    assert len({len(line) for line in lines}) == 1
    assert lines[0].split()[0] == "99"


def test_main_prints_default_size(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == render(10)


def test_main_with_size(capsys):
    main(["3"])
    assert capsys.readouterr().out == render(3)