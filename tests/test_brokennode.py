import pytest

from puzzlebox.brokennode import find_broken_nodes

T = True
F = False


@pytest.mark.parametrize(
    "broken, reports, expected",
    [
        (1, [T, F, F], "WWB"),
        (2, [T, F, F], "B??"),
        (3, [T, F, F], "BBB"),
        (1, [F, T], "WB"),
        (1, [T, T, T, F], "BWWW"),
        (2, [F, T, T, T], "WBBW"),
        (3, [F, T, F, F], "?B??"),
        (1, [T, T, F, T, T], "WWWBW"),
        (2, [T, F, T, T, F], "B??WW"),
        (3, [F, F, T, F, T, F], "??????"),
        (4, [T, F, T, T, F, F, T, F], "????WB??"),
        (
            3,
            [T, T, T, T, T, T, T, T, T, F, F, T, T, T, F, F, T, T, T, T, T, F, T, T, T, T],
            "WWWWWWWWWWBWWWWBWWWWWWBWWW",
        ),
    ],
)
def test_find_broken_nodes(broken, reports, expected):
    assert find_broken_nodes(broken, reports) == expected


def test_result_has_one_mark_per_node():
    reports = [T, F, T, T, F]
    assert len(find_broken_nodes(2, reports)) == len(reports)


def test_too_many_broken_nodes():
    with pytest.raises(ValueError):
        find_broken_nodes(4, [T, F, F])


def test_negative_broken_nodes():
    with pytest.raises(ValueError):
        find_broken_nodes(-1, [T, F, F])


def test_inconsistent_reports():
    with pytest.raises(ValueError):
        find_broken_nodes(0, [F])


def test_no_broken_nodes_all_true():
    assert find_broken_nodes(0, [T, T, T]) == "WWW"