import pytest

from puzzlebox.romannumerals import decode, encode

VALID = [
    ("I", 1),
    ("XVIII", 18),
    ("XXXVIII", 38),
    ("CX", 110),
    ("CXXXVIII", 138),
    ("CCCLXVI", 366),
    ("DCXXXIV", 634),
    ("MMDCCXIV", 2714),
    ("MMMCD", 3400),
]


@pytest.mark.parametrize("roman, integer", VALID)
def test_encode(roman, integer):
    assert encode(integer) == roman


@pytest.mark.parametrize("integer", [-1, 0])
def test_encode_rejects_non_positive(integer):
    with pytest.raises(ValueError):
        encode(integer)


@pytest.mark.parametrize("roman, integer", VALID)
def test_decode(roman, integer):
    assert decode(roman) == integer


@pytest.mark.parametrize("roman", ["", "1", "T", "X X X", "X0"])
def test_decode_rejects_invalid(roman):
    with pytest.raises(ValueError):
        decode(roman)


@pytest.mark.parametrize("integer", range(1, 400))
def test_round_trip(integer):
    assert decode(encode(integer)) == integer