import pytest

from ataxxmatch.moves import Move, Square, parse_move

A1 = Square(0, 0)
A2 = Square(0, 1)
A3 = Square(0, 2)
A7 = Square(0, 6)
G1 = Square(6, 0)
G7 = Square(6, 6)


@pytest.mark.parametrize(
    "text", ["0000", "null", "NULL", "a1a1", "g7g7", "g7G7", "G7g7", "G7G7"]
)
def test_parse_null(text):
    assert parse_move(text) == Move()


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a1", Move(A1)),
        ("a7", Move(A7)),
        ("g1", Move(G1)),
        ("g7", Move(G7)),
        ("x@a1", Move(A1)),
        ("X@a1", Move(A1)),
        ("a1a2", Move(A2)),
        ("A1", Move(A1)),
        ("x@A2", Move(A2)),
        ("X@A3", Move(A3)),
    ],
)
def test_parse_singles(text, expected):
    assert parse_move(text) == expected


@pytest.mark.parametrize("text", ["a1a3", "a1A3", "A1a3", "A1A3"])
def test_parse_doubles(text):
    assert parse_move(text) == Move(A3, A1)


@pytest.mark.parametrize(
    "text",
    ["", "test", "longstring    none~~", "a1a4", "a0", "a8", "g0", "g8", "h1"],
)
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_move(text)


def test_parse_pass_spelling():
    assert parse_move("PASS") == Move()


def test_move_strings():
    assert str(Move()) == "0000"
    assert str(Move(A1)) == "a1"
    assert str(Move(A3, A1)) == "a1a3"


@pytest.mark.parametrize("text", ["a1", "g7", "c4", "a1a3", "b2d4", "g7e5", "0000"])
def test_round_trip(text):
    assert str(parse_move(text)) == text


def test_square_out_of_range():
    with pytest.raises(ValueError):
        Square(7, 0)
    with pytest.raises(ValueError):
        Square(0, -1)